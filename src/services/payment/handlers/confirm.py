from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.payment.applications.confirm_payment import ConfirmPaymentService
from services.payment.domain.value_object import PaymentId
from services.payment.handlers.request_models import ConfirmPaymentRequest
from services.payment.handlers.response_models import to_response
from services.shared.config import get_settings
from services.shared.domain import IsoDateTime
from services.shared.infrastructure.dynamodb_unit_of_work import DynamoDBUnitOfWork
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    path_param,
)

logger = Logger()

uow = DynamoDBUnitOfWork()
service = ConfirmPaymentService(
    uow=uow, max_attempts=get_settings().MAX_COMMIT_ATTEMPTS
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """決済確定のLambdaハンドラー（予約も confirmed になる）"""
    payment_id = PaymentId(value=path_param(event, "payment_id"))
    logger.info("Received confirm payment request", extra={"payment_id": str(payment_id)})

    caller = get_caller(event)
    request = parse_body(event, ConfirmPaymentRequest)

    payment = service.confirm(
        payment_id,
        transaction_id=request.transaction_id,
        caller=caller,
        now=IsoDateTime.now(),
    )
    return api_response(200, to_response(payment))
