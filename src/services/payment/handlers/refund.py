from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.payment.applications.refund_payment import RefundPaymentService
from services.payment.domain.value_object import PaymentId
from services.payment.handlers.request_models import RefundPaymentRequest
from services.payment.handlers.response_models import to_response
from services.shared.config import get_settings
from services.shared.domain import IsoDateTime, Role
from services.shared.infrastructure.dynamodb_unit_of_work import DynamoDBUnitOfWork
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    path_param,
    require_role,
)

logger = Logger()

uow = DynamoDBUnitOfWork()
service = RefundPaymentService(
    uow=uow, max_attempts=get_settings().MAX_COMMIT_ATTEMPTS
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """払い戻しのLambdaハンドラー（管理者）"""
    payment_id = PaymentId(value=path_param(event, "payment_id"))
    logger.info("Received refund payment request", extra={"payment_id": str(payment_id)})

    caller = get_caller(event)
    require_role(caller, Role.ADMIN)
    request = parse_body(event, RefundPaymentRequest)

    payment = service.refund(
        payment_id,
        amount=request.amount,
        reason=request.reason,
        caller=caller,
        now=IsoDateTime.now(),
        method=request.method,
    )
    return api_response(200, to_response(payment))
