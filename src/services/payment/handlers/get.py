from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.payment.applications.get_payment import GetPaymentService
from services.payment.domain.value_object import PaymentId
from services.payment.handlers.response_models import to_response
from services.payment.infrastructure import DynamoDBPaymentRepository
from services.shared.utils import api_handler, api_response, get_caller, path_param

logger = Logger()

repository = DynamoDBPaymentRepository()
service = GetPaymentService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """決済詳細取得 Lambda Handler"""
    payment_id = PaymentId(value=path_param(event, "payment_id"))
    logger.info("Fetching payment details", extra={"payment_id": str(payment_id)})

    payment = service.get(payment_id, get_caller(event))
    return api_response(200, to_response(payment))
