from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.domain.value_object import BookingId
from services.payment.applications.create_payment_intent import (
    CreatePaymentIntentService,
)
from services.payment.domain.factory import PaymentFactory
from services.payment.handlers.request_models import CreatePaymentIntentRequest
from services.payment.handlers.response_models import to_response
from services.shared.domain import IsoDateTime
from services.shared.infrastructure.dynamodb_unit_of_work import DynamoDBUnitOfWork
from services.shared.utils import api_handler, api_response, get_caller, parse_body

logger = Logger()

uow = DynamoDBUnitOfWork()
factory = PaymentFactory()
service = CreatePaymentIntentService(uow=uow, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """決済作成のLambdaハンドラー"""
    logger.info("Received create payment intent request")

    caller = get_caller(event)
    request = parse_body(event, CreatePaymentIntentRequest)

    payment = service.create(
        BookingId(value=request.booking_id),
        payment_details=request.to_details(),
        caller=caller,
        now=IsoDateTime.now(),
    )
    return api_response(201, to_response(payment))
