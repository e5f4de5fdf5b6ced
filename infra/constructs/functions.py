import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_events as events
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct

    1 操作につき 1 関数。参照系はテーブルの読み取り権限のみ、
    ドメインイベントを発行する関数にはイベントバスへの PutEvents 権限を付与する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        event_bus: events.EventBus,
        event_source: str,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._event_bus = event_bus
        self._event_source = event_source
        self._common_layer = common_layer

        # Route
        self.route_register = self._create_function(
            "RouteRegisterLambda",
            "services.route.handlers.register.lambda_handler",
            "route-service",
        )
        self.route_update = self._create_function(
            "RouteUpdateLambda",
            "services.route.handlers.update.lambda_handler",
            "route-service",
        )

        # Bus
        self.bus_register = self._create_function(
            "BusRegisterLambda",
            "services.bus.handlers.register.lambda_handler",
            "bus-service",
        )
        self.bus_update = self._create_function(
            "BusUpdateLambda",
            "services.bus.handlers.update.lambda_handler",
            "bus-service",
        )
        self.bus_update_location = self._create_function(
            "BusUpdateLocationLambda",
            "services.bus.handlers.update_location.lambda_handler",
            "bus-service",
        )

        # Trip
        self.trip_schedule = self._create_function(
            "TripScheduleLambda",
            "services.trip.handlers.schedule.lambda_handler",
            "trip-service",
        )
        self.trip_update_status = self._create_function(
            "TripUpdateStatusLambda",
            "services.trip.handlers.update_status.lambda_handler",
            "trip-service",
        )
        self.get_trip = self._create_function(
            "GetTripLambda",
            "services.trip.handlers.get_trip.lambda_handler",
            "trip-service",
        )

        # Booking
        self.booking_create = self._create_function(
            "BookingCreateLambda",
            "services.booking.handlers.create.lambda_handler",
            "booking-service",
        )
        self.booking_get = self._create_function(
            "BookingGetLambda",
            "services.booking.handlers.get.lambda_handler",
            "booking-service",
        )
        self.booking_update = self._create_function(
            "BookingUpdateLambda",
            "services.booking.handlers.update.lambda_handler",
            "booking-service",
        )
        self.booking_cancel = self._create_function(
            "BookingCancelLambda",
            "services.booking.handlers.cancel.lambda_handler",
            "booking-service",
        )
        self.booking_complete = self._create_function(
            "BookingCompleteLambda",
            "services.booking.handlers.complete.lambda_handler",
            "booking-service",
        )

        # Payment
        self.payment_create_intent = self._create_function(
            "PaymentCreateIntentLambda",
            "services.payment.handlers.create_intent.lambda_handler",
            "payment-service",
        )
        self.payment_get = self._create_function(
            "PaymentGetLambda",
            "services.payment.handlers.get.lambda_handler",
            "payment-service",
        )
        self.payment_process = self._create_function(
            "PaymentProcessLambda",
            "services.payment.handlers.process.lambda_handler",
            "payment-service",
        )
        self.payment_confirm = self._create_function(
            "PaymentConfirmLambda",
            "services.payment.handlers.confirm.lambda_handler",
            "payment-service",
        )
        self.payment_fail = self._create_function(
            "PaymentFailLambda",
            "services.payment.handlers.fail.lambda_handler",
            "payment-service",
        )
        self.payment_cancel = self._create_function(
            "PaymentCancelLambda",
            "services.payment.handlers.cancel.lambda_handler",
            "payment-service",
        )
        self.payment_refund = self._create_function(
            "PaymentRefundLambda",
            "services.payment.handlers.refund.lambda_handler",
            "payment-service",
        )
        self.payment_retry = self._create_function(
            "PaymentRetryLambda",
            "services.payment.handlers.retry.lambda_handler",
            "payment-service",
        )

        read_only = [self.get_trip, self.booking_get, self.payment_get]
        publishers = [self.booking_create, self.booking_cancel, self.bus_update_location]

        self.all_functions = [
            self.route_register,
            self.route_update,
            self.bus_register,
            self.bus_update,
            self.bus_update_location,
            self.trip_schedule,
            self.trip_update_status,
            self.get_trip,
            self.booking_create,
            self.booking_get,
            self.booking_update,
            self.booking_cancel,
            self.booking_complete,
            self.payment_create_intent,
            self.payment_get,
            self.payment_process,
            self.payment_confirm,
            self.payment_fail,
            self.payment_cancel,
            self.payment_refund,
            self.payment_retry,
        ]

        for fn in self.all_functions:
            if fn in read_only:
                table.grant_read_data(fn)
            else:
                table.grant_read_write_data(fn)

        for fn in publishers:
            event_bus.grant_put_events_to(fn)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            environment={
                "TABLE_NAME": self._table.table_name,
                "EVENT_BUS_NAME": self._event_bus.event_bus_name,
                "EVENT_SOURCE": self._event_source,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
