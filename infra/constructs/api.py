from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_cognito as cognito
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct

    すべてのメソッドを Cognito ユーザープールの認可付きで公開する。
    ハンドラーは requestContext.authorizer.claims の sub / custom:role を呼び出し元として扱う。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: Functions,
        booking_create: _lambda.IFunction,
        booking_cancel: _lambda.IFunction,
        payment_confirm: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.user_pool = cognito.UserPool(
            self,
            "ReservationUserPool",
            self_sign_up_enabled=True,
            sign_in_aliases=cognito.SignInAliases(email=True),
            custom_attributes={
                "role": cognito.StringAttribute(mutable=True),
            },
        )
        self.user_pool_client = self.user_pool.add_client(
            "ReservationUserPoolClient",
            auth_flows=cognito.AuthFlow(user_password=True, user_srp=True),
        )

        self.rest_api = apigw.RestApi(
            self,
            "ReservationRestApi",
            rest_api_name="Bus Reservation API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        self._authorizer = apigw.CognitoUserPoolsAuthorizer(
            self,
            "ReservationAuthorizer",
            cognito_user_pools=[self.user_pool],
        )

        root = self.rest_api.root

        # /routes
        routes = root.add_resource("routes")
        self._add_method(routes, "POST", functions.route_register)
        route = routes.add_resource("{route_id}")
        self._add_method(route, "PATCH", functions.route_update)

        # /buses
        buses = root.add_resource("buses")
        self._add_method(buses, "POST", functions.bus_register)
        bus = buses.add_resource("{bus_id}")
        self._add_method(bus, "PATCH", functions.bus_update)
        self._add_method(
            bus.add_resource("location"), "PUT", functions.bus_update_location
        )

        # /trips
        trips = root.add_resource("trips")
        self._add_method(trips, "POST", functions.trip_schedule)
        trip = trips.add_resource("{trip_id}")
        self._add_method(trip, "GET", functions.get_trip)
        self._add_method(
            trip.add_resource("status"), "PUT", functions.trip_update_status
        )

        # /bookings（作成・キャンセルはカナリア用エイリアス経由）
        bookings = root.add_resource("bookings")
        self._add_method(bookings, "POST", booking_create)
        booking = bookings.add_resource("{booking_id}")
        self._add_method(booking, "GET", functions.booking_get)
        self._add_method(booking, "PATCH", functions.booking_update)
        self._add_method(booking.add_resource("cancel"), "POST", booking_cancel)
        self._add_method(
            booking.add_resource("complete"), "POST", functions.booking_complete
        )

        # /payments
        payments = root.add_resource("payments")
        self._add_method(payments, "POST", functions.payment_create_intent)
        payment = payments.add_resource("{payment_id}")
        self._add_method(payment, "GET", functions.payment_get)
        self._add_method(
            payment.add_resource("process"), "POST", functions.payment_process
        )
        self._add_method(payment.add_resource("confirm"), "POST", payment_confirm)
        self._add_method(payment.add_resource("fail"), "POST", functions.payment_fail)
        self._add_method(
            payment.add_resource("cancel"), "POST", functions.payment_cancel
        )
        self._add_method(
            payment.add_resource("refund"), "POST", functions.payment_refund
        )
        self._add_method(
            payment.add_resource("retry"), "POST", functions.payment_retry
        )

    def _add_method(
        self,
        resource: apigw.IResource,
        http_method: str,
        fn: _lambda.IFunction,
    ) -> None:
        resource.add_method(
            http_method,
            apigw.LambdaIntegration(fn),
            authorizer=self._authorizer,
            authorization_type=apigw.AuthorizationType.COGNITO,
        )
