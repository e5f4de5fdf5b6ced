from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import (
    Api,
    Database,
    Deployment,
    Events,
    Functions,
    Layers,
    Observability,
)


class BusReservationStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        events = Events(self, "Events")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            event_bus=events.event_bus,
            event_source=events.event_source,
            common_layer=layers.common_layer,
        )

        deployment = Deployment(
            self,
            "Deployment",
            booking_create=fns.booking_create,
            booking_cancel=fns.booking_cancel,
            payment_confirm=fns.payment_confirm,
        )

        api = Api(
            self,
            "Api",
            functions=fns,
            booking_create=deployment.booking_create_alias,
            booking_cancel=deployment.booking_cancel_alias,
            payment_confirm=deployment.payment_confirm_alias,
        )

        Observability(
            self,
            "Observability",
            functions=fns.all_functions,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "UserPoolId", value=api.user_pool.user_pool_id)
        CfnOutput(
            self, "UserPoolClientId", value=api.user_pool_client.user_pool_client_id
        )
