from aws_cdk import RemovalPolicy
from aws_cdk import aws_events as events
from aws_cdk import aws_events_targets as events_targets
from aws_cdk import aws_logs as logs
from constructs import Construct

EVENT_SOURCE = "bus-reservation"


class Events(Construct):
    """ドメインイベント配信用の EventBridge Construct

    booking-created / booking-cancelled / bus-location-changed を受け取る
    カスタムイベントバスと、調査用に全イベントを CloudWatch Logs に残すルールを作成する。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.event_bus = events.EventBus(
            self,
            "ReservationEventBus",
            event_bus_name="bus-reservation-events",
        )
        self.event_source = EVENT_SOURCE

        archive_log_group = logs.LogGroup(
            self,
            "ReservationEventLogGroup",
            retention=logs.RetentionDays.ONE_WEEK,
            removal_policy=RemovalPolicy.DESTROY,
        )

        events.Rule(
            self,
            "ReservationEventLogRule",
            event_bus=self.event_bus,
            event_pattern=events.EventPattern(source=[EVENT_SOURCE]),
            targets=[events_targets.CloudWatchLogGroup(archive_log_group)],
        )
