from aws_cdk import Duration
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_codedeploy as codedeploy
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Deployment(Construct):
    """カナリアデプロイを管理する Construct

    座席在庫と決済に触れる予約作成・予約キャンセル・決済確定を対象とする。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        booking_create: _lambda.Function,
        booking_cancel: _lambda.Function,
        payment_confirm: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.booking_create_alias = self._create_canary_deployment(
            "BookingCreate", booking_create
        )
        self.booking_cancel_alias = self._create_canary_deployment(
            "BookingCancel", booking_cancel
        )
        self.payment_confirm_alias = self._create_canary_deployment(
            "PaymentConfirm", payment_confirm
        )

    def _create_canary_deployment(
        self,
        name: str,
        fn: _lambda.Function,
    ) -> _lambda.Alias:
        alias = _lambda.Alias(
            self,
            f"{name}Alias",
            alias_name="Prod",
            version=fn.current_version,
        )

        # 未処理例外・タイムアウトによる実行エラーの割合
        error_rate_alarm = cloudwatch.Alarm(
            self,
            f"{name}ErrorRateAlarm",
            metric=cloudwatch.MathExpression(
                expression="(errors / invocations) * 100",
                using_metrics={
                    "errors": fn.metric_errors(statistic="Sum"),
                    "invocations": fn.metric_invocations(statistic="Sum"),
                },
                label=f"{name} Error Rate %",
                period=Duration.minutes(1),
            ),
            threshold=5,
            evaluation_periods=2,
            comparison_operator=cloudwatch.ComparisonOperator.GREATER_THAN_OR_EQUAL_TO_THRESHOLD,
            treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING,
        )

        codedeploy.LambdaDeploymentGroup(
            self,
            f"{name}DeploymentGroup",
            alias=alias,
            deployment_config=codedeploy.LambdaDeploymentConfig.CANARY_10_PERCENT_5_MINUTES,
            alarms=[error_rate_alarm],
        )

        return alias
