from aws_cdk import (
    Stack,
    Stage,
    pipelines,
    aws_codestarconnections as codestarconnections,
)
from constructs import Construct

from bus_reservation_stack import BusReservationStack


class ApplicationStage(Stage):
    """アプリケーションスタックをグループ化したステージ"""

    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        BusReservationStack(self, "BusReservation")


class PipelineStack(Stack):
    """CI/CD パイプラインを定義するスタック

    ユニットテストが通った場合のみ synth し、承認後に本番へデプロイする。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        repository: str = "bus-reservation/bus-reservation-python",
        branch: str = "main",
        **kwargs,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        # GitHub との接続を作成（初回デプロイ後に手動認証が必要）
        github_connection = codestarconnections.CfnConnection(
            self,
            "GitHubConnection",
            connection_name="bus-reservation-github",
            provider_type="GitHub",
        )

        pipeline = pipelines.CodePipeline(
            self,
            "Pipeline",
            synth=pipelines.ShellStep(
                "Synth",
                input=pipelines.CodePipelineSource.connection(
                    repository,
                    branch,
                    connection_arn=github_connection.attr_connection_arn,
                ),
                env={"PYENV_VERSION": "3.12"},
                commands=[
                    "npm install -g aws-cdk",
                    'pip install -e ".[infra,test]"',
                    "pytest tests/unit",
                    "cdk synth",
                ],
            ),
        )

        pipeline.add_stage(
            ApplicationStage(self, "Prod"),
            pre=[
                pipelines.ManualApprovalStep(
                    "PromoteToProd",
                    comment="本番環境へデプロイします。Synth・テスト結果を確認のうえ承認してください。",
                )
            ],
        )
