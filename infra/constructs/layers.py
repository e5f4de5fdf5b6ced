import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"
LAMBDA_PYTHON_VERSION = "3.14"
# pydantic-core などのネイティブ拡張は Lambda 実行環境向けの wheel を取得する
LAMBDA_PLATFORM = "manylinux2014_x86_64"


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """Lambda 実行環境向けの wheel をローカルでインストールする Bundling クラス

    uv を優先し、なければ pip を使う。どちらも使えなければ Docker にフォールバックする。
    """

    def __init__(
        self,
        source_path: str,
        python_version: str = LAMBDA_PYTHON_VERSION,
        platform: str = LAMBDA_PLATFORM,
    ) -> None:
        self.source_path = source_path
        self.python_version = python_version
        self.platform = platform

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Args:
            output_dir: 出力先ディレクトリ
            options: BundlingOptions（未使用だが必須）

        Returns:
            True: バンドリング成功（Dockerをスキップ）
            False: バンドリング失敗（Dockerにフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        for command in (
            self.uv_command(requirements_path, target_dir),
            self.pip_command(requirements_path, target_dir),
        ):
            if self._run(command):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    def uv_command(self, requirements_path: Path, target_dir: Path) -> list[str]:
        return [
            "uv",
            "pip",
            "install",
            "-r",
            str(requirements_path),
            "--target",
            str(target_dir),
            "--python-version",
            self.python_version,
            "--python-platform",
            "x86_64-manylinux2014",
            "--only-binary",
            ":all:",
            "--quiet",
        ]

    def pip_command(self, requirements_path: Path, target_dir: Path) -> list[str]:
        return [
            "pip",
            "install",
            "-r",
            str(requirements_path),
            "-t",
            str(target_dir),
            "--python-version",
            self.python_version,
            "--platform",
            self.platform,
            "--only-binary=:all:",
            "--quiet",
        ]

    def _run(self, command: list[str]) -> bool:
        tool = command[0]
        try:
            logger.info("Trying local bundling with %s...", tool)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", tool)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", tool, e)
            return False
        logger.info("Local bundling with %s succeeded", tool)
        return True


class Layers(Construct):
    """Lambda Layers Construct

    powertools / pydantic / pydantic-settings を共通レイヤーとして配布する。
    boto3 は Lambda ランタイム同梱のものを使う。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                LAYER_SOURCE_PATH,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_14.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(LAYER_SOURCE_PATH),
                ),
            ),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_14],
            description="Bus reservation runtime dependencies",
        )
