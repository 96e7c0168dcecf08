import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"
RUNTIME = _lambda.Runtime.PYTHON_3_13


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で依存ライブラリをインストールする Bundling クラス

    uv を優先し、失敗した場合は pip を試す。どちらも失敗した場合は
    Docker でのバンドリングにフォールバックさせる。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

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

        # uvを優先し、なければpipを使用
        installers = [
            (
                "uv",
                [
                    "uv",
                    "pip",
                    "install",
                    "-r",
                    str(requirements_path),
                    "--target",
                    str(target_dir),
                    "--quiet",
                ],
            ),
            (
                "pip",
                [
                    "pip",
                    "install",
                    "-r",
                    str(requirements_path),
                    "-t",
                    str(target_dir),
                    "--quiet",
                ],
            ),
        ]
        for tool, command in installers:
            if self._try_install(tool, command):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    def _try_install(self, tool: str, command: list[str]) -> bool:
        """指定したコマンドでインストールを試行する。"""
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

    予約サービスの Lambda が使う pydantic と Powertools をまとめる。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                LAYER_SOURCE_PATH,
                bundling=BundlingOptions(
                    image=RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(LAYER_SOURCE_PATH),
                ),
            ),
            compatible_runtimes=[RUNTIME],
            description="Booking service dependencies (pydantic, Powertools)",
        )
