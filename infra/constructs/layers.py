import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

RUNTIME = _lambda.Runtime.PYTHON_3_13


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で依存ライブラリをインストールするBundlingクラス

    uv -> pip の順に試し、どちらも失敗した場合は Docker でのバンドリングに任せる。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

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

        for command in self._install_commands(requirements_path, target_dir):
            if self._run(command):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    @staticmethod
    def _install_commands(requirements_path: Path, target_dir: Path) -> list[list[str]]:
        requirements = ["-r", str(requirements_path)]
        return [
            ["uv", "pip", "install", *requirements, "--target", str(target_dir), "--quiet"],
            ["pip", "install", *requirements, "-t", str(target_dir), "--quiet"],
        ]

    @staticmethod
    def _run(command: list[str]) -> bool:
        installer = command[0]
        try:
            logger.info("Trying local bundling with %s...", installer)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", installer)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", installer, e)
            return False
        logger.info("Local bundling with %s succeeded", installer)
        return True


class Layers(Construct):
    """Lambda Layers Construct（powertools / pydantic などの実行時依存）"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        layer_source_path = "layers/common_layer"

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                layer_source_path,
                bundling=BundlingOptions(
                    image=RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(layer_source_path),
                ),
            ),
            compatible_runtimes=[RUNTIME],
            description="Common dependencies for the rental API functions",
        )
