import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from infra.constructs.layers import PythonLocalBundling


@pytest.fixture
def source_path(tmp_path: Path) -> Path:
    path = tmp_path / "source"
    path.mkdir()
    (path / "requirements.txt").write_text("pydantic>=2.0\n")
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "output"
    path.mkdir()
    return path


class TestPythonLocalBundling:
    """PythonLocalBundlingのテスト"""

    def test_uv_installs_lambda_platform_wheels(self, source_path, output_dir):
        bundling = PythonLocalBundling(str(source_path))

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0)

            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is True
        mock_run.assert_called_once()
        command = mock_run.call_args[0][0]
        assert command[:3] == ["uv", "pip", "install"]
        assert str(output_dir / "python") in command
        assert command[command.index("--python-version") + 1] == "3.14"
        assert "--only-binary" in command

    def test_falls_back_to_pip_when_uv_not_found(self, source_path, output_dir):
        bundling = PythonLocalBundling(str(source_path), python_version="3.13")

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [
                FileNotFoundError("uv not found"),
                MagicMock(returncode=0),
            ]

            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is True
        assert mock_run.call_count == 2
        pip_command = mock_run.call_args_list[1][0][0]
        assert pip_command[0] == "pip"
        assert pip_command[pip_command.index("--platform") + 1] == "manylinux2014_x86_64"
        assert pip_command[pip_command.index("--python-version") + 1] == "3.13"

    def test_returns_false_when_requirements_not_found(self, tmp_path, output_dir):
        bundling = PythonLocalBundling(str(tmp_path / "missing"))

        with patch("subprocess.run") as mock_run:
            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is False
        mock_run.assert_not_called()

    @pytest.mark.parametrize(
        "failures",
        [
            [FileNotFoundError("uv"), FileNotFoundError("pip")],
            [
                subprocess.CalledProcessError(1, "uv"),
                subprocess.CalledProcessError(1, "pip"),
            ],
        ],
    )
    def test_returns_false_when_both_tools_fail(self, source_path, output_dir, failures):
        """uv と pip の両方が失敗した場合は Docker に任せる"""
        bundling = PythonLocalBundling(str(source_path))

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = failures

            result = bundling.try_bundle(str(output_dir), MagicMock())

        assert result is False
        assert mock_run.call_count == 2
