import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest
import yaml


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture
def baselines_dir(tmp_path: Path) -> Path:
    path = tmp_path / "baselines"
    path.mkdir()
    return path


@pytest.fixture
def write_baseline(baselines_dir: Path):
    def _write(name: str, entries: list[Any]) -> Path:
        path = baselines_dir / name
        payload = {"parameters": {"ignoreErrors": entries}}
        path.write_text(
            "# PHPStan Baseline\n" + yaml.dump(payload, sort_keys=False),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def write_raw(baselines_dir: Path):
    def _write(name: str, text: str) -> Path:
        path = baselines_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
