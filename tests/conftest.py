import sys
import json
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def package_payload() -> dict:
    return {
        "name": "falcion-template",
        "displayName": "Falcion Template",
        "description": "Template repository",
        "author": {"name": "Falcion", "url": "https://example.com/falcion"},
        "license": "MIT",
        "version": "1.2.3",
    }


@pytest.fixture
def synced_manifest() -> dict:
    return {
        "id": "falcion-template",
        "name": "Falcion Template",
        "description": "Template repository",
        "author": "Falcion",
        "authorUrl": "https://example.com/falcion",
        "license": "MIT",
        "version": "1.2.3",
    }


@pytest.fixture
def package_project(project_root: Path, package_payload: dict, write_json) -> Path:
    write_json(project_root / "package.json", package_payload)
    return project_root


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
