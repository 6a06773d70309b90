"""Pytest configuration for repository test runs."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import sys

import pytest


def pytest_sessionstart() -> None:
    """Add src and project root to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root / "src", project_root):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture
def flu_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Runtime config rooted in a per-test temporary directory."""
    from core.config import FluConfig

    for variable in (
        "FLUMAP_DATA_ROOT",
        "FLUMAP_USERS_FILE",
        "FLUMAP_DEFAULT_DATASET",
        "FLUMAP_PORT",
        "FLUMAP_MAX_UPLOAD_BYTES",
        "FLUMAP_CORS_ORIGIN",
    ):
        monkeypatch.delenv(variable, raising=False)
    data_root = tmp_path / "data"
    return replace(
        FluConfig.from_env(),
        data_root=data_root,
        users_file=data_root / "login" / "users.csv",
    )
