"""Shared pytest fixtures for coltab tests."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from coltab.lib.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    configure_logging(verbosity=0)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("COLTAB_CONFIG", "COLTAB_SEPARATOR", "COLTAB_FILL", "COLTAB_DEFAULT_WIDTH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def cli_env(package_root: Path) -> dict[str, str]:
    env = os.environ.copy()
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}{os.pathsep}{existing}"
    return env


@pytest.fixture
def run_coltab(tmp_path: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(args: list[str], stdin: str | None = None, timeout: float = 15.0) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "coltab", *args],
            cwd=tmp_path,
            env=cli_env,
            input=stdin,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
