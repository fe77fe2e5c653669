"""Basic smoke tests for the encosure package."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

import encosure


def test_public_api_roundtrip() -> None:
    assert encosure.decode(encosure.encode("anyway")) == b"anyway"


@pytest.mark.skipif(sys.executable is None, reason="Python executable not available")
def test_cli_help_runs() -> None:
    """Verify that the CLI help command returns successfully."""
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    env = os.environ.copy()
    existing_path = env.get("PYTHONPATH", "")
    env["PYTHONPATH"] = (
        f"{src_dir}{os.pathsep}{existing_path}" if existing_path else str(src_dir)
    )

    result = subprocess.run(
        [sys.executable, "-m", "encosure", "--help"],
        check=False,
        capture_output=True,
        text=True,
        env=env,
    )
    assert result.returncode == 0
    assert "encosure" in result.stdout
