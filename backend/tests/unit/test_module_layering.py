"""Import layering of the geometry package.

Each check runs in a fresh interpreter so modules loaded by other tests do
not leak into ``sys.modules``.
"""

import subprocess
import sys
from pathlib import Path

import pytest

BACKEND_DIR = Path(__file__).resolve().parents[2]


def _loads_module(entry: str, module: str) -> bool:
    code = f"import sys, {entry}; print({module!r} in sys.modules)"
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=BACKEND_DIR,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip() == "True"


@pytest.mark.parametrize(
    "entry",
    [
        "blueprint_engine.geometry.kernel",
        "blueprint_engine.geometry.types",
        "blueprint_engine.geometry.room_detector",
    ],
)
def test_detection_does_not_load_dimensioning(entry):
    assert _loads_module(entry, "blueprint_engine.geometry.dimensioning") is False


def test_analysis_service_loads_dimensioning():
    assert _loads_module(
        "blueprint_engine.services.room_analysis",
        "blueprint_engine.geometry.dimensioning",
    ) is True
