import os
import subprocess
import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
EXAMPLES_DIR = REPO_ROOT / "examples"
# Numbered scripts only (01_*.py, ...).
EXAMPLE_FILES = sorted(EXAMPLES_DIR.glob("[0-9][0-9]_*.py"))

# Text each example is expected to print.
EXPECTED_OUTPUT = {
    "01_quadratic.py": "Quadratic Fit",
    "02_fixed_intercept.py": "predictions:",
    "03_spline.py": "Spline fit",
    "04_backend_swap.py": "differential_evolution:",
}


def _run_example(path: Path) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["MPLBACKEND"] = "Agg"
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(REPO_ROOT / "src"), env.get("PYTHONPATH", "")) if p
    )
    return subprocess.run(
        [sys.executable, str(path)],
        cwd=str(REPO_ROOT),
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )


@pytest.mark.examples
@pytest.mark.parametrize("path", EXAMPLE_FILES, ids=lambda p: p.name)
def test_example_runs(path: Path) -> None:
    if "matplotlib" in path.read_text(encoding="utf-8"):
        pytest.importorskip("matplotlib")

    result = _run_example(path)
    assert result.returncode == 0, (
        f"Example failed: {path.name}\nstdout:\n{result.stdout}\nstderr:\n{result.stderr}"
    )
    assert EXPECTED_OUTPUT.get(path.name, "") in result.stdout
