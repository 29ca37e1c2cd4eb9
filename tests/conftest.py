"""Global pytest configuration for faultline.

Makes the ``src`` tree and the sample handler packages under ``fixtures``
importable regardless of how the repository is installed.
"""

import logging
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
fixtures_dir = Path(__file__).parent / "fixtures"

for path in (src_dir, fixtures_dir):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def _faultline_log_level():
    """Let caplog see debug records from faultline loggers."""

    logger = logging.getLogger("faultline")
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    yield
    logger.setLevel(previous)
