"""
Shared test fixtures and configuration for pytest.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so they do not leak between tests."""
    logger = logging.getLogger("vectorcalc")
    yield
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by all GUI tests."""
    pytest.importorskip("PySide6.QtWidgets")
    from vectorcalc.view.application import create_app

    return create_app([])
