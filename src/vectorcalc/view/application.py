from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os
from typing import List, Optional

from vectorcalc.config import APP_ID, ORG_ID, VISIBLE_APP_NAME


def create_app(argv: Optional[List[str]] = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(argv if argv is not None else sys.argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
