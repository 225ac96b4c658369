"""
Main Application Window
=======================
The calculator form: two vector fields, one button per operation and a
result line.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the calculator.
2. Routing: It connects each button to the calculator controller and shows
   the returned line, in red when it is an error.
"""
import logging
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QGridLayout, QFormLayout,
    QLineEdit, QPushButton, QLabel, QGroupBox
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction

from vectorcalc import config
from vectorcalc.controller.calculator import CalculationResult, Operation, evaluate

logger = logging.getLogger(__name__)

PLACEHOLDER = "(x; y; z; ...)"
ERROR_STYLE = "color: red;"
NORMAL_STYLE = ""

# Button grid (row, column) for each operation
BUTTON_LAYOUT = {
    Operation.LENGTH_A: (0, 0),
    Operation.LENGTH_B: (0, 1),
    Operation.SUM: (1, 0),
    Operation.DIFFERENCE: (1, 1),
    Operation.DOT: (2, 0),
    Operation.CROSS: (2, 1),
    Operation.DISTANCE: (3, 0),
    Operation.ANGLE: (3, 1),
    Operation.NORMALIZE_A: (4, 0),
    Operation.NORMALIZE_B: (4, 1),
    Operation.SCALE: (5, 0),
}


class MainWindow(QMainWindow):
    # Emitted after every calculation with the displayed result
    result_changed = Signal(object)

    def __init__(self, max_components: Optional[int] = config.MAX_COMPONENTS) -> None:
        super().__init__()
        self.max_components = max_components
        self.last_result: Optional[CalculationResult] = None

        self.setWindowTitle(config.VISIBLE_APP_NAME)
        self.resize(480, 320)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. INPUTS ---
        input_group = QGroupBox("Vectors")
        form = QFormLayout(input_group)

        self.a_edit = QLineEdit()
        self.a_edit.setPlaceholderText(PLACEHOLDER)
        self.b_edit = QLineEdit()
        self.b_edit.setPlaceholderText(PLACEHOLDER)

        form.addRow("A:", self.a_edit)
        form.addRow("B:", self.b_edit)
        main_layout.addWidget(input_group)

        # --- 2. OPERATION BUTTONS ---
        buttons_group = QGroupBox("Operations")
        grid = QGridLayout(buttons_group)

        self.buttons: Dict[Operation, QPushButton] = {}
        for operation, (row, col) in BUTTON_LAYOUT.items():
            button = QPushButton(operation.value)
            button.clicked.connect(lambda _checked=False, op=operation: self.calculate(op))
            grid.addWidget(button, row, col)
            self.buttons[operation] = button

        main_layout.addWidget(buttons_group)

        # --- 3. RESULT ---
        self.result_label = QLabel("")
        self.result_label.setWordWrap(True)
        self.result_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        main_layout.addWidget(self.result_label)
        main_layout.addStretch()

        # Enter in a field shows its length
        self.a_edit.returnPressed.connect(lambda: self.calculate(Operation.LENGTH_A))
        self.b_edit.returnPressed.connect(lambda: self.calculate(Operation.LENGTH_B))

        self._create_menus()

    def _create_menus(self) -> None:
        self.act_clear = QAction("Clear", self)
        self.act_clear.setShortcut("Ctrl+L")
        self.act_clear.triggered.connect(self.clear)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.act_clear)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    def calculate(self, operation: Operation) -> CalculationResult:
        """Slot: run one operation on the current field contents."""
        result = evaluate(
            operation,
            self.a_edit.text(),
            self.b_edit.text(),
            max_components=self.max_components,
        )
        self.show_result(result)
        return result

    def show_result(self, result: CalculationResult) -> None:
        self.last_result = result
        logger.debug("Showing result: %s", result.text)
        self.result_label.setText(result.text)
        self.result_label.setStyleSheet(ERROR_STYLE if result.is_error else NORMAL_STYLE)
        self.result_changed.emit(result)

    def clear(self) -> None:
        self.a_edit.clear()
        self.b_edit.clear()
        self.result_label.clear()
        self.result_label.setStyleSheet(NORMAL_STYLE)
        self.last_result = None
