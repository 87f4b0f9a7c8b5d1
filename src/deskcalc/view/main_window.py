"""
Main Application Window
=======================
The calculator window: display on top, keypad below.

Why is this file needed?
------------------------
1. Layout: It builds the display and the button grids from the captions in
   `deskcalc.controller.keymap`.
2. Routing: clicks and key presses go to the `CalculatorController`; the
   display is redrawn from the controller's signals only.
"""
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont, QKeyEvent
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLineEdit, QLabel, QPushButton, QSizePolicy
)

from deskcalc import config
from deskcalc.controller.calculator_controller import CalculatorController
from deskcalc.controller.keymap import ADVANCED_BUTTONS, BUTTON_ROWS, event_for_key


class MainWindow(QMainWindow):
    def __init__(self, controller: Optional[CalculatorController] = None) -> None:
        super().__init__()
        self.controller: CalculatorController = controller or CalculatorController(parent=self)
        self.buttons: dict[str, QPushButton] = {}

        self.setWindowTitle(config.VISIBLE_APP_NAME)
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(config.GRID_SPACING, config.GRID_SPACING,
                                       config.GRID_SPACING, config.GRID_SPACING)
        main_layout.setSpacing(config.GRID_SPACING)

        # --- 1. DISPLAY ---
        display_row = QHBoxLayout()
        self.memory_indicator = QLabel("")
        self.memory_indicator.setMinimumWidth(16)
        display_row.addWidget(self.memory_indicator)

        self.display = QLineEdit(self.controller.display)
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        display_font = QFont(config.DISPLAY_FONT_FAMILY, config.DISPLAY_FONT_SIZE)
        display_font.setBold(True)
        display_font.setStyleHint(QFont.StyleHint.Monospace)
        self.display.setFont(display_font)
        self.display.setTextMargins(10, 10, 10, 10)
        display_row.addWidget(self.display, 1)
        main_layout.addLayout(display_row)

        # --- 2. KEYPAD ---
        grid = QGridLayout()
        grid.setSpacing(config.GRID_SPACING)
        for row, labels in enumerate(BUTTON_ROWS):
            for column, label in enumerate(labels):
                grid.addWidget(self._create_button(label, config.BUTTON_FONT_SIZE), row, column)
        main_layout.addLayout(grid, 1)

        # --- 3. ADVANCED ROW ---
        advanced = QHBoxLayout()
        advanced.setSpacing(config.GRID_SPACING)
        for label in ADVANCED_BUTTONS:
            advanced.addWidget(self._create_button(label, config.ADVANCED_FONT_SIZE))
        main_layout.addLayout(advanced)

        # --- SIGNAL CONNECTIONS ---
        self.controller.display_changed.connect(self.on_display_changed)
        self.controller.memory_changed.connect(self.on_memory_changed)

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    def _create_button(self, label: str, font_size: int) -> QPushButton:
        button = QPushButton(label)
        button.setFont(QFont(config.BUTTON_FONT_FAMILY, font_size))
        button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        # Keys go to the window, not to whichever button was clicked last
        button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        button.clicked.connect(lambda _checked=False, text=label: self.controller.press(text))
        self.buttons[label] = button
        return button

    @Slot(str, bool)
    def on_display_changed(self, text: str, is_error: bool) -> None:
        self.display.setText(text)
        if is_error:
            self.display.setStyleSheet(f"color: {config.ERROR_COLOR};")
        else:
            self.display.setStyleSheet("")

    @Slot(bool)
    def on_memory_changed(self, has_memory: bool) -> None:
        self.memory_indicator.setText("M" if has_memory else "")

    def keyPressEvent(self, event: QKeyEvent) -> None:
        calc_event = event_for_key(event.text(), event.key())
        if calc_event is None:
            super().keyPressEvent(event)
            return
        self.controller.handle(calc_event)
        event.accept()
