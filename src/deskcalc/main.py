"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from the environment (see `deskcalc.config`).
2. Instantiates the Controller, which owns the calculator state (Model).
3. Instantiates the Main Window (View) and passes the Controller into it.
"""
import logging
import sys

from deskcalc.app.application import create_app
from deskcalc.config import LOG_FILE, LOG_LEVEL
from deskcalc.controller.calculator_controller import CalculatorController
from deskcalc.logging_config import setup_logging
from deskcalc.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Controller (owns the engine state)
    controller = CalculatorController()

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.show()
    logger.info("Calculator window shown.")

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
