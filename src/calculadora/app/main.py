"""
Run with: python -m calculadora

Set CALCULADORA_LOG_LEVEL=DEBUG to trace every key event.
"""
from __future__ import annotations

import sys

from calculadora.app.application import create_app
from calculadora.app.ui.main_window import MainWindow
from calculadora.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    setup_logging()

    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
