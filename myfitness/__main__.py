"""Allow running MyFitness as a module: python -m myfitness."""

import logging
import sys

from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication

from .app import MyFitnessApp, make_app_icon
from .settings import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger(__name__).info("MyFitness starting")

    app = QApplication(sys.argv)
    app.setApplicationName("MyFitness")
    app.setOrganizationName("MyFitness")
    app.setWindowIcon(QIcon(make_app_icon()))

    window = MyFitnessApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
