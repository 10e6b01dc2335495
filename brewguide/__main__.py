"""Allow running BrewGuide as a module: python -m brewguide."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import BrewGuideApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("BrewGuide")
    app.setOrganizationName("BrewGuide")

    # Dock icon (generated placeholder, amber circle)
    from PyQt6.QtGui import QIcon, QPixmap, QPainter, QColor
    icon = QPixmap(256, 256)
    icon.fill(QColor(0, 0, 0, 0))
    p = QPainter(icon)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setBrush(QColor("#F59E0B"))
    p.setPen(QColor("#F59E0B").darker(130))
    p.drawEllipse(16, 16, 224, 224)
    p.end()
    app.setWindowIcon(QIcon(icon))

    window = BrewGuideApp()
    window.show()
    logging.getLogger(__name__).info("BrewGuide ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
