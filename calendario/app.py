import logging
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from calendario.config import ConfigError, load_settings
from calendario.controller import CalendarController
from calendario.main_window import MainWindow
from calendario.store import SupabaseEventStore

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main() -> int:
    app = QApplication(sys.argv)
    app.setApplicationName("Calendário de Eventos")

    try:
        settings = load_settings()
    except ConfigError as exc:
        configure_logging()
        logger.error("Configuração inválida: %s", exc)
        QMessageBox.critical(None, "Configuração", str(exc))
        return 1

    configure_logging(settings.log_level)
    logger.info("Usando a tabela %s em %s", settings.table, settings.supabase_url)

    controller = CalendarController(SupabaseEventStore(settings))
    window = MainWindow(controller)
    window.show()
    window.start()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
