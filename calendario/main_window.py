from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt

from calendario.calendar_view import CalendarView
from calendario.controller import CalendarController
from calendario.theme import APP_DARK_STYLE


class MainWindow(QMainWindow):
    """Janela do calendário; a inscrição realtime vive enquanto ela estiver aberta."""

    def __init__(self, controller: CalendarController, today_provider=None):
        super().__init__()
        self.controller = controller
        self.setWindowTitle("Calendário de Eventos")
        self.resize(1100, 820)
        self.setStyleSheet(APP_DARK_STYLE)

        central_widget = QWidget()
        central_widget.setObjectName("CentralWidget")
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(24, 20, 24, 20)

        self.error_banner = QLabel()
        self.error_banner.setObjectName("ErrorBanner")
        self.error_banner.setWordWrap(True)
        self.error_banner.hide()
        layout.addWidget(self.error_banner)

        self.loading_label = QLabel("Carregando calendário...")
        self.loading_label.setObjectName("LoadingLabel")
        self.loading_label.setAlignment(Qt.AlignCenter)
        self.loading_label.hide()
        layout.addWidget(self.loading_label)

        self.calendar_view = CalendarView(controller, today_provider=today_provider)
        layout.addWidget(self.calendar_view, stretch=1)

        self.setCentralWidget(central_widget)

        controller.load_failed.connect(self.show_error)
        controller.loading_changed.connect(self.set_loading)

    def start(self):
        """Carga inicial + inscrição realtime."""
        self.error_banner.hide()
        self.controller.load()
        self.controller.start_live_updates()

    def show_error(self, message: str):
        self.error_banner.setText(message)
        self.error_banner.show()

    def set_loading(self, loading: bool):
        self.loading_label.setVisible(loading)
        self.calendar_view.setVisible(not loading)

    def closeEvent(self, event):
        self.calendar_view.close_dialog()
        self.controller.stop_live_updates()
        super().closeEvent(event)
