from calendario.summary import CellStyle

APP_DARK_STYLE = """
        QMainWindow {
            background-color: #111827;
            color: #f3f4f6;
        }
        QDialog {
            background-color: #1f2937;
            color: #f3f4f6;
        }
        QLabel {
            font-size: 13px;
            color: #f3f4f6;
        }
        QLabel#AppTitle {
            font-size: 30px;
            font-weight: 800;
            color: #a5b4fc;
        }
        QLabel#MonthTitle {
            font-size: 24px;
            font-weight: bold;
            color: #818cf8;
        }
        QLabel#SectionTitle {
            font-weight: 600;
            color: #d1d5db;
            margin-top: 6px;
        }
        QLabel#DayHeader {
            color: #9ca3af;
            font-weight: 600;
        }
        QLabel#ErrorBanner {
            background-color: #7f1d1d;
            border: 1px solid #b91c1c;
            border-radius: 6px;
            padding: 10px;
            color: #fee2e2;
        }
        QLabel#LoadingLabel {
            color: #d1d5db;
            font-size: 15px;
        }
        QWidget#CentralWidget {
            background-color: #111827;
        }

        QLineEdit, QComboBox {
            background-color: #374151;
            border: 1px solid #4b5563;
            border-radius: 10px;
            padding: 8px;
            font-size: 13px;
            color: #ffffff;
        }
        QLineEdit:focus, QComboBox:focus {
            border: 1px solid #6366f1;
        }

        QPushButton {
            background-color: #374151;
            color: #e5e7eb;
            border-radius: 10px;
            padding: 6px 14px;
            font-size: 13px;
        }
        QPushButton:hover {
            background-color: #4b5563;
        }
        QPushButton#PrimaryButton {
            background-color: #4f46e5;
            color: #ffffff;
            font-weight: 600;
        }
        QPushButton#PrimaryButton:hover {
            background-color: #4338ca;
        }
        QPushButton#DeleteButton {
            background: transparent;
            color: #f87171;
            font-size: 16px;
        }

        QListWidget {
            background-color: #374151;
            border-radius: 10px;
            color: #f3f4f6;
        }

        QScrollBar:vertical {
            background: #111827;
            width: 10px;
            margin: 0px;
        }
        QScrollBar::handle:vertical {
            background: #374151;
            min-height: 20px;
        }
        """

# cartões dos meses (visão anual)
MONTH_CARD_STYLES = {
    CellStyle.PROXIMATE: "border: 2px solid #ef4444; background-color: #7f1d1d; border-radius: 16px;",
    CellStyle.HAS_EVENTS: "border: 2px solid #6366f1; background-color: #312e81; border-radius: 16px;",
    CellStyle.EMPTY: "border: 2px solid #374151; background-color: #111827; border-radius: 16px;",
}

MONTH_CAPTION_COLORS = {
    CellStyle.PROXIMATE: "#fca5a5",
    CellStyle.HAS_EVENTS: "#818cf8",
    CellStyle.EMPTY: "#818cf8",
}

# células dos dias (visão mensal)
DAY_CELL_STYLES = {
    CellStyle.TODAY: "border: 2px solid #ef4444; background-color: #7f1d1d; color: #fecaca; font-weight: bold;",
    CellStyle.PROXIMATE: "border: 2px solid #dc2626; background-color: #991b1b; color: #ffffff;",
    CellStyle.HAS_EVENTS: "border: 2px solid #4f46e5; background-color: #3730a3; color: #ffffff;",
    CellStyle.EMPTY: "border: none; background-color: #374151; color: #f3f4f6;",
}

MARKER_COLORS = {
    CellStyle.PROXIMATE: "#dc2626",
    CellStyle.HAS_EVENTS: "#4f46e5",
}

FILTER_ACTIVE_STYLE = "background-color: #4f46e5; color: #ffffff; border: 2px solid #a5b4fc; font-weight: bold;"
FILTER_HAS_EVENTS_STYLE = "background-color: #3730a3; color: #a5b4fc; border: 1px solid #4f46e5; font-weight: bold;"
FILTER_EMPTY_STYLE = "background-color: #1f2937; color: #9ca3af; border: 1px solid #374151; font-weight: bold;"
