"""Qt UI components for the quiz application."""

from .dialog_helpers import show_error, show_info, show_warning
from .qt_countdown import QtCountdownScheduler
from .quiz_main_window import QuizMainWindow
from .settings_dialog import SettingsDialog

__all__ = [
    "QuizMainWindow",
    "QtCountdownScheduler",
    "SettingsDialog",
    "show_error",
    "show_info",
    "show_warning",
]
