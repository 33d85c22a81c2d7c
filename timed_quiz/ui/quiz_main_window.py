"""Qt main window presenting the timed quiz."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from timed_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from timed_quiz.constants.quiz_constants import TIME_WARNING_WINDOW_SECONDS
from timed_quiz.constants.ui_constants import (
    ANSWER_PLACEHOLDER,
    BUTTON_HELP,
    BUTTON_IMPORT,
    BUTTON_SETTINGS,
    BUTTON_START,
    BUTTON_SUBMIT,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    LOAD_ERROR_TITLE,
    QUESTION_LABEL_TEMPLATE,
    QUIZ_RUNNING_MESSAGE,
    SCORE_LABEL_TEMPLATE,
    TIMER_LABEL_TEMPLATE,
    WELCOME_MESSAGE,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from timed_quiz.core.markdown_renderer import escape_markdown, renderer
from timed_quiz.core.models import QuestionRecord
from timed_quiz.core.question_loader import QuestionSourceUnavailable, load_question_bank
from timed_quiz.core.quiz_controller import QuizController
from timed_quiz.core.settings import QuizSettings
from timed_quiz.core.summary_formatter import format_summary_markdown
from timed_quiz.styling import Styles, Theme
from timed_quiz.ui.dialog_helpers import show_error, show_info, show_warning
from timed_quiz.ui.qt_countdown import QtCountdownScheduler
from timed_quiz.ui.settings_dialog import SettingsDialog


class QuizMainWindow(QMainWindow):
    """Single-screen quiz window; implements the ``QuizView`` callbacks."""

    def __init__(
        self,
        question_source: Path | None = None,
        settings: QuizSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self._settings = settings or QuizSettings()
        self._question_time_seconds = self._settings.question_time_seconds
        self._timer_urgent = False

        self._build_ui()
        self.controller = QuizController(
            view=self,
            scheduler=QtCountdownScheduler(self),
            question_source=question_source,
            settings=self._settings,
        )
        self.set_input_enabled(False)
        self._apply_styles()

    # --- Layout ---

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(20, 20, 20, 20)
        root_layout.setSpacing(10)
        central_widget.setLayout(root_layout)

        self._build_toolbar(root_layout)

        self.question_label = QLabel(WELCOME_MESSAGE, self)
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setTextFormat(Qt.RichText)
        root_layout.addWidget(self.question_label, stretch=1)

        timer_row = QHBoxLayout()
        self.timer_label = QLabel("Time: ", self)
        timer_row.addWidget(self.timer_label)

        self.timer_progress = QProgressBar(self)
        self.timer_progress.setTextVisible(False)
        self.timer_progress.setRange(0, self._question_time_seconds)
        self.timer_progress.setValue(0)
        timer_row.addWidget(self.timer_progress, stretch=1)
        root_layout.addLayout(timer_row)

        self.answer_field = QLineEdit(self)
        self.answer_field.setPlaceholderText(ANSWER_PLACEHOLDER)
        self.answer_field.returnPressed.connect(self._handle_submit)
        root_layout.addWidget(self.answer_field)

        self.submit_button = QPushButton(BUTTON_SUBMIT, self)
        self.submit_button.clicked.connect(self._handle_submit)
        root_layout.addWidget(self.submit_button)

        self.score_label = QLabel(SCORE_LABEL_TEMPLATE.format(score=0), self)
        self.score_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.score_label)

        self.start_button = QPushButton(BUTTON_START, self)
        self.start_button.setDefault(True)
        self.start_button.clicked.connect(self._handle_start)
        root_layout.addWidget(self.start_button)

    def _build_toolbar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.import_button = QPushButton(BUTTON_IMPORT, self)
        self.import_button.clicked.connect(self._handle_import_questions)
        button_row.addWidget(self.import_button)

        button_row.addStretch()

        self.settings_button = QPushButton(BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.help_button = QPushButton(BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    # --- QuizView callbacks ---

    def render_question(self, index: int, total: int, prompt_text: str) -> None:
        text = QUESTION_LABEL_TEMPLATE.format(
            number=index + 1,
            total=total,
            prompt=renderer.render_inline(escape_markdown(prompt_text)),
        )
        self.question_label.setText(text)
        self.answer_field.clear()
        self.answer_field.setFocus()

    def render_timer(self, seconds_left: int) -> None:
        self.timer_label.setText(TIMER_LABEL_TEMPLATE.format(seconds=seconds_left))
        self.timer_progress.setValue(max(0, seconds_left))
        urgent = 0 < seconds_left <= TIME_WARNING_WINDOW_SECONDS
        if urgent != self._timer_urgent:
            self._timer_urgent = urgent
            self._apply_timer_style()

    def render_score(self, score: int) -> None:
        self.score_label.setText(SCORE_LABEL_TEMPLATE.format(score=score))

    def render_summary(self, score: int, missed: Sequence[QuestionRecord]) -> None:
        self.question_label.setText(renderer.render_fragment(format_summary_markdown(score, missed)))
        self.timer_label.setText("")
        self.timer_progress.setValue(0)
        self._timer_urgent = False
        self._apply_timer_style()

    def set_input_enabled(self, enabled: bool) -> None:
        self.answer_field.setEnabled(enabled)
        self.submit_button.setEnabled(enabled)
        self.start_button.setEnabled(not enabled)
        self.import_button.setEnabled(not enabled)
        self.settings_button.setEnabled(not enabled)
        if enabled:
            self.timer_progress.setRange(0, self.controller.settings.question_time_seconds)

    def report_load_error(self, message: str) -> None:
        self.question_label.setText(LOAD_ERROR_TITLE)
        show_error(self, LOAD_ERROR_TITLE, message)

    # --- User intents ---

    def _handle_start(self) -> None:
        self.controller.start()

    def _handle_submit(self) -> None:
        if not self.controller.is_running():
            return
        self.controller.submit_answer(self.answer_field.text())

    def _handle_import_questions(self) -> None:
        if self.controller.is_running():
            show_warning(self, "Quiz running", QUIZ_RUNNING_MESSAGE)
            return

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(self.controller.question_source.parent),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return

        # Parse once up front so a bad file is reported now rather than on Start.
        try:
            bank = load_question_bank(Path(file_path))
        except QuestionSourceUnavailable as exc:
            show_error(self, "Import failed", str(exc))
            return

        self.controller.set_question_source(Path(file_path))
        show_info(
            self,
            "Questions imported",
            f"Found {len(bank)} questions in {Path(file_path).name}. Press '{BUTTON_START}' to begin.",
        )

    def _handle_settings(self) -> None:
        if self.controller.is_running():
            show_warning(self, "Quiz running", QUIZ_RUNNING_MESSAGE)
            return

        dialog = SettingsDialog(self, self._settings)
        if not dialog.exec():
            return
        try:
            settings = self._settings.updated(**dialog.get_changes())
        except ValidationError as exc:
            show_error(self, "Invalid settings", str(exc))
            return

        self._settings = settings
        self.controller.apply_settings(settings)
        self._apply_styles()

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    # --- Styling ---

    def _theme(self) -> Theme:
        return Theme.DARK if self._settings.dark_mode else Theme.LIGHT

    def _apply_styles(self) -> None:
        theme = self._theme()
        self.setStyleSheet(Styles.get_main_window_style(theme))

        ui_style = f"font-size: {self._settings.ui_font_size}pt;"
        for widget in (
            self.import_button,
            self.settings_button,
            self.help_button,
            self.about_button,
            self.submit_button,
            self.start_button,
            self.answer_field,
        ):
            widget.setStyleSheet(ui_style)

        self.question_label.setStyleSheet(
            Styles.get_question_label_style(self._settings.question_font_size)
        )
        self.score_label.setStyleSheet(
            Styles.get_secondary_label_style(self._settings.ui_font_size, theme)
        )
        self._apply_timer_style()

    def _apply_timer_style(self) -> None:
        self.timer_label.setStyleSheet(
            Styles.get_timer_label_style(
                self._settings.ui_font_size,
                self._theme(),
                urgent=self._timer_urgent,
            )
        )
