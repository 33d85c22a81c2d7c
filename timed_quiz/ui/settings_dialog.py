"""Settings dialog for configuring quiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from timed_quiz.core.settings import QuizSettings


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(self, parent=None, settings: QuizSettings | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings or QuizSettings()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Quiz rules
        quiz_group = QGroupBox("Quiz")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        self.question_time_spinbox = self._add_spin_row(
            quiz_layout,
            "Seconds per question:",
            "Time allowed for each question before it counts as missed",
            1,
            300,
            self._settings.question_time_seconds,
            suffix=" s",
        )
        self.max_questions_spinbox = self._add_spin_row(
            quiz_layout,
            "Questions per quiz:",
            "Maximum number of questions drawn for one quiz",
            1,
            100,
            self._settings.max_questions,
        )

        seed_row = QHBoxLayout()
        self.seed_checkbox = QCheckBox("Use fixed shuffle seed:")
        self.seed_checkbox.setToolTip("Repeat the same question order on every start. Useful for testing.")
        self.seed_checkbox.setChecked(self._settings.shuffle_seed is not None)
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, 2_147_483_647)
        self.seed_spinbox.setValue(self._settings.shuffle_seed or 0)
        self.seed_spinbox.setEnabled(self.seed_checkbox.isChecked())
        self.seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(self.seed_checkbox)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        quiz_layout.addLayout(seed_row)

        layout.addWidget(quiz_group)

        # Display settings
        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.ui_font_spinbox = self._add_spin_row(
            display_layout,
            "UI Font Size (buttons, labels):",
            "Font size for buttons and status labels",
            8,
            24,
            self._settings.ui_font_size,
            suffix=" pt",
        )
        self.question_font_spinbox = self._add_spin_row(
            display_layout,
            "Question Font Size:",
            "Font size for the question and the end-of-quiz summary",
            10,
            32,
            self._settings.question_font_size,
            suffix=" pt",
        )

        self.dark_mode_checkbox = QCheckBox("Dark theme")
        self.dark_mode_checkbox.setChecked(self._settings.dark_mode)
        display_layout.addWidget(self.dark_mode_checkbox)

        layout.addWidget(display_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    @staticmethod
    def _add_spin_row(
        layout: QVBoxLayout,
        text: str,
        tooltip: str,
        minimum: int,
        maximum: int,
        value: int,
        suffix: str = "",
    ) -> QSpinBox:
        row = QHBoxLayout()
        label = QLabel(text)
        label.setToolTip(tooltip)
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(label)
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_changes(self) -> dict[str, object]:
        """Return the edited values keyed by ``QuizSettings`` field name."""
        return {
            "question_time_seconds": self.question_time_spinbox.value(),
            "max_questions": self.max_questions_spinbox.value(),
            "shuffle_seed": self.seed_spinbox.value() if self.seed_checkbox.isChecked() else None,
            "ui_font_size": self.ui_font_spinbox.value(),
            "question_font_size": self.question_font_spinbox.value(),
            "dark_mode": self.dark_mode_checkbox.isChecked(),
        }
