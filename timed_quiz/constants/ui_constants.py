"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz App"
WINDOW_MIN_WIDTH: int = 400
WINDOW_MIN_HEIGHT: int = 300

WELCOME_MESSAGE: str = "Press 'Start Quiz' to begin!"
ANSWER_PLACEHOLDER: str = "Enter your answer here"
TIMER_LABEL_TEMPLATE: str = "Time: {seconds}"
SCORE_LABEL_TEMPLATE: str = "Score: {score}"
QUESTION_LABEL_TEMPLATE: str = "Question {number} of {total}: {prompt}"
LOAD_ERROR_TITLE: str = "Error loading quiz file!"

BUTTON_START: str = "Start Quiz"
BUTTON_SUBMIT: str = "Submit"
BUTTON_IMPORT: str = "Import Questions"
BUTTON_SETTINGS: str = "Settings"
BUTTON_HELP: str = "Help"

IMPORT_DIALOG_TITLE: str = "Select question file"
IMPORT_FILE_FILTER: str = "Question files (*.txt);;All files (*.*)"
QUIZ_RUNNING_MESSAGE: str = "Finish the current quiz before changing settings or questions."
