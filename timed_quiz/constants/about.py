"""Static metadata describing TimedQuiz."""

APP_NAME = "TimedQuiz"
APP_VERSION = "0.3"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "TimedQuiz is a small desktop quiz built with Qt. Each round draws up to ten "
    "random questions from a text file and gives you fifteen seconds per question."
)

HELP_TEXT = (
    "Click 'Start Quiz' and type your answer for each question, then press Enter "
    "or click 'Submit'. Answers are not case sensitive. When the timer runs out "
    "the question counts as missed.\n\n"
    "Questions are read from a plain text file with one question per line, using a "
    "'|' between the question and its answer:\n\n"
    "What is the capital of France?|Paris\n"
    "How many legs does a spider have?|8\n\n"
    "Blank lines and lines without a '|' are ignored. Use 'Import Questions' to pick "
    "your own file."
)
