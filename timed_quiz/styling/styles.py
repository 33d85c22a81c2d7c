"""Qt stylesheets built from the color palette."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:default {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_DISABLED.get(theme)};
            }}
            QLineEdit, QSpinBox {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QLineEdit:focus {{
                border: 1px solid {ColorPalette.BORDER_FOCUS.get(theme)};
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.SUCCESS.get(theme)};
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
        """

    @staticmethod
    def get_question_label_style(font_size: int) -> str:
        return f"font-size: {font_size}pt; font-weight: bold;"

    @staticmethod
    def get_timer_label_style(font_size: int, theme: Theme = Theme.LIGHT, urgent: bool = False) -> str:
        base_style = f"padding: 2px 6px; border-radius: 4px; font-size: {font_size}pt;"
        if not urgent:
            return base_style
        return base_style + f" color: #fff; background-color: {ColorPalette.WARNING.get(theme)};"

    @staticmethod
    def get_secondary_label_style(font_size: int, theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: {font_size}pt; color: {ColorPalette.TEXT_SECONDARY.get(theme)};"
