"""Colour palette and the Textual theme derived from it."""

from dataclasses import dataclass

from textual.theme import Theme

THEME_NAME = "devflow"


@dataclass(frozen=True)
class Palette:
    """Colour constants shared by the renderers and widget CSS."""

    primary: str = "#00FFC8"
    secondary: str = "#B478FF"
    accent: str = "#FF6AC1"

    success: str = "#50FA7B"
    warning: str = "#FFB86C"
    error: str = "#FF5555"
    info: str = "#8BE9FD"

    base: str = "#181825"
    surface: str = "#24243A"
    overlay: str = "#313244"

    text_primary: str = "#CDD6F4"
    text_secondary: str = "#A6ADC8"
    text_tertiary: str = "#7F8498"

    border_normal: str = "#45475A"
    border_focus: str = "#7D56F4"


DEFAULT_PALETTE = Palette()


def build_theme(palette: Palette = DEFAULT_PALETTE) -> Theme:
    """Textual theme so widget CSS can refer to $primary, $accent, ..."""
    return Theme(
        name=THEME_NAME,
        primary=palette.primary,
        secondary=palette.secondary,
        accent=palette.accent,
        success=palette.success,
        warning=palette.warning,
        error=palette.error,
        foreground=palette.text_primary,
        background=palette.base,
        surface=palette.surface,
        panel=palette.overlay,
        dark=True,
    )
