# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich `Theme` used by cmdtree's console output.

`OneColors` holds One Dark hex values usable directly in rich markup
(`f"[{OneColors.DARK_RED}]..."`); the `_b` suffix adds bold. `NordColors`
feeds `get_nord_theme()`, which names the styles used by the help renderer
and by `App.run()` diagnostics.
"""
from rich.theme import Theme


class OneColors:
    BLACK = "#282C34"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    LIGHT_RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    LIGHT_RED_b = f"bold {LIGHT_RED}"
    DARK_RED_b = f"bold {DARK_RED}"
    GREEN_b = f"bold {GREEN}"
    LIGHT_YELLOW_b = f"bold {LIGHT_YELLOW}"
    DARK_YELLOW_b = f"bold {DARK_YELLOW}"
    BLUE_b = f"bold {BLUE}"
    MAGENTA_b = f"bold {MAGENTA}"
    CYAN_b = f"bold {CYAN}"


class NordColors:
    POLAR_NIGHT_ORIGIN = "#2E3440"
    SNOW_STORM_BRIGHTEST = "#ECEFF4"
    FROST_TEAL = "#8FBCBB"
    FROST_ICE = "#88C0D0"
    FROST_SKY = "#81A1C1"
    FROST_DEEP = "#5E81AC"
    RED = "#BF616A"
    ORANGE = "#D08770"
    YELLOW = "#EBCB8B"
    GREEN = "#A3BE8C"
    PURPLE = "#B48EAD"


def get_nord_theme() -> Theme:
    """Return the rich Theme used by cmdtree's consoles."""
    return Theme(
        {
            "help.heading": f"bold {NordColors.FROST_ICE}",
            "help.command": f"bold {NordColors.FROST_TEAL}",
            "help.flag": NordColors.YELLOW,
            "help.operand": NordColors.GREEN,
            "help.text": NordColors.SNOW_STORM_BRIGHTEST,
            "version": f"bold {NordColors.FROST_SKY}",
            "error": f"bold {NordColors.RED}",
            "warning": NordColors.ORANGE,
        }
    )
