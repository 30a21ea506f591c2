# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the rich theme used by the plugin console.

`OneColors` holds plain style strings usable directly in rich markup,
e.g. `f"[{OneColors.DARK_RED}]failed[/]"`.
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette."""

    WHITE = "#FFFFFF"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    CYAN = "#56B6C2"

    DARK_RED_b = f"bold {DARK_RED}"
    CYAN_b = f"bold {CYAN}"


def get_theme() -> Theme:
    """Return the rich theme for the plugin console."""
    return Theme(
        {
            "usage.heading": OneColors.CYAN_b,
            "usage.flag": OneColors.LIGHT_YELLOW,
            "usage.command": OneColors.GREEN,
            "usage.help": OneColors.WHITE,
            "error": OneColors.DARK_RED_b,
        }
    )
