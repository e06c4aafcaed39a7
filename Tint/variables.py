from types import MappingProxyType
from typing import Iterable, NamedTuple, Optional, Union


PREFIX = "\033["
POSTFIX = "m"


class StyleCode(NamedTuple):
    on: int
    off: int


class Style:
    """
    Static ANSI lookup tables and the escape sequence builder.
    Every formatted span in Tint is assembled through `Style.sequence`.
    """

    STYLES = MappingProxyType(
        {
            "bold": StyleCode(1, 22),
            "dim": StyleCode(2, 22),
            "italic": StyleCode(3, 23),
            "cursive": StyleCode(3, 23),
            "underline": StyleCode(4, 24),
            "blink": StyleCode(5, 25),
            "inverse": StyleCode(7, 27),
            "hidden": StyleCode(8, 28),
            "strikethrough": StyleCode(9, 29),
        }
    )

    # iteration order matters for the substring fallback in colors.py
    COLORS = MappingProxyType(
        {
            "black": 30,
            "red": 31,
            "green": 32,
            "yellow": 33,
            "blue": 34,
            "magenta": 35,
            "cyan": 36,
            "white": 37,
            "reset": 0,
        }
    )

    INDEX = MappingProxyType({"down": 73, "up": 74, "off": 75})

    INDEX_ALIASES = MappingProxyType(
        {
            **dict.fromkeys(
                ("down", "superscript", "super", "sup", "under", "bottom", "lower"),
                "down",
            ),
            **dict.fromkeys(
                ("up", "subscript", "sub", "over", "top", "upper"),
                "up",
            ),
        }
    )

    @staticmethod
    def params(codes: Iterable[Union[int, str, None]]) -> str:
        """Join SGR parameters with ';', dropping empty entries."""
        return ";".join(str(c) for c in codes if c is not None and c != "")

    @staticmethod
    def sequence(*codes: Union[int, str, None]) -> str:
        """Build `ESC[<codes>m`, or an empty string when no code is left."""
        joined = Style.params(codes)
        if not joined:
            return ""
        return f"{PREFIX}{joined}{POSTFIX}"

    @staticmethod
    def style(name: Optional[str]) -> Optional[StyleCode]:
        if not isinstance(name, str):
            return None
        return Style.STYLES.get(name)


RESET = Style.sequence(0)
