from Tint.colors import classify, hex_to_rgb, parse_numeric_triplet, resolve_color
from Tint.config import Settings
from Tint.dsl import Separators, format_inline
from Tint.formatting import Current, FormattingOptions, Note, StyleRule, colorize, format_structured
from Tint.indexes import apply_index
from Tint.logging import LOG, Logging, LogLevel
from Tint.suppression import SuppressionCache

__all__ = [
    "LOG",
    "Logging",
    "LogLevel",
    "Settings",
    "SuppressionCache",
    "Separators",
    "FormattingOptions",
    "StyleRule",
    "Current",
    "Note",
    "resolve_color",
    "classify",
    "hex_to_rgb",
    "parse_numeric_triplet",
    "format_inline",
    "format_structured",
    "apply_index",
    "colorize",
]
