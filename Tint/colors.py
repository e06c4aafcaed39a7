# Tint/colors.py
import re
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple, Union

from Tint.variables import Style


_DIGITS = re.compile(r"\d+")
_LEADING_INT = re.compile(r"\s*([-+]?\d+)")
_RGB_MARKERS = (".", ",", "-", "/", "\\")


class Named(NamedTuple):
    name: str


class Hex(NamedTuple):
    value: str


class Rgb(NamedTuple):
    components: Tuple[Any, ...]


class WithFlags(NamedTuple):
    spec: Any
    bright: bool = False


ColorSpec = Union[Named, Hex, Rgb, WithFlags]


# ====================================================================
# Numeric parsing
# ====================================================================
def _component(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value % 256
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) % 256 if match else 0


def parse_numeric_triplet(value: Any) -> List[int]:
    """
    Extract up to three colour components, each wrapped modulo 256.

    Strings are delimiter-agnostic: every run of digits counts, in order.
    '255,0,0', '255-0-0', '255.0.0' and '255/0-0' all give [255, 0, 0].
    """
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return [_component(v) for v in list(value)[:3]]
    return [int(run) % 256 for run in _DIGITS.findall(str(value))[:3]]


def hex_to_rgb(value: str) -> Optional[List[int]]:
    """Parse #RGB, #RRGGBB or #RRGGBBAA (alpha is dropped)."""
    if not isinstance(value, str):
        return None
    digits = value[1:] if value.startswith("#") else value
    if len(digits) == 3:
        pairs = [c * 2 for c in digits]
    elif len(digits) in (6, 8):
        pairs = [digits[0:2], digits[2:4], digits[4:6]]
    else:
        return None
    try:
        return [int(p, 16) for p in pairs]
    except ValueError:
        return None


# ====================================================================
# Classification
# ====================================================================
def classify(token: str) -> ColorSpec:
    """Pick exactly one interpretation for a raw colour token."""
    token = token.strip()
    if token.startswith("#"):
        return Hex(token)
    lowered = token.lower()
    if "rgb" in lowered or any(m in token for m in _RGB_MARKERS) or token.isdigit():
        return Rgb((token,))
    return Named(token)


def to_color_spec(value: Any) -> Optional[ColorSpec]:
    """Coerce a loose option value (str, int, list, dict) into a ColorSpec."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (Named, Hex, Rgb, WithFlags)):
        return value
    if isinstance(value, str):
        return classify(value)
    if isinstance(value, int):
        return Rgb((value,))
    if isinstance(value, (list, tuple)):
        flags = [v for v in value if isinstance(v, bool)]
        items = [v for v in value if not isinstance(v, bool)]
        bright = flags[0] if flags else False
        if items and all(isinstance(v, int) for v in items):
            spec = Rgb(tuple(items))
        else:
            spec = to_color_spec(items[0]) if items else None
        if spec is None:
            return None
        return WithFlags(spec, bright) if bright else spec
    if isinstance(value, dict):
        inner = value.get("data") or value.get("text") or value.get("content")
        spec = to_color_spec(inner)
        bright = bool(value.get("contrast") or value.get("bright"))
        if spec is None:
            return None
        return WithFlags(spec, bright) if bright else spec
    return None


# ====================================================================
# Resolution
# ====================================================================
def _lookup_named(name: str) -> Optional[int]:
    lowered = name.lower()
    if lowered in Style.COLORS:
        return Style.COLORS[lowered]
    for key, code in Style.COLORS.items():
        if key in lowered:
            return code
    return None


def _components(spec: Union[Hex, Rgb]) -> List[int]:
    if isinstance(spec, Hex):
        return hex_to_rgb(spec.value) or []
    if len(spec.components) == 1:
        return parse_numeric_triplet(spec.components[0])
    return parse_numeric_triplet(spec.components)


def _extended(components: Sequence[int], background: bool) -> str:
    selector = 38 + (10 if background else 0)
    if len(components) == 1:
        return Style.params([selector, 5, components[0]])
    if len(components) == 2:
        return Style.params([selector, 2, *components, 0])
    return Style.params([selector, 2, *components[:3]])


def resolve_color(spec: Any, background: bool = False, bright: bool = False) -> str:
    """
    Resolve a colour into an SGR parameter string such as '31' or
    '38;2;255;0;0'. An empty string means "apply no colour".
    """
    if not isinstance(spec, (Named, Hex, Rgb, WithFlags)):
        spec = to_color_spec(spec)
    if spec is None:
        return ""

    if isinstance(spec, WithFlags):
        return resolve_color(spec.spec, background, bright or spec.bright)

    if isinstance(spec, (Hex, Rgb)):
        components = _components(spec)
        return _extended(components, background) if components else ""

    if len(spec.name) < 3:
        return ""
    code = _lookup_named(spec.name)
    if code is None:
        return ""
    if code == 0:
        return "0"
    return str(code + (10 if background else 0) + (60 if bright else 0))
