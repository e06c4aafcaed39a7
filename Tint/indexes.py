# Tint/indexes.py
from typing import Any, Iterable, Optional, Tuple

from Tint.variables import Style


def index_direction(direction: Any) -> Optional[str]:
    """Map an alias or a signed number to 'up' / 'down'; None when neither."""
    if direction is None or isinstance(direction, bool) or direction == "":
        return None
    alias = Style.INDEX_ALIASES.get(str(direction).strip().lower())
    if alias:
        return alias
    try:
        number = float(direction)
    except (TypeError, ValueError):
        return None
    if number < 0:
        return "down"
    if number > 0:
        return "up"
    return None


def index_sequences(
    direction: Any, aux_codes: Iterable[Any] = ()
) -> Optional[Tuple[str, str]]:
    """
    Build the (on, off) escapes for an index marker.

    `aux_codes` are SGR parameters (e.g. an active colour) repeated in both
    escapes so the marked text keeps the surrounding colour.
    """
    key = index_direction(direction)
    if key is None:
        return None
    aux = [str(c) for c in aux_codes if c is not None and c != ""]
    return (
        Style.sequence(Style.INDEX[key], *aux),
        Style.sequence(Style.INDEX["off"], *aux),
    )


def apply_index(text: str, direction: Any, aux_codes: Iterable[Any] = ()) -> str:
    """Wrap `text` in an index marker; unknown directions return it unchanged."""
    sequences = index_sequences(direction, aux_codes)
    if sequences is None:
        return text
    on, off = sequences
    return f"{on}{text}{off}"
