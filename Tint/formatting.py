# Tint/formatting.py
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from Tint.colors import resolve_color
from Tint.dsl import Separators, format_inline
from Tint.indexes import index_sequences
from Tint.variables import RESET, Style


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _as_target(value: Any) -> str:
    if value is None or value is False or value == "":
        return ""
    return str(value)


# ====================================================================
# Option records
# ====================================================================
class StyleRule(NamedTuple):
    color: Any = None
    background: Any = None
    style: Any = None

    @classmethod
    def coerce(cls, value: Any) -> Optional["StyleRule"]:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls(value.get("color"), value.get("background"), value.get("style"))
        return None


class Current(NamedTuple):
    target: str = ""
    color: Any = None
    background: Any = None
    style: Any = None

    @classmethod
    def coerce(cls, value: Any) -> Optional["Current"]:
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls(
                _as_target(value.get("target")),
                value.get("color"),
                value.get("background"),
                value.get("style"),
            )
        return None

    @property
    def rule(self) -> StyleRule:
        return StyleRule(self.color, self.background, self.style)


class Note(NamedTuple):
    target: str = ""
    index: Any = None
    direction: Any = None

    @classmethod
    def coerce(cls, value: Any) -> Optional["Note"]:
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            direction = value.get("direction", value.get("reg"))
            return cls(_as_target(value.get("target")), value.get("index"), direction)
        return None

    @property
    def indexes(self) -> List[int]:
        return [i for i in _as_list(self.index) if isinstance(i, int) and not isinstance(i, bool)]


class FormattingOptions(NamedTuple):
    all: Optional[StyleRule] = None
    currents: Tuple[Current, ...] = ()
    notes: Tuple[Note, ...] = ()
    separators: Optional[Separators] = None

    @classmethod
    def coerce(cls, value: Any) -> "FormattingOptions":
        if isinstance(value, cls):
            return value
        if not isinstance(value, dict):
            return cls()
        currents = (Current.coerce(c) for c in _as_list(value.get("currents")))
        notes = (Note.coerce(n) for n in _as_list(value.get("notes")))
        separators = value.get("separators")
        return cls(
            StyleRule.coerce(value.get("all")),
            tuple(c for c in currents if c is not None),
            tuple(n for n in notes if n is not None),
            Separators.coerce(separators) if separators else None,
        )


# ====================================================================
# Rule resolution
# ====================================================================
def prepare_rule(rule: Optional[StyleRule]) -> Tuple[List[str], List[str]]:
    """Resolve a rule into (on codes, style-off codes)."""
    args: List[str] = []
    ends: List[str] = []
    if rule is None:
        return args, ends

    if rule.color is not None:
        code = resolve_color(rule.color)
        if code:
            args.append(code)

    if rule.background is not None:
        code = resolve_color(rule.background, background=True)
        if code:
            args.append(code)

    for name in _as_list(rule.style):
        style = Style.style(name)
        if style is not None:
            args.append(str(style.on))
            ends.append(str(style.off))

    return args, ends


def colorize(text: str, color: Any) -> str:
    """Colour `text` with a single colour; no colour leaves it untouched."""
    if color is None or color == "" or isinstance(color, bool):
        return text
    return f"{Style.sequence(resolve_color(color))}{text}{RESET}"


# ====================================================================
# Segment buffer
# ====================================================================
# Each segment is (is_escape, value). Escapes are opaque to target search.
Segment = Tuple[bool, str]


def _replace_target(segments: List[Segment], target: str, on: str, end: str) -> List[Segment]:
    result: List[Segment] = []
    for is_escape, value in segments:
        if is_escape or target not in value:
            result.append((is_escape, value))
            continue
        pieces = value.split(target)
        for n, piece in enumerate(pieces):
            if n:
                if on:
                    result.append((True, on))
                result.append((False, target))
                if end:
                    result.append((True, end))
            if piece:
                result.append((False, piece))
    return result


def _visible_matches(visible: str, target: str) -> List[int]:
    starts = []
    position = visible.find(target)
    while position != -1:
        starts.append(position)
        position = visible.find(target, position + len(target))
    return starts


def _mark_positions(
    segments: List[Segment], marks: Dict[int, Tuple[str, str]]
) -> List[Segment]:
    result: List[Segment] = []
    offset = 0
    for is_escape, value in segments:
        if is_escape:
            result.append((is_escape, value))
            continue
        buffer = ""
        for n, char in enumerate(value):
            mark = marks.get(offset + n)
            if mark is None:
                buffer += char
                continue
            if buffer:
                result.append((False, buffer))
                buffer = ""
            result.extend([(True, mark[0]), (False, char), (True, mark[1])])
        if buffer:
            result.append((False, buffer))
        offset += len(value)
    return result


def _apply_note(
    segments: List[Segment], note: Note, inherited: Sequence[str]
) -> List[Segment]:
    sequences = index_sequences(note.direction, inherited)
    if sequences is None:
        return segments
    indexes = [i for i in note.indexes if 0 <= i < len(note.target)]
    if not indexes:
        return segments

    visible = "".join(value for is_escape, value in segments if not is_escape)
    marks = {
        start + i: sequences
        for start in _visible_matches(visible, note.target)
        for i in indexes
    }
    return _mark_positions(segments, marks) if marks else segments


# ====================================================================
# Structured formatting
# ====================================================================
def format_structured(text: str, options: Any = None) -> str:
    """
    Format `text` from an options object.

    Layers, in order: `all` styles the whole string, `currents` style every
    occurrence of a substring, `notes` put index markers on single
    characters of a substring. Text containing the command separator is
    handed to `format_inline` instead and the options are ignored.

    Example:
        format_structured("H2O is water", {
            "all": {"color": "cyan"},
            "currents": [{"target": "water", "style": "bold"}],
            "notes": [{"target": "H2O", "index": 1, "reg": "down"}],
        })
    """
    text = "" if text is None else str(text)
    opts = FormattingOptions.coerce(options)

    separators = opts.separators or Separators()
    if separators.command in text:
        return format_inline(text, separators)

    global_args, _ = prepare_rule(opts.all)
    global_seq = Style.sequence(*global_args)

    segments: List[Segment] = [(False, text)] if text else []
    applied: List[Tuple[str, List[str]]] = []

    for current in opts.currents:
        target = _as_target(current.target)
        if not target:
            continue
        args, ends = prepare_rule(current.rule)
        if current.color is not None or current.background is not None:
            end = f"{RESET}{global_seq}"
        else:
            end = f"{Style.sequence(*ends)}{global_seq}"
        on = Style.sequence(*global_args, *args)
        segments = _replace_target(segments, target, on, end)
        applied.append((target, args))

    for note in opts.notes:
        target = _as_target(note.target)
        if not target:
            continue
        note = note._replace(target=target)
        inherited = next((args for done, args in applied if target in done), [])
        segments = _apply_note(segments, note, inherited)

    body = "".join(value for _, value in segments)
    return f"{global_seq}{body}{RESET}"
