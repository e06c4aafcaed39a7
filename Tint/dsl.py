# Tint/dsl.py
from enum import Enum
from typing import Any, Iterator, NamedTuple, Optional

from Tint.colors import resolve_color
from Tint.indexes import apply_index
from Tint.variables import RESET, Style


DEFAULT_COMMAND = "|"
DEFAULT_PARAM = "."


class CommandKind(Enum):
    COLOR = "c"
    STYLE = "s"
    INDEX = "i"


class Command(NamedTuple):
    kind: CommandKind
    argument: str
    text: str


class Separators(NamedTuple):
    command: str = DEFAULT_COMMAND
    param: str = DEFAULT_PARAM

    @classmethod
    def coerce(cls, value: Any) -> "Separators":
        """Accept None, a dict, a tuple or Separators; blank fields use defaults."""
        if isinstance(value, dict):
            command, param = value.get("command"), value.get("param")
        elif isinstance(value, (tuple, list)):
            command, param = (list(value) + [None, None])[:2]
        else:
            command, param = None, None
        return cls(
            command if isinstance(command, str) and command else DEFAULT_COMMAND,
            param if isinstance(param, str) and param else DEFAULT_PARAM,
        )


def tokenize(text: str, separators: Any = None) -> Iterator[Command]:
    """
    Split `text` into commands of the form `kind.argument.text`.

    Empty segments and segments whose first character is not a known
    kind are dropped, so free text between commands never reaches the output.
    """
    seps = Separators.coerce(separators)
    for segment in text.split(seps.command):
        if not segment:
            continue
        fields = segment.split(seps.param)
        head = fields[0].lower()
        if not head:
            continue
        try:
            kind = CommandKind(head[0])
        except ValueError:
            continue
        argument = fields[1] if len(fields) > 1 else ""
        yield Command(kind, argument, "".join(fields[2:]))


def _color_command(argument: str) -> str:
    lowered = argument.lower()
    background = lowered.startswith("bg_")
    bright = lowered.endswith("+")
    cleaned = lowered.replace("bg_", "").replace("+", "")
    return resolve_color(cleaned, background=background, bright=bright)


def format_inline(text: str, separators: Any = None) -> str:
    """
    Render the pipe DSL, e.g. '|c.red.Error:| |s.bold.disk full|'.

    Kinds: c (colour, `bg_` prefix for background, trailing `+` for bright),
    s (style), i (index). A colour stays active for later s/i commands.
    One reset is appended at the very end.
    """
    text = "" if text is None else str(text)
    seps = Separators.coerce(separators)
    if seps.command not in text:
        return f"{text}{RESET}"

    out = []
    last_color: Optional[str] = None

    for command in tokenize(text, seps):
        if command.kind is CommandKind.COLOR:
            code = _color_command(command.argument)
            out.append(Style.sequence(code))
            last_color = code if code and code != "0" else None
            out.append(command.text)

        elif command.kind is CommandKind.STYLE:
            style = Style.style(command.argument)
            if style is None:
                out.append(command.text)
            else:
                out.append(Style.sequence(style.on, last_color))
                out.append(command.text)
                out.append(Style.sequence(style.off, last_color))

        elif command.kind is CommandKind.INDEX:
            out.append(apply_index(command.text, command.argument, [last_color]))

    out.append(RESET)
    return "".join(out)
