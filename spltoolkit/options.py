"""Command-line option parsing driven by a list of option specifications.

Each specification is either a bare flag such as ``"-verbose"`` or a flag
followed by a space and a pattern, such as ``"-count <int>"`` or
``"-trace on|off"``.  An option given on the command line may be any
unambiguous prefix of a specification.
"""

from __future__ import annotations

import re
import string
from typing import Any, Sequence

_SPACE = " \t\n\v\f\r"

_INT_RE = re.compile(
    r"[ \t\n\v\f\r]*[+-]?(?:0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?"
    r"|nan(?:\([0-9A-Za-z_]*\))?"
    r")",
    re.IGNORECASE,
)

_COLOR_NAMES = {
    "black": "black",
    "darkgray": "darkGray",
    "gray": "gray",
    "lightgray": "lightGray",
    "white": "white",
    "red": "red",
    "green": "green",
    "blue": "blue",
    "yellow": "yellow",
    "magenta": "magenta",
    "cyan": "cyan",
    "pink": "pink",
    "orange": "orange",
}


class OptionError(ValueError):
    """Raised when command-line options or their values are invalid."""


def _to_float(text: str) -> float:
    text = text.strip(_SPACE)
    if text[:3].lower() == "nan":
        return float("nan") if not text.startswith("-") else -float("nan")
    lowered = text.lower().lstrip("+-")
    if lowered.startswith("0x"):
        return float.fromhex(text)
    return float(text)


def _find_option_spec(arg: str, option_spec: Sequence[str]) -> str:
    matches = [spec for spec in option_spec if spec.startswith(arg)]
    if not matches:
        raise OptionError(f"Unrecognized option: {arg}")
    if len(matches) > 1:
        raise OptionError(f"Ambiguous option: {arg}")
    return matches[0]


def _scan_option_pattern(
    options: dict[str, Any], key: str, arg: str, pattern: str
) -> str:
    if pattern == "<char>":
        if len(arg) != 1:
            raise OptionError(f"Expected a single character after {key}")
        return arg
    if pattern == "<int>":
        if not _INT_RE.fullmatch(arg):
            raise OptionError(f"Expected an integer after {key}")
        return arg
    if pattern == "<double>":
        if not _FLOAT_RE.fullmatch(arg):
            raise OptionError(f"Expected a number after {key}")
        return arg
    if pattern == "<bool>":
        lowered = arg.lower()
        if "true".startswith(lowered):
            return "true"
        if "false".startswith(lowered):
            return "false"
        raise OptionError(f"Expected a boolean value after {key}")
    if pattern == "<cumulative>":
        if key not in options:
            return arg
        return f"{options[key]}+{arg}"
    if pattern.startswith("<") and pattern.endswith(">"):
        return arg
    if f"|{arg}|" not in f"|{pattern}|":
        raise OptionError(f"Expected {pattern} after {key}")
    return arg


def parse_options(args: Sequence[str], option_spec: Sequence[str]) -> dict[str, Any]:
    """Parse args against option_spec.

    Returns a dictionary from each option's full name to its value
    (``"true"`` for flags); the remaining arguments are listed under
    the key ``"args"``.  Raises OptionError on invalid input.
    """
    options: dict[str, Any] = {}
    rest: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg.startswith("-") and len(arg) > 1:
            spec = _find_option_spec(arg, option_spec)
            name, space, pattern = spec.partition(" ")
            if not space:
                value = "true"
            else:
                i += 1
                if i >= len(args):
                    raise OptionError(f"Missing value after {arg}")
                text = args[i]
                while i + 1 < len(args) and args[i + 1] == "+":
                    i += 2
                    if i >= len(args):
                        raise OptionError("Missing value after +")
                    text += args[i]
                value = _scan_option_pattern(options, arg, text, pattern)
            options[name] = value
        else:
            rest.append(arg)
        i += 1
    options["args"] = rest
    return options


def parse_shell_args(line: str) -> list[str]:
    """Split a line into arguments the way a simple shell would.

    Single and double quotes group text, and a backslash makes the
    next character literal.
    """
    result: list[str] = []
    arg = ""
    quote = " "
    started = False
    for ch in line + " ":
        if quote == "\\":
            arg += ch
            quote = " "
        elif quote in "\"'":
            if ch == quote:
                quote = " "
            else:
                arg += ch
        elif ch in "\\\"'":
            quote = ch
            started = True
        elif ch in _SPACE:
            if started:
                result.append(arg)
            arg = ""
            started = False
        else:
            arg += ch
            started = True
    return result


def get_arg_list(options: dict[str, Any]) -> list[str]:
    """Return the arguments that were not options."""
    return options.get("args")


def get_option(options: dict[str, Any], key: str, default: Any) -> Any:
    """Return the value of an option, or default if it was not given."""
    value = options.get(key)
    return default if value is None else value


def get_int_option(options: dict[str, Any], key: str, default: int) -> int:
    """Return an option's value as an integer."""
    value = options.get(key)
    if value is None:
        return default
    try:
        return int(value, 0) if _INT_RE.fullmatch(value) and not re.fullmatch(
            r"\s*[+-]?0[0-7]+", value
        ) else int(value)
    except ValueError:
        raise OptionError(f"Illegal integer format ({value})") from None


def get_double_option(options: dict[str, Any], key: str, default: float) -> float:
    """Return an option's value as a real number."""
    value = options.get(key)
    if value is None:
        return default
    try:
        return _to_float(value)
    except ValueError:
        raise OptionError(f"Illegal real format ({value})") from None


def get_char_option(options: dict[str, Any], key: str, default: str) -> str:
    """Return the first character of an option's value."""
    value = options.get(key)
    if value is None:
        return default
    return value[:1]


def get_bool_option(options: dict[str, Any], key: str, default: bool) -> bool:
    """Return True if the option's value is ``"true"``."""
    value = options.get(key)
    return default if value is None else value == "true"


def get_color_option(options: dict[str, Any], key: str, default: Any) -> Any:
    """Return an option's value translated into a color setting."""
    arg = get_option(options, key, None)
    if arg is None:
        return default
    if arg.endswith("%"):
        return arg[:-1] + " 100 div colorscreen"
    if arg.startswith("#"):
        return "16" + arg + " sethexcolor"
    if arg.startswith("0x"):
        return "16#" + arg[2:] + " sethexcolor"
    if arg and arg[0] in string.digits:
        return arg + " setgray"
    lowered = arg.lower()
    try:
        return _COLOR_NAMES[lowered]
    except KeyError:
        raise OptionError(f"Unrecognized color {lowered}") from None


def get_units_option(options: dict[str, Any], key: str, default: float) -> float:
    """Return an option's value as a measure in points.

    A bare number, or one followed by ``pt`` or ``px``, is taken as
    points; ``i`` and ``in`` mean inches, ``cm`` centimetres.
    """
    arg = get_option(options, key, None)
    if arg is None:
        return default
    match = _FLOAT_RE.match(arg)
    if match is None:
        raise OptionError(f"Unrecognized unit measure in {key}")
    value = _to_float(match.group())
    remainder = arg[match.end():].lstrip(_SPACE)
    if not remainder:
        return value
    units = ""
    for ch in remainder[:2]:
        if ch in _SPACE:
            break
        units += ch
    if units in ("pt", "px"):
        return value
    if units in ("i", "in"):
        return value * 72
    if units == "cm":
        return value * 72 / 2.54
    raise OptionError(f"Unrecognized unit measure in {key}")


def show_usage(usage: str, spec: Sequence[str]) -> None:
    """Print a usage line followed by the option specifications."""
    print(f"Usage: {usage}")
    print("  where <options> can be any of the following:")
    for line in spec:
        print(f"   {line}")