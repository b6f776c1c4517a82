import pytest

from spltoolkit.options import (
    OptionError,
    get_arg_list,
    get_bool_option,
    get_char_option,
    get_color_option,
    get_double_option,
    get_int_option,
    get_option,
    get_units_option,
    parse_options,
    parse_shell_args,
    show_usage,
)

OPTIONS = [
    "-count <int>",
    "-size <double>",
    "-letter <char>",
    "-title <string>",
    "-units <units>",
    "-color <color>",
    "-trace on|off",
    "-skip <cumulative>",
    "-verbose",
]


def parse(line):
    return parse_options(parse_shell_args(line), OPTIONS)


def test_basic_options():
    options = parse("-count 3 -size 1.5 -trace on -v a0 a1")
    assert get_int_option(options, "-count", 0) == 3
    assert get_double_option(options, "-size", 0) == 1.5
    assert get_option(options, "-title", "none") == "none"
    assert get_option(options, "-trace", "off") == "on"
    assert get_bool_option(options, "-verbose", False) is True


def test_arg_list():
    options = parse("-count 3 -size 1.5 -trace on -v a0 a1")
    args = get_arg_list(options)
    assert args[0] == "a0"
    assert args[1] == "a1"


def test_char_option():
    options = parse("-letter x")
    assert options["-letter"] == "x"
    assert get_char_option(options, "-letter", "?") == "x"


@pytest.mark.parametrize(
    "line", ["-size", "-size x", "-trace true", "-let xyz"]
)
def test_errors(line):
    with pytest.raises(OptionError):
        parse(line)


def test_quoted_title():
    options = parse("-title 'Harry Potter'")
    assert options["-title"] == "Harry Potter"


def test_units_plain():
    options = parse("-units 1")
    assert get_units_option(options, "-units", 0.0) == 1.0


def test_units_inches():
    options = parse("-units 1in")
    assert get_units_option(options, "-units", 0.0) == 72.0


def test_units_unknown():
    options = parse("-units 1mi")
    with pytest.raises(OptionError):
        get_units_option(options, "-units", 0.0)


def test_units_default():
    assert get_units_option(parse("a"), "-units", 4.0) == 4.0


def test_cumulative():
    options = parse("-skip a -skip b -skip c")
    assert options["-skip"] == "a+b+c"


def test_ambiguous_prefix():
    with pytest.raises(OptionError, match="Ambiguous"):
        parse("-s 1")


def test_unrecognized_option():
    with pytest.raises(OptionError, match="Unrecognized"):
        parse("-zzz")


def test_plus_joins_values():
    options = parse_options(["-title", "ab", "+", "cd"], OPTIONS)
    assert options["-title"] == "abcd"


def test_plus_without_value():
    with pytest.raises(OptionError):
        parse_options(["-title", "ab", "+"], OPTIONS)


def test_lone_dash_is_argument():
    options = parse_options(["-"], OPTIONS)
    assert get_arg_list(options) == ["-"]


def test_shell_args_quotes_and_escapes():
    assert parse_shell_args('"a b" c\\ d') == ["a b", "c d"]
    assert parse_shell_args("  ") == []
    assert parse_shell_args("''") == [""]


def test_int_rejects_trailing_text():
    with pytest.raises(OptionError):
        parse("-count 3x")


def test_color_names():
    options = parse("-color DarkGray")
    assert get_color_option(options, "-color", None) == "darkGray"
    options = parse("-color red")
    assert get_color_option(options, "-color", None) == "red"


def test_color_forms():
    assert get_color_option({"-c": "50%"}, "-c", None).endswith(" 100 div colorscreen")
    assert get_color_option({"-c": "#ff"}, "-c", None).endswith(" sethexcolor")
    assert get_color_option({"-c": "0.5"}, "-c", None).endswith(" setgray")


def test_color_unknown():
    with pytest.raises(OptionError):
        get_color_option({"-c": "mauve"}, "-c", None)


def test_color_default():
    assert get_color_option({}, "-c", "black") == "black"


def test_show_usage(capsys):
    show_usage("prog <options>", ["-verbose"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Usage: prog <options>"
    assert out[-1].strip() == "-verbose"