from cbcbind import compile_arguments, parse_options, Flag, NamedValue, OptionError
import pytest

def test_empty_options():
    assert compile_arguments() == ("problem", "-solve", "-quit")
    assert compile_arguments({}) == ("problem", "-solve", "-quit")
    assert compile_arguments([]) == ("problem", "-solve", "-quit")

def test_named_and_unnamed_entries():
    # named entry with a value
    assert compile_arguments({"presolve": "off"}) == ("problem", "-presolve", "off", "-solve", "-quit")
    # unnamed entry: the value itself becomes the flag
    assert compile_arguments([100]) == ("problem", "-100", "-solve", "-quit")
    assert compile_arguments({"": "sec"}) == ("problem", "-sec", "-solve", "-quit")
    # both styles, interleaved in input order
    assert compile_arguments([("presolve", "off"), 100, ("sec", 100)]) == \
        ("problem", "-presolve", "off", "-100", "-sec", "100", "-solve", "-quit")

def test_bare_flags():
    args = compile_arguments([("cuts", None), ("heuristics", ""), ("-sec", 5)])
    assert args == ("problem", "-cuts", "-heuristics", "-sec", "5", "-solve", "-quit")

def test_token_count():
    options = [("sec", 100), ("presolve", "off"), ("cuts", ""), ("ratio", 0.01), ("heuristics", None)]
    k, e = len(options), 2
    args = compile_arguments(options)
    assert len(args) == 3 + 2 * k - e
    assert args[0] == "problem"
    assert args[-2:] == ("-solve", "-quit")

def test_order_is_preserved():
    args = compile_arguments([("sec", 10), ("presolve", "on"), ("sec", 20)])
    assert args[1:-2] == ("-sec", "10", "-presolve", "on", "-sec", "20")

def test_compilation_is_deterministic():
    options = {"sec": 100, "presolve": "off", "ratio": 0.5}
    assert compile_arguments(options) == compile_arguments(options)

def test_parse_options():
    parsed = parse_options({"sec": 100, "cuts": None, "": "solve", "ratio": 1e-9})
    assert parsed == (NamedValue("sec", "100"), Flag("cuts"), Flag("solve"), NamedValue("ratio", "1e-09"))
    # parsing already parsed options is a no-op
    assert parse_options(parsed) == parsed
    assert parse_options(None) == ()

def test_variants_compile_directly():
    args = compile_arguments([Flag("presolve"), NamedValue("sec", 3)])
    assert args == ("problem", "-presolve", "-sec", "3", "-solve", "-quit")

def test_invalid_option_names():
    with pytest.raises(OptionError, match="'-'"):
        compile_arguments([""])
    with pytest.raises(OptionError, match="'--sec'"):
        compile_arguments({"--sec": 10})
    with pytest.raises(OptionError, match="'- sec'"):
        compile_arguments({" sec": 10})
