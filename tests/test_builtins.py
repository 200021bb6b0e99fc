import io
import logging

import pytest

from ssli.builtin.strings import format_values
from ssli.errors import (
    ProgramExit,
    SsliArithmeticError,
    SsliArityError,
    SsliAssertionError,
    SsliError,
    SsliTypeError,
    SsliUnboundSymbol,
)
from ssli.types.nil import Nil


def assert_same(result, expected):
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 5 15)", 20),
        ("(- 15 2)", 13),
        ("(* 7 3)", 21),
        ("(/ 8 4)", 2),
        ("(+ 5.5 2)", 7.5),
        ("(* 2 2.5)", 5.0),
        ('(+ "Ahoj" " svet")', "Ahoj svet"),
        ('(+ "n=" 5)', "n=5"),
        ('(+ 1 "x" 2.0)', "1x2"),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7.0 2)", 3.5),
        ("(% 10 3)", 1),
        ("(% 10 5)", 0),
        ("(% -7 3)", -1),
        ("(% 10.5 3.0)", 1.5),
        ("(- 10)", 10),
        ("(- 10 1 2)", 7),
    ]
)
def test_arithmetic(runtime, source, expected):
    assert_same(runtime.eval_string(source), expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(== 5 5)", True),
        ("(== 5 3)", False),
        ("(== 1 1.0)", False),
        ("(== 1 1 1)", True),
        ('(== "a" "a")', True),
        ("(!= 1 2)", True),
        ("(!= 1 1)", False),
        ("(!= 1 2 1)", False),
        ("(< 1 2)", True),
        ("(< 1 2.5)", True),
        ("(< 1 2 3)", True),
        ("(< 3 2 4)", False),
        ("(> 1 2)", False),
        ("(<= 2 2)", True),
        ("(<= 3 2)", False),
        ("(<= 1.5 2.0)", True),
        ("(>= 3 2)", True),
        ("(>= 2.0 1.5)", True),
        ('(< "abc" "abd")', True),
        ("(&& true 1)", True),
        ("(&& true 0)", False),
        ("(|| false 0)", False),
        ('(|| false "x")', True),
        ("(not true)", False),
        ("(not false)", True),
        ("(not 0)", True),
        ("(not 1)", False),
        ("(not nil)", True),
    ]
)
def test_comparison_and_logic(runtime, source, expected):
    assert runtime.eval_string(source) is expected


def test_equality_evaluates_first_operand_once(runtime):
    code = """
    (def counter 0)
    (== (def counter (+ counter 1)) 1)
    """
    assert runtime.eval_string(code) is True
    assert runtime.eval_string("counter") == 1


def test_logic_short_circuits(runtime):
    assert runtime.eval_string("(&& false (nope))") is False
    assert runtime.eval_string("(|| true (nope))") is True


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+)", SsliArityError),
        ("(-)", SsliArityError),
        ("(/ 1 0)", SsliArithmeticError),
        ("(% 1 0)", SsliArithmeticError),
        ("(/ 1.0 0)", SsliArithmeticError),
        ('(< 1 "a")', SsliTypeError),
        ("(< nil 1)", SsliTypeError),
        ("(if true)", SsliArityError),
        ("(def)", SsliArityError),
    ]
)
def test_operator_errors(runtime, source, error):
    with pytest.raises(error):
        runtime.eval_string(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(cast.int "42")', 42),
        ("(cast.int 3.9)", 3),
        ("(cast.float 3)", 3.0),
        ("(cast.string 2.0)", "2"),
        ("(cast.string (list.seq 1 3))", "(1, 2)"),
        ('(cast.bool "")', False),
        ('(cast.bool "x")', True),
        # a one-element list result folds back into its element
        ("(cast.list 5)", 5),
    ]
)
def test_casts(runtime, source, expected):
    assert_same(runtime.eval_string(source), expected)


def test_bad_cast(runtime):
    with pytest.raises(SsliTypeError):
        runtime.eval_string('(cast.int "abc")')


@pytest.mark.parametrize(
    "template,values,expected",
    [
        ("Hello %v!", ["world"], "Hello world!"),
        ("%v + %v = %v", ["1", "2", "3"], "1 + 2 = 3"),
        ("100%%", [], "100%"),
        ("%v and %v", ["one"], "one and %v"),
        ("%v", ["a", "b"], "a"),
        ("50%d", [], "50%d"),
        ("trailing %", [], "trailing %"),
    ]
)
def test_format_values(template, values, expected):
    assert format_values(template, values) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(str.format "x=%v y=%v" 1 2.5)', "x=1 y=2.5"),
        ('(str.trim "  pad  ")', "pad"),
        ('(str.trim_left "  pad  ")', "pad  "),
        ('(str.trim_right "  pad  ")', "  pad"),
        ('(str.to_upper "abc")', "ABC"),
        ('(str.to_lower "ABC")', "abc"),
        ('(str.split "a b  c")', ["a", "b", "c"]),
        ('(str.split "a,b" ",")', ["a", "b"]),
        ('(str.join (str.split "a b") "-")', "a-b"),
        ('(str.contains "haystack" "st")', True),
        ('(str.starts_with "haystack" "hay")', True),
        ('(str.ends_with "haystack" "hay")', False),
        ('(str.replace "a-b-c" "-" "+")', "a+b+c"),
        ('(str.len "abc")', 3),
        ('(str.len "é")', 2),
        ('(char.ord "a")', 97),
        ("(char.chr 97)", "a"),
        ('(char.chr (char.ord "b"))', "b"),
    ]
)
def test_strings(runtime, source, expected):
    assert_same(runtime.eval_string(source), expected)


@pytest.mark.parametrize(
    "source",
    ['(str.split "a" "")', '(char.ord "")', "(char.chr -1)"]
)
def test_string_errors(runtime, source):
    with pytest.raises(SsliTypeError):
        runtime.eval_string(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list.seq 1 4)", [1, 2, 3]),
        ("(list.seq 0 10 3)", [0, 3, 6, 9]),
        ("(list.seq 5 1)", []),
        ("(head (list.seq 1 4))", 1),
        ("(last (list.seq 1 4))", 3),
        ("(list.len (list.seq 0 10))", 10),
        ("(list.map (fn (x) (* x 2)) (list.seq 1 4))", [2, 4, 6]),
        ("(list.filter (fn (x) (> x 1)) (list.seq 0 4))", [2, 3]),
        ("(list.map cast.string (list.seq 1 3))", ["1", "2"]),
        ("(if (list.seq 1 3) 1 0)", 1),
        ('(if "" 1 0)', 0),
        ("(if 0.0 1 0)", 0),
    ]
)
def test_lists(runtime, source, expected):
    assert_same(runtime.eval_string(source), expected)


@pytest.mark.parametrize("source", ["(head (list.seq 0 0))", "(last (list.seq 0 0))", "(list.seq 0 5 0)"])
def test_list_errors(runtime, source):
    with pytest.raises(SsliTypeError):
        runtime.eval_string(source)


def test_map_with_named_function(runtime):
    code = """
    (fn square (x) (* x x))
    (list.map square (list.seq 1 4))
    """
    assert runtime.eval_string(code) == [1, 4, 9]


@pytest.mark.parametrize("loop_var", ["i", "(i)"])
def test_for(runtime, loop_var):
    code = f"""
    (def total 0)
    (for {loop_var} (list.seq 1 5) (def total (+ total i)))
    total
    """
    assert runtime.eval_string(code) == 10


def test_while(runtime):
    code = """
    (def i 0)
    (while (< i 5) (def i (+ i 1)))
    i
    """
    assert runtime.eval_string(code) == 5


def test_undef(runtime):
    runtime.eval_string("(def x 1) (undef x)")
    with pytest.raises(SsliUnboundSymbol):
        runtime.eval_string("x")


def test_def_without_value_binds_nil(runtime):
    assert runtime.eval_string("(def x) x") is Nil


def test_print(runtime, capsys):
    assert runtime.eval_string('(print "a" 1 2.5 (list.seq 1 3))') == "a 1 2.5 (1, 2)"
    assert capsys.readouterr().out == "a 1 2.5 (1, 2)\n"


def test_printf(runtime, capsys):
    assert runtime.eval_string('(io.printf "%v-%v" 1 2)') == "1-2"
    assert capsys.readouterr().out == "1-2"


def test_readline(runtime, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("  hello \n"))
    assert runtime.eval_string('(io.readline "name?")') == "hello"
    assert capsys.readouterr().out == "name? "


@pytest.mark.parametrize(
    "native,level,prefix",
    [
        ("log.debug", logging.DEBUG, "Debug"),
        ("log.info", logging.INFO, "Info"),
        ("log.warn", logging.WARNING, "Warn"),
        ("log.error", logging.ERROR, "Error"),
    ]
)
def test_log_natives(runtime, caplog, native, level, prefix):
    with caplog.at_level(logging.DEBUG, logger="ssli.script"):
        assert runtime.eval_string(f'({native} "hi" 1)') == "hi 1"
    record = [r for r in caplog.records if r.name == "ssli.script"][-1]
    assert record.levelno == level
    assert record.getMessage() == f"{prefix}: hi 1"


def test_assert(runtime):
    assert runtime.eval_string("(assert (== 1 1))") is Nil
    assert runtime.eval_string("(assert.eq (+ 1 1) 2)") is Nil


@pytest.mark.parametrize("source", ["(assert false)", "(assert (== 1 2))", "(assert.eq 1 2)", "(assert.eq 1 1.0)"])
def test_assert_failures(runtime, source):
    with pytest.raises(SsliAssertionError, match="Condition validation failed"):
        runtime.eval_string(source)


def test_random_int(runtime):
    assert runtime.eval_string("(rnd.int 5 5)") == 5
    for _ in range(20):
        assert 1 <= runtime.eval_string("(rnd.int 1 3)") <= 3
    assert 0 <= runtime.eval_string("(rnd.int)") <= 100
    with pytest.raises(SsliTypeError):
        runtime.eval_string("(rnd.int 3 1)")


@pytest.mark.parametrize("source,code", [("(exit 3)", 3), ("(exit)", 0)])
def test_exit(runtime, source, code):
    with pytest.raises(ProgramExit) as info:
        runtime.eval_string(source)
    assert info.value.code == code
    assert not isinstance(info.value, SsliError)


def test_exit_stops_evaluation(runtime):
    with pytest.raises(ProgramExit):
        runtime.eval_string("(def x 1) (exit 2) (def x 2)")
    assert runtime.eval_string("x") == 1


def test_internal_native_call(runtime):
    assert runtime.eval_string('(internal.func.nat.call "+" 1 2)') == 3


def test_internal_func_list(runtime):
    names = runtime.eval_string("(internal.func.list)")
    assert "fn" in names
    assert "+" in names
    assert names == sorted(names)


def test_internal_printenv(runtime, capsys):
    runtime.eval_string("(def answer 42) (internal.printenv)")
    out = capsys.readouterr().out
    assert "var answer: 42" in out
    assert "fn print: (native print)" in out


@pytest.mark.parametrize(
    "source",
    [
        "(* 9223372036854775807 2)",
        "(+ 9223372036854775807 1)",
        "(- -9223372036854775808 1)",
        "(/ -9223372036854775808 -1)",
        "(* 4611686018427387904 2 0)",
    ]
)
def test_integer_overflow(runtime, source):
    with pytest.raises(SsliArithmeticError, match="Integer overflow"):
        runtime.eval_string(source)


def test_integer_range_limits(runtime):
    assert runtime.eval_string("(+ 9223372036854775806 1)") == 9223372036854775807
    assert runtime.eval_string("(- -9223372036854775807 1)") == -9223372036854775808


@pytest.mark.parametrize("source", ['(cast.int "1_000")', '(cast.int " 5 ")', '(cast.float "1_0.5")', '(+ 1 (cast.float " 2"))'])
def test_casts_reject_python_only_spellings(runtime, source):
    with pytest.raises(SsliTypeError):
        runtime.eval_string(source)
