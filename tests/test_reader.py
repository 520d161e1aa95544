import io

import pytest
from hypothesis import given, strategies as st

from sanguinius.errors import SanguiniusReadError
from sanguinius.printer import to_string
from sanguinius.reader.parser import Reader, read, read_all
from sanguinius.types import (
    Char, Nil, Pair, String, Symbol, TRUE, FALSE, FIXNUM_MAX, FIXNUM_MIN, symbol_table,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", "42"),
        ("-17", "-17"),
        ("0", "0"),
        ("#t", "#t"),
        ("#f", "#f"),
        (r"#\a", r"#\a"),
        (r"#\space", r"#\space"),
        ("#\\ ", r"#\space"),
        (r"#\newline", r"#\newline"),
        (r"#\s", r"#\s"),
        (r"#\n", r"#\n"),
        (r"#\(", r"#\("),
        ('"hello"', '"hello"'),
        (r'"a\nb"', r'"a\nb"'),
        (r'"say \"hi\""', r'"say \"hi\""'),
        (r'"back\\slash"', r'"back\\slash"'),
        (r'"\q"', '"q"'),
        ("foo", "foo"),
        ("+", "+"),
        ("-", "-"),
        ("char->integer", "char->integer"),
        ("set!", "set!"),
        ("null?", "null?"),
        ("()", "()"),
        ("(1 2 3)", "(1 2 3)"),
        ("(1 . 2)", "(1 . 2)"),
        ("(1 2 . 3)", "(1 2 . 3)"),
        ("(1 . (2 . (3 . ())))", "(1 2 3)"),
        ("((a b) (c . d))", "((a b) (c . d))"),
        ("'a", "(quote a)"),
        ("'(1 'b)", "(quote (1 (quote b)))"),
        ("( a  ; comment\n b )", "(a b)"),
        ('(1"x"2)', '(1 "x" 2)'),
        ("(f(g))", "(f (g))"),
    ],
)
def test_read_then_write(source, expected):
    assert to_string(read(source)) == expected


def test_atoms_have_expected_types():
    assert read("7") == 7
    assert read("#t") is TRUE
    assert read("#f") is FALSE
    assert read(r"#\x") == Char(ord("x"))
    assert read('"s"') == "s"
    assert read("()") is Nil
    assert isinstance(read("(1)"), Pair)


def test_symbols_are_interned():
    assert read("abc") is read("abc")
    assert read("abc") is Symbol("abc")
    a, b = read("(xyz xyz)")
    assert a is b


def test_end_of_input_returns_none():
    assert read("") is None
    assert read("   \n\t ") is None
    assert read("  ; only a comment\n ; another") is None


def test_read_all_reads_successive_data():
    forms = read_all("1 two (3) ; trailing comment")
    assert [to_string(f) for f in forms] == ["1", "two", "(3)"]


def test_reader_works_over_text_streams():
    reader = Reader(io.StringIO("(a b)\n42\n"))
    assert to_string(reader.read()) == "(a b)"
    assert reader.read() == 42
    assert reader.read() is None


def test_reader_stops_after_one_datum():
    reader = Reader("12 13")
    assert reader.read() == 12
    assert reader.stream.peek() == " "


@pytest.mark.parametrize(
    "source",
    [
        "12abc",
        "-5x",
        r"#\ab",
        r"#\spx",
        r"#\sp",
        r"#\newlin",
        "#\\",
        "#x",
        "#true",
        '"abc',
        '"abc\\',
        "(1 2",
        "(1 (2 3)",
        "(1 . 2 3)",
        "(. 1)",
        "(1 .2)",
        "(1 . )",
        "(1 .",
        ")",
        "[1]",
        "'",
        "-x",
        ".",
        "99999999999999999999",
    ],
)
def test_malformed_input_raises(source):
    with pytest.raises(SanguiniusReadError):
        read(source)


def test_string_literals_are_fresh_objects():
    first, second = read_all('"a" "a"')
    assert isinstance(first, String)
    assert first == second
    assert first is not second


@pytest.mark.parametrize("source", ["(" * 5000 + ")" * 5000, "'" * 5000 + "x"])
def test_deeply_nested_datum_is_a_read_error(source, shallow_stack):
    with pytest.raises(SanguiniusReadError, match="nested too deeply"):
        read(source)


def test_read_error_reports_position():
    with pytest.raises(SanguiniusReadError) as info:
        read("  12abc")
    assert info.value.position == 4


def test_fixnum_bounds():
    assert read(str(FIXNUM_MAX)) == FIXNUM_MAX
    assert read(str(FIXNUM_MIN)) == FIXNUM_MIN
    with pytest.raises(SanguiniusReadError):
        read(str(FIXNUM_MAX + 1))


@given(st.integers(min_value=FIXNUM_MIN, max_value=FIXNUM_MAX))
def test_integer_round_trip(n):
    assert read(to_string(read(str(n)))) == n


@given(st.text())
def test_string_round_trip(s):
    assert read(to_string(s)) == s


@given(st.from_regex(r"[a-zA-Z*/<>=?!][a-zA-Z0-9*/<>=?!+-]*", fullmatch=True))
def test_symbol_round_trip(name):
    assert read(name) is Symbol(name)
    assert to_string(read(name)) == name


def test_symbol_table_grows_once_per_spelling():
    table = symbol_table()
    assert "never-seen-before-symbol" not in table
    before = len(table)
    read("(never-seen-before-symbol never-seen-before-symbol)")
    assert "never-seen-before-symbol" in table
    assert len(table) == before + 1
