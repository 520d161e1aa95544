import io

import pytest

from sanguinius.errors import SanguiniusTypeError, SanguiniusWriteError
from sanguinius.printer import to_string, write
from sanguinius.runtime_context import make_global_environment
from sanguinius.types import (
    Char, Lambda, Nil, Pair, Primitive, Symbol, TRUE, FALSE, make_list,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0"),
        (-42, "-42"),
        (TRUE, "#t"),
        (FALSE, "#f"),
        (Char(ord("z")), r"#\z"),
        (Char(32), r"#\space"),
        (Char(10), r"#\newline"),
        ("plain", '"plain"'),
        ("line\nbreak", r'"line\nbreak"'),
        ('q"uote', r'"q\"uote"'),
        ("a\\b", r'"a\\b"'),
        ("tab\there", '"tab\there"'),
        (Nil, "()"),
        (Symbol("sym"), "sym"),
        (Pair(1, 2), "(1 . 2)"),
        (make_list([1, 2, 3]), "(1 2 3)"),
        (make_list([1, 2], 3), "(1 2 . 3)"),
        (make_list([make_list([1]), Nil, "s"]), '((1) () "s")'),
        (Pair(Nil, Nil), "(())"),
    ],
)
def test_external_representation(value, expected):
    assert to_string(value) == expected


def test_procedures_print_opaquely():
    env = make_global_environment()
    assert to_string(Primitive("id", lambda args: args)) == "#<procedure>"
    assert to_string(Lambda(make_list([Symbol("x")]), make_list([Symbol("x")]), env)) == "#<procedure>"
    assert to_string(env.lookup(Symbol("car"))) == "#<procedure>"


def test_long_list_prints_without_recursing_on_the_spine():
    value = make_list(range(50000))
    text = to_string(value)
    assert text.startswith("(0 1 2 ")
    assert text.endswith(" 49999)")


def test_write_to_stream():
    out = io.StringIO()
    write(make_list([Symbol("a"), "b"]), out)
    assert out.getvalue() == '(a "b")'


def test_host_objects_are_rejected():
    with pytest.raises(SanguiniusTypeError):
        to_string(object())
    with pytest.raises(SanguiniusTypeError):
        to_string(None)


def test_deeply_nested_value_is_a_write_error(shallow_stack):
    value = Nil
    for _ in range(5000):
        value = Pair(value, 1)
    with pytest.raises(SanguiniusWriteError):
        to_string(value)
