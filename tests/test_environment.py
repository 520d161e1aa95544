import pytest

from sanguinius.builtin.env_builtin import PRIMITIVES
from sanguinius.errors import (
    SanguiniusArityError,
    SanguiniusEvalError,
    SanguiniusSyntaxError,
    SanguiniusUnboundSymbol,
)
from sanguinius.runtime_context import get_global_environment, make_global_environment
from sanguinius.types import EMPTY, Environment, Nil, Primitive, Symbol, make_list

x, y, z = Symbol("x"), Symbol("y"), Symbol("z")


@pytest.fixture
def chain():
    outer = Environment(Environment(EMPTY))
    outer.define(x, 1)
    inner = Environment(outer)
    inner.define(y, 2)
    return outer, inner


def test_lookup_walks_enclosing_frames(chain):
    outer, inner = chain
    assert inner.lookup(y) == 2
    assert inner.lookup(x) == 1
    with pytest.raises(SanguiniusUnboundSymbol):
        outer.lookup(y)


def test_lookup_unbound_raises(chain):
    _, inner = chain
    with pytest.raises(SanguiniusUnboundSymbol, match="unbound variable 'z'"):
        inner.lookup(z)


def test_define_shadows_in_innermost_frame(chain):
    outer, inner = chain
    inner.define(x, 10)
    assert inner.lookup(x) == 10
    assert outer.lookup(x) == 1
    inner.define(x, 11)
    assert inner.lookup(x) == 11


def test_set_updates_nearest_binding(chain):
    outer, inner = chain
    inner.set(x, 5)
    assert outer.lookup(x) == 5
    assert x not in inner.vars


def test_set_never_creates_bindings(chain):
    _, inner = chain
    with pytest.raises(SanguiniusUnboundSymbol):
        inner.set(z, 3)
    assert inner.find(z) is None


def test_define_rejects_non_symbols():
    env = Environment(EMPTY)
    with pytest.raises(SanguiniusSyntaxError):
        env.define("x", 1)


def test_empty_environment_is_never_extended_directly():
    with pytest.raises(SanguiniusEvalError):
        EMPTY.define(x, 1)
    assert EMPTY.vars == {}


def test_extend_binds_positionally():
    outer = Environment(EMPTY)
    outer.define(z, 0)
    env = Environment.extend(make_list([x, y]), make_list([1, 2]), outer)
    assert env.outer is outer
    assert env.lookup(x) == 1
    assert env.lookup(y) == 2
    assert env.lookup(z) == 0
    assert Environment.extend(Nil, Nil, outer).vars == {}


@pytest.mark.parametrize(
    "params,args,error",
    [
        (make_list([x, 1]), make_list([1, 2]), SanguiniusSyntaxError),
        (make_list([x], y), make_list([1, 2]), SanguiniusSyntaxError),
        (make_list([x, y]), make_list([1]), SanguiniusArityError),
        (make_list([x]), make_list([1, 2]), SanguiniusArityError),
    ],
)
def test_extend_errors(params, args, error):
    with pytest.raises(error):
        Environment.extend(params, args, Environment(EMPTY))


def test_global_environment_is_created_once():
    env = get_global_environment()
    assert get_global_environment() is env
    assert env.outer is EMPTY


def test_global_environment_holds_every_primitive():
    env = make_global_environment()
    assert env is not get_global_environment()
    for name in PRIMITIVES:
        value = env.lookup(Symbol(name))
        assert isinstance(value, Primitive)
        assert value.name == name


def test_environment_str():
    env = Environment(EMPTY)
    env.define(x, 1)
    assert str(env) == "{x: 1} -> ..."
    assert "1 bindings" in repr(env)
