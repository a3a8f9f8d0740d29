import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from core.ftypes import Maybe, Either


# ТЕСТЫ Maybe
def test_maybe_some_and_none_behavior():
    """Maybe.some и Maybe.nothing"""
    just = Maybe.some(42)
    nothing = Maybe.nothing()

    assert just.is_some() and not just.is_none()
    assert nothing.is_none()
    assert just.get_or_else(0) == 42
    assert nothing.get_or_else(0) == 0


def test_maybe_map_skips_nothing():
    """map не вызывается для Nothing"""
    assert Maybe.some(10).map(lambda x: x * 2).get_or_else(0) == 20
    assert Maybe.nothing().map(lambda x: x * 2).is_none()
    assert repr(Maybe.nothing()) == "Nothing"


# ТЕСТЫ Either
def test_either_left_and_right_behavior():
    """Either.left и Either.right"""
    right_val = Either.right(100)
    left_val = Either.left("error")

    assert right_val.is_right
    assert not left_val.is_right
    assert right_val.get_or_else(0) == 100
    assert left_val.get_or_else(0) == 0


def test_either_bind_stops_on_first_left():
    """bind останавливается на первой ошибке"""
    calls = []

    def fail(x):
        calls.append(x)
        return Either.left("boom")

    result = Either.right(5).bind(fail).bind(fail)
    assert result.is_left
    assert result.value == "boom"
    assert calls == [5]
    assert Either.right(5).bind(lambda x: Either.right(x + 3)).get_or_else(0) == 8
