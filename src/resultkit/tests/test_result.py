"""Tests for the owning Result type.

Validates:
- Discriminant queries and the Consumed state machine
- Terminal accessors move the payload out exactly once
- Functor operations consume self and re-home the untouched channel
- Traps on unwrap/expect misuse
"""

from __future__ import annotations

from typing import Callable

import pytest

from resultkit import (
    Box,
    ConsumedValueError,
    Err,
    Ok,
    OwningErr,
    OwningOk,
    Result,
    UnwrapOnErrorError,
    WrongVariantError,
)


# ═════════════════════════════════════════════════════════════════════════════
# Construction & State
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    """Ok: is_ok, ok() yields value exactly once."""
    result: Result[int, str] = Ok(10)

    assert result.is_ok()
    assert not result.is_err()
    assert not result.is_consumed()
    assert result.ok() == 10
    assert result.is_consumed()
    assert result.ok() is None
    assert result.is_ok()


def test_err_construction() -> None:
    """Err: is_err, err() yields error exactly once."""
    result: Result[int, str] = Err("bad")

    assert result.is_err()
    assert not result.is_ok()
    assert result.err() == "bad"
    assert result.err() is None


def test_ok_on_err_discards_error() -> None:
    result: Result[int, str] = Err("bad")

    assert result.ok() is None
    assert result.is_consumed()
    assert result.err() is None


def test_err_on_ok_discards_value() -> None:
    result: Result[int, str] = Ok(1)

    assert result.err() is None
    assert result.is_consumed()


def test_result_moves_holder() -> None:
    """Building from a holder leaves the caller's holder owning nothing."""
    holder = OwningOk(10)
    result: Result[int, str] = Result(holder)

    assert not holder.is_owning()
    assert result.unwrap() == 10


def test_int_result_scenario() -> None:
    """Result<int,string> Ok(10): inner release yields 10, then an empty handle."""
    result: Result[int, str] = Result(OwningOk(Box(10)))
    assert result.is_ok()

    inner = OwningOk(result.unwrap())
    assert inner.release() == Box(10)
    assert inner.release().is_empty()
    assert result.is_consumed()


def test_result_from_void_is_consumed() -> None:
    result: Result[int, str] = Result(OwningErr.void())

    assert result.is_err()
    assert result.is_consumed()
    assert repr(result) == "Err(<consumed>)"


def test_result_rejects_non_holder() -> None:
    with pytest.raises(TypeError):
        Result(10)  # type: ignore[arg-type]


# ═════════════════════════════════════════════════════════════════════════════
# Queries
# ═════════════════════════════════════════════════════════════════════════════


def test_is_ok_and() -> None:
    assert Ok(5).is_ok_and(lambda x: x > 0)
    assert not Ok(-5).is_ok_and(lambda x: x > 0)
    assert not Err(5).is_ok_and(lambda x: True)


def test_is_err_and() -> None:
    assert Err("bad").is_err_and(lambda e: e.startswith("b"))
    assert not Ok("bad").is_err_and(lambda e: True)


def test_queries_do_not_consume() -> None:
    result: Result[int, str] = Ok(3)
    result.is_ok_and(lambda x: x == 3)
    result.map_or(0, lambda x: x)

    assert not result.is_consumed()
    assert result.unwrap() == 3


def test_is_ok_and_after_consumption() -> None:
    result: Result[int, str] = Ok(3)
    result.unwrap()

    assert not result.is_ok_and(lambda x: True)


def test_inspect_chains_without_consuming() -> None:
    """inspect/inspect_err run side effects on the matching variant only."""
    seen: list[object] = []
    ok: Result[int, str] = Ok(5)
    err: Result[int, str] = Err("fail")

    assert ok.inspect(seen.append).inspect_err(seen.append) is ok
    assert err.inspect(seen.append).inspect_err(seen.append) is err
    assert seen == [5, "fail"]
    assert ok.unwrap() == 5


# ═════════════════════════════════════════════════════════════════════════════
# Functor Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_map_ok() -> None:
    """Ok(v).map(f) == Ok(f(v)) and the source is consumed."""
    result: Result[int, str] = Ok(5)
    mapped = result.map(lambda x: x * 2)

    assert mapped == Ok(10)
    assert result.is_consumed()


def test_map_sum_scenario() -> None:
    """Result<vector<double>, string> Ok(10 x 1.0) mapped with sum is Ok(10.0)."""
    result: Result[list[float], str] = Ok([1.0] * 10)

    assert result.map(sum) == Ok(10.0)


def test_map_err_passthrough() -> None:
    """Err(e).map(f) == Err(e) for any f; f never runs."""
    calls: list[int] = []
    error = ValueError("bad")
    result: Result[int, ValueError] = Err(error)

    mapped = result.map(lambda x: calls.append(x) or x)

    assert calls == []
    assert mapped.unwrap_err() is error
    assert result.is_consumed()


def test_map_err_on_err() -> None:
    mapped = Err("fail").map_err(lambda e: f"Error: {e}")

    assert mapped == Err("Error: fail")


def test_map_err_on_ok() -> None:
    mapped = Ok(42).map_err(lambda e: f"Error: {e}")

    assert mapped == Ok(42)


def test_map_on_consumed_passes_through() -> None:
    result: Result[int, str] = Ok(1)
    result.unwrap()

    mapped = result.map(lambda x: x + 1)
    assert mapped.is_ok()
    assert mapped.is_consumed()


def test_map_to_box_takes_over_contents() -> None:
    """A Box returned from f is taken over like any Box passed to Ok()."""
    handle = Box("inner")
    mapped = Ok(1).map(lambda _: handle)

    assert handle.is_empty()
    assert mapped.unwrap() == "inner"


def test_map_leaves_source_intact_when_f_raises() -> None:
    result: Result[int, str] = Ok(0)

    with pytest.raises(ZeroDivisionError):
        result.map(lambda x: 1 // x)
    assert result.unwrap() == 0


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    assert Ok(42).map(lambda x: x) == Ok(42)
    assert Err("fail").map(lambda x: x) == Err("fail")


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    assert Ok(5).map(lambda x: f(g(x))) == Ok(5).map(g).map(f)


def test_and_then_chains() -> None:
    def validate_positive(x: int) -> Result[int, str]:
        return Ok(x) if x > 0 else Err("must be positive")

    assert Ok(5).and_then(validate_positive).map(lambda x: x * 2).unwrap() == 10
    assert Ok(-5).and_then(validate_positive).unwrap_err() == "must be positive"
    assert Err("early").and_then(validate_positive).unwrap_err() == "early"


def test_or_else_recovers() -> None:
    assert Err("fail").or_else(lambda _: Ok(42)).unwrap() == 42
    assert Ok(5).or_else(lambda _: Ok(42)).unwrap() == 5


# ═════════════════════════════════════════════════════════════════════════════
# Folding
# ═════════════════════════════════════════════════════════════════════════════


def test_map_or() -> None:
    """map_or(default, f) is f(v) on Ok(v), default on Err."""
    assert Ok(3).map_or(0, lambda x: x * 3) == 9
    assert Err("bad").map_or(0, lambda x: x * 3) == 0


def test_map_or_after_consumption_returns_default() -> None:
    result: Result[int, str] = Ok(3)
    result.ok()

    assert result.map_or(-1, lambda x: x) == -1


def test_map_or_else() -> None:
    assert Ok(3).map_or_else(len, lambda x: x * 2) == 6
    assert Err("four").map_or_else(len, lambda x: x * 2) == 4


def test_map_or_else_on_consumed_traps() -> None:
    result: Result[int, str] = Err("e")
    result.err()

    with pytest.raises(ConsumedValueError):
        result.map_or_else(len, lambda x: x)


# ═════════════════════════════════════════════════════════════════════════════
# Terminal Accessors
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_ok() -> None:
    result: Result[int, str] = Ok(10)

    assert result.unwrap() == 10
    assert result.is_consumed()


def test_unwrap_on_err_traps() -> None:
    result: Result[int, str] = Err("bad")

    with pytest.raises(UnwrapOnErrorError, match="bad"):
        result.unwrap()
    assert not result.is_consumed()


def test_unwrap_twice_traps() -> None:
    result: Result[int, str] = Ok(10)
    result.unwrap()

    with pytest.raises(ConsumedValueError):
        result.unwrap()


def test_expect_attaches_message() -> None:
    with pytest.raises(UnwrapOnErrorError) as exc_info:
        Err("bad").expect("config must parse")

    assert exc_info.value.report.message == "config must parse: 'bad'"
    assert "config must parse" in str(exc_info.value)


def test_expect_ok() -> None:
    assert Ok("v").expect("unused") == "v"


def test_unwrap_err() -> None:
    assert Err("bad").unwrap_err() == "bad"
    with pytest.raises(WrongVariantError):
        Ok(1).unwrap_err()
    with pytest.raises(WrongVariantError, match="wanted an error"):
        Ok(1).expect_err("wanted an error")


def test_unwrap_or() -> None:
    assert Ok(5).unwrap_or(10) == 5
    assert Err("fail").unwrap_or(10) == 10


def test_unwrap_or_else() -> None:
    assert Ok(5).unwrap_or_else(lambda _: 10) == 5
    assert Err("fail").unwrap_or_else(len) == 4


def test_unwrap_or_default() -> None:
    """unwrap_or_default-style fallback on Err and on consumed results."""
    assert Err("bad").unwrap_or_default(int) == 0
    assert Ok(7).unwrap_or_default(int) == 7

    spent: Result[int, str] = Ok(7)
    spent.unwrap()
    assert spent.unwrap_or_default(int) == 0


def test_match() -> None:
    assert Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}") == "success: 42"
    assert Err("x").match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}") == "failed: x"


def test_drop_consumes() -> None:
    result: Result[int, str] = Ok(1)
    result.drop()

    assert result.is_consumed()
    assert result.ok() is None


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_repr_and_bool() -> None:
    ok: Result[int, str] = Ok(1)
    err: Result[int, str] = Err("e")

    assert repr(ok) == "Ok(1)"
    assert repr(err) == "Err('e')"
    assert ok and not err
    ok.unwrap()
    assert repr(ok) == "Ok(<consumed>)"


def test_equality_is_not_consuming() -> None:
    left: Result[int, str] = Ok(1)

    assert left == Ok(1)
    assert left != Err(1)
    assert left.unwrap() == 1


# ═════════════════════════════════════════════════════════════════════════════
# Consumed State
# ═════════════════════════════════════════════════════════════════════════════


def _spent_ok() -> Result[int, str]:
    result: Result[int, str] = Ok(1)
    result.unwrap()
    return result


def _spent_err() -> Result[int, str]:
    result: Result[int, str] = Err("x")
    result.err()
    return result


@pytest.mark.parametrize("spent", [_spent_ok, _spent_err])
def test_transforms_on_consumed_pass_through(spent: Callable[[], Result[int, str]]) -> None:
    """map_err/and_then/or_else keep the discriminant and stay consumed."""
    is_ok = spent().is_ok()
    chained = [
        spent().map(lambda x: x + 1),
        spent().map_err(str.upper),
        spent().and_then(lambda x: Ok(x + 1)),
        spent().or_else(lambda e: Ok(len(e))),
    ]

    for result in chained:
        assert result.is_ok() is is_ok
        assert result.is_consumed()


@pytest.mark.parametrize("spent", [_spent_ok, _spent_err])
def test_match_on_consumed_traps(spent: Callable[[], Result[int, str]]) -> None:
    with pytest.raises(ConsumedValueError):
        spent().match(ok=str, err=str)


@pytest.mark.parametrize("spent", [_spent_ok, _spent_err])
def test_unwrap_or_else_on_consumed_traps(spent: Callable[[], Result[int, str]]) -> None:
    with pytest.raises(ConsumedValueError):
        spent().unwrap_or_else(len)


@pytest.mark.parametrize("spent", [_spent_ok, _spent_err])
def test_inspect_on_consumed_is_noop(spent: Callable[[], Result[int, str]]) -> None:
    seen: list[object] = []
    result = spent()

    assert result.inspect(seen.append).inspect_err(seen.append) is result
    assert seen == []


@pytest.mark.parametrize("spent", [_spent_ok, _spent_err])
def test_expect_on_consumed_traps(spent: Callable[[], Result[int, str]]) -> None:
    with pytest.raises(ConsumedValueError, match="need a value: value already consumed"):
        spent().expect("need a value")
    with pytest.raises(ConsumedValueError, match="need an error: error already consumed"):
        spent().expect_err("need an error")
