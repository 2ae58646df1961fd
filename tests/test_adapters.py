"""Unit tests for the lookup adapters (try-pattern lifting and mapping lookups)."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

import pytest

from optionkit.adapters.functional import catching, wrap, wrap_nullable
from optionkit.adapters.mapping import lookup, lookup_path
from optionkit.core.errors import InvalidArgumentError
from optionkit.core.maybe import just, nothing

DOC: dict[str, Any] = {
    "name": "svc",
    "ports": [80, 443],
    "owner": None,
    "meta": {"tags": ["a", "b"], "count": 0},
    "users": [{"name": "ada"}, {"name": "bob", "email": "bob@example.org"}],
}


def test_wrap_try_pattern() -> None:
    """`wrap` yields Just exactly when the try-function reports success."""

    def try_get(key: str) -> tuple[bool, str]:
        return (True, "x") if key == "a" else (False, "")

    lookup_fn = wrap(try_get)
    assert lookup_fn("a") == just("x")
    assert lookup_fn("b") == nothing()


def test_wrap_ignores_value_on_failure() -> None:
    lookup_fn = wrap(lambda _k: (False, "residual"))
    assert lookup_fn("anything") is nothing()


def test_wrap_success_with_none_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        wrap(lambda _k: (True, None))("k")


def test_wrap_propagates_try_get_errors() -> None:
    def broken(_: str) -> tuple[bool, str]:
        raise RuntimeError("backend down")

    with pytest.raises(RuntimeError, match="backend down"):
        wrap(broken)("k")


def test_wrap_nullable() -> None:
    env = {"HOME": "/root"}
    get = wrap_nullable(env.get)
    assert get("HOME") == just("/root")
    assert get("PATH") == nothing()


def test_catching_only_swallows_listed_exceptions() -> None:
    table = {"a": 1}
    get = catching(table.__getitem__, KeyError)
    assert get("a") == just(1)
    assert get("z") == nothing()

    def bad(_: str) -> int:
        raise TypeError("unexpected")

    with pytest.raises(TypeError):
        catching(bad, KeyError)("a")


def test_catching_defaults_to_lookup_and_value_errors() -> None:
    assert catching(int)("12") == just(12)
    assert catching(int)("x") == nothing()
    assert catching(["only"].__getitem__)(3) == nothing()


def test_lookup_in_mapping() -> None:
    assert lookup(DOC, "name") == just("svc")
    assert lookup(DOC, "missing") == nothing()
    assert lookup(DOC["meta"], "count") == just(0)


def test_lookup_treats_none_values_as_absent() -> None:
    assert lookup(DOC, "owner") == nothing()


def test_lookup_does_not_mutate_defaultdict() -> None:
    counts: defaultdict[str, int] = defaultdict(int)
    assert lookup(counts, "x") == nothing()
    assert "x" not in counts


def test_lookup_rejects_none_mapping() -> None:
    with pytest.raises(InvalidArgumentError):
        lookup(None, "k")  # type: ignore[arg-type]


def test_lookup_path_walks_nested_data() -> None:
    assert lookup_path(DOC, "meta.tags.1") == just("b")
    assert lookup_path(DOC, "users.1.email") == just("bob@example.org")
    assert lookup_path(DOC, ["users", 0, "name"]) == just("ada")
    assert lookup_path(DOC, "ports.-1") == just(443)
    assert lookup_path(DOC, "") == just(DOC)
    assert lookup_path(DOC, "meta/count", sep="/") == just(0)


def test_lookup_path_short_circuits_to_nothing() -> None:
    assert lookup_path(DOC, "users.0.email") == nothing()
    assert lookup_path(DOC, "ports.5") == nothing()
    assert lookup_path(DOC, "ports.first") == nothing()
    assert lookup_path(DOC, "name.0") == nothing()
    assert lookup_path(DOC, "owner.name") == nothing()
    assert lookup_path(None, "a") == nothing()
