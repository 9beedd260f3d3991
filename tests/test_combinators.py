from __future__ import annotations

import pytest

from fnkit import ArityError, compose, curry, partial, pipe
from fnkit.combinators import required_arity


def double(x: int) -> int:
    return x * 2


def add_one(x: int) -> int:
    return x + 1


class TestCurry:
    def test_groupings_give_same_result(self) -> None:
        add3 = curry(lambda a, b, c: a + b + c)

        assert add3(1)(2)(3) == 6
        assert add3(1, 2)(3) == 6
        assert add3(1)(2, 3) == 6
        assert add3(1, 2, 3) == 6

    def test_func_invoked_only_when_arity_reached(self) -> None:
        calls: list[tuple[int, ...]] = []

        def record(a: int, b: int) -> int:
            calls.append((a, b))
            return a - b

        curried = curry(record)
        step = curried(10)
        assert calls == []
        assert step(3) == 7
        assert calls == [(10, 3)]

    def test_extra_arguments_pass_through(self) -> None:
        curried = curry(lambda *args: args, arity=2)

        assert curried(1)(2, 3) == (1, 2, 3)

    def test_partial_chains_can_branch(self) -> None:
        sub = curry(lambda a, b: a - b)
        from_ten = sub(10)

        assert from_ten(1) == 9
        assert from_ten(4) == 6

    def test_empty_call_returns_new_function(self) -> None:
        mul = curry(lambda a, b: a * b)

        assert mul()(3)()(4) == 12

    def test_defaults_do_not_count_towards_arity(self) -> None:
        def greet(greeting: str, name: str, punctuation: str = "!") -> str:
            return f"{greeting}, {name}{punctuation}"

        assert required_arity(greet) == 2
        assert curry(greet)("Hello")("Ada") == "Hello, Ada!"

    def test_keyword_arguments_accumulate(self) -> None:
        def fmt(a: int, b: int, *, sep: str = "-", end: str = "") -> str:
            return f"{a}{sep}{b}{end}"

        curried = curry(fmt)
        assert curried(1, sep="+")(2, end=".") == "1+2."
        assert curried(1, sep="+")(2, sep="*") == "1*2"

    def test_partial_chain_reports_remaining_arity(self) -> None:
        def add3(a: int, b: int, c: int) -> int:
            return a + b + c

        step = curry(add3)(1)

        assert required_arity(step) == 2
        assert step.__name__ == "add3"
        assert curry(step)(2)(3) == 6

    def test_zero_arity_invokes_immediately(self) -> None:
        assert curry(lambda: "now")() == "now"

    def test_negative_arity_rejected(self) -> None:
        with pytest.raises(ArityError):
            curry(lambda a: a, arity=-1)

    def test_uninspectable_callable_needs_explicit_arity(self) -> None:
        class Opaque:
            __signature__ = 42

            def __call__(self, a: int, b: int) -> int:
                return a + b

        with pytest.raises(ArityError):
            curry(Opaque())
        assert curry(Opaque(), arity=2)(3)(4) == 7

    def test_errors_propagate_unchanged(self) -> None:
        def boom(a: int, b: int) -> int:
            raise ZeroDivisionError(a, b)

        curried = curry(boom)(1)
        with pytest.raises(ZeroDivisionError):
            curried(2)
        with pytest.raises(ZeroDivisionError):
            curried(3)


class TestPartial:
    def test_bound_arguments_come_first(self) -> None:
        greet = partial(lambda greeting, name: f"{greeting}, {name}", "Hi")

        assert greet("Bo") == "Hi, Bo"
        assert greet("Al") == "Hi, Al"

    def test_always_invokes_immediately(self) -> None:
        collect = partial(lambda *args: args, 1)

        assert collect() == (1,)
        assert collect(2, 3) == (1, 2, 3)

    def test_missing_arguments_raise_type_error(self) -> None:
        add = partial(lambda a, b: a + b)

        with pytest.raises(TypeError):
            add(1)

    def test_later_keywords_override(self) -> None:
        build = partial(dict, a=1, b=2)

        assert build(b=3) == {"a": 1, "b": 3}

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError):
            partial(42)  # type: ignore[arg-type]


class TestPipeCompose:
    def test_direction(self) -> None:
        assert pipe(double, add_one)(3) == 7
        assert compose(double, add_one)(3) == 8

    def test_first_function_takes_all_arguments(self) -> None:
        piped = pipe(lambda a, b, scale=1: (a + b) * scale, str)

        assert piped(1, 2, scale=10) == "30"

    def test_compose_is_reversed_pipe(self) -> None:
        funcs = (str, add_one, double)

        assert compose(*funcs)(5) == pipe(*reversed(funcs))(5)

    def test_associativity(self) -> None:
        left = pipe(pipe(double, add_one), double)
        right = pipe(double, pipe(add_one, double))

        assert left(4) == right(4) == 18

    def test_empty_pipeline_is_identity(self) -> None:
        marker = object()

        assert pipe()(marker) is marker
        assert compose()(marker) is marker
        assert pipe(double, pipe())(2) == 4

    @pytest.mark.parametrize("args, kwargs", [((), {}), ((1, 2), {}), ((1,), {"x": 2})])
    def test_empty_pipeline_requires_one_argument(self, args: tuple, kwargs: dict) -> None:
        with pytest.raises(ArityError):
            pipe()(*args, **kwargs)

    def test_errors_propagate_and_pipeline_stays_reusable(self) -> None:
        piped = pipe(int, double)

        with pytest.raises(ValueError):
            piped("x")
        assert piped("21") == 42

    def test_non_callable_step_rejected(self) -> None:
        with pytest.raises(TypeError):
            pipe(double, "nope")  # type: ignore[arg-type]

    def test_len_and_repr(self) -> None:
        piped = pipe(double, add_one)

        assert len(piped) == 2
        assert repr(piped) == "Pipeline(double, add_one)"
        assert repr(compose(double, add_one)) == "Pipeline(add_one, double)"
