import pytest

from fnkit.monads import Identity
from fnkit.pipeline import (
    compose,
    compose_m,
    compose_with,
    const,
    flip,
    flip_args,
    identity,
    pipe,
    pipe_m,
    pipe_with,
    tap,
    trace,
    tracer,
)


def inc(n):
    return n + 1


def double(n):
    return n * 2


def test_compose_applies_right_to_left():
    assert compose(double, inc)(20) == 42


def test_pipe_applies_left_to_right():
    assert pipe(inc, double)(20) == 42


def test_empty_pipelines_are_identity():
    assert compose() is identity
    assert pipe() is identity
    assert compose()(5) == 5


def test_compose_identity_law():
    assert compose(identity)("v") == "v"


def test_compose_is_associative():
    left = compose(str, compose(double, inc))
    right = compose(compose(str, double), inc)
    assert left(20) == right(20) == "42"


def test_pipe_compose_duality():
    assert pipe(inc, double)(5) == compose(double, inc)(5)


def test_pipeline_stages_are_captured_at_build_time():
    stages = [inc, double]
    h = pipe(*stages)
    stages.append(str)
    assert h(1) == 4


def test_stage_errors_propagate_unmodified():
    def boom(_):
        raise KeyError("stage")

    with pytest.raises(KeyError):
        pipe(inc, boom)(1)


def test_const():
    assert const(7)("ignored") == 7


def test_flip_reverses_curried_arguments():
    subtract = lambda a: lambda b: a - b  # noqa: E731
    assert flip(subtract)(3)(10) == 7


def test_flip_involution():
    subtract = lambda a: lambda b: a - b  # noqa: E731
    assert flip(flip(subtract))(3)(10) == subtract(3)(10)


def test_flip_args():
    assert flip_args(lambda a, b: a - b)(3, 10) == 7


def test_compose_with_chain():
    lift = Identity.of
    h = compose_with("chain")(lambda n: lift(n * 2), lambda n: lift(n + 1))
    assert h(20) == Identity(42)


def test_pipe_with_orders_left_to_right():
    seen = []

    def stage(name):
        def run(n):
            seen.append(name)
            return Identity(n)
        return run

    pipe_with("chain")(stage("a"), stage("b"), stage("c"))(0)
    assert seen == ["a", "b", "c"]
    seen.clear()
    compose_with("chain")(stage("a"), stage("b"), stage("c"))(0)
    assert seen == ["c", "b", "a"]


def test_compose_with_edge_cases():
    assert compose_with("chain")() is identity
    single = lambda n: Identity(n)  # noqa: E731
    assert compose_with("chain")(single) is single


def test_compose_with_missing_method_raises_attribute_error():
    h = compose_with("chain")(inc, inc)
    with pytest.raises(AttributeError):
        h(1)


def test_compose_m_and_pipe_m():
    f = lambda n: Identity(n * 2)  # noqa: E731
    g = lambda n: Identity(n + 1)  # noqa: E731
    assert compose_m(f, g)(20) == Identity(42)
    assert pipe_m(g, f)(20) == Identity(42)


def test_tracer_emits_and_returns_value():
    lines = []
    t = tracer(emit=lines.append)
    h = pipe(inc, t("after inc"), double, t("after double"))
    assert h(20) == 42
    assert lines == ["after inc: 21", "after double: 42"]


def test_tracer_template():
    lines = []
    t = tracer(template="[{label}] {value}", emit=lines.append)
    assert t("x", 1) == 1
    assert lines == ["[x] 1"]


def test_default_trace_returns_value():
    assert trace("label")(5) == 5


def test_tap():
    seen = []
    assert tap(seen.append)(3) == 3
    assert seen == [3]
