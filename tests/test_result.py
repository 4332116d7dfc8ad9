from fnkit.result import Failure, Success, bind, validate_all


def test_success_is_chainable():
    assert Success.of(1) == Success(1)
    assert Failure.of(1) == Success(1)
    assert Success(2).map(lambda n: n * 3) == Success(6)
    assert Success(2).chain(lambda n: Failure("no")) == Failure("no")


def test_failure_short_circuits():
    err = Failure("bad")
    assert err.map(lambda n: n + 1) is err
    assert err.chain(lambda n: Success(n)) is err


def test_bind():
    assert bind(Success(1), lambda n: Success(n * 10)) == Success(10)
    assert bind(Failure("e"), lambda n: Success(n)) == Failure("e")


def test_validate_all_accumulates_errors():
    assert validate_all(Success(1), Success(2)) == Success([1, 2])
    assert validate_all(Success(1), Failure("a"), Failure("b")) == Failure(["a", "b"])
    assert validate_all() == Success([])
