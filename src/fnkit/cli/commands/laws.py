"""법칙 검증 커맨드"""
from pathlib import Path
from typing import Any, Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fnkit.cli.commands.config import ConfigOption, LogLevelOption, resolve_config
from fnkit.errors import LawViolation, error_to_dict
from fnkit.laws import (
    check_compose_associativity,
    check_flip_involution,
    check_functor_composition,
    check_pipe_compose_duality,
    verify_monad,
)
from fnkit.monads import Identity, ListM, Maybe
from fnkit.result import Failure, Result, Success, validate_all

console = Console()


def _inc(n: int) -> int:
    return n + 1


def _double(n: int) -> int:
    return n * 2


def _lifted(unit: Callable[[Any], Any], f: Callable[[int], int]) -> Callable[[int], Any]:
    return lambda n: unit(f(n))


def _monad_suite(unit: Callable[[Any], Any]) -> Result[list[str], list[LawViolation]]:
    results = verify_monad(unit, 20, _lifted(unit, _inc), _lifted(unit, _double))
    composition = check_functor_composition(unit(20), _double, _inc)
    return validate_all(results, composition)


def _composition_suite() -> Result[list[str], list[LawViolation]]:
    return validate_all(
        check_compose_associativity(str, _double, _inc, 20),
        check_pipe_compose_duality(_inc, _double, 20),
        check_flip_involution(lambda a: lambda b: a - b, 3, 10),
    )


SUITES: dict[str, Callable[[], Result[Any, Any]]] = {
    "Identity": lambda: _monad_suite(Identity.of),
    "Maybe": lambda: _monad_suite(Maybe.of),
    "ListM": lambda: _monad_suite(ListM.of),
    "Result": lambda: _monad_suite(Success.of),
    "compose/pipe/flip": _composition_suite,
}


def _flatten(errors: list[Any]) -> list[LawViolation]:
    """validate_all 중첩 결과에서 위반만 모으기"""
    flat: list[LawViolation] = []
    for e in errors:
        if isinstance(e, list):
            flat.extend(_flatten(e))
        else:
            flat.append(e)
    return flat


def laws(
    config_path: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """functor/monad/합성 법칙 검증"""
    resolve_config(config_path, log_level)

    table = Table(title="법칙 검증")
    table.add_column("대상", style="cyan")
    table.add_column("결과")
    table.add_column("상세", style="dim")

    failed = False
    for name, suite in SUITES.items():
        match suite():
            case Success():
                table.add_row(name, "[green]OK[/green]", "")
            case Failure(error):
                failed = True
                details = "; ".join(
                    error_to_dict(v)["message"] for v in _flatten(error)
                )
                table.add_row(name, "[red]FAIL[/red]", escape(details))

    console.print(table)
    if failed:
        raise typer.Exit(1)
