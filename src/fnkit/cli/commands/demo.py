"""합성 예제 실행 커맨드"""
import asyncio
from pathlib import Path
from typing import Any, Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fnkit.cli.commands.config import ConfigOption, LogLevelOption, resolve_config
from fnkit.curry import curry
from fnkit.deferred import Deferred
from fnkit.monads import Identity
from fnkit.pipeline import compose, compose_with, flip, pipe, tracer

app = typer.Typer(help="curry/compose/pipe/flip/chain 예제")
console = Console()


def inc(n: int) -> int:
    return n + 1


def double(n: int) -> int:
    return n * 2


def _trace(config_path: Optional[Path], log_level: Optional[str]) -> Callable[..., Any]:
    """설정의 template으로 콘솔에 출력하는 trace"""
    config = resolve_config(config_path, log_level)
    if not config.trace.enabled:
        return curry(lambda label, value: value)
    return tracer(
        template=config.trace.template,
        emit=lambda line: console.print(line, markup=False, style="dim"),
    )


def _show(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title)
    table.add_column("호출", style="cyan")
    table.add_column("결과", style="green")
    for call, value in rows:
        table.add_row(call, escape(repr(value)))
    console.print(table)


@app.command("curry")
def curry_demo(
    config_path: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """4항 함수를 여러 방식으로 나눠 호출"""
    resolve_config(config_path, log_level)
    add4 = curry(lambda a, b, c, d: a + b + c + d)
    _show("curry", [
        ("f(1, 2, 3, 4)", add4(1, 2, 3, 4)),
        ("f(1, 2, 3)(4)", add4(1, 2, 3)(4)),
        ("f(1)(2, 3, 4)", add4(1)(2, 3, 4)),
        ("f(1, 2)(3, 4)", add4(1, 2)(3, 4)),
        ("f(1)(2)(3)(4)", add4(1)(2)(3)(4)),
    ])


@app.command("compose")
def compose_demo(
    value: int = typer.Argument(20, help="입력값"),
    config_path: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """compose(double, inc) - 아래에서 위로 적용"""
    trace = _trace(config_path, log_level)
    h = compose(trace("after double"), double, trace("after inc"), inc)
    _show("compose", [(f"compose(double, inc)({value})", h(value))])


@app.command("pipe")
def pipe_demo(
    value: int = typer.Argument(20, help="입력값"),
    config_path: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """pipe(inc, double) - 위에서 아래로 적용"""
    trace = _trace(config_path, log_level)
    h = pipe(inc, trace("after inc"), double, trace("after double"))
    _show("pipe", [(f"pipe(inc, double)({value})", h(value))])


@app.command("flip")
def flip_demo(
    config_path: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """data-first 함수를 data-last로"""
    trace = _trace(config_path, log_level)
    subtract = lambda a: lambda b: a - b  # noqa: E731
    traced_first = lambda value: lambda label: trace(label, value)  # noqa: E731
    h = pipe(inc, flip(traced_first)("after inc"), double)
    _show("flip", [
        ("flip(a => b => a - b)(3)(10)", flip(subtract)(3)(10)),
        ("pipe(inc, flip(trace)(label), double)(20)", h(20)),
    ])


@app.command("chain")
def chain_demo(
    value: int = typer.Argument(20, help="입력값"),
    config_path: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Kleisli 합성 (Identity.chain, Deferred.then)"""
    trace = _trace(config_path, log_level)
    lifted = compose_with("chain")(
        lambda n: Identity.of(double(n)),
        lambda n: Identity.of(trace("after inc", inc(n))),
    )

    async def fetch_inc(n: int) -> int:
        await asyncio.sleep(0)
        return inc(n)

    deferred = compose_with("then")(double, Deferred.from_async(fetch_inc))
    _show("chain", [
        (f"compose_with('chain')(double, inc)({value})", lifted(value)),
        (f"compose_with('then')(double, fetch_inc)({value})", asyncio.run(deferred(value).run())),
    ])
