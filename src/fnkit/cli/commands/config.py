"""설정 커맨드"""
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from fnkit.config import AppConfig, load_config, merge_config
from fnkit.errors import error_to_dict
from fnkit.logger import configure_logging
from fnkit.result import Failure

app = typer.Typer(help="설정 관리")
console = Console()

ConfigOption = typer.Option(
    None,
    "--config", "-c",
    help="YAML 설정 파일 경로",
)
LogLevelOption = typer.Option(
    None,
    "--log-level", "-l",
    help="로그 레벨 (설정 파일보다 우선)",
)


def resolve_config(config_path: Optional[Path], log_level: Optional[str]) -> AppConfig:
    """설정 로드 + CLI 오버라이드 + 로깅 적용 (실패 시 종료)"""
    result = load_config(config_path)
    if isinstance(result, Failure):
        console.print(f"[bold red]Error: {escape(error_to_dict(result.error)['message'])}[/bold red]")
        raise typer.Exit(1)

    config = result.value
    if log_level is not None:
        try:
            config = merge_config(config, {"logging": {"level": log_level.upper()}})
        except PydanticValidationError as e:
            console.print(f"[bold red]Error: invalid --log-level {log_level!r}[/bold red]")
            raise typer.Exit(1) from e

    configure_logging(config.logging)
    return config


@app.command("show")
def show(
    config_path: Optional[Path] = ConfigOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """적용될 설정 출력 (YAML)"""
    config = resolve_config(config_path, log_level)
    rendered = yaml.safe_dump(config.model_dump(), sort_keys=False, allow_unicode=True)
    console.print(Syntax(rendered, "yaml"))
