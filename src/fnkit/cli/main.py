"""fnkit CLI 메인 엔트리"""
import typer
from rich.console import Console
from fnkit.cli.commands import config, demo, laws

console = Console()

app = typer.Typer(
    name="fnkit",
    help="fnkit - curry, compose, pipe and monadic composition toolkit",
    add_completion=False,
)

# 서브커맨드 등록
app.add_typer(demo.app, name="demo")
app.add_typer(config.app, name="config")
app.command("laws")(laws.laws)


@app.callback()
def main_callback() -> None:
    """fnkit CLI"""
    pass


@app.command()
def version() -> None:
    """버전 정보 출력"""
    from fnkit.cli import __version__
    console.print(f"[bold blue]fnkit[/bold blue] version [green]{__version__}[/green]")


def cli() -> None:
    """CLI 진입점"""
    app()


if __name__ == "__main__":
    cli()
