from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel

from .config import AppConfig, build_app_config
from .dry_run import DryRunPreview, build_preview
from .template import TilTemplate
from .writer import FileWriter

app = typer.Typer(add_completion=False, help="Creates today's TIL markdown entry.")

log = logging.getLogger(__name__)


@app.command()
def create(
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        envvar="TIL_ROOT",
        help="Root directory for entries (default: current directory).",
    ),
    date_value: Optional[str] = typer.Option(
        None,
        "--date",
        help="Create the entry for this date (YYYY-MM-DD) instead of today.",
    ),
    timezone: Optional[str] = typer.Option(
        None,
        "--timezone",
        help="Timezone used to determine today's date (IANA identifier).",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the entry without writing it."),
    verbose: bool = typer.Option(
        False,
        "--verbose/--no-verbose",
        help="Show log output while creating the entry.",
    ),
):
    """Writes <root>/YYYY/MM/MMDD.md from the TIL template."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        config = build_app_config(
            root=root,
            date_value=date_value,
            timezone_name=timezone,
            dry_run=dry_run,
        )
    except ValueError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    console = Console()
    try:
        run_app(config, console)
    except KeyboardInterrupt:
        console.print("\n[red]Aborted.[/]")
        raise typer.Exit(code=130)


def run_app(
    config: AppConfig,
    console: Console,
    *,
    template: TilTemplate | None = None,
    writer: FileWriter | None = None,
) -> Path | None:
    template = template or TilTemplate()
    log.info("Resolved entry for %s at %s", config.stamp.isoformat(), config.paths.file_path)

    if config.dry_run:
        print_dry_run(console, build_preview(config, template))
        return None

    content = template.render(config.stamp)
    target = (writer or FileWriter()).write(config.paths.file_path, content)
    print_confirmation(console, target)
    return target


def print_confirmation(console: Console, target: Path) -> None:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    console.print(f"✅ TIL 파일 생성됨: {target}", markup=False, highlight=False, emoji=False, soft_wrap=True)
    console.print(f"[{timestamp}] TIL created", markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_dry_run(console: Console, preview: DryRunPreview) -> None:
    console.print(f"[bold]Would {preview.action}:[/] {escape(str(preview.paths.file_path))}", soft_wrap=True, emoji=False)
    if not preview.folder_exists:
        console.print(f"[yellow]Folder will be created:[/] {escape(str(preview.paths.folder_path))}", soft_wrap=True, emoji=False)
    console.print(Panel(Markdown(preview.content), title="Preview"))


def main() -> None:
    app()


__all__ = ["app", "main", "run_app"]
