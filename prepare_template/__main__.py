import asyncio
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import click
from rich.console import Console

from prepare_template.errors import PrepareAppError
from prepare_template.manifest import ManifestSynchronizer
from prepare_template.models import (
    ManifestConfig,
    ManifestSyncResult,
    ScannerConfig,
    ScanReport,
)
from prepare_template.prompt import ask_custom_tokens
from prepare_template.scanner import SignatureScanner
from prepare_template.tui import PrepareConsoleUI


def _manifest_config(obj: Dict[str, Any]) -> ManifestConfig:
    return ManifestConfig(root=obj["root"], reset_defaults=obj["reset_defaults"])


def _run_sync(ui: PrepareConsoleUI, obj: Dict[str, Any]) -> ManifestSyncResult:
    try:
        result = ManifestSynchronizer(_manifest_config(obj)).sync()
    except PrepareAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    ui.render_sync_result(result)
    return result


def _run_scan(
    ui: PrepareConsoleUI, obj: Dict[str, Any], custom: Optional[Sequence[str]]
) -> ScanReport:
    config = ScannerConfig.with_custom_tokens(obj["root"], custom)
    ui.render_scan_start(config)
    report = asyncio.run(SignatureScanner(config, reporter=ui).scan())
    ui.render_scan_report(report, config.tokens)
    return report


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Project root. Defaults to the current directory.",
)
@click.option(
    "--reset-defaults",
    is_flag=True,
    default=False,
    help="Overwrite .env and manifest.json with their default content first.",
)
@click.pass_context
def cli(ctx: click.Context, root: Optional[Path], reset_defaults: bool) -> None:
    """Sync manifest.json with package.json, then scan for signature words."""
    ctx.obj = {
        "root": (root or Path.cwd()).expanduser().resolve(),
        "reset_defaults": reset_defaults,
    }
    if ctx.invoked_subcommand is not None:
        return

    ui = PrepareConsoleUI(Console())
    _run_sync(ui, ctx.obj)
    custom = ask_custom_tokens()
    _run_scan(ui, ctx.obj, custom)


@cli.command(help="Sync manifest.json with package.json.")
@click.pass_obj
def sync(obj: Dict[str, Any]) -> None:
    _run_sync(PrepareConsoleUI(Console()), obj)


@cli.command(help="Scan the project tree for signature words.")
@click.option(
    "--token",
    "-t",
    "tokens",
    multiple=True,
    help="Extra signature word, appended to the defaults. Repeatable.",
)
@click.pass_obj
def scan(obj: Dict[str, Any], tokens: tuple[str, ...]) -> None:
    _run_scan(PrepareConsoleUI(Console()), obj, tokens)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
