from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from prepare_template.models import (
    ManifestRecord,
    ManifestSyncResult,
    MANIFEST_FIELDS,
    ScannerConfig,
    ScanReport,
)
from prepare_template.tui.enums import SYNC_STATUS_STYLE, UIStyle
from prepare_template.utils import compact_home_path


class ManifestTable:
    @staticmethod
    def summary_block(result: ManifestSyncResult):
        style = SYNC_STATUS_STYLE.get(result.status, UIStyle.WHITE.value)
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Status", f"[{style}]{result.status.value}[/{style}]")
        if result.mismatched:
            table.add_row("Changed", ", ".join(result.mismatched))
        if result.backup_path is not None:
            table.add_row("Backup", escape(compact_home_path(result.backup_path)))
        if result.created:
            table.add_row(
                "Created", escape("\n".join(compact_home_path(path) for path in result.created))
            )
        return table

    @staticmethod
    def fields_table(record: ManifestRecord, mismatched: list[str]) -> Table:
        table = Table(
            Column(header="Field", width=12),
            Column(header="Value", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for key in MANIFEST_FIELDS:
            value = getattr(record, key)
            text = "" if value is None else escape(str(value))
            if key in mismatched:
                text = f"[{UIStyle.YELLOW.value}]{text}[/{UIStyle.YELLOW.value}]"
            table.add_row(key, text)
        return table


class ScanTable:
    @staticmethod
    def config_block(config: ScannerConfig):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Root", escape(compact_home_path(config.root)))
        table.add_row("Tokens", escape("  ".join(config.tokens)) or "none")
        table.add_row("Excluded", "  ".join(sorted(config.excluded_dirs)) or "none")
        return table

    @staticmethod
    def summary_block(report: ScanReport):
        table = Table(show_header=False, box=None)
        for key, value in report.summary().items():
            table.add_row(f"[bold]{key}[/bold]", str(value))
        return table

    @staticmethod
    def tokens_table(report: ScanReport, tokens: tuple[str, ...]) -> Table:
        counts = Counter(match.token for match in report.matches)
        files = {
            token: len({match.path for match in report.matches if match.token == token})
            for token in tokens
        }
        table = Table(
            Column(header="Token", width=20),
            Column(header="Matches", width=8, justify="right"),
            Column(header="Files", width=8, justify="right"),
            expand=True,
            header_style="bold",
        )
        for token in tokens:
            style = UIStyle.GREEN.value if counts[token] else UIStyle.DIM.value
            table.add_row(
                f"[{style}]{escape(token)}[/{style}]", str(counts[token]), str(files[token])
            )
        return table
