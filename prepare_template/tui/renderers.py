from rich.console import Console

from prepare_template.models import (
    ManifestSyncResult,
    ManifestSyncStatus,
    ScanError,
    ScannerConfig,
    ScanReport,
    SignatureMatch,
)
from prepare_template.tui.enums import SCAN_ERROR_STYLE, UIStyle
from prepare_template.tui.sections import UISection
from prepare_template.tui.tables import ManifestTable, ScanTable
from prepare_template.utils import compact_home_path, compact_home_paths_in_text


class PrepareConsoleUI:
    """Console output for both the manifest sync and the signature scan.

    Also acts as the scanner's reporter so matches and traversal errors are
    printed as soon as they are found.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_sync_result(self, result: ManifestSyncResult) -> None:
        if result.status == ManifestSyncStatus.SYNCED:
            message = "Manifest is synced with package, keep everything as it was."
            style = UIStyle.GREEN.value
        else:
            message = "Manifest is not synced with package's information, rewriting it."
            style = UIStyle.YELLOW.value

        self.console.print(UISection.line((message, style)))
        self.console.print(
            UISection.wrap("manifest", ManifestTable.summary_block(result), style=style)
        )
        if result.status == ManifestSyncStatus.REWRITTEN:
            self.console.print(
                UISection.wrap(
                    "manifest fields",
                    ManifestTable.fields_table(result.record, result.mismatched),
                    style=UIStyle.CYAN.value,
                )
            )

    def render_scan_start(self, config: ScannerConfig) -> None:
        self.console.print(
            UISection.wrap(
                "signature scan",
                ScanTable.config_block(config),
                style=UIStyle.BLUE.value,
            )
        )

    def match_found(self, match: SignatureMatch) -> None:
        self.console.print(
            UISection.line(
                (f'Found "{match.token}" in L#{match.line} of:\n', UIStyle.GREEN.value),
                (compact_home_path(match.path), UIStyle.CYAN.value),
            )
        )

    def scan_failed(self, error: ScanError) -> None:
        style = SCAN_ERROR_STYLE.get(error.kind, UIStyle.RED.value)
        self.console.print(
            UISection.line((compact_home_paths_in_text(error.message), style))
        )

    def render_scan_report(self, report: ScanReport, tokens: tuple[str, ...]) -> None:
        border_style = UIStyle.GREEN.value if not report.errors else UIStyle.YELLOW.value
        self.console.print(
            UISection.wrap("scan summary", ScanTable.summary_block(report), style=border_style)
        )
        if report.matches:
            self.console.print(
                UISection.wrap(
                    "signatures",
                    ScanTable.tokens_table(report, tokens),
                    style=UIStyle.CYAN.value,
                )
            )
        else:
            self.console.print(
                UISection.note("signatures", "No signatures found.", style=UIStyle.DIM.value)
            )

        if report.errors:
            errors_text = "\n".join(
                [f"- {compact_home_paths_in_text(item.message)}" for item in report.errors]
            )
            self.console.print(
                UISection.note("errors", errors_text, style=UIStyle.RED.value)
            )
