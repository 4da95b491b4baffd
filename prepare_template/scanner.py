import os
import stat
from pathlib import Path
from typing import Optional, Protocol, Sequence

import aiofiles
import aiofiles.os

from prepare_template.errors import UnsupportedEntryError
from prepare_template.models import (
    ScanError,
    ScanErrorKind,
    ScannerConfig,
    ScanReport,
    SignatureMatch,
    normalize_tokens,
)


def _identity(entry_stat: os.stat_result) -> tuple[int, int]:
    return entry_stat.st_dev, entry_stat.st_ino


class ScanReporter(Protocol):
    def match_found(self, match: SignatureMatch) -> None: ...

    def scan_failed(self, error: ScanError) -> None: ...


class SignatureScanner:
    """Walks a source tree and reports lines containing signature tokens.

    Traversal is depth-first and strictly sequential: each subtree is awaited
    before the next sibling is visited. Errors are contained per directory;
    the first failure inside a directory stops the rest of that directory
    but never propagates to the parent.
    """

    def __init__(
        self, config: ScannerConfig, reporter: Optional[ScanReporter] = None
    ) -> None:
        self.config = config
        self.reporter = reporter

    @property
    def tokens(self) -> tuple[str, ...]:
        return self.config.tokens

    async def scan(self) -> ScanReport:
        report = ScanReport()
        await self.walk(self.config.root, report)
        return report

    async def walk(
        self,
        directory: Path,
        report: ScanReport,
        entered: Optional[set[tuple[int, int]]] = None,
    ) -> None:
        # Directories are tracked by (device, inode) so symlink cycles and
        # aliases are entered once.
        if entered is None:
            entered = set()
        try:
            entered.add(_identity(await aiofiles.os.stat(directory)))
            names = sorted(await aiofiles.os.listdir(directory))
            for name in names:
                entry = directory / name
                entry_stat = await aiofiles.os.stat(entry)
                entry_mode = entry_stat.st_mode

                if stat.S_ISDIR(entry_mode):
                    if name in self.config.excluded_dirs:
                        continue
                    if _identity(entry_stat) in entered:
                        continue
                    await self.walk(entry, report, entered)
                elif stat.S_ISREG(entry_mode):
                    report.visited.append(entry)
                    for match in await self.search(entry):
                        report.matches.append(match)
                        if self.reporter is not None:
                            self.reporter.match_found(match)
                else:
                    raise UnsupportedEntryError(entry)
        except FileNotFoundError as exc:
            missing = Path(exc.filename) if exc.filename else directory
            self._record_error(
                report,
                ScanError(
                    kind=ScanErrorKind.MISSING,
                    path=missing,
                    message=f"File or directory not found: {missing}",
                ),
            )
        except UnsupportedEntryError as exc:
            self._record_error(
                report,
                ScanError(
                    kind=ScanErrorKind.UNSUPPORTED, path=exc.path, message=str(exc)
                ),
            )
        except (OSError, UnicodeDecodeError) as exc:
            self._record_error(
                report,
                ScanError(
                    kind=ScanErrorKind.IO,
                    path=directory,
                    message=f"Error reading directory {directory}: {exc}",
                ),
            )

    async def search(
        self, path: Path, tokens: Optional[Sequence[str]] = None
    ) -> list[SignatureMatch]:
        targets = self.tokens if tokens is None else normalize_tokens(tokens)
        async with aiofiles.open(path, "r", encoding="utf-8", newline="") as handle:
            content = await handle.read()

        matches: list[SignatureMatch] = []
        for index, raw_line in enumerate(content.split("\n")):
            line = raw_line.upper()
            for target in targets:
                if target in line:
                    matches.append(SignatureMatch(token=target, line=index, path=path))
        return matches

    def _record_error(self, report: ScanReport, error: ScanError) -> None:
        report.errors.append(error)
        if self.reporter is not None:
            self.reporter.scan_failed(error)


async def scan_tree(
    config: ScannerConfig, reporter: Optional[ScanReporter] = None
) -> ScanReport:
    return await SignatureScanner(config, reporter=reporter).scan()
