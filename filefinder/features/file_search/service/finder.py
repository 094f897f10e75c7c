import logging
from typing import Iterator, Optional

from ..domain.interfaces import IDirectoryWalker
from ..domain.models import ScanConfig, ScanSummary, ReportRow, FileEntry
from ..data.directory_walker import LocalDirectoryWalker
from ..data.match_rules import MatchRules
from ..data.size_formatter import human_size

logger = logging.getLogger(__name__)

class ReportStream:
    """
    Lazy, single-pass sequence of ReportRow.

    Each row is computed only when next() asks for it. Stopping early
    (break, close(), leaving a `with` block, or dropping the stream)
    closes the underlying walk and releases any open directory handles.
    """

    def __init__(self, entries: Iterator[FileEntry], config: ScanConfig, summary: ScanSummary):
        self.config = config
        self.summary = summary
        self._entries = entries
        self._rows = self._generate()

    def __iter__(self) -> "ReportStream":
        return self

    def __next__(self) -> ReportRow:
        return next(self._rows)

    def close(self) -> None:
        self._rows.close()

    def __enter__(self) -> "ReportStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _generate(self) -> Iterator[ReportRow]:
        try:
            for entry in self._entries:
                self.summary.entries_seen += 1

                if not MatchRules.is_match(entry, self.config):
                    continue

                self.summary.files_matched += 1
                logger.debug(f"Match: {entry.absolute_path} ({entry.size_bytes} bytes)")
                yield ReportRow(
                    absolute_path=entry.absolute_path,
                    human_size=human_size(entry.size_bytes)
                )

            logger.info(
                f"Scan complete. Matched: {self.summary.files_matched}/{self.summary.entries_seen} entries, "
                f"skipped: {len(self.summary.errors)}"
            )
        finally:
            close = getattr(self._entries, "close", None)
            if close is not None:
                close()

class FileFinder:
    """
    Walks config.root_path and reports files with the configured extension
    that are larger than the configured size.
    """

    def __init__(self, config: ScanConfig, walker: Optional[IDirectoryWalker] = None):
        self.config = config
        self.walker = walker

    def run(self) -> ReportStream:
        """
        Starts a fresh scan. Every call walks the tree again from scratch.

        Raises:
            PathError: Immediately, if the root cannot be scanned.
        """
        summary = ScanSummary()
        walker = self.walker or LocalDirectoryWalker(
            on_skip=lambda error: summary.errors.append(str(error))
        )

        logger.info(
            f"Starting scan of: {self.config.root_path} "
            f"(*.{self.config.extension} > {self.config.min_size_bytes} bytes)"
        )
        entries = walker.walk(self.config.root_path)
        return ReportStream(entries, self.config, summary)
