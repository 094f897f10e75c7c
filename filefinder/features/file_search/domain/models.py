from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from filefinder.core.common.enums import EntryKind
from filefinder.core.config.settings import settings

@dataclass(frozen=True)
class ScanConfig:
    """
    What to look for and where.
    The size threshold is always stored in bytes.
    """
    root_path: Path
    extension: str
    min_size_bytes: int = 0

    def __post_init__(self):
        if self.min_size_bytes < 0:
            raise ValueError(f"Minimum size cannot be negative: {self.min_size_bytes}")

        # Stored without the dot and lower-cased, so ".JPG" and "jpg" mean the same
        normalized = self.extension.lower()
        if normalized.startswith("."):
            normalized = normalized[1:]
        object.__setattr__(self, "extension", normalized)
        object.__setattr__(self, "root_path", Path(self.root_path))

    @classmethod
    def from_megabytes(cls, root_path, extension: str, min_size_mb: int) -> "ScanConfig":
        if min_size_mb < 0:
            raise ValueError(f"Minimum size cannot be negative: {min_size_mb}MB")
        return cls(
            root_path=Path(root_path),
            extension=extension,
            min_size_bytes=min_size_mb * settings.MEGABYTE_IN_BYTES
        )

@dataclass(frozen=True)
class FileEntry:
    """
    One node seen by the walker. Lives only as long as the filter needs it.
    """
    absolute_path: str
    size_bytes: int
    extension: str
    kind: EntryKind = EntryKind.FILE
    is_symlink: bool = False

    @property
    def is_file(self) -> bool:
        return self.kind == EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    @property
    def can_descend(self) -> bool:
        # Linked directories are listed but never entered
        return self.is_dir and not self.is_symlink

@dataclass(frozen=True)
class ReportRow:
    absolute_path: str
    human_size: str

    def __str__(self) -> str:
        return f"{self.absolute_path} - {self.human_size}"

@dataclass
class ScanSummary:
    """
    Running totals for one scan. Filled in while the stream is consumed.
    """
    entries_seen: int = 0
    files_matched: int = 0
    errors: List[str] = field(default_factory=list)
