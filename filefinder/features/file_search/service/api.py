from pathlib import Path
from typing import Union
from ..domain.models import ScanConfig
from .finder import FileFinder, ReportStream

def find_files(root_path: Union[str, Path], extension: str, min_size_mb: int) -> ReportStream:
    """
    Public Service API: Find files by extension that are bigger than a size.

    Args:
        root_path: Directory to scan recursively.
        extension: Target extension, without the dot. Case is ignored.
        min_size_mb: Files must be strictly larger than this many megabytes.

    Returns:
        A lazy ReportStream of (absolute_path, human_size) rows.

    Raises:
        PathError: If root_path is missing, not a directory, or unreadable.
    """
    # 1. Map Primitives to Domain Objects
    config = ScanConfig.from_megabytes(root_path, extension, min_size_mb)

    # 2. Start the scan (the walk itself is lazy)
    return FileFinder(config).run()
