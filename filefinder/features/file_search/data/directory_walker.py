import os
import logging
from pathlib import Path
from typing import Callable, Iterator, Optional
from filefinder.core.common.enums import EntryKind
from ..domain.interfaces import IDirectoryWalker
from ..domain.models import FileEntry
from ..domain.errors import PathError, EntryReadError

logger = logging.getLogger(__name__)

SkipCallback = Callable[[EntryReadError], None]

def extension_of(name: str) -> str:
    """
    Text after the last dot of a file name, or "" when there is no dot.
    """
    _, dot, ext = name.rpartition(".")
    return ext if dot else ""

class LocalDirectoryWalker(IDirectoryWalker):
    """
    Depth-first walker built on os.scandir.

    Every directory handle is opened in a `with` block, so it is released
    when its children run out, when an error escapes, or when the consumer
    closes the generator early. Symlinked directories are reported but not
    descended into.

    Recursion is one nested generator per directory level, so a walk keeps
    one open handle per level and a pathologically deep tree can hit
    Python's recursion limit (RecursionError).
    """

    def __init__(self, on_skip: Optional[SkipCallback] = None):
        self.on_skip = on_skip

    def walk(self, root: Path) -> Iterator[FileEntry]:
        # Validation runs now, not on the first next()
        root_dir = self._validate_root(root)
        logger.info(f"Walking: {root_dir}")
        return self._walk_dir(root_dir, is_root=True)

    def _validate_root(self, root: Path) -> str:
        root_dir = os.path.abspath(os.fspath(root))
        if not os.path.exists(root_dir):
            raise PathError(root_dir, "Scan root not found")
        if not os.path.isdir(root_dir):
            raise PathError(root_dir, "Scan root is not a directory")
        if not os.access(root_dir, os.R_OK | os.X_OK):
            raise PathError(root_dir, "Scan root is not readable")
        return root_dir

    def _walk_dir(self, directory: str, is_root: bool = False) -> Iterator[FileEntry]:
        try:
            handle = os.scandir(directory)
        except OSError as e:
            if is_root:
                raise PathError(directory, f"Cannot open scan root ({e.strerror or e})") from e
            self._skip(EntryReadError(directory, e.strerror or str(e)))
            return

        # scandir never yields "." or ".."
        with handle as entries:
            pending = iter(entries)
            while True:
                try:
                    dir_entry = next(pending)
                except StopIteration:
                    break
                except OSError as e:
                    # readdir failed partway: give up on the rest of this directory only
                    self._skip(EntryReadError(directory, e.strerror or str(e)))
                    break

                try:
                    entry = self._describe(dir_entry)
                except EntryReadError as e:
                    self._skip(e)
                    continue

                yield entry

                if entry.can_descend:
                    yield from self._walk_dir(dir_entry.path)

    def _describe(self, dir_entry: os.DirEntry) -> FileEntry:
        """
        Turns a raw DirEntry into a FileEntry.
        Raises EntryReadError if the entry vanished or cannot be stat'ed.
        """
        try:
            if dir_entry.is_dir():
                kind = EntryKind.DIRECTORY
            elif dir_entry.is_file():
                kind = EntryKind.FILE
            else:
                kind = EntryKind.OTHER
            size = dir_entry.stat().st_size if kind == EntryKind.FILE else 0
            is_symlink = dir_entry.is_symlink()
            absolute_path = os.path.realpath(dir_entry.path)
        except OSError as e:
            raise EntryReadError(dir_entry.path, e.strerror or str(e)) from e

        return FileEntry(
            absolute_path=absolute_path,
            size_bytes=size,
            extension=extension_of(dir_entry.name),
            kind=kind,
            is_symlink=is_symlink
        )

    def _skip(self, error: EntryReadError) -> None:
        logger.warning(f"Skipping unreadable entry: {error}")
        if self.on_skip:
            self.on_skip(error)
