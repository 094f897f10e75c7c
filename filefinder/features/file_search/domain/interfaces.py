from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator
from .models import FileEntry

class IDirectoryWalker(ABC):
    """
    Contract for traversing a directory tree.
    Abstracts os.scandir from the search logic.
    """

    @abstractmethod
    def walk(self, root: Path) -> Iterator[FileEntry]:
        """
        Yields every file and directory under root, depth-first, one by one.

        Raises:
            PathError: If root is missing, not a directory, or unreadable.
                Raised when walk() is called, before anything is yielded.
        """
        pass
