class PathError(OSError):
    """
    The scan root is missing, is not a directory, or cannot be read.
    """
    def __init__(self, path, reason: str):
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason

class EntryReadError(OSError):
    """
    A single entry became unreadable while the tree was being walked.
    The walker skips it and carries on with the siblings.
    """
    def __init__(self, path, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
