from ..domain.models import FileEntry, ScanConfig

class MatchRules:
    """
    Central logic for which walked entries end up in the report.
    """

    @classmethod
    def matches_extension(cls, entry: FileEntry, extension: str) -> bool:
        """
        True only for regular files whose extension equals the target,
        ignoring case. Directories never match, whatever their name.
        """
        if not entry.is_file:
            return False
        return entry.extension.lower() == extension.lower()

    @classmethod
    def exceeds_min_size(cls, entry: FileEntry, min_size_bytes: int) -> bool:
        # Strictly greater: a file exactly at the threshold is left out
        return entry.size_bytes > min_size_bytes

    @classmethod
    def is_match(cls, entry: FileEntry, config: ScanConfig) -> bool:
        return (
            cls.matches_extension(entry, config.extension)
            and cls.exceeds_min_size(entry, config.min_size_bytes)
        )
