KILOBYTE = 1 << 10
MEGABYTE = 1 << 20
GIGABYTE = 1 << 30

# Checked top-down, first hit wins
_UNITS = (
    (GIGABYTE, "GB"),
    (MEGABYTE, "MB"),
    (KILOBYTE, "KB"),
)

def human_size(size: int) -> str:
    """
    Formats a byte count with 1024-based units and two decimals,
    e.g. 1536 -> "1.50KB". Anything under 1KB is shown as whole bytes.
    """
    if size < 0:
        raise ValueError(f"Size cannot be negative: {size}")

    for threshold, suffix in _UNITS:
        if size >= threshold:
            return f"{size / threshold:,.2f}{suffix}"

    return f"{size:,} bytes"
