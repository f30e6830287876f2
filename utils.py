# --- utils.py ---

SIZE_UNITS = ('B', 'KB', 'MB', 'GB', 'TB', 'PB')
SIZE_STEP = 1000.0  # decimal units, like disk vendors


def format_bytes(size_bytes: int) -> str:
    """
Signature: `format_bytes(size_bytes: int) -> str`

Renders a directory or file size for display, e.g. 24933642 -> "24.93 MB".
Negative sizes never occur in a replayed tree and render as "0 B".
"""
    if size_bytes < 0:
        return "0 B"

    value = float(size_bytes)
    for unit in SIZE_UNITS[:-1]:
        if value < SIZE_STEP:
            return f"{value:.2f} {unit}"
        value /= SIZE_STEP
    return f"{value:.2f} {SIZE_UNITS[-1]}"


def calculate_percentage(part: int, whole: int) -> float:
    """
Signature: `calculate_percentage(part: int, whole: int) -> float`

Share of the disk taken by `part`, in percent. A zero-sized disk gives 0.0.
"""
    return (part / whole) * 100.0 if whole else 0.0


def format_size(size_bytes: int, human: bool = False) -> str:
    """Raw byte count by default, format_bytes when `human` is set."""
    return format_bytes(size_bytes) if human else str(size_bytes)
