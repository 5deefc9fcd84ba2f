# ABOUTME: Human-readable rendering of sizes, durations, and per-file results.
# ABOUTME: Plain string helpers shared by the CLI commands.

from hashpool.core.digest import FileResult

_UNIT = 1024
_PREFIXES = "KMGTPE"


def format_size(num_bytes: int) -> str:
    """Format a byte count with binary prefixes, e.g. 1536 -> '1.5 KB'."""
    if num_bytes < _UNIT:
        return f"{num_bytes} B"
    div, exp = _UNIT, 0
    n = num_bytes // _UNIT
    while n >= _UNIT and exp < len(_PREFIXES) - 1:
        div *= _UNIT
        exp += 1
        n //= _UNIT
    return f"{num_bytes / div:.1f} {_PREFIXES[exp]}B"


def format_duration(seconds: float) -> str:
    """Format seconds using the largest unit that keeps the value >= 1.

    Units are chosen on the rounded value, so 59.996 renders as '1m00.0s'
    rather than '60.00s'.
    """
    micros = round(seconds * 1e6)
    if micros < 1000:
        return f"{micros}µs"
    millis = round(seconds * 1e3, 2)
    if millis < 1000:
        return f"{millis:.2f}ms"
    secs = round(seconds, 2)
    if secs < 60:
        return f"{secs:.2f}s"
    minutes, rest = divmod(round(seconds, 1), 60)
    return f"{int(minutes)}m{rest:04.1f}s"


def format_result(result: FileResult) -> str:
    """Render one result as a checksum line or an error line."""
    if result.error is not None:
        return f"ERROR: {result.path} - {result.error}"
    return (
        f"{result.digest}  {result.name} "
        f"({format_size(result.size or 0)}, {format_duration(result.duration)})"
    )
