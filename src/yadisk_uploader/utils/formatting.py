"""Human-readable formatting helpers."""

import math

SI_SIZES = ["B", "kB", "MB", "GB", "TB", "PB", "EB"]


def format_bytes(size: int) -> str:
    """Format a byte count with SI units, e.g. ``82 MB`` or ``1.5 kB``.

    Counts below 10 are printed as is. Larger values are rounded to one
    decimal, which is only shown while the scaled value is below 10.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size < 10:
        return f"{size} B"

    exponent = 0
    while exponent < len(SI_SIZES) - 1 and size >= 1000 ** (exponent + 1):
        exponent += 1

    value = math.floor(size / 1000 ** exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {SI_SIZES[exponent]}"
    return f"{value:.0f} {SI_SIZES[exponent]}"
