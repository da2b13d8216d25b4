"""Human-readable formatting helpers."""

_IEC_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB")


def human_readable_size(num_bytes: int) -> str:
    """
    Format a byte count with IEC binary units.

    Whole values drop the decimals, so the 10 MiB upload limit renders
    as "10MiB" rather than "10.0MiB".

    Example:
        human_readable_size(512)               # "512B"
        human_readable_size(1536)              # "1.5KiB"
        human_readable_size(10 * 1024 * 1024)  # "10MiB"
    """
    if num_bytes < 0:
        raise ValueError("num_bytes must not be negative")
    if num_bytes < 1024:
        return f"{num_bytes}B"

    value = float(num_bytes)
    unit = "B"
    for unit in _IEC_UNITS:
        value /= 1024
        if value < 1024:
            break

    if value.is_integer():
        return f"{int(value)}{unit}"
    return f"{value:.1f}{unit}"
