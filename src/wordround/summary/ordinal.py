"""Ordinal number formatting ("1st", "2nd", "3rd", ...)."""

SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def as_ordinal(n: int) -> str:
    """Format a positive count as an English ordinal.

    Args:
        n: Attempt count (1-based)

    Returns:
        Ordinal string such as "1st" or "12th", or "" for anything that is
        not a positive integer
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        return ""

    # 11th, 12th, 13th (and 111th, 212th, ...) break the last-digit rule
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = SUFFIXES.get(n % 10, "th")
    return f"{n}{suffix}"


__all__ = ["as_ordinal", "SUFFIXES"]
