"""Brazilian-locale normalizers for amounts and dates.

The exports use ``.`` as thousands separator and ``,`` as decimal separator
(``"414.708,07"``) and ``DD/MM/YYYY`` dates. Parsing here is tolerant: blank or
garbled cells degrade to ``Decimal("0")`` / the raw text instead of raising,
because real exports are full of them.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_ZERO = Decimal("0")
_CENTS = Decimal("0.01")

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_amount(raw: str | None) -> Decimal:
    """Parse a Brazilian-formatted number into a ``Decimal``.

    Every ``.`` is dropped, then the first ``,`` becomes the decimal point.
    Empty, non-numeric and non-finite inputs yield ``Decimal("0")``.

    >>> parse_amount("414.708,07")
    Decimal('414708.07')
    """

    if raw is None:
        return _ZERO
    s = raw.strip()
    if not s:
        return _ZERO
    s = s.replace(".", "").replace(",", ".", 1)
    try:
        d = Decimal(s)
    except InvalidOperation:
        return _ZERO
    # Decimal accepts "NaN" and "Infinity"; neither is an amount.
    if not d.is_finite():
        return _ZERO
    return d


def parse_date(raw: str | None) -> str:
    """Convert ``DD/MM/YYYY`` into ``YYYY-MM-DD``.

    Anything that does not split into exactly three ``/``-separated parts is
    returned unchanged (stripped), so callers can tell it is not ISO.
    """

    if raw is None:
        return ""
    s = raw.strip()
    if not s:
        return ""
    parts = s.split("/")
    if len(parts) == 3:
        day, month, year = parts
        return f"{year}-{month}-{day}"
    return s


def month_key(iso_date: str | None) -> str | None:
    """Return the ``YYYY-MM`` bucket for an ISO date, or ``None``.

    The year must be four digits and the month an integer in 1..12; the month
    is zero-padded on output so keys sort chronologically as strings.
    """

    if not iso_date:
        return None
    parts = iso_date.split("-")
    if len(parts) < 2:
        return None
    year, month = parts[0].strip(), parts[1].strip()
    # ASCII digits only; "²".isdigit() is True but int("²") raises.
    if not (year + month).isascii():
        return None
    if len(year) != 4 or not year.isdigit() or not month.isdigit():
        return None
    m = int(month)
    if not 1 <= m <= 12:
        return None
    return f"{year}-{m:02d}"


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_brl(value: Decimal) -> str:
    """Format ``value`` as Brazilian reais, e.g. ``R$ 1.234,56``."""

    q = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if q < 0 else ""
    # Format with US separators first, then swap them.
    us = f"{abs(q):,.2f}"
    br = us.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {br}"


__all__ = ["parse_amount", "parse_date", "month_key", "format_brl"]
