"""
Currency Units

Conversion between native-currency amounts and their smallest unit.
Fees and payments are always handled as integers of the smallest unit.
"""

from decimal import Decimal, InvalidOperation, Overflow


# Smallest-unit precision of the native currency (wei per ether)
DEFAULT_DECIMALS = 18


def to_base_units(amount: Decimal | str | int, decimals: int = DEFAULT_DECIMALS) -> int:
    """
    Convert a native-currency amount to smallest units.

    Args:
        amount: Amount in native units, e.g. Decimal("0.0069") or ".0069"
        decimals: Number of decimal places of the smallest unit

    Returns:
        Integer amount of smallest units

    Raises:
        ValueError: If the amount is not a number, is negative, is out of
            range, or is finer than one smallest unit

    Example:
        >>> to_base_units(".0069")
        6900000000000000
    """
    try:
        value = Decimal(str(amount)) if not isinstance(amount, Decimal) else amount
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount!r}")

    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")
    if value < 0:
        raise ValueError(f"Amount cannot be negative: {amount}")

    try:
        scaled = value.scaleb(decimals)
    except (Overflow, InvalidOperation):
        raise ValueError(f"Amount out of range: {amount}")

    if scaled != scaled.to_integral_value():
        raise ValueError(f"Amount {amount} has more than {decimals} decimal places")

    return int(scaled)


def from_base_units(value: int, decimals: int = DEFAULT_DECIMALS) -> Decimal:
    """Convert smallest units back to a native-currency amount"""
    return Decimal(value) / (Decimal(10) ** decimals)
