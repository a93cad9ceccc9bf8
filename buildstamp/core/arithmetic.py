"""
Integer arithmetic with native 32-bit overflow semantics.
"""

INT_BITS = 32
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1

_MASK = (1 << INT_BITS) - 1


def _wrap(value: int) -> int:
    """Reduce an integer to signed 32-bit two's complement."""
    value &= _MASK
    if value > INT_MAX:
        value -= 1 << INT_BITS
    return value


def add(left: int, right: int) -> int:
    """
    Add two integers.

    Args:
        left: First operand
        right: Second operand

    Returns:
        int: The sum, wrapped to the signed 32-bit range

    Raises:
        TypeError: If either operand is not an int.
    """
    for operand in (left, right):
        if isinstance(operand, bool) or not isinstance(operand, int):
            raise TypeError(f"add() expects int operands, got {type(operand).__name__}")

    return _wrap(left + right)
