"""Literal Matcher.

Supports:
    - Exact integer: ExactNum(5) vs 5
    - Exact string: ExactStr("foo") vs b"foo"
    - Prefix: PrefixStr("foo") vs b"foobar"
    - Contains: ContainStr("foo") vs b"xxfooyy"
    - Any: AnyLiteral() vs any present literal

Integer modes never match strings and string modes never match integers.
"""

from hiepat.ir.literal import AnyLiteral, ContainStr, ExactNum, ExactStr, LiteralPattern, PrefixStr


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def literal_matches(pattern: LiteralPattern, value: int | bytes | None) -> bool:
    """Match a node literal against a literal pattern.

    Args:
        pattern: Literal pattern
        value: Literal value of the node, ``None`` if it has none

    Returns:
        True if matches, False otherwise

    Examples:
        >>> literal_matches(ContainStr("foo"), b"xxfooyy")
        True

        >>> literal_matches(ExactNum(5), b"5")
        False
    """
    if value is None:
        return False

    if isinstance(pattern, AnyLiteral):
        return True

    if isinstance(pattern, ExactNum):
        return _is_int(value) and value == pattern.value

    if not isinstance(value, bytes):
        return False

    if isinstance(pattern, ExactStr):
        return value == pattern.value
    if isinstance(pattern, PrefixStr):
        return value.startswith(pattern.value)
    if isinstance(pattern, ContainStr):
        return pattern.value in value

    return False
