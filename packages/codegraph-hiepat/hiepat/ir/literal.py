"""Literal patterns.

Comparison modes for constants in code:
- Integer equality: ``ExactNum(5)``
- Byte-string equality, prefix and containment: ``ExactStr``, ``PrefixStr``,
  ``ContainStr``
- Any literal at all: ``AnyLiteral()``

String-valued variants accept ``str`` and keep its UTF-8 encoding, since
literal values extracted from source are raw bytes.
"""

from dataclasses import dataclass
from typing import Literal

from hiepat.errors import PatternConstructionError


def _to_bytes(value: bytes | str, variant: str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bytes):
        return value
    raise PatternConstructionError(
        f"{variant} expects bytes or str, got {type(value).__name__}",
        value=value,
    )


@dataclass(frozen=True)
class ExactNum:
    """Integer literal equal to ``value``."""

    value: int
    kind: Literal["exact_num"] = "exact_num"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise PatternConstructionError(
                f"ExactNum expects int, got {type(self.value).__name__}",
                value=self.value,
            )


@dataclass(frozen=True)
class ExactStr:
    """String literal equal to ``value``."""

    value: bytes
    kind: Literal["exact_str"] = "exact_str"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_bytes(self.value, "ExactStr"))


@dataclass(frozen=True)
class PrefixStr:
    """String literal starting with ``value``."""

    value: bytes
    kind: Literal["prefix_str"] = "prefix_str"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_bytes(self.value, "PrefixStr"))


@dataclass(frozen=True)
class ContainStr:
    """String literal containing ``value``.

    Example: ``ContainStr("foo")`` matches ``"xxfooyy"``.
    """

    value: bytes
    kind: Literal["contain_str"] = "contain_str"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_bytes(self.value, "ContainStr"))


@dataclass(frozen=True)
class AnyLiteral:
    """Any literal value."""

    kind: Literal["any_literal"] = "any_literal"


LiteralPattern = ExactNum | ExactStr | PrefixStr | ContainStr | AnyLiteral

LITERAL_PATTERN_TYPES = (ExactNum, ExactStr, PrefixStr, ContainStr, AnyLiteral)
