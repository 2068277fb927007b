"""Flags of the 6502 processor status register."""

from __future__ import annotations

from enum import Enum


class ProcessorStatus(Enum):
    """Status register flags, each valued by its bit mask (NV1B DIZC)."""

    CARRY = 0b0000_0001
    ZERO = 0b0000_0010
    INTERRUPT_DISABLE = 0b0000_0100
    DECIMAL = 0b0000_1000
    # No CPU effect; only meaningful in the copy pushed to the stack.
    B_FLAG = 0b0001_0000
    # No CPU effect; always pushed as 1.
    UNUSED = 0b0010_0000
    OVERFLOW = 0b0100_0000
    NEGATIVE = 0b1000_0000


_NOT_QUERYABLE = frozenset({ProcessorStatus.B_FLAG, ProcessorStatus.UNUSED})


def is_flag_set(status: int, flag: ProcessorStatus) -> bool:
    """Return whether the given flag is set in a status register value.

    The B flag and the unused bit have no meaning in the live register,
    so asking for them raises ValueError.
    """
    if flag in _NOT_QUERYABLE:
        raise ValueError(f"{flag.name} has no meaning in the status register")
    return status & flag.value == flag.value