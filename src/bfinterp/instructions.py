from __future__ import annotations

from enum import Enum
from typing import Dict, List

BF_OPS = set("+-<>[],.")


class Instruction(Enum):
    RIGHT = '>'
    LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_START = '['
    LOOP_END = ']'
    NOOP = ''

    @classmethod
    def decode(cls, ch: str) -> "Instruction":
        """Map a source character to its instruction; anything unknown is a no-op."""
        return _BY_CHAR.get(ch, cls.NOOP)


_BY_CHAR: Dict[str, Instruction] = {op.value: op for op in Instruction if op.value}


def decode_program(source: str) -> List[Instruction]:
    return [Instruction.decode(ch) for ch in source]
