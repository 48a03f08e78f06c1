from __future__ import annotations

import logging
from typing import Dict, List

import numpy as np

from .errors import UnmatchedCloseError, UnmatchedOpenError, make_bracket_error
from .instructions import Instruction

logger = logging.getLogger(__name__)

LOOP_START = Instruction.LOOP_START.value
LOOP_END = Instruction.LOOP_END.value


def build_jump_table(program: str) -> Dict[int, int]:
    """Pair every '[' with its ']' (and back).

    Raises UnmatchedCloseError on a ']' with nothing open, and
    UnmatchedOpenError for the last '[' still open at the end of the text.
    """
    table: Dict[int, int] = {}
    stack: List[int] = []

    for i, ch in enumerate(program):
        if ch == LOOP_START:
            stack.append(i)
        elif ch == LOOP_END:
            if not stack:
                raise make_bracket_error(UnmatchedCloseError, source=program, position=i)
            start = stack.pop()
            table[start] = i
            table[i] = start

    if stack:
        raise make_bracket_error(UnmatchedOpenError, source=program, position=stack[-1])

    logger.debug("jump table built: %d loop(s) in %d chars", len(table) // 2, len(program))
    return table


def jump_array(table: Dict[int, int], length: int) -> np.ndarray:
    """Dense form of the table for the compiled loop; non-bracket slots map to themselves."""
    arr = np.arange(length, dtype=np.int64)
    for k, v in table.items():
        arr[k] = v
    return arr
