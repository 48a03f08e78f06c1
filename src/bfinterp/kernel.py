"""
Compiled inner loop.

Runs every instruction that does not touch the outside world in native code
and hands control back to Python at each '.' or ',' so I/O ordering is kept.
"""

from __future__ import annotations

import numpy as np
from numba import njit

STOP_END = 0
STOP_OUTPUT = 1
STOP_INPUT = 2
STOP_BUDGET = 3

UNBOUNDED = 1 << 62


def encode_program(source: str) -> np.ndarray:
    # Non-ASCII characters can never be instructions
    return np.array([ord(c) if ord(c) < 128 else 0 for c in source], dtype=np.uint8)


@njit(cache=True)
def run_until_io(program_arr, memory, pc, pointer, jumps, max_steps):
    """
    Execute from pc until the program ends, an I/O instruction is reached or
    max_steps positions have run.

    Returns (pc, pointer, stop_reason, steps). On STOP_OUTPUT/STOP_INPUT pc is
    left on the I/O instruction, which has not been executed or counted.
    """
    mem_len = memory.shape[0]
    prog_len = program_arr.shape[0]
    steps = 0

    while pc < prog_len:
        if steps >= max_steps:
            return pc, pointer, STOP_BUDGET, steps

        command = program_arr[pc]

        if command == 62:  # '>'
            pointer += 1
            if pointer == mem_len:
                pointer = 0
        elif command == 60:  # '<'
            if pointer == 0:
                pointer = mem_len - 1
            else:
                pointer -= 1
        elif command == 43:  # '+'
            memory[pointer] = (memory[pointer] + 1) & 255
        elif command == 45:  # '-'
            memory[pointer] = (memory[pointer] - 1) & 255
        elif command == 46:  # '.'
            return pc, pointer, STOP_OUTPUT, steps
        elif command == 44:  # ','
            return pc, pointer, STOP_INPUT, steps
        elif command == 91:  # '['
            if memory[pointer] == 0:
                pc = jumps[pc]
        elif command == 93:  # ']'
            if memory[pointer] != 0:
                pc = jumps[pc]

        pc += 1
        steps += 1

    return pc, pointer, STOP_END, steps
