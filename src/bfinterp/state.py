from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

DEFAULT_TAPE_LENGTH = 30000


@dataclass
class MachineState:
    tape: np.ndarray
    cursor: int = 0
    pc: int = 0
    output: bytearray = field(default_factory=bytearray)
    steps: int = 0

    @classmethod
    def fresh(cls, tape_length: int = DEFAULT_TAPE_LENGTH) -> "MachineState":
        return cls(tape=np.zeros(tape_length, dtype=np.uint8))

    @property
    def cell(self) -> int:
        return int(self.tape[self.cursor])

    def reset(self) -> None:
        self.tape.fill(0)
        self.cursor = 0
        self.pc = 0
        self.output.clear()
        self.steps = 0
