from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .errors import BFError, make_input_exhausted_error, make_step_limit_error
from .instructions import Instruction, decode_program
from .jumptable import build_jump_table, jump_array
from .kernel import STOP_BUDGET, STOP_END, STOP_OUTPUT, UNBOUNDED, encode_program, run_until_io
from .sources import ByteSource, as_source
from .state import DEFAULT_TAPE_LENGTH, MachineState

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs one program over a circular tape of unsigned bytes.

    The source is validated on construction; an unbalanced program raises
    before any state exists. With jit=True, run() executes through the
    compiled loop in bfinterp.kernel; step() always uses the Python dispatch.
    Both paths share the same MachineState and produce identical results.
    """

    def __init__(self, source: str, tape_length: int = DEFAULT_TAPE_LENGTH, *,
                 input_source: Any = None, jit: bool = True):
        if tape_length <= 0:
            raise ValueError(f"tape length must be positive, got {tape_length}")

        self.program = source
        self.jump_table: Dict[int, int] = build_jump_table(source)
        self.instructions: List[Instruction] = decode_program(source)
        self.state = MachineState.fresh(tape_length)
        self.input_source: ByteSource = as_source(input_source)
        self.jit = jit

        # Arrays for numba
        self._program_arr = encode_program(source) if jit else None
        self._jumps_arr = jump_array(self.jump_table, len(source)) if jit else None

    @property
    def output(self) -> bytes:
        return bytes(self.state.output)

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def pc(self) -> int:
        return self.state.pc

    @property
    def steps(self) -> int:
        return self.state.steps

    @property
    def cell(self) -> int:
        return self.state.cell

    @property
    def tape_length(self) -> int:
        return len(self.state.tape)

    @property
    def finished(self) -> bool:
        return self.state.pc >= len(self.program)

    def reset(self, input_source: Any = None) -> None:
        """Zero the machine for a fresh run. The current input source is kept unless one is given."""
        self.state.reset()
        if input_source is not None:
            self.input_source = as_source(input_source)

    def step(self) -> bool:
        """
        Execute the instruction at the program counter.

        Returns:
            bool: True while there is more program left to run
        """
        st = self.state
        if st.pc >= len(self.program):
            return False

        op = self.instructions[st.pc]

        if op is Instruction.RIGHT:
            st.cursor = (st.cursor + 1) % len(st.tape)
        elif op is Instruction.LEFT:
            st.cursor = (st.cursor - 1) % len(st.tape)
        elif op is Instruction.INCREMENT:
            st.tape[st.cursor] = (int(st.tape[st.cursor]) + 1) & 0xFF
        elif op is Instruction.DECREMENT:
            st.tape[st.cursor] = (int(st.tape[st.cursor]) - 1) & 0xFF
        elif op is Instruction.OUTPUT:
            st.output.append(int(st.tape[st.cursor]))
        elif op is Instruction.INPUT:
            self._read_input()
        elif op is Instruction.LOOP_START:
            if st.tape[st.cursor] == 0:
                st.pc = self.jump_table[st.pc]
        elif op is Instruction.LOOP_END:
            if st.tape[st.cursor] != 0:
                st.pc = self.jump_table[st.pc]

        st.pc += 1
        st.steps += 1
        return st.pc < len(self.program)

    def run(self, max_steps: Optional[int] = None) -> bytes:
        """Run until the program ends and return everything it wrote.

        max_steps bounds the number of positions executed by this call; when
        it runs out first a StepLimitExceededError carrying the partial output
        is raised. Execution errors never discard output already produced.
        """
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        budget = UNBOUNDED if max_steps is None else min(max_steps, UNBOUNDED)

        logger.debug("run: %d chars, tape=%d, jit=%s, max_steps=%s",
                     len(self.program), self.tape_length, self.jit, max_steps)
        try:
            if self.jit:
                self._run_jit(budget)
            else:
                self._run_python(budget)
        except BFError as e:
            logger.debug("run stopped after %d steps: %s", self.state.steps, e.message.splitlines()[0])
            raise
        logger.debug("run finished after %d steps, %d output bytes", self.state.steps, len(self.state.output))
        return self.output

    def _run_python(self, budget: int) -> None:
        taken = 0
        while not self.finished:
            if taken >= budget:
                self._raise_step_limit(budget)
            self.step()
            taken += 1

    def _run_jit(self, budget: int) -> None:
        st = self.state
        remaining = budget
        while True:
            pc, pointer, stop_reason, steps = run_until_io(
                self._program_arr, st.tape, st.pc, st.cursor,
                self._jumps_arr, remaining
            )
            st.pc = int(pc)
            st.cursor = int(pointer)
            st.steps += int(steps)
            remaining -= int(steps)

            if stop_reason == STOP_END:
                return
            if stop_reason == STOP_BUDGET or remaining <= 0:
                self._raise_step_limit(budget)

            # Stopped on '.' or ','
            if stop_reason == STOP_OUTPUT:
                st.output.append(int(st.tape[st.cursor]))
            else:
                self._read_input()
            st.pc += 1
            st.steps += 1
            remaining -= 1

    def _read_input(self) -> None:
        st = self.state
        b = self.input_source.read_byte()
        if b is None:
            raise make_input_exhausted_error(position=st.pc, output=bytes(st.output))
        st.tape[st.cursor] = b & 0xFF

    def _raise_step_limit(self, budget: int) -> None:
        st = self.state
        raise make_step_limit_error(position=st.pc, output=bytes(st.output), steps=budget)


def interpret(source: str, input_source: Any = None, tape_length: int = DEFAULT_TAPE_LENGTH) -> bytes:
    return Interpreter(source, tape_length, input_source=input_source).run()
