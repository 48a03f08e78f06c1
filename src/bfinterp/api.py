from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .engine import Interpreter
from .state import DEFAULT_TAPE_LENGTH

_FALSE_WORDS = {'0', 'false', 'no', 'off'}


def _env_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class RunOptions:
    tape_length: int = DEFAULT_TAPE_LENGTH
    max_steps: Optional[int] = None
    jit: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "RunOptions":
        """Read BFINTERP_TAPE_LENGTH, BFINTERP_MAX_STEPS and BFINTERP_JIT."""
        env = os.environ if env is None else env
        tape_length = _env_int(env, "BFINTERP_TAPE_LENGTH")
        max_steps = _env_int(env, "BFINTERP_MAX_STEPS")
        jit = env.get("BFINTERP_JIT", "").strip().lower() not in _FALSE_WORDS
        return cls(
            tape_length=DEFAULT_TAPE_LENGTH if tape_length is None else tape_length,
            max_steps=max_steps or None,
            jit=jit,
        )


@dataclass(frozen=True)
class RunResult:
    output: bytes
    steps: int
    cursor: int
    tape: bytes

    @property
    def text(self) -> str:
        return self.output.decode('latin-1')


def run_string(source: str, *, input: Any = None, options: Optional[RunOptions] = None) -> RunResult:
    opts = RunOptions() if options is None else options
    itp = Interpreter(source, opts.tape_length, input_source=input, jit=opts.jit)
    out = itp.run(max_steps=opts.max_steps)
    return RunResult(output=out, steps=itp.steps, cursor=itp.cursor, tape=itp.state.tape.tobytes())


def run_file(path: str | Path, *, input: Any = None, options: Optional[RunOptions] = None,
             encoding: str = "utf-8") -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), input=input, options=options)
