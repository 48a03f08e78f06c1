from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Type, TypeVar


def _locate(source: str, position: int) -> Tuple[int, int]:
    """Return the 1-based (line, column) of a character offset."""
    line = source.count('\n', 0, position) + 1
    column = position - (source.rfind('\n', 0, position) + 1) + 1
    return line, column


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(' ' * (8 + column) + '^')
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'open':
        return 'Every "[" needs a later "]" at the same nesting depth. Check for a missing "]".'
    if kind == 'close':
        return 'This "]" closes a loop that was never opened. Check for a missing "[" or an extra "]".'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BracketError(BFError):
    position: int
    line: int
    column: int
    context: str


@dataclass
class UnmatchedOpenError(BracketError):
    pass


@dataclass
class UnmatchedCloseError(BracketError):
    pass


@dataclass
class ExecutionError(BFError):
    position: int
    output: bytes = b""


@dataclass
class InputExhaustedError(ExecutionError):
    pass


@dataclass
class StepLimitExceededError(ExecutionError):
    steps: int = 0


E = TypeVar('E', bound=BracketError)


def make_bracket_error(cls: Type[E], *, source: str, position: int) -> E:
    if issubclass(cls, UnmatchedOpenError):
        kind, what = 'open', "Unmatched opening bracket '['"
    else:
        kind, what = 'close', "Unmatched closing bracket ']'"
    line, column = _locate(source, position)
    ctx = _build_context(source.split('\n'), line, column)
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"SyntaxError: {what} at position {position} (line {line}, column {column})\n{ctx}{hint_block}",
        position=position,
        line=line,
        column=column,
        context=ctx,
    )


def make_input_exhausted_error(*, position: int, output: bytes) -> InputExhaustedError:
    return InputExhaustedError(
        message=f"RuntimeError: End of input reached at position {position} "
                f"({len(output)} output bytes produced)",
        position=position,
        output=output,
    )


def make_step_limit_error(*, position: int, output: bytes, steps: int) -> StepLimitExceededError:
    return StepLimitExceededError(
        message=f"RuntimeError: Step limit of {steps} exceeded at position {position} "
                f"({len(output)} output bytes produced)",
        position=position,
        output=output,
        steps=steps,
    )
