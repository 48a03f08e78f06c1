
from .engine import Interpreter, interpret
from .jumptable import build_jump_table
from .instructions import Instruction
from .sources import BufferSource, ByteSource, StreamSource
from .errors import (
    BFError,
    BracketError,
    ExecutionError,
    InputExhaustedError,
    StepLimitExceededError,
    UnmatchedCloseError,
    UnmatchedOpenError,
)
from .api import RunOptions, RunResult, run_file, run_string

__all__ = [
    'Interpreter',
    'interpret',
    'build_jump_table',
    'Instruction',
    'BufferSource',
    'ByteSource',
    'StreamSource',
    'BFError',
    'BracketError',
    'ExecutionError',
    'InputExhaustedError',
    'StepLimitExceededError',
    'UnmatchedCloseError',
    'UnmatchedOpenError',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
