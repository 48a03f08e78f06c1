#!/usr/bin/env python3
"""
Diagnostics carried by the error types.
"""

import os
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfinterp import Interpreter
from bfinterp.errors import (
    BFError,
    BracketError,
    ExecutionError,
    InputExhaustedError,
    UnmatchedCloseError,
    UnmatchedOpenError,
)


def test_unmatched_open_message_points_at_bracket():
    src = "+++\n++[>+\n<-"
    with pytest.raises(UnmatchedOpenError) as exc:
        Interpreter(src)
    err = exc.value
    assert err.position == 6
    assert (err.line, err.column) == (2, 3)
    assert "Unmatched opening bracket '['" in str(err)
    assert "position 6 (line 2, column 3)" in str(err)
    assert ">    2 | ++[>+" in err.context
    assert "Hint:" in str(err)


def test_caret_sits_under_the_bracket():
    with pytest.raises(UnmatchedCloseError) as exc:
        Interpreter("+]")
    lines = exc.value.context.split('\n')
    assert lines[0] == ">    1 | +]"
    assert lines[1].index('^') == lines[0].index(']')


def test_error_hierarchy():
    assert issubclass(UnmatchedOpenError, BracketError)
    assert issubclass(UnmatchedCloseError, BracketError)
    assert issubclass(InputExhaustedError, ExecutionError)
    assert issubclass(BracketError, BFError)
    assert issubclass(BFError, Exception)


def test_input_exhausted_message():
    with pytest.raises(InputExhaustedError) as exc:
        Interpreter("..,", jit=False).run()
    assert "End of input reached at position 2" in str(exc.value)
    assert "2 output bytes" in str(exc.value)
    assert exc.value.output == b"\x00\x00"
