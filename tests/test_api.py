#!/usr/bin/env python3
"""
Tests for run_string / run_file and RunOptions.
"""

import os
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfinterp.api import RunOptions, RunResult, run_file, run_string
from bfinterp.errors import InputExhaustedError, StepLimitExceededError


def test_run_string_result():
    result = run_string(">++++[<+++++>-]<.")
    assert isinstance(result, RunResult)
    assert result.output == bytes([20])
    assert result.cursor == 0
    assert result.tape[0] == 20 and result.tape[1] == 0
    assert len(result.tape) == 30000
    assert result.steps > 0


def test_run_string_text_and_input():
    result = run_string(",[.,]", input="ok\x00")
    assert result.text == "ok"


def test_run_string_options():
    result = run_string("<+", options=RunOptions(tape_length=5, jit=False))
    assert result.cursor == 4
    assert result.tape == b"\x00\x00\x00\x00\x01"


def test_run_string_step_limit():
    with pytest.raises(StepLimitExceededError):
        run_string("+[]", options=RunOptions(max_steps=50))


def test_run_string_propagates_partial_output():
    with pytest.raises(InputExhaustedError) as exc:
        run_string("+.,")
    assert exc.value.output == b"\x01"


def test_run_file(tmp_path):
    path = tmp_path / "prog.bf"
    path.write_text("add three then print\n+++.\n", encoding="utf-8")
    assert run_file(path).output == b"\x03"


def test_options_from_env_defaults():
    opts = RunOptions.from_env({})
    assert opts == RunOptions()


def test_options_from_env_values():
    opts = RunOptions.from_env({
        "BFINTERP_TAPE_LENGTH": "100",
        "BFINTERP_MAX_STEPS": "5000",
        "BFINTERP_JIT": "off",
    })
    assert opts == RunOptions(tape_length=100, max_steps=5000, jit=False)


def test_options_from_env_zero_steps_means_unbounded():
    assert RunOptions.from_env({"BFINTERP_MAX_STEPS": "0"}).max_steps is None


def test_options_from_env_rejects_garbage():
    with pytest.raises(ValueError, match="BFINTERP_TAPE_LENGTH"):
        RunOptions.from_env({"BFINTERP_TAPE_LENGTH": "lots"})
