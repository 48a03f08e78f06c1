#!/usr/bin/env python3
"""
Tests for bracket matching and the jump table.
"""

import os
import random
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfinterp.errors import UnmatchedCloseError, UnmatchedOpenError
from bfinterp.jumptable import build_jump_table, jump_array


def _random_program(rng, length):
    out = []
    depth = 0
    for _ in range(length):
        r = rng.random()
        if r < 0.2:
            out.append('[')
            depth += 1
        elif r < 0.4 and depth:
            out.append(']')
            depth -= 1
        else:
            out.append(rng.choice('+-<>., abc\n'))
    out.append(']' * depth)
    return ''.join(out)


def test_simple_pairs():
    assert build_jump_table("[]") == {0: 1, 1: 0}
    assert build_jump_table("+[>[-]<]") == {1: 7, 7: 1, 3: 5, 5: 3}


def test_no_brackets_gives_empty_table():
    assert build_jump_table("") == {}
    assert build_jump_table("+-<>., hello") == {}


@pytest.mark.parametrize("seed", range(25))
def test_table_is_symmetric(seed):
    rng = random.Random(seed)
    program = _random_program(rng, rng.randint(0, 200))
    table = build_jump_table(program)

    brackets = [i for i, ch in enumerate(program) if ch in '[]']
    assert sorted(table) == brackets
    for p in brackets:
        assert table[table[p]] == p
        if program[p] == '[':
            assert table[p] > p and program[table[p]] == ']'


@pytest.mark.parametrize("seed", range(10))
def test_pairs_do_not_cross(seed):
    rng = random.Random(seed)
    program = _random_program(rng, 150)
    table = build_jump_table(program)
    opens = [(p, table[p]) for p in table if program[p] == '[']
    for a, b in opens:
        for c, d in opens:
            assert not (a < c < b < d)


def test_lone_open_bracket():
    with pytest.raises(UnmatchedOpenError) as exc:
        build_jump_table("[")
    assert exc.value.position == 0


def test_lone_close_bracket():
    with pytest.raises(UnmatchedCloseError) as exc:
        build_jump_table("]")
    assert exc.value.position == 0


def test_close_reported_at_first_orphan():
    with pytest.raises(UnmatchedCloseError) as exc:
        build_jump_table("+[]]+]")
    assert exc.value.position == 3


def test_open_reported_at_last_pushed():
    with pytest.raises(UnmatchedOpenError) as exc:
        build_jump_table("[+[[-]")
    assert exc.value.position == 2


def test_jump_array_maps_brackets_and_keeps_identity():
    table = build_jump_table("+[-]+")
    arr = jump_array(table, 5)
    assert list(arr) == [0, 3, 2, 1, 4]
