"""Referee reasons for rejected placements."""

import pytest

from Battle_Othello.Board import Board, InvalidCoordinate, BLACK
from Battle_Othello.engine import referee


def test_out_of_bounds_rejected():
    with pytest.raises(InvalidCoordinate):
        referee.check_move((8, 0), Board(), BLACK)


def test_occupied_rejected():
    with pytest.raises(ValueError, match="occupied"):
        referee.check_move((3, 3), Board(), BLACK)


def test_non_capturing_rejected():
    with pytest.raises(ValueError, match="captures nothing"):
        referee.check_move((0, 0), Board(), BLACK)


def test_valid_move_passes():
    assert referee.check_move((2, 3), Board(), BLACK) is True
