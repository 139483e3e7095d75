"""
Tests for capture scanning and the legal move index.
"""
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.game import Board, Color, LegalityIndex, captures_from

EMPTY_ROW = "........"


def board_with(*top_rows):
    """Board whose first rows are given and the rest are empty."""
    rows = list(top_rows) + [EMPTY_ROW] * (8 - len(top_rows))
    return Board.from_rows(rows)


def test_initial_legal_targets():
    """Legal moves in the starting position."""
    index = LegalityIndex.from_board(Board())

    assert index.targets(Color.BLACK) == {(2, 4), (3, 5), (4, 2), (5, 3)}
    assert index.targets(Color.WHITE) == {(2, 3), (3, 2), (4, 5), (5, 4)}


def test_initial_capture_lists():
    index = LegalityIndex.from_board(Board())
    assert index.captures(2, 4, Color.BLACK) == ((3, 4),)
    assert index.captures(3, 5, Color.BLACK) == ((3, 4),)
    assert index.captures(4, 2, Color.BLACK) == ((4, 3),)
    assert index.captures(5, 3, Color.BLACK) == ((4, 3),)
    assert index.captures(2, 3, Color.WHITE) == ((3, 3),)


def test_occupied_cells_have_no_captures():
    index = LegalityIndex.from_board(Board())
    for color in Color:
        assert index.captures(3, 3, color) == ()
        assert index.captures(3, 4, color) == ()
        assert captures_from(Board(), 4, 4, color) == ()


def test_off_board_cells_have_no_captures():
    """Coordinates off the board never wrap around to the other edge."""
    board = board_with("...W....", "...B....")
    for row, col in [(-1, 3), (3, -1), (8, 3), (3, 8), (-1, -1)]:
        for color in Color:
            assert captures_from(board, row, col, color) == ()
    assert captures_from(board, 2.0, 3, Color.WHITE) == ()


def test_run_collected_nearest_first():
    board = board_with("BWW.....")
    assert captures_from(board, 0, 3, Color.BLACK) == ((0, 2), (0, 1))


def test_run_ending_in_empty_is_discarded():
    board = board_with(".WW.....")
    assert captures_from(board, 0, 3, Color.BLACK) == ()


def test_run_off_board_is_discarded():
    board = board_with("WW......")
    assert captures_from(board, 0, 2, Color.BLACK) == ()


def test_adjacent_own_stone_captures_nothing():
    board = board_with("B.......", "BW......")
    # Up hits Black at once; the up-right run through (1, 1) ends on an empty cell
    assert captures_from(board, 2, 0, Color.BLACK) == ()


def test_multiple_directions_in_canonical_order():
    """Runs are concatenated up-left, up, up-right, left, right, down-left, down, down-right."""
    board = board_with(
        "........",
        ".B.B....",
        "..WW....",
        "....WB..",
        "..WWW...",
        ".B.B.B..",
    )
    captured = captures_from(board, 3, 3, Color.BLACK)
    assert captured == ((2, 2), (2, 3), (3, 4), (4, 2), (4, 3), (4, 4))


def test_index_matches_direct_scan():
    """The index holds exactly what captures_from computes for each cell."""
    board = Board.from_rows([
        "..W.....",
        ".BW.B...",
        "..BWW...",
        "..WWWB..",
        "...BWB..",
        "...B.W..",
        "........",
        "........",
    ])
    index = LegalityIndex.from_board(board)
    for row, col in board.cells():
        for color in Color:
            expected = captures_from(board, row, col, color)
            assert index.captures(row, col, color) == expected
            assert index.is_legal(row, col, color) == bool(expected)


def test_can_move():
    board = board_with("BW......")
    index = LegalityIndex.from_board(board)
    assert index.can_move(Color.BLACK)
    assert not index.can_move(Color.WHITE)
    assert index.targets(Color.BLACK) == {(0, 2)}


def test_no_moves_on_full_board():
    index = LegalityIndex.from_board(Board.from_rows(["BWBWBWBW"] * 8))
    assert not index.can_move(Color.BLACK)
    assert not index.can_move(Color.WHITE)


if __name__ == "__main__":
    print("Running legality tests...\n")
    test_initial_legal_targets()
    test_initial_capture_lists()
    test_run_collected_nearest_first()
    test_multiple_directions_in_canonical_order()
    test_index_matches_direct_scan()
    print("All legality tests passed!")
