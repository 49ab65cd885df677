import sys

import numpy as np

from linesolver import solve_grid
from linesolver.csp.checks import color_solved, white_solved
from linesolver.csp.search import SearchContext, depth_first_search, run_search, solve_color
from linesolver.grid.directions import INNER_DOWN_LEFT, INNER_DOWN_RIGHT, Direction
from linesolver.grid.parser import parse_grid
from linesolver.types import Color, Edge

RED = Color.RED
GREEN = Color.GREEN
BLUE = Color.BLUE

D = Direction


def assert_pristine(board):
    assert not board.counts.any()
    assert not board.sides.any()
    assert board.edges == ()


def assert_no_crossing(board):
    main = board.sides[:-1, :-1, INNER_DOWN_RIGHT] != 0
    anti = board.sides[:-1, 1:, INNER_DOWN_LEFT] != 0
    assert not np.any(main & anti)


def assert_whites_saturated(board):
    whites = np.char.isdigit(board.symbols)
    assert np.array_equal(board.counts[whites], board.symbols[whites].astype(int))


# ----------------------------------------------------------------------
# closure / saturation checks
# ----------------------------------------------------------------------
def test_color_solved_requires_every_segment(make_board):
    board = make_board("RrrR")
    assert not color_solved(board, RED)
    assert board.add_edge((0, 0), D.RIGHT, RED)
    assert not color_solved(board, RED)
    assert board.add_edge((1, 0), D.RIGHT, RED)
    assert color_solved(board, RED)


def test_color_solved_ignores_other_colors(make_board):
    board = make_board("GgG\nR.R")
    # red has no plain segments at all
    assert color_solved(board, RED)
    assert not color_solved(board, GREEN)


def test_color_solved_does_not_touch_board(make_board):
    board = make_board("RrR")
    board.add_edge((0, 0), D.RIGHT, RED)
    before = board.snapshot()
    symbols = board.symbols.copy()
    color_solved(board, RED)
    assert board.snapshot() == before
    assert np.array_equal(board.symbols, symbols)


def test_white_solved(make_board):
    board = make_board("R2R")
    assert white_solved(make_board("RR"))
    assert not white_solved(board)
    board.add_edge((0, 0), D.RIGHT, RED)
    assert not white_solved(board)
    board.add_edge((2, 0), D.LEFT, RED)
    assert white_solved(board)


# ----------------------------------------------------------------------
# scenarios
# ----------------------------------------------------------------------
def test_adjacent_pairs(make_board):
    board = make_board("RR\nGG")
    ctx = run_search(board)
    assert ctx.solved
    assert board.edges == (
        Edge((0, 0), D.RIGHT, RED),
        Edge((0, 1), D.RIGHT, GREEN),
    )
    assert_no_crossing(board)


def test_all_three_colors(make_board):
    board = make_board("RR\nGG\nBB")
    assert run_search(board).solved
    assert [e.color for e in board.edges] == [RED, GREEN, BLUE]


def test_missing_colors_are_skipped(make_board):
    board = make_board("GgG")
    assert run_search(board).solved
    assert board.edges == (
        Edge((0, 0), D.RIGHT, GREEN),
        Edge((1, 0), D.RIGHT, GREEN),
    )


def test_forced_crossing_has_no_solution(make_board):
    board = make_board("RG\nGR")
    ctx = run_search(board)
    assert not ctx.solved
    assert_pristine(board)


def test_white_cell_shared_by_two_colors(make_board):
    board = make_board("R.G\n.2.\nG.R")
    assert run_search(board).solved
    assert board.edges == (
        Edge((0, 0), D.DOWN_RIGHT, RED),
        Edge((1, 1), D.DOWN_RIGHT, RED),
        Edge((2, 0), D.DOWN_LEFT, GREEN),
        Edge((1, 1), D.DOWN_LEFT, GREEN),
    )
    assert board.count_at((1, 1)) == 2
    assert_no_crossing(board)
    assert_whites_saturated(board)


def test_path_loops_back_to_saturate_white_cell(make_board):
    # the direct route R-2-R enters the 2 only once; the path has to
    # come back into it through the r cells
    board = make_board("R2R\n.rr")
    ctx = run_search(board)
    assert ctx.solved
    assert board.edges == (
        Edge((0, 0), D.RIGHT, RED),
        Edge((1, 0), D.DOWN_RIGHT, RED),
        Edge((2, 1), D.LEFT, RED),
        Edge((1, 1), D.UP, RED),
        Edge((1, 0), D.RIGHT, RED),
    )
    assert board.count_at((1, 0)) == 2
    assert ctx.backtracks >= 1
    assert_no_crossing(board)


def test_unsaturated_white_cell_has_no_solution(make_board):
    board = make_board("R2R")
    assert not run_search(board).solved
    assert_pristine(board)


def test_exact_capacity_one(make_board):
    board = make_board("R1R")
    assert run_search(board).solved
    assert board.count_at((1, 0)) == 1


def test_backtracks_through_diagonal_dead_end(make_board):
    board = make_board("Rr.\n.r.\n.rR")
    ctx = run_search(board)
    assert ctx.solved
    assert board.edges == (
        Edge((0, 0), D.RIGHT, RED),
        Edge((1, 0), D.DOWN, RED),
        Edge((1, 1), D.DOWN, RED),
        Edge((1, 2), D.RIGHT, RED),
    )
    # the DownRight shortcut from (1, 1) reached R before visiting (1, 2)
    assert ctx.backtracks >= 1
    assert color_solved(board, RED)


def test_later_color_failure_backtracks_into_earlier_color(make_board):
    # Red first closes along the diagonal, which blocks Green's only route.
    # Red then has to reroute through the white cell.
    board = make_board("RG\n2R\nG.")
    assert run_search(board).solved
    assert board.edges == (
        Edge((0, 0), D.DOWN, RED),
        Edge((0, 1), D.RIGHT, RED),
        Edge((1, 0), D.DOWN_LEFT, GREEN),
        Edge((0, 1), D.DOWN, GREEN),
    )
    assert_whites_saturated(board)
    assert_no_crossing(board)


def test_solve_color_unmarks_start_on_failure(make_board):
    board = make_board("R.R")
    ctx = SearchContext(board=board)
    assert not solve_color(ctx, RED)
    assert_pristine(board)


def test_depth_first_search_counts_nodes(make_board):
    board = make_board("RrR")
    ctx = SearchContext(board=board)
    board.mark_start((0, 0))
    assert depth_first_search(ctx, (0, 0), RED)
    assert ctx.nodes_visited == 2


def test_progress_is_logged(make_board, caplog):
    board = make_board("Rr.\n.r.\n.rR")
    ctx = SearchContext(board=board, progress_interval=1)
    with caplog.at_level("INFO", logger="linesolver"):
        assert solve_color(ctx, RED)
    assert any("[search] nodes_visited" in r.getMessage() for r in caplog.records)


# ----------------------------------------------------------------------
# solve_grid
# ----------------------------------------------------------------------
def test_solve_grid_result():
    result = solve_grid(parse_grid("RR\nGG"))
    assert result.solved
    assert result.shape == (2, 2)
    assert len(result.edges) == 2
    assert result.nodes_visited == 2


def test_solve_grid_no_solution_returns_empty_edges():
    result = solve_grid(parse_grid("RG\nGR"))
    assert not result.solved
    assert result.edges == []


def test_solve_grid_restores_recursion_limit():
    limit = sys.getrecursionlimit()
    solve_grid(parse_grid("R" + "r" * 60 + "R"))
    assert sys.getrecursionlimit() == limit
