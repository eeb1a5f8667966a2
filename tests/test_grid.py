import numpy as np

from falling_blocks.game import BOARD_HEIGHT, BOARD_WIDTH, GameGrid, TetrominoType, spawn_piece, translate


def test_place_writes_type_tag():
    grid = GameGrid()
    piece = translate(spawn_piece(TetrominoType.S), 0, 10)
    grid.place(piece)
    assert grid.grid[10, 5] == int(TetrominoType.S)
    assert grid.grid[11, 4] == int(TetrominoType.S)
    assert int((grid.grid != 0).sum()) == 4


def test_place_drops_cells_above_top():
    grid = GameGrid()
    piece = translate(spawn_piece(TetrominoType.O), 0, -1)
    grid.place(piece)
    assert int((grid.grid != 0).sum()) == 2
    assert np.all(grid.grid[0, 4:6] == int(TetrominoType.O))


def test_clear_single_row_shifts_down_and_pads_top():
    grid = GameGrid()
    grid.grid[-1, :] = 1
    grid.grid[-2, 0] = 5
    grid.grid[0, 9] = 7
    assert grid.clear_lines() == 1
    assert grid.grid[-1, 0] == 5
    assert grid.grid[1, 9] == 7
    assert not grid.grid[0].any()
    assert grid.grid.shape == (BOARD_HEIGHT, BOARD_WIDTH)


def test_clear_non_adjacent_rows_preserves_order():
    grid = GameGrid()
    grid.grid[19, :] = 1
    grid.grid[18, 2] = 2
    grid.grid[17, :] = 3
    grid.grid[16, 4] = 4
    grid.grid[15, :] = 5
    grid.grid[14, 6] = 6
    assert grid.clear_lines() == 3
    assert grid.grid[19, 2] == 2
    assert grid.grid[18, 4] == 4
    assert grid.grid[17, 6] == 6
    assert not grid.grid[:17].any()


def test_clear_four_rows_at_once():
    grid = GameGrid()
    grid.grid[16:, :] = 1
    assert grid.clear_lines() == 4
    assert not grid.grid.any()


def test_clear_lines_is_idempotent():
    rng = np.random.default_rng(7)
    for _ in range(20):
        grid = GameGrid()
        grid.grid[:] = rng.integers(0, 8, size=grid.grid.shape, dtype=np.int8)
        grid.grid[rng.integers(0, BOARD_HEIGHT, size=3)] = 2
        grid.clear_lines()
        after = grid.clone_state()
        assert grid.clear_lines() == 0
        assert np.array_equal(grid.grid, after)


def test_overlay_does_not_mutate_board():
    grid = GameGrid()
    piece = spawn_piece(TetrominoType.T)
    shown = grid.overlay(piece)
    assert shown[0, 5] == int(TetrominoType.T)
    assert not grid.grid.any()


def test_overlay_clips_cells_above_top():
    grid = GameGrid()
    shown = grid.overlay(translate(spawn_piece(TetrominoType.O), 0, -1))
    assert int((shown != 0).sum()) == 2
