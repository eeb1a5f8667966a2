import numpy as np
import pytest

from falling_blocks.game import BASE_SHAPES, BOARD_WIDTH, TetrominoType, base_shape, spawn_piece


def test_catalog_has_seven_tetrominoes():
    assert set(BASE_SHAPES) == set(TetrominoType)
    for kind, shape in BASE_SHAPES.items():
        assert int(shape.sum()) == 4, kind.name


def test_base_shapes_are_read_only():
    shape = base_shape(TetrominoType.T)
    with pytest.raises(ValueError):
        shape[0, 0] = 1


def test_t_j_l_base_orientation():
    assert np.array_equal(base_shape(TetrominoType.T), [[0, 1, 0], [1, 1, 1]])
    assert np.array_equal(base_shape(TetrominoType.J), [[1, 0, 0], [1, 1, 1]])
    assert np.array_equal(base_shape(TetrominoType.L), [[0, 0, 1], [1, 1, 1]])


@pytest.mark.parametrize(
    "kind, expected_x",
    [
        (TetrominoType.I, 3),
        (TetrominoType.O, 4),
        (TetrominoType.T, 4),
        (TetrominoType.S, 4),
        (TetrominoType.Z, 4),
        (TetrominoType.J, 4),
        (TetrominoType.L, 4),
    ],
)
def test_spawn_position_is_top_center(kind, expected_x):
    piece = spawn_piece(kind)
    assert piece.y == 0
    assert piece.x == expected_x == BOARD_WIDTH // 2 - piece.width // 2
    assert piece.kind is kind


def test_spawn_unknown_type_raises():
    with pytest.raises(KeyError):
        spawn_piece(99)


def test_cells_are_absolute_coordinates():
    piece = spawn_piece(TetrominoType.O)
    assert sorted(piece.cells()) == [(4, 0), (4, 1), (5, 0), (5, 1)]
