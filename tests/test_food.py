import numpy as np
import pytest

from snakegame import BoardFullError, FoodPlacer


def all_cells(n):
    return [(x, y) for y in range(n) for x in range(n)]


def test_place_avoids_snake():
    placer = FoodPlacer.seeded(3)
    snake = [(x, 10) for x in range(20)]

    for _ in range(200):
        cell = placer.place(snake)
        assert cell not in snake
        assert 0 <= cell[0] < 20 and 0 <= cell[1] < 20


@pytest.mark.parametrize("free", [(0, 0), (4, 2), (5, 5)])
def test_last_free_cell_is_found(free):
    placer = FoodPlacer.seeded(11, board_size=6)
    occupied = [c for c in all_cells(6) if c != free]

    assert placer.place(occupied) == free


def test_nearly_full_board_never_collides():
    placer = FoodPlacer.seeded(5, board_size=5)
    cells = all_cells(5)
    for k in range(len(cells) - 1):
        occupied = cells[: k + 1]
        assert placer.place(occupied) not in occupied


def test_full_board_raises():
    placer = FoodPlacer.seeded(0, board_size=3)
    with pytest.raises(BoardFullError) as exc:
        placer.place(all_cells(3))
    assert exc.value.board_size == 3


def test_free_cells_mask():
    placer = FoodPlacer(board_size=3)
    free = placer.free_cells([(0, 0), (1, 1), (2, 2)])

    assert free.shape == (6, 2)
    assert (0, 0) not in {tuple(c) for c in free}
    assert isinstance(free, np.ndarray)


def test_seeded_placers_agree():
    a = FoodPlacer.seeded(42)
    b = FoodPlacer.seeded(42)
    snake = [(10, 10)]
    assert [a.place(snake) for _ in range(5)] == [b.place(snake) for _ in range(5)]
