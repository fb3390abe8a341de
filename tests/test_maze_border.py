from mazegen.maze import Disposition, Maze, Orientation, border_walls


def test_unit_square_border():
    walls = border_walls((0, 1), (0, 1))
    got = {(w.sw_corner, w.orientation) for w in walls}
    assert got == {
        ((0, 0), Orientation.PARALLEL_TO_X),
        ((0, 1), Orientation.PARALLEL_TO_X),
        ((0, 0), Orientation.PARALLEL_TO_Z),
        ((1, 0), Orientation.PARALLEL_TO_Z),
    }


def test_border_count_and_disposition():
    walls = border_walls((-3, 2), (1, 4))
    assert len(walls) == 2 * 5 + 2 * 3
    assert all(w.disposition is Disposition.PRESENT for w in walls)


def test_border_walls_present_for_all_seeds():
    for seed in (0, 1, 17, 2**63, 2**64 - 1):
        m = Maze(seed=seed, x_range=(0, 6), z_range=(0, 4))
        border = m.walls[: len(m.walls) - m.graph.edge_count]
        assert len(border) == 2 * 6 + 2 * 4
        assert all(w.is_present for w in border), f"open border wall for seed {seed}"


def test_border_independent_of_seed():
    a = Maze(seed=5, x_range=(0, 5), z_range=(0, 5))
    b = Maze(seed=6, x_range=(0, 5), z_range=(0, 5))
    n = len(border_walls((0, 5), (0, 5)))
    assert [w.to_dict() for w in a.walls[:n]] == [w.to_dict() for w in b.walls[:n]]
