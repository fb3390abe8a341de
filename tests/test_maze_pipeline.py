import pytest

from mazegen.maze import Disposition, Maze, MazeConfig, Room, Sizes, SpawnPositions, generate_maze
from mazegen.maze.border import border_walls


def test_generate_maze_contract():
    walls, spawn = generate_maze((0, 6), (0, 4), 2024, Sizes(2.0, 0.25))
    assert isinstance(spawn, SpawnPositions)
    rooms = 6 * 4
    interior = 5 * 4 + 6 * 3
    assert len(walls) == len(border_walls((0, 6), (0, 4))) + interior
    assert sum(1 for w in walls if w.disposition is Disposition.ABSENT) == rooms - 1
    assert not [w for w in walls if w.disposition is Disposition.UNKNOWN]


def test_border_walls_come_first():
    walls, _ = generate_maze((0, 3), (0, 3), 11)
    border = border_walls((0, 3), (0, 3))
    assert [w.to_dict() for w in walls[: len(border)]] == [w.to_dict() for w in border]


def test_degenerate_single_room():
    walls, spawn = generate_maze((0, 1), (0, 1), 0)
    assert len(walls) == 4
    assert all(w.is_present for w in walls)
    assert spawn.start == spawn.goal == Room(0, 0)


def test_two_by_two_is_always_a_three_edge_path():
    for seed in range(20):
        m = Maze(seed=seed, x_range=(0, 2), z_range=(0, 2))
        assert m.metrics["walls_absent"] == 3
        # a spanning tree of the 4-cycle is always a path, so the diameter is 3
        assert m.diameter == 3
        assert m.start != m.goal


def test_sizes_pass_through():
    m = Maze(MazeConfig(x_max=3, z_max=3, seed=1, room_side_length=4.0, wall_radius=0.3))
    assert m.sizes == Sizes(4.0, 0.3)
    assert m.to_dict()["sizes"] == {"room_side_length": 4.0, "wall_radius": 0.3}


def test_sizes_do_not_change_topology():
    a, sa = generate_maze((0, 8), (0, 8), 99, Sizes(1.0, 0.1))
    b, sb = generate_maze((0, 8), (0, 8), 99, Sizes(3.5, 0.7))
    assert [w.to_dict() for w in a] == [w.to_dict() for w in b]
    assert sa == sb


def test_random_seed_recorded():
    m = Maze(MazeConfig(x_max=4, z_max=4))
    assert isinstance(m.seed, int)
    again = Maze(seed=m.seed, x_range=(0, 4), z_range=(0, 4))
    assert [w.to_dict() for w in again.walls] == [w.to_dict() for w in m.walls]


def test_metrics_populated():
    m = Maze(seed=8, x_range=(0, 10), z_range=(0, 5))
    mt = m.metrics
    assert mt["rooms"] == 50
    assert mt["interior_walls"] == 9 * 5 + 10 * 4
    assert mt["border_walls"] == 30
    assert mt["walls_absent"] == 49
    assert mt["walls_present"] == mt["border_walls"] + mt["interior_walls"] - 49
    assert mt["diameter"] == m.diameter > 0
    assert mt["carve_iterations"] >= 50
    for phase in ("build_graph", "carve", "border", "adjacency", "all_pairs"):
        assert phase in mt["phase_ms"]


def test_metrics_can_be_disabled(monkeypatch):
    monkeypatch.setenv("MAZE_ENABLE_GENERATION_METRICS", "0")
    m = Maze(seed=8, x_range=(0, 4), z_range=(0, 4))
    assert m.metrics == {}
    assert m.diameter > 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"x_min": 0, "x_max": 0},
        {"z_min": 5, "z_max": 2},
        {"room_side_length": 0},
        {"wall_radius": -1.0},
        {"seed": -1},
        {"seed": 2**64},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        Maze(MazeConfig(**kwargs))


def test_global_random_untouched():
    import random

    random.seed(5)
    expected = random.random()
    random.seed(5)
    Maze(seed=1, x_range=(0, 6), z_range=(0, 6))
    assert random.random() == expected


def test_present_walls_filter_and_to_dict():
    m = Maze(seed=3, x_range=(0, 4), z_range=(0, 3))
    present = m.present_walls()
    assert all(w.is_present for w in present)
    d = m.to_dict()
    assert len(d["walls"]) == len(present)
    assert len(m.to_dict(include_absent=True)["walls"]) == len(m.walls)
    assert d["start"] == list(m.start)
    assert d["goal"] == list(m.goal)
    assert d["x_range"] == [0, 4]


def test_caller_config_left_unchanged():
    cfg = MazeConfig(x_max=4, z_max=4)
    a = Maze(cfg)
    b = Maze(cfg)
    assert cfg.seed is None
    assert a.config is not cfg
    # a fresh seed is drawn per Maze, so the two runs are independent
    assert a.seed != b.seed

    Maze(cfg, seed=99, x_range=(0, 2), sizes=Sizes(2.0, 0.5))
    assert cfg == MazeConfig(x_max=4, z_max=4)
