import pytest

from mazegen.maze import Disposition, MazeInvariantError, Orientation, Room, build_room_graph
from mazegen.maze.rooms import wall_between


def test_room_and_edge_counts():
    g = build_room_graph((0, 4), (0, 3))
    assert len(g) == 12
    # (w-1)*h horizontal neighbours + w*(h-1) vertical neighbours
    assert g.edge_count == 3 * 3 + 4 * 2
    assert all(w.disposition is Disposition.UNKNOWN for w in g.walls())


def test_rooms_cover_half_open_extent():
    g = build_room_graph((-2, 1), (5, 7))
    assert g.rooms == sorted(Room(x, z) for x in range(-2, 1) for z in range(5, 7))
    assert Room(1, 5) not in g.rooms
    assert Room(-2, 7) not in g.rooms


def test_single_room_has_no_edges():
    g = build_room_graph((3, 4), (3, 4))
    assert len(g) == 1
    assert g.edge_count == 0
    assert g.neighbors(0) == []


def test_edge_keys_sorted_and_unique():
    g = build_room_graph((0, 3), (0, 3))
    keys = [k for k, _ in g.edges()]
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)
    assert all(a < b for a, b in keys)


def test_neighbor_order_is_fixed():
    g = build_room_graph((0, 3), (0, 3))
    center = g.index_of(Room(1, 1))
    got = [g.rooms[n] for n in g.neighbors(center)]
    assert got == [Room(0, 1), Room(2, 1), Room(1, 0), Room(1, 2)]


def test_edge_lookup_is_symmetric():
    g = build_room_graph((0, 2), (0, 2))
    a = g.index_of(Room(0, 0))
    b = g.index_of(Room(1, 0))
    assert g.edge(a, b) is g.edge(b, a)


def test_wall_between_orientation_and_anchor():
    w = wall_between(Room(2, 5), Room(3, 5))
    assert w.orientation is Orientation.PARALLEL_TO_Z
    assert w.sw_corner == (3, 5)
    w = wall_between(Room(2, 6), Room(2, 5))
    assert w.orientation is Orientation.PARALLEL_TO_X
    assert w.sw_corner == (2, 6)


def test_missing_lookups_fail_fast():
    g = build_room_graph((0, 2), (0, 2))
    with pytest.raises(MazeInvariantError):
        g.index_of(Room(5, 5))
    # (0,0) and (1,1) are diagonal: no edge was ever built
    with pytest.raises(MazeInvariantError):
        g.edge(g.index_of(Room(0, 0)), g.index_of(Room(1, 1)))
    with pytest.raises(MazeInvariantError):
        wall_between(Room(0, 0), Room(1, 1))


@pytest.mark.parametrize("x_range,z_range", [((0, 0), (0, 3)), ((2, 1), (0, 3)), ((0, 3), (4, 4))])
def test_empty_extent_rejected(x_range, z_range):
    with pytest.raises(ValueError):
        build_room_graph(x_range, z_range)


def test_wall_resolution_is_monotonic():
    g = build_room_graph((0, 2), (0, 1))
    w = g.walls()[0]
    w.resolve(Disposition.ABSENT)
    with pytest.raises(MazeInvariantError):
        w.resolve(Disposition.PRESENT)
    with pytest.raises(MazeInvariantError):
        w.resolve(Disposition.UNKNOWN)
    assert w.disposition is Disposition.ABSENT
