import itertools
import random
from typing import Dict, Optional, Set

import pytest

from kinroute.domain.errors import ValidationError
from kinroute.domain.models import (
    Connection,
    GraphStatistics,
    MarriageRecord,
    ParentChildRecord,
    PersonId,
)
from kinroute.graph import (
    build_adjacency,
    compute_statistics,
    find_connections_within_degrees,
    find_shortest_path,
    find_shortest_path_bidirectional,
)

FINDERS = [find_shortest_path, find_shortest_path_bidirectional]


def _graph(*edges) -> Dict[PersonId, Set[PersonId]]:
    """Build a graph from (a, b) pairs recorded as marriages."""
    return build_adjacency([], [MarriageRecord(PersonId(a), PersonId(b)) for a, b in edges])


def _random_graph(seed: int, nodes: int = 9, density: float = 0.3):
    rng = random.Random(seed)
    edges = [
        (a, b)
        for a, b in itertools.combinations(range(1, nodes + 1), 2)
        if rng.random() < density
    ]
    return _graph(*edges)


def _brute_force_distance(graph, start, end) -> Optional[int]:
    """Length of the shortest simple path, by enumerating every path."""
    best: Optional[int] = None

    def walk(node, seen, length):
        nonlocal best
        if node == end:
            best = length if best is None else min(best, length)
            return
        for neighbor in graph[node]:
            if neighbor not in seen:
                walk(neighbor, seen | {neighbor}, length + 1)

    walk(start, {start}, 0)
    return best


def _assert_valid_path(graph, path, start, end):
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert b in graph[a]


@pytest.fixture
def family():
    """father(3) = 1, spouse(1, 2)."""
    return build_adjacency(
        [ParentChildRecord(id=PersonId(3), father_id=PersonId(1))],
        [MarriageRecord(husband_id=PersonId(1), wife_id=PersonId(2))],
    )


# --- adjacency -------------------------------------------------------------


def test_build_adjacency_is_symmetric():
    graph = build_adjacency(
        [
            ParentChildRecord(PersonId(3), PersonId(1), PersonId(2)),
            ParentChildRecord(PersonId(4), None, PersonId(2)),
            ParentChildRecord(PersonId(6), PersonId(3), None),
        ],
        [MarriageRecord(PersonId(1), PersonId(2)), MarriageRecord(PersonId(3), PersonId(5))],
    )

    for a, neighbors in graph.items():
        for b in neighbors:
            assert a in graph[b]
    assert graph[PersonId(2)] == {1, 3, 4}


def test_build_adjacency_collapses_duplicate_edges():
    graph = build_adjacency(
        [ParentChildRecord(PersonId(3), PersonId(1))],
        [MarriageRecord(PersonId(1), PersonId(3)), MarriageRecord(PersonId(1), PersonId(3))],
    )

    assert graph == {1: {3}, 3: {1}}


def test_build_adjacency_skips_self_relations():
    graph = build_adjacency(
        [ParentChildRecord(PersonId(1), PersonId(1))],
        [MarriageRecord(PersonId(2), PersonId(2))],
    )

    assert graph == {}


def test_build_adjacency_only_includes_related_persons():
    graph = build_adjacency([ParentChildRecord(PersonId(5))], [])

    assert PersonId(5) not in graph


# --- concrete scenario -----------------------------------------------------


def test_family_scenario_path(family):
    path = find_shortest_path(family, PersonId(2), PersonId(3))

    assert path == (2, 1, 3)
    assert len(path) - 1 == 2


def test_family_scenario_connections(family):
    assert find_connections_within_degrees(family, PersonId(1), 1) == (
        Connection(PersonId(2), 1),
        Connection(PersonId(3), 1),
    )


def test_family_scenario_statistics(family):
    assert compute_statistics(family) == GraphStatistics(
        total_people=3,
        total_connections=2,
        average_connections=4 / 3,
        isolated_people=0,
    )


# --- shortest path ---------------------------------------------------------


@pytest.mark.parametrize("finder", FINDERS)
def test_same_person_is_a_single_step_path(finder, family):
    assert finder(family, PersonId(1), PersonId(1)) == (1,)
    # Also when the person has no relation at all
    assert finder(family, PersonId(42), PersonId(42)) == (42,)
    assert finder({}, PersonId(42), PersonId(42)) == (42,)


@pytest.mark.parametrize("finder", FINDERS)
def test_absent_person_has_no_path(finder, family):
    assert finder(family, PersonId(1), PersonId(99)) == ()
    assert finder(family, PersonId(99), PersonId(1)) == ()


@pytest.mark.parametrize("finder", FINDERS)
def test_disjoint_components_have_no_path(finder):
    graph = _graph((1, 2), (2, 3), (10, 11))

    assert finder(graph, PersonId(1), PersonId(11)) == ()


@pytest.mark.parametrize("finder", FINDERS)
def test_direct_relation(finder):
    graph = _graph((1, 2), (2, 3))

    assert finder(graph, PersonId(1), PersonId(2)) == (1, 2)
    assert finder(graph, PersonId(2), PersonId(1)) == (2, 1)


@pytest.mark.parametrize("finder", FINDERS)
def test_prefers_shortcut_over_long_chain(finder):
    # 1-2-3-4-5-6 chain with a 1-7-6 shortcut
    graph = _graph((1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (1, 7), (7, 6))

    assert finder(graph, PersonId(1), PersonId(6)) == (1, 7, 6)


@pytest.mark.parametrize("length", range(1, 8))
def test_bidirectional_on_chains_of_every_parity(length):
    graph = _graph(*[(i, i + 1) for i in range(length)])

    path = find_shortest_path_bidirectional(graph, PersonId(0), PersonId(length))

    assert path == tuple(range(length + 1))


@pytest.mark.parametrize("size", [3, 4, 5, 6, 7, 8])
def test_bidirectional_on_cycles(size):
    graph = _graph(*[(i, (i + 1) % size) for i in range(size)])

    for end in range(1, size):
        uni = find_shortest_path(graph, PersonId(0), PersonId(end))
        bi = find_shortest_path_bidirectional(graph, PersonId(0), PersonId(end))
        assert len(bi) == len(uni) == min(end, size - end) + 1
        _assert_valid_path(graph, bi, 0, end)


def test_bidirectional_when_meeting_inside_a_layer():
    # The backward search reaches 3 from both 4 and 5; the forward
    # frontier {2, 6} touches both sides of that layer.
    graph = _graph((1, 2), (1, 6), (2, 3), (6, 5), (3, 4), (5, 4), (4, 7), (6, 8), (8, 7))

    uni = find_shortest_path(graph, PersonId(1), PersonId(7))
    bi = find_shortest_path_bidirectional(graph, PersonId(1), PersonId(7))

    assert len(uni) == len(bi) == 4
    _assert_valid_path(graph, bi, 1, 7)


@pytest.mark.parametrize("seed", range(25))
def test_paths_are_optimal_on_small_random_graphs(seed):
    graph = _random_graph(seed)

    for start, end in itertools.permutations(sorted(graph), 2):
        expected = _brute_force_distance(graph, start, end)
        uni = find_shortest_path(graph, start, end)
        bi = find_shortest_path_bidirectional(graph, start, end)

        if expected is None:
            assert uni == bi == ()
            continue

        assert len(uni) - 1 == expected
        assert len(bi) - 1 == expected
        _assert_valid_path(graph, uni, start, end)
        _assert_valid_path(graph, bi, start, end)


# --- degree-limited connections --------------------------------------------


def test_connections_respect_degree_cap():
    graph = _graph((1, 2), (2, 3), (3, 4), (4, 5))

    found = find_connections_within_degrees(graph, PersonId(1), 2)

    assert found == (Connection(PersonId(2), 1), Connection(PersonId(3), 2))


def test_connections_are_sorted_and_exclude_start():
    graph = _graph((5, 9), (5, 2), (9, 1), (2, 7), (7, 5), (1, 8))

    found = find_connections_within_degrees(graph, PersonId(5), 6)

    assert PersonId(5) not in {c.person_id for c in found}
    assert list(found) == sorted(found, key=lambda c: (c.degree, c.person_id))
    assert [(c.person_id, c.degree) for c in found] == [
        (2, 1),
        (7, 1),
        (9, 1),
        (1, 2),
        (8, 3),
    ]


def test_connections_report_shortest_degree():
    # 4 is two hops away through 2 even though 1-3-5-4 also reaches it
    graph = _graph((1, 2), (2, 4), (1, 3), (3, 5), (5, 4))

    found = {c.person_id: c.degree for c in find_connections_within_degrees(graph, PersonId(1), 6)}

    assert found[PersonId(4)] == 2


@pytest.mark.parametrize("seed", range(10))
def test_connections_match_path_lengths(seed):
    graph = _random_graph(seed)
    start = min(graph)

    for max_degrees in range(0, 4):
        found = find_connections_within_degrees(graph, start, max_degrees)
        assert all(1 <= c.degree <= max_degrees for c in found)
        for c in found:
            assert len(find_shortest_path(graph, start, c.person_id)) - 1 == c.degree


def test_connections_with_zero_degrees_is_empty(family):
    assert find_connections_within_degrees(family, PersonId(1), 0) == ()


def test_connections_for_absent_person_is_empty(family):
    assert find_connections_within_degrees(family, PersonId(99), 3) == ()


def test_connections_reject_negative_degrees(family):
    with pytest.raises(ValidationError) as excinfo:
        find_connections_within_degrees(family, PersonId(1), -1)

    assert excinfo.value.field_name == "max_degrees"


# --- statistics ------------------------------------------------------------


def test_statistics_of_empty_graph():
    assert compute_statistics({}) == GraphStatistics(0, 0, 0.0, 0)


def test_statistics_count_isolated_against_population(family):
    population = [PersonId(1), PersonId(2), PersonId(3), PersonId(9), PersonId(10)]

    stats = compute_statistics(family, population)

    assert stats.total_people == 3
    assert stats.isolated_people == 2


def test_statistics_count_empty_neighbor_sets_without_population():
    graph = {PersonId(1): {PersonId(2)}, PersonId(2): {PersonId(1)}, PersonId(3): set()}

    assert compute_statistics(graph).isolated_people == 1


def test_statistics_to_dict(family):
    assert compute_statistics(family).to_dict() == {
        "totalPeople": 3,
        "totalConnections": 2,
        "averageConnections": 4 / 3,
        "isolatedPeople": 0,
    }
