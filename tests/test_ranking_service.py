import pytest

from stsmap.data.repositories import MapsRepository
from stsmap.domain.path_state import PathState, StateRules
from stsmap.domain.room_values import RoomValues, initial_state, make_room_valuer
from stsmap.services import RankedGroup, count_paths, format_score, rank_paths, score_path
from stsmap.services.map_query_service import default_start_coordinates
from tests.helpers.map_builders import build_map, diamond_map, fork_map, path

_FORK_VALUES = {"combat": 1.0, "rest": 2.0, "elite": 3.0}


def _by_type(room_type, floor, state):
    return _FORK_VALUES[room_type]


def test_fork_scenario_ranks_rest_path_first() -> None:
    ranking = rank_paths(fork_map(), [(1, 0), (1, 1)], _by_type, PathState(), 2)

    assert ranking == [
        RankedGroup(label="5.00", paths=(path(1, 1, 0),)),
        RankedGroup(label="4.00", paths=(path(1, 0, 0),)),
    ]
    assert ranking[0].score == 5.0


def test_limit_truncates_groups() -> None:
    assert len(rank_paths(fork_map(), [(1, 0), (1, 1)], _by_type, PathState(), 1)) == 1
    assert rank_paths(fork_map(), [(1, 0), (1, 1)], _by_type, PathState(), 0) == []


def test_equal_scores_share_a_group_in_enumeration_order() -> None:
    ranking = rank_paths(diamond_map(), [(1, 0), (1, 1)], lambda t, f, s: 1.0, PathState(), 15)

    assert [group.label for group in ranking] == ["3.00"]
    assert ranking[0].paths == (path(1, 0, 1, 0), path(1, 0, 1, 1), path(1, 0, 0, 0), path(1, 1, 0, 0))


def test_scores_are_bucketed_to_two_decimals() -> None:
    map_def = build_map({1: [("a", []), ("b", [])]})
    values = {"a": 1.001, "b": 1.004}

    ranking = rank_paths(map_def, [(1, 0), (1, 1)], lambda t, f, s: values[t], PathState(), 5)

    assert ranking == [RankedGroup(label="1.00", paths=(path(1, 0), path(1, 1)))]


def test_state_is_folded_floor_by_floor() -> None:
    map_def = build_map(
        {
            1: [("enemy", [0])],
            2: [("shop", [0])],
            3: [("event", [0])],
            4: [("enemy", [])],
        }
    )
    seen = []

    def record(room_type, floor, state):
        seen.append((room_type, floor, state))
        return 0.0

    score_path(map_def, path(1, 0, 0, 0, 0), record, PathState(gold=100), StateRules())

    assert seen == [
        ("enemy", 1, PathState(gold=100, fights_before=0, events_before=0)),
        ("shop", 2, PathState(gold=115, fights_before=1, events_before=0)),
        ("event", 3, PathState(gold=0, fights_before=1, events_before=0)),
        ("enemy", 4, PathState(gold=0, fights_before=1, events_before=1)),
    ]


def test_each_path_starts_from_the_initial_state() -> None:
    states = []

    def record(room_type, floor, state):
        if floor == 1:
            states.append(state)
        return 1.0

    rank_paths(diamond_map(), [(1, 0), (1, 1)], record, PathState(gold=7), 3)

    assert states == [PathState(gold=7)] * 4


def test_value_function_errors_propagate() -> None:
    def explode(room_type, floor, state):
        raise RuntimeError("bad weights")

    with pytest.raises(RuntimeError, match="bad weights"):
        rank_paths(fork_map(), [(1, 0)], explode, PathState(), 3)


def test_groups_strictly_descend_and_never_exceed_path_count() -> None:
    map_def = MapsRepository().get("act1_sample")
    starts = default_start_coordinates(map_def)
    values = RoomValues()

    ranking = rank_paths(
        map_def, starts, make_room_valuer(values, explicit_start=False), initial_state(values), 15
    )

    scores = [group.score for group in ranking]
    assert scores == sorted(scores, reverse=True)
    assert len(set(scores)) == len(scores)
    assert sum(len(group.paths) for group in ranking) <= count_paths(map_def, starts)


def test_ranking_is_repeatable() -> None:
    map_def = MapsRepository().get("act1_sample")
    starts = default_start_coordinates(map_def)
    valuer = make_room_valuer(RoomValues(), explicit_start=False)

    first = rank_paths(map_def, starts, valuer, PathState(gold=99), 15)
    second = rank_paths(map_def, starts, valuer, PathState(gold=99), 15)

    assert first == second


@pytest.mark.parametrize(
    ("value", "label"),
    [
        (5.0, "5.00"),
        (0.125, "0.13"),
        (-0.125, "-0.13"),
        (1.005, "1.00"),
        (2.0999999999999996, "2.10"),
        (-0.001, "0.00"),
    ],
)
def test_format_score(value, label) -> None:
    assert format_score(value) == label


def test_format_score_rejects_non_finite() -> None:
    with pytest.raises(ValueError):
        format_score(float("nan"))


def test_scores_rounding_to_zero_share_one_group() -> None:
    map_def = build_map({1: [("a", []), ("b", [])]})
    values = {"a": -0.004, "b": 0.004}

    ranking = rank_paths(map_def, [(1, 0), (1, 1)], lambda t, f, s: values[t], PathState(), 5)

    assert ranking == [RankedGroup(label="0.00", paths=(path(1, 0), path(1, 1)))]
