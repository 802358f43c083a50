import pytest

from stsmap.domain.path_state import DEFAULT_RULES, PathState, StateRules


def test_combat_adds_gold_and_fight_count() -> None:
    state = PathState(gold=50).advance("enemy")

    assert state == PathState(gold=65, fights_before=1, events_before=0)


def test_elite_adds_gold_without_counting_as_fight() -> None:
    state = PathState(gold=0).advance("elite")

    assert state.gold == 30
    assert state.fights_before == 0


def test_event_is_counted() -> None:
    state = PathState().advance("event").advance("event")

    assert state.events_before == 2
    assert state.gold == 0


def test_shop_resets_gold_to_baseline() -> None:
    rules = StateRules(gold_after_shop=10.0)

    state = PathState(gold=250, fights_before=3).advance("shop", rules)

    assert state == PathState(gold=10.0, fights_before=3, events_before=0)


def test_unknown_room_leaves_state_unchanged() -> None:
    state = PathState(gold=12, fights_before=1, events_before=2)

    assert state.advance("boss") == state


def test_custom_rules_change_counted_types() -> None:
    rules = StateRules(combat_types=("enemy", "elite"), gold_rewards={})

    state = PathState().advance("elite", rules).advance("enemy", rules)

    assert state.fights_before == 2
    assert state.gold == 0


def test_default_rewards_cannot_be_changed() -> None:
    with pytest.raises(TypeError):
        DEFAULT_RULES.gold_rewards["enemy"] = 999.0

    assert PathState().advance("enemy").gold == 15.0


def test_rules_copy_the_rewards_they_are_given() -> None:
    rewards = {"enemy": 5.0}
    rules = StateRules(gold_rewards=rewards)
    rewards["enemy"] = 500.0

    assert PathState().advance("enemy", rules).gold == 5.0
    assert isinstance(hash(rules), int)
    assert rules == StateRules(gold_rewards={"enemy": 5.0})
