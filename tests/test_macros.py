"""Tests for the building demolition macro."""

import pytest
from src.fllscorer.core.enums import MissionGroup
from src.fllscorer.core.errors import InvalidValueError
from src.fllscorer.core.missions_state import MissionsState
from src.fllscorer.core.rules import RuleBook
from src.fllscorer.scoring import apply_demolition, compute_score, macro_demolish_building


class TestBuildingDemolition:
    """Tests for replaying the building demolition."""

    def test_replicates_actual_behavior(self, initial_state):
        """The four building bars leave setup position and land anywhere else."""
        new_state = apply_demolition(initial_state)

        assert new_state.m10_building_demolished is True
        assert (
            new_state.m04_black_bars_in_flower_box_or_setup_position
            == initial_state.m04_black_bars_in_flower_box_or_setup_position - 4
        )
        assert (
            new_state.m04_black_bars_anywhere_else
            == initial_state.m04_black_bars_anywhere_else + 4
        )

    def test_other_fields_are_unchanged(self, initial_state):
        new_state = apply_demolition(initial_state)
        changed = {
            name
            for name in MissionsState.field_names()
            if getattr(new_state, name) != getattr(initial_state, name)
        }
        assert changed == {
            "m10_building_demolished",
            "m04_black_bars_in_flower_box_or_setup_position",
            "m04_black_bars_anywhere_else",
        }

    def test_initial_state_is_left_untouched(self, initial_state):
        snapshot = initial_state.to_dict()
        new_state = apply_demolition(initial_state)
        assert new_state is not initial_state
        assert initial_state.to_dict() == snapshot
        assert initial_state.m10_building_demolished is False

    def test_does_nothing_if_already_demolished(self, initial_state):
        intermediate_state = apply_demolition(initial_state)
        last_state = apply_demolition(intermediate_state)
        assert last_state == intermediate_state

    def test_demolished_score(self, initial_state):
        """85 for the building, minus 8 + 8 for each of the four bars."""
        assert compute_score(apply_demolition(initial_state)) == 96 + 85 - 4 * 16

    def test_accepts_a_mapping(self, played_match):
        played_match["m10_building_demolished"] = False
        new_state = apply_demolition(played_match)
        assert isinstance(new_state, MissionsState)
        assert new_state.m04_black_bars_anywhere_else == 3 + 4
        assert played_match["m04_black_bars_anywhere_else"] == 3

    def test_standing_building_needs_its_bars_in_setup(self):
        """The four building bars cannot be missing while the building stands."""
        with pytest.raises(InvalidValueError) as exc_info:
            apply_demolition({"m09_valuables_in_safety": True})
        assert exc_info.value.group == MissionGroup.M04

        with pytest.raises(InvalidValueError):
            apply_demolition({"m04_black_bars_in_flower_box_or_setup_position": 3})

    def test_missing_anywhere_else_counter_starts_from_zero(self):
        new_state = apply_demolition({"m04_black_bars_in_flower_box_or_setup_position": 4})
        assert new_state.m04_black_bars_in_flower_box_or_setup_position == 0
        assert new_state.m04_black_bars_anywhere_else == 4
        assert compute_score(new_state) == 85 - 32

    def test_demolished_state_can_be_scored(self, initial_state):
        assert compute_score(apply_demolition(initial_state.to_dict())) == 117

    def test_demolished_mapping_comes_back_equal(self, played_match):
        """An already demolished mapping is returned as an equal MissionsState."""
        new_state = apply_demolition(played_match)
        assert isinstance(new_state, MissionsState)
        assert new_state.to_dict() == played_match

    def test_uses_rule_book_bar_count(self, initial_state):
        new_state = apply_demolition(initial_state, RuleBook(black_bars_in_building=2))
        assert new_state.m04_black_bars_anywhere_else == 2

    def test_front_end_name(self):
        assert macro_demolish_building is apply_demolition

    @pytest.mark.parametrize("times", [2, 3, 5])
    def test_idempotent(self, initial_state, times):
        state = apply_demolition(initial_state)
        once = state
        for _ in range(times - 1):
            state = apply_demolition(state)
        assert state == once
