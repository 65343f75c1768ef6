"""Pytest configuration and fixtures."""

import logging

import pytest
from src.fllscorer.core.missions_state import INITIAL_MISSIONS_STATE


@pytest.fixture
def initial_state():
    """Missions state at the start of the match."""
    return INITIAL_MISSIONS_STATE


@pytest.fixture
def played_match():
    """A realistic end of match, as sent by a scoring front-end."""
    return {
        "m01_own_yellow_bin_in_other_safety": True,
        "m01_own_blue_bin_in_other_safety": False,
        "m01_other_yellow_bin_in_own_safety": False,
        "m01_other_blue_bin_in_own_safety": True,
        "m02_methanes_collected": 2,
        "m03_truck_supports_bin": True,
        "m03_bin_east_of_guide": False,
        "m04_yellow_bars_in_correct_bin": 3,
        "m04_blue_bars_in_correct_bin": 2,
        "m04_own_yellow_bin_in_tranfer_area": False,
        "m04_own_blue_bin_in_tranfer_area": True,
        "m04_black_bars_in_flower_box_or_setup_position": 4,
        "m04_black_bars_in_matching_bin": 1,
        "m04_black_bars_anywhere_else": 3,
        "m05_one_person_in_sorter_area": True,
        "m06_engine_unit_installed": False,
        "m06_car_folded": True,
        "m07_bags_in_safety": 2,
        "m07_animals_in_circle": 1,
        "m07_chicken_in_circle": True,
        "m08_compost_partly_in_safety": False,
        "m08_compost_completely_in_safety": True,
        "m09_valuables_in_safety": False,
        "m10_building_demolished": True,
        "m11_planes_in_safety": 1,
        "m12_compost_in_package": False,
        "penalties": 1,
    }


@pytest.fixture(autouse=True)
def scorer_logs(caplog):
    """Capture scorer logs at DEBUG so log assertions can see them."""
    caplog.set_level(logging.DEBUG, logger="src.fllscorer")
    return caplog

