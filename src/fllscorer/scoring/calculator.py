"""Score calculator for the TRASH TREK robot game.

Only the fields present in the missions state are scored. The penalties
counter is the one field that scores when its value is 0: the four bars kept
off the field for penalties still count as being in their setup position.
"""

import logging
from typing import Dict, List, Mapping, Tuple, Union

from ..core.enums import MissionGroup
from ..core.errors import CannotScoreBothError, InvalidValueError, ScoringError
from ..core.missions_state import COUNTER_FIELDS, MissionsState, group_of
from ..core.rules import RuleBook, TRASH_TREK_2015


logger = logging.getLogger(__name__)

StateLike = Union[MissionsState, Mapping[str, object]]

COLORS = ("yellow", "blue")

# Flags worth a fixed value, with the rule book attribute holding it
FLAG_RULES: List[Tuple[str, str]] = [
    ("m01_other_yellow_bin_in_own_safety", "bin_in_safety"),
    ("m01_other_blue_bin_in_own_safety", "bin_in_safety"),
    ("m03_truck_supports_bin", "truck_supports_bin"),
    ("m03_bin_east_of_guide", "bin_east_of_guide"),
    ("m05_one_person_in_sorter_area", "person_in_sorter_area"),
    ("m06_engine_unit_installed", "engine_unit_installed"),
    ("m06_car_folded", "car_folded"),
    ("m07_chicken_in_circle", "chicken_in_circle"),
    ("m08_compost_partly_in_safety", "compost_partly_in_safety"),
    ("m08_compost_completely_in_safety", "compost_completely_in_safety"),
    ("m09_valuables_in_safety", "valuables_in_safety"),
    ("m10_building_demolished", "building_demolished"),
    ("m12_compost_in_package", "compost_in_package"),
]

# Counters worth a fixed value per unit, with no gating or tiering
UNIT_RULES: List[Tuple[str, str]] = [
    ("m02_methanes_collected", "methane"),
    ("m04_black_bars_in_flower_box_or_setup_position", "black_bar_in_flower_box_or_setup"),
    ("m04_black_bars_in_matching_bin", "black_bar_in_matching_bin"),
    ("m04_black_bars_anywhere_else", "black_bar_anywhere_else"),
    ("m07_bags_in_safety", "bag_in_safety"),
    ("m07_animals_in_circle", "animal_in_circle"),
    ("m11_planes_in_safety", "plane_in_safety"),
]

# Counters with a physical maximum, with the rule book attribute holding it
COUNTER_LIMITS: List[Tuple[str, str]] = [
    ("m02_methanes_collected", "max_methanes"),
    ("m04_yellow_bars_in_correct_bin", "max_colored_bars"),
    ("m04_blue_bars_in_correct_bin", "max_colored_bars"),
    ("m04_black_bars_in_flower_box_or_setup_position", "max_black_bars"),
    ("m04_black_bars_in_matching_bin", "max_black_bars"),
    ("m04_black_bars_anywhere_else", "max_black_bars"),
    ("m07_bags_in_safety", "max_bags"),
    ("m07_animals_in_circle", "max_animals"),
    ("m11_planes_in_safety", "max_planes"),
    # "[...] not to exceed four Bars"
    ("penalties", "max_penalties"),
]

BLACK_BAR_FIELDS = (
    "m04_black_bars_in_flower_box_or_setup_position",
    "m04_black_bars_in_matching_bin",
    "m04_black_bars_anywhere_else",
)

# A single prop cannot be scored in both positions ("Score Only One Way")
EXCLUSIVE_PAIRS: List[Tuple[str, str]] = [
    ("m01_own_yellow_bin_in_other_safety", "m04_own_yellow_bin_in_tranfer_area"),
    ("m01_own_blue_bin_in_other_safety", "m04_own_blue_bin_in_tranfer_area"),
    ("m06_engine_unit_installed", "m06_car_folded"),
    ("m08_compost_partly_in_safety", "m08_compost_completely_in_safety"),
]


def _as_state(state: StateLike) -> MissionsState:
    if isinstance(state, MissionsState):
        state.check_types()
        return state
    return MissionsState.from_dict(state)


def validate_state(state: MissionsState, rules: RuleBook = TRASH_TREK_2015):
    """
    Reject states that cannot exist on the field.

    Raises:
        InvalidValueError: A counter is negative or above its physical maximum
        CannotScoreBothError: A prop is reported in two positions at once
    """
    for name in sorted(COUNTER_FIELDS):
        value = getattr(state, name)
        if value is not None and value < 0:
            raise InvalidValueError(group_of(name), f"{name} cannot be negative, got {value}")

    for name, attribute in COUNTER_LIMITS:
        value = getattr(state, name)
        limit = getattr(rules, attribute)
        if value is not None and value > limit:
            raise InvalidValueError(group_of(name), f"{name} cannot exceed {limit}, got {value}")

    black_bars = sum(getattr(state, name) or 0 for name in BLACK_BAR_FIELDS)
    if black_bars > rules.max_black_bars:
        raise InvalidValueError(
            MissionGroup.M04,
            f"only {rules.max_black_bars} black bars exist, got {black_bars}",
        )

    # The bin value and the bar count live in separate fields, so make sure
    # a bin is not in two places at once
    for first, second in EXCLUSIVE_PAIRS:
        if getattr(state, first) and getattr(state, second):
            raise CannotScoreBothError(group_of(second), f"{first} and {second}")


def _colored_bar_value(state: MissionsState, color: str, rules: RuleBook) -> int:
    """Per bar value of a yellow or blue bar, by where its bin ended up."""
    if getattr(state, f"m01_own_{color}_bin_in_other_safety"):
        # Only the M01 bin value applies
        return rules.colored_bar_in_other_safety
    if getattr(state, f"m04_own_{color}_bin_in_tranfer_area"):
        return rules.colored_bar_in_transfer_area
    return rules.colored_bar_default


def score_breakdown(
    state: StateLike, rules: RuleBook = TRASH_TREK_2015
) -> Dict[MissionGroup, int]:
    """
    Points earned by each mission group.

    Groups without any present field are left out, so the breakdown of an
    empty state is empty.

    Args:
        state: Missions state, or a mapping of field names to values
        rules: Rule book to score with

    Returns:
        Mapping of mission group to points, in rulebook order

    Raises:
        InvalidValueError: A counter is out of its physical range
        CannotScoreBothError: Two exclusive outcomes are both reported
    """
    state = _as_state(state)
    try:
        validate_state(state, rules)
    except ScoringError as e:
        logger.warning(f"Rejected missions state: {e}")
        raise

    points: Dict[MissionGroup, int] = {}

    def add(field_name: str, value: int):
        group = group_of(field_name)
        points[group] = points.get(group, 0) + value

    # Own bins in the other team's safety only count with a matching bar inside
    for color in COLORS:
        name = f"m01_own_{color}_bin_in_other_safety"
        if state.is_present(name):
            bars = getattr(state, f"m04_{color}_bars_in_correct_bin") or 0
            add(name, rules.bin_in_safety if getattr(state, name) and bars > 0 else 0)

    for name, attribute in FLAG_RULES:
        if state.is_present(name):
            add(name, getattr(rules, attribute) if getattr(state, name) else 0)

    for name, attribute in UNIT_RULES:
        if state.is_present(name):
            add(name, getattr(state, name) * getattr(rules, attribute))

    for color in COLORS:
        name = f"m04_{color}_bars_in_correct_bin"
        if state.is_present(name):
            add(name, getattr(state, name) * _colored_bar_value(state, color, rules))

    if state.is_present("penalties"):
        add("penalties", rules.penalty_baseline + state.penalties * rules.penalty)

    ordered = {group: points[group] for group in MissionGroup if group in points}
    for group, value in ordered.items():
        logger.debug(f"{group.value}: {value:+d}")
    return ordered


def compute_score(state: StateLike, rules: RuleBook = TRASH_TREK_2015) -> int:
    """
    Compute the robot game score of a missions state.

    Args:
        state: Missions state, or a mapping of field names to values
        rules: Rule book to score with

    Returns:
        Total score, which may be negative

    Raises:
        InvalidValueError: A counter is out of its physical range
        CannotScoreBothError: Two exclusive outcomes are both reported
    """
    score = sum(score_breakdown(state, rules).values())
    logger.debug(f"Total score: {score}")
    return score


def has_leniency_bonus(state: StateLike) -> bool:
    """Whether the state earns the R10 Leniency Bonus (M05 accomplished)."""
    if isinstance(state, MissionsState):
        return state.m05_one_person_in_sorter_area is True
    return state.get("m05_one_person_in_sorter_area") is True
