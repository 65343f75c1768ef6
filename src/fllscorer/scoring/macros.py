"""Macros replaying in-match events on a missions state."""

import logging
from dataclasses import replace

from ..core.enums import MissionGroup
from ..core.errors import InvalidValueError
from ..core.missions_state import MissionsState
from ..core.rules import RuleBook, TRASH_TREK_2015
from .calculator import StateLike


logger = logging.getLogger(__name__)


def apply_demolition(state: StateLike, rules: RuleBook = TRASH_TREK_2015) -> MissionsState:
    """
    Replay the robot triggering the Building demolition.

    The Building is made of four black bars: they leave their setup position
    and land "anywhere else" on the mat. The building can only be demolished
    once, so an already demolished state comes back as an equal copy.

    A mapping is converted with ``MissionsState.from_dict`` first, so the
    result is always a MissionsState; on the no-op branch its ``to_dict()``
    equals the known fields of the input. The input is never modified.

    Args:
        state: Missions state, or a mapping of field names to values
        rules: Rule book giving the number of bars in the Building

    Returns:
        New missions state

    Raises:
        InvalidValueError: The standing Building's bars are not all counted
            in their setup position
    """
    if not isinstance(state, MissionsState):
        state = MissionsState.from_dict(state)

    if state.m10_building_demolished:
        logger.debug("Building already demolished, nothing to do")
        return replace(state)

    bars = rules.black_bars_in_building
    in_setup = state.m04_black_bars_in_flower_box_or_setup_position
    if in_setup is None or in_setup < bars:
        raise InvalidValueError(
            MissionGroup.M04,
            f"a standing Building holds {bars} black bars in setup position, got {in_setup}",
        )

    logger.debug(f"Demolishing building, {bars} black bars fall off their setup position")

    return replace(
        state,
        m10_building_demolished=True,
        m04_black_bars_in_flower_box_or_setup_position=in_setup - bars,
        m04_black_bars_anywhere_else=(state.m04_black_bars_anywhere_else or 0) + bars,
    )


# Name used by scoring front-ends
macro_demolish_building = apply_demolition
