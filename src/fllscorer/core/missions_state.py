"""Missions state record.

Every field is optional: ``None`` means the mission was not attempted and
scores nothing. Field names match the keys used by scoring front-ends, so a
JSON record maps directly onto a MissionsState.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .enums import MissionGroup
from .errors import InvalidValueError
from .rules import TRASH_TREK_2015


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MissionsState:
    """What the referee observed on the field at the end of the match."""

    # Own bins are booleans because each one must be told apart from the
    # other when computing the M04 bar values
    m01_own_yellow_bin_in_other_safety: Optional[bool] = None
    m01_own_blue_bin_in_other_safety: Optional[bool] = None
    m01_other_yellow_bin_in_own_safety: Optional[bool] = None
    m01_other_blue_bin_in_own_safety: Optional[bool] = None
    m02_methanes_collected: Optional[int] = None
    m03_truck_supports_bin: Optional[bool] = None
    m03_bin_east_of_guide: Optional[bool] = None
    m04_yellow_bars_in_correct_bin: Optional[int] = None
    m04_blue_bars_in_correct_bin: Optional[int] = None
    # Exclusive with the matching M01 own bin flag
    m04_own_yellow_bin_in_tranfer_area: Optional[bool] = None
    m04_own_blue_bin_in_tranfer_area: Optional[bool] = None
    m04_black_bars_in_flower_box_or_setup_position: Optional[int] = None
    m04_black_bars_in_matching_bin: Optional[int] = None
    m04_black_bars_anywhere_else: Optional[int] = None
    m05_one_person_in_sorter_area: Optional[bool] = None
    m06_engine_unit_installed: Optional[bool] = None
    m06_car_folded: Optional[bool] = None
    m07_bags_in_safety: Optional[int] = None
    m07_animals_in_circle: Optional[int] = None
    m07_chicken_in_circle: Optional[bool] = None
    m08_compost_partly_in_safety: Optional[bool] = None
    m08_compost_completely_in_safety: Optional[bool] = None
    m09_valuables_in_safety: Optional[bool] = None
    m10_building_demolished: Optional[bool] = None
    m11_planes_in_safety: Optional[int] = None
    m12_compost_in_package: Optional[bool] = None
    penalties: Optional[int] = None

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        """Names of all mission fields, in rulebook order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MissionsState":
        """
        Build a state from a mapping of field names to values.

        Keys that are not mission fields are ignored.

        Raises:
            InvalidValueError: If a value has the wrong type
        """
        known = set(cls.field_names())
        unknown = sorted(key for key in data if key not in known)
        if unknown:
            logger.warning(f"Ignoring unknown mission fields: {', '.join(unknown)}")

        state = cls(**{key: value for key, value in data.items() if key in known})
        state.check_types()
        return state

    def to_dict(self) -> Dict[str, Union[bool, int]]:
        """Convert to a dictionary of the present fields only."""
        return {
            name: getattr(self, name)
            for name in self.field_names()
            if getattr(self, name) is not None
        }

    def is_present(self, name: str) -> bool:
        """Whether a field was given a value."""
        return getattr(self, name) is not None

    def check_types(self):
        """
        Check that flags hold booleans and counters hold integers.

        Raises:
            InvalidValueError: On the first field holding the wrong type
        """
        for name in self.field_names():
            value = getattr(self, name)
            if value is None:
                continue
            if name in COUNTER_FIELDS:
                valid = isinstance(value, int) and not isinstance(value, bool)
                expected = "an integer"
            else:
                valid = isinstance(value, bool)
                expected = "a boolean"
            if not valid:
                raise InvalidValueError(
                    group_of(name), f"{name} must be {expected}, got {value!r}"
                )


COUNTER_FIELDS = frozenset(
    f.name for f in fields(MissionsState) if f.type == Optional[int]
)

FLAG_FIELDS = frozenset(
    f.name for f in fields(MissionsState) if f.type == Optional[bool]
)


def group_of(field_name: str) -> MissionGroup:
    """Mission group a field belongs to, from its ``mNN_`` prefix."""
    if field_name == "penalties":
        return MissionGroup.PENALTIES
    return MissionGroup(field_name[:3].upper())


# Nothing scores at the start of the match except the black bars sitting in
# their setup position (the Building, the Large Package and the Sorter tray)
# and the four bars the Ref keeps off the field for penalties
INITIAL_MISSIONS_STATE = MissionsState(
    m01_own_yellow_bin_in_other_safety=False,
    m01_own_blue_bin_in_other_safety=False,
    m01_other_yellow_bin_in_own_safety=False,
    m01_other_blue_bin_in_own_safety=False,
    m02_methanes_collected=0,
    m03_truck_supports_bin=False,
    m03_bin_east_of_guide=False,
    m04_yellow_bars_in_correct_bin=0,
    m04_blue_bars_in_correct_bin=0,
    m04_own_yellow_bin_in_tranfer_area=False,
    m04_own_blue_bin_in_tranfer_area=False,
    m04_black_bars_in_flower_box_or_setup_position=TRASH_TREK_2015.black_bars_in_setup_position,
    m04_black_bars_in_matching_bin=0,
    m04_black_bars_anywhere_else=0,
    m05_one_person_in_sorter_area=False,
    m06_engine_unit_installed=False,
    m06_car_folded=False,
    m07_bags_in_safety=0,
    m07_animals_in_circle=0,
    m07_chicken_in_circle=False,
    m08_compost_partly_in_safety=False,
    m08_compost_completely_in_safety=False,
    m09_valuables_in_safety=False,
    m10_building_demolished=False,
    m11_planes_in_safety=0,
    m12_compost_in_package=False,
    penalties=0,
)
