"""Static rule table for the robot game.

Point values come from the FLL 2015 TRASH TREK robot game rules
(2015.08.27 release), with the 2016.01 updates applied:
- M01 own bins only score when they hold at least one matching bar
- M07 chicken scores as an animal plus its own bonus (20 + 35)
- Penalties cost both the setup position value and the "anywhere else" value
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class RuleBook:
    """Point values and physical limits for one season.

    Counter values are per unit. A negative value is a deduction.
    """

    # ===========================================
    # M01 RECYCLED MATERIAL
    # ===========================================
    bin_in_safety: int = 60  # Per bin in either safety

    # ===========================================
    # M02 METHANE
    # ===========================================
    methane: int = 40
    max_methanes: int = 2  # One in the Truck, one in the Factory

    # ===========================================
    # M03 TRANSPORT
    # ===========================================
    truck_supports_bin: int = 50
    bin_east_of_guide: int = 60

    # ===========================================
    # M04 SORTING
    # ===========================================
    # Yellow/blue bars, by where their bin ends up:
    # other team's safety -> only the M01 bin value applies
    colored_bar_in_other_safety: int = 0
    colored_bar_in_transfer_area: int = 7
    colored_bar_default: int = 6
    max_colored_bars: int = 8  # Per color, four of them built into the Building
    # Black bars
    black_bar_in_flower_box_or_setup: int = 8
    black_bar_in_matching_bin: int = 3
    black_bar_anywhere_else: int = -8
    # Bars built into the Building, Large Package and Sorter tray
    black_bars_in_setup_position: int = 8
    # Every black bar in the kit, the four kept off the field included
    max_black_bars: int = 12

    # ===========================================
    # M05 CAREERS
    # ===========================================
    person_in_sorter_area: int = 60

    # ===========================================
    # M06 SCRAP CARS (score only one way)
    # ===========================================
    engine_unit_installed: int = 65
    car_folded: int = 50

    # ===========================================
    # M07 CLEANUP
    # ===========================================
    bag_in_safety: int = 30
    animal_in_circle: int = 20
    chicken_in_small_circle: int = 35  # Added to the chicken's animal value
    max_bags: int = 2
    max_animals: int = 3  # The chicken is counted on its own

    # ===========================================
    # M08 COMPOSTING (score only one way)
    # ===========================================
    compost_partly_in_safety: int = 60
    compost_completely_in_safety: int = 80

    # ===========================================
    # M09 - M12
    # ===========================================
    valuables_in_safety: int = 60
    building_demolished: int = 85
    plane_in_safety: int = 40
    max_planes: int = 2  # One in each Package
    compost_in_package: int = 40

    # ===========================================
    # DEMOLITION
    # ===========================================
    black_bars_in_building: int = 4

    # ===========================================
    # PENALTIES
    # ===========================================
    # The Ref keeps four black bars off the field and places one on the mat
    # per penalty, so each penalty moves a bar from "setup" to "anywhere else"
    penalty_bars_off_field: int = 4
    max_penalties: int = 4

    @property
    def chicken_in_circle(self) -> int:
        """Total value of the chicken in the small circle."""
        return self.animal_in_circle + self.chicken_in_small_circle

    @property
    def penalty_baseline(self) -> int:
        """Value of the off-field bars when no penalty was given."""
        return self.penalty_bars_off_field * self.black_bar_in_flower_box_or_setup

    @property
    def penalty(self) -> int:
        """Cost of a single penalty."""
        return self.black_bar_anywhere_else - self.black_bar_in_flower_box_or_setup


TRASH_TREK_2015 = RuleBook()

RULE_BOOKS: Dict[str, RuleBook] = {
    "trash_trek_2015": TRASH_TREK_2015,
}


def get_rule_book(name: str) -> RuleBook:
    """Look up a rule book by name.

    Raises:
        KeyError: If no rule book is registered under that name
    """
    try:
        return RULE_BOOKS[name]
    except KeyError:
        raise KeyError(
            f"Unknown rule set '{name}'. Available: {', '.join(sorted(RULE_BOOKS))}"
        ) from None
