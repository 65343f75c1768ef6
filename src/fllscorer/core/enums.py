"""Enumerations for mission groups."""

from enum import Enum


class MissionGroup(Enum):
    """Rulebook mission groups, used to tag validation failures and score lines."""

    M01 = "M01"  # Recycled Material
    M02 = "M02"  # Methane
    M03 = "M03"  # Transport
    M04 = "M04"  # Sorting
    M05 = "M05"  # Careers
    M06 = "M06"  # Scrap Cars
    M07 = "M07"  # Cleanup
    M08 = "M08"  # Composting
    M09 = "M09"  # Salvage
    M10 = "M10"  # Building Demolition
    M11 = "M11"  # Purchasing Decisions
    M12 = "M12"  # Repurposing
    PENALTIES = "Penalties"
