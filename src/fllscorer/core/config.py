"""Scorer configuration dataclass."""

import os
from dataclasses import dataclass


@dataclass
class ScorerConfig:
    """Runtime settings for the scorer command line.

    Point values are not configurable here; they live in the rule books.
    """

    # ===========================================
    # RULES
    # ===========================================
    # Key into RULE_BOOKS
    rule_set: str = "trash_trek_2015"

    # ===========================================
    # LOGGING
    # ===========================================
    verbose: bool = False
    save_to_file: bool = False
    log_dir: str = "data/logs"

    @classmethod
    def from_env(cls) -> "ScorerConfig":
        """
        Build a config from FLLSCORER_* environment variables.

        Call ``load_dotenv()`` first to pick up a ``.env`` file.
        """
        defaults = cls()
        return cls(
            rule_set=os.getenv("FLLSCORER_RULE_SET", defaults.rule_set),
            verbose=_env_flag("FLLSCORER_VERBOSE", defaults.verbose),
            save_to_file=_env_flag("FLLSCORER_SAVE_LOGS", defaults.save_to_file),
            log_dir=os.getenv("FLLSCORER_LOG_DIR", defaults.log_dir),
        )


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
