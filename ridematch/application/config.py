"""
Default configuration for the assign_rides use case (data files, depot, optimizer cap).
A single place so API, CLI and use case share the same values.
Values come from the environment; a local .env file is loaded if present.
Invalid values stop the process at import with a ConfigError naming the variable.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from ridematch.domain.constraints import OptimizerConfig

load_dotenv()


class ConfigError(ValueError):
    """An environment variable holds a value the service cannot use."""


def env_int(name: str, minimum: int) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer >= {minimum}, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be an integer >= {minimum}, got {raw!r}")
    return value


def env_positive_float(name: str) -> float | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number > 0, got {raw!r}") from None
    # nan/inf fail this check too
    if not 0 < value < float("inf"):
        raise ConfigError(f"{name} must be a number > 0, got {raw!r}")
    return value


PEOPLE_AREAS_FILE = "people_areas.csv"
DISTANCE_MATRIX_FILE = "distance_matrix.csv"

# Common starting point of every route
DEFAULT_DEPOT = os.getenv("CARPOOL_DEPOT", "Tichonet")

# HTTP base URL wins over the local directory when both are set
DATA_BASE_URL = os.getenv("CARPOOL_DATA_BASE_URL") or None
DATA_DIR = Path(os.getenv("CARPOOL_DATA_DIR", "public"))
FETCH_TIMEOUT_S = env_positive_float("CARPOOL_FETCH_TIMEOUT_S") or 30.0

# Uncapped unless set: the search stops by itself at a local optimum
DEFAULT_OPTIMIZER_CONFIG = OptimizerConfig(
    max_passes=env_int("CARPOOL_MAX_SWAP_PASSES", minimum=1),
    time_budget_s=env_positive_float("CARPOOL_SWAP_TIME_BUDGET_S"),
)
