from copy import deepcopy

DEFAULT_RESOLUTION = 101
DEFAULT_N_INTERIOR = 2

DEFAULT_CONSTANTS = {
    "resolution": DEFAULT_RESOLUTION,
    "n_interior": DEFAULT_N_INTERIOR,
    "deviation": 0.0,
}


def default_constants() -> dict:
    return deepcopy(DEFAULT_CONSTANTS)
