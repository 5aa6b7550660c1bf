from .helpers import value_or_default, get_dimension
from .num_utils import round_half_away, np_round_half_away

__all__ = [
    "value_or_default",
    "get_dimension",
    "round_half_away",
    "np_round_half_away",
]
