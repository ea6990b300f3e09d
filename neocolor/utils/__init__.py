from .num_utils import round_half_away, np_round_half_away

__all__ = ['round_half_away', 'np_round_half_away']
