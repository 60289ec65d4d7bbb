from .num_utils import format_number, is_real_number, round_half_up

__all__ = ["format_number", "is_real_number", "round_half_up"]
