import math


def round_half_up(value: float) -> int:
    """
    Rounds .5 away from zero for positive values (2.5 -> 3), unlike the
    built-in round() which rounds half to even (2.5 -> 2).
    Salary and score figures are rounded this way so runs stay comparable
    with previously stored simulations.
    """
    return int(math.floor(value + 0.5))


def round_to(value: float, decimals: int) -> float:
    factor = 10 ** decimals
    return round_half_up(value * factor) / factor


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))
