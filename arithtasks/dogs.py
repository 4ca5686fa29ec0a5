"""How many of two periodic dogs attack a visitor arriving at a given minute."""


def is_aggressive(minute: int, aggressive: int, calm: int) -> bool:
    """Tell whether a dog is aggressive during the given (1-based) minute."""
    period = aggressive + calm
    phase = minute % period or period
    return phase <= aggressive


def dogs_attacking(
    minute: int, first: tuple[int, int], second: tuple[int, int]
) -> int:
    """Count the dogs, each given as (aggressive, calm), attacking at ``minute``."""
    return sum(is_aggressive(minute, *dog) for dog in (first, second))