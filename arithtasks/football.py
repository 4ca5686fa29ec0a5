"""Possible final scores reconstructed from scorers' shirt numbers."""

from collections.abc import Iterable


def possible_scores(
    favourites: Iterable[int],
    opponents: Iterable[int],
    scorers: Iterable[int],
) -> list[tuple[int, int]]:
    """Return every possible (favourites, opponents) score.

    A scorer whose number appears in only one team is credited to it; one
    present in both teams may have scored for either. Scorers in neither team
    are ignored.
    """
    fav = set(favourites)
    opp = set(opponents)
    sure_fav = sure_opp = ambiguous = 0
    for number in scorers:
        in_fav, in_opp = number in fav, number in opp
        if in_fav and in_opp:
            ambiguous += 1
        elif in_fav:
            sure_fav += 1
        elif in_opp:
            sure_opp += 1
    return [
        (sure_fav + k, sure_opp + ambiguous - k) for k in range(ambiguous + 1)
    ]