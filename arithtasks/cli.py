"""Command-line front end: each task reads its input from standard input."""

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from arithtasks.basics import highest_power_of_two, middle_value
from arithtasks.boat import best_boat
from arithtasks.candy import candies_eaten
from arithtasks.dogs import dogs_attacking
from arithtasks.football import possible_scores
from arithtasks.money import pay_minimum_coins, remaining_money
from arithtasks.painting import min_span
from arithtasks.photo import PhotoSession
from arithtasks.puzzle import best_fragment
from arithtasks.robot import max_boxes
from arithtasks.schedule import class_dates
from arithtasks.sequences import longest_two_kind_run
from arithtasks.textpairs import similarity_degree
from arithtasks.trading import max_profit


class InputError(ValueError):
    """Raised when the task input is truncated or malformed."""


class _Tokens:
    """Whitespace-separated tokens of the task input."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise InputError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _money(tokens: _Tokens) -> Iterator[str]:
    purse = tuple(tokens.numbers(3))
    count = tokens.number()
    purchases = [tuple(tokens.numbers(3)) for _ in range(count)]
    left = remaining_money(purse, purchases)
    yield "-1" if left is None else " ".join(map(str, left))


def _football(tokens: _Tokens) -> Iterator[str]:
    favourites = tokens.numbers(11)
    opponents = tokens.numbers(11)
    scorers = tokens.numbers(tokens.number())
    scores = possible_scores(favourites, opponents, scorers)
    yield str(len(scores))
    for ours, theirs in scores:
        yield f"{ours}:{theirs}"


def _trade(tokens: _Tokens) -> Iterator[str]:
    sellers, buyers = tokens.numbers(2)
    prices = tokens.numbers(sellers)
    offers = tokens.numbers(buyers)
    yield str(max_profit(prices, offers))


def _photo(tokens: _Tokens) -> Iterator[str]:
    trees, photos = tokens.numbers(2)
    session = PhotoSession(tokens.numbers(trees))
    for _ in range(photos):
        left, right, aperture = tokens.numbers(3)
        yield str(session.luck(left, right, aperture))


def _robot(tokens: _Tokens) -> Iterator[str]:
    count, passes = tokens.numbers(2)
    yield str(max_boxes(tokens.numbers(count), passes))


def _dogs(tokens: _Tokens) -> Iterator[str]:
    a, b, c, d = tokens.numbers(4)
    for minute in tokens.numbers(3):
        yield str(dogs_attacking(minute, (a, b), (c, d)))


def _coins(tokens: _Tokens) -> Iterator[str]:
    result = pay_minimum_coins(*tokens.numbers(5))
    yield "-1" if result is None else " ".join(map(str, result))


def _middle(tokens: _Tokens) -> Iterator[str]:
    yield str(middle_value(*tokens.numbers(3)))


def _candy(tokens: _Tokens) -> Iterator[str]:
    yield str(candies_eaten(*tokens.numbers(3)))


def _schedule(tokens: _Tokens) -> Iterator[str]:
    for month, day in class_dates(*tokens.numbers(2)):
        yield f"{month} {day}"


def _power(tokens: _Tokens) -> Iterator[str]:
    yield str(highest_power_of_two(tokens.number()))


def _similarity(tokens: _Tokens) -> Iterator[str]:
    first = tokens.word()
    second = tokens.word()
    yield str(similarity_degree(first, second))


def _runs(tokens: _Tokens) -> Iterator[str]:
    yield str(longest_two_kind_run(tokens.numbers(tokens.number())))


def _painting(tokens: _Tokens) -> Iterator[str]:
    count, k = tokens.numbers(2)
    groups = [tokens.numbers(tokens.number()) for _ in range(count)]
    yield str(min_span(groups, k))


def _boat(tokens: _Tokens) -> Iterator[str]:
    values = tokens.numbers(tokens.number())
    height, width = tokens.numbers(2)
    rows = [tokens.word()[:width] for _ in range(height)]
    yield str(best_boat(values, rows))


def _puzzle(tokens: _Tokens) -> Iterator[str]:
    length, k = tokens.numbers(2)
    text = tokens.word()
    yield best_fragment(text[:length], k)


_TASKS: dict[str, Callable[[_Tokens], Iterator[str]]] = {
    "money": _money,
    "football": _football,
    "trade": _trade,
    "photo": _photo,
    "robot": _robot,
    "dogs": _dogs,
    "coins": _coins,
    "middle": _middle,
    "candy": _candy,
    "schedule": _schedule,
    "power": _power,
    "similarity": _similarity,
    "runs": _runs,
    "painting": _painting,
    "boat": _boat,
    "puzzle": _puzzle,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one task on standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="arithtasks", description="Solve an arithmetic task read from stdin."
    )
    parser.add_argument("task", choices=sorted(_TASKS), help="task to solve")
    args = parser.parse_args(argv)

    tokens = _Tokens(sys.stdin.read())
    try:
        lines = list(_TASKS[args.task](tokens))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())