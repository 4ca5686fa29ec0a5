# arithtasks

A small library of solutions to classic arithmetic and algorithmic exercise
problems: wizard money, minimum-coin payments, football scores, trading
profit, photo sessions, warehouse robots, guard dogs, candy vases, weekly
schedules and more.

Every problem is available as a plain Python function (or class), and all of
them can also be run from the command line.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

```python
from arithtasks.basics import middle_value, highest_power_of_two
from arithtasks.textpairs import similarity_degree
from arithtasks.photo import PhotoSession

middle_value(3, 1, 2)                   # 2
highest_power_of_two(10)                # 8
similarity_degree("ABBACAB", "BCABB")   # 4

session = PhotoSession([3, 2, 5])
session.luck(1, 3, 3)                   # 2
```

The modules and what they solve:

| Module | Names | Problem |
| --- | --- | --- |
| `arithtasks.money` | `remaining_money`, `pay_minimum_coins` | galleons, sickles and knuts left after purchases; paying an amount greedily with 5, 10, 20 and 50 kopeck coins |
| `arithtasks.football` | `possible_scores` | every final score consistent with a list of scorers |
| `arithtasks.trading` | `max_profit` | best profit from buying and reselling computers |
| `arithtasks.photo` | `PhotoSession` | how lucky each photo of a tree alley is |
| `arithtasks.robot` | `max_boxes` | most boxes a shelf robot can place in a day |
| `arithtasks.dogs` | `is_aggressive`, `dogs_attacking` | how many dogs attack a visitor at a given minute |
| `arithtasks.basics` | `middle_value`, `highest_power_of_two` | the middle of three numbers; largest power of two not above n |
| `arithtasks.candy` | `candies_eaten` | candies eaten walking between three vases |
| `arithtasks.schedule` | `class_dates` | weekly class dates until the end of a non-leap year |
| `arithtasks.textpairs` | `similarity_degree` | shared neighbouring letter pairs of two strings |
| `arithtasks.sequences` | `longest_two_kind_run` | longest run holding exactly two distinct values |
| `arithtasks.painting` | `min_span` | narrowest range covering k colour groups |
| `arithtasks.boat` | `best_boat` | most valuable boat shape in a grid of letters |
| `arithtasks.puzzle` | `best_fragment` | the chosen cyclic fragment of length k |

`remaining_money` and `pay_minimum_coins` return `None` when the purse cannot
cover the purchases or the amount cannot be paid with the coins at hand.
Inputs that make no sense, such as an empty group in `min_span`, an out of
range `k`, a month below 1 in `class_dates`, rows of unequal length in
`best_boat` or empty text in `best_fragment`, raise `ValueError`.

## Command line

The `arithtasks` command takes the name of a task, reads that task's input
as whitespace-separated tokens from standard input and prints the answer:

```
echo "3 1 2" | arithtasks middle
```

The tasks are `boat`, `candy`, `coins`, `dogs`, `football`, `middle`,
`money`, `painting`, `photo`, `power`, `puzzle`, `robot`, `runs`,
`schedule`, `similarity` and `trade`. Where the library returns `None`, the
command prints `-1`. Truncated or malformed input, and input the library
rejects, is reported on standard error with exit status 1.

See the full list with:

```
arithtasks --help
```