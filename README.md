# cccsolve

Solutions to problems from a series of programming contests (2010 to 2024),
written as plain Python functions. Each contest has its own module, and each
problem can be solved either by calling a function directly or by passing the
problem's input text to the module's `run` function. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it as a library

Every problem has a function that takes ordinary Python values and returns
the answer:

```python
from cccsolve.contest2010j import finger_ways, knight_moves
from cccsolve.contest2014j import classify_triangle, vote_winner

finger_ways(5)                  # 3
knight_moves((1, 1), (1, 1))    # 0
classify_triangle(60, 60, 60)   # "Equilateral"
vote_winner("AABBA")            # "A"
```

Modules, one per contest:

| Module                    | Contents                                                                 |
|---------------------------|--------------------------------------------------------------------------|
| `cccsolve.contest2010j`   | `finger_ways`, `Walker`, `walk_winner`, `Machine`, `run_program`, `find_cycle_length`, `knight_moves` |
| `cccsolve.contest2010s`   | `performance`, `top_two`, `decode`                                        |
| `cccsolve.contest2014j`   | `classify_triangle`, `vote_winner`, `dice_game`, `remaining_friends`, `partners_consistent` |
| `cccsolve.contest2015j`   | `special_day`, `mood`, `closest_vowel`, `next_consonant`, `encode_word`, `friend_wait_times` |
| `cccsolve.contest2016j`   | `parse_clock`, `format_clock`, `advance_commute`, `total_speed`           |
| `cccsolve.contest2017j`   | `quadrant`, `sum_shifts`, `can_reach`, `ClockCounter`, `count_arithmetic_times`, `fence_max` |
| `cccsolve.contest2018j`   | `Rotation`, `rotation_for`, `rotate`, `all_reachable`, `shortest_path`, `distance_matrix` |
| `cccsolve.contest2019`    | `solve_substitutions`                                                    |
| `cccsolve.contest2021j`   | `count_gold_grid`, `count_gold`                                           |
| `cccsolve.contest2022j`   | `cupcake_leftover`, `count_gold_players`, `harp_instructions`, `count_violations` |
| `cccsolve.contest2023j`   | `delivery_score`, `spiciness`, `best_days`, `trail_perimeter`, `trace_word` |
| `cccsolve.contest2024j`   | `plate_cost`, `dusa_size`, `third_place`, `find_bad_keys`, `harvest_value` |

Several functions follow particular counting or search rules rather than the
textbook answer to the problem; each function's docstring states the rule it
applies. Functions raise `ValueError` on input they cannot work with, such as
missing values or out-of-range indices.

## Solving from problem input

Each contest module also has `run(problem, text)`. It takes the problem
number and the problem's input text, and returns the text the solution
prints. An unknown problem number raises `ValueError`.

```python
from cccsolve import contest2014j

contest2014j.run(1, "60 60 60")   # "Equilateral\n"
```

Problem numbers that each module's `run` accepts:

| Module           | Problems |
|------------------|----------|
| `contest2010j`   | 1–5      |
| `contest2010s`   | 1–2      |
| `contest2014j`   | 1–5      |
| `contest2015j`   | 1–4      |
| `contest2016j`   | 4–5      |
| `contest2017j`   | 1–5      |
| `contest2018j`   | 1–3      |
| `contest2019`    | 1        |
| `contest2021j`   | 1        |
| `contest2022j`   | 1–4      |
| `contest2023j`   | 1–5      |
| `contest2024j`   | 1–5      |

Problem 4 of 2017 ignores its input and prints the count from
`count_arithmetic_times`. Problem 5 of 2023 uses a built-in sample grid and
word when its input is empty.

## Command line

The `cccsolve` command takes a contest and a problem number, reads the
problem's input from standard input and prints the answer:

```
echo "60 60 60" | cccsolve 2014j 1
```

The contest is one of `2010j`, `2010s`, `2014j`, `2015j`, `2016j`, `2017j`,
`2018j`, `2019`, `2021j`, `2022j`, `2023j` and `2024j`. When the input is invalid,
the command writes an error message to standard error and exits with status 1.
Run

```
cccsolve --help
```

for the usage summary.

## What it does not do

Only the problems listed above are covered. There are no solutions for the
other problems of these contests, such as problems 1 to 3 of 2016 or problem 4
of 2018. The command solves one problem per run from standard input. It does
not check answers against expected output.