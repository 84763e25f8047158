# adventkit

Solutions to the Advent of Code 2022 puzzles (days 1 to 12), together with a
small toolkit for working on puzzles: fetching inputs and descriptions through
the `aoc` command-line client, creating a new day's directory from templates,
and running every solution of a year with a timing summary.

## Installation

```
pip install .
```

With the test suite:

```
pip install ".[test]"
pytest
```

## Commands

`adventkit-download` and `adventkit-read` start the external `aoc` client,
which must be installed and set up with your session. Both first check that
`aoc -V` can be run and exit with status 1 if it cannot. The day is a number
from 0 to 255; `-y`/`--year` defaults to 2023.

Download a day's input to `<year>/day_<dd>/input.txt` and its description to
`<year>/day_<dd>/README.md` (it also creates `src/puzzles`):

```
adventkit-download 5
adventkit-download 5 --year 2022
```

Show a puzzle description in the terminal:

```
adventkit-read 5 -y 2022
```

Create `<year>/day_<dd>/` from the files in `.templates/` and
`.templates/src/` of the current directory. The placeholder `%%NAME%%` in the
copied `pyproject.toml` is replaced by `day_<year>_<dd>`; the command fails if
the destination already exists:

```
adventkit-scaffold 6 --year 2023
```

Run the modules `adventkit.y<year>.day01` to `day25` one after another (the
year defaults to 2023), print each one's output, or `Not solved.` when a day
prints nothing, and finish with the total elapsed time:

```
adventkit-run-all --year 2022
```

## Using the solutions from Python

The solutions are `adventkit.y2022.day01` to `adventkit.y2022.day12`;
`adventkit.y2022.day00` and `adventkit.y2023.day05` only read the input as a
number, forwards and backwards. Every module has `part_one(input_text)` and
`part_two(input_text)`, returning the answer or `None` when there is none.

```python
from adventkit.y2022 import day01

with open("input.txt", encoding="utf-8") as handle:
    text = handle.read()
print(day01.part_one(text), day01.part_two(text))
```

Each module's `main(argv)` reads the file named by its first argument, or
`<year>/day_<dd>/input.txt` below the current directory, and prints both
parts with their timings.

Some days keep their models in separate modules: `day08_grid` (`UGrid`),
`day09_rope` (`Position`, `Motion`, `Rope`) and `day11_notes` (the monkey
notes parser, `parse_notes` and friends).

`adventkit.template` holds the shared helpers: `read_input` and
`read_example` load `input.txt` and `example.txt` / `example_<suffix>.txt`
from a directory, `solve` prints a part's answer with its elapsed time, and
`parse_exec_time` adds up the `(elapsed: ...)` timings of such output in
milliseconds. Failures of the `aoc` client are raised as subclasses of
`AocCliError`.

## What it does not do

The package does not talk to the Advent of Code website itself; downloading
and reading go through the `aoc` client. It ships no puzzle inputs and no
`.templates/` directory: the scaffold command needs one that you provide.
Only the 2022 puzzles for days 1 to 12 are solved.