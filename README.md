# aockit

A small library of puzzle solvers, each in its own module:

- `aockit.diagnostic`: 12-bit binary diagnostic entries. `DiagnosticLog`
  (built from entries or with `DiagnosticLog.from_stream`) gives the most and
  least frequent bit in each position; `parse_entry`, `most_common_bits`,
  `least_common_bits`, `entry_value` and `flipped_entry_value` work on plain
  entries (tuples of booleans).
- `aockit.caves`: cave maps built from `a-b` tunnel lines (`load_caves`,
  `CaveMap`, `CaveMapBuilder`). `CaveRoutes` and `RouteIterator` walk every
  route from `start` to `end` that enters each small cave at most once;
  `CaveRevisitor` lists the routes that may enter one small cave twice.
  `route_as_string` renders a route as comma-separated cave names.
- `aockit.octopus`: `DumboOctopusModel`, a square grid of energy levels
  (10 by 10 by default) with `increment`, `flash`, `step` and
  `find_first_sync_step`; it can be read from digit lines with
  `DumboOctopusModel.from_stream`.
- `aockit.paperfold`: `Paper` (a set of `x,y` marks), `Fold` and
  `FoldSequence` (`fold along x=N` / `fold along y=N` lines), and
  `PaperFolder` / `apply_fold` to fold the paper. `Paper.as_matrix` renders
  the marks as rows of 0 and 1.
- `aockit.snailfish_number`: the `Pair` tree, `parse_number` and
  `read_numbers`.
- `aockit.snailfish_arithmetic`: `explode`, `split`, `reduce_number`, `add`
  and `total`.
- `aockit.strings`: `split` (with `SplitBehaviour.DROP_EMPTY` to drop empty
  pieces), `strip` and `join`.

Errors are raised as subclasses of `aockit.errors.AocError`:
`OutOfRangeError`, `InvalidArgumentError` and `InputError`.

## Installation

```
pip install .
```

## Examples

Count cave routes:

```python
import io
from aockit.caves import load_caves, CaveRoutes, CaveRevisitor, route_as_string

caves = load_caves(io.StringIO("start-A\nstart-b\nA-c\nA-b\nb-d\nA-end\nb-end"))
routes = [route_as_string(r) for r in CaveRoutes(caves)]
print(len(routes))                         # 10
print(len(CaveRevisitor(caves).routes()))  # 36
```

`load_caves` expects a tunnel on every line, so the text must not end with a
newline.

Add snailfish numbers:

```python
from aockit.snailfish_number import parse_number
from aockit.snailfish_arithmetic import add

result = add(parse_number("[[[[4,3],4],4],[7,[[8,4],9]]]"), parse_number("[1,1]"))
print(result)              # [[[[0,7],4],[[7,8],[6,0]]],[8,1]]
print(result.magnitude())
```

Fold paper:

```python
import io
from aockit.paperfold import Paper, FoldSequence, PaperFolder

stream = io.StringIO("6,10\n0,14\n9,10\n\nfold along y=7\n")
paper = Paper.load(stream)
folds = FoldSequence.load(stream)
print(len(PaperFolder(paper).apply(folds)))  # 3
```

Simulate octopuses:

```python
from aockit.octopus import DumboOctopusModel

model = DumboOctopusModel([[1, 1], [1, 1]], size=2)
print(model.step(9))   # flashes over nine steps
```

## What it does not do

This is a library only: it has no command-line program, bundles no puzzle
input files, and does not read letters off a folded sheet; `Paper.as_matrix`
gives the grid to read by eye.

## Running the tests

```
pip install .[test]
pytest
```