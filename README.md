# shiftroster

shiftroster fills a roster of doctor shifts. By default the roster covers 30 days with 3 shifts a day. The rules are:

- Each doctor has a maximum number of shifts per week. A week is a block of 7 days counted from day 1.
- Each doctor has a 7 × 3 preference grid. It has one row per weekday and one column per shift. A `1` means the doctor can work that shift. Any other value means they cannot.

Each shift is filled starting from a random doctor. The program walks round the list in order. It looks for a doctor who still has room in the week and can work that shift. If no such doctor exists, preferences are ignored and the weekly limit alone decides. If every doctor is at their weekly limit, the shift stays empty.

A second pass tries to fix shifts that go against a preference. It swaps the doctor with someone else from the same week, but only when the swap suits both doctors. Any clashes left after that are reported as conflicts.

## Installation

```
pip install .
```

## Command line

```
shiftroster
shiftroster --seed 42
```

The command builds a 30-day roster from a built-in sample of five doctors. For each day it prints a line with the day number and the assigned doctors as `[id]name`, one entry per shift. It then lists every shift that still clashes with its doctor's preferences. Each clash is shown as `id : <id>` followed by `Hari : <day> Shift : <shift>`, with the latest shift first.

By default the roster is different on each run. `--seed` makes the roster reproducible.

## Library use

```python
import random

from shiftroster.doctors import DoctorRegistry
from shiftroster.schedule import generate_schedule, format_conflicts

registry = DoctorRegistry(10)
always = [[1, 1, 1]] * 7
registry.add(1, "Doni", 6, always)
registry.add(2, "Rena", 5, always)

schedule = generate_schedule(registry, random.Random(42), 30, 3)
print(schedule.format())
print(format_conflicts(schedule.conflicts()))
```

### `shiftroster.doctors`

`DoctorRegistry(capacity=10)` holds doctors in the order they were added. `add` raises an error in these cases:

- `OverflowError` when the registry is full.
- `ValueError` for a duplicate id.
- `ValueError` for a name longer than 19 characters.
- `ValueError` for a preference grid that is not 7 rows of 3 values.

To reach individual doctors, use `get(doctor_id)`, which raises `KeyError` for an unknown id. You can also index or iterate over the registry. `check_preference(doctor_id, day, shift)` tells you whether a doctor accepts a given weekday (0–6) and shift (0–2).

A `Doctor` has these methods:

- `can_work(day, shift)`
- `has_capacity(week)`
- `book(week)`

### `shiftroster.schedule`

`Schedule(registry, days=30, shifts=3)` accepts from 1 to 35 days and from 1 to 3 shifts. It can be driven step by step:

- `fill(rng=None)` assigns every shift. It raises `ValueError` if the registry is empty.
- `swap_conflicts()` swaps doctors to remove clashes where it can.
- `conflicts()` returns the remaining clashes, latest first, as `Conflict` records. Each record has `doctor_id`, `name`, `day` and `shift`, with day and shift numbered from 1.
- `rows()` yields the assigned doctor ids, one tuple per day. An empty shift is `None`.
- `format()` renders the roster as text, the same way the command prints it.

`generate_schedule` runs `fill` and `swap_conflicts` in one call. `format_conflicts` renders a list of conflicts as text. `random_index(count, rng=None)` picks a random index in `range(count)`.

### `shiftroster.cli`

`sample_registry()` returns the five sample doctors that the command uses. `main(argv=None)` is the command itself.

## Limitations

The package does not store doctors anywhere. Doctors are added in code through `DoctorRegistry.add`, and there is no way to load them from a file or save them to one. Doctors cannot be removed from a registry. The command always uses the built-in sample doctors.

## Tests

```
pip install ".[test]"
pytest
```