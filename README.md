# rustlings

A Python library for working with small Rust exercises. Each exercise is a
`.rs` file listed in an `info.toml` file, together with its mode (`compile`,
`test` or `clippy`) and a hint. The library loads that list, compiles and runs
exercises with `rustc` (and `cargo clippy` for clippy exercises), tells you
whether an exercise is still pending, and writes a `rust-project.json` so
rust-analyzer understands the exercise files.

An exercise counts as pending while its file still contains the marker comment
`// I AM NOT DONE`.

It also ships `rustlings.solutions`, worked solutions to many of the exercises
written as ordinary Python modules.

## Installation

```
pip install .
```

Compiling and running exercises needs a Rust toolchain: `rustc` (and `cargo`
for clippy exercises) must be on your `PATH`. Paths are resolved against the
current directory, so work from the directory that holds `info.toml`.

## Exercises

`rustlings.exercise` holds the core types.

```python
from pathlib import Path
from rustlings.exercise import ExerciseFailed, load_exercises

exercises = load_exercises(Path("info.toml").read_text(encoding="utf-8"))

for exercise in exercises:
    status = "Done" if exercise.looks_done() else "Pending"
    print(f"{exercise.name:<17}\t{exercise}\t{status}")
```

- `load_exercises(text)` parses the text of `info.toml` into a list of
  `Exercise` objects (`name`, `path`, `mode`, `hint`). A missing field raises
  `ValueError`; an unknown mode raises `ValueError` from `Mode`.
- `Exercise.state()` reads the file and returns a `State`. `State.done()` is
  true when the marker is gone; otherwise `State.context` holds `ContextLine`
  entries (`line`, `number`, `important`) for the marker line and up to two
  lines on each side of it.
- `Exercise.looks_done()` is a shortcut for `state().done()`.
- `str(exercise)` is the exercise's path.

Compiling and running:

```python
exercise = exercises[0]
try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except ExerciseFailed as exc:
    print(exc.output.stderr or exc.output.stdout)
```

- `Exercise.compile()` builds the exercise into a temporary binary
  (`temp_file()` gives its name, unique to the process and thread) and returns
  a `CompiledExercise`. Test exercises are built with `rustc --test`. Clippy
  exercises write `./exercises/clippy/Cargo.toml`, build a binary, run
  `cargo clean` and then `cargo clippy` with warnings denied. On failure the
  binary is removed and `ExerciseFailed` is raised; its `output` is an
  `ExerciseOutput` with `stdout` and `stderr`.
- `CompiledExercise.run()` runs the binary (test binaries with
  `--show-output`) and returns its `ExerciseOutput`, or raises
  `ExerciseFailed` if it exits unsuccessfully.
- `CompiledExercise.close()`, also called on leaving the `with` block, removes
  the temporary binary. `clean()` does the same directly.

## rust-analyzer support

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json()
if project.crates:
    project.write_to_disk()
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` if set, otherwise asks
  `rustc --print sysroot` and points at `lib/rustlib/src/rust/library` below it.
- `exercises_to_json()` adds a `Crate` (edition 2021, `cfg` `["test"]`) for
  every `.rs` file below `./exercises`; `add_path(path)` does this for one path.
- `to_json()` returns the compact JSON and `write_to_disk()` writes it to
  `./rust-project.json`.

## Terminal output

`rustlings.ui` has `warn(message)` and `success(message)`, which print a red or
green line with a marker, and `bold`, `red`, `green` and `blue` for styling
text. Colours are used when standard output is a terminal; `CLICOLOR_FORCE`
set to anything but `0` forces them on and `CLICOLOR=0` turns them off. Set
`NO_EMOJI` to get plain-text markers instead of emoji (`no_emoji()` reports
this).

## Reference solutions

`rustlings.solutions` has these modules: `quizzes`, `conditionals`, `colors`,
`errors`, `functions`, `enums`, `hashmaps`, `iterators`, `options`, `vecs`,
`strings`, `structs`, `traits` and `smart_pointers`.

```python
from rustlings.solutions.quizzes import calculate_price_of_apples
from rustlings.solutions.iterators import factorial
from rustlings.solutions.colors import Color

calculate_price_of_apples(41)     # 41
factorial(4)                      # 24
Color.try_from((183, 65, 14))     # Color(red=183, green=65, blue=14)
```

Where an exercise reports an error, the solution raises an exception, for
example `BadLenError` and `IntConversionError` from `Color.try_from`, or
`ParsePosNonzeroError` from `errors.parse_pos_nonzero`.

## What this package does not do

There is no command-line program: no `rustlings` command, no `verify`,
`watch`, `run`, `reset`, `hint`, `list` or `lsp` subcommands, no progress bar
and no watching of files for changes. Stepping through exercises in order,
showing hints and prompting the user are left to the code that uses the
library. The solutions package has no modules for the conversion and generics
exercises other than `colors`.

## Running the tests

```
pip install ".[test]"
pytest
```