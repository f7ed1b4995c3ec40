# exdrill

A library for working with a course of small programming exercises. Each
exercise is a source file listed in an `info.toml` file together with its mode
(`compile`, `test` or `clippy`) and a hint. The library compiles and runs
exercises, and tells whether an exercise is still marked `I AM NOT DONE`.

It also ships `exdrill.drills`, a set of worked solutions to many of the
exercises written as ordinary Python functions and classes.

## Installing

```
pip install .
```

Compiling exercises calls `rustc` (and, for `clippy` exercises, `cargo`), which
must be on your `PATH`. Nothing else is required.

## Exercises

`exdrill.exercise` holds the exercise model.

```python
from exdrill.exercise import CompilationFailed, load_exercises

exercises = load_exercises("info.toml")
for exercise in exercises:
    print(exercise.name, "done" if exercise.looks_done() else "pending")

exercise = exercises[0]
try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.success, output.stdout)
except CompilationFailed as exc:
    print(exc.output.stderr)
```

- `load_exercises(path="info.toml")` returns a list of `Exercise` objects
  (`name`, `path`, `mode`, `hint`); `mode` is a `Mode` (`COMPILE`, `TEST`,
  `CLIPPY`).
- `Exercise.compile()` builds the exercise to a temporary binary and returns a
  `CompiledExercise`, or raises `CompilationFailed` whose `output` is an
  `ExerciseOutput` with the compiler's `stdout` and `stderr`. `clippy`
  exercises also write `./exercises/clippy/Cargo.toml` and run
  `cargo clippy` with warnings denied.
- `CompiledExercise.run()` runs the binary (test exercises with
  `--show-output`) and returns an `ExerciseOutput` whose `success` tells whether
  it exited cleanly. `close()`, or leaving the `with` block, removes the binary.
- `Exercise.state()` returns a `State`. `State.done()` is true when the file
  has no `I AM NOT DONE` marker; otherwise `State.context` holds the
  `ContextLine`s (`line`, `number`, `important`) from two lines before to two
  lines after the marker.
- `Exercise.looks_done()` is a shortcut for `state().done()`.

## rust-analyzer project file

`exdrill.project.RustAnalyzerProject` builds a `rust-project.json`:

```python
from exdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # asks `rustc --print sysroot`
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

Every `.rs` file found below the given directory becomes a crate with edition
2021 and the `test` cfg enabled.

## Terminal output

`exdrill.ui` provides `style(text, *styles)` (ANSI `bold`, `red`, `green`,
`blue`), `warn(message)`, `success(message)` and `separator()`. Setting
`NO_EMOJI` in the environment swaps the emoji markers for plain ones.

## The drills

Modules in `exdrill.drills`: `basics`, `colors`, `errors`, `hashmaps`,
`iterators`, `messages`, `options`, `quizzes`, `sharing`, `strings`,
`structs`, `traits`, `vecs` and `workers`.

```python
from exdrill.drills.quizzes import calculate_price_of_apples
from exdrill.drills.iterators import divide, factorial
from exdrill.drills.colors import color_from
from exdrill.drills.errors import parse_pos_nonzero

calculate_price_of_apples(65)   # 65
factorial(4)                    # 24
divide(81, 9)                   # 9
color_from([183, 65, 14])       # Color(red=183, green=65, blue=14)
parse_pos_nonzero("42")         # PositiveNonzeroInteger(value=42)
```

Failures are raised as exceptions: `divide(81, 0)` raises
`DivideByZeroError`, `color_from([256, 0, 0])` raises `ColorRangeError`, and
`parse_pos_nonzero("-555")` raises `ParsePosNonzeroError`.

## What this package does not do

There is no command-line program. The package does not verify a whole course
in order, watch exercise files for changes, show a progress bar, print hints
or list exercises with their status from a shell; those steps have to be put
together from the library functions above. There is no drill module for the
type-conversion exercises.

## Tests

```
pip install .[test]
pytest
```