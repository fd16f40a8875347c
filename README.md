# rustdrill

rustdrill is a Python library for working with a set of small Rust exercises. It reads the exercise list, compiles and runs or tests a single exercise with `rustc` or `cargo clippy`, tells you whether an exercise is still pending, and can write a `rust-project.json` for rust-analyzer. It also ships worked Python versions of several exercise topics.

## Installation

```
pip install .
```

Compiling and running exercises calls `rustc` and `cargo`, so a working Rust toolchain has to be on your `PATH`. Reading exercise state needs no toolchain.

## Exercises

`rustdrill.exercise` holds the core types.

- `load_exercises(path="info.toml")` reads an `info.toml` file with an `exercises` list (each entry has `name`, `path`, `mode` and `hint`) and returns a list of `Exercise` objects. A missing field raises `ValueError`.
- `Exercise(name, path, mode, hint)` describes one exercise. `mode` is a `Mode`: `COMPILE`, `TEST` or `CLIPPY`. `str(exercise)` is its path.
- `Exercise.state()` reads the source file and returns a `State`. An exercise is pending while it contains an `// I AM NOT DONE` marker; a pending `State` carries `context`, a tuple of `ContextLine(line, number, important)` for the marker line and up to two lines either side. `State.done()` and `Exercise.looks_done()` report whether the marker has been removed.
- `Exercise.compile()` compiles the exercise to a temporary binary (as a test harness in `TEST` mode; with `cargo clippy -D warnings` in `CLIPPY` mode) and returns a `CompiledExercise`, or raises `CompilationError` whose `output` is an `ExerciseOutput(stdout, stderr)`.
- `CompiledExercise.run()` runs the binary (with `--show-output` in `TEST` mode) and returns an `ExerciseOutput`, or raises `ExecutionError`. Use it as a context manager, or call `close()`, to remove the temporary binary.

```python
from rustdrill.exercise import load_exercises, CompilationError, ExecutionError

for exercise in load_exercises("info.toml"):
    if exercise.looks_done():
        continue
    try:
        with exercise.compile() as compiled:
            print(compiled.run().stdout)
    except (CompilationError, ExecutionError) as err:
        print(err.output.stderr)
    break
```

## rust-analyzer support

`rustdrill.project.RustAnalyzerProject` collects one `Crate` per `.rs` file. `exercises_to_json(root="exercises")` scans a directory, `get_sysroot_src()` asks `rustc --print sysroot` for the library sources, `to_json()` returns the JSON text and `write_to_disk(path="./rust-project.json")` writes it.

## Output helpers

`rustdrill.ui.warn(message)` and `rustdrill.ui.success(message)` print a marked line, in red or green when standard output is a terminal. Setting the `NO_EMOJI` environment variable replaces the emoji marks with `!` and `✓`; `no_emoji()` reports whether it is set.

## Lessons

The `rustdrill.lessons` package holds worked solutions as plain Python modules:

- `quizzes`: apple pricing, a string `transformer` driven by `Uppercase`, `Trim` and `Append` commands, and `ReportCard`
- `basics`: conditionals, small functions and string helpers
- `sequences`: lists, mapping and a generic `Wrapper`
- `errors`: name tags, token costs and `PositiveNonzeroInteger` with `parse_pos_nonzero`
- `hashmaps`: fruit baskets and `build_scores_table`
- `messages`: a `State` updated by `ChangeColor`, `Echo`, `Move` and `Quit` messages
- `iterators`: capitalising, exact division, factorials, progress counting and cons lists
- `records`: colour records, orders, packages, `append_bar` and shared behaviour classes

## What this package does not do

There is no command-line program. The package has no command to verify all exercises in order, no watch mode that re-checks files as they change, and no commands to list exercises, show hints or reset an exercise. Those steps have to be written on top of the `Exercise` API above.