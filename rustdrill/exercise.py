"""Exercises: their metadata, compilation, execution and completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a binary path unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; pending exercises carry the lines around the marker."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class CompilationError(Exception):
    """Compiling an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or "compilation failed")
        self.output = output


class ExecutionError(Exception):
    """Running a compiled exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or "execution failed")
        self.output = output


def _execute(args: list[str], failure: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True)
    except OSError as err:
        raise RuntimeError(failure) from err


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Exercise:
    """An exercise described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest, encoding="utf-8")
        except OSError as err:
            what = "Clippy" if os.environ.get("NO_EMOJI") is not None else "📎 Clippy 📎"
            raise RuntimeError(f"Failed to write {what} Cargo.toml file.") from err

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompilationError on failure."""
        source = str(self.path)
        target = temp_file()
        if self.mode is Mode.CLIPPY:
            self._write_clippy_manifest()
            # Build a binary too, so clippy exercises can also be run.
            _execute(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS], "Failed to compile!")
            # A clean is needed for clippy to report every lint.
            _execute(
                ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
                "Failed to run 'cargo clean'",
            )
            result = _execute(
                [
                    "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                    *RUSTC_COLOR_ARGS,
                    "--", "-D", "warnings", "-D", "clippy::float_cmp",
                ],
                "Failed to run 'compile' command.",
            )
        else:
            extra = ["--test"] if self.mode is Mode.TEST else []
            result = _execute(
                ["rustc", *extra, source, "-o", target, *RUSTC_COLOR_ARGS],
                "Failed to run 'compile' command.",
            )
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(_output(result))

    def _run(self) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        result = _execute([temp_file(), arg], "Failed to run 'run' command")
        output = _output(result)
        if result.returncode != 0:
            raise ExecutionError(output)
        return output

    def state(self) -> State:
        """Read the source and report whether the pending marker remains."""
        with self.path.open(encoding="utf-8", newline="") as handle:
            source = handle.read()
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError("pending marker spans several lines")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        context = tuple(
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines[low : high + 1], start=low)
        )
        return State(context)

    def looks_done(self) -> bool:
        """Whether the marker comment has been removed."""
        return self.state().done()


class CompiledExercise:
    """A compiled exercise whose binary is removed on close."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExecutionError if it fails."""
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Load the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("info file has no list of exercises")
    exercises = []
    for entry in entries:
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except KeyError as err:
            raise ValueError(f"exercise entry is missing field {err}") from err
    return exercises