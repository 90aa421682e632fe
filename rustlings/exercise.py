"""Exercises: loading them, compiling them, running them and reading their state."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ["--color", "always"]
RUSTC_EDITION_ARGS = ["--edition", "2021"]
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary file name unique to this process and thread."""
    thread_id = "".join(
        c for c in f"ThreadId({threading.get_ident()})" if c.isalnum()
    )
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A line of source shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """State of an exercise: done when there are no context lines."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Raised when compiling or running an exercise fails."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _output_of(completed: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        stderr=completed.stderr.decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)

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
        message = (
            "Failed to write Clippy Cargo.toml file."
            if "NO_EMOJI" in os.environ
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest, encoding="utf-8")
        except OSError as exc:
            raise OSError(message) from exc

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseFailed with the compiler output on failure."""
        path = str(self.path)
        binary_args = [path, "-o", temp_file(), *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS]
        if self.mode is Mode.COMPILE:
            completed = subprocess.run(["rustc", *binary_args], capture_output=True)
        elif self.mode is Mode.TEST:
            completed = subprocess.run(
                ["rustc", "--test", *binary_args], capture_output=True
            )
        else:
            self._write_clippy_manifest()
            # Build an executable too, so clippy exercises can be run.
            subprocess.run(["rustc", *binary_args], capture_output=True)
            # A clean is needed for clippy to report every lint.
            subprocess.run(
                ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                 *RUSTC_COLOR_ARGS],
                capture_output=True,
            )
            completed = subprocess.run(
                ["cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                 *RUSTC_COLOR_ARGS, "--", "-D", "warnings", "-D", "clippy::float_cmp"],
                capture_output=True,
            )

        if completed.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output_of(completed))

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        completed = subprocess.run(args, capture_output=True)
        output = _output_of(completed)
        if completed.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Read the exercise file and report whether the pending marker is still there."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")

        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if first <= i <= last
            )
        )

    def looks_done(self) -> bool:
        """Return True when the pending marker has been removed."""
        return self.state().done()


class CompiledExercise:
    """A compiled exercise; closing it removes the temporary binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed if it exits unsuccessfully."""
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the text of info.toml into a list of exercises."""
    data = tomllib.loads(text)
    if "exercises" not in data:
        raise ValueError("missing field `exercises`")
    exercises = []
    for entry in data["exercises"]:
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except KeyError as exc:
            raise ValueError(f"missing field `{exc.args[0]}`") from None
    return exercises