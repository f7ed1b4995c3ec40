"""Exercises: compiling, running and checking whether they are done."""

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


def temp_file():
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean():
    """Remove the temporary binary, if there is one."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """The state of an exercise: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    def done(self):
        return not self.context


@dataclass
class ExerciseOutput:
    stdout: str
    stderr: str
    success: bool = True


class CompilationFailed(Exception):
    """Raised when an exercise does not compile."""

    def __init__(self, output):
        super().__init__(output.stderr)
        self.output = output


class CompiledExercise:
    """A compiled exercise; closing it removes the binary."""

    def __init__(self, exercise):
        self.exercise = exercise

    def run(self):
        return self.exercise.run()

    def close(self):
        clean()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _decode(data):
    return data.decode("utf-8", errors="replace")


def _lines(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self):
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self):
        return str(self.path)

    def _prepare_clippy(self):
        cargo_toml = (
            f'[package]\nname = "{self.name}"\nversion = "0.0.1"\nedition = "2021"\n'
            f'[[bin]]\nname = "{self.name}"\npath = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if "NO_EMOJI" in os.environ
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from exc
        # Build a binary too so the exercise can be run afterwards.
        subprocess.run(
            ["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS],
            capture_output=True,
        )
        # A clean build is needed for clippy to report every lint.
        subprocess.run(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            capture_output=True,
        )

    def compile(self):
        """Compile the exercise; raise CompilationFailed if it does not build."""
        path = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                cmd = ["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS]
            case Mode.TEST:
                cmd = ["rustc", "--test", path, "-o", temp_file(), *RUSTC_COLOR_ARGS]
            case Mode.CLIPPY:
                self._prepare_clippy()
                cmd = [
                    "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                    *RUSTC_COLOR_ARGS,
                    "--", "-D", "warnings", "-D", "clippy::float_cmp",
                ]
        result = subprocess.run(cmd, capture_output=True)
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationFailed(
            ExerciseOutput(_decode(result.stdout), _decode(result.stderr), success=False)
        )

    def run(self):
        """Run the compiled binary and return its output."""
        cmd = [temp_file()]
        if self.mode is Mode.TEST:
            cmd.append("--show-output")
        result = subprocess.run(cmd, capture_output=True)
        return ExerciseOutput(
            _decode(result.stdout), _decode(result.stderr), success=result.returncode == 0
        )

    def state(self):
        """Return Done, or Pending with the lines around the marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"marker in {self.path} spans several lines")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if low <= i <= high
            )
        )

    def looks_done(self):
        """Whether the marker comment has been removed."""
        return self.state().done()


def load_exercises(path="info.toml"):
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]