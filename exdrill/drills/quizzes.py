"""Quiz drills: apple prices, a string transformer and report cards."""

import enum
from dataclasses import dataclass


def calculate_price_of_apples(quantity):
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    price = 2 if quantity <= 40 else 1
    return price * quantity


class Command(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string ``times`` times."""

    times: int


def transformer(items):
    """Apply each (string, command) pair and return the resulting strings."""
    output = []
    for text, command in items:
        match command:
            case Command.UPPERCASE:
                output.append(text.upper())
            case Command.TRIM:
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise ValueError(f"unknown command: {command!r}")
    return output


def _format_grade(grade):
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    grade: object
    student_name: str
    student_age: int

    def print(self):
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{_format_grade(self.grade)}"
        )