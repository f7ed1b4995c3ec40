"""Message drill: a state that reacts to move, echo, colour and quit messages."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    pass


@dataclass
class MessageState:
    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message):
        """Apply one message to the state."""
        match message:
            case Move(point=point):
                self.position = point
            case Echo(text=text):
                print(text)
            case ChangeColor(color=color):
                self.color = tuple(color)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")