"""Sample object graphs shared by the test modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class Person:
    name: str
    age: int


@dataclass
class Employee(Person):
    company: str = ""


@dataclass
class Team:
    name: str
    members: list[Person] = field(default_factory=list)


@dataclass
class Pair:
    left: Person
    right: Person | None = None


@dataclass
class Rect:
    width: int
    height: int
    kind: ClassVar[str] = "shape"

    @property
    def area(self) -> int:
        return self.width * self.height

    def scale(self, factor: int) -> Rect:
        return Rect(self.width * factor, self.height * factor)


@dataclass
class Measurement:
    label: str
    score: float


class Node:
    def __init__(self, value: int, next: Node | None = None) -> None:
        self.value = value
        self.next = next
        self._hidden = "secret"


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Empty:
    pass


class Broken:
    @property
    def value(self) -> int:
        raise RuntimeError("boom")


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Inner:
    def __init__(self, code: str) -> None:
        self.code = code


class Box:
    def __init__(self, label: str) -> None:
        self.label = label

    @property
    def size(self):  # noqa: ANN201
        return 3

    @property
    def inner(self):  # noqa: ANN201
        return Inner("x")


class AttrDict:
    title: str

    def __init__(self) -> None:
        self._data: dict[str, object] = {}

    def __getattr__(self, name: str) -> object:
        return self._data[name]
