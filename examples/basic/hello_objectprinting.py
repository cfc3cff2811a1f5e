"""Dump an object graph in one call — zero config, zero deps."""

from dataclasses import dataclass, field

from objectprinting import print_to_string


@dataclass
class Person:
    name: str
    age: int
    tags: list[str] = field(default_factory=list)


print(print_to_string(Person("Alice", 30, ["admin", "ops"])))
