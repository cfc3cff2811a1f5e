"""Exclude members, override formatting, and survive cycles."""

import uuid
from dataclasses import dataclass, field

from objectprinting import PrintingConfigBuilder


@dataclass
class Account:
    id: uuid.UUID
    owner: str
    balance: float
    friends: list["Account"] = field(default_factory=list)


alice = Account(uuid.uuid4(), "Alice Liddell", 1234.5678)
bob = Account(uuid.uuid4(), "Bob", 10.0, friends=[alice])
alice.friends.append(bob)

printer = (
    PrintingConfigBuilder(Account)
    .excluding(lambda a: a.id)
    .printing(lambda a: a.owner).trimmed_to_length(5)
    .printing_type(float).with_format(",.2f")
    .build_printer()
)

print(printer.print_to_string(alice))
