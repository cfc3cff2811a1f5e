"""Tests for objectprinting.formatters — keys, lookup, and factories."""

import pytest

from objectprinting.formatters import (
    ByMember,
    ByType,
    chained,
    formatted,
    member_keys,
    resolve_formatter,
    trimmed,
    type_formatter,
)
from objectprinting.members import MemberInfo

from sample_models import Employee, Person


class TestKeys:
    """Formatter key variant."""

    def test_equality_and_hashing(self) -> None:
        assert ByMember(Person, "name") == ByMember(Person, "name")
        assert ByMember(Person, "name") != ByMember(Employee, "name")
        assert len({ByType(int), ByType(int), ByType(str)}) == 2

    def test_str(self) -> None:
        assert str(ByMember(Person, "age")) == "Person.age"
        assert str(ByType(int)) == "int"

    def test_member_keys_walk_mro(self) -> None:
        assert member_keys(Employee, "age") == (
            ByMember(Employee, "age"),
            ByMember(Person, "age"),
        )


class TestLookup:
    """Precedence: member key, base member keys, then declared type."""

    def test_member_before_type(self) -> None:
        member = MemberInfo(Person, "age", int)
        formatters = {ByType(int): lambda v: "type", ByMember(Person, "age"): lambda v: "member"}
        formatter = resolve_formatter(formatters, member)
        assert formatter is not None
        assert formatter(1) == "member"

    def test_subclass_member_before_base_member(self) -> None:
        member = MemberInfo(Employee, "age", int)
        formatters = {
            ByMember(Person, "age"): lambda v: "base",
            ByMember(Employee, "age"): lambda v: "derived",
        }
        formatter = resolve_formatter(formatters, member)
        assert formatter is not None
        assert formatter(1) == "derived"

    def test_type_fallback(self) -> None:
        formatter = resolve_formatter({ByType(int): str}, MemberInfo(Person, "age", int))
        assert formatter is str

    def test_unknown_declared_type(self) -> None:
        assert resolve_formatter({ByType(int): str}, MemberInfo(Person, "age", None)) is None

    def test_type_formatter_is_exact(self) -> None:
        formatters = {ByType(int): str}
        assert type_formatter(formatters, 3) is str
        assert type_formatter(formatters, True) is None

    def test_empty_mapping(self) -> None:
        assert type_formatter({}, 3) is None
        assert resolve_formatter({}, MemberInfo(Person, "age", int)) is None


class TestFactories:
    """Built-in formatter factories."""

    @pytest.mark.parametrize(
        ("length", "value", "expected"),
        [(3, "Alice", "Ali"), (10, "Bob", "Bob"), (0, "x", ""), (2, 12345, "12"), (2, None, "nu")],
    )
    def test_trimmed(self, length: int, value: object, expected: str) -> None:
        assert trimmed(length)(value) == expected

    def test_formatted(self) -> None:
        assert formatted(".1f")(2.25) == "2.2"
        assert formatted(",")(1234567) == "1,234,567"
        assert formatted(">5")("ab") == "   ab"
        assert formatted(".2f")(None) == "null"

    def test_chained(self) -> None:
        assert chained(str.upper, trimmed(2))("alice") == "AL"
