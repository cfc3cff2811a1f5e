"""Tests for the objectprinting exception hierarchy."""

from objectprinting.errors import ConfigurationError, MemberSelectorError, ObjectPrintingError

from sample_models import Person


class TestHierarchy:
    """Every configuration error is an ObjectPrintingError and a ValueError."""

    def test_configuration_error(self) -> None:
        err = ConfigurationError("bad")
        assert isinstance(err, ObjectPrintingError)
        assert isinstance(err, ValueError)
        assert str(err) == "bad"

    def test_member_selector_error_with_owner(self) -> None:
        err = MemberSelectorError(Person, "not a member")
        assert isinstance(err, ConfigurationError)
        assert err.owner is Person
        assert str(err) == "Person: not a member"

    def test_member_selector_error_without_owner(self) -> None:
        err = MemberSelectorError(None, "no owner")
        assert err.owner is None
        assert str(err) == "no owner"
