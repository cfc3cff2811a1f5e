"""Tests for the immutable PrintingConfig and its ContextVar default."""

import enum
import os
import uuid
from dataclasses import FrozenInstanceError
from threading import Thread

import pytest

from objectprinting import (
    DEFAULT_CYCLE_MARKER,
    ByType,
    ObjectPrinter,
    PrintingConfig,
    get_printing_config,
    printing_config_context,
    reset_printing_config,
    set_printing_config,
)


class TestPrintingConfigDataclass:
    """Test PrintingConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = PrintingConfig()
        assert config.indent == "\t"
        assert config.newline == os.linesep
        assert config.cycle_marker == DEFAULT_CYCLE_MARKER
        assert config.excluded_types == frozenset()
        assert config.excluded_members == frozenset()
        assert dict(config.formatters) == {}

    @pytest.mark.parametrize("type_", [int, float, bool, str, uuid.UUID, enum.Enum])
    def test_default_terminal_types(self, type_: type) -> None:
        assert type_ in PrintingConfig().terminal_types

    def test_immutability(self) -> None:
        config = PrintingConfig()
        with pytest.raises(FrozenInstanceError):
            config.indent = "  "  # type: ignore[misc]

    def test_collections_are_frozen(self) -> None:
        formatters = {ByType(int): str}
        config = PrintingConfig(excluded_types={int}, formatters=formatters)  # type: ignore[arg-type]
        assert isinstance(config.excluded_types, frozenset)
        with pytest.raises(TypeError):
            config.formatters[ByType(str)] = str  # type: ignore[index]
        formatters[ByType(str)] = str
        assert ByType(str) not in config.formatters


class TestFromDict:
    """PrintingConfig.from_dict()."""

    def test_known_keys(self) -> None:
        config = PrintingConfig.from_dict({"indent": "  ", "newline": "\n"})
        assert config.indent == "  "
        assert config.newline == "\n"

    def test_unknown_keys_ignored(self) -> None:
        config = PrintingConfig.from_dict({"cycle_marker": "*", "colour": "red"})
        assert config.cycle_marker == "*"

    def test_empty(self) -> None:
        assert PrintingConfig.from_dict({}) == PrintingConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_printing_config()

    def test_default_config(self) -> None:
        assert get_printing_config() == PrintingConfig()

    def test_set_and_reset(self) -> None:
        custom = PrintingConfig(indent="  ")
        set_printing_config(custom)
        assert get_printing_config() is custom
        reset_printing_config()
        assert get_printing_config().indent == "\t"

    def test_context_manager_restores(self) -> None:
        outer = PrintingConfig(indent="1")
        inner = PrintingConfig(indent="2")
        with printing_config_context(outer):
            with printing_config_context(inner):
                assert get_printing_config() is inner
            assert get_printing_config() is outer
        assert get_printing_config() == PrintingConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with printing_config_context(PrintingConfig(indent="x")):
                raise RuntimeError("fail")
        assert get_printing_config().indent == "\t"

    def test_printer_captures_config_at_construction(self) -> None:
        with printing_config_context(PrintingConfig(indent="  ", newline="\n")):
            printer = ObjectPrinter()
        assert printer.print_to_string([1]) == "list {\n  1\n}"

    def test_thread_isolation(self) -> None:
        set_printing_config(PrintingConfig(indent="main"))
        seen: list[str] = []

        def worker() -> None:
            set_printing_config(PrintingConfig(indent="worker"))
            seen.append(get_printing_config().indent)

        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert seen == ["worker"]
        assert get_printing_config().indent == "main"
