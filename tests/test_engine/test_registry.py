"""Tests for the command registry."""

import pytest

from tessellate.engine.registry import CommandRegistry, CommandResult, CommandSpec, get_registry
from tessellate.scenegraph import Selection


def _noop(selection: Selection, config) -> CommandResult:
    return CommandResult(command="test.noop")


def test_register_and_get():
    reg = CommandRegistry()
    spec = CommandSpec(plugin="test", name="noop", fn=_noop)
    reg.register(spec)
    assert reg.get("test.noop") is spec
    assert "test.noop" in reg
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = CommandRegistry()
    reg.register(CommandSpec(plugin="test", name="noop", fn=_noop))
    with pytest.raises(ValueError):
        reg.register(CommandSpec(plugin="test", name="noop", fn=_noop))


def test_get_plugin():
    reg = CommandRegistry()
    reg.register(CommandSpec(plugin="a", name="two", fn=_noop))
    reg.register(CommandSpec(plugin="a", name="one", fn=_noop))
    reg.register(CommandSpec(plugin="b", name="one", fn=_noop))
    assert [s.id for s in reg.get_plugin("a")] == ["a.one", "a.two"]


def test_plugin_commands_registered():
    ids = [s.id for s in get_registry().all()]
    assert ids == [
        "grid.tessellateDiamond",
        "grid.tessellateHexagon",
        "stamp.createHexagon",
        "stamp.tessellateHexagon",
    ]
