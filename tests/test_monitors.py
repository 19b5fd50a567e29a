"""Tests for the monitor registry."""

from blox.runtime._monitors import MonitorEvent, MonitorRegistry, MonitorSubsystem


class TestMonitorEvent:
    def test_defaults_to_checkbox(self):
        event = MonitorEvent(id="v1", value=True)
        assert event.element == "checkbox"


class TestMonitorRegistry:
    def test_is_subsystem(self):
        assert isinstance(MonitorRegistry(), MonitorSubsystem)

    def test_show_and_hide(self):
        reg = MonitorRegistry()
        reg.change_block(MonitorEvent(id="v1", value=True))
        assert reg.is_visible("v1")
        reg.change_block(MonitorEvent(id="v1", value=False))
        assert not reg.is_visible("v1")

    def test_unknown_is_hidden(self):
        assert not MonitorRegistry().is_visible("nope")

    def test_visible_ids(self):
        reg = MonitorRegistry()
        reg.change_block(MonitorEvent(id="a", value=True))
        reg.change_block(MonitorEvent(id="b", value=False))
        assert reg.visible_ids() == ["a"]

    def test_update_uses_identity(self):
        reg = MonitorRegistry()
        items = ["a"]
        assert reg.update("l1", items) is True
        assert reg.update("l1", items) is False
        assert reg.update("l1", list(items)) is True
