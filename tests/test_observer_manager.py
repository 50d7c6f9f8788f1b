"""Tests for the generic ObserverManager."""

from unittest.mock import Mock

import pytest

from huepicker.model_manager import ObserverManager
from huepicker.protocols import PickerEvent, PickerObserver


@pytest.fixture
def manager():
    return ObserverManager[PickerObserver](observer_type_name="picker")


class TestObserverManager:
    """Test registration and notification."""

    @pytest.mark.unit
    def test_register_is_idempotent(self, manager):
        observer = Mock(spec=PickerObserver)
        manager.register(observer)
        manager.register(observer)
        assert len(manager) == 1
        assert observer in manager
        assert manager

    @pytest.mark.unit
    def test_unregister_unknown_is_ignored(self, manager):
        manager.unregister(Mock(spec=PickerObserver))
        assert not manager

    @pytest.mark.unit
    def test_notify(self, manager):
        observer = Mock(spec=PickerObserver)
        manager.register(observer)

        manager.notify("on_picker_event", PickerEvent.COLOR_CHANGED, "state")

        observer.on_picker_event.assert_called_once_with(PickerEvent.COLOR_CHANGED, "state")

    @pytest.mark.unit
    def test_missing_callback_is_logged(self, manager):
        incomplete = object()
        other = Mock(spec=PickerObserver)
        manager.register(incomplete)
        manager.register(other)

        manager.notify("on_picker_event", PickerEvent.HSV_CHANGED, None)

        other.on_picker_event.assert_called_once()

    @pytest.mark.unit
    def test_observer_may_unregister_itself(self, manager):
        class OneShot:
            calls = 0

            def on_picker_event(self, event, state):
                OneShot.calls += 1
                manager.unregister(self)

        manager.register(OneShot())
        manager.notify("on_picker_event", PickerEvent.HSV_CHANGED, None)
        manager.notify("on_picker_event", PickerEvent.HSV_CHANGED, None)

        assert OneShot.calls == 1

    @pytest.mark.unit
    def test_clear(self, manager):
        manager.register(Mock(spec=PickerObserver))
        manager.clear()
        assert len(manager) == 0
