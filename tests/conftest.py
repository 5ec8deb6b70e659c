"""Pytest fixtures for OOD Principles tests."""
import pytest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


@pytest.fixture
def bus():
    """A fresh EventBus with no subscribers."""
    from principles.core.events import EventBus
    return EventBus()


@pytest.fixture
def recorded(bus):
    """Subscribe to every demo event on the fresh bus and collect them."""
    from principles.core.events import DemoStartedEvent, StepEvent, DemoFinishedEvent
    events = []
    for event_type in (DemoStartedEvent, StepEvent, DemoFinishedEvent):
        bus.subscribe(event_type, events.append)
    return events
