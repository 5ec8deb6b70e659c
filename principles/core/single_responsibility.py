"""
Single Responsibility - Referenzimplementierung

Lernziel: Eine Klasse sollte genau einen Grund haben, sich zu ändern.

    PodBayDoor (hat den Zustand)
    ├── DoorOpener (kann nur öffnen)
    └── DoorCloser (kann nur schließen)
"""
from enum import Enum
from typing import Protocol, runtime_checkable

from .events import event_bus, EventBus
from .playground import Playground, DemoResult


@runtime_checkable
class CanBeOpened(Protocol):
    def open(self) -> None: ...


@runtime_checkable
class CanBeClosed(Protocol):
    def close(self) -> None: ...


class DoorState(Enum):
    OPEN = "open"
    CLOSED = "closed"


class PodBayDoor:
    """A door with an encapsulated state, changed only through open()/close()."""

    def __init__(self):
        self._state = DoorState.CLOSED

    @property
    def state(self) -> DoorState:
        """Read-only view of the state (no setter)."""
        return self._state

    def open(self) -> None:
        self._state = DoorState.OPEN

    def close(self) -> None:
        self._state = DoorState.CLOSED


class DoorOpener:
    """Only responsible for opening; has no idea how to close the door."""

    def __init__(self, door: CanBeOpened):
        self._door = door

    @property
    def door(self) -> CanBeOpened:
        return self._door

    def execute(self) -> None:
        self._door.open()


class DoorCloser:
    """Only responsible for closing; has no idea how to open the door."""

    def __init__(self, door: CanBeClosed):
        self._door = door

    @property
    def door(self) -> CanBeClosed:
        return self._door

    def execute(self) -> None:
        self._door.close()


def run(bus: EventBus = event_bus) -> DemoResult:
    pg = Playground("srp", bus)
    pg.start()

    door = PodBayDoor()
    pg.show("door = PodBayDoor()", door.state.value)

    door_opener = DoorOpener(door)
    door_opener.execute()
    pg.show("DoorOpener(door).execute()", door.state.value,
            note="Only the DoorOpener is responsible for opening the door.")

    door_closer = DoorCloser(door)
    door_closer.execute()
    pg.show("DoorCloser(door).execute()", door.state.value,
            note="If another action should happen on closing, like raising an alarm, "
                 "the DoorOpener class does not change.")

    return pg.finish()
