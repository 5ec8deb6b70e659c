"""
Dependency Inversion - Referenzimplementierung

Lernziel: Von Abstraktionen abhängen, nicht von Konkretionen.
EmmettBrown bekommt seine Zeitmaschine per Konstruktor (Dependency
Injection) und kennt nur das TimeTraveling-Protokoll.
"""
from typing import Protocol, runtime_checkable

from ..config import ONE_YEAR_BACK
from .events import event_bus, EventBus
from .playground import Playground, DemoResult


@runtime_checkable
class TimeTraveling(Protocol):
    def travel_in_time(self, time: float) -> str: ...


class DeLorean:
    def travel_in_time(self, time: float) -> str:
        return f"Used Flux Capacitor and travelled in time by: {time}s"


class EmmettBrown:
    """Doc Brown is given a TimeTraveling device.

    He never builds one himself, so any time machine will do.
    """

    def __init__(self, time_machine: TimeTraveling):
        self._time_machine = time_machine

    def travel_in_time(self, time: float) -> str:
        return self._time_machine.travel_in_time(time)


def run(bus: EventBus = event_bus) -> DemoResult:
    pg = Playground("dip", bus)
    pg.start()

    time_machine = DeLorean()
    mastermind = EmmettBrown(time_machine=time_machine)
    pg.show("mastermind.travel_in_time(-3600 * 8760)", mastermind.travel_in_time(ONE_YEAR_BACK),
            note="Doc Brown gets his time machine from outside; he never builds a DeLorean himself.")

    return pg.finish()
