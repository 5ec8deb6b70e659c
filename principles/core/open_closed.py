"""
Open-Closed - Referenzimplementierung

Lernziel: Verhalten erweitern, ohne bestehende Klassen zu ändern.
Der RocketLauncher kommt dazu, ohne dass WeaponsComposite angefasst wird.
"""
from typing import Iterable, List, Protocol, Tuple, runtime_checkable

from .events import event_bus, EventBus
from .playground import Playground, DemoResult


@runtime_checkable
class CanShoot(Protocol):
    def shoot(self) -> str: ...


class LaserBeam:
    """I'm a laser beam. I can shoot."""

    def shoot(self) -> str:
        return "Ziiiiiip!"


class WeaponsComposite:
    """I have weapons and trust me I can fire them all at once. Boom! Boom! Boom!

    The member list is fixed at construction.
    """

    def __init__(self, weapons: Iterable[CanShoot]):
        self._weapons: Tuple[CanShoot, ...] = tuple(weapons)

    @property
    def weapons(self) -> Tuple[CanShoot, ...]:
        return self._weapons

    def shoot(self) -> List[str]:
        """Fire every weapon in list order, one result per weapon."""
        return [weapon.shoot() for weapon in self._weapons]


class RocketLauncher:
    """I'm a rocket launcher. I can shoot a rocket.

    Added later - no existing class needed to change.
    """

    def shoot(self) -> str:
        return "Whoosh!"


def run(bus: EventBus = event_bus) -> DemoResult:
    pg = Playground("ocp", bus)
    pg.start()

    laser = LaserBeam()
    weapons = WeaponsComposite(weapons=[laser])
    pg.show("WeaponsComposite(weapons=[laser]).shoot()", weapons.shoot())

    rocket = RocketLauncher()
    weapons = WeaponsComposite(weapons=[laser, rocket])
    pg.show("WeaponsComposite(weapons=[laser, rocket]).shoot()", weapons.shoot(),
            note="To add the RocketLauncher, no existing class had to change.")

    return pg.finish()
