"""
Interface Segregation - Referenzimplementierung

Lernziel: Kleine, kundenspezifische Interfaces statt eines großen.
Die ISS kennt nur PayloadHaving - von Landungen weiß sie nichts.
"""
from typing import Protocol, runtime_checkable

from ..config import PAYLOAD_DEPLOYED_AT, LANDED_AT
from .events import event_bus, EventBus
from .playground import Playground, DemoResult


@runtime_checkable
class LandingSiteHaving(Protocol):
    """I have a landing site."""
    landing_site: str


@runtime_checkable
class Landing(Protocol):
    """I can land on a LandingSiteHaving object."""
    def land_on(self, site: LandingSiteHaving) -> str: ...


@runtime_checkable
class PayloadHaving(Protocol):
    """I have a payload."""
    payload: str


class InternationalSpaceStation:
    """I can get the payload from a vehicle (e.g. via Canadarm)."""

    def fetch_payload(self, vehicle: PayloadHaving) -> str:
        # The station has no idea about the landing capabilities of the vehicle.
        return f"Deployed {vehicle.payload} at {PAYLOAD_DEPLOYED_AT}"


class OfCourseIStillLoveYouBarge:
    """I'm a barge - I have a landing site (well, you get the idea)."""

    def __init__(self):
        self.landing_site = "a barge on the Atlantic Ocean"


class SpaceXCRS8:
    """I have a payload and I can land on things having a landing site."""

    def __init__(self):
        self.name = "SpaceX CRS-8"
        self.payload = "BEAM and some Cube Sats"

    def land_on(self, site: LandingSiteHaving) -> str:
        # Only the landing site is known here, nothing else about the barge.
        return f"{self.name} landed on {site.landing_site} at {LANDED_AT}"


def run(bus: EventBus = event_bus) -> DemoResult:
    pg = Playground("isp", bus)
    pg.start()

    crs8 = SpaceXCRS8()
    barge = OfCourseIStillLoveYouBarge()
    space_station = InternationalSpaceStation()

    pg.show("space_station.fetch_payload(crs8)", space_station.fetch_payload(crs8),
            note="The station has no idea about the landing capabilities of SpaceX CRS-8.")
    pg.show("crs8.land_on(barge)", crs8.land_on(barge),
            note="CRS-8 only knows the landing site, nothing else about the barge.")

    return pg.finish()
