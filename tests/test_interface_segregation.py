"""Test the space station demo."""
from principles.core.interface_segregation import (
    InternationalSpaceStation, OfCourseIStillLoveYouBarge, SpaceXCRS8,
    LandingSiteHaving, Landing, PayloadHaving, run,
)


class TestSpaceStation:
    """The station only needs something with a payload."""

    def test_fetch_payload(self):
        message = InternationalSpaceStation().fetch_payload(SpaceXCRS8())
        assert message == "Deployed BEAM and some Cube Sats at April 10, 2016, 11:23 UTC"

    def test_fetch_payload_from_anything_with_payload(self):
        class Dragon:
            payload = "fresh fruit"

        message = InternationalSpaceStation().fetch_payload(Dragon())
        assert "fresh fruit" in message


class TestCRS8:
    """Tests for the vehicle."""

    def test_land_on_barge(self):
        crs8 = SpaceXCRS8()
        message = crs8.land_on(OfCourseIStillLoveYouBarge())
        assert "a barge on the Atlantic Ocean" in message
        assert crs8.name in message

    def test_land_on_any_site(self):
        class LaunchPad:
            landing_site = "Landing Zone 1"

        assert "Landing Zone 1" in SpaceXCRS8().land_on(LaunchPad())


class TestSegregation:
    """Each entity implements only the interfaces it needs."""

    def test_crs8_lands_and_has_payload(self):
        crs8 = SpaceXCRS8()
        assert isinstance(crs8, Landing)
        assert isinstance(crs8, PayloadHaving)
        assert not isinstance(crs8, LandingSiteHaving)

    def test_barge_only_has_landing_site(self):
        barge = OfCourseIStillLoveYouBarge()
        assert isinstance(barge, LandingSiteHaving)
        assert not isinstance(barge, Landing)
        assert not isinstance(barge, PayloadHaving)

    def test_station_implements_none(self):
        station = InternationalSpaceStation()
        assert not isinstance(station, Landing)
        assert not isinstance(station, PayloadHaving)
        assert not isinstance(station, LandingSiteHaving)


class TestDemo:
    def test_demo_results(self, bus):
        result = run(bus)
        assert result.results == [
            "Deployed BEAM and some Cube Sats at April 10, 2016, 11:23 UTC",
            "SpaceX CRS-8 landed on a barge on the Atlantic Ocean at April 8, 2016 20:52 UTC",
        ]
