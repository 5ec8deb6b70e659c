"""Test the time machine demo."""
import inspect

from principles.core import dependency_inversion
from principles.core.dependency_inversion import DeLorean, EmmettBrown, TimeTraveling, run


class TestDeLorean:
    def test_travel(self):
        assert DeLorean().travel_in_time(10.0) == "Used Flux Capacitor and travelled in time by: 10.0s"

    def test_is_time_traveling(self):
        assert isinstance(DeLorean(), TimeTraveling)


class TestEmmettBrown:
    """Doc Brown only delegates to the injected time machine."""

    def test_delegation_is_transparent(self):
        delorean = DeLorean()
        mastermind = EmmettBrown(time_machine=delorean)
        assert mastermind.travel_in_time(-31536000.0) == delorean.travel_in_time(-31536000.0)

    def test_other_time_machine(self):
        class PhoneBooth:
            def travel_in_time(self, time: float) -> str:
                return f"Excellent! Travelled {time}s"

        mastermind = EmmettBrown(time_machine=PhoneBooth())
        assert mastermind.travel_in_time(5.0) == "Excellent! Travelled 5.0s"

    def test_never_names_delorean(self):
        source = inspect.getsource(EmmettBrown)
        assert "DeLorean" not in source


class TestDemo:
    def test_one_year_back(self, bus):
        result = run(bus)
        assert result.results == ["Used Flux Capacitor and travelled in time by: -31536000.0s"]

    def test_module_has_run(self):
        assert dependency_inversion.run is run
