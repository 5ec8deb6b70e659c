"""Test the weapons composite demo."""
from principles.core.open_closed import LaserBeam, RocketLauncher, WeaponsComposite, CanShoot, run


class TestWeapons:
    """Tests for the individual weapons."""

    def test_laser_beam(self):
        assert LaserBeam().shoot() == "Ziiiiiip!"

    def test_rocket_launcher(self):
        assert RocketLauncher().shoot() == "Whoosh!"

    def test_weapons_can_shoot(self):
        assert isinstance(LaserBeam(), CanShoot)
        assert isinstance(RocketLauncher(), CanShoot)


class TestWeaponsComposite:
    """Tests for WeaponsComposite."""

    def test_single_laser(self):
        weapons = WeaponsComposite(weapons=[LaserBeam()])
        assert weapons.shoot() == ["Ziiiiiip!"]

    def test_laser_and_rocket_in_order(self):
        weapons = WeaponsComposite(weapons=[LaserBeam(), RocketLauncher()])
        assert weapons.shoot() == ["Ziiiiiip!", "Whoosh!"]

    def test_duplicates_allowed(self):
        laser = LaserBeam()
        weapons = WeaponsComposite(weapons=[laser, RocketLauncher(), laser])
        assert weapons.shoot() == ["Ziiiiiip!", "Whoosh!", "Ziiiiiip!"]

    def test_empty_composite(self):
        assert WeaponsComposite(weapons=[]).shoot() == []

    def test_membership_is_fixed(self):
        members = [LaserBeam()]
        weapons = WeaponsComposite(weapons=members)
        members.append(RocketLauncher())
        assert len(weapons.weapons) == 1
        assert weapons.shoot() == ["Ziiiiiip!"]

    def test_new_weapon_without_changing_composite(self):
        class WaterPistol:
            def shoot(self) -> str:
                return "Splash!"

        weapons = WeaponsComposite(weapons=[WaterPistol(), LaserBeam()])
        assert weapons.shoot() == ["Splash!", "Ziiiiiip!"]


class TestDemo:
    def test_demo_results(self, bus):
        result = run(bus)
        assert result.results == [["Ziiiiiip!"], ["Ziiiiiip!", "Whoosh!"]]
