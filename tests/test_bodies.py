# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for host bodies, orbiting bodies and star systems."""
from types import SimpleNamespace

import pytest

from orrery.domain.bodies import HostBody, OrbitingBody, StarSystem
from orrery.domain.errors import ConfigurationError
from orrery.domain.orbital_mechanics import OrbitParameters


# ── Host body ───────────────────────────────────────────────────────

class TestHostBody:

    def test_mass_is_density_times_radius_cubed(self):
        assert HostBody(radius=200).mass == 8_000_000
        assert HostBody(radius=10, density=2.5).mass == pytest.approx(2_500.0)

    def test_default_density(self):
        assert HostBody(radius=3).density == 1.0

    def test_mass_follows_radius_change(self):
        host = HostBody(radius=10)
        host.radius = 20
        assert host.mass == 8_000

    def test_mass_follows_density_change(self):
        host = HostBody(radius=10)
        host.density = 3.0
        assert host.mass == pytest.approx(3_000.0)

    @pytest.mark.parametrize("radius", [0, -5, float('nan')])
    def test_invalid_radius_raises(self, radius):
        with pytest.raises(ConfigurationError):
            HostBody(radius=radius)

    def test_invalid_reassignment_raises(self):
        host = HostBody(radius=10)
        with pytest.raises(ConfigurationError):
            host.density = 0
        assert host.density == 1.0


# ── Orbiting body ───────────────────────────────────────────────────

class TestOrbitingBody:

    def test_defaults(self):
        body = OrbitingBody()
        assert body.radius == 10.0
        assert body.density == 1.0
        assert body.mass == 1_000.0
        assert body.periapsis_time == 0.0
        assert not body.is_initialized

    def test_initialize_derives_constants(self):
        host = HostBody(radius=200)
        body = OrbitingBody(name="P")
        body.initialize(OrbitParameters(apoapsis=400, periapsis=100), host)
        assert body.is_initialized
        assert body.eccentricity == pytest.approx(0.6)
        assert body.semi_major_axis == pytest.approx(250.0)
        assert body.semi_minor_axis == pytest.approx(200.0)
        assert body.mean_angular_motion == pytest.approx(0.7155, abs=1e-4)
        assert body.host is host

    def test_initialize_sets_periapsis_time(self):
        body = OrbitingBody(periapsis_time=1.0)
        body.initialize(OrbitParameters(400, 100), HostBody(radius=200), periapsis_time=5.0)
        assert body.periapsis_time == 5.0

    def test_initialize_keeps_periapsis_time_when_omitted(self):
        body = OrbitingBody(periapsis_time=1.0)
        body.initialize(OrbitParameters(400, 100), HostBody(radius=200))
        assert body.periapsis_time == 1.0

    def test_uninitialized_position_query_raises(self):
        with pytest.raises(ConfigurationError):
            OrbitingBody(name="Lonely").position_at(0.0)

    def test_uninitialized_constants_raise(self):
        with pytest.raises(ConfigurationError):
            OrbitingBody().constants

    def test_constants_not_recomputed_when_host_changes(self):
        host = HostBody(radius=200)
        body = OrbitingBody()
        body.initialize(OrbitParameters(400, 100), host)
        n_before = body.mean_angular_motion

        host.radius = 400

        assert body.mean_angular_motion == n_before

    def test_reinitialize_picks_up_host_change(self):
        host = HostBody(radius=200)
        body = OrbitingBody()
        params = OrbitParameters(400, 100)
        body.initialize(params, host)
        n_before = body.mean_angular_motion

        host.radius = 400
        body.initialize(params, host)

        # mass grew 8×, n ∝ √M
        assert body.mean_angular_motion == pytest.approx(n_before * 8**0.5)

    def test_failed_initialize_leaves_body_untouched(self):
        body = OrbitingBody()
        bad = SimpleNamespace(apoapsis=50.0, periapsis=100.0)
        with pytest.raises(ConfigurationError):
            body.initialize(bad, HostBody(radius=200), periapsis_time=3.0)
        assert not body.is_initialized
        assert body.periapsis_time == 0.0

    def test_initialize_does_not_mutate_host(self):
        host = HostBody(radius=200, density=2.0)
        OrbitingBody().initialize(OrbitParameters(400, 100), host)
        assert (host.radius, host.density) == (200, 2.0)

    def test_invalid_body_radius(self):
        with pytest.raises(ConfigurationError):
            OrbitingBody(radius=-1.0)


# ── Star system ─────────────────────────────────────────────────────

class TestStarSystem:

    def _initialized(self, host, name="B"):
        body = OrbitingBody(name=name)
        body.initialize(OrbitParameters(400, 100), host)
        return body

    def test_len_and_order(self):
        host = HostBody(radius=50)
        bodies = [self._initialized(host, f"B{i}") for i in range(3)]
        system = StarSystem(host=host, bodies=bodies)
        assert len(system) == 3
        assert [b.name for b in system.bodies] == ["B0", "B1", "B2"]
        assert isinstance(system.bodies, tuple)

    def test_empty_system(self):
        system = StarSystem(host=HostBody(radius=50))
        assert len(system) == 0
        assert system.positions_at(1.0) == []

    def test_rejects_uninitialized_body(self):
        with pytest.raises(ConfigurationError):
            StarSystem(host=HostBody(radius=50), bodies=(OrbitingBody(),))

    def test_rejects_body_of_other_host(self):
        other = HostBody(radius=50)
        with pytest.raises(ConfigurationError):
            StarSystem(host=HostBody(radius=50), bodies=(self._initialized(other),))
