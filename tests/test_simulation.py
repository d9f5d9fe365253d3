import math

import numpy as np
import pytest

from Environment.config import EnvironmentConfig
from Main.config import SimulationConfig
from Main.kinematics import typical_profile
from Main.simulation import TelemetryBatch, TelemetrySynthesizer, batch, synthesize
from Main.state import TelemetryPoint


NUMERIC_FIELDS = (
    "mission_time", "altitude", "velocity", "downrange", "acceleration", "throttle",
    "latitude", "longitude", "dynamic_pressure", "fuel_remaining",
)


@pytest.fixture
def synthesizer():
    return TelemetrySynthesizer(rng=np.random.default_rng(42))


@pytest.fixture
def quiet_sim_config():
    """SimulationConfig with every noise amplitude set to zero."""
    defaults = SimulationConfig()
    return SimulationConfig(
        booster_noise={k: 0.0 for k in defaults.booster_noise},
        sep_coast_noise={k: 0.0 for k in defaults.sep_coast_noise},
        upper_noise={k: 0.0 for k in defaults.upper_noise},
        coast_noise={k: 0.0 for k in defaults.coast_noise},
    )


@pytest.fixture
def quiet_synthesizer(quiet_sim_config):
    return TelemetrySynthesizer(sim_config=quiet_sim_config, rng=np.random.default_rng(0))


# --- Pre-launch ---

@pytest.mark.parametrize("t", [-3600.0, -600.0, -10.5, -10.0])
def test_pad_state_before_engine_start(synthesizer, t):
    p = synthesizer.synthesize(t)
    assert p.throttle == 0.0
    assert p.altitude == p.velocity == p.downrange == p.acceleration == 0.0
    assert p.dynamic_pressure == 0.0
    assert p.fuel_remaining == 100.0
    assert p.stage_status == "attached"
    assert p.fairing_status == "attached"
    assert (p.latitude, p.longitude) == (28.5623, -80.5774)


def test_engines_start_in_final_ten_seconds(synthesizer):
    assert synthesizer.synthesize(-9.0).throttle == 100.0
    assert synthesizer.synthesize(-0.5).throttle == 100.0
    assert synthesizer.synthesize(-0.5).altitude == 0.0


# --- First-stage burn ---

def test_throttle_bucket_through_max_q(synthesizer):
    for t in (50.0, 65.0, 80.0):
        assert synthesizer.synthesize(t).throttle == pytest.approx(70.0, abs=1.05)
    for t in (20.0, 100.0, 150.0):
        assert synthesizer.synthesize(t).throttle == pytest.approx(100.0, abs=0.55)


def test_max_q_flag_window(synthesizer):
    assert synthesizer.synthesize(67.0).is_max_q
    assert synthesizer.synthesize(72.0).is_max_q
    assert synthesizer.synthesize(77.0).is_max_q
    assert not synthesizer.synthesize(66.9).is_max_q
    assert not synthesizer.synthesize(77.1).is_max_q


def test_fuel_depletes_linearly_to_meco(synthesizer):
    assert synthesizer.synthesize(81.0).fuel_remaining == pytest.approx(50.0, abs=0.2)
    assert synthesizer.synthesize(162.0).fuel_remaining == pytest.approx(0.0, abs=0.2)


def test_stage_attached_through_meco(synthesizer):
    assert synthesizer.synthesize(162.0).stage_status == "attached"
    assert synthesizer.synthesize(162.5).stage_status == "separated"


# --- Separation coast ---

def test_separation_coast_engines_off(synthesizer):
    p = synthesizer.synthesize(163.0)
    assert p.throttle == 0.0
    assert p.fuel_remaining == 0.0
    assert p.dynamic_pressure == 0.0
    assert p.acceleration == pytest.approx(0.0, abs=0.05)
    assert p.stage_status == "separated"
    assert p.fairing_status == "attached"


# --- Second-stage burn and coast ---

def test_fairing_separation(synthesizer):
    assert synthesizer.synthesize(200.0).fairing_status == "attached"
    assert synthesizer.synthesize(210.0).fairing_status == "separated"
    assert synthesizer.synthesize(220.0).fairing_status == "separated"


def test_second_stage_burn(synthesizer):
    p = synthesizer.synthesize(337.5)
    assert p.throttle == pytest.approx(100.0, abs=0.55)
    assert p.fuel_remaining == 0.0
    assert p.altitude == pytest.approx(165.0, abs=0.3)
    assert p.velocity == pytest.approx(5.05, abs=0.011)


def test_orbital_coast(synthesizer):
    p = synthesizer.synthesize(700.0)
    assert p.throttle == 0.0
    assert p.acceleration == pytest.approx(0.0, abs=0.01)
    assert abs(p.altitude - 250.0) <= 5.2
    assert abs(p.velocity - 7.8) <= 0.06
    assert p.stage_status == "separated"
    assert p.fairing_status == "separated"


def test_phase_tag_uses_declared_order(synthesizer):
    assert synthesizer.synthesize(960.0).phase == "booster_landing"
    assert synthesizer.synthesize(72.0).phase == "max_q"


# --- Whole-window invariants ---

def test_no_nan_and_clamps_hold_over_window(synthesizer):
    for t in range(-200, 1001, 50):
        p = synthesizer.synthesize(float(t))
        for name in NUMERIC_FIELDS:
            assert not math.isnan(getattr(p, name)), (t, name)
        assert p.altitude >= 0.0
        assert p.velocity >= 0.0
        assert p.downrange >= 0.0
        assert p.dynamic_pressure >= 0.0
        assert 0.0 <= p.throttle <= 100.0
        assert 0.0 <= p.fuel_remaining <= 100.0


def test_ground_track_heads_east_north_during_ascent(synthesizer):
    points = [synthesizer.synthesize(t) for t in (0.0, 100.0, 162.0, 300.0, 510.0)]
    lats = [p.latitude for p in points]
    lons = [p.longitude for p in points]
    assert lats == sorted(lats)
    assert lons == sorted(lons)


def test_matches_nominal_profile_without_noise(quiet_synthesizer):
    for t in (-100.0, 0.0, 30.0, 72.0, 163.0, 300.0, 510.0):
        p = quiet_synthesizer.synthesize(t)
        nominal = typical_profile(t)
        assert p.altitude == nominal.altitude
        assert p.velocity == nominal.velocity
        assert p.downrange == nominal.downrange
        assert p.acceleration == nominal.acceleration
        assert p.dynamic_pressure == nominal.dynamic_pressure


def test_quiet_coast_oscillates_around_orbit(quiet_synthesizer):
    # Quarter of the coast window: sin(pi/2) = 1
    p = quiet_synthesizer.synthesize(510.0 + 900.0)
    assert p.altitude == pytest.approx(255.0)
    assert p.velocity == pytest.approx(7.85)


def test_nan_time_propagates_without_raising(synthesizer):
    p = synthesizer.synthesize(float("nan"))
    assert math.isnan(p.altitude)
    assert math.isnan(p.downrange)
    assert p.phase == "pre_launch"


# --- Random source ---

def test_seeded_generators_reproduce_output():
    a = TelemetrySynthesizer(rng=np.random.default_rng(7))
    b = TelemetrySynthesizer(rng=np.random.default_rng(7))
    for t in (10.0, 100.0, 300.0, 900.0):
        assert a.synthesize(t) == b.synthesize(t)


def test_config_seed_reproduces_output():
    a = TelemetrySynthesizer(sim_config=SimulationConfig(seed=3))
    b = TelemetrySynthesizer(sim_config=SimulationConfig(seed=3))
    assert a.batch(0.0, 20.0, 5.0) == b.batch(0.0, 20.0, 5.0)


def test_repeated_calls_draw_fresh_noise(synthesizer):
    first = synthesizer.synthesize(100.0)
    second = synthesizer.synthesize(100.0)
    assert (first.altitude, first.velocity, first.downrange, first.latitude) != (
        second.altitude, second.velocity, second.downrange, second.latitude
    )


def test_unknown_vehicle_profile_falls_back_to_generic(synthesizer):
    p = synthesizer.synthesize(72.0, vehicle_profile="new_glenn")
    assert p.phase == "max_q"
    assert p.dynamic_pressure == pytest.approx(35.0, abs=0.2)


def test_ground_track_without_saturation_keeps_drifting(quiet_sim_config):
    held = TelemetrySynthesizer(sim_config=quiet_sim_config, rng=np.random.default_rng(0))
    free = TelemetrySynthesizer(
        sim_config=quiet_sim_config,
        env_config=EnvironmentConfig(ground_track_saturation="none"),
        rng=np.random.default_rng(0),
    )
    late = 510.0 + 3 * 3600.0
    assert held.synthesize(late).longitude == pytest.approx(held.synthesize(510.0 + 3600.0).longitude)
    assert free.synthesize(late).longitude > held.synthesize(late).longitude


# --- Batch ---

def test_batch_unit_step(synthesizer):
    points = synthesizer.batch(0.0, 10.0, 1.0)
    assert len(points) == 11
    assert [p.mission_time for p in points] == [float(t) for t in range(11)]
    assert all(isinstance(p, TelemetryPoint) for p in points)


def test_batch_includes_end_on_exact_multiple(synthesizer):
    assert [p.mission_time for p in synthesizer.batch(0.0, 10.0, 5.0)] == [0.0, 5.0, 10.0]
    assert [p.mission_time for p in synthesizer.batch(0.0, 10.0, 3.0)] == [0.0, 3.0, 6.0, 9.0]
    assert len(synthesizer.batch(0.0, 1.0, 0.1)) == 11


def test_batch_empty_ranges(synthesizer):
    assert synthesizer.batch(10.0, 0.0, 1.0) == []
    assert synthesizer.batch(float("nan"), 10.0, 1.0) == []


@pytest.mark.parametrize("interval", [0.0, -1.0, -math.inf])
def test_batch_rejects_bad_interval(synthesizer, interval):
    with pytest.raises(ValueError):
        synthesizer.batch(0.0, 10.0, interval)


@pytest.mark.parametrize("interval", [float("nan"), float("inf")])
def test_batch_with_unusable_interval_stops_after_start(synthesizer, interval):
    lazy = synthesizer.iter_batch(0.0, 10.0, interval)
    assert len(lazy) == 1
    assert [p.mission_time for p in lazy] == [0.0]
    assert [p.mission_time for p in batch(0.0, 10.0, interval)] == [0.0]


def test_batch_rejects_unbounded_range(synthesizer):
    with pytest.raises(ValueError):
        synthesizer.iter_batch(0.0, float("inf"), 1.0)


def test_iter_batch_is_lazy_and_restartable(synthesizer):
    lazy = synthesizer.iter_batch(-5.0, 5.0, 2.5)
    assert isinstance(lazy, TelemetryBatch)
    assert len(lazy) == 5
    first = [p.mission_time for p in lazy]
    second = [p.mission_time for p in lazy]
    assert first == second == [-5.0, -2.5, 0.0, 2.5, 5.0]


def test_module_level_helpers():
    assert synthesize(-100.0).altitude == 0.0
    points = batch(0.0, 10.0, 5.0, rng=np.random.default_rng(1))
    assert [p.mission_time for p in points] == [0.0, 5.0, 10.0]


def test_as_dict_uses_feed_keys(synthesizer):
    d = synthesizer.synthesize(72.0).as_dict()
    assert d["missionTime"] == 72.0
    assert d["isMaxQ"] is True
    assert {"dynamicPressure", "fuelRemaining", "stageStatus", "fairingStatus", "altitude"} <= set(d)
