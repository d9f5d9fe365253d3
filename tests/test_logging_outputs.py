import numpy as np
import pytest

from Logging import generate_logs
from Main.simulation import TelemetrySynthesizer
from Main.telemetry import Logger


@pytest.fixture
def run_log():
    synthesizer = TelemetrySynthesizer(rng=np.random.default_rng(5))
    log = Logger()
    log.extend(synthesizer.iter_batch(-20.0, 600.0, 20.0))
    return log


def test_logger_records_every_channel(run_log):
    assert len(run_log) == 32
    assert run_log.mission_time[0] == -20.0
    assert run_log.mission_time[-1] == 600.0
    assert run_log.phase[0] == "terminal_count"
    assert run_log.stage_status[-1] == "separated"
    assert run_log.points()[5].mission_time == 80.0


def test_save_log_writes_header_and_rows(run_log, tmp_path, capsys):
    log_file = tmp_path / "telemetry_log.txt"
    generate_logs.save_log_to_txt(run_log, str(log_file))

    lines = log_file.read_text().splitlines()
    assert lines[0].startswith("# t_mission_s,alt_km")
    assert len(lines) == len(run_log) + 1
    assert lines[1].split(",")[8] == "terminal_count"
    assert "Saved telemetry log" in capsys.readouterr().out


def test_saved_log_reloads(run_log, tmp_path):
    log_file = tmp_path / "telemetry_log.txt"
    generate_logs.save_log_to_txt(run_log, str(log_file))
    reloaded = generate_logs.load_log_from_txt(str(log_file))
    assert reloaded.points() == run_log.points()


def test_load_rejects_foreign_file(tmp_path):
    other = tmp_path / "simulation_log.txt"
    other.write_text("# t_sim_s,t_env_s,alt_m\n0.0,0.0,0.0\n")
    with pytest.raises(ValueError):
        generate_logs.load_log_from_txt(str(other))


def test_summary_of_quiet_ascent():
    from Main.config import SimulationConfig

    defaults = SimulationConfig()
    quiet = SimulationConfig(
        booster_noise={k: 0.0 for k in defaults.booster_noise},
        sep_coast_noise={k: 0.0 for k in defaults.sep_coast_noise},
        upper_noise={k: 0.0 for k in defaults.upper_noise},
        coast_noise={k: 0.0 for k in defaults.coast_noise},
    )
    log = Logger()
    log.extend(TelemetrySynthesizer(sim_config=quiet).batch(0.0, 510.0, 1.0))
    stats = log.summary()

    assert stats["max_altitude"] == pytest.approx(250.0, abs=0.2)
    assert stats["max_velocity"] == pytest.approx(7.8, abs=0.01)
    assert stats["max_g_force"] == pytest.approx(3.5)
    assert stats["max_dynamic_pressure"] == pytest.approx(35.0)
    assert stats["phases_reached"] == [
        "ignition", "max_q", "meco", "stage_sep", "ses", "fairing_sep", "booster_landing",
    ]


def test_summary_of_empty_log():
    assert Logger().summary()["phases_reached"] == []
