# tests/e2e/test_experiment_smoke.py
from __future__ import annotations

import json

from adapters.keyboard import RandomKeyResponsePort
from adapters.time import FakeClockPort

from apps.experiment.__main__ import main
from apps.experiment.compose import build_session
from apps.experiment.settings import ExperimentSettings


def test_simulated_run_completes_every_round():
    settings = ExperimentSettings(repetitions=3)
    session = build_session(settings, clock=FakeClockPort())
    records = session.run(RandomKeyResponsePort(seed="p1"))

    assert session.finished
    assert [r.trial_index for r in records] == list(range(len(records)))
    assert {r.repetition for r in records} == {1, 2, 3}
    terminal = [r for r in records if "combo2" in r.state.as_tuple()]
    assert len(terminal) == 3


def test_drivers_agree_end_to_end():
    def run(dispatch: str) -> list[dict]:
        settings = ExperimentSettings(repetitions=4, dispatch=dispatch, seed="e2e")
        session = build_session(settings, clock=FakeClockPort())
        return [r.model_dump() for r in session.run(RandomKeyResponsePort(seed="p2"))]

    assert run("guarded") == run("direct")


def test_cli_simulate_prints_summary(capsys, monkeypatch, tmp_path):
    monkeypatch.setenv("PARRY_CONFIG_DIR", str(tmp_path))
    assert main(["--simulate", "--repetitions", "2", "--quiet"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    assert out[0].startswith("[parry] steps=")
    assert "rounds=2/2" in out[0]


def test_cli_script_prints_json_records(capsys, monkeypatch, tmp_path):
    monkeypatch.setenv("PARRY_CONFIG_DIR", str(tmp_path))
    assert main(["--keys", "e,w,,q", "--repetitions", "1"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].startswith("[parry] seed=1234")
    first = json.loads(lines[1])
    assert first["state"] == {"player": "neutral", "opponent": "neutral"}
    assert first["action"] == "jab"
    assert lines[-1].startswith("[parry] steps=")


def test_cli_without_source_exits_2(capsys, monkeypatch, tmp_path):
    monkeypatch.setenv("PARRY_CONFIG_DIR", str(tmp_path))
    assert main([]) == 2
