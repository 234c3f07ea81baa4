import json
import logging

import pytest

from scheduling.cli import main
from scheduling.config import DATA_DIR
from scheduling.logger import logger

SAMPLE_CATALOG = str(DATA_DIR / "courses_formatted.json")
SAMPLE_PROFILE = str(DATA_DIR / "example_profile.json")


@pytest.fixture(autouse=True)
def restore_log_level():
    level = logger.level
    yield
    logger.setLevel(level)


def test_json_output(capsys):
    code = main([
        "--term", "202420", "--profile", SAMPLE_PROFILE, "--catalog", SAMPLE_CATALOG,
        "--fixed-order", "--json", "--top", "2",
    ])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["success"] is True
    assert len(payload["schedules"]) == 2
    assert payload["schedules"][0]["score"] == 100.0


def test_terminal_output(capsys):
    code = main(["--term", "202420", "--profile", SAMPLE_PROFILE, "--catalog", SAMPLE_CATALOG, "--seed", "3"])

    out = capsys.readouterr().out
    assert code == 0
    assert "CSCI 0320" in out


def test_missing_catalog_exit_code(tmp_path, capsys):
    code = main(["--term", "202420", "--profile", SAMPLE_PROFILE, "--catalog", str(tmp_path / "nope.json")])

    assert code == 2
    assert "Catalog file not found" in capsys.readouterr().err


def test_unreadable_profile(tmp_path, capsys):
    code = main(["--term", "202420", "--profile", str(tmp_path / "missing.json")])

    assert code == 1
    assert "Could not read profile" in capsys.readouterr().err


def test_request_errors_exit_code(tmp_path, capsys):
    profile = json.loads((DATA_DIR / "example_profile.json").read_text(encoding="utf-8"))
    profile["classesPerSemester"] = 2
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(profile), encoding="utf-8")

    code = main(["--term", "202420", "--profile", str(path), "--catalog", SAMPLE_CATALOG, "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["success"] is False
    assert payload["schedules"] == []


def test_seed_and_fixed_order_are_exclusive():
    with pytest.raises(SystemExit):
        main(["--term", "202420", "--profile", SAMPLE_PROFILE, "--seed", "1", "--fixed-order"])


@pytest.mark.parametrize("flag, value", [
    ("--max-schedules", "0"),
    ("--top", "-1"),
    ("--max-nodes", "0"),
])
def test_limits_below_one_rejected(flag, value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--term", "202420", "--profile", SAMPLE_PROFILE, flag, value])
    assert excinfo.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err
