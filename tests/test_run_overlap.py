import copy
import io
import sys

import pytest

from fabric_claims.scripts.run_overlap import main
from fabric_claims.src.utils import config_loader

SAMPLE = b"#1 @ 1,3: 4x4\n#2 @ 3,1: 4x4\n#3 @ 5,5: 2x2\n"

SETTINGS = ["CELL_STATE", "HEATMAP_ENABLED", "HEATMAP_PATH", "REPORT_OVERLAP_FREE", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    for name in SETTINGS:
        monkeypatch.setattr(config_loader, name, getattr(config_loader, name))
    monkeypatch.setattr(config_loader, "META_CONFIG", copy.deepcopy(config_loader.META_CONFIG))


def _stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


def test_reports_sample_from_stdin(monkeypatch, capsys):
    _stdin(monkeypatch, SAMPLE)
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Found 3 claims that requires a sheet of size 7×7 inches",
        "Result: 4 square inch(es) are overlapping other claims.",
        "Bonus: 17 square inch(es) are left unclaimed",
    ]


def test_no_claims(monkeypatch, capsys):
    _stdin(monkeypatch, b"")
    assert main([]) == 0
    assert capsys.readouterr().out == "Found no claims in stdin.\n"


def test_malformed_line_aborts(monkeypatch, capsys):
    _stdin(monkeypatch, b"#1 @ 1,3: 4x4\n#2 3,1: 4x4\n")
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Failed to parse line '#2 3,1: 4x4' at column 3")


def test_invalid_utf8_aborts(monkeypatch, capsys):
    _stdin(monkeypatch, b"#1 @ 1,3: 4x4\n\xfe\n")
    assert main([]) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_occupancy_cells_from_file(tmp_path, capsys):
    path = tmp_path / "claims.txt"
    path.write_bytes(SAMPLE)
    assert main([str(path), "--cell-state", "occupancy"]) == 0
    out = capsys.readouterr().out
    assert "Result: 4 square inch(es)" in out
    assert "Bonus: 17 square inch(es)" in out


def test_overlap_free_and_heatmap(tmp_path, capsys):
    claims = tmp_path / "claims.txt"
    claims.write_bytes(SAMPLE)
    heatmap = tmp_path / "heat.png"
    assert main([str(claims), "--overlap-free", "--heatmap", str(heatmap)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[3] == "Intact: 1 claim(s) do not overlap any other claim"
    assert out[4] == f"Heatmap generated and saved to {heatmap}"
    assert heatmap.exists()


def test_config_file(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("report:\n  overlap_free_claims: true\n", encoding="utf-8")
    claims = tmp_path / "claims.txt"
    claims.write_bytes(SAMPLE)
    assert main([str(claims), "--config", str(config)]) == 0
    assert "Intact: 1 claim(s)" in capsys.readouterr().out


def test_bad_config_file(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("cell_state: sparse\n", encoding="utf-8")
    claims = tmp_path / "claims.txt"
    claims.write_bytes(SAMPLE)
    assert main([str(claims), "--config", str(config)]) == 1
    assert "Unknown cell state 'sparse'" in capsys.readouterr().err


def test_sheet_too_large_to_allocate(monkeypatch, capsys):
    _stdin(monkeypatch, b"#1 @ 18446744073709551615,0: 1x1\n")
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Cannot allocate")


def test_claim_edge_past_64_bits(monkeypatch, capsys):
    _stdin(monkeypatch, b"#1 @ 18446744073709551615,0: 2x1\n")
    assert main([]) == 1
    assert "does not fit in 64 bits" in capsys.readouterr().err


def test_unknown_log_level_in_config(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("log_level: LOUD\n", encoding="utf-8")
    claims = tmp_path / "claims.txt"
    claims.write_bytes(SAMPLE)
    assert main([str(claims), "--config", str(config)]) == 1
    assert "Unknown log level 'LOUD'" in capsys.readouterr().err


def test_unknown_log_level_flag(tmp_path, capsys):
    claims = tmp_path / "claims.txt"
    claims.write_bytes(SAMPLE)
    assert main([str(claims), "--log-level", "loud"]) == 1
    assert "Unknown log level 'LOUD'" in capsys.readouterr().err
