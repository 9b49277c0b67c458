from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

from click.testing import CliRunner

from richhdr.cli_main import cli

ROOT = Path(__file__).resolve().parents[2]


def _run_cli(args, timeout=60):
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT)
    cmd = [
        sys.executable,
        "-c",
        "from richhdr.cli_main import cli; cli()",
        *args,
    ]
    return subprocess.run(cmd, text=True, capture_output=True, env=env, timeout=timeout)


def _invoke(args):
    return CliRunner().invoke(cli, args, env={"COLUMNS": "200"})


def test_cli_help():
    result = _run_cli(["--help"])
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert "--aggregate" in result.stdout


def test_cli_version():
    result = _run_cli(["--version"])
    assert result.returncode == 0
    assert "richhdr" in result.stdout


def test_cli_json_subprocess(sample_file):
    result = _run_cli(["--json", str(sample_file)])
    assert result.returncode == 0
    payload = json.loads(result.stdout)
    assert payload["status"] == "found"
    assert payload["checksum_valid"] is True


def test_module_entry_point(sample_file):
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT)
    result = subprocess.run(
        [sys.executable, "-m", "richhdr", "-j", str(sample_file)],
        text=True,
        capture_output=True,
        env=env,
        timeout=60,
    )
    assert result.returncode == 0
    assert json.loads(result.stdout)["entries"][0]["tool_name"] == "Import0"


def test_no_files_is_an_error():
    result = _invoke([])
    assert result.exit_code == 1
    assert "At least one input file is required" in result.output


def test_missing_file_is_rejected(tmp_path):
    result = _invoke([str(tmp_path / "nope.exe")])
    assert result.exit_code == 1
    assert "File does not exist" in result.output


def test_table_output(sample_file):
    result = _invoke(["--no-banner", str(sample_file)])
    assert result.exit_code == 0
    assert "Tool Entries" in result.output
    assert "Utc1900_C" in result.output


def test_banner_shown_by_default(sample_file):
    result = _invoke([str(sample_file)])
    assert result.exit_code == 0
    assert "Rich Header Decoder" in result.output


def test_json_output_many_files(sample_file, plain_file):
    result = _invoke(["-j", str(sample_file), str(plain_file)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["status"] for item in payload] == ["found", "not_found"]
    assert payload[1]["available"] is False


def test_aggregate_flag(sample_file):
    result = _invoke(["-j", "-a", str(sample_file)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["aggregated"]["260"] == 12


def test_json_written_to_file(sample_file, tmp_path):
    out = tmp_path / "report.json"
    result = _invoke(["-j", "-o", str(out), str(sample_file)])
    assert result.exit_code == 0
    assert "JSON results saved" in result.output
    assert json.loads(out.read_text())["size"] == 56


def test_tables_written_to_file(sample_file, tmp_path):
    out = tmp_path / "report.txt"
    result = _invoke(["--quiet", "-o", str(out), str(sample_file)])
    assert result.exit_code == 0
    text = out.read_text()
    assert "Rich Header" in text
    assert "Utc1900_CPP" in text


def test_not_pe_is_not_a_failure(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("plain text, no executable here")
    result = _invoke(["-j", str(path)])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["status"] == "not_pe"


def test_config_file_options(sample_file, tmp_path):
    config = tmp_path / "richhdr.json"
    config.write_text(json.dumps({"output": {"json_indent": 0, "aggregate": True}}))
    result = _invoke(["-j", "--config", str(config), str(sample_file)])
    assert result.exit_code == 0
    line = result.stdout.strip()
    assert "\n" not in line
    assert "aggregated" in json.loads(line)


def test_invalid_config_file(sample_file, tmp_path):
    config = tmp_path / "richhdr.json"
    config.write_text(json.dumps({"scan": {"max_file_size_mb": 0}}))
    result = _invoke(["--config", str(config), str(sample_file)])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_config_must_be_json(sample_file, tmp_path):
    config = tmp_path / "richhdr.yaml"
    config.write_text("scan: {}")
    result = _invoke(["--config", str(config), str(sample_file)])
    assert result.exit_code == 1
    assert "Config file must be JSON" in result.output
