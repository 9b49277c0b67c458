from __future__ import annotations

import json
import logging

from rich.console import Console

from richhdr.cli.display import (
    build_aggregate_table,
    build_entries_table,
    build_summary_table,
    display_result,
    display_validation_errors,
    print_banner,
)
from richhdr.core.inspector import RichHeaderInspector
from richhdr.utils.logger import LOGGER_NAME, configure_logging_levels, get_logger, setup_logger
from richhdr.utils.output_json import JsonOutputFormatter


def _console() -> Console:
    return Console(record=True, width=160, no_color=True)


def test_json_single_result_is_an_object(rich_pe):
    result = RichHeaderInspector.analyze_bytes(rich_pe().data, file_path="a.exe")
    payload = json.loads(JsonOutputFormatter(result).to_json())
    assert payload["file_path"] == "a.exe"
    assert payload["status"] == "found"
    assert len(payload["entries"]) == 5
    assert "aggregated" not in payload


def test_json_many_results_is_a_list(rich_pe):
    found = RichHeaderInspector.analyze_bytes(rich_pe().data, file_path="a.exe")
    missing = RichHeaderInspector.analyze_bytes(b"MZ" + bytes(200), file_path="b.exe")
    payload = json.loads(JsonOutputFormatter([found, missing]).to_json(indent=0))
    assert [item["status"] for item in payload] == ["found", "not_found"]


def test_json_no_results():
    assert json.loads(JsonOutputFormatter([]).to_json()) == []


def test_summary_and_entries_tables(rich_pe):
    result = RichHeaderInspector.analyze_bytes(rich_pe().data, file_path="a.exe", aggregate=True)
    console = _console()
    display_result(result, console)
    text = console.export_text()

    assert "Rich Header: a.exe" in text
    assert f"0x{result.xor_key:08X}" in text
    assert "Utc1900_CPP" in text
    assert "Visual Studio 2015 14.00" in text
    assert "Objects per Tool" in text
    assert build_summary_table(result).row_count == 7
    assert build_entries_table(result).row_count == 5
    assert build_aggregate_table(result).row_count == 5


def test_unavailable_result_table():
    result = RichHeaderInspector.analyze_bytes(b"MZ" + bytes(200), file_path="b.exe")
    console = _console()
    display_result(result, console)
    text = console.export_text()
    assert "Not Available" in text
    assert "Rich header not found" in text


def test_validation_errors_and_banner():
    console = _console()
    display_validation_errors(["first", "second"], console)
    print_banner(console)
    text = console.export_text()
    assert "Error: first" in text
    assert "Error: second" in text
    assert "Rich Header Decoder" in text


def test_logger_levels():
    logger = setup_logger(level=logging.INFO)
    assert logger is get_logger()
    assert logger.name == LOGGER_NAME
    configure_logging_levels(verbose=False, quiet=True)
    assert logger.level == logging.ERROR
    configure_logging_levels(verbose=True, quiet=False)
    assert logger.level == logging.DEBUG
    configure_logging_levels(verbose=False, quiet=False)
    assert logger.level == logging.WARNING
