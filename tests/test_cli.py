"""Tests for CLI."""

import json
import subprocess
from pathlib import Path


def test_cli_process_basic(network_city: Path, tmp_path: Path) -> None:
    """Test CLI process command."""
    output = tmp_path / "responses.json"

    result = subprocess.run(
        [
            "python",
            "-m",
            "transit_router.cli",
            "process",
            "--input",
            str(network_city),
            "--output",
            str(output),
        ],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert "Processing successful" in result.stdout
    assert output.exists()


def test_cli_process_stdout(network_minimal: Path) -> None:
    """Test CLI writes responses to stdout by default."""
    result = subprocess.run(
        [
            "python",
            "-m",
            "transit_router.cli",
            "process",
            "--input",
            str(network_minimal),
        ],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    responses = json.loads(result.stdout)
    assert [response["request_id"] for response in responses] == [1, 2, 3]


def test_cli_process_stdin(network_minimal: Path) -> None:
    """Test CLI reads the document from stdin."""
    result = subprocess.run(
        ["python", "-m", "transit_router.cli", "process"],
        input=network_minimal.read_text(encoding="utf-8"),
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert json.loads(result.stdout)[1] == {"buses": ["1"], "request_id": 2}


def test_cli_process_with_debug_json(network_city: Path, tmp_path: Path) -> None:
    """Test CLI with debug output."""
    output = tmp_path / "responses.json"
    debug_dir = tmp_path / "debug"

    result = subprocess.run(
        [
            "python",
            "-m",
            "transit_router.cli",
            "process",
            "--input",
            str(network_city),
            "--output",
            str(output),
            "--debug-json",
            str(debug_dir),
        ],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert (debug_dir / "graph.json").exists()


def test_cli_validate_basic(network_city: Path) -> None:
    """Test CLI validate command."""
    result = subprocess.run(
        [
            "python",
            "-m",
            "transit_router.cli",
            "validate",
            "--input",
            str(network_city),
        ],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert "Validation successful" in result.stdout
    assert "Omega" in result.stdout


def test_cli_validate_invalid(network_invalid: Path) -> None:
    """Test CLI validate reports errors."""
    result = subprocess.run(
        [
            "python",
            "-m",
            "transit_router.cli",
            "validate",
            "--input",
            str(network_invalid),
        ],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 1
    assert "Validation failed" in result.stdout
    assert "Atlantis" in result.stdout


def test_cli_version() -> None:
    """Test CLI version flag."""
    result = subprocess.run(
        ["python", "-m", "transit_router.cli", "--version"],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert "0.1.0" in result.stdout


def test_cli_help() -> None:
    """Test CLI help."""
    result = subprocess.run(
        ["python", "-m", "transit_router.cli", "--help"],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0
    assert "process" in result.stdout
    assert "validate" in result.stdout


def test_cli_process_invalid_input() -> None:
    """Test CLI with invalid input."""
    result = subprocess.run(
        [
            "python",
            "-m",
            "transit_router.cli",
            "process",
            "--input",
            "/nonexistent/path.json",
            "--output",
            "/tmp/responses.json",
        ],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 1
    assert "Error" in result.stdout or "Error" in result.stderr
