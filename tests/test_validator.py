"""Tests for request document validator."""

from pathlib import Path

from transit_router.document.reader import DocumentReader
from transit_router.document.validator import DocumentValidator


def _validate(path: Path):
    reader = DocumentReader(str(path))
    reader.read_all()
    return DocumentValidator(reader).validate()


def test_validator_valid_data(network_city: Path) -> None:
    """Test validator passes on valid data."""
    report = _validate(network_city)

    assert report.valid
    assert len(report.errors) == 0
    assert report.stats["stops"] == 6
    assert report.stats["buses"] == 3
    assert report.stats["road_distances"] == 7
    assert report.stats["stat_requests"] == 10


def test_validator_unserved_stop_warning(network_city: Path) -> None:
    """Test stops without buses are only a warning."""
    report = _validate(network_city)

    assert report.warnings == ["Stop Omega is not served by any bus"]


def test_validator_invalid_coordinates(network_invalid: Path) -> None:
    """Test validator catches invalid coordinates."""
    report = _validate(network_invalid)

    assert not report.valid
    assert any("latitude" in err.lower() for err in report.errors)
    assert any("longitude" in err.lower() for err in report.errors)


def test_validator_unknown_stops(network_invalid: Path) -> None:
    """Test validator catches references to unknown stops."""
    report = _validate(network_invalid)

    assert "Bus L2 references non-existent stop Atlantis" in report.errors
    assert "Road distance South -> Atlantis references non-existent stop" in report.errors


def test_validator_duplicates_and_empty_bus(network_invalid: Path) -> None:
    """Test validator catches duplicate stops and buses without stops."""
    report = _validate(network_invalid)

    assert "Stop South is defined 2 times" in report.errors
    assert "Bus L3 has no stops" in report.errors
    assert any("negative" in err for err in report.errors)


def test_validator_settings(network_invalid: Path) -> None:
    """Test validator checks routing settings."""
    report = _validate(network_invalid)

    assert "Bus velocity must be positive: 0.0" in report.errors
    assert "Bus wait time is negative: -1" in report.errors


def test_validator_warnings(network_invalid: Path) -> None:
    """Test validator generates warnings for edge cases."""
    report = _validate(network_invalid)

    assert "Roundtrip bus L1 ends at South, not at North" in report.warnings
    assert "Stop Lonely is not served by any bus" in report.warnings
    assert "Stat request id 1 is used 2 times" in report.warnings
