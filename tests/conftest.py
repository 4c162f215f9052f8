"""Pytest configuration and fixtures."""

import json
import shutil
from pathlib import Path
from typing import Any

import pytest

from transit_router.api import build_from_reader
from transit_router.document.reader import DocumentReader
from transit_router.network.models import TransitNetwork

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def network_minimal() -> Path:
    """Path to two-stop circular bus fixture."""
    return FIXTURES / "network_minimal.json"


@pytest.fixture
def network_city() -> Path:
    """Path to multi-bus city fixture."""
    return FIXTURES / "network_city.json"


@pytest.fixture
def network_invalid() -> Path:
    """Path to fixture with integrity errors."""
    return FIXTURES / "network_invalid.json"


@pytest.fixture
def city_document(network_city: Path) -> dict[str, Any]:
    """Decoded city fixture."""
    with open(network_city, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def city_reader(network_city: Path) -> DocumentReader:
    """Reader with the city fixture loaded."""
    reader = DocumentReader(str(network_city))
    reader.read_all()
    return reader


@pytest.fixture
def city_network(city_reader: DocumentReader) -> TransitNetwork:
    """Built city network."""
    return build_from_reader(city_reader)


@pytest.fixture
def tmp_output(tmp_path: Path) -> Path:
    """Temporary output directory."""
    output_dir = tmp_path / "transit_output"
    output_dir.mkdir()
    yield output_dir
    # Cleanup
    if output_dir.exists():
        shutil.rmtree(output_dir)
