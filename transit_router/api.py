"""Public API for transit-router."""

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from transit_router.document.models import Manifest, ProcessConfig, ValidationReport
from transit_router.document.reader import DocumentReader
from transit_router.document.validator import DocumentValidator
from transit_router.network.builder import build_network
from transit_router.network.models import TransitNetwork
from transit_router.network.router import Router
from transit_router.output.json import write_debug_json, write_responses
from transit_router.queries.processor import QueryProcessor
from transit_router.version import VERSION

logger = logging.getLogger(__name__)


def build_from_reader(reader: DocumentReader) -> TransitNetwork:
    """Build the network described by a loaded document."""
    if reader.settings is None:
        raise ValueError("Routing settings are missing")
    return build_network(reader.stops, reader.buses, reader.settings)


def answer(document: dict[str, Any], validate_input: bool = True) -> list[dict[str, Any]]:
    """
    Answer the stat requests of an in-memory request document.

    Args:
        document: Decoded JSON request document
        validate_input: Reject documents that fail validation before building

    Returns:
        One response per recognised stat request, in input order
    """
    reader = DocumentReader()
    reader.load(document)
    if validate_input:
        _require_valid(reader)

    network = build_from_reader(reader)
    return QueryProcessor(network, Router(network.graph)).process_all(reader.queries)


def process(
    input_path: str | None,
    output_path: str | None = None,
    config: ProcessConfig | None = None,
) -> Manifest:
    """
    Build the network from a request document and answer its stat requests.

    Args:
        input_path: Path to request document, None or "-" for stdin
        output_path: Path to response file, None for stdout
        config: Optional processing configuration

    Returns:
        Manifest with run metadata
    """
    if config is None:
        config = ProcessConfig(input_path=input_path, output_path=output_path)

    logger.info(f"Starting processing: {input_path or 'stdin'} -> {output_path or 'stdout'}")
    start_time = datetime.now(UTC)

    # Read
    reader = DocumentReader(input_path)
    reader.read_all()

    # Validate
    if config.validate_input:
        _require_valid(reader)

    # Build
    network = build_from_reader(reader)
    router = Router(network.graph)

    # Answer
    responses = QueryProcessor(network, router).process_all(reader.queries)

    # Write outputs
    outputs: dict[str, str] = {}
    write_responses(output_path, responses)
    outputs["responses"] = output_path or "stdout"

    if config.debug_json_dir:
        outputs.update(write_debug_json(Path(config.debug_json_dir), network))

    stats = {
        "stops": len(network.store.stops),
        "buses": len(network.store.buses),
        "vertices": network.graph.vertex_count,
        "edges": network.graph.edge_count,
        "queries": len(reader.query_ids),
        "responses": len(responses),
    }

    elapsed = (datetime.now(UTC) - start_time).total_seconds()
    logger.info(f"Processing completed in {elapsed:.2f}s")

    return Manifest(
        tool_version=VERSION,
        created_at_iso=start_time.isoformat(),
        inputs={"document_path": input_path or "stdin"},
        outputs=outputs,
        stats=stats,
    )


def validate(input_path: str | None) -> ValidationReport:
    """
    Validate a request document without building the network.

    Args:
        input_path: Path to request document, None or "-" for stdin

    Returns:
        ValidationReport with results
    """
    logger.info(f"Validating document: {input_path or 'stdin'}")

    reader = DocumentReader(input_path)
    try:
        reader.read_all()
    except ValueError as e:
        return ValidationReport(valid=False, errors=[f"Document decoding failed: {e}"])

    return DocumentValidator(reader).validate()


def _require_valid(reader: DocumentReader) -> None:
    report = DocumentValidator(reader).validate()
    if not report.valid:
        for error in report.errors:
            logger.error(error)
        raise ValueError(f"Document validation failed with {len(report.errors)} errors")
