"""JSON response encoding and debug output."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

from transit_router.network.builder import RouteGraph
from transit_router.network.models import EdgeKind, TransitNetwork

logger = logging.getLogger(__name__)

FLOAT_PRECISION = 6  # significant digits


def normalize_floats(node: Any) -> Any:
    """Round every float in a response tree to FLOAT_PRECISION significant digits."""
    if isinstance(node, float):
        return float(f"{node:.{FLOAT_PRECISION}g}")
    if isinstance(node, dict):
        return {key: normalize_floats(value) for key, value in node.items()}
    if isinstance(node, list):
        return [normalize_floats(value) for value in node]
    return node


def dumps_responses(responses: list[dict[str, Any]]) -> str:
    """Encode responses with one space of indentation per level."""
    return json.dumps(normalize_floats(responses), indent=1, sort_keys=True, ensure_ascii=False)


def write_responses(output_path: str | None, responses: list[dict[str, Any]]) -> None:
    """Write responses to a file, or stdout when no path is given."""
    text = dumps_responses(responses)

    if output_path is None:
        sys.stdout.write(text + "\n")
        return

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text + "\n")
    logger.info(f"Wrote {len(responses)} responses to {path}")


def write_debug_json(output_path: Path, network: TransitNetwork) -> dict[str, str]:
    """Write debug JSON files describing the built network."""
    logger.info(f"Writing debug JSON files to {output_path}")

    output_path.mkdir(parents=True, exist_ok=True)

    store = network.store
    graph = network.graph
    files_written = {}

    # Write stops.json
    stops_data = []
    for stop in store.stops:
        stops_data.append(
            {
                "index": stop.index,
                "name": stop.name,
                "latitude": stop.point.latitude_degrees,
                "longitude": stop.point.longitude_degrees,
                "buses": sorted(stop.buses),
                "wait_vertex": RouteGraph.wait_vertex(stop.index),
                "board_vertex": RouteGraph.board_vertex(stop.index),
            }
        )

    stops_path = output_path / "stops.json"
    with open(stops_path, "w", encoding="utf-8") as f:
        json.dump(stops_data, f, indent=2, sort_keys=True)
    files_written["stops.json"] = str(stops_path)
    logger.info(f"Wrote {stops_path}")

    # Write buses.json
    buses_data = []
    for bus in store.buses:
        distance = store.compute_route_distance(bus.name)
        buses_data.append(
            {
                "index": bus.index,
                "name": bus.name,
                "type": bus.bus_type.value,
                "stops": [store.stop_at(stop_index).name for stop_index in bus.stop_indices],
                "stop_count": bus.stop_count,
                "unique_stop_count": bus.unique_stop_count,
                "route_length": distance.by_default,
                "curvature": distance.curvature,
            }
        )

    buses_path = output_path / "buses.json"
    with open(buses_path, "w", encoding="utf-8") as f:
        json.dump(buses_data, f, indent=2, sort_keys=True)
    files_written["buses.json"] = str(buses_path)
    logger.info(f"Wrote {buses_path}")

    # Write graph.json
    edges_data = []
    for edge_id, edge in enumerate(graph.edges):
        edge_data: dict[str, Any] = {
            "id": edge_id,
            "source": edge.source,
            "target": edge.target,
            "kind": edge.kind.value,
            "weight": edge.weight,
        }
        if edge.kind is EdgeKind.BUS:
            info = graph.get_edge_info(edge_id)
            edge_data["bus"] = store.bus_at(info.bus_index).name
            edge_data["span_count"] = info.span_count
        edges_data.append(edge_data)

    graph_data = {
        "vertex_count": graph.vertex_count,
        "edge_count": graph.edge_count,
        "edges": edges_data,
    }

    graph_path = output_path / "graph.json"
    with open(graph_path, "w", encoding="utf-8") as f:
        json.dump(graph_data, f, indent=2, sort_keys=True)
    files_written["graph.json"] = str(graph_path)
    logger.info(f"Wrote {graph_path}")

    return files_written
