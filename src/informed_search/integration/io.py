"""Loading graph problems from files and saving search results.

Graph files are JSON or YAML documents of the form::

    initial: Arad
    goals: [Bucharest]
    directed: false
    edges:
      - [Arad, Zerind, 75]
      - [Arad, Sibiu, 140]
    heuristic: {Arad: 366, Zerind: 374}   # optional
    coordinates: {Arad: [91, 492]}        # optional
    vertices: [Arad, Zerind, Sibiu]       # optional, adds isolated vertices

Either ``goals`` (a list) or ``goal`` (a single vertex) must be given. The
initial and goal vertices must appear in ``edges`` or ``vertices``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Hashable, Mapping, Optional, Union

from omegaconf import OmegaConf

from informed_search.problems.graph import GraphProblem

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')


def read_graph_document(file_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a graph file into plain Python containers.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file cannot be parsed
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Graph file not found: {file_path}")

    try:
        if file_path.suffix.lower() in YAML_SUFFIXES:
            data = OmegaConf.to_container(OmegaConf.load(file_path), resolve=True)
        else:
            with open(file_path, 'r') as f:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_path}: {e}")
    except Exception as e:
        raise ValueError(f"Failed to read graph from {file_path}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Graph file {file_path} must contain a mapping at the top level")
    return data


def match_label(value: Any, vertices: Mapping[str, Hashable]) -> Any:
    """Map ``value`` onto the vertex it names.

    Command-line arguments and JSON object keys always arrive as strings, so
    ``"0"`` names the vertex ``0`` of a graph whose edges use integers.
    Values that name no vertex are returned unchanged.
    """
    if isinstance(value, str):
        return vertices.get(value, value)
    return vertices.get(str(value), value)


def graph_problem_from_dict(data: Dict[str, Any],
                            initial: Optional[Any] = None,
                            goals: Optional[Any] = None) -> GraphProblem:
    """Build a GraphProblem from a parsed graph document.

    ``initial`` and ``goals`` override the values in the document. Every
    vertex named outside ``edges`` (initial, goals, heuristic and coordinate
    keys) is matched against the edge endpoints and the optional
    ``vertices`` list, so string labels find integer vertices.

    Raises:
        ValueError: If the document is malformed or names an unknown vertex
    """
    if 'edges' not in data:
        raise ValueError("Graph document has no 'edges'")

    edges = []
    for i, edge in enumerate(data['edges']):
        if not isinstance(edge, (list, tuple)) or len(edge) != 3:
            raise ValueError(f"Edge {i} must be [source, target, cost], got {edge!r}")
        source, target, cost = edge
        try:
            cost = float(cost)
        except (TypeError, ValueError):
            raise ValueError(f"Edge {i} has non-numeric cost {cost!r}")
        edges.append((source, target, cost))

    declared = list(data.get('vertices') or [])
    vertices = {str(v): v for v in declared}
    for source, target, _ in edges:
        vertices.setdefault(str(source), source)
        vertices.setdefault(str(target), target)

    def known(value: Any, role: str) -> Any:
        label = match_label(value, vertices)
        if str(label) not in vertices:
            raise ValueError(f"Unknown {role} vertex {value!r}")
        return label

    if initial is None:
        initial = data.get('initial')
    if initial is None:
        raise ValueError("Graph document has no 'initial' vertex")
    if goals is None:
        goals = data.get('goals', data.get('goal'))
    if goals is None:
        raise ValueError("Graph document has no 'goals'")

    initial = known(initial, 'initial')
    if isinstance(goals, (str, bytes)) or not isinstance(goals, (list, tuple, set, frozenset)):
        goals = [goals]
    goals = [known(goal, 'goal') for goal in goals]

    heuristic = data.get('heuristic')
    if heuristic is not None:
        heuristic = {known(v, 'heuristic'): h for v, h in heuristic.items()}
    coordinates = data.get('coordinates')
    if coordinates is not None:
        coordinates = {known(v, 'coordinate'): p for v, p in coordinates.items()}

    problem = GraphProblem(
        edges,
        initial,
        goals,
        directed=bool(data.get('directed', False)),
        heuristic=heuristic,
        coordinates=coordinates
    )
    for vertex in declared:
        problem.add_vertex(vertex)
    return problem


def load_graph_problem(file_path: Union[str, Path],
                       initial: Optional[Any] = None,
                       goals: Optional[Any] = None) -> GraphProblem:
    """Load a GraphProblem from a JSON or YAML file."""
    problem = graph_problem_from_dict(read_graph_document(file_path), initial, goals)
    logger.info(f"Loaded {problem} from {file_path}")
    return problem


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Convert numpy values to plain Python for JSON serialization
    def convert_numpy(obj):
        if hasattr(obj, 'tolist'):
            return obj.tolist()
        elif isinstance(obj, dict):
            return {str(k): convert_numpy(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [convert_numpy(item) for item in obj]
        else:
            return obj

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(convert_numpy(results), f, indent=2, sort_keys=True)
        else:
            json.dump(convert_numpy(results), f)
