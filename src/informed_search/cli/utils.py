"""CLI utility functions."""

import logging
from typing import Any, Dict, List, Optional


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True
    )

    # Hydra and OmegaConf are chatty at INFO
    logging.getLogger('hydra').setLevel(logging.WARNING)


def parse_overrides(config_arg: Optional[str]) -> List[str]:
    """Split a ``key=value,key=value`` string into Hydra overrides."""
    if not config_arg:
        return []
    return [item.strip() for item in config_arg.split(',') if item.strip()]


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    elif seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        return f"{minutes}m {seconds - minutes * 60:.1f}s"


def format_path(path: List[Any]) -> str:
    return " -> ".join(str(state) for state in path)


def print_outcome(result: Dict[str, Any]) -> None:
    """Print a search outcome dictionary for humans."""
    if result['success']:
        print(f"Path:  {format_path(result['path'])}")
        print(f"Cost:  {result['cost']:g}")
    else:
        print("No path to a goal exists.")
    print(f"Algorithm: {result['algorithm']}, "
          f"expanded: {result['nodes_expanded']}, "
          f"time: {format_duration(result['computation_time'])}")

    statistics = result.get('statistics')
    if statistics:
        print("Statistics:")
        for key in sorted(statistics):
            value = statistics[key]
            if isinstance(value, float):
                print(f"  {key}: {value:.3f}")
            else:
                print(f"  {key}: {value}")
