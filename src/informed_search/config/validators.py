"""Configuration validation for the search engine."""

import logging
from typing import List

from omegaconf import DictConfig

logger = logging.getLogger(__name__)

ALGORITHMS = ('graph', 'tree', 'rbfs')
COST_FUNCTIONS = ('uniform', 'astar', 'greedy', 'weighted')
TIE_BREAKS = ('fifo', 'deeper', 'shallower', 'lower_path_cost', 'higher_path_cost')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_logging_config(config.get('logging', {}))

        logger.info("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    algorithm = search_config.get('algorithm', 'graph')
    if algorithm not in ALGORITHMS:
        raise ConfigValidationError(
            f"search.algorithm must be one of {ALGORITHMS}, got {algorithm}"
        )

    cost_function = search_config.get('cost_function', 'astar')
    if cost_function not in COST_FUNCTIONS:
        raise ConfigValidationError(
            f"search.cost_function must be one of {COST_FUNCTIONS}, got {cost_function}"
        )

    weight = search_config.get('weight', 1.0)
    if isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight < 1.0:
        raise ConfigValidationError(
            f"search.weight must be a number >= 1.0, got {weight}"
        )

    tie_break = search_config.get('tie_break', 'fifo')
    if tie_break not in TIE_BREAKS:
        raise ConfigValidationError(
            f"search.tie_break must be one of {TIE_BREAKS}, got {tie_break}"
        )

    collect_statistics = search_config.get('collect_statistics', False)
    if not isinstance(collect_statistics, bool):
        raise ConfigValidationError(
            f"search.collect_statistics must be boolean, got {collect_statistics}"
        )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section.

    Args:
        logging_config: Logging configuration section
    """
    if not logging_config:
        return

    level = logging_config.get('level', 'WARNING')
    if str(level).upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {LOG_LEVELS}, got {level}"
        )


def validate_parameter_ranges(config: DictConfig) -> List[str]:
    """Check for settings that are valid but give up guarantees.

    Args:
        config: Configuration to check

    Returns:
        List of warning messages
    """
    warnings = []

    search_config = config.get('search', {})
    if search_config:
        cost_function = search_config.get('cost_function', 'astar')
        if cost_function == 'greedy':
            warnings.append("cost_function 'greedy' does not guarantee optimal solutions")
        if cost_function == 'weighted' and search_config.get('weight', 1.0) > 1.0:
            warnings.append(
                f"weight {search_config.get('weight')} allows solutions up to that factor above optimal"
            )
        if search_config.get('algorithm', 'graph') == 'tree':
            warnings.append("tree search may not terminate on graphs with cycles")

    return warnings


def check_config_consistency(config: DictConfig) -> List[str]:
    """Check configuration consistency and return issues.

    Args:
        config: Configuration to check

    Returns:
        List of consistency issues
    """
    issues = []

    search_config = config.get('search', {})
    if search_config:
        weight = search_config.get('weight', 1.0)
        cost_function = search_config.get('cost_function', 'astar')
        if weight != 1.0 and cost_function != 'weighted':
            issues.append(
                f"weight={weight} has no effect with cost_function '{cost_function}'"
            )

    return issues
