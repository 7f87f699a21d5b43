"""CLI command implementations."""

import argparse
import dataclasses
import logging
from typing import Any, Callable, List, Optional

from omegaconf import DictConfig, OmegaConf

from informed_search.config import load_config, validate_config, ConfigValidationError
from informed_search.config.validators import validate_parameter_ranges, check_config_consistency
from informed_search.core.problem import Problem
from informed_search.integration.io import load_graph_problem, save_results
from informed_search.problems.romania import romania_problem
from informed_search.problems.tsp import TSPProblem
from informed_search.search.searcher import Searcher, SearchConfig

from .utils import parse_overrides, print_outcome, setup_logging

logger = logging.getLogger(__name__)


def load_configuration(args: argparse.Namespace) -> Optional[DictConfig]:
    """Load the Hydra configuration with the overrides given on the command line.

    Returns None when no configuration directory exists, in which case the
    built-in defaults apply.
    """
    overrides = parse_overrides(getattr(args, 'config', None))
    try:
        cfg = load_config(overrides=overrides)
    except FileNotFoundError as e:
        if overrides:
            raise
        logger.warning(f"{e}; using built-in defaults")
        return None

    # Verbosity flags win over the configured level.
    log_cfg = cfg.get('logging', {})
    if log_cfg and getattr(args, 'verbose', 0) == 0 and not getattr(args, 'quiet', False):
        level = logging.getLevelName(str(log_cfg.get('level', 'WARNING')).upper())
        setup_logging(level, log_cfg.get('format'))
    return cfg


def build_search_config(args: argparse.Namespace, cfg: Optional[DictConfig]) -> SearchConfig:
    """Merge command-line search options over the configuration."""
    config = SearchConfig.from_config(cfg)
    changes = {}
    if getattr(args, 'algorithm', None):
        changes['algorithm'] = args.algorithm
    if getattr(args, 'cost_function', None):
        changes['cost_function'] = args.cost_function
    if getattr(args, 'weight', None) is not None:
        changes['weight'] = args.weight
    if getattr(args, 'tie_break', None):
        changes['tie_break'] = args.tie_break
    if getattr(args, 'stats', False):
        changes['collect_statistics'] = True
    return dataclasses.replace(config, **changes)


def run_search(problem: Problem,
               args: argparse.Namespace,
               cfg: Optional[DictConfig],
               describe_path: Optional[Callable[[List[Any]], List[Any]]] = None) -> int:
    """Search ``problem``, report the outcome and return the exit code.

    ``describe_path`` turns the state sequence into what is printed and saved.
    """
    searcher = Searcher(build_search_config(args, cfg))
    outcome = searcher.search(problem)
    result = outcome.to_dict()
    if describe_path is not None:
        result['path'] = describe_path(outcome.path)

    print_outcome(result)

    if getattr(args, 'output', None):
        save_results(result, args.output)
        logger.info(f"Results saved to {args.output}")

    return 0 if outcome.success else 1


def solve_command(args: argparse.Namespace) -> int:
    """Handle the solve command."""
    try:
        cfg = load_configuration(args)
        problem = load_graph_problem(args.graph_file, initial=args.initial, goals=args.goal)
    except (FileNotFoundError, ValueError, ConfigValidationError) as e:
        logger.error(str(e))
        return 1

    try:
        return run_search(problem, args, cfg)
    except ValueError as e:
        logger.error(str(e))
        return 1


def romania_command(args: argparse.Namespace) -> int:
    """Handle the romania command."""
    try:
        cfg = load_configuration(args)
        problem = romania_problem(args.origin)
    except (FileNotFoundError, ValueError, ConfigValidationError) as e:
        logger.error(str(e))
        return 1

    return run_search(problem, args, cfg)


def tsp_command(args: argparse.Namespace) -> int:
    """Handle the tsp command."""
    try:
        cfg = load_configuration(args)
        problem = TSPProblem.random(args.cities, seed=args.seed)
    except (FileNotFoundError, ValueError, ConfigValidationError) as e:
        logger.error(str(e))
        return 1

    logger.info(f"Touring {problem.n} random cities (seed={args.seed})")
    return run_search(problem, args, cfg, describe_path=problem.tour)


def config_command(args: argparse.Namespace) -> int:
    """Handle the config command."""
    action = getattr(args, 'config_action', None)
    if action not in ('show', 'validate'):
        logger.error("Specify a config action: show or validate")
        return 1

    try:
        cfg = load_config(overrides=parse_overrides(args.config), validate=False)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    if action == 'show':
        print(OmegaConf.to_yaml(cfg, resolve=True))
        return 0

    try:
        validate_config(cfg)
    except ConfigValidationError as e:
        print(f"Configuration is invalid: {e}")
        return 1

    for warning in validate_parameter_ranges(cfg):
        print(f"Warning: {warning}")
    for issue in check_config_consistency(cfg):
        print(f"Inconsistency: {issue}")
    print("Configuration is valid.")
    return 0
