"""Main CLI entry point for informed-search."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging

ALGORITHM_CHOICES = ['graph', 'tree', 'rbfs']
COST_FUNCTION_CHOICES = ['uniform', 'astar', 'greedy', 'weighted']
TIE_BREAK_CHOICES = ['fifo', 'deeper', 'shallower', 'lower_path_cost', 'higher_path_cost']


def _add_search_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by the commands that run a search.

    Defaults are None so that unset options fall back to the configuration.
    """
    parser.add_argument(
        '--algorithm', '-a',
        choices=ALGORITHM_CHOICES,
        help='Search algorithm (default: from configuration, graph)'
    )
    parser.add_argument(
        '--cost-function',
        choices=COST_FUNCTION_CHOICES,
        help='Evaluation function (default: from configuration, astar)'
    )
    parser.add_argument(
        '--weight',
        type=float,
        help='Heuristic weight for --cost-function weighted'
    )
    parser.add_argument(
        '--tie-break',
        choices=TIE_BREAK_CHOICES,
        help='Tie-break policy for equal f-values'
    )
    parser.add_argument(
        '--stats',
        action='store_true',
        help='Report search statistics'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='informed-search',
        description='Informed search - graph search, tree search and RBFS over explicit graphs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  informed-search solve graph.yaml                 # Cheapest path in a graph file
  informed-search solve graph.json -a rbfs --stats # Use RBFS and show statistics
  informed-search romania --from Lugoj             # AIMA Romania route to Bucharest
  informed-search tsp -n 9 --seed 4               # Cheapest tour through 9 random cities
  informed-search config show                      # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Configuration overrides (e.g., search.algorithm=rbfs,search.tie_break=deeper)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Find the cheapest path in a graph file',
        description='Search a graph loaded from a JSON or YAML file'
    )

    solve_parser.add_argument(
        'graph_file',
        type=str,
        help='Path to graph JSON/YAML file'
    )

    solve_parser.add_argument(
        '--initial',
        type=str,
        help='Start vertex (overrides the file)'
    )

    solve_parser.add_argument(
        '--goal',
        type=str,
        action='append',
        help='Goal vertex (repeatable; overrides the file)'
    )

    _add_search_options(solve_parser)

    # Romania command
    romania_parser = subparsers.add_parser(
        'romania',
        help='Route to Bucharest on the AIMA Romania map',
        description='Find a route to Bucharest on the AIMA Romania road map'
    )

    romania_parser.add_argument(
        '--from',
        dest='origin',
        type=str,
        default='Arad',
        help='City to start from (default: Arad)'
    )

    _add_search_options(romania_parser)

    # TSP command
    tsp_parser = subparsers.add_parser(
        'tsp',
        help='Cheapest tour through random cities',
        description='Solve a random travelling salesman instance with the MST heuristic'
    )

    tsp_parser.add_argument(
        '--cities', '-n',
        type=int,
        default=8,
        help='Number of cities (default: 8)'
    )

    tsp_parser.add_argument(
        '--seed',
        type=int,
        help='Random seed for the city positions'
    )

    _add_search_options(tsp_parser)

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Manage search configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'romania':
            return commands.romania_command(parsed_args)
        if parsed_args.command == 'tsp':
            return commands.tsp_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
