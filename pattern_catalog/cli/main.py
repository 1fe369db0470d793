"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the demo runner
"""
import sys
import argparse
from typing import Any, Dict, List, Optional

from pattern_catalog._package import PACKAGE_NAME_SHORT, DESCRIPTION
from pattern_catalog._version import __version__
from pattern_catalog.cli.formatters import OUTPUT_FORMATS, format_output, format_results_table
from pattern_catalog.domain.core.exceptions import DomainException
from pattern_catalog.domain.demo import PatternCategory
from pattern_catalog.infrastructure.logging.logger import get_logger

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
CATEGORIES = [c.value for c in PatternCategory]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME_SHORT,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all demos
  %(prog)s list --category structural        # List structural demos
  %(prog)s list --format table               # Display as table
  %(prog)s show observer                     # Show one demo
  %(prog)s run command state                 # Run two demos
  %(prog)s run --all --summary               # Run everything, then summarize
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=LOG_LEVELS, type=str.upper,
                        help='Set logging level')
    parser.add_argument('--simulate-latency', action='store_true',
                        help='Pause where demos simulate slow work')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='action', help='Available actions')

    # list
    list_parser = subparsers.add_parser('list', help='List demos in the catalogue')
    list_parser.add_argument('--category', choices=CATEGORIES, help='Filter by pattern category')
    list_parser.add_argument('--format', choices=OUTPUT_FORMATS, default='table',
                             help='Output format')

    # show
    show_parser = subparsers.add_parser('show', help='Show one demo definition')
    show_parser.add_argument('name', help='Demo name')
    show_parser.add_argument('--format', choices=OUTPUT_FORMATS, default='list',
                             help='Output format')

    # run
    run_parser = subparsers.add_parser('run', help='Run demos')
    run_parser.add_argument('names', nargs='*', metavar='NAME', help='Demo names to run')
    run_parser.add_argument('--all', action='store_true', help='Run every demo')
    run_parser.add_argument('--category', choices=CATEGORIES,
                            help='With --all, only run this category')
    run_parser.add_argument('--summary', action='store_true',
                            help='Print a results table after the demos')
    run_parser.add_argument('--keep-going', action='store_true',
                            help='Continue with the next demo when one fails')

    args = parser.parse_args(argv)
    if args.action == 'run' and not args.all and not args.names:
        parser.error("run: give at least one demo NAME or --all")
    if args.action == 'run' and args.all and args.names:
        parser.error("run: NAME arguments cannot be combined with --all")
    return args


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate global CLI flags into configuration overrides."""
    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides.setdefault('logging', {})['level'] = args.log_level
    if args.simulate_latency:
        overrides.setdefault('narration', {})['simulate_latency'] = True
    if args.no_color:
        overrides.setdefault('narration', {})['color'] = False
    return overrides


def execute_command(args: argparse.Namespace, app) -> Optional[str]:
    """Execute the requested action and return text to print, if any."""
    if args.action == 'list':
        category = PatternCategory(args.category) if args.category else None
        demos = [d.describe() for d in app.registry.definitions(category)]
        return format_output({'demos': demos}, args.format)

    if args.action == 'show':
        definition = app.registry.get(args.name)
        return format_output({'demo': definition.describe()}, args.format)

    if args.action == 'run':
        if args.all:
            category = PatternCategory(args.category) if args.category else None
            results = app.runner.run_all(category, keep_going=args.keep_going)
        else:
            results = app.runner.run_many(args.names, keep_going=args.keep_going)
        if args.summary:
            return format_results_table([r.model_dump(mode='json') for r in results])
        return None

    raise ValueError(f"Unknown action: {args.action}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        if not args.action:
            print("Error: No action specified. Use --help for usage information.")
            sys.exit(1)

        try:
            from pattern_catalog.bootstrap import create_application
            app = create_application(args.config, build_overrides(args))
        except DomainException as e:
            logger.error("Failed to initialize application", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        try:
            output = execute_command(args, app)
            if output:
                print(output)
        except DomainException as e:
            logger.error("Domain error", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
