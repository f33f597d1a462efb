"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with application services
"""
import argparse
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from delivery_routing import __version__
from delivery_routing.bootstrap import Application, create_application
from delivery_routing.cli.formatters import format_output
from delivery_routing.domain.base.exceptions import DomainException
from delivery_routing.infrastructure.logging.logger import get_logger

FORMAT_CHOICES = ['json', 'yaml', 'table']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog="delivery-routing",
        description="Delivery Routing - constraint-based delivery route cost calculation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s routes calculate --delivery-type express         # Express route
  %(prog)s routes calculate --constraint avoid_toll         # Default type plus a constraint
  %(prog)s algorithms list --format table                   # Algorithms and cost brackets
  %(prog)s config show --format yaml                        # Effective configuration
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (YAML or JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES, default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Routes resource
    routes_parser = subparsers.add_parser('routes', help='Calculate delivery routes')
    routes_subparsers = routes_parser.add_subparsers(dest='action', help='Route actions')

    routes_calculate = routes_subparsers.add_parser('calculate', help='Calculate a route')
    routes_calculate.add_argument('--delivery-type', help='Delivery type (default from configuration)')
    routes_calculate.add_argument('--constraint', action='append', default=[], dest='constraints',
                                  help='Additional constraint, may be repeated')
    routes_calculate.add_argument('--format', choices=FORMAT_CHOICES, default=argparse.SUPPRESS, help='Output format')

    # Listing resources
    for resource, help_text in (
        ('algorithms', 'Routing algorithms and cost brackets'),
        ('constraints', 'Registered route constraints'),
        ('delivery-types', 'Configured delivery types'),
    ):
        resource_parser = subparsers.add_parser(resource, help=help_text)
        resource_subparsers = resource_parser.add_subparsers(dest='action', help=f'{resource} actions')
        resource_list = resource_subparsers.add_parser('list', help=f'List {resource}')
        resource_list.add_argument('--format', choices=FORMAT_CHOICES, default=argparse.SUPPRESS, help='Output format')

    # Config resource
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Config actions')
    config_show = config_subparsers.add_parser('show', help='Show effective configuration')
    config_show.add_argument('--format', choices=FORMAT_CHOICES, default=argparse.SUPPRESS, help='Output format')

    return parser.parse_args(argv)


def _calculate_route(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    result = app.route_service.calculate(args.delivery_type, args.constraints)
    return result.to_dict()


def _list_algorithms(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return {"algorithms": app.route_service.list_algorithms()}


def _list_constraints(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return {"constraints": app.route_service.list_constraints()}


def _list_delivery_types(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return {"delivery_types": app.route_service.list_delivery_types()}


def _show_config(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return app.config.to_dict()


COMMAND_HANDLERS: Dict[Tuple[str, str], Callable[[argparse.Namespace, Application], Dict[str, Any]]] = {
    ('routes', 'calculate'): _calculate_route,
    ('algorithms', 'list'): _list_algorithms,
    ('constraints', 'list'): _list_constraints,
    ('delivery-types', 'list'): _list_delivery_types,
    ('config', 'show'): _show_config,
}


def execute_command(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")
    return COMMAND_HANDLERS[handler_key](args, app)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    # Validate required arguments
    if not args.resource:
        print("Error: No resource specified. Use --help for usage information.")
        sys.exit(1)

    if not getattr(args, 'action', None):
        print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
        sys.exit(1)

    # Initialize application
    try:
        app = create_application(args.config, log_level=args.log_level)
    except DomainException as e:
        logger.error(f"Failed to initialize application: {e}")
        print(f"Error: {e}")
        sys.exit(1)

    try:
        result = execute_command(args, app)
    except DomainException as e:
        logger.error(f"Domain error: {e}")
        if not args.quiet:
            print(f"Error: {e}")
        sys.exit(1)

    formatted_output = format_output(result, args.format)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(formatted_output)
        if not args.quiet:
            print(f"Output written to {args.output}")
    else:
        print(formatted_output)


if __name__ == "__main__":
    main()
