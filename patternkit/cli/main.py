"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing to the registered factories
- Output formatting and error reporting
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from patternkit import __version__
from patternkit.bootstrap import register_builtin_factories
from patternkit.config import AppConfig, ConfigurationManager, LogLevel
from patternkit.domain.abstract_factory import NAMED_FACTORIES, VALID_COMBINATIONS, SceneCombination
from patternkit.domain.base.exceptions import DomainException
from patternkit.domain.base.selection import seeded_selector
from patternkit.domain.decorator import BASES, TOPPINGS, build_dish
from patternkit.domain.factory_method import Mission
from patternkit.infrastructure.logging.logger import get_logger, setup_logging
from patternkit.infrastructure.registry import FactoryKind, FactoryRegistry
from patternkit.cli.formatters import format_output

logger = get_logger(__name__)


def positive_int(value: str) -> int:
    """Argparse type for counts: an integer of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "patternkit",
        description="patternkit - runnable Factory Method, Abstract Factory and Decorator examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s gameplay mission final                  # Gameplay fixed by the mission
  %(prog)s --seed 7 gameplay random --count 5      # Reproducible random gameplay
  %(prog)s vehicle truck --payload-tons 20         # Truck built engine-first
  %(prog)s scene create sunny-morning              # Consistent weather and lighting
  %(prog)s --format table scene list               # Valid combinations
  %(prog)s pizza --topping cheese --topping chicken
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Set logging level (overrides configuration)')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--seed', type=int, help='Seed for random selection (overrides configuration)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Gameplay resource (factory method)
    gameplay_parser = subparsers.add_parser('gameplay', help='Create gameplay with a factory method')
    gameplay_subparsers = gameplay_parser.add_subparsers(dest='action', help='Gameplay factories')
    gameplay_mission = gameplay_subparsers.add_parser('mission', help='Gameplay fixed by the mission')
    gameplay_mission.add_argument('mission', nargs='?', choices=[m.value for m in Mission],
                                  help='Mission (defaults to configuration)')
    gameplay_random = gameplay_subparsers.add_parser('random', help='Gameplay drawn at random')
    gameplay_random.add_argument('--count', type=positive_int, help='Number of gameplays to draw')

    # Vehicle resource (factory method with sub-components)
    vehicle_parser = subparsers.add_parser('vehicle', help='Assemble a vehicle')
    vehicle_subparsers = vehicle_parser.add_subparsers(dest='action', help='Vehicle factories')
    vehicle_car = vehicle_subparsers.add_parser('car', help='Assemble a car')
    vehicle_car.add_argument('--seats', type=int, default=4, help='Number of seats')
    vehicle_truck = vehicle_subparsers.add_parser('truck', help='Assemble a truck')
    vehicle_truck.add_argument('--payload-tons', type=int, default=10, help='Payload in tons')

    # Scene resource (abstract factory)
    scene_parser = subparsers.add_parser('scene', help='Create scenes with an abstract factory')
    scene_subparsers = scene_parser.add_subparsers(dest='action', help='Scene actions')
    scene_create = scene_subparsers.add_parser('create', help='Create a scene')
    scene_create.add_argument('name', help="Factory name or combination such as 'rainy-evening'")
    scene_random = scene_subparsers.add_parser('random', help='Create scenes from random valid combinations')
    scene_random.add_argument('--count', type=positive_int, help='Number of scenes to draw')
    scene_subparsers.add_parser('list', help='List valid combinations')

    # Pizza resource (decorator)
    pizza_parser = subparsers.add_parser('pizza', help='Build a dish with stacked toppings')
    pizza_parser.add_argument('--base', choices=sorted(BASES), help='Base dish (defaults to configuration)')
    pizza_parser.add_argument('--topping', action='append', default=[], choices=sorted(TOPPINGS),
                              help='Topping to add; repeat to stack, innermost first')

    # Factories resource
    subparsers.add_parser('factories', help='List registered factories')

    return parser.parse_args(argv)


def _products(products: List[Any]) -> Dict[str, Any]:
    return {"products": [product.to_dict() for product in products]}


def execute_command(args: argparse.Namespace, config: AppConfig, registry: FactoryRegistry) -> Dict[str, Any]:
    """Execute the parsed command and return a result ready for formatting."""
    seed = args.seed if args.seed is not None else config.selection.seed

    if args.resource == 'gameplay':
        if args.action == 'mission':
            mission = args.mission or config.defaults.mission
            factory = registry.create_factory(FactoryKind.GAMEPLAY, 'mission', mission=mission)
            return _products([factory.create()])
        if args.action == 'random':
            count = args.count if args.count is not None else config.selection.random_count
            factory = registry.create_factory(FactoryKind.GAMEPLAY, 'random',
                                              selector=seeded_selector(seed))
            return _products([factory.create() for _ in range(count)])

    elif args.resource == 'vehicle':
        if args.action == 'car':
            factory = registry.create_factory(FactoryKind.VEHICLE, 'car', seats=args.seats)
            return _products([factory.create()])
        if args.action == 'truck':
            factory = registry.create_factory(FactoryKind.VEHICLE, 'truck',
                                              payload_tons=args.payload_tons)
            return _products([factory.create()])

    elif args.resource == 'scene':
        if args.action == 'create':
            name = args.name.strip().lower()
            if name not in ('combination', 'random') and registry.is_factory_registered(FactoryKind.SCENE, name):
                factory = registry.create_factory(FactoryKind.SCENE, name)
            else:
                factory = registry.create_factory(FactoryKind.SCENE, 'combination', combination=name)
            return _products([factory.create_scene()])
        if args.action == 'random':
            count = args.count if args.count is not None else config.selection.random_count
            selector = seeded_selector(seed)
            scenes = [
                registry.create_factory(FactoryKind.SCENE, 'random', selector=selector).create_scene()
                for _ in range(count)
            ]
            return _products(scenes)
        if args.action == 'list':
            return {
                "combinations": [
                    {
                        "combination": str(combination),
                        "weather": combination.weather.value,
                        "time_of_day": combination.time_of_day.value,
                        "dedicated_factory": _dedicated_factory_name(combination),
                    }
                    for combination in sorted(VALID_COMBINATIONS)
                ]
            }

    elif args.resource == 'pizza':
        base = args.base or config.defaults.dish_base
        return _products([build_dish(base, args.topping)])

    elif args.resource == 'factories':
        return {"factories": [registration.to_dict() for registration in registry.get_registrations()]}

    raise DomainException(
        f"No action specified for {args.resource}. Use --help for usage information.",
        "MISSING_ACTION",
    )


def _dedicated_factory_name(combination: SceneCombination) -> str:
    factory_class = NAMED_FACTORIES.get(combination)
    return factory_class.__name__ if factory_class else ""


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if not args.resource:
        print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
        return 1

    try:
        config_manager = ConfigurationManager(args.config)
        logging_config = config_manager.config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
        setup_logging(logging_config)

        registry = register_builtin_factories(FactoryRegistry.get_instance())
        result = execute_command(args, config_manager.config, registry)
        print(format_output(result, args.format))
        return 0

    except DomainException as e:
        logger.error("Domain error", error_code=e.error_code, error=e.message)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.error("Unexpected error", error=str(e))
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
