"""
Main entry point for the city autocomplete.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config.settings import configure_logging, load_config, validate_config
from .core.autocomplete import CityAutocomplete
from .errors import LookupUnavailable
from .services.lookup import build_lookup


def display_field(field: CityAutocomplete) -> None:
    """Prints the field in a user-friendly format."""
    print(f"\n  Text:   {field.text!r}")
    print(f"  Status: {field.status.value}{' (valid)' if field.is_valid else ''}")
    suggestions = field.visible_suggestions
    if suggestions:
        print("  Suggestions:")
        for index, candidate in enumerate(suggestions):
            marker = "*" if field.is_highlighted(candidate) else " "
            print(f"   {marker}[{index}] {candidate.label}")
    elif field.text:
        print("  No suggestions.")
    if field.warning:
        print(f"  ! {field.warning}")


async def run_search(prefix: str) -> int:
    config = load_config()
    lookup = build_lookup(config)
    try:
        candidates = await lookup.search(prefix)
    except LookupUnavailable as e:
        print(f"Lookup unavailable: {e.reason}")
        return 1
    if not candidates:
        print("No cities found.")
    for candidate in candidates:
        print(candidate.label)
    return 0


async def run_interactive() -> int:
    print("--- City autocomplete ---")
    print("Type part of a city name. ':pick N' picks suggestion N, 'exit' or 'quit' leaves.")

    config = load_config()
    field = CityAutocomplete(build_lookup(config), config, label="City", required=True)
    loop = asyncio.get_running_loop()

    try:
        while True:
            line = await loop.run_in_executor(None, input, "\nYou: ")
            if line.strip().lower() in ["exit", "quit"]:
                break

            if line.startswith(":pick"):
                try:
                    field.pick(int(line.split()[1]))
                except (IndexError, ValueError):
                    print("Usage: :pick N (N from the suggestion list)")
                    continue
            else:
                field.set_text(line)
                if field.loading:
                    print("Looking up cities...")
                await field.settle()

            display_field(field)
    except (KeyboardInterrupt, EOFError):
        print()
    finally:
        field.dispose()

    if field.is_valid:
        print(f"\nSelected: {field.text}")
    else:
        print("\nNo city selected.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the city autocomplete."""
    parser = argparse.ArgumentParser(prog="cityfind", description="Debounced city autocomplete.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    subcommands = parser.add_subparsers(dest="command")
    search = subcommands.add_parser("search", help="look up cities by name prefix")
    search.add_argument("prefix")
    subcommands.add_parser("interactive", help="type into a live autocomplete field")
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    if not validate_config(load_config()):
        print("\nError: Missing city lookup credentials. Please set RAPIDAPI_KEY "
              "(or MAPS_API_KEY with CITY_LOOKUP_PROVIDER=google).")
        return 2

    if args.command == "search":
        return asyncio.run(run_search(args.prefix))
    return asyncio.run(run_interactive())


if __name__ == "__main__":
    sys.exit(main())
