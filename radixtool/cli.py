import argparse
import json
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .converter import SUPPORTED_RADIXES, to_positive_radix, to_radix

console = Console()

RADIX_NAMES = {8: "octal", 10: "decimal", 16: "hex"}


def parse_number(value: str) -> int:
    try:
        return int(value.strip(), 10)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid decimal integer.")


def parse_radix(value: str) -> int:
    try:
        radix = int(value)
    except ValueError:
        raise ValueError("Radix must be an integer.")

    if radix not in SUPPORTED_RADIXES:
        raise ValueError(
            f"Only these radixes are supported: {', '.join(map(str, SUPPORTED_RADIXES))}."
        )
    return radix


def convert_all(number: int, radixes: tuple[int, ...] | list[int], positive: bool = False) -> dict[int, str]:
    convert = to_positive_radix if positive else to_radix
    return {radix: convert(number, radix) for radix in radixes}


def build_table(number: int, results: dict[int, str]) -> Table:
    table = Table(title=f"{number}", box=box.ROUNDED, border_style="blue")
    table.add_column("Radix", style="cyan bold", justify="right")
    table.add_column("Name", style="dim")
    table.add_column("Value", style="white")
    for radix, value in results.items():
        table.add_row(str(radix), RADIX_NAMES[radix], escape(value) or "[dim](empty)[/dim]")
    return table


def print_results(number: int, results: dict[int, str], as_json: bool = False, as_table: bool = False) -> None:
    if as_json:
        payload = {"number": number}
        payload.update({str(radix): value for radix, value in results.items()})
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if as_table:
        console.print(build_table(number, results))
        return

    for value in results.values():
        print(value)


def print_error(error: Exception) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]")


def interactive_mode() -> None:
    console.print(Panel.fit(
        "[bold cyan]Radix Converter (8 / 10 / 16)[/bold cyan]\n"
        "[dim]Type 'q' in any field to exit.[/dim]",
        border_style="cyan",
    ))

    while True:
        try:
            number_str = input("Number (decimal, 32-bit signed): ").strip()
            if number_str.lower() == "q":
                console.print("Exiting.")
                return

            radix_str = input("Target radix (8/10/16, empty for all): ").strip()
            if radix_str.lower() == "q":
                console.print("Exiting.")
                return
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting.")
            return

        try:
            number = parse_number(number_str)
            radixes = [parse_radix(radix_str)] if radix_str else list(SUPPORTED_RADIXES)
            results = convert_all(number, radixes)
        except (ValueError, TypeError) as e:
            print_error(e)
            continue

        console.print(build_table(number, results))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixtool",
        description="Convert a signed 32-bit integer to base 8, 10 or 16",
        epilog="Run without arguments for interactive mode.",
    )
    parser.add_argument("number", help="Decimal integer, may be negative")
    parser.add_argument(
        "-r", "--radix",
        type=int,
        choices=SUPPORTED_RADIXES,
        default=16,
        help="Target radix (default: 16)",
    )
    parser.add_argument(
        "--positive",
        action="store_true",
        help="Reject negative numbers instead of using their 32-bit pattern",
    )
    parser.add_argument("--all", action="store_true", help="Show every supported radix")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    return parser


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) == 0:
        interactive_mode()
        return

    args = build_parser().parse_args(argv)

    try:
        number = parse_number(args.number)
        radixes = SUPPORTED_RADIXES if args.all else (args.radix,)
        results = convert_all(number, radixes, positive=args.positive)
    except (ValueError, TypeError) as e:
        print_error(e)
        sys.exit(1)

    print_results(number, results, as_json=args.json, as_table=args.all and not args.json)


if __name__ == "__main__":
    main()
