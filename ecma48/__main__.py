import logging
from argparse import ArgumentParser

from . import (
    GraphicRendition,
    clear_screen,
    select_graphic,
    set_position,
    wrap,
)
from .__about__ import __version__


def run_sgr(names: list[str], text: str) -> None:
    try:
        rendition = GraphicRendition.from_names(*names)

    except ValueError as error:
        raise SystemExit(f"ecma48: {error}") from error

    print(repr(str(rendition)))
    print(wrap(text, rendition))


def run_demo() -> None:
    red_bold_underline = select_graphic().foreground("red").bold().underline()

    print(f"Hello {red_bold_underline}World{select_graphic().default()} !")

    clear_screen()

    print(f"Hello {wrap('World', red_bold_underline)} !")

    set_position(5, 1).execute()
    print("This line is printed on the fifth line.")


def main() -> None:
    """The main entrypoint."""

    parser = ArgumentParser("ecma48", description="Prints ECMA-48 control functions.")
    parser.add_argument("-v", "--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", action="store_true", help="Log every executed sequence."
    )

    subs = parser.add_subparsers(required=True)

    sgr_command = subs.add_parser("sgr", help="Show the SGR sequence for some names.")
    sgr_command.set_defaults(func=run_sgr)
    sgr_command.add_argument("names", nargs="+")
    sgr_command.add_argument("--text", default="Sample text")

    subs.add_parser("demo").set_defaults(func=run_demo)

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    command = args.func

    opts = vars(args)
    del opts["func"]
    del opts["verbose"]

    command(**opts)


if __name__ == "__main__":
    main()
