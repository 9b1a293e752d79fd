import os
import sys
import argparse

from typing import TextIO

from colorama import just_fix_windows_console
from cspretty import ANSI_PALETTE, PLAIN_PALETTE, Log, Palette, RenderOptions, format_line

__version__ = "0.1.0"

SCRIPTNAME = "cspretty"

COLOR_MODES = ("auto", "always", "never")


class CSPretty:
    def __init__(self, args: argparse.Namespace, output: TextIO | None = None) -> None:
        self.args = args
        self.output = output if output is not None else sys.stdout
        self.options = RenderOptions(
            multiline=args.multiline, palette=select_palette(args.color, self.output)
        )

    def run(self, lines: TextIO | None = None) -> bool:
        """
        Reads policies line by line and writes one rendered line for each of them. Every line
        is written and flushed before the next one is read.

        Args:
            lines (TextIO | None, optional): Stream with one policy or header per line. Defaults
            to the standard input.

        Returns:
            bool: False when reading the input failed, True after reaching the end of input.
        """
        if lines is None:
            lines = sys.stdin

        try:
            for line in lines:
                line = line.removesuffix("\n").removesuffix("\r")

                self.output.write(format_line(line, self.options) + "\n")
                self.output.flush()
        except BrokenPipeError:
            # Handled by the caller, the reader of the output is gone
            raise
        except (OSError, UnicodeDecodeError) as e:
            Log.error(f"Error occurred: {e}")
            return False

        return True


def select_palette(color: str, output: TextIO) -> Palette:
    if color == "always":
        return ANSI_PALETTE

    if color == "never":
        return PLAIN_PALETTE

    # auto
    if "NO_COLOR" in os.environ or not output.isatty():
        return PLAIN_PALETTE

    return ANSI_PALETTE


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=SCRIPTNAME,
        description="Pretty print Content-Security-Policy headers read from standard input",
        add_help=True,
    )

    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {__version__}", help="print version"
    )
    parser.add_argument(
        "-m", "--multiline", action="store_true", help="Show one source per line"
    )
    parser.add_argument(
        "-c",
        "--color",
        choices=COLOR_MODES,
        default="auto",
        help="Colorize the output (auto colors only when writing to a terminal)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Do not print hints and error messages"
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.quiet:
        Log.silent = True

    just_fix_windows_console()

    script = CSPretty(args)
    Log.color = script.options.palette is not PLAIN_PALETTE

    try:
        res = script.run()
    except KeyboardInterrupt:
        Log.error("Ctrl + C pressed. Exiting...")
        return 130
    except BrokenPipeError:
        # Nobody reads the rest, silence the flush at interpreter shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1

    if not res:
        Log.error("Module failed to finish successfully")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
