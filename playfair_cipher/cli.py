"""
Command-line front end.

    playfair -e -k PLAYFAIR -t "Hide the gold in the tree stump"
    playfair -d -k PLAYFAIR --drop-q -i secret.txt
    playfair                      # asks for everything interactively

Anything not given as a flag is asked for with the classic prompts.
"""

import argparse
import logging
import sys

from . import __version__
from .cipher  import process
from .display import PAIRS_PER_LINE, render_output
from .stages.stage1_grid import ReductionMode, build_grid

logger = logging.getLogger(__name__)


def ask_encrypt() -> bool:
    """(E)ncode or (D)ecode? — anything not starting with e/E decrypts."""
    answer = input("(E)ncode or (D)ecode? ")
    return answer[:1] in ("e", "E")


def ask_key() -> str:
    return input("Enter a en/decryption key: ")


def ask_mode() -> ReductionMode:
    """I <-> J (Y/N): — y/Y merges J into I, anything else drops Q."""
    answer = input("I <-> J (Y/N): ")
    if answer[:1] in ("y", "Y"):
        return ReductionMode.MERGE_J_INTO_I
    return ReductionMode.DROP_Q


def ask_text() -> str:
    return input("Enter the text: ")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playfair",
        description="Playfair digraph cipher (5x5 key square).",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")

    action_group = parser.add_mutually_exclusive_group()
    action_group.add_argument("-e", "--encrypt", dest="encrypt",
                              action="store_const", const=True,
                              help="Encrypt the text")
    action_group.add_argument("-d", "--decrypt", dest="encrypt",
                              action="store_const", const=False,
                              help="Decrypt the text")

    parser.add_argument("-k", "--key",
                        help='Key for the grid (empty uses "KEYWORD")')

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--merge-j", dest="mode", action="store_const",
                            const=ReductionMode.MERGE_J_INTO_I,
                            help="Write J as I (keeps Q)")
    mode_group.add_argument("--drop-q", dest="mode", action="store_const",
                            const=ReductionMode.DROP_Q,
                            help="Discard Q (keeps J)")

    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("--pairs-per-line", type=int, default=PAIRS_PER_LINE,
                        metavar="N",
                        help=f"Digraphs per output line (default: {PAIRS_PER_LINE})")
    parser.add_argument("--show-grid", action="store_true",
                        help="Print the key square before the output")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and debug messages)")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    if args.pairs_per_line < 1:
        parser.error("--pairs-per-line must be at least 1")

    try:
        encrypt = args.encrypt if args.encrypt is not None else ask_encrypt()
        key     = args.key if args.key is not None else ask_key()
        mode    = args.mode if args.mode is not None else ask_mode()
        if args.input:
            try:
                with open(args.input, "r", encoding="utf-8", errors="replace") as f:
                    text = f.read()
            except OSError as e:
                parser.error(f"cannot read '{args.input}': {e}")
        elif args.text is not None:
            text = args.text
        else:
            text = ask_text()
    except (EOFError, KeyboardInterrupt):
        print(file=sys.stderr)
        return 1

    logger.info(f"{'Encrypting' if encrypt else 'Decrypting'} "
                f"{len(text)} chars, mode={mode.value}")

    if args.show_grid:
        print(build_grid(key, mode))

    result = process(key, text, mode, encrypt)
    print(render_output(result, args.pairs_per_line))
    return 0


if __name__ == "__main__":
    sys.exit(main())
