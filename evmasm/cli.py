import argparse
import logging
from typing import List, Optional
from .assembler import Assembler
from .config import LOG_LEVELS, configure_logging, load_settings
from .errors import AssemblyError
from .output import HexOutput


logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(
        prog="evmasm",
        description="Translate stack-machine mnemonics into a hex opcode string.")
    parser.add_argument("source", help="path to UTF-8 assembly source")
    parser.add_argument("--tokens", action="store_true", help="print the token listing before the hex output")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level,
                        help="logging level (default: %(default)s)")
    parser.add_argument("--log-file", default=settings.log_file, help="also write the log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    output = HexOutput()
    try:
        configure_logging(args.log_level, args.log_file)
    except OSError as exc:
        output.error(f"cannot open log file {args.log_file}: {exc}")
        return 1
    assembler = Assembler(capture_output=True)
    try:
        assembler.load_file(args.source)
    except AssemblyError as exc:
        logger.debug(f"Assembly of {args.source} failed", exc_info=True)
        output.error(str(exc))
        return 1
    if args.tokens:
        print(assembler.listing())
    output.write(assembler.codes)
    return 0
