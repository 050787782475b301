#!/usr/bin/env python3
"""Converts a Life pattern from .rle format to plain text rows.

Dead cells are written as ".", every other state as its own letter.
"""
import argparse
import logging
import sys
from contextlib import nullcontext
from typing import BinaryIO, ContextManager, List, Optional

import rletext
from rletext.high_level import rle_to_text_fp

logging.basicConfig()


def maketheparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, add_help=True)
    parser.add_argument("infile", type=str, help="Pattern in .rle format (\"-\" is stdin)")
    parser.add_argument("outfile", type=str, help="Text output file (\"-\" is stdout)")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"rletext v{rletext.__version__}",
    )
    parser.add_argument("-d", "--debug", default=False, action="store_true", help="Use debug logging level.")
    parser.add_argument("-m", "--max-run", type=int, default=None, help="Clamp every run count to this value (default is unbounded)")
    return parser


def open_input(path: str) -> ContextManager[BinaryIO]:
    if path == "-":
        return nullcontext(sys.stdin.buffer)
    return open(path, "rb")


def open_output(path: str) -> ContextManager[BinaryIO]:
    if path == "-":
        return nullcontext(sys.stdout.buffer)
    return open(path, "wb")


# main


def main(args: Optional[List[str]] = None) -> int:
    P = maketheparser()
    A = P.parse_args(args=args)

    if A.max_run is not None and A.max_run < 1:
        P.error("--max-run must be at least 1")

    try:
        inf = open_input(A.infile)
    except OSError:
        print(f"Cannot open {A.infile}", file=sys.stderr)
        return 1

    with inf as fp:
        try:
            outfp = open_output(A.outfile)
        except OSError:
            print(f"Cannot create {A.outfile}", file=sys.stderr)
            return 1

        # closing the file flushes it, so write errors can surface there too
        try:
            with outfp as out:
                rle_to_text_fp(fp, out, max_run=A.max_run, debug=A.debug)
                out.flush()
        except OSError as e:
            logging.debug("Write to %s failed: %r", A.outfile, e)
            print(f"Error writing to {A.outfile}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
