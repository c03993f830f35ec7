# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Command-line interface for fb2sci.

Usage: fb2sci bankfile1 bankfile2 patfile

This module exposes a small entry function that can be used as a
console_scripts entry point.
"""

from __future__ import annotations

import argparse
import sys
import warnings

from . import __version__
from .converter import PatchConverter
from .errors import FB2SCIError


def _build_root_parser():
    p = argparse.ArgumentParser(
        prog="fb2sci",
        description="Convert two FB-01 sysex bank files into an SCI0 FB-01 patch resource"
    )
    p.add_argument("bank_a", help="FB-01 bank A sysex dump (instruments 0-47)")
    p.add_argument("bank_b", help="FB-01 bank B sysex dump (instruments 48-95)")
    p.add_argument("output_file", help="Output SCI patch file path (e.g. patch.002)")
    p.add_argument("-f", "--force", action="store_true", help="Force overwrite without confirmation")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p


def ask_overwrite(path, input_func=input):
    """
    Asks whether an existing output file may be overwritten.

    Returns True only for an explicit yes. A closed or interrupted
    prompt counts as no.
    """
    try:
        response = input_func(f"Warning: \"{path}\" already exists. Overwrite? (y/n): ")
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return response.strip().lower() in ("y", "yes")


def main(argv=None, input_func=input):
    """
    Entry point for `python -m fb2sci` or the fb2sci console script.

    Returns exit code (0 on success).
    """
    print(f"\nFB2SCI  v{__version__}\n")

    argv = list(argv) if argv is not None else None
    parser = _build_root_parser()
    args = parser.parse_args(argv)

    if args.force:
        confirm = None
    else:
        def confirm(path):
            return ask_overwrite(path, input_func)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            converter = PatchConverter(args.bank_a, args.bank_b, args.output_file, confirm_overwrite=confirm)
            converter.convert()
        except (FB2SCIError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        finally:
            for w in caught:
                print(f"Warning: {w.message}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
