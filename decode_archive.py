# arch-decoder - prefix code message decoding
# decode_archive.py
# 10/18/26

"""
Decode a .arch message archive

An archive holds the pre-order shape of a code tree ('^' for internal nodes,
the character itself for leaves; it may span lines when '\\n' is a leaf)
followed by a single line of 0s and 1s. Prints the code of every character,
the decoded message and compression statistics.

How to run:
  python decode_archive.py monalisa.arch
  python decode_archive.py cadbard.arch --csv codes.csv --plot codes.png
  python decode_archive.py constitution.arch --quiet --strict
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import huffman as huff
from archive import ArchiveError, read_archive
from report import (compute_statistics, plot_code_lengths, print_report,
                    write_code_table_csv, write_statistics_csv)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Decode a message archived with a prefix-free code tree")
    ap.add_argument("archive", type=str, help="Path to the .arch file")
    ap.add_argument("--csv", type=str, default=None, help="Write the code table to this CSV file")
    ap.add_argument("--stats-csv", type=str, default=None, help="Write the statistics to this CSV file")
    ap.add_argument("--plot", type=str, default=None, help="Save a code-length bar chart to this PNG file")
    ap.add_argument("--strict", action="store_true", help="Fail if the bit message ends partway through a code")
    ap.add_argument("--quiet", action="store_true", help="Do not print the code table")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        arch = read_archive(args.archive)
        root = huff.build_tree(arch.shape)
        message = huff.decode(root, arch.bits, strict=args.strict)
    except (ArchiveError, FileNotFoundError, huff.TreeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    table = huff.code_table(root)
    stats = compute_statistics(arch.bits, message)
    print_report(table, message, stats, show_codes=not args.quiet)

    if args.csv:
        write_code_table_csv(Path(args.csv), table)
        print(f"Wrote {len(table)} codes to {args.csv}")
    if args.stats_csv:
        write_statistics_csv(Path(args.stats_csv), stats)
        print(f"Wrote statistics to {args.stats_csv}")
    if args.plot:
        plot_code_lengths(table, Path(args.plot))
        print("Chart saved in:", Path(args.plot).resolve())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
