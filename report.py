# arch-decoder - prefix code message decoding
# report.py
# 10/18/26

from __future__ import annotations

import csv
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt


@dataclass
class Statistics:
    bits_length: int
    characters: int
    avg_bits_per_char: Optional[float]  # None when nothing was decoded
    space_savings: Optional[float]      # percent, None for an empty bit message


def compute_statistics(bits: str, decoded: str) -> Statistics:
    """
    Derive compression metrics from the raw lengths

    Each decoded character is counted as one bit of uncompressed space, so
    12 bits decoding to 4 characters gives 3.0 bits/char and 66.7% savings.
    """
    n_bits = len(bits)
    n_chars = len(decoded)
    avg = n_bits / n_chars if n_chars else None
    savings = (1 - n_chars / n_bits) * 100 if n_bits else None
    return Statistics(
        bits_length=n_bits,
        characters=n_chars,
        avg_bits_per_char=avg,
        space_savings=savings,
    )


def display_char(ch: str) -> str:
    if ch == "\n":
        return "\\n"
    if not ch.isprintable():
        return ch.encode("unicode_escape").decode("ascii")
    return ch

def _fmt(value: Optional[float], suffix: str = "") -> str:
    return "n/a" if value is None else f"{value:.1f}{suffix}"


# Console output

def format_code_table(table: Sequence[Tuple[str, str]]) -> List[str]:
    lines = ["character            code: ", "--------------------------"]
    for ch, code in table:
        lines.append(f"{display_char(ch)}\t\t\t{code}")
    return lines

def format_statistics(stats: Statistics) -> List[str]:
    return [
        "",
        "STATISTICS:",
        f"Avg bits/char:       \t{_fmt(stats.avg_bits_per_char)}",
        f"Total characters:    \t{stats.characters}",
        f"Space Savings:       \t{_fmt(stats.space_savings, '%')}",
    ]

def print_report(table: Sequence[Tuple[str, str]], decoded: str, stats: Statistics,
                 show_codes: bool = True) -> None:
    if show_codes:
        for line in format_code_table(table):
            print(line)
    print("-----------------------")
    print("Message:")
    print(decoded)
    for line in format_statistics(stats):
        print(line)


# CSV export

def write_code_table_csv(path: Path, table: Sequence[Tuple[str, str]]) -> None:
    fields = ["character", "code", "bits"]
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for ch, code in table:
            w.writerow({"character": display_char(ch), "code": code, "bits": len(code)})


def write_statistics_csv(path: Path, stats: Statistics) -> None:
    row = asdict(stats)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(row.keys()))
        w.writeheader()
        w.writerow(row)


# Plotting

def plot_code_lengths(table: Sequence[Tuple[str, str]], out_path: Path) -> None:
    if not table:
        return

    labels = [display_char(ch) for ch, _ in table]
    lengths = [len(code) for _, code in table]
    x = list(range(len(labels)))

    plt.figure()
    plt.bar(x, lengths)
    plt.xticks(x, labels)
    plt.xlabel("Character (tree order)")
    plt.ylabel("Code Length (bits)")
    plt.title("Code Length per Character")
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
