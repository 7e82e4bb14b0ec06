"""
Ready-made parsers for the raw puzzle input text, for use as `AocDay(parser=...)`.
Every function here needs to accept one positional argument and return the
'massaged' data.
"""

__all__ = ["blocks", "grid", "lines", "numbers"]

import re


def lines(data):
    return data.splitlines()


def blocks(data):
    """Groups of lines which are separated by blank lines."""
    return [chunk.splitlines() for chunk in re.split(r"\n\s*\n", data.strip()) if chunk]


def grid(data):
    """2D list of characters, indexed as grid[row][col]."""
    return [list(line) for line in data.splitlines()]


def numbers(data):
    """
    All the integers in the data. A list of lists, one per line which has any
    numbers on it, flattened if every such line has exactly one number and
    un-nested if only one line has numbers.
    """
    rows = []
    for line in data.splitlines():
        row = [int(n) for n in re.findall(r"-?\d+", line)]
        if row:
            rows.append(row)
    if rows and all(len(row) == 1 for row in rows):
        rows = [n for [n] in rows]
    if len(rows) == 1:
        [rows] = rows
    return rows
