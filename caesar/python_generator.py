"""Generation of matplotlib scripts that plot functions."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from caesar.basics import Function1D

__all__ = ["simple_function_chart", "simple_function_chart_of"]

_RULE = "# " + "-" * 86


def _begin(out: TextIO) -> None:
    out.write(_RULE + "\n")
    out.write("# This code is generated from crys for running in Jupiter Notebook.\n")
    out.write("\n")


def _end(out: TextIO) -> None:
    out.write("# End of code generated from crys.\n")
    out.write(_RULE + "\n")


def _format_list(values: Sequence[float]) -> str:
    return "[" + ", ".join(f"{v:g}" for v in values) + "]"


def simple_function_chart(
    xs: Sequence[float], ys: Sequence[float], out: TextIO | None = None
) -> None:
    """Write a script plotting the points ``xs -> ys`` to ``out`` (stdout by default)."""
    if len(xs) != len(ys):
        raise ValueError("can not construct function chart, ys size doesn't match xs size")
    if not xs:
        raise ValueError("can not construct function chart without points")
    if out is None:
        out = sys.stdout

    _begin(out)
    out.write("from matplotlib import pyplot as plt\n")
    out.write("\n")
    out.write(f"xs = {_format_list(xs)}\n")
    out.write(f"ys = {_format_list(ys)}\n")
    out.write("\n")
    out.write("plt.plot(xs, ys)\n")
    out.write("plt.show()\n")
    out.write("\n")
    _end(out)


def simple_function_chart_of(
    f: Function1D,
    segment: Sequence[float],
    n: int = 300,
    out: TextIO | None = None,
) -> None:
    """Write a script plotting ``f`` sampled at ``n + 1`` points of ``segment``."""
    lo, hi = segment[0], segment[1]
    if not lo < hi:
        raise ValueError("wrong function definition scope segment")
    if n <= 0:
        raise ValueError("number of pieces must be positive")
    dx = (hi - lo) / n
    xs = [lo + i * dx for i in range(n + 1)]
    ys = [f(x) for x in xs]
    simple_function_chart(xs, ys, out)