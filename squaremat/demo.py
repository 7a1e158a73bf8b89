"""Command-line demonstration of the square matrix operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from squaremat.matrix import SquareMat, format_number

_DEMO_SIZE = 3


def build_demo_matrices() -> tuple[SquareMat, SquareMat]:
    """Return the two 3x3 demo matrices: elements i + j and i * j."""
    indices = range(_DEMO_SIZE)
    first = SquareMat.from_rows([[i + j for j in indices] for i in indices])
    second = SquareMat.from_rows([[i * j for j in indices] for i in indices])
    return first, second


def _section(title: str, matrix: SquareMat) -> str:
    return f"{title}\n{matrix}\n"


def _flag(value: bool) -> str:
    return "1" if value else "0"


def render_demo() -> str:
    """Run every demonstrated operation and return the text report."""
    mat1, mat2 = build_demo_matrices()
    parts = [
        _section("Matrix 1:", mat1),
        _section("Matrix 2:", mat2),
        _section("Matrix 1 + Matrix 2:", mat1 + mat2),
        _section("Matrix 1 - Matrix 2:", mat1 - mat2),
        _section("Matrix 1 * Matrix 2:", mat1 * mat2),
        _section("Matrix 1 * 2.0:", mat1 * 2.0),
        _section("Matrix 1 % Matrix 2:", mat1 % mat2),
        _section("Matrix 1 % 3:", mat1 % 3),
        _section("Matrix 1 ^ 2:", mat1 ** 2),
        _section("~Matrix 1:", ~mat1),
        f"Determinant of Matrix 1: {format_number(mat1.determinant())}\n",
    ]

    mat1.increment()
    parts.append(_section("++Matrix 1:", mat1))
    mat1.decrement()
    parts.append(_section("--Matrix 1:", mat1))

    parts.extend(
        [
            f"Matrix 1 == Matrix 2: {_flag(mat1 == mat2)}\n",
            f"Matrix 1 != Matrix 2: {_flag(mat1 != mat2)}\n",
            f"Matrix 1 < Matrix 2: {_flag(mat1 < mat2)}\n",
            f"Matrix 1 > Matrix 2: {_flag(mat1 > mat2)}\n",
        ]
    )
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration report; return 1 if an operation fails."""
    parser = argparse.ArgumentParser(
        prog="squaremat-demo",
        description="Demonstrate square matrix operations.",
    )
    parser.parse_args(argv)
    try:
        report = render_demo()
    except (ValueError, IndexError, ZeroDivisionError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())