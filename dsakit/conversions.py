"""Conversion between decimal integers and integers written with binary digits."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import Optional


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits and return their value.

    Digits other than 1 contribute nothing, as in ``101`` -> 5.
    """
    if n < 0:
        raise ValueError("binary input must not be negative")
    return sum(1 << i for i, digit in enumerate(reversed(str(n))) if digit == "1")


def decimal_to_binary(n: int) -> int:
    """Return ``n`` written in binary, as an integer made of the digits 0 and 1."""
    if n < 0:
        raise ValueError("number must not be negative")
    return int(format(n, "b"))


def _answers(argv: Optional[Sequence[str]]) -> Iterator[str]:
    yield from (sys.argv[1:] if argv is None else argv)
    while True:
        yield input()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a conversion and a number, then print the result.

    Answers are taken from ``argv`` first and then read from standard input.
    """
    answers = _answers(argv)
    print("Welcome to binary and decimal converter Program")
    print("Please Enter Your Choice")
    print("1.Convert Binary into Decimal")
    print("2.Convert Decimal into Binary")
    try:
        choice = int(next(answers))
    except ValueError:
        choice = None

    if choice == 1:
        print("Enter binary to convert it into number")
        print(f"Answer is {binary_to_decimal(int(next(answers)))}")
    elif choice == 2:
        print("Enter number to convert it into binary")
        print(f"Answer is {decimal_to_binary(int(next(answers)))}")
    else:
        print("Enter a valid option!")
    return 0


if __name__ == "__main__":
    sys.exit(main())