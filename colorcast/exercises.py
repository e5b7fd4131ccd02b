"""Small exercises: bit tests, strings, records, Fibonacci and powers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

BITS_SAMPLE = 268439552
_HIGH_BIT = 28
_LOW_BIT = 12


def bits_set(value: int) -> bool:
    """Return whether bits 28 and 12 of ``value`` are both set.

    Counted from the left of a 32-bit word, these are positions 4 and 20.
    """
    return bool((value >> _HIGH_BIT) & 1) and bool((value >> _LOW_BIT) & 1)


def join_words(first: str, second: str) -> str:
    """Join two strings with a single space between them."""
    return f"{first} {second}"


@dataclass(frozen=True)
class Student:
    """A student's identity."""

    last_name: str
    first_name: str
    student_id: int


@dataclass(frozen=True)
class Address:
    """A student's postal address."""

    student_id: int
    number: int
    street: str
    postal_code: int
    city: str


@dataclass(frozen=True)
class Grades:
    """A student's marks in the two modules."""

    student_id: int
    module1: int
    module2: int


STUDENTS = (
    Student("Dupont", "Alice", 1),
    Student("Martin", "Bob", 2),
    Student("Bernard", "Claire", 3),
    Student("Lemoine", "David", 4),
    Student("Moreau", "Eva", 5),
)

ADDRESSES = (
    Address(1, 10, "Rue de la Paix", 75001, "Paris"),
    Address(2, 15, "Avenue des Champs-Elysées", 75008, "Paris"),
    Address(3, 20, "Rue de la République", 69002, "Lyon"),
    Address(4, 5, "Boulevard Saint-Germain", 75005, "Paris"),
    Address(5, 8, "Rue de la Liberté", 44000, "Nantes"),
)

GRADES = (
    Grades(1, 15, 12),
    Grades(2, 10, 14),
    Grades(3, 18, 17),
    Grades(4, 12, 11),
    Grades(5, 14, 16),
)


def student_report() -> str:
    """Describe every student with their address and marks."""
    addresses = {address.student_id: address for address in ADDRESSES}
    grades = {grade.student_id: grade for grade in GRADES}
    blocks = []
    for student in STUDENTS:
        address = addresses[student.student_id]
        grade = grades[student.student_id]
        blocks.append(
            f"Etudiant {student.student_id} : {student.first_name} {student.last_name}\n"
            f"Adresse : {address.number} {address.street}, "
            f"{address.postal_code}, {address.city}\n"
            f"Notes : Module 1 = {grade.module1}, Module 2 = {grade.module2}\n\n"
        )
    return "".join(blocks)


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting from 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    numbers: list[int] = []
    previous, current = 0, 1
    for _ in range(n):
        numbers.append(previous)
        previous, current = current, previous + current
    return numbers


def power(base: int, exponent: int) -> int:
    """Return ``base`` multiplied by itself ``exponent`` times (1 if none)."""
    result = 1
    for _ in range(max(exponent, 0)):
        result *= base
    return result


def _run(name: str) -> None:
    if name == "bits":
        print("1" if bits_set(BITS_SAMPLE) else "0")
    elif name == "chaine":
        print(join_words("Hello", "World !"))
    elif name == "etudiant":
        print(student_report(), end="")
    elif name == "fibonacci":
        print(" ".join(str(number) for number in fibonacci(7)))
    elif name == "puissance":
        print(power(2, 4))


_EXERCISES = ("bits", "chaine", "etudiant", "fibonacci", "puissance")


def main(argv: list[str] | None = None) -> int:
    """Run one exercise by name, or all of them in turn."""
    parser = argparse.ArgumentParser(prog="colorcast-exercises", description=__doc__)
    parser.add_argument("exercise", nargs="?", choices=_EXERCISES, help="exercise to run")
    args = parser.parse_args(argv)
    for name in [args.exercise] if args.exercise else _EXERCISES:
        _run(name)
    return 0