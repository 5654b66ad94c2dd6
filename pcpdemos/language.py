"""Guess a text's language by comparing letter frequencies."""

from __future__ import annotations

import math
from collections.abc import Sequence
from pathlib import Path

ALPHABET_SIZE = 26
NO_LANGUAGE = "no key here"
DEFAULT_DIRECTORY = Path("LanguageDetection")

LETTER_FREQUENCIES: dict[str, tuple[float, ...]] = {
    "de": (6.51, 1.89, 3.06, 5.08, 17.40, 1.66, 3.01, 4.76, 7.55, 0.27, 1.21, 3.44, 2.53,
           9.78, 2.51, 0.79, 0.02, 7.00, 7.27, 6.15, 4.35, 0.67, 1.89, 0.03, 0.04, 1.13),
    "en": (8.17, 1.48, 2.78, 4.25, 12.70, 2.23, 2.02, 6.09, 6.97, 0.15, 0.77, 4.03, 2.41,
           6.75, 7.51, 1.93, 0.10, 5.99, 6.33, 9.06, 2.76, 0.98, 2.36, 0.15, 1.97, 0.07),
    "fr": (7.64, 0.90, 3.26, 3.67, 14.00, 1.07, 0.87, 0.74, 7.53, 0.55, 0.05, 5.46, 2.97,
           7.10, 5.38, 3.02, 1.36, 6.55, 7.95, 7.24, 6.31, 1.63, 0.11, 0.39, 0.31, 0.14),
}


def vector_length(values: Sequence[float]) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(sum(value * value for value in values))


def cosine_similarity(first: Sequence[float], second: Sequence[float]) -> float:
    """Return the cosine of the angle between two vectors.

    A zero vector has no direction, so the result is NaN.
    """
    dot = sum(a * b for a, b in zip(first, second, strict=True))
    denominator = vector_length(first) * vector_length(second)
    if denominator == 0:
        return math.nan
    return dot / denominator


def letter_occurrence(text: str) -> list[float]:
    """Count ASCII letters in ``text``, case-insensitively, as 26 floats."""
    counts = [0.0] * ALPHABET_SIZE
    for char in text:
        if "A" <= char <= "Z":
            counts[ord(char) - ord("A")] += 1
        elif "a" <= char <= "z":
            counts[ord(char) - ord("a")] += 1
    return counts


def detect_language(text: str) -> str:
    """Return the code of the most similar language, or ``NO_LANGUAGE``."""
    occurrence = letter_occurrence(text)
    best_key = NO_LANGUAGE
    best_value = 0.0
    for key, frequencies in LETTER_FREQUENCIES.items():
        value = cosine_similarity(occurrence, frequencies)
        if value > best_value:
            best_key = key
            best_value = value
    return best_key


def read_file(path: str | Path) -> str:
    """Return the whole content of a file as text."""
    return Path(path).read_bytes().decode("utf-8", errors="replace")


def run_language(filename: str, directory: str | Path = DEFAULT_DIRECTORY) -> str:
    """Detect and print the language of ``directory/filename``."""
    language = detect_language(read_file(Path(directory) / filename))
    print(f"The detected language of the file {filename} is {language}")
    return language


def demo() -> None:
    """Detect the language of the three sample files."""
    for filename in ("English.txt", "French.txt", "German.txt"):
        run_language(filename)