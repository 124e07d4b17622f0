"""Shared utilities for parsing operator input and formatting output."""

from __future__ import annotations

import re

from .exceptions import MalformedInputError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def normalize_identifier(value: str, field: str = "id") -> str:
    if not isinstance(value, str):
        raise MalformedInputError(f"{field} must be a string.")
    normalized = value.strip()
    if not normalized:
        raise MalformedInputError(f"{field} must not be empty.")
    # Identifiers are single tokens; anything after the first blank is dropped.
    return normalized.split()[0]


def parse_int(value: str, field: str = "value") -> int:
    if not isinstance(value, str):
        raise MalformedInputError(f"{field} must be a string.")
    raw = value.strip()
    if not _INTEGER_RE.fullmatch(raw):
        raise MalformedInputError(
            f"{field} is not a number.",
            user_message="Invalid input! Please enter a number.",
        )
    return int(raw)


def parse_day(value: str) -> int:
    return parse_int(value, "day number")


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def format_yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_banner(title: str) -> str:
    return f"=== {title} ==="
