"""Conversions between enumeration members and their text form."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from .errors import ErrorType, ExadrumsError

E = TypeVar("E", bound=Enum)


def enum_to_string(member: Enum) -> str:
    """Return the text form of an enumeration member."""
    if not isinstance(member, Enum) or member not in type(member):
        raise ExadrumsError("Could not convert enum to string.", ErrorType.ERROR)
    return str(member)


def string_to_enum(enum_cls: type[E], text: str) -> E:
    """Return the member of ``enum_cls`` whose text form is ``text``."""
    for member in enum_cls:
        if str(member) == text:
            return member
    raise ExadrumsError(f"Could not convert string {text} to enum.", ErrorType.ERROR)


def enum_values(enum_cls: type[E]) -> list[E]:
    """Return every member of ``enum_cls`` in declaration order."""
    return list(enum_cls)