"""Core enums and type definitions."""

from enum import StrEnum


class AttemptStatus(StrEnum):
    """Outcome of a single provider attempt."""

    SUCCESS = "success"
    NAME_NOT_FOUND = "name_not_found"
    NO_ADDRESS = "no_address"
    UNAVAILABLE = "unavailable"


class QueryStage(StrEnum):
    """Which of the two dependent reads an attempt reached."""

    RESOLVER = "resolver"
    ADDR = "addr"
