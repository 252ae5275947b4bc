"""
Immutable data models for Office build history.

Classes:
- BuildVersion: Structured four-part product version (16.0.<build>.<revision>), ordered numerically
- BuildRecord: One version/build pair scraped from an update history page
- InvalidVersionError: Raised when version text is not strictly numeric and dot-separated
"""
from __future__ import annotations

import re
from dataclasses import dataclass


_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)\.(\d+)")


class InvalidVersionError(ValueError):
    """Version text does not have the form <int>.<int>.<int>.<int>."""


@dataclass(frozen=True, order=True)
class BuildVersion:

    major: int
    minor: int
    build: int
    revision: int

    @classmethod
    def parse(cls, text: str) -> BuildVersion:
        """
        Parse dotted version text such as '16.0.16731.20636'.

        Raises:
            InvalidVersionError: When the text has anything other than four numeric components.
        """
        match = _VERSION_RE.fullmatch(text)
        if match is None:
            raise InvalidVersionError(f"Invalid version '{text}': expected four numeric dot-separated parts")
        return cls(*(int(part) for part in match.groups()))

    def __str__(self):
        return f'{self.major}.{self.minor}.{self.build}.{self.revision}'


@dataclass(frozen=True)
class BuildRecord:

    version_number: BuildVersion
    build_number: str

    def __post_init__(self):
        if not self.build_number:
            raise ValueError("Build number must not be empty")

    def __repr__(self):
        return f'{self.version_number} ({self.build_number})'

    def to_json(self) -> dict:
        return {
            'version_number': str(self.version_number),
            'build_number': self.build_number,
        }
