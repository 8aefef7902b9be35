#!/usr/bin/env python3
"""
Data models for Tagger
Defines the values produced by TV capture and music tagging, plus the
errors raised when a capture can't be resolved.
"""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class CaptureField(Enum):
    SEASON = "season"
    EPISODE = "episode"


def describe_capture_field(field: CaptureField) -> str:
    """Human readable message for a field that couldn't be resolved"""
    return (
        f"No {field.value} number passed as context and it wasn't found "
        f"in the file name either"
    )


class CaptureError(Exception):
    """No override was given for a field and its marker wasn't found"""

    def __init__(self, field: CaptureField):
        self.field = field
        super().__init__(describe_capture_field(field))


class BatchCaptureError(Exception):
    """First failing item of a batch capture"""

    def __init__(self, name: str, index: int, error: CaptureError):
        self.name = name
        self.index = index
        self.error = error
        super().__init__(f"Failed to tag '{name}': {error}")

    @property
    def field(self) -> CaptureField:
        return self.error.field


@dataclass
class Context:
    """Known-good values which take precedence over anything parsed from a name"""
    season: Optional[int] = None
    episode: Optional[int] = None

    def __post_init__(self):
        for label, value in (('season', self.season), ('episode', self.episode)):
            if value is not None and value < 0:
                raise ValueError(f"{label} must be non-negative, got {value}")


@dataclass(frozen=True)
class Capture:
    """A single episode file with its resolved season and episode numbers"""
    file_path: str  # Original input, untouched
    filename: str  # file_path without its extension
    ext: Optional[str]
    season: int
    episode: int


@dataclass(frozen=True)
class SingleSong:
    """A tagged song; render is the display string built from the other fields"""
    file_path: str
    title: str
    artist: Optional[str]
    album: Optional[str]
    ext: Optional[str]
    render: str
