#!/usr/bin/env python3
"""
Pattern matching and extraction for Tagger
Provides functions for extracting season/episode numbers from file names and
building captures from them.
"""

import logging
import re
from typing import Callable, Iterable, List, Optional, Pattern

from model import BatchCaptureError, Capture, CaptureError, CaptureField, Context
from util import split_filename_ext


logger = logging.getLogger(__name__)


# Regex patterns for markers, only the leftmost match is ever used
SEASON_PATTERN = re.compile(r's(?:eason)? *[0-9]+', re.IGNORECASE)  # s01, S 1, Season 3, SEASOn 0002
EPISODE_PATTERN = re.compile(r'e(?:p(?:isode)?)? *[0-9]+', re.IGNORECASE)  # e02, EP 4, Episode 12

# Pulls the number back out of a marker match
NUMBER_PATTERN = re.compile(r'[0-9]+')


def extract_number(marker: Pattern, text: str) -> Optional[int]:
    """Extract the number held by the first match of a marker pattern

    Args:
        marker: Compiled marker pattern such as SEASON_PATTERN or EPISODE_PATTERN.
                It must end in a digit run, so a match always carries a number.
        text: Text to search

    Returns:
        The number from the leftmost marker match ("S0002" -> 2), or None when
        the marker doesn't occur
    """
    match = marker.search(text)
    if match is None:
        return None
    return int(NUMBER_PATTERN.search(match.group(0)).group(0))


def extract_season(text: str) -> Optional[int]:
    return extract_number(SEASON_PATTERN, text)


def extract_episode(text: str) -> Optional[int]:
    return extract_number(EPISODE_PATTERN, text)


def resolve_field(override: Optional[int], fallback: Callable[[], Optional[int]],
                  field: CaptureField) -> int:
    """Use an override when given, otherwise fall back to a parsed value

    The fallback is only called when there's no override.

    Raises:
        CaptureError: Neither the override nor the fallback gave a value
    """
    if override is not None:
        return override

    value = fallback()
    if value is None:
        raise CaptureError(field)
    logger.debug(f"No {field.value} override, parsed {field.value} {value}")
    return value


def resolve_capture(file_path: str, context: Optional[Context] = None) -> Capture:
    """Build a Capture from a file name, with optional context taking precedence

    Season is resolved before episode, so a name missing both reports the season.

    Raises:
        CaptureError: Season or episode couldn't be resolved
    """
    context = context or Context()
    filename, ext = split_filename_ext(file_path)

    season = resolve_field(context.season, lambda: extract_season(filename), CaptureField.SEASON)
    episode = resolve_field(context.episode, lambda: extract_episode(filename), CaptureField.EPISODE)

    return Capture(
        file_path=file_path,
        filename=filename,
        ext=ext,
        season=season,
        episode=episode
    )


def resolve_season(names: Iterable[str], context: Optional[Context] = None) -> List[Capture]:
    """Capture a batch of episode names sharing one context

    Stops at the first name that fails; later names aren't looked at.

    Raises:
        BatchCaptureError: Carries the failing name, its index and the field
    """
    captures = []
    for index, name in enumerate(names):
        try:
            captures.append(resolve_capture(name, context))
        except CaptureError as e:
            raise BatchCaptureError(name, index, e) from e
    return captures
