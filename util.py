#!/usr/bin/env python3
"""
Utility functions for Tagger
Provides helpers for splitting file names and cleaning up name fragments.
"""

import re
from typing import Optional, Tuple


# Separator runs that get collapsed into a single space
TO_SPACE_PATTERN = re.compile(r'[.\- ]+')


def split_filename_ext(file_path: str) -> Tuple[str, Optional[str]]:
    """Split a raw file name into its stem and optional extension

    Only the last dot-separated segment is treated as the extension, so
    "show.s01.mkv" gives ("show.s01", ".mkv") and ".hidden" gives ("", ".hidden").

    Returns:
        (stem, ext) where ext keeps its leading dot, or is None when the input
        has no dot at all
    """
    if '.' not in file_path:
        return file_path, None

    stem, last = file_path.rsplit('.', 1)
    return stem, f".{last}"


def format_name(name: str) -> str:
    """Turn a raw name fragment into a readable token

    Every run of dots, hyphens and spaces becomes one space, then the result
    is trimmed ("The.Artist-Name" -> "The Artist Name").
    """
    return TO_SPACE_PATTERN.sub(' ', name).strip()
