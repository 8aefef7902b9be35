#!/usr/bin/env python3
"""
Music tagging for Tagger
Tags songs with an artist + album + song approach, using em dashes to
separate the layers in the rendered name.
"""

from typing import Optional

from model import SingleSong
from util import format_name, split_filename_ext


UNKNOWN_ARTIST = "Unknown artist"
RENDER_SEPARATOR = " — "  # em dash


def _clean(value: Optional[str]) -> Optional[str]:
    """Normalize an optional name, treating blank results as missing"""
    if value is None:
        return None
    return format_name(value) or None


def render_song(title: str, artist: Optional[str] = None, album: Optional[str] = None) -> str:
    """Render the display name for a song

    The album is left out when missing or when it's the same as the title.
    """
    parts = [artist or UNKNOWN_ARTIST]
    if album and album != title:
        parts.append(album)
    parts.append(title)
    return RENDER_SEPARATOR.join(parts)


def compose_song(file_path: str, artist: Optional[str] = None, album: Optional[str] = None) -> SingleSong:
    """Tag a single song from its file name with optional artist/album context

    Examples:
        "My.Song-Title.mp3" -> "Unknown artist — My Song Title"
        "Track.mp3", artist "The Band", album "Track" -> "The Band — Track"
    """
    stem, ext = split_filename_ext(file_path)
    title = format_name(stem)
    # Blank artist/album after normalizing are stored as None, not ""
    artist = _clean(artist)
    album = _clean(album)

    return SingleSong(
        file_path=file_path,
        title=title,
        artist=artist,
        album=album,
        ext=ext,
        render=render_song(title, artist, album)
    )
