"""Music tagging API endpoints, favouring em dashes between layers"""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from music import compose_song
from webui.api.response import envelope
from webui.models.schemas import SongSchema

router = APIRouter(prefix="/music", tags=["music"])


MUSIC_HELP = """ROUTE /music


About
    Allows music tagging with a static/strong artist + album + song methodology
    of tagging. Formatting uses an em dash to differentiate these layers.

Child routes/endpoints
    - /song: Tags a single song and allows optional context for artist/album"""

SONG_HELP = """POST /music/song?<name>&<album>&<artist>


About
    Tags a single song path into the typical artist + album + song view. Some
    optional url parameters may be passed like `album` and `artist` in order to
    give explicit context for tagging the song."""


@router.get("", response_class=PlainTextResponse)
async def music_help():
    """Available music endpoints"""
    return MUSIC_HELP


@router.get("/song", response_class=PlainTextResponse)
async def song_help():
    return SONG_HELP


@router.post("/song")
async def tag_song(
    name: str = Query(..., description="Song file name"),
    album: Optional[str] = Query(None, description="Explicit album name"),
    artist: Optional[str] = Query(None, description="Explicit artist name")
):
    """Tag a single song, typically one from a playlist in no particular order"""
    song = compose_song(name, artist=artist, album=album)
    return envelope(200, "Success", SongSchema.from_song(song))
