"""Pydantic schemas for API request/response models"""

from typing import Optional, List, Generic, TypeVar
from pydantic import BaseModel, Field

from model import Capture, SingleSong

T = TypeVar('T')


# Response envelope
class ResponseModel(BaseModel, Generic[T]):
    status: int = Field(..., description="HTTP status code, repeated in the body")
    msg: str = Field(..., description="Human readable outcome")
    body: Optional[T] = None


# TV schemas
class CaptureSchema(BaseModel):
    file_path: str
    filename: str
    ext: Optional[str] = None
    season: int
    episode: int

    @classmethod
    def from_capture(cls, capture: Capture) -> 'CaptureSchema':
        return cls(
            file_path=capture.file_path,
            filename=capture.filename,
            ext=capture.ext,
            season=capture.season,
            episode=capture.episode
        )


class EpisodesRequest(BaseModel):
    names: List[str] = Field(..., description="Episode file names, tagged in order")


# Music schemas
class SongSchema(BaseModel):
    file_path: str
    title: str
    artist: Optional[str] = None
    album: Optional[str] = None
    ext: Optional[str] = None
    render: str

    @classmethod
    def from_song(cls, song: SingleSong) -> 'SongSchema':
        return cls(
            file_path=song.file_path,
            title=song.title,
            artist=song.artist,
            album=song.album,
            ext=song.ext,
            render=song.render
        )
