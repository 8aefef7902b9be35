"""TV tagging API endpoints for season + episode based tagging"""

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from model import BatchCaptureError, CaptureError, Context
from pattern import resolve_capture, resolve_season
from webui.api.response import envelope
from webui.models.schemas import CaptureSchema, EpisodesRequest

router = APIRouter(prefix="/tv", tags=["tv"])
logger = logging.getLogger(__name__)


TV_HELP = """ROUTE /tv


About
    Allows tagging of tv shows with conventional season + episode tagging,
    allowing manual explicit (optional) season or episode numbers to be passed
    for clarification


Child routes/endpoints
    - /episode: Single episode tagging
    - /season: Bulk per-season tagging"""

EPISODE_HELP = """ENDPOINT POST /tv/episode?<name>&<episode>&<season>


About
    Tags a single episode of a tv show by it's required `name` with optional
    passed context by including either `episode` or `season` query args."""

SEASON_HELP = """ENDPOINT POST /tv/season?<number>


About
    Tags entire array of episodes into a single season according to the provided
    `number` parameter.


Example JSON
    {
        "names": [
            "ep 1.mp4",
            "etc episode4.mpv"
        ]
    }"""


@router.get("", response_class=PlainTextResponse)
async def tv_help():
    """Available TV endpoints"""
    return TV_HELP


@router.get("/episode", response_class=PlainTextResponse)
async def episode_help():
    return EPISODE_HELP


@router.post("/episode")
async def tag_episode(
    name: str = Query(..., description="Episode file name"),
    episode: Optional[int] = Query(None, ge=0, description="Explicit episode number"),
    season: Optional[int] = Query(None, ge=0, description="Explicit season number")
):
    """Tag a single episode file, with optional context taking precedence"""
    try:
        capture = resolve_capture(name, Context(season=season, episode=episode))
    except CaptureError as e:
        logger.warning(f"Could not tag episode '{name}': {e}")
        return envelope(400, e)

    return envelope(200, "Success", CaptureSchema.from_capture(capture))


@router.get("/season", response_class=PlainTextResponse)
async def season_help():
    return SEASON_HELP


@router.post("/season")
async def tag_season(
    episodes: EpisodesRequest,
    number: Optional[int] = Query(None, ge=0, description="Season number shared by every episode")
):
    """Tag a list of episodes into one season, failing on the first bad name"""
    try:
        captures = resolve_season(episodes.names, Context(season=number))
    except BatchCaptureError as e:
        logger.warning(f"Season tagging stopped at item {e.index}: {e}")
        return envelope(400, e)

    logger.info(f"Tagged {len(captures)} episodes")
    return envelope(200, "Success", [CaptureSchema.from_capture(c) for c in captures])
