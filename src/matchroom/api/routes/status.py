"""REST endpoints reporting room and bot status."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from matchroom.config import VERSION
from matchroom.services.room_bot import RoomBot

router = APIRouter(tags=["status"])


class OnlineResponse(BaseModel):
    """Liveness summary for uptime monitors."""

    status: str
    message: str
    uptime: float  # seconds
    timestamp: str
    version: str


class PlayerInfo(BaseModel):
    id: int
    name: str
    team: int
    admin: bool


class RoomStatusResponse(BaseModel):
    """Current room occupancy."""

    status: str
    room_name: str | None = None
    players: int = 0
    max_players: int = 0
    player_list: list[PlayerInfo] = []
    restarts: int = 0
    notifications: dict | None = None
    message: str | None = None


class ClubInfo(BaseModel):
    captain: str
    members: list[str]


class PlayerStatsInfo(BaseModel):
    goals: int
    assists: int
    own_goals: int
    wins: int
    losses: int
    mvps: int
    games_played: int


class MatchStatsInfo(BaseModel):
    red_goals: int
    blue_goals: int
    goal_scorers: list[str]
    assists: list[str]
    mvp: str | None


class RoomStatsResponse(BaseModel):
    """Clubs, lifetime stats and the running match."""

    clubs: dict[str, ClubInfo]
    player_stats: dict[str, PlayerStatsInfo]
    match_stats: MatchStatsInfo
    match_phase: str
    admins: int
    owner: str | None


def _get_bot(request: Request) -> RoomBot | None:
    return getattr(request.app.state, "bot", None)


@router.get("/", response_model=OnlineResponse)
async def online(request: Request):
    """Report the service is up, with process uptime."""
    bot = _get_bot(request)
    return OnlineResponse(
        status="online",
        message=f"🎮 {request.app.title} is running!",
        uptime=bot.uptime_seconds if bot else 0.0,
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=VERSION,
    )


@router.get("/status", response_model=RoomStatusResponse)
async def room_status(request: Request):
    bot = _get_bot(request)
    if bot is None:
        return RoomStatusResponse(status="initializing", message="Bot is starting up...")

    return RoomStatusResponse(status="active", **bot.status())


@router.get("/api/stats", response_model=RoomStatsResponse)
async def room_stats(request: Request):
    """Snapshot of clubs, player statistics and the current match."""
    bot = _get_bot(request)
    if bot is None:
        return RoomStatsResponse(
            clubs={},
            player_stats={},
            match_stats=MatchStatsInfo(red_goals=0, blue_goals=0, goal_scorers=[], assists=[], mvp=None),
            match_phase="idle",
            admins=0,
            owner=None,
        )
    return RoomStatsResponse(**bot.state.to_dict())
