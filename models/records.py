# models/records.py
"""
Typed records produced by the feed parsers.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

Number = Union[int, float]


class PlayerDatabase(str, Enum):
    """
    Leaderboard partitions exposed by the player feed
    """

    INVASION = "invasion"
    PACIFIC = "pacific"
    PRERESET_INVASION = "prereset_invasion"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["PlayerDatabase"]:
        """Return the matching partition, or None for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ServerRecord:
    """
    One live game server snapshot.

    ``id`` is the position in the poll it came from and is not stable
    across polls; use ``map_key`` for identity.
    """

    id: str
    name: str = ""
    ip_address: str = ""
    port: Number = 0
    map_id: str = ""
    map_name: str = ""
    bots: Number = 0
    country: str = ""
    current_players: Number = 0
    max_players: Number = 0
    time_stamp: Number = 0
    version: str = ""
    dedicated: bool = False
    mod: bool = False
    player_list: Tuple[str, ...] = field(default_factory=tuple)
    comment: str = ""
    url: str = ""
    mode: str = ""
    realm: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["player_list"] = list(self.player_list)
        return data


@dataclass(frozen=True)
class PlayerRecord:
    """
    One leaderboard row. Statistics are None when the feed cell was empty,
    "-" or not numeric.
    """

    id: str
    username: str
    db: PlayerDatabase
    row_number: Number = 0
    kills: Optional[Number] = None
    deaths: Optional[Number] = None
    score: Optional[Number] = None
    kd: Optional[Number] = None
    time_played: Optional[str] = None
    longest_kill_streak: Optional[Number] = None
    targets_destroyed: Optional[Number] = None
    vehicles_destroyed: Optional[Number] = None
    soldiers_healed: Optional[Number] = None
    teamkills: Optional[Number] = None
    distance_moved: Optional[str] = None
    shots_fired: Optional[Number] = None
    throwables_thrown: Optional[Number] = None
    rank_progression: Optional[Number] = None
    rank_name: Optional[str] = None
    rank_icon: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["db"] = self.db.value
        return data


@dataclass
class OnlineStats:
    """
    Aggregate counters over a server collection
    """

    all_server_count: int = 0
    online_server_count: int = 0
    online_player_count: int = 0
    player_capacity_count: int = 0


def map_key(server: ServerRecord) -> str:
    """
    Stable identity of a server across polls.
    """
    return f"{server.ip_address}:{server.port}"


def generate_player_id(username: str, db: PlayerDatabase) -> str:
    return f"{PlayerDatabase(db).value}:{username}"


def generate_empty_online_stats() -> OnlineStats:
    return OnlineStats()


def compute_online_stats(servers) -> OnlineStats:
    """
    Count servers, servers with players, players and capacity.
    """
    stats = generate_empty_online_stats()
    for server in servers:
        stats.all_server_count += 1
        if server.current_players > 0:
            stats.online_server_count += 1
        stats.online_player_count += server.current_players
        stats.player_capacity_count += server.max_players
    return stats


@dataclass
class PlayerListResult:
    """
    One leaderboard page plus the feed's pagination flags
    """

    players: List[PlayerRecord]
    has_next: bool = False
    has_previous: bool = False
