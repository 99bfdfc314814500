from .records import (
    OnlineStats,
    PlayerDatabase,
    PlayerListResult,
    PlayerRecord,
    ServerRecord,
    compute_online_stats,
    generate_empty_online_stats,
    generate_player_id,
    map_key,
)

__all__ = [
    "ServerRecord",
    "PlayerRecord",
    "PlayerDatabase",
    "PlayerListResult",
    "OnlineStats",
    "map_key",
    "generate_player_id",
    "generate_empty_online_stats",
    "compute_online_stats",
]
