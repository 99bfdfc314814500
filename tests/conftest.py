# tests/conftest.py
"""
Shared fixtures: sample feeds, record factories and fake collaborators.
"""

from typing import Callable, List, Optional

import pytest

from configurations import ConfigFactory
from models import PlayerDatabase, PlayerListResult, PlayerRecord, ServerRecord

SERVER_XML = """<?xml version="1.0" encoding="utf-8"?>
<result>
  <server_list>
    <server>
      <name>[Castling][Global][EU-1 LV1] Castle Wars</name>
      <address>10.0.0.1</address>
      <port>1234</port>
      <map_id>media/packages/castling/maps/map1</map_id>
      <map_name>Castle One</map_name>
      <bots>12</bots>
      <country>Germany</country>
      <current_players>3</current_players>
      <timestamp>1700000000</timestamp>
      <version>1.99</version>
      <dedicated>1</dedicated>
      <mod>1</mod>
      <player>Player1</player>
      <player></player>
      <player>Player3</player>
      <comment>Welcome</comment>
      <url>https://example.org</url>
      <max_players>16</max_players>
      <mode>Castling</mode>
    </server>
    <server>
      <name>Official Invasion</name>
      <address>10.0.0.2</address>
      <port>1240</port>
      <map_id>media/packages/vanilla/maps/map5</map_id>
      <map_name>Map Five</map_name>
      <bots>abc</bots>
      <country>China</country>
      <current_players>0</current_players>
      <timestamp>1700000001</timestamp>
      <version>1.99</version>
      <dedicated>0</dedicated>
      <mod>0</mod>
      <comment></comment>
      <url></url>
      <max_players>32</max_players>
      <mode>COOP</mode>
      <realm>official_invasion</realm>
    </server>
  </server_list>
</result>
"""


def _cells(values: List[str]) -> str:
    return "".join(f"<td>{value}</td>" for value in values)


PLAYER_ROW = [
    "1",
    '<a href="/profile?u=alpha">Alpha</a>',
    "1200",
    "300",
    "900",
    "4.00",
    "10h 5min",
    "25",
    "7",
    "3",
    "40",
    "2",
    "12.5km",
    "5000",
    "80",
    "123456",
    "Colonel",
    '<img src="/images/ranks/colonel.png"/>',
]

PLAYER_HTML = (
    "<html><head><title>Leaderboard</title></head><body><table>"
    "<tr><th>#</th><th>Username</th><th>Kills</th></tr>"
    f"<tr>{_cells(PLAYER_ROW)}</tr>"
    f"<tr>{_cells(['2', 'Bravo', '-', '', 'n/a', '0.5'])}</tr>"
    "</table>"
    '<p><a href="?start=0">Previous</a> <span><b><a href="?start=40">Next</a></b></span></p>'
    "</body></html>"
)


@pytest.fixture
def server_xml() -> str:
    return SERVER_XML


@pytest.fixture
def player_html() -> str:
    return PLAYER_HTML


@pytest.fixture
def testing_config():
    return ConfigFactory.testing()


@pytest.fixture
def make_server() -> Callable[..., ServerRecord]:
    counter = {"value": 0}

    def factory(**overrides) -> ServerRecord:
        index = counter["value"]
        counter["value"] += 1
        values = dict(
            id=str(index),
            name=f"Server {index}",
            ip_address=f"10.0.0.{index}",
            port=1234 + index,
            map_id=f"media/packages/vanilla/maps/map{index}",
            country="Germany",
            current_players=index,
            max_players=32,
            mode="COOP",
        )
        values.update(overrides)
        return ServerRecord(**values)

    return factory


@pytest.fixture
def make_player() -> Callable[..., PlayerRecord]:
    def factory(username: str, db: PlayerDatabase = PlayerDatabase.INVASION, **overrides) -> PlayerRecord:
        return PlayerRecord(id=f"{db.value}:{username}", username=username, db=db, **overrides)

    return factory


class ManualScheduler:
    """
    Collects scheduled callbacks so tests decide when they fire.
    """

    class Handle:
        def __init__(self, delay, callback):
            self.delay = delay
            self.callback = callback
            self.cancelled = False

        def cancel(self):
            self.cancelled = True

    def __init__(self):
        self.handles: List["ManualScheduler.Handle"] = []

    def __call__(self, delay, callback):
        handle = self.Handle(delay, callback)
        self.handles.append(handle)
        return handle

    def pending(self, delay: Optional[float] = None) -> List["ManualScheduler.Handle"]:
        return [
            h for h in self.handles if not h.cancelled and (delay is None or h.delay == delay)
        ]

    def run_pending(self, delay: Optional[float] = None) -> None:
        for handle in self.pending(delay):
            handle.cancelled = True
            handle.callback()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


class FakeServerService:
    def __init__(self, servers=None, error: Optional[Exception] = None):
        self.servers = list(servers or [])
        self.error = error
        self.calls = 0

    def list_all(self, timeout=None):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.servers)


class FakePlayerService:
    def __init__(self, pages=None, error: Optional[Exception] = None):
        self.pages = list(pages or [])
        self.error = error
        self.calls = []

    def list_with_pagination(self, db=None, search=None, sort=None, size=None, start=0):
        self.calls.append(dict(db=db, search=search, sort=sort, size=size, start=start))
        if self.error is not None:
            raise self.error
        if self.pages:
            return self.pages.pop(0)
        return PlayerListResult(players=[])


@pytest.fixture
def fake_server_service():
    return FakeServerService


@pytest.fixture
def fake_player_service():
    return FakePlayerService
