"""Match flow: game instance settings, lobby, in-game mode and replicated state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

MAX_LOBBY_PLAYERS = 4
LOBBY_FULL_MESSAGE = "대기방 인원이 가득 찼습니다. 접속이 거부되었습니다."
ALL_DEAD_MESSAGE = "All Players are dead!!"
FIRST_PHASE_URL = "/Game/Maps/FirstPhase?listen"

_PHASE_TITLES = {
    "FirstPhase": "LEVEL 1 : Lush Forest",
    "SecondPhase": "LEVEL 2 : Devastated Village",
    "ThirdPhase": "LEVEL 3 : Skyscrapers",
    "LastPhase": "LEVEL 4 : Last Forest",
}

_NEXT_LEVELS = {
    "FirstPhase": "/Game/Maps/SecondPhase?listen",
    "SecondPhase": "/Game/Maps/ThirdPhase?listen",
    "ThirdPhase": "/Game/Maps/LastPhase?listen",
}


class CharacterStatus(Enum):
    ALIVE = "Alive"
    DOWNED = "Downed"
    DEAD = "Dead"


class MatchState(Enum):
    WAITING_TO_START = "WaitingToStart"
    IN_PROGRESS = "InProgress"
    WAITING_POST_MATCH = "WaitingPostMatch"

    @property
    def has_started(self) -> bool:
        return self is not MatchState.WAITING_TO_START


class LobbyFullError(Exception):
    """Raised when a player tries to join a lobby that is already full."""

    def __init__(self, message: str = LOBBY_FULL_MESSAGE) -> None:
        super().__init__(message)


def phase_title(level_name: str) -> str:
    """Return the on-screen title of a level, or an empty string if unknown."""
    return _PHASE_TITLES.get(level_name, "")


def next_level_url(level_name: str) -> Optional[str]:
    """Return the travel URL of the level after ``level_name``, if there is one."""
    return _NEXT_LEVELS.get(level_name)


@dataclass
class GameInstance:
    """Settings and session data that live for the whole game run."""

    graphics_quality: int = 2
    master_volume: float = 0.8
    is_in_queue: bool = False
    current_session_id: str = "Write Here"
    is_logged_in: bool = True
    user_id: str = "Write Here"
    selected_character: Any = None


class GameState:
    """Match-wide state shared by every player."""

    def __init__(self, level_name: str, hud: Any = None) -> None:
        self.hud = hud
        self.has_authority = True
        self.match_time = 0.0
        self.current_phase = phase_title(level_name)
        self.total_zombie_kills = 0
        self.alive_player_count = 0
        self.dead_player_count = 0
        self.downed_player_count = 0
        self.announcement_message = ""
        self.objective_message = ""
        self.event_alert_message = ""

    def tick(self, delta_time: float, alive_players: int) -> None:
        """Advance the clock and refresh the count of players still standing."""
        if not self.has_authority:
            return
        self.match_time += delta_time
        if self.alive_player_count != alive_players:
            self.alive_player_count = alive_players
            self._on_alive_player_count_changed()
        if self.alive_player_count == 0 and not self.announcement_message:
            self.announcement_message = ALL_DEAD_MESSAGE
            self._on_announcement_changed()

    def add_total_zombie_kill(self) -> None:
        self.total_zombie_kills += 1
        logger.info("total zombie kills: %d", self.total_zombie_kills)
        if self.hud is not None:
            self.hud.display_total_zombie_kills(self.total_zombie_kills)

    def set_objective_message(self, message: str) -> None:
        self.objective_message = message
        if self.hud is not None:
            self.hud.display_objective_message(self.objective_message)

    def _on_alive_player_count_changed(self) -> None:
        logger.info("alive players: %d", self.alive_player_count)
        if self.hud is not None:
            self.hud.display_alive_player_count(self.alive_player_count)

    def _on_announcement_changed(self) -> None:
        logger.info("announcement: %s", self.announcement_message)
        # The announcement line is filled with the current objective text.
        if self.hud is not None:
            self.hud.display_announcement_message(self.objective_message)


class PlayerState:
    """Per-player statistics shared with every client."""

    def __init__(self, hud: Any = None) -> None:
        self.hud = hud
        self.player_nickname = "Player0"
        self.character_class = "Default"
        self.zombie_kills = 0
        self.total_damage_dealt = 0.0
        self.down_count = 0
        self.assist_count = 0
        self.character_status = CharacterStatus.ALIVE
        self.current_exp = 0
        self.character_level = 1

    def add_zombie_kill(self) -> None:
        self.zombie_kills += 1
        logger.info("zombie kills: %d", self.zombie_kills)
        if self.hud is not None:
            self.hud.display_zombie_kills(self.zombie_kills)


class LobbyGameMode:
    """Waiting room that starts the match once four players have joined."""

    def __init__(self, has_authority: bool = True) -> None:
        self.has_authority = has_authority
        self.connected_players = 0
        self.players: List[Any] = []
        self.match_state = MatchState.WAITING_TO_START
        self.travel_url: Optional[str] = None

    def pre_login(self, options: str, address: str, unique_id: Any) -> None:
        """Refuse a joining player when the lobby is full."""
        if self.connected_players >= MAX_LOBBY_PLAYERS:
            logger.warning("login refused: lobby is full")
            raise LobbyFullError()

    def post_login(self, player: Any) -> Optional[str]:
        """Count a newly joined player and start the match if it is ready."""
        self.players.append(player)
        self.connected_players += 1
        logger.info("player joined: %d connected", self.connected_players)
        return self.start_match_if_ready()

    def start_match_if_ready(self) -> Optional[str]:
        """Start the match and return the first level's URL once four players are in."""
        if self.match_state.has_started or self.connected_players != MAX_LOBBY_PLAYERS:
            return None
        if not self.has_authority:
            return None
        self.match_state = MatchState.IN_PROGRESS
        self.travel_url = FIRST_PHASE_URL
        return self.travel_url


class InGameMode:
    """Rules for a running level: match state and travel to the next level."""

    def __init__(self, level_name: str, has_authority: bool = True) -> None:
        self.level_name = level_name
        self.has_authority = has_authority
        self.match_state = MatchState.WAITING_TO_START
        self.travel_url: Optional[str] = None

    def start_match(self) -> None:
        if self.match_state.has_started:
            return
        self.match_state = MatchState.IN_PROGRESS

    def end_match(self) -> None:
        if self.is_match_in_progress():
            self.match_state = MatchState.WAITING_POST_MATCH

    def is_match_in_progress(self) -> bool:
        return self.match_state is MatchState.IN_PROGRESS

    def proceed_to_next_level(self) -> Optional[str]:
        """Return the URL travelled to, or None when there is no next level."""
        if not self.has_authority:
            return None
        url = next_level_url(self.level_name)
        if url is None:
            logger.warning("game over: no level follows %s", self.level_name)
        self.travel_url = url
        return url