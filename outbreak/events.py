"""Level events: invisible walls, cutscenes and the start/end safe zones."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Iterable, Optional, Set, Tuple

logger = logging.getLogger(__name__)

OBJECTIVE_DELAY = 1.0
"""Seconds after a cutscene starts before its objective message is shown."""

_OBJECTIVES = {
    "FirstPhase": "목표 : 숲을 탈출하라 !!",
    "SecondPhase": "목표 : 마을을 탈출하라 !!",
    "ThirdPhase": "목표 : 건물 10층에 도달하라 !!",
}
_FINAL_OBJECTIVE = "목표 : 보스를 처치하고 탈출하라 !"

Vector = Tuple[float, float, float]


def objective_for_level(level_name: str) -> str:
    """Return the objective shown when players leave a level's start zone."""
    return _OBJECTIVES.get(level_name, _FINAL_OBJECTIVE)


class CollisionMode(Enum):
    QUERY_AND_PHYSICS = "query_and_physics"
    NO_COLLISION = "no_collision"


@dataclass
class WallBox:
    """One blocking box of an invisible wall."""

    extent: Vector
    location: Vector
    collision: CollisionMode = CollisionMode.QUERY_AND_PHYSICS
    hidden_in_game: bool = True

    @property
    def blocks(self) -> bool:
        return self.collision is not CollisionMode.NO_COLLISION


@dataclass
class InvisibleWall:
    """A gate of three hidden boxes that keeps players in the start area."""

    left: WallBox = field(
        default_factory=lambda: WallBox((50.0, 10.0, 200.0), (0.0, 0.0, 200.0))
    )
    right: WallBox = field(
        default_factory=lambda: WallBox((50.0, 10.0, 200.0), (400.0, 0.0, 200.0))
    )
    horizontal: WallBox = field(
        default_factory=lambda: WallBox((200.0, 10.0, 50.0), (200.0, 0.0, 400.0))
    )

    @property
    def boxes(self) -> Tuple[WallBox, WallBox, WallBox]:
        return (self.left, self.right, self.horizontal)

    @property
    def blocks(self) -> bool:
        return any(box.blocks for box in self.boxes)

    def disable(self) -> None:
        """Turn collision off on every box so players can pass."""
        for box in self.boxes:
            box.collision = CollisionMode.NO_COLLISION


@dataclass
class Controllable:
    """The locally controlled player whose input a cutscene takes over."""

    is_local: bool = True
    input_enabled: bool = True
    movement_enabled: bool = True
    is_cutscene_playing: bool = False


class CutsceneManager:
    """Plays a level cutscene, freezing the local player while it runs."""

    def __init__(
        self,
        game_state: Any = None,
        hud: Any = None,
        player: Optional[Controllable] = None,
        is_authority: bool = True,
    ) -> None:
        self.game_state = game_state
        self.hud = hud
        self.player = player
        self.is_authority = is_authority
        self.has_played_cutscene = False
        self.pending_objective_message = ""
        self.sequence: Any = None
        self.is_playing = False
        self.objective_delay = OBJECTIVE_DELAY

    def _set_hud_cutscene_mode(self, enable: bool) -> None:
        if self.hud is not None:
            self.hud.set_cutscene_mode(enable)

    def play_cutscene(self, sequence: Any, objective_message: str) -> bool:
        """Start ``sequence``; return False when there is nothing to play.

        The objective message is kept until :meth:`show_objective_message`
        is called, ``objective_delay`` seconds into the cutscene.
        """
        if sequence is None:
            return False
        self.pending_objective_message = objective_message
        self._set_hud_cutscene_mode(True)
        if self.player is not None and self.player.is_local:
            self.player.input_enabled = False
            self.player.movement_enabled = False
            self.player.is_cutscene_playing = True
        self.sequence = sequence
        self.is_playing = True
        return True

    def show_objective_message(self) -> None:
        """Publish the pending objective and keep the overlay hidden."""
        if self.is_authority and self.game_state is not None:
            self.game_state.set_objective_message(self.pending_objective_message)
        self._set_hud_cutscene_mode(True)

    def finish(self) -> None:
        """End the cutscene: give control back and restore the overlay."""
        if self.player is not None and self.player.is_local:
            self.player.input_enabled = True
            self.player.movement_enabled = True
            self.player.is_cutscene_playing = False
        if self.is_authority and self.game_state is not None:
            self.game_state.set_objective_message("")
        self._set_hud_cutscene_mode(False)
        self.is_playing = False


class SafeZoneController:
    """Tracks players in a level's start and end zones.

    Once the last player leaves the start zone the wall opens and the
    cutscene plays; once every player reaches the end zone the match ends
    and the server travels to the next level.
    """

    def __init__(
        self,
        game_mode: Any = None,
        cutscene_manager: Optional[CutsceneManager] = None,
        invisible_wall: Optional[InvisibleWall] = None,
        level_name: str = "",
        cutscene_sequence: Any = None,
    ) -> None:
        self.game_mode = game_mode
        self.cutscene_manager = cutscene_manager
        self.invisible_wall = invisible_wall
        self.level_name = level_name
        self.cutscene_sequence = cutscene_sequence
        self.start_zone_collision = CollisionMode.QUERY_AND_PHYSICS
        self.players_in_start_zone: Set[Hashable] = set()
        self.players_in_end_zone: Set[Hashable] = set()

    @property
    def _start_zone_active(self) -> bool:
        return self.start_zone_collision is not CollisionMode.NO_COLLISION

    def begin_play(self, players_in_start_zone: Iterable[Hashable] = ()) -> None:
        """Register the players already standing in the start zone."""
        for character in players_in_start_zone:
            if character is not None:
                self.players_in_start_zone.add(character)

    def on_start_zone_enter(self, character: Optional[Hashable]) -> None:
        if character is None or not self._start_zone_active:
            return
        if character not in self.players_in_start_zone:
            self.players_in_start_zone.add(character)
            logger.info("%s entered the start zone", character)

    def on_start_zone_exit(self, character: Optional[Hashable]) -> None:
        if character is None or not self._start_zone_active:
            return
        logger.info("%s left the start zone", character)
        self.players_in_start_zone.discard(character)
        if self.players_in_start_zone:
            return
        manager = self.cutscene_manager
        if manager is None or manager.has_played_cutscene:
            return
        if self.invisible_wall is not None:
            self.invisible_wall.disable()
        manager.play_cutscene(self.cutscene_sequence, objective_for_level(self.level_name))
        manager.has_played_cutscene = True
        self.start_zone_collision = CollisionMode.NO_COLLISION

    def on_end_zone_enter(
        self, character: Optional[Hashable], total_players: int
    ) -> Optional[str]:
        """Record an arrival; return the travel URL once everyone is in."""
        if character is None:
            return None
        logger.info("%s entered the end zone", character)
        self.players_in_end_zone.add(character)
        if len(self.players_in_end_zone) != total_players:
            return None
        if self.game_mode is None or not self.game_mode.is_match_in_progress():
            return None
        self.game_mode.end_match()
        return self.game_mode.proceed_to_next_level()