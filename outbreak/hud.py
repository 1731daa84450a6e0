"""Heads-up display: the in-game widget and the HUD that drives it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


class Visibility(Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    COLLAPSED = "collapsed"


@dataclass
class _Element:
    visibility: Visibility = Visibility.VISIBLE


@dataclass
class TextBlock(_Element):
    text: str = ""


def format_match_time(time: float) -> str:
    """Format elapsed seconds as ``MM:SS``."""
    total = math.floor(time)
    minutes, seconds = divmod(abs(total), 60)
    if total < 0:
        minutes, seconds = -minutes, -seconds
    return f"{minutes:02d}:{seconds:02d}"


def _write(block: Optional[TextBlock], text: str) -> None:
    if block is not None:
        block.text = text


@dataclass
class Widget:
    """The on-screen overlay; any element may be absent."""

    minimap_image: Optional[_Element] = field(default_factory=_Element)
    aim_image: Optional[_Element] = field(default_factory=_Element)
    match_time_block: Optional[TextBlock] = field(default_factory=TextBlock)
    phase_block: Optional[TextBlock] = field(default_factory=TextBlock)
    alive_player_count_block: Optional[TextBlock] = field(default_factory=TextBlock)
    objective_block: Optional[TextBlock] = field(default_factory=TextBlock)
    announcement_block: Optional[TextBlock] = field(default_factory=TextBlock)
    total_zombie_kills_block: Optional[TextBlock] = field(default_factory=TextBlock)
    zombie_kills_block: Optional[TextBlock] = field(default_factory=TextBlock)
    ammo_block: Optional[TextBlock] = field(default_factory=TextBlock)
    weapon_type_block: Optional[TextBlock] = field(default_factory=TextBlock)
    visibility: Visibility = Visibility.VISIBLE

    def _cutscene_elements(self) -> Tuple[Optional[_Element], ...]:
        return (
            self.minimap_image,
            self.aim_image,
            self.match_time_block,
            self.phase_block,
            self.alive_player_count_block,
            self.announcement_block,
            self.total_zombie_kills_block,
            self.zombie_kills_block,
            self.ammo_block,
            self.weapon_type_block,
        )

    def tick(self, game_state: Any) -> None:
        """Refresh the match clock and phase from the game state."""
        if game_state is None:
            return
        self.set_match_time_text(game_state.match_time)
        self.set_current_phase_text(game_state.current_phase)

    def set_cutscene_mode(self, enable: bool) -> None:
        """Hide the gameplay overlay during a cutscene, or show it again."""
        visibility = Visibility.HIDDEN if enable else Visibility.VISIBLE
        for element in self._cutscene_elements():
            if element is not None:
                element.visibility = visibility

    def set_match_time_text(self, time: float) -> None:
        _write(self.match_time_block, format_match_time(time))

    def set_current_phase_text(self, phase: str) -> None:
        _write(self.phase_block, phase)

    def set_alive_player_count_text(self, count: int) -> None:
        _write(self.alive_player_count_block, f"Alive Player : {count}")

    def set_objective_text(self, text: str) -> None:
        _write(self.objective_block, text)

    def set_announcement_text(self, text: str) -> None:
        _write(self.announcement_block, text)

    def set_total_zombie_kills_text(self, total_kills: int) -> None:
        _write(self.total_zombie_kills_block, f"Total Kills : {total_kills}")

    def set_zombie_kills_text(self, kills: int) -> None:
        _write(self.zombie_kills_block, f"Kills : {kills}")

    def set_ammo_text(self, current_ammo: int, total_ammo: int) -> None:
        _write(self.ammo_block, f"{current_ammo} / {total_ammo}")

    def set_weapon_type_text(self, weapon_type: str) -> None:
        _write(self.weapon_type_block, weapon_type)


@dataclass
class Hud:
    """Routes game events to the widget, if one is shown."""

    widget: Optional[Widget] = None

    def begin_play(self, widget: Optional[Widget] = None) -> None:
        """Show the widget with empty objective and announcement lines."""
        self.widget = widget if widget is not None else Widget()
        self.widget.visibility = Visibility.VISIBLE
        self.widget.set_objective_text("")
        self.widget.set_announcement_text("")

    def _reveal(self) -> None:
        if self.widget is not None:
            self.widget.visibility = Visibility.VISIBLE

    def set_cutscene_mode(self, enable: bool) -> None:
        if self.widget is not None:
            self.widget.set_cutscene_mode(enable)

    def display_alive_player_count(self, count: int) -> None:
        if self.widget is not None:
            self.widget.set_alive_player_count_text(count)
            self._reveal()

    def display_objective_message(self, message: str) -> None:
        if self.widget is not None:
            self.widget.set_objective_text(message)
            self._reveal()

    def display_announcement_message(self, message: str) -> None:
        if self.widget is not None:
            self.widget.set_announcement_text(message)
            self._reveal()

    def display_total_zombie_kills(self, total_kills: int) -> None:
        if self.widget is not None:
            self.widget.set_total_zombie_kills_text(total_kills)
            self._reveal()

    def display_zombie_kills(self, kills: int) -> None:
        if self.widget is not None:
            self.widget.set_zombie_kills_text(kills)
            self._reveal()

    def display_ammo(self, current_ammo: int, total_ammo: int) -> None:
        if self.widget is not None:
            self.widget.set_ammo_text(current_ammo, total_ammo)

    def display_weapon_type(self, weapon_type: str) -> None:
        if self.widget is not None:
            self.widget.set_weapon_type_text(weapon_type)