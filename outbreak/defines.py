"""Shared enumerations and data records for characters and weapons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from typing import Optional


class _LabelledEnum(IntEnum):
    """Integer enum whose members carry a canonical name and a display name."""

    def __new__(cls, value: int, label: str, display: Optional[str] = None):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        member.display_label = display if display is not None else label
        return member


class AvoidanceGroupType(IntFlag):
    NONE = 0
    PLAYER = 1 << 0
    ZOMBIE = 1 << 1


class CharacterBodyType(_LabelledEnum):
    NORMAL = 0, "Normal"
    MUSCLE = 1, "Muscle"
    FAT = 2, "Fat"


class ZombieAnimationType(_LabelledEnum):
    NONE = 0, "None"
    IDLE = 1, "Idle"
    WANDER = 2, "Wander"
    ALERT = 3, "Alert"
    CHASE_WALK = 4, "ChaseWalk"
    CHASE_RUN = 5, "ChaseRun"
    ATTACK = 6, "Attack"
    STUN = 7, "Stun"
    DIE = 8, "Die"


class ZombieStateType(_LabelledEnum):
    NONE = 0, "None", "None"
    IDLE = 1, "Idle", "휴면"
    WANDER = 2, "Wander", "배회"
    ALERT = 3, "Alert", "경계"
    CHASE = 4, "Chase", "추적"
    ATTACK = 5, "Attack", "공격"
    STUN = 6, "Stun", "기절"
    DIE = 7, "Die", "사망"


class CameraMode(_LabelledEnum):
    FPS = 0, "FPS"
    TOP_VIEW = 1, "TopView"


class PlayerControlType(_LabelledEnum):
    SHOULDER = 0, "Shoulder"
    TOP = 1, "Top"


class CharacterType(_LabelledEnum):
    NONE = 0, "None"
    PLAYER = 1, "Player", "플레이어"
    ZOMBIE = 2, "Zombie", "좀비"


class PlayerType(_LabelledEnum):
    NONE = 0, "None"
    PLAYER1 = 1, "Player1", "플레이어1"
    PLAYER2 = 2, "Player2", "플레이어2"
    PLAYER3 = 3, "Player3", "플레이어3"
    PLAYER4 = 4, "Player4", "플레이어4"


class ZombieType(_LabelledEnum):
    NONE = 0, "None"
    NORMAL = 1, "Normal", "일반 좀비"
    SPECIAL = 2, "Special", "특수 좀비"
    BOSS = 3, "Boss", "보스 좀비"


class ZombieSubType(_LabelledEnum):
    NONE = 0, "None"
    WALKER = 1, "Walker", "걷는 좀비"
    RUNNER = 2, "Runner", "뛰는 좀비"
    FAT = 3, "Fat", "뚱뚱 좀비"
    SOLDIER = 4, "Soldier", "군인 좀비"
    GYM_RAT = 5, "GymRat", "헬창 좀비"
    RADIOACTIVE = 6, "Radioactive", "방사능 좀비"
    GHOST = 7, "Ghost", "유체화 좀비"
    SHIELD = 8, "Shield", "방패 좀비"
    BERSERKER = 9, "Berserker", "광분화 좀비"


def enum_to_string(value: Enum) -> str:
    """Return the canonical name of an enum member."""
    if not isinstance(value, Enum):
        raise TypeError(f"enum_to_string expects an enum member, got {type(value).__name__}")
    label = getattr(value, "label", None)
    if label is not None:
        return label
    return value.name or str(value.value)


def display_name(value: Enum) -> str:
    """Return the human-facing name of an enum member."""
    if not isinstance(value, Enum):
        raise TypeError(f"display_name expects an enum member, got {type(value).__name__}")
    display = getattr(value, "display_label", None)
    if display is not None:
        return display
    return enum_to_string(value)


@dataclass(kw_only=True)
class CharacterBaseData:
    max_walk_speed: float = 0.0
    max_run_speed: float = 0.0
    is_can_run: bool = False
    attack_rate: float = 0.0
    regen_rate: int = 0
    max_health: int = 0
    max_extra_health: int = 0


@dataclass(kw_only=True)
class PlayerData(CharacterBaseData):
    player_type: PlayerType = PlayerType.NONE
    bottom_health: int = 0
    max_crouch_speed: float = 0.0


@dataclass(kw_only=True)
class ZombieData(CharacterBaseData):
    zombie_type: ZombieType = ZombieType.NONE
    zombie_sub_type: ZombieSubType = ZombieSubType.NONE
    max_wander_speed: float = 0.0
    attack_damage: int = 0
    attack_range: float = 0.0
    sight_radius: float = 0.0
    lose_sight_radius: float = 0.0
    peripheral_vision_angle_degrees: float = 0.0
    turn_rate: float = 0.0


@dataclass(kw_only=True)
class WeaponData:
    trace_max_distance: float = 0.0
    bullet_spread: float = 0.0
    shot_sound: Optional[str] = None
    fire_frequency: float = 0.0
    magazine_capacity: int = 0
    total_ammo: int = 0
    current_ammo: int = 0
    max_ammo: int = 0
    reload_duration: float = 0.0
    is_reloading: bool = False