"""Firearms: ammunition, firing cadence, reloading and hit resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from outbreak.defines import WeaponData

logger = logging.getLogger(__name__)

Vector = Tuple[float, float, float]

SHOT_DAMAGE = 10.0
"""Point damage dealt to a zombie by one bullet."""

DEFAULT_SHOT_SOUND = "/Game/Sounds/AR_Single.AR_Single"
WEAPON_DATA_TABLE = "/Script/Engine.DataTable'/Game/Data/WeaponDataTable.WeaponDataTable'"


@dataclass(frozen=True)
class CameraShake:
    """Recoil shake applied to the shooter's camera on every shot."""

    oscillation_duration: float = 0.08
    oscillation_blend_in_time: float = 0.05
    oscillation_blend_out_time: float = 0.05
    pitch_amplitude: float = 1.0
    pitch_frequency: float = 10.0
    yaw_amplitude: float = 1.0
    yaw_frequency: float = 10.0


@dataclass(frozen=True)
class ShotResult:
    """Outcome of one line trace from the shooter's view point."""

    trace_end: Vector
    impact_point: Optional[Vector] = None
    hit_zombie: bool = False
    damage: float = 0.0

    @property
    def hit(self) -> bool:
        return self.impact_point is not None

    @property
    def end_point(self) -> Vector:
        """Where the tracer line stops: the impact, or the trace end on a miss."""
        return self.impact_point if self.impact_point is not None else self.trace_end


Tracer = Callable[["Weapon"], Optional[ShotResult]]


@dataclass
class _Timer:
    interval: float
    callback: Callable[[], Any]
    looping: bool
    remaining: float = field(init=False)

    def __post_init__(self) -> None:
        self.remaining = self.interval


class Weapon:
    """A hitscan firearm with a magazine, a reserve and timed reloads.

    ``tracer`` resolves where a shot lands; it returns None when the weapon
    has no owner to aim with. Timers advance through :meth:`tick`.
    """

    table_row: Optional[str] = None
    muzzle_socket_name: str = "Muzzle"
    mesh_path: Optional[str] = None

    def __init__(
        self,
        data: Optional[WeaponData] = None,
        hud: Any = None,
        tracer: Optional[Tracer] = None,
        auto_fire: bool = False,
    ) -> None:
        self.hud = hud
        self.tracer = tracer
        self.auto_fire = auto_fire
        self.camera_shake = CameraShake()
        self.camera_shakes = 0
        self.sounds_played = 0
        self.last_shot: Optional[ShotResult] = None
        self.tracer_lines: list[Tuple[str, Vector]] = []
        self._reloading = False
        self._timers: Dict[str, _Timer] = {}
        if data is None:
            self.data = WeaponData(shot_sound=DEFAULT_SHOT_SOUND)
            self.data.current_ammo = self.data.magazine_capacity
        else:
            self.initialize_weapon_data(data)

    # -- configuration -------------------------------------------------

    def initialize_weapon_data(self, data: WeaponData) -> None:
        """Take a copy of ``data`` as this weapon's statistics."""
        self.data = replace(data)

    def load_from_table(self, table: Optional[Mapping[str, WeaponData]]) -> bool:
        """Load this weapon's row from a data table; return whether it was found."""
        if table is None:
            logger.warning("[%s] no weapon data table is connected", type(self).__name__)
            return False
        if self.table_row is None or self.table_row not in table:
            logger.warning("[%s] row %r not found in weapon data table", type(self).__name__, self.table_row)
            return False
        self.initialize_weapon_data(table[self.table_row])
        return True

    # -- timers ---------------------------------------------------------

    def _set_timer(self, name: str, interval: float, callback: Callable[[], Any], looping: bool) -> None:
        # A non-positive rate clears the timer instead of scheduling it.
        if interval <= 0:
            self._timers.pop(name, None)
            return
        self._timers[name] = _Timer(interval, callback, looping)

    def tick(self, delta_time: float) -> None:
        """Advance time, running every timer that falls due, in order."""
        if delta_time < 0:
            raise ValueError("delta_time must not be negative")
        left = delta_time
        while self._timers:
            name, timer = min(self._timers.items(), key=lambda item: item[1].remaining)
            if timer.remaining > left:
                break
            step = timer.remaining
            left -= step
            for other in self._timers.values():
                other.remaining -= step
            if timer.looping:
                timer.remaining = timer.interval
            else:
                del self._timers[name]
            timer.callback()
        for timer in self._timers.values():
            timer.remaining -= left

    @property
    def is_firing(self) -> bool:
        return "fire" in self._timers

    # -- effects --------------------------------------------------------

    def _apply_camera_shake(self) -> None:
        self.camera_shakes += 1

    def _play_shot_sound(self) -> None:
        self.sounds_played += 1

    def _resolve(self) -> Optional[ShotResult]:
        if self.tracer is None:
            return None
        result = self.tracer(self)
        if result is None:
            return None
        if result.hit and result.hit_zombie:
            result = replace(result, damage=SHOT_DAMAGE)
        self.last_shot = result
        return result

    # -- firing ---------------------------------------------------------

    def start_fire(self) -> None:
        """Fire at once, then keep firing every ``fire_frequency`` seconds."""
        if self._reloading:
            return
        if self.data.current_ammo <= 0:
            self.reload()
            return
        self.make_shot()
        self._set_timer("fire", self.data.fire_frequency, self.make_shot, True)

    def stop_fire(self) -> None:
        self._timers.pop("fire", None)

    def reload(self) -> bool:
        """Begin a reload; return False when one is not possible or needed."""
        data = self.data
        if self._reloading or data.current_ammo == data.magazine_capacity or data.total_ammo <= 0:
            return False
        self._reloading = True
        self.stop_fire()
        self._set_timer("reload", data.reload_duration, self.finish_reload, False)
        self.notify_ammo_update()
        return True

    def finish_reload(self) -> None:
        """Move rounds from the reserve into the magazine."""
        data = self.data
        needed = data.magazine_capacity - data.current_ammo
        loaded = min(needed, data.total_ammo)
        data.current_ammo += loaded
        data.total_ammo -= loaded
        self._reloading = False
        logger.info("Reloaded: %d / %d", data.current_ammo, data.total_ammo)
        self.notify_ammo_update()

    def make_shot(self) -> Optional[ShotResult]:
        """Spend one round and trace it; reload instead when the magazine is empty."""
        if self._reloading:
            return None
        if self.data.current_ammo <= 0:
            self.stop_fire()
            self.reload()
            return None
        self.data.current_ammo -= 1
        self._apply_camera_shake()
        self._play_shot_sound()
        result = self._resolve()
        if result is None:
            return None
        self.tracer_lines.append((self.muzzle_socket_name, result.end_point))
        self.notify_ammo_update()
        return result

    def is_reloading(self) -> bool:
        return self._reloading

    def notify_ammo_update(self) -> None:
        if self.hud is not None:
            self.hud.display_ammo(self.data.current_ammo, self.data.total_ammo)


class AssaultRifle(Weapon):
    """Fully automatic rifle."""

    table_row = "WeaponAR"
    muzzle_socket_name = "Muzzle_AR"
    mesh_path = "/Game/FPS_Weapon_Pack/SkeletalMeshes/AR2/SM_weapon_AR2.SM_weapon_AR2"


class SubmachineGun(Weapon):
    """Networked submachine gun: shots are resolved by the server."""

    table_row = "WeaponSMG"
    muzzle_socket_name = "Muzzle_SMG"
    mesh_path = "/Game/FPS_Weapon_Pack/SkeletalMeshes/SMG02/SK_weapon_SMG_02.SK_weapon_SMG_02"

    def _play_local_effects(self) -> None:
        self._play_shot_sound()
        self._apply_camera_shake()

    def start_fire(self) -> None:
        """Fire once; keep firing only while the owner has automatic fire selected."""
        if self._reloading:
            return
        if self.data.current_ammo <= 0:
            self.reload()
            return
        self._play_local_effects()
        self.server_make_shot()
        if self.auto_fire:
            self._set_timer("fire", self.data.fire_frequency, self.server_make_shot, True)

    def make_shot(self) -> Optional[ShotResult]:
        """Spend one round locally; reload instead when the magazine is empty."""
        if self._reloading:
            return None
        if self.data.current_ammo <= 0:
            self.stop_fire()
            self.reload()
            return None
        self.data.current_ammo -= 1
        return None

    def can_make_shot(self) -> bool:
        """Server-side check that a shot request is legitimate."""
        return self.data.current_ammo > 0 and not self._reloading

    def server_make_shot(self) -> Optional[ShotResult]:
        """Resolve a shot on the server; a request that fails validation is rejected."""
        if not self.can_make_shot():
            logger.warning("shot request rejected")
            return None
        self.data.current_ammo -= 1
        result = self._resolve()
        if result is None:
            return None
        self._client_shot_ray(result)
        return result

    def _client_shot_ray(self, result: ShotResult) -> None:
        self.tracer_lines.append((self.muzzle_socket_name, result.end_point))
        self._play_local_effects()