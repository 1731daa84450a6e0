import pytest

from outbreak.defines import WeaponData
from outbreak.hud import Hud
from outbreak.weapons import (
    SHOT_DAMAGE,
    AssaultRifle,
    CameraShake,
    ShotResult,
    SubmachineGun,
    Weapon,
)


def make_data(**overrides):
    values = dict(
        magazine_capacity=30,
        current_ammo=30,
        total_ammo=90,
        fire_frequency=0.25,
        reload_duration=2.0,
        trace_max_distance=1000.0,
    )
    values.update(overrides)
    return WeaponData(**values)


def zombie_tracer(weapon):
    return ShotResult(trace_end=(1000.0, 0.0, 0.0), impact_point=(5.0, 0.0, 0.0), hit_zombie=True)


def wall_tracer(weapon):
    return ShotResult(trace_end=(1000.0, 0.0, 0.0), impact_point=(5.0, 0.0, 0.0), hit_zombie=False)


def miss_tracer(weapon):
    return ShotResult(trace_end=(1000.0, 0.0, 0.0))


def make_hud():
    hud = Hud()
    hud.begin_play()
    return hud


def test_camera_shake_matches_recoil_settings():
    shake = CameraShake()
    assert shake.oscillation_duration == 0.08
    assert shake.oscillation_blend_in_time == 0.05
    assert shake.oscillation_blend_out_time == 0.05
    assert (shake.pitch_amplitude, shake.pitch_frequency) == (1.0, 10.0)
    assert (shake.yaw_amplitude, shake.yaw_frequency) == (1.0, 10.0)


def test_start_fire_shoots_immediately():
    data = make_data()
    rifle = AssaultRifle(data, tracer=zombie_tracer)
    rifle.start_fire()
    assert rifle.data.current_ammo == data.magazine_capacity - 1
    assert rifle.sounds_played == 1
    assert rifle.camera_shakes == 1
    assert rifle.is_firing


def test_zombie_hit_deals_point_damage():
    rifle = AssaultRifle(make_data(), tracer=zombie_tracer)
    result = rifle.make_shot()
    assert result.damage == SHOT_DAMAGE
    assert rifle.last_shot == result


def test_non_zombie_hit_deals_no_damage():
    rifle = AssaultRifle(make_data(), tracer=wall_tracer)
    result = rifle.make_shot()
    assert result.hit
    assert result.damage == 0.0


def test_miss_tracer_line_ends_at_trace_end():
    rifle = AssaultRifle(make_data(), tracer=miss_tracer)
    result = rifle.make_shot()
    assert not result.hit
    assert rifle.tracer_lines == [("Muzzle_AR", (1000.0, 0.0, 0.0))]


def test_shot_without_tracer_still_spends_ammo():
    data = make_data()
    rifle = AssaultRifle(data)
    assert rifle.make_shot() is None
    assert rifle.data.current_ammo == data.magazine_capacity - 1


def test_tick_keeps_firing_until_stopped():
    data = make_data()
    rifle = AssaultRifle(data, tracer=zombie_tracer)
    rifle.start_fire()
    rifle.tick(0.5)
    assert rifle.sounds_played == 3
    rifle.stop_fire()
    rifle.tick(1.0)
    assert rifle.sounds_played == 3
    assert rifle.data.current_ammo == data.magazine_capacity - 3


def test_negative_delta_is_rejected():
    rifle = AssaultRifle(make_data())
    with pytest.raises(ValueError):
        rifle.tick(-0.1)


def test_reload_refused_when_magazine_full():
    rifle = AssaultRifle(make_data())
    assert rifle.reload() is False
    assert not rifle.is_reloading()


def test_reload_refused_without_reserve():
    rifle = AssaultRifle(make_data(current_ammo=3, total_ammo=0))
    assert rifle.reload() is False
    assert not rifle.is_reloading()


def test_reload_completes_after_duration():
    data = make_data(current_ammo=10)
    rifle = AssaultRifle(data, hud=make_hud())
    assert rifle.reload() is True
    assert rifle.is_reloading()
    rifle.tick(data.reload_duration / 2)
    assert rifle.data.current_ammo == data.current_ammo
    rifle.tick(data.reload_duration / 2)
    assert not rifle.is_reloading()
    assert rifle.data.current_ammo == data.magazine_capacity
    assert rifle.data.current_ammo + rifle.data.total_ammo == data.current_ammo + data.total_ammo


def test_partial_reload_when_reserve_is_short():
    data = make_data(current_ammo=20, total_ammo=4)
    rifle = AssaultRifle(data)
    rifle.reload()
    rifle.tick(data.reload_duration)
    assert rifle.data.current_ammo == data.current_ammo + data.total_ammo
    assert rifle.data.total_ammo == 0


def test_reload_stops_automatic_fire():
    rifle = AssaultRifle(make_data(), tracer=zombie_tracer)
    rifle.start_fire()
    rifle.reload()
    assert not rifle.is_firing
    assert rifle.make_shot() is None


def test_empty_magazine_start_fire_reloads():
    data = make_data(current_ammo=0)
    rifle = AssaultRifle(data)
    rifle.start_fire()
    assert rifle.is_reloading()
    assert rifle.sounds_played == 0


def test_automatic_fire_runs_dry_then_reloads():
    data = make_data(magazine_capacity=2, current_ammo=2, total_ammo=10, reload_duration=1.0)
    rifle = AssaultRifle(data, tracer=zombie_tracer)
    rifle.start_fire()
    rifle.tick(0.25)
    assert rifle.data.current_ammo == 0
    rifle.tick(0.25)
    assert rifle.is_reloading()
    assert not rifle.is_firing
    rifle.tick(1.0)
    assert rifle.data.current_ammo == data.magazine_capacity
    assert rifle.data.total_ammo == data.total_ammo - data.magazine_capacity


def test_hud_shows_ammo_after_shot():
    hud = make_hud()
    data = make_data()
    rifle = AssaultRifle(data, hud=hud, tracer=zombie_tracer)
    rifle.make_shot()
    expected = f"{data.magazine_capacity - 1} / {data.total_ammo}"
    assert hud.widget.ammo_block.text == expected


def test_load_from_table_uses_row_and_copies():
    row = make_data(magazine_capacity=25, current_ammo=25)
    table = {"WeaponAR": row}
    rifle = AssaultRifle()
    assert rifle.load_from_table(table) is True
    assert rifle.data == row
    rifle.make_shot()
    assert row.current_ammo == 25


def test_load_from_table_missing_row():
    rifle = AssaultRifle()
    assert rifle.load_from_table({"WeaponSMG": make_data()}) is False
    assert rifle.load_from_table(None) is False
    assert Weapon().load_from_table({"WeaponAR": make_data()}) is False


def test_default_weapon_uses_rifle_sound():
    rifle = AssaultRifle()
    assert rifle.data.shot_sound == "/Game/Sounds/AR_Single.AR_Single"
    assert rifle.data.current_ammo == rifle.data.magazine_capacity


def test_smg_single_shot_without_auto_fire():
    data = make_data()
    smg = SubmachineGun(data, tracer=zombie_tracer)
    smg.start_fire()
    smg.tick(1.0)
    assert smg.data.current_ammo == data.magazine_capacity - 1
    assert not smg.is_firing
    assert smg.sounds_played == 2


def test_smg_auto_fire_repeats():
    data = make_data()
    smg = SubmachineGun(data, tracer=zombie_tracer, auto_fire=True)
    smg.start_fire()
    smg.tick(0.5)
    assert smg.data.current_ammo == data.magazine_capacity - 3
    assert smg.tracer_lines[0] == ("Muzzle_SMG", (5.0, 0.0, 0.0))


def test_smg_server_shot_does_not_update_hud():
    hud = make_hud()
    smg = SubmachineGun(make_data(), hud=hud, tracer=zombie_tracer)
    result = smg.server_make_shot()
    assert result.damage == SHOT_DAMAGE
    assert hud.widget.ammo_block.text == ""


def test_smg_rejects_shot_when_empty():
    smg = SubmachineGun(make_data(current_ammo=0, total_ammo=0), tracer=zombie_tracer)
    assert smg.can_make_shot() is False
    assert smg.server_make_shot() is None
    assert smg.data.current_ammo == 0


def test_smg_rejects_shot_while_reloading():
    smg = SubmachineGun(make_data(current_ammo=5), tracer=zombie_tracer)
    smg.reload()
    assert smg.can_make_shot() is False
    assert smg.server_make_shot() is None


def test_smg_local_make_shot_reloads_when_empty():
    data = make_data(current_ammo=0)
    smg = SubmachineGun(data)
    assert smg.make_shot() is None
    assert smg.is_reloading()
    smg.tick(data.reload_duration)
    assert smg.data.current_ammo == data.magazine_capacity