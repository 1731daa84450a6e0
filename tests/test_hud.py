from types import SimpleNamespace

import pytest

from outbreak.hud import Hud, TextBlock, Visibility, Widget, format_match_time


def test_match_time_example():
    assert format_match_time(125.7) == "02:05"


@pytest.mark.parametrize("seconds", [0, 0.9, 59.99, 60, 61.5, 3599, 3600, 7322.2])
def test_match_time_round_trip(seconds):
    minutes_text, seconds_text = format_match_time(seconds).split(":")
    assert len(seconds_text) == 2
    assert len(minutes_text) >= 2
    assert int(seconds_text) < 60
    assert int(minutes_text) * 60 + int(seconds_text) == int(seconds)


def test_alive_player_count_text():
    widget = Widget()
    widget.set_alive_player_count_text(4)
    assert widget.alive_player_count_block.text == "Alive Player : 4"


@pytest.mark.parametrize("kills", [0, 3, 128])
def test_kill_texts(kills):
    widget = Widget()
    widget.set_total_zombie_kills_text(kills)
    widget.set_zombie_kills_text(kills)
    assert widget.total_zombie_kills_block.text == "Total Kills : " + str(kills)
    assert widget.zombie_kills_block.text == "Kills : " + str(kills)


def test_ammo_text():
    widget = Widget()
    widget.set_ammo_text(30, 90)
    assert widget.ammo_block.text.split(" / ") == ["30", "90"]


def test_missing_block_is_skipped():
    widget = Widget(ammo_block=None)
    widget.set_ammo_text(1, 2)
    widget.set_cutscene_mode(True)
    assert widget.ammo_block is None
    assert widget.weapon_type_block.visibility is Visibility.HIDDEN


def test_cutscene_mode_hides_all_but_objective():
    widget = Widget()
    widget.set_cutscene_mode(True)
    hidden = widget._cutscene_elements()
    assert all(e.visibility is Visibility.HIDDEN for e in hidden)
    assert widget.objective_block.visibility is Visibility.VISIBLE
    widget.set_cutscene_mode(False)
    assert all(e.visibility is Visibility.VISIBLE for e in hidden)


def test_tick_reads_game_state():
    widget = Widget()
    state = SimpleNamespace(match_time=61.0, current_phase="LEVEL 1 : Lush Forest")
    widget.tick(state)
    assert widget.match_time_block.text == format_match_time(61.0)
    assert widget.phase_block.text == "LEVEL 1 : Lush Forest"


def test_begin_play_clears_messages():
    widget = Widget(objective_block=TextBlock(text="old"), announcement_block=TextBlock(text="old"))
    widget.visibility = Visibility.HIDDEN
    hud = Hud()
    hud.begin_play(widget)
    assert hud.widget is widget
    assert widget.objective_block.text == ""
    assert widget.announcement_block.text == ""
    assert widget.visibility is Visibility.VISIBLE


def test_display_messages_reveal_widget():
    hud = Hud()
    hud.begin_play()
    hud.widget.visibility = Visibility.HIDDEN
    hud.display_objective_message("escape")
    assert hud.widget.objective_block.text == "escape"
    assert hud.widget.visibility is Visibility.VISIBLE


def test_display_ammo_does_not_reveal_widget():
    hud = Hud()
    hud.begin_play()
    hud.widget.visibility = Visibility.HIDDEN
    hud.display_ammo(5, 10)
    hud.display_weapon_type("SMG")
    assert hud.widget.ammo_block.text.split(" / ") == ["5", "10"]
    assert hud.widget.weapon_type_block.text == "SMG"
    assert hud.widget.visibility is Visibility.HIDDEN
    hud.display_zombie_kills(2)
    assert hud.widget.visibility is Visibility.VISIBLE


def test_hud_cutscene_mode_forwards():
    hud = Hud()
    hud.begin_play()
    hud.set_cutscene_mode(True)
    assert hud.widget.minimap_image.visibility is Visibility.HIDDEN
    hud.set_cutscene_mode(False)
    assert hud.widget.minimap_image.visibility is Visibility.VISIBLE


def test_hud_without_widget_ignores_updates():
    hud = Hud()
    hud.display_alive_player_count(3)
    hud.display_announcement_message("x")
    assert hud.widget is None