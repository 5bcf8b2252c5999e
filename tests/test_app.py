import random

import pygame
import pytest

from territory import config
from territory.app import (
    BLOCK_COLOR,
    BOUNCE_DURATION,
    BOUNCE_HEIGHT,
    LOSE_BACKGROUND_COLOR,
    START_BUTTON_COLOR,
    App,
    Button,
    Screen,
)
from territory.game import PlantKind


@pytest.fixture
def app(tmp_path):
    return App(tmp_path)


def _center(button):
    return (button.x + button.width // 2, button.y + button.height // 2)


def _start(app):
    app.handle_click(_center(app.start_button))


def test_button_contains_edges():
    button = Button(10, 20, 30, 40)
    assert button.contains((10, 20))
    assert button.contains((39, 59))
    assert not button.contains((40, 20))
    assert not button.contains((10, 60))
    assert not button.contains((9, 25))


def test_offset_without_bounce_is_zero():
    button = Button(0, 0, 10, 10)
    assert button.offset(0) == 0
    assert button.offset(500) == 0


def test_bounce_starts_low_and_settles():
    button = Button(0, 0, 10, 10)
    button.bounce()
    assert button.offset(0) == BOUNCE_HEIGHT
    assert button.offset(BOUNCE_DURATION) == 0
    for elapsed in range(0, BOUNCE_DURATION, 40):
        assert 0 <= button.offset(elapsed) <= BOUNCE_HEIGHT


def test_start_button_switches_to_playing(app):
    assert app.screen is Screen.START
    assert app.handle_click((0, 0)) is Screen.START
    assert app.handle_click(_center(app.start_button)) is Screen.PLAYING
    assert app.start_button.bouncing


def test_step_on_start_screen_does_not_tick(app):
    app.step(random.Random(0))
    assert app.game.record == 0


def test_step_while_playing_ticks_game(app):
    _start(app)
    app.step(random.Random(0))
    assert app.game.record == 1
    assert all(block.standing for block in app.game.blocks)


def test_sun_spawns_after_interval_and_can_be_collected(app):
    _start(app)
    rng = random.Random(1)
    ticks = config.SUN_INTERVAL // config.GAME_RATE
    for _ in range(ticks - 1):
        app.step(rng)
    assert app.game.suns == []
    app.step(rng)
    assert len(app.game.suns) == 1
    sun = app.game.suns[0]
    before = app.game.sun
    app.handle_click((sun.x + 1, sun.y + 1))
    assert app.game.suns == []
    assert app.game.sun == before + config.SUN_VALUE


def test_card_click_and_release_plants_cannon(app):
    _start(app)
    before = app.game.sun
    app.handle_click(_center(app.card_buttons[PlantKind.CANNON1]))
    assert app.game.selected[PlantKind.CANNON1] is not None
    assert app.game.sun == before - config.CANNON1_COST
    placed = app.handle_release((200, 400))
    assert len(placed) == 1
    assert app.game.cannons1 == placed
    assert (placed[0].x, placed[0].y) == (200, 400)


def test_card_disabled_during_cooldown(app):
    _start(app)
    card = _center(app.card_buttons[PlantKind.CANNON1])
    app.handle_click(card)
    app.handle_release((200, 400))
    remaining = app.game.sun
    app.handle_click(card)
    assert app.game.selected[PlantKind.CANNON1] is None
    assert app.game.sun == remaining


def test_card_needs_enough_sun(app):
    _start(app)
    app.game.sun = config.CANNON3_COST - 1
    app.handle_click(_center(app.card_buttons[PlantKind.CANNON3]))
    assert app.game.selected[PlantKind.CANNON3] is None
    assert app.game.sun == config.CANNON3_COST - 1


def test_release_outside_map_keeps_selection(app):
    _start(app)
    app.handle_click(_center(app.card_buttons[PlantKind.WHEEL]))
    assert app.handle_release((10, 400)) == []
    assert app.game.selected[PlantKind.WHEEL] is not None


def test_timeout_leads_to_lost_and_close(app):
    _start(app)
    app.game.record = config.GAME_TIME - 1
    assert app.step(random.Random(0)) is Screen.LOST
    assert app.handle_click((0, 0)) is Screen.LOST
    assert app.handle_click(_center(app.close_button)) is Screen.CLOSED


def test_clearing_blocks_wins(app):
    _start(app)
    app.step(random.Random(0))
    for block in app.game.blocks:
        block.alive = False
    assert app.step(random.Random(0)) is Screen.WON


def test_draw_start_screen_shows_start_button(app):
    surface = pygame.Surface((config.GAME_WIDTH_1, config.GAME_HEIGHT))
    app.draw(surface)
    assert tuple(surface.get_at(_center(app.start_button)))[:3] == START_BUTTON_COLOR


def test_draw_battle_shows_blocks(app):
    _start(app)
    app.step(random.Random(0))
    surface = pygame.Surface((config.GAME_WIDTH_1, config.GAME_HEIGHT))
    app.draw(surface)
    assert tuple(surface.get_at((10, 10)))[:3] == BLOCK_COLOR


def test_draw_lost_screen_background(app):
    _start(app)
    app.game.record = config.GAME_TIME - 1
    app.step(random.Random(0))
    surface = pygame.Surface((config.GAME_WIDTH_1, config.GAME_HEIGHT))
    app.draw(surface)
    assert tuple(surface.get_at((5, 5)))[:3] == LOSE_BACKGROUND_COLOR