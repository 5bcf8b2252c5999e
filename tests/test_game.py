import random

import pytest

from territory import config
from territory.game import Game, Outcome, PlantKind, can_place


def test_can_place_boundaries():
    assert can_place(51, 1)
    assert not can_place(50, 1)
    assert not can_place(100, 0)
    assert not can_place(100, config.GAME_HEIGHT)
    assert not can_place(config.GAME_WIDTH - 50, 10)
    assert can_place(config.GAME_WIDTH - 51, config.GAME_HEIGHT - 1)


def test_deploy_blocks_grid():
    game = Game()
    game.deploy_blocks()
    first = game.blocks[0]
    assert (first.x, first.y) == (2, 3)
    positions = {(b.x, b.y) for b in game.blocks}
    assert len(positions) == config.BLOCK_NUM
    assert all(b.standing for b in game.blocks)
    assert all(b.x + b.width <= config.GAME_WIDTH for b in game.blocks)


def test_tick_counts_and_continues():
    game = Game()
    result = game.tick()
    assert game.record == 1
    assert result is Outcome.CONTINUE


def test_timeout_loses():
    game = Game()
    game.record = config.GAME_TIME - 1
    assert game.tick() is Outcome.LOST


def test_win_threshold():
    game = Game()
    game.deploy_blocks()
    for block in game.blocks[: config.BLOCK_NUM - config.GAME_WIN - 1]:
        block.alive = False
    assert game.outcome() is Outcome.CONTINUE
    game.blocks[-1].alive = False
    assert game.outcome() is Outcome.WON


def test_spawn_sun_limit_and_range():
    game = Game()
    rng = random.Random(0)
    suns = [game.spawn_sun(rng) for _ in range(config.MAX_BUTTONS)]
    assert game.spawn_sun(rng) is None
    assert len(game.suns) == config.MAX_BUTTONS
    for sun in suns:
        assert 0 <= sun.x < config.GAME_WIDTH - config.BUTTON_SIZE
        assert 0 <= sun.y < config.GAME_HEIGHT - config.BUTTON_SIZE


def test_collect_sun():
    game = Game()
    sun = game.spawn_sun(random.Random(1))
    total = game.collect_sun(sun)
    assert total == config.SUN_SUM0 + config.SUN_VALUE
    assert game.suns == []
    with pytest.raises(ValueError):
        game.collect_sun(sun)


def test_select_card_costs_and_single_selection():
    game = Game()
    plant = game.select_card(PlantKind.CANNON1)
    assert game.selected[PlantKind.CANNON1] is plant
    assert game.sun == config.SUN_SUM0 - config.CANNON1_COST
    assert game.select_card(PlantKind.CANNON1) is None
    assert game.select_card(PlantKind.CANNON3) is None
    assert game.sun == config.SUN_SUM0 - config.CANNON1_COST


def test_place_selected_invalid_keeps_selection():
    game = Game()
    plant = game.select_card(PlantKind.CANNON1)
    assert game.place_selected(10, 10) == []
    assert game.selected[PlantKind.CANNON1] is plant
    assert game.cannons1 == []


def test_place_selected_and_card_cooldown():
    game = Game()
    plant = game.select_card(PlantKind.WHEEL)
    placed = game.place_selected(200, 500)
    assert placed == [plant]
    assert (plant.x, plant.y) == (200, 500)
    assert plant.cooling
    assert game.wheels == [plant]
    assert game.selected[PlantKind.WHEEL] is None
    assert not game.card_available(PlantKind.WHEEL)
    game.sun = 1000
    assert game.select_card(PlantKind.WHEEL) is None

    ticks = 0
    while not game.card_available(PlantKind.WHEEL) and ticks < 1000:
        game.tick()
        ticks += 1
    assert game.card_available(PlantKind.WHEEL)
    assert ticks * config.GAME_RATE >= config.WHEEL_COOLDOWN
    assert game.select_card(PlantKind.WHEEL) is not None


def test_cannon3_fires_three_bullets():
    game = Game()
    game.select_card(PlantKind.CANNON3)
    (cannon,) = game.place_selected(200, 700)
    for _ in range(config.BULLET_INTERVAL):
        game.update_positions()
    assert len(list(cannon.active_bullets())) == 3


def test_cooling_cannon1_does_not_fire():
    game = Game()
    game.select_card(PlantKind.CANNON1)
    (cannon,) = game.place_selected(200, 700)
    for _ in range(config.BULLET_INTERVAL):
        game.update_positions()
    assert list(cannon.active_bullets()) == []


def test_wheel_moves_up():
    game = Game()
    game.select_card(PlantKind.WHEEL)
    (wheel,) = game.place_selected(200, 700)
    game.update_positions()
    assert wheel.y == 700 - config.GAME_V
    assert wheel.rect.y == wheel.y


def test_bullet_hits_block():
    game = Game()
    game.deploy_blocks()
    game.select_card(PlantKind.CANNON1)
    (cannon,) = game.place_selected(200, 700)
    bullet = cannon.bullets[0]
    bullet.fire(0, 0, bullet.direction)
    game.detect_collisions()
    assert not game.blocks[0].alive
    assert bullet.free
    assert sum(not b.alive for b in game.blocks) >= 1


def test_wheel_crushes_blocks():
    game = Game()
    game.deploy_blocks()
    game.select_card(PlantKind.WHEEL)
    (wheel,) = game.place_selected(100, 5)
    game.detect_collisions()
    dead = [b for b in game.blocks if not b.alive]
    assert dead
    assert all(b.rect.intersects(wheel.rect) for b in dead)
    assert game.blocks[0].alive