"""Windowed front end: start, battle, win and lose screens driven by pygame."""

from __future__ import annotations

import argparse
import os
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from . import config  # noqa: E402
from .game import Game, Outcome, PlantKind, Sun  # noqa: E402
from .plants import Plant  # noqa: E402
from .sprites import CARD_IMAGE, MAP_IMAGE, SHOP_CARD_IMAGE, SHOP_SUN_IMAGE  # noqa: E402

BOUNCE_HEIGHT = 15  # pixels a pressed button drops before springing back
BOUNCE_DURATION = 1000  # milliseconds

MENU_BUTTON_SIZE = (200, config.BUTTON_WID)
CARD_PANEL_SIZE = (142, 198)
PREVIEW_ALPHA = 178

# Colours used when an image asset cannot be loaded
BACKGROUND_COLOR = (40, 70, 160)
START_BACKGROUND_COLOR = (20, 30, 60)
WIN_BACKGROUND_COLOR = (230, 200, 60)
LOSE_BACKGROUND_COLOR = (70, 70, 70)
START_BUTTON_COLOR = (60, 180, 80)
CLOSE_BUTTON_COLOR = (180, 60, 60)
SHOP_COLOR = (150, 110, 60)
CARD_COLOR = (210, 180, 120)
BLOCK_COLOR = (220, 30, 30)
DARK_BLOCK_COLOR = (120, 10, 10)
BULLET_COLOR = (250, 250, 250)
CANNON1_COLOR = (40, 160, 40)
CANNON3_COLOR = (20, 120, 120)
WHEEL_COLOR = (90, 60, 30)
SUN_COLOR = (255, 220, 0)
TEXT_COLOR = (0, 0, 0)

_FALLBACK_COLORS = {
    MAP_IMAGE: BACKGROUND_COLOR,
    config.START_MAP_PATH: START_BACKGROUND_COLOR,
    config.WIN_MAP_PATH: WIN_BACKGROUND_COLOR,
    config.LOSE_MAP_PATH: LOSE_BACKGROUND_COLOR,
    config.START_BUTTON_PATH: START_BUTTON_COLOR,
    config.CLOSE_BUTTON_PATH: CLOSE_BUTTON_COLOR,
    SHOP_SUN_IMAGE: SHOP_COLOR,
    SHOP_CARD_IMAGE: SHOP_COLOR,
    CARD_IMAGE: CARD_COLOR,
    config.BLOCK_PATH: BLOCK_COLOR,
    config.DBLOCK_PATH: DARK_BLOCK_COLOR,
    config.BULLET_PATH: BULLET_COLOR,
    config.CANNON1_PATH: CANNON1_COLOR,
    config.CANNON3_PATH: CANNON3_COLOR,
    config.WHEEL_PATH: WHEEL_COLOR,
    config.SUN_PATH: SUN_COLOR,
}


class Screen(Enum):
    """Which scene the application is showing."""

    START = "start"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    CLOSED = "closed"


def _out_bounce(t: float) -> float:
    """Bounce easing that settles at 1 when t reaches 1."""
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


@dataclass
class Button:
    """A clickable image button that can play a short bounce."""

    x: int
    y: int
    width: int
    height: int
    image: str = ""
    bouncing: bool = False
    elapsed: int = 0

    def contains(self, pos: tuple[int, int]) -> bool:
        """True if the point lies inside the button."""
        px, py = pos
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def bounce(self) -> None:
        """Start the press animation from the beginning."""
        self.bouncing = True
        self.elapsed = 0

    def offset(self, elapsed_ms: int) -> int:
        """Vertical displacement of the button this long after a bounce started."""
        if not self.bouncing or elapsed_ms >= BOUNCE_DURATION:
            return 0
        t = max(0, elapsed_ms) / BOUNCE_DURATION
        return round(BOUNCE_HEIGHT * (1.0 - _out_bounce(t)))


def _menu_button(image: str, height_fraction: float) -> Button:
    width, height = MENU_BUTTON_SIZE
    return Button(
        int(config.GAME_WIDTH_1 * 0.5 - width * 0.5),
        int(config.GAME_HEIGHT * height_fraction),
        width,
        height,
        image,
    )


_CARD_ROWS = {PlantKind.CANNON1: 168, PlantKind.CANNON3: 368, PlantKind.WHEEL: 568}
_PLANT_IMAGES = {
    PlantKind.CANNON1: config.CANNON1_PATH,
    PlantKind.CANNON3: config.CANNON3_PATH,
    PlantKind.WHEEL: config.WHEEL_PATH,
}


class App:
    """Scene switching, input handling and drawing around a Game."""

    def __init__(self, asset_dir: str | os.PathLike | None = None) -> None:
        self.asset_dir = Path(asset_dir) if asset_dir is not None else Path.cwd()
        self.screen = Screen.START
        self.game = Game()
        self.cursor = (0, 0)
        self.start_button = _menu_button(config.START_BUTTON_PATH, 0.7)
        self.close_button = _menu_button(config.CLOSE_BUTTON_PATH, 0.55)
        self.card_buttons = {
            kind: Button(
                config.GAME_WIDTH + 35,
                row + 35,
                config.PLANT_CARD_WIDTH,
                config.PLANT_CARD_HEIGHT,
                _PLANT_IMAGES[kind],
            )
            for kind, row in _CARD_ROWS.items()
        }
        self._sun_clock = 0
        self._images: dict[tuple[str, tuple[int, int]], pygame.Surface] = {}
        self._font: pygame.font.Font | None = None

    # ----- input -----------------------------------------------------------

    def _sun_at(self, pos: tuple[int, int]) -> Sun | None:
        for sun in reversed(self.game.suns):
            rect = sun.rect
            if rect.x <= pos[0] < rect.right and rect.y <= pos[1] < rect.bottom:
                return sun
        return None

    def handle_click(self, pos: tuple[int, int]) -> Screen:
        """React to a left-button press and return the screen now shown."""
        if self.screen is Screen.START:
            if self.start_button.contains(pos):
                self.start_button.bounce()
                self.screen = Screen.PLAYING
        elif self.screen is Screen.PLAYING:
            sun = self._sun_at(pos)
            if sun is not None:
                self.game.collect_sun(sun)
                return self.screen
            for kind, button in self.card_buttons.items():
                if button.contains(pos) and self.game.card_available(kind):
                    self.game.select_card(kind)
                    break
        elif self.screen in (Screen.WON, Screen.LOST):
            if self.close_button.contains(pos):
                self.close_button.bounce()
                self.screen = Screen.CLOSED
        return self.screen

    def handle_release(self, pos: tuple[int, int]) -> list[Plant]:
        """Plant whatever is held at the release point; return what was planted."""
        if self.screen is not Screen.PLAYING:
            return []
        return self.game.place_selected(pos[0], pos[1])

    # ----- time ------------------------------------------------------------

    def step(self, rng: random.Random) -> Screen:
        """Advance one GAME_RATE tick and return the screen now shown."""
        for button in (self.start_button, self.close_button):
            if button.bouncing:
                button.elapsed += config.GAME_RATE
                if button.elapsed >= BOUNCE_DURATION:
                    button.bouncing = False
        if self.screen is not Screen.PLAYING:
            return self.screen
        self._sun_clock += config.GAME_RATE
        if self._sun_clock >= config.SUN_INTERVAL:
            self._sun_clock = 0
            self.game.spawn_sun(rng)
        outcome = self.game.tick()
        if outcome is Outcome.LOST:
            self.screen = Screen.LOST
        elif outcome is Outcome.WON:
            self.screen = Screen.WON
        return self.screen

    # ----- drawing ---------------------------------------------------------

    def _image(self, path: str, size: tuple[int, int]) -> pygame.Surface:
        key = (path, size)
        cached = self._images.get(key)
        if cached is not None:
            return cached
        surface = None
        for candidate in (path, path + ".png"):
            full = self.asset_dir / candidate
            if full.is_file():
                try:
                    surface = pygame.transform.scale(pygame.image.load(str(full)), size)
                    break
                except pygame.error:
                    surface = None
        if surface is None:
            surface = pygame.Surface(size)
            surface.fill(_FALLBACK_COLORS.get(path, (128, 128, 128)))
        self._images[key] = surface
        return surface

    def _text(self, surface: pygame.Surface, text: str, pos: tuple[int, int]) -> None:
        if self._font is None:
            try:
                pygame.font.init()
                self._font = pygame.font.Font(None, 28)
            except (pygame.error, OSError):
                return
        surface.blit(self._font.render(text, True, TEXT_COLOR), pos)

    def _overlay(
        self,
        surface: pygame.Surface,
        rect: tuple[int, int, int, int],
        rgba: tuple[int, int, int, int],
    ) -> None:
        x, y, w, h = rect
        layer = pygame.Surface((max(w, 1), max(h, 1)), pygame.SRCALPHA)
        layer.fill(rgba)
        surface.blit(layer, (x, y))

    def _draw_button(self, surface: pygame.Surface, button: Button) -> None:
        image = self._image(button.image, (button.width, button.height))
        surface.blit(image, (button.x, button.y + button.offset(button.elapsed)))

    def _draw_menu(self, surface: pygame.Surface, background: str, button: Button) -> None:
        size = (config.GAME_WIDTH_1, config.GAME_HEIGHT)
        surface.blit(self._image(background, size), (0, 0))
        self._draw_button(surface, button)

    def _draw_battle(self, surface: pygame.Surface) -> None:
        game = self.game
        surface.blit(self._image(MAP_IMAGE, (config.GAME_WIDTH, config.GAME_HEIGHT)), (0, 0))
        shop_width = config.GAME_WIDTH_1 - config.GAME_WIDTH
        surface.blit(self._image(SHOP_SUN_IMAGE, (shop_width, 168)), (config.GAME_WIDTH, 0))
        self._text(surface, str(game.sun), (config.GAME_WIDTH + 55, 130))
        surface.blit(
            self._image(SHOP_CARD_IMAGE, (shop_width, config.GAME_HEIGHT - 168)),
            (config.GAME_WIDTH, 168),
        )
        for kind, row in _CARD_ROWS.items():
            surface.blit(self._image(CARD_IMAGE, CARD_PANEL_SIZE), (config.GAME_WIDTH + 4, row))
            self._draw_button(surface, self.card_buttons[kind])
            if game.sun < kind.cost:
                self._overlay(
                    surface, (config.GAME_WIDTH + 4, row, *CARD_PANEL_SIZE), (255, 0, 0, 100)
                )
            self._text(surface, str(kind.cost), (config.GAME_WIDTH + 55, row + 162))

        for block in game.blocks:
            if block.standing:
                surface.blit(self._image(block.image, block.size), (block.x, block.y))

        planted: list[Plant] = [*game.cannons1, *game.cannons3, *game.wheels]
        for plant in planted:
            surface.blit(self._image(plant.image, plant.size), (plant.x, plant.y))
            if plant.cooling:
                alpha = int(plant.cooldown_opacity * 180)
                self._overlay(
                    surface, (plant.x, plant.y, plant.width, plant.height), (128, 128, 128, alpha)
                )
            for bullet in getattr(plant, "active_bullets", lambda: ())():
                surface.blit(
                    self._image(bullet.image, (bullet.width, bullet.height)), (bullet.x, bullet.y)
                )

        for sun in game.suns:
            surface.blit(self._image(config.SUN_PATH, (sun.width, sun.height)), (sun.x, sun.y))

        for plant in game.selected.values():
            if plant is None:
                continue
            preview = self._image(plant.image, plant.size).copy()
            preview.set_alpha(PREVIEW_ALPHA)
            surface.blit(
                preview,
                (self.cursor[0] - plant.width // 2, self.cursor[1] - plant.height // 2),
            )

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current screen onto the surface."""
        if self.screen is Screen.START:
            self._draw_menu(surface, config.START_MAP_PATH, self.start_button)
        elif self.screen is Screen.PLAYING:
            self._draw_battle(surface)
        elif self.screen is Screen.WON:
            self._draw_menu(surface, config.WIN_MAP_PATH, self.close_button)
        elif self.screen is Screen.LOST:
            self._draw_menu(surface, config.LOSE_MAP_PATH, self.close_button)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="territory", description=config.GAME_TITLE)
    parser.add_argument("--assets", default=".", help="directory holding the pictures folder")
    parser.add_argument("--seed", type=int, default=None, help="seed for sun placement")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        window = pygame.display.set_mode((config.GAME_WIDTH_1, config.GAME_HEIGHT))
        pygame.display.set_caption(config.GAME_TITLE)
        icon = Path(args.assets) / config.ICON_PATH
        if icon.is_file():
            try:
                pygame.display.set_icon(pygame.image.load(str(icon)))
            except pygame.error:
                pass
        app = App(args.assets)
        rng = random.Random(args.seed)
        tick_event = pygame.USEREVENT + 1
        pygame.time.set_timer(tick_event, config.GAME_RATE)
        while app.screen is not Screen.CLOSED:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    app.screen = Screen.CLOSED
                elif event.type == pygame.MOUSEMOTION:
                    app.cursor = event.pos
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    app.handle_click(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    app.handle_release(event.pos)
                elif event.type == tick_event:
                    app.step(rng)
            app.draw(window)
            pygame.display.flip()
            pygame.time.wait(10)
    finally:
        pygame.quit()
    return 0