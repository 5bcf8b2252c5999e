# territory

Territorial Dispute is a small arcade game. A grid of red blocks (18 columns,
16 rows) covers the top of the map. You spend sunlight to plant cannons and
wheels on the field. They fire bullets or roll up the map and destroy the
blocks they touch. Bring the number of standing blocks down to 50 or fewer
before time runs out and you win.

## Installing

```
pip install .
```

This installs the game and its one dependency, `pygame`.

## Playing

```
territory
```

This opens the window on the start screen. Click the start button to begin.
Options:

- `--assets DIR`: the directory that holds the `pictures` folder with the game
  images. The default is the current directory.
- `--seed N`: the seed for where suns appear.

Rules:

- The game runs in ticks of 80 ms. After 1000 ticks the game is lost.
- Sunlight starts at 200. During play, a sun appears at a random spot on the
  map every four seconds, as long as fewer than three are on screen. Click a
  sun to collect 25 sunlight.
- The shop on the right side holds three cards:
  - a single cannon (cost 100), which fires straight ahead;
  - a triple cannon (cost 200), which fires to the front-left, straight
    ahead and to the front-right at the same time;
  - a wheel (cost 150), which rolls up the map and crushes blocks.

  A card is covered in red while you cannot afford it.
- Press the mouse button on a card to buy that piece. The cost is taken at
  once, and a faded copy of the piece follows the cursor. The piece is
  planted the next time the left button is released inside the planting
  area (more than 50 pixels from either side of the map). You can hold only
  one piece of each kind at a time.
- After a piece is planted, its card cannot be used for five seconds. The
  piece itself is shown greyed out while it cools down for five seconds;
  the single cannon does not fire during that time.
- Cannons fire once every 15 ticks. Diagonal bullets bounce off the side
  walls. A bullet that hits a block destroys it and disappears.
- On the win or lose screen, click the close button to quit. Closing the
  window also quits.

## Using the game logic

The rules live in `territory.game` and need no display:

```python
import random

from territory.game import Game, Outcome, PlantKind

game = Game()
game.select_card(PlantKind.CANNON1)
game.place_selected(200, 600)

rng = random.Random(0)
while game.tick() is Outcome.CONTINUE:
    sun = game.spawn_sun(rng)
    if sun is not None:
        game.collect_sun(sun)

print(game.outcome())
```

- `Game.tick()` runs one frame and returns an `Outcome`: `LOST`, `WON` or
  `CONTINUE`.
- `Game.select_card(kind)` buys a piece if it is affordable, its card is not
  cooling down, and no piece of that kind is already held. It returns the
  piece, or `None`.
- `Game.place_selected(x, y)` plants every held piece at `(x, y)` and returns
  the list of pieces planted. The list is empty if the point is outside the
  planting area.
- `Game.card_available(kind)` reports whether a card is free of its cooldown.
- `territory.game.can_place(x, y)` reports whether a point is inside the
  planting area.

`territory.app.App` wraps a `Game` with the screens, mouse handling and
drawing that the `territory` command uses.

## What it does not include

- No images come with the package. The game looks for them under
  `pictures/` in the `--assets` directory. Any image it cannot find is drawn
  as a plain coloured rectangle, so the game can be played without them.
- There is no sound, no saved progress and no way to start a new round from
  the win or lose screen. Run `territory` again to play another round.
- `territory.sprites` defines `EnemyPlane`, `Cloud` and `DarkBlock`, but none
  of them is ever put on the field during play.

## Running the tests

```
pip install .[test]
pytest
```