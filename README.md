# muffet

A small arcade game built on `pygame`. You steer a heart inside a boxed
playfield with three horizontal lanes while spiders rush in from both sides.
Every hit costs health; when it runs out the heart breaks, the Game Over
screen shows how long you survived, and the five best times are kept on a
scoreboard.

## Installing

```
pip install .
```

## Playing

```
muffet [DATA_DIR]
```

`DATA_DIR` is the directory holding the assets in `fonts/`, `textures/` and
`sounds/`, and the `scores.txt` scoreboard. Without it, the game uses the
directory one level above the one the program was started from (or the
current directory if the program path has no directory part). Since an
installed `muffet` command usually lives in an environment's `bin/`
directory, passing `DATA_DIR` explicitly is the reliable way to point the
game at its assets.

Assets that cannot be loaded are reported on standard output and the game
carries on without them: a missing font falls back to pygame's default font,
missing textures draw nothing and missing sounds stay silent.

The window is 1000 × 750 pixels and runs at 60 frames per second.

### Controls

| Key       | Action                                        |
|-----------|-----------------------------------------------|
| A / Left  | move left                                     |
| D / Right | move right                                    |
| W / Up    | jump one lane up (short cooldown); menu up    |
| S / Down  | jump one lane down (short cooldown); menu down|
| Enter     | choose the highlighted entry                  |
| Escape    | quit the game during a run                    |

Closing the window quits from any screen.

### Screens

* **Menu** (`muffet.menu.Menu`) – *Play*, *Quit* and *Scores*, with the
  version number in the corner.
* **Game** (`muffet.game_screen.GameScreen`, `muffet.game.Game`) – survive as
  long as possible. The timer at the bottom counts `MM:SS:CC`. Each hit costs
  4 of 20 health points and is followed by a short blinking, invulnerable
  spell and a screen shake. Spiders come in waves chosen at random, never
  the same kind twice in a row: single runners, pairs on neighbouring lanes,
  lanes with a gap, fast speedsters and winding paths
  (`muffet.spawner.Spawner`). Each new wave is slightly faster than the last.
* **Game Over** (`muffet.defeat_menu.DefeatMenu`) – plays the Game Over theme
  and shows the time of the run; *RETRY* starts a new run, *EXIT* returns to
  the menu.
* **Scores** (`muffet.scores.ScoresScreen`) – the five best times and the
  latest run; Enter returns to the menu.

### The scoreboard

`scores.txt` holds six `MM:SS:CC` lines: the latest time first, then the five
best times, longest first. The file is created with zeroed entries the first
time it is needed. The helpers in `muffet.scores` can be used on their own:

```python
from muffet.scores import ensure_score_file, read_scores, merge_highscores, write_scores

ensure_score_file("scores.txt")
latest, *best = read_scores("scores.txt")
best = merge_highscores(best, "01:23:45")
write_scores("scores.txt", "01:23:45", best)
```

`muffet.gui.format_time(milliseconds)` produces the timer text and
`muffet.gui.hp_string(current_hp)` the health text, e.g. `"08 / 20"`.

## Running the tests

```
pip install .[test]
pytest
```