# pocketapps

A small collection of pieces for handheld-style apps:

- **Snake** (`pocketapps.snake`) – the rules of the classic game and the flow
  of the app around it: difficulty selection (Easy, Medium, Hard, Hell), help
  and game-over dialogs, and a best score per difficulty.
- **Serial console** (`pocketapps.serialconsole`) – choose a serial port and
  baud rate, read incoming data into a rolling buffer and send lines ending in
  `\n` or `\r\n`.
- **TamaTac extras** (`pocketapps.tamatac`) – achievements, a cemetery of past
  pets, a "Simon says" pattern game and a reaction-time game for a virtual pet.

## Installation

```
pip install pocketapps
```

Serial port access uses `pyserial`, which is installed as a dependency.

## Serial console command

List the serial ports on this machine:

```
pocketapps-serialconsole --list
```

Running the command without a port also prints the list and exits.

Open a port and start the console:

```
pocketapps-serialconsole /dev/ttyUSB0 --baud 9600 --crlf
```

`--baud` defaults to 115200. Lines end in `\n`, or `\r\n` with `--crlf`.
Every line typed on standard input is sent to the port; received data is
printed to standard output as it arrives. End input (or press Ctrl-C) to close
the port. If the port cannot be opened, an error is printed and the command
exits with status 1.

## Using the pieces in your own code

### Snake

- `pocketapps.snake.logic` – `SnakeState` holds the grid, body (head first),
  direction and food. `move()` advances one cell, wrapping at the edges unless
  `wall_collision` is set, and ends the game on a collision; `set_direction()`
  refuses a reversal of the buffered direction; `grow()`, `spawn_food(rng)` and
  the `check_*_collision()` methods do what their names say. `init_body()`
  builds a starting body, and `Direction` names the four directions.
- `pocketapps.snake.app` – `SnakeApp` decides which `Screen` to show next
  (`on_show()`), tracks dialogs by launch id (`open_dialog()`, `on_result()`)
  and handles the end of a game (`on_game_over()`), which returns the dialog
  title and text from `game_over_message()`. `Selection` gives the cell size
  and wall rule of each difficulty. `HighScores` keeps the best scores in any
  mutable mapping you pass it.

### Serial console

- `ConnectView` (in `pocketapps.serialconsole.connect_view`) lists ports, takes
  the selected index and speed text, and `connect()` opens the port, raising
  `ConnectError` with a user-facing message on failure. The last port index and
  speed are written to the mapping you give it in `on_stop()` and read back in
  `on_start()`. `list_port_names()`, `open_port()` and `join_names()` are
  available on their own.
- `ConsoleView` (in `pocketapps.serialconsole.console_view`) runs a reader
  thread into a 512-byte `ReceiveBuffer`, calls `on_render` with the buffer
  text about twice a second, and sends lines with `send()`. `set_terminator()`
  picks a `Terminator`.
- `SerialConsole` (in `pocketapps.serialconsole.app`) switches between the two
  views; `main()` is the command above.

### TamaTac

- `pocketapps.tamatac.achievements` – `Achievements` stores twelve
  `AchievementId` bits in a mapping, unlocks them, counts cleanings (ten unlock
  Clean Freak) and builds a `summary()`. `has_achievement()`,
  `count_unlocked()` and `achievement_info()` work on raw bits.
- `pocketapps.tamatac.cemetery` – `Cemetery` keeps the five most recent
  `PetRecord`s, newest first; `format_age()` renders hours as `"1d 3h"`.
- `pocketapps.tamatac.pattern_game` – `PatternGame`, three rounds of repeating
  a growing colour pattern, with `Sound` effects requested through a callback.
- `pocketapps.tamatac.reaction_game` – `ReactionGame`, three rounds of tapping
  a target as soon as it appears, rated by reaction time.

The games take their random source and, where time matters, their clock as
arguments, and expose the delay they want next (`delay_ms`,
`sequence_period_ms`) for you to drive with your own timer.

## What is not included

- There is no playable Snake game: no board sized to a screen, no timer that
  moves the snake, no key or swipe handling and no speed-up as it eats. The
  package gives the rules (`SnakeState`) and the app flow (`SnakeApp`); you
  supply the loop and the display.
- There is no graphical interface for any app. The serial console command is
  the only program to run; the views and games are state you drive and draw
  yourself.
- The serial console command does not remember its port or speed between
  runs; persistence happens only through the mapping you pass to `ConnectView`.

## Running the tests

```
pip install "pocketapps[test]"
pytest
```