# doggie_daycare

You work at a dog daycare centre, and the pups want to play. `doggie_daycare`
is a set of seven small terminal games. All of them are started from one menu:

1. **Memory Bone Match** (`bone_finder`): memorise where the bones are buried
   on an 8×8 grid. Then dig them up by coordinate (`A1` to `H8`). There are
   five levels, from Easy (3 bones) to Impossible (15 bones). Each level gives
   a limited number of hints. Type `hint` to see the board again, or `quit`
   to leave.
2. **Tic-Tac-Bone** (`tic_tac_bone`): noughts and crosses on a board with
   rows `A`–`C` and columns `1`–`3`. You play bones 🦴. The skulls 💀 always
   take the first free square.
3. **Hungry Pup Feeder** (`food_catcher`): move the dog with `a` and `d` to
   catch falling food. Eat 15 good items to win. Three junk items lose the
   level. On the hard level, catching a bomb also loses it. Each level
   repeats until you win it.
4. **Dog Jump Challenge** (`dog_jump`): jump with `SPACE` or `J` over bushes,
   birds and bombs. Each jump costs energy, and the energy comes back over
   time. You score a point for each obstacle you clear. Each level repeats
   until you win it.
5. **Obstacle Course** (`obstacle_course`): pick easy, medium or hard. Then
   steer the dog with `W`/`A`/`S`/`D` to its toy without touching roadworks
   🚧 or moving cars 🚗.
6. **Simon Barks** (`simon_barks`): memorise a sequence of 4, 6 and then 8 dog
   commands. Then type each one back as numbers.
7. **Word Search** (`word_search`): find the hidden dog word in an 8×8, 12×12
   or 16×16 grid of letters. You can ask for the answer to be shown.

## Installing

```
pip install .
```

## Playing

```
doggie-daycare
```

Choose a game by its number, or choose `8` to leave. Above the menu there is a
welcome text in a box. By default the text is read from
`doggie_daycare_intro.txt` in the current directory. To read it from another
file, pass the path:

```
doggie-daycare path/to/intro.txt
```

If the file cannot be opened, an error is printed and a built-in welcome text
is shown instead. The menu also closes when input ends or when you press
Ctrl-C.

Three games react to single key presses: Hungry Pup Feeder, Dog Jump Challenge
and Obstacle Course. While they run they switch the terminal out of line
buffering and echo. This needs a POSIX terminal. The screen is drawn with ANSI
escape codes.

## Using the pieces

Each game is a module of its own. The game logic is kept apart from the
terminal, so you can drive it from code:

```python
from doggie_daycare.tic_tac_bone import Board, parse_move, BONE

board = Board()
row, col = parse_move("B2")
board.place(row, col, BONE)
board.ai_move()
print(board.render())
```

Other pieces you can use the same way:

- `bone_finder.BoneBoard`, `parse_coordinate` and `render_grid`
- `food_catcher.FoodCatcher`
- `dog_jump.DogJump`
- `obstacle_course.ObstacleCourse` with `settings_for`
- `simon_barks.generate_sequence` and `check_sequence`
- `word_search.WordSearch`
- `menu.bordered_box` and `visible_length`

Most of these take an optional `random.Random`, so a seed gives a repeatable
game.

Each game's `run` function takes a `doggie_daycare.terminal.Console`. The
console wraps an input stream, an output stream and a sleep function. You can
give it scripted input, for example an `io.StringIO`, and a sleep function
that does nothing.

## What it does not do

Scores and progress are not kept between runs. Nothing is written to disk.

## Tests

```
pip install .[test]
pytest
```