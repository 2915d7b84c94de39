# mtmkit

A small collection of data structures and command-line utilities:

- `mtmkit.rle.RLEList`: a run-length encoded list of characters.
- `mtmkit.ascii_art`: read, print and encode ASCII art through an `RLEList`.
- `mtmkit.player.Player`: a game character with level, force, HP and coins.
- `mtmkit.dry`: `duplicate_string` and `merge_sorted`.
- `mtmkit.powers` and `mtmkit.words`: small interactive programs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### RLEList

```python
from mtmkit.rle import RLEList

rle = RLEList("aaabcc")
rle.append("c")
print(len(rle))                      # 7
print(rle[3])                        # b
rle.remove(3)
print(repr(rle.export_to_string()))  # 'a3\nc3\n'
rle.map(str.upper)
print("".join(rle))                  # AAACCC
```

`append` takes a single character and ignores `"\0"`. Indexing and `remove`
raise `IndexError` for an index outside the list. `map` replaces every
character in place and joins neighbouring runs that end up equal.
`export_to_string` lists each run as its character, its count and a newline.

### ASCII art

```python
import io
from mtmkit.ascii_art import ascii_art_read, ascii_art_print, ascii_art_print_encoded, map_invert

rle = ascii_art_read(io.StringIO("@@  @\n"))
out = io.StringIO()
ascii_art_print_encoded(rle, out)    # "@2\n 2\n@1\n\n1\n"
rle.map(map_invert)
ascii_art_print(rle, out)            # writes "  @@ \n"
```

`map_invert` swaps `@` and space and leaves every other character alone.

### Player

```python
from mtmkit.player import Player

player = Player("Ada", max_hp=50, force=3)
player.damage(20)
player.heal(100)          # HP back to 50, never above the maximum
player.add_coins(10)
player.pay(4)             # True; coins now 6
player.level_up()
print(player.attack_strength())  # force + level = 5
print(player)
```

A non-positive `max_hp` or a negative `force` falls back to 100 and 5.
Health stays between 0 and the maximum, the level never passes 10, and
`buff`, `heal`, `damage` and `add_coins` ignore amounts that are not positive.
`is_knocked_out()` is true once HP reaches 0.

### Helpers

```python
from mtmkit.dry import duplicate_string, merge_sorted
from mtmkit.powers import is_power_of_two, power_of_two
from mtmkit.words import longest_string, sort_strings, report

duplicate_string("ab", 3)        # "ababab"; times must be positive
merge_sorted([1, 4], [2, 3])     # [1, 2, 3, 4]; both must be non-empty
is_power_of_two(64)              # True
power_of_two(64)                 # 6
longest_string(["hi", "hello"])  # "hello"
sort_strings(["b", "a"])         # ["a", "b"]
print(report(["pear", "fig", "banana"]), end="")
```

`duplicate_string` and `merge_sorted` raise `ValueError` on bad input, and so
does `report` for an empty list.

## Commands

### mtmkit-ascii-art

```
mtmkit-ascii-art -e SOURCE TARGET
mtmkit-ascii-art -i SOURCE TARGET
```

`-e` writes the run-length encoding of SOURCE to TARGET, one run per line
(the character followed by its count). `-i` writes SOURCE back out with `@`
and space swapped, inverting the picture. `main` returns 1 when the file was
written and 0 for wrong arguments or a file that cannot be opened, so the
command exits with status 1 on success and 0 on failure.

### mtmkit-powers

```
mtmkit-powers
```

Asks for a count and then that many integers on standard input, reports every
number that is a power of two with its exponent, and prints the total of those
exponents. Prints `Invalid number` or `Invalid size` for bad input.

### mtmkit-words

```
mtmkit-words
```

Asks for a count and then that many words on standard input, and reports the
longest word and the lexicographically largest and smallest ones. Prints
`Invalid size` or `Error reading words` for bad input.

## What it does not do

`Player` is only the character: there is no game to play, no deck of cards
and no win or loss tracking in this package.