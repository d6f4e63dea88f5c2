"""
Stage 1 — GRID: 5×5 Key Square
===============================
Builds the Playfair key square from a key string.

The square holds 25 distinct letters. The key's letters come first,
in first-seen order, followed by the rest of the alphabet. One letter
of the 26 has to go, and the reduction mode decides which:

  MERGE_J_INTO_I   J is written as I everywhere (Q kept)
  DROP_Q           Q is discarded everywhere (J kept)

Historical note: Charles Wheatstone, 1854. Named after Lord Playfair,
who promoted it. Used by British forces in the Boer War and WWI.

Layout: row-major — stream position i → row i // 5, column i % 5.
"""

import enum
import logging
import string
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

ALPHABET    = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
GRID_SIZE   = 5
GRID_CELLS  = GRID_SIZE * GRID_SIZE
DEFAULT_KEY = "KEYWORD"

_ASCII_LETTERS = frozenset(string.ascii_letters)


class ReductionMode(enum.Enum):
    """How the 26-letter alphabet is shrunk to the 25 cells of the square."""

    MERGE_J_INTO_I = "merge-j"
    DROP_Q         = "drop-q"

    @property
    def excluded(self) -> str:
        """The letter that never appears in the grid under this mode."""
        return "J" if self is ReductionMode.MERGE_J_INTO_I else "Q"

    def reduce(self, letter: str) -> Optional[str]:
        """
        Map one uppercase letter through the mode.
        Returns None when the letter is dropped entirely.
        """
        if letter == "J" and self is ReductionMode.MERGE_J_INTO_I:
            return "I"
        if letter == "Q" and self is ReductionMode.DROP_Q:
            return None
        return letter

    @classmethod
    def parse(cls, value) -> "ReductionMode":
        """Accept a member or its string value ("merge-j" / "drop-q")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower().replace("_", "-")
            for member in cls:
                if member.value == wanted:
                    return member
        raise ValueError(
            f"Unknown reduction mode {value!r} "
            f"(expected one of: {', '.join(m.value for m in cls)})."
        )


class PlayfairGrid:
    """
    Immutable 5×5 key square plus a letter → (row, col) lookup.

    Built by build_grid(); never mutated afterwards, so one instance
    can be shared freely between threads.
    """

    __slots__ = ("_letters", "_mode", "_positions")

    def __init__(self, letters: str, mode: ReductionMode):
        if len(letters) != GRID_CELLS or set(letters) != set(ALPHABET) - {mode.excluded}:
            raise ValueError(
                f"Grid needs {GRID_CELLS} distinct letters without {mode.excluded}."
            )
        self._letters = letters
        self._mode    = mode
        self._positions: Dict[str, Tuple[int, int]] = {
            ch: divmod(i, GRID_SIZE) for i, ch in enumerate(letters)
        }

    @property
    def letters(self) -> str:
        """All 25 letters, row-major."""
        return self._letters

    @property
    def mode(self) -> ReductionMode:
        return self._mode

    @property
    def excluded(self) -> str:
        return self._mode.excluded

    @property
    def rows(self) -> Tuple[str, ...]:
        return tuple(
            self._letters[r * GRID_SIZE:(r + 1) * GRID_SIZE]
            for r in range(GRID_SIZE)
        )

    def position(self, letter: str) -> Optional[Tuple[int, int]]:
        """(row, col) of letter, or None if it is not in the square."""
        return self._positions.get(letter)

    def letter_at(self, row: int, col: int) -> str:
        """Cell lookup; both indices wrap modulo 5 (-1 → 4, 5 → 0)."""
        return self._letters[(row % GRID_SIZE) * GRID_SIZE + col % GRID_SIZE]

    def __contains__(self, letter) -> bool:
        return letter in self._positions

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlayfairGrid):
            return NotImplemented
        return self._letters == other._letters and self._mode is other._mode

    def __hash__(self) -> int:
        return hash((self._letters, self._mode))

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows)

    def __repr__(self) -> str:
        return f"PlayfairGrid({self._letters!r}, {self._mode})"


def build_grid(key: Optional[str], mode: ReductionMode) -> PlayfairGrid:
    """
    Derive the key square from `key` under `mode`.

    Only ASCII letters of the key count; everything else is skipped.
    An empty key is replaced by DEFAULT_KEY. The alphabet is appended
    to the key, so the square always fills — this cannot fail.
    """
    mode = ReductionMode.parse(mode)
    if not key:
        key = DEFAULT_KEY

    seen = []
    for ch in reduced_letters(key + ALPHABET, mode):
        if ch in seen:
            continue
        seen.append(ch)
        if len(seen) == GRID_CELLS:
            break

    grid = PlayfairGrid("".join(seen), mode)
    logger.debug(f"Grid built: mode={mode.value} first row={grid.rows[0]}")
    return grid


def reduced_letters(text: str, mode: ReductionMode):
    """
    Yield the uppercase A–Z letters of `text` in order, passed through
    `mode`. Anything that is not an ASCII letter is skipped.
    """
    for ch in text:
        if ch not in _ASCII_LETTERS:
            continue
        ch = mode.reduce(ch.upper())
        if ch is not None:
            yield ch
