"""
Stage 3 — TRANSFORM: Digraph Substitution
==========================================
Applies the Playfair rule to each non-overlapping pair (a, b):

  same row      each letter moves one column  (+1 right / -1 left)
  same column   each letter moves one row     (+1 down  / -1 up)
  rectangle     the letters swap columns, rows stay put

Row and column moves wrap around the square. The rectangle swap is
its own inverse, so direction only matters for the row/column cases.

Pairs containing a letter the grid does not hold are skipped, as is
a trailing unpaired letter. Neither can come out of stage 2 when the
same reduction mode is used for both stages.
"""

import logging

from .stage1_grid import PlayfairGrid

logger = logging.getLogger(__name__)

ENCRYPT = +1
DECRYPT = -1


def transform(letters: str, grid: PlayfairGrid, direction: int) -> str:
    """
    Run every digraph of `letters` through `grid`.

    direction = +1 encrypts, -1 decrypts. Decrypting the output of an
    encryption over the same grid gives back the input exactly,
    padding letters included.
    """
    if direction not in (ENCRYPT, DECRYPT):
        raise ValueError("direction must be +1 (encrypt) or -1 (decrypt).")

    out = []
    skipped = 0
    for i in range(0, len(letters) - 1, 2):
        pos_a = grid.position(letters[i])
        pos_b = grid.position(letters[i + 1])
        if pos_a is None or pos_b is None:
            skipped += 1
            continue

        row_a, col_a = pos_a
        row_b, col_b = pos_b
        if row_a == row_b:
            out.append(grid.letter_at(row_a, col_a + direction))
            out.append(grid.letter_at(row_b, col_b + direction))
        elif col_a == col_b:
            out.append(grid.letter_at(row_a + direction, col_a))
            out.append(grid.letter_at(row_b + direction, col_b))
        else:
            out.append(grid.letter_at(row_a, col_b))
            out.append(grid.letter_at(row_b, col_a))

    if skipped:
        logger.debug(f"Skipped {skipped} digraph(s) with letters not in grid")
    return "".join(out)
