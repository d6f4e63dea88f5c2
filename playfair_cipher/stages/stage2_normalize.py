"""
Stage 2 — NORMALIZE: Text → Digraph-Ready Letters
==================================================
Turns raw input into an even-length run of letters that the
transform stage reads two at a time.

  1. Filter:   uppercase, keep A–Z only, apply the reduction mode
               (J → I, or drop Q). Order is preserved.
  2. Pair up:
       encrypt — one forward pass. A pair of equal letters (a, a)
                 becomes a + X, and the second a starts the next pair.
                 A lone trailing letter gets an X.
       decrypt — letters are taken as given; only a trailing X is
                 added if the count is odd.

Empty input stays empty: nothing is padded onto nothing.

The padding X carries no meaning. Decrypted output still contains it;
callers decide whether to read past it.
"""

import logging
from typing import List

from .stage1_grid import ReductionMode, reduced_letters

logger = logging.getLogger(__name__)

PADDING_LETTER = "X"


def filter_letters(text: str, mode: ReductionMode) -> str:
    """Step 1 only: uppercase A–Z letters of `text` under `mode`."""
    return "".join(reduced_letters(text, ReductionMode.parse(mode)))


def normalize(text: str, mode: ReductionMode, for_encryption: bool) -> str:
    """
    Prepare `text` for the transform stage.

    Returns an even-length (possibly empty) string of uppercase letters,
    read as consecutive non-overlapping digraphs.
    """
    letters = filter_letters(text, mode)

    if for_encryption:
        out = _split_doubles(letters)
    else:
        out = list(letters)
        if len(out) % 2:
            out.append(PADDING_LETTER)

    logger.debug(
        f"Normalized {len(text)} chars → {len(out) // 2} digraphs "
        f"(encrypt={for_encryption})"
    )
    return "".join(out)


def digraphs(letters: str) -> List[str]:
    """Split a normalized run into its two-letter groups."""
    return [letters[i:i + 2] for i in range(0, len(letters) - 1, 2)]


# ── helpers ──────────────────────────────────────────────────────────────────

def _split_doubles(letters: str) -> List[str]:
    out = []
    i = 0
    while i < len(letters):
        a = letters[i]
        if i + 1 == len(letters):
            out += [a, PADDING_LETTER]
            break
        b = letters[i + 1]
        if a == b:
            out += [a, PADDING_LETTER]
            i += 1          # b opens the next pair
        else:
            out += [a, b]
            i += 2
    return out
