"""
Playfair — Full Pipeline
=========================
Wires the three stages together:

    build_grid(key, mode) ──┬──► normalize(text, mode, encrypt)
                            │              │
                            └──────────────┴──► transform(letters, grid, ±1)

process() is the one-shot entry point. PlayfairCipher keeps the grid
for a key and mode so repeated messages skip the rebuild.

Caller responsibility: the same reduction mode must be used to encrypt
and to decrypt. A mismatch is not detected; it just yields garbage,
because the two grids differ.
"""

import logging

from .stages.stage1_grid      import ReductionMode, PlayfairGrid, build_grid
from .stages.stage2_normalize import normalize
from .stages.stage3_transform import ENCRYPT, DECRYPT, transform

logger = logging.getLogger(__name__)


def process(key: str, text: str, mode: ReductionMode, encrypt: bool) -> str:
    """
    Encrypt or decrypt `text` with a grid built from `key`.

    Returns an even-length (or empty) string of uppercase letters.
    Non-letters in `text` are dropped, never rejected.
    """
    grid = build_grid(key, mode)
    return _run(grid, text, encrypt)


class PlayfairCipher:
    """Playfair digraph cipher bound to one key square."""

    def __init__(self, key: str = "",
                 mode: ReductionMode = ReductionMode.MERGE_J_INTO_I):
        """
        An empty key falls back to the default key ("KEYWORD").
        `mode` may be a ReductionMode or its value ("merge-j" / "drop-q").
        """
        self._grid = build_grid(key, ReductionMode.parse(mode))

    @property
    def grid(self) -> PlayfairGrid:
        return self._grid

    @property
    def mode(self) -> ReductionMode:
        return self._grid.mode

    def encrypt(self, plaintext: str) -> str:
        """Encrypt. Doubled letters are split and odd length padded with X."""
        return _run(self._grid, plaintext, True)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt. Padding X letters from encryption are left in place."""
        return _run(self._grid, ciphertext, False)

    def __repr__(self):
        return f"PlayfairCipher(mode={self.mode.value}, grid={self._grid.letters})"


def _run(grid: PlayfairGrid, text: str, encrypt: bool) -> str:
    letters = normalize(text, grid.mode, encrypt)
    out = transform(letters, grid, ENCRYPT if encrypt else DECRYPT)
    logger.debug(f"{'Encrypted' if encrypt else 'Decrypted'} {len(out) // 2} digraphs")
    return out
