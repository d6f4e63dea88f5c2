"""
playfair_cipher — Playfair Digraph Cipher
==========================================
Classical 5×5 key-square substitution on letter pairs.
Wheatstone (1854), popularised by Lord Playfair.

Stages:
    1  GRID       — key square from key + alphabet (J→I or drop Q)
    2  NORMALIZE  — filter letters, split doubles, pad to even length
    3  TRANSFORM  — row shift / column shift / rectangle swap

Entry points:
    process(key, text, mode, encrypt)   one-shot
    PlayfairCipher(key, mode)           reusable, grid built once

License: Apache 2.0
"""

__version__  = "1.0.0"

from .stages.stage1_grid      import ReductionMode, PlayfairGrid, build_grid, DEFAULT_KEY
from .stages.stage2_normalize import normalize, filter_letters, digraphs, PADDING_LETTER
from .stages.stage3_transform import transform, ENCRYPT, DECRYPT
from .cipher                  import PlayfairCipher, process
from .display                 import format_digraphs, render_output

__all__ = [
    "ReductionMode",
    "PlayfairGrid",
    "build_grid",
    "normalize",
    "filter_letters",
    "digraphs",
    "transform",
    "process",
    "PlayfairCipher",
    "format_digraphs",
    "render_output",
    "DEFAULT_KEY",
    "PADDING_LETTER",
    "ENCRYPT",
    "DECRYPT",
]
