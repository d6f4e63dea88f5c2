"""
playfair_cipher — Live Demo: Every Stage
=========================================
Run:  python examples/demo_playfair.py

Walks the textbook message through grid → normalize → transform,
then round-trips it under both reduction modes.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playfair_cipher import (
    ReductionMode, PlayfairCipher, build_grid, normalize, digraphs,
    transform, process, render_output, ENCRYPT, DECRYPT,
)

LINE = "═" * 70
KEY  = "playfair example"
MSG  = "Hide the gold in the tree stump"

def header(stage, name):
    print(f"\n{LINE}")
    print(f"  Stage {stage} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  playfair_cipher — Stage-by-Stage Demo")
print(LINE)
print(f"  Key:     {KEY}")
print(f"  Message: {MSG}\n")

# ── STAGE 1 ──────────────────────────────────────────────────────────────────
header(1, "GRID — 5×5 key square (J written as I)")
grid = build_grid(KEY, ReductionMode.MERGE_J_INTO_I)
for row in str(grid).splitlines():
    print(f"      {row}")

# ── STAGE 2 ──────────────────────────────────────────────────────────────────
header(2, "NORMALIZE — letters, split doubles, pad")
prepared = normalize(MSG, grid.mode, True)
ok("Digraphs", " ".join(digraphs(prepared)))

# ── STAGE 3 ──────────────────────────────────────────────────────────────────
header(3, "TRANSFORM — row / column / rectangle")
t0 = time.perf_counter()
ct = transform(prepared, grid, ENCRYPT)
pt = transform(ct, grid, DECRYPT)
elapsed = time.perf_counter() - t0
ok("Encrypted",  " ".join(digraphs(ct)))
ok("Decrypted",  " ".join(digraphs(pt)))
ok("Round-trip", f"{elapsed*1000:.3f} ms")

# ── MODES ────────────────────────────────────────────────────────────────────
header("±", "REDUCTION MODES — same message, both alphabets")
for mode in ReductionMode:
    cipher = PlayfairCipher(KEY, mode)
    ct     = cipher.encrypt(MSG)
    back   = cipher.decrypt(ct)
    match  = "✓" if back == normalize(MSG, mode, True) else "✗"
    print(f"  {match}  {mode.value:<8} excluded={mode.excluded}  "
          f"ct={ct[:20]}...  pt={back[:20]}...")

# ── OUTPUT ───────────────────────────────────────────────────────────────────
print(render_output(process(KEY, MSG, ReductionMode.MERGE_J_INTO_I, True)))
print(LINE + "\n")
