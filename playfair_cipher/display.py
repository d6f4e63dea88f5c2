"""
Terminal presentation of cipher output: digraphs separated by spaces,
wrapped after a fixed number of pairs per line.
"""

from .stages.stage2_normalize import digraphs

PAIRS_PER_LINE = 26


def format_digraphs(letters: str, pairs_per_line: int = PAIRS_PER_LINE) -> str:
    if pairs_per_line < 1:
        raise ValueError("pairs_per_line must be at least 1.")
    pairs = digraphs(letters)
    lines = [
        " ".join(pairs[i:i + pairs_per_line])
        for i in range(0, len(pairs), pairs_per_line)
    ]
    return "\n".join(lines)


def render_output(letters: str, pairs_per_line: int = PAIRS_PER_LINE) -> str:
    """Banner plus formatted digraphs, ready to print."""
    return f"\n OUTPUT:\n=========\n{format_digraphs(letters, pairs_per_line)}\n"
