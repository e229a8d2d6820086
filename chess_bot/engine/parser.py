"""
Best-move extraction from raw UCI engine output.

The engine prints arbitrary chatter (id lines, options, info lines) before
its answer. Only the first 'bestmove' occurrence matters:

    info depth 12 score cp 31 pv e2e4 e7e5
    bestmove e2e4 ponder e7e5

yields "e2e4". The ponder move is ignored.
"""

import re

BESTMOVE_TOKEN = "bestmove"

_MOVE_RE = re.compile(r"\S*")


def extract_best_move(text: str) -> str:
    """
    Extract the move token following the first 'bestmove' in text.

    Exactly one space must separate the keyword from the move. A keyword
    at the end of the text, or followed by anything other than a single
    space, gives an empty result.

    Args:
        text: Accumulated engine output

    Returns:
        Move token in coordinate notation, or "" if none was found
    """
    index = text.find(BESTMOVE_TOKEN)
    if index < 0:
        return ""

    rest = text[index + len(BESTMOVE_TOKEN):]
    if not rest.startswith(" "):
        return ""

    return _MOVE_RE.match(rest, 1).group(0)
