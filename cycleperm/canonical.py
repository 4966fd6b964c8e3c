import logging

from .notation import split_cycles, format_cycles

logger = logging.getLogger(__name__)


def rotate_to_least(cycle):
    """
    Rotate a cycle so that its smallest symbol comes first.

    The rest of the cycle keeps its cyclic order. If the smallest symbol occurs more
    than once (which a well-formed cycle never does), the first occurrence is used.
    """
    min_idx = 0
    min_val = cycle[min_idx]

    for i in range(1, len(cycle)):
        if cycle[i] < min_val:
            min_val = cycle[i]
            min_idx = i

    return cycle[min_idx:] + cycle[:min_idx]


def canonicalize(text):
    """
    Convert a permutation from cycle form to its unique canonical form.

    text -- a cycle form such as "(316)(54)(2)".

    The canonical form has all singletons written explicitly, each cycle rotated to
    start with its smallest symbol, and the cycles sorted in decreasing order of their
    first symbol (ties keep their order from the input). Thus
    canonicalize("(316)(54)(2)") == "(45)(2)(163)", and canonicalize is idempotent.

    Return  the canonical form, or None if the text contains an empty cycle.
    """
    if text is None:
        return None

    cycles = split_cycles(text)
    if not all(cycles):
        logger.debug("Cannot canonicalize %r: empty cycle", text)
        return None

    # sorted() is stable also with reverse=True
    cycles = sorted((rotate_to_least(cycle) for cycle in cycles), key = lambda c: c[0], reverse = True)

    canonical = format_cycles(cycles)
    logger.debug("Canonical form of %r is %r", text, canonical)
    return canonical
