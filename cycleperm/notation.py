from .errors import CycleSyntaxError, EmptyInputError


OPEN = '('
CLOSE = ')'


def validate(text):
    """
    Check that a string looks like a permutation in cycle form and return it stripped.

    text -- the cycle form, e.g. "(abc)(de)". Surrounding whitespace is ignored.

    Only the outer bracketing is checked; an unmatched ')' in the interior is left
    for multiply_text() to reject.
    """
    if text is None or not text.strip():
        raise EmptyInputError("Permutation's cycle form cannot be empty")

    text = text.strip()
    if not text.startswith(OPEN) or not text.endswith(CLOSE):
        raise CycleSyntaxError(f"Permutation's cycle form must begin with '{OPEN}' and end with '{CLOSE}': {text!r}")

    return text


def split_cycles(text):
    """
    Split a cycle form into the symbol strings of its cycles.

    All leading '(' are dropped and every ')' removed, and what is left is split on '('.
    Thus split_cycles("(316)(54)(2)") == ["316", "54", "2"].
    Malformed text may give empty strings, which the caller has to deal with.
    """
    return text.lstrip(OPEN).replace(CLOSE, '').split(OPEN)


def format_cycles(cycles):
    """ Write a sequence of cycles (strings or lists of symbols) back in cycle form. """
    return ''.join(f"{OPEN}{''.join(cycle)}{CLOSE}" for cycle in cycles)
