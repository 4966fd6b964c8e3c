import logging

from .errors import CycleSyntaxError
from .notation import OPEN, CLOSE, format_cycles

logger = logging.getLogger(__name__)


def _prepare(text):
    """
    Turn a product of cycles into a formula the multiplication can chase through.

    Every '(' is tagged, and every ')' is replaced by a tagged copy of the first symbol
    of the cycle it closes, so that the end of a cycle maps back to its start.

    Return  (formula, tagged) as two lists of the same length.
    """
    formula = list(text)
    tagged = [False] * len(formula)

    first = None        # first symbol of the open cycle, None until one is read
    is_open = False
    seen = set()        # symbols of the open cycle

    for i, char in enumerate(formula):
        if char == OPEN:
            if is_open:
                raise CycleSyntaxError(f"Found '{OPEN}' inside another cycle at position {i} of {text!r}")
            is_open = True
            first = None
            seen.clear()
            tagged[i] = True

        elif char == CLOSE:
            if not is_open:
                raise CycleSyntaxError(f"Found '{CLOSE}' with no matching '{OPEN}' at position {i} of {text!r}")
            if first is None:
                raise CycleSyntaxError(f"Found empty cycle at position {i} of {text!r}")
            is_open = False
            formula[i] = first
            tagged[i] = True

        else:
            if not is_open:
                raise CycleSyntaxError(f"Found symbol {char!r} outside of any cycle at position {i} of {text!r}")
            if char in seen:
                raise CycleSyntaxError(f"Symbol {char!r} occurs twice in one cycle at position {i} of {text!r}")
            if first is None:
                first = char
            seen.add(char)

    if is_open:
        raise CycleSyntaxError(f"Last cycle of {text!r} is missing its '{CLOSE}'")

    return formula, tagged


def _scan(formula, tagged, current, begin, reading):
    """
    Pass once over formula[begin:], following current through the cycles.

    While reading, the element under the scan becomes the new current. Otherwise the scan
    proceeds to the right until an element equal to current is found; that element is
    tagged and the next one is read.

    Return  the value of current at the end of the formula.
    """
    for i in range(begin, len(formula)):
        if reading:
            current = formula[i]
            reading = False
        elif formula[i] == current:
            tagged[i] = True
            reading = True

    return current


def multiply_text(text):
    """
    Multiply a product of cycles, giving the result in cycle form.

    text -- the cycles to multiply, written back to back, e.g. "(acf)(bd)(abd)(ef)".
        The cycles are applied from left to right.

    This is Knuth's Algorithm A (TAOCP 1.3.3). The result lists the cycles in the order
    they are found, singletons included, and is not canonical.
    Thus multiply_text("(acf)(bd)(abd)(ef)") == "(acefb)(d)".

    Return  the product in cycle form, or None if text is empty.
    Raises CycleSyntaxError if the cycles are not properly bracketed.
    """
    if text is None or not text.strip():
        return None

    text = text.strip()
    formula, tagged = _prepare(text)
    logger.debug("Multiplying %r as formula %r", text, ''.join(formula))

    cycles = []
    while not all(tagged):
        start_idx = tagged.index(False)
        start = formula[start_idx]
        tagged[start_idx] = True
        cycle = [start]

        current = _scan(formula, tagged, None, start_idx + 1, reading = True)
        while current != start:
            cycle.append(current)
            current = _scan(formula, tagged, current, 0, reading = False)

        logger.debug("Found cycle %r", ''.join(cycle))
        cycles.append(cycle)

    return format_cycles(cycles)
