#-- Knuth, TAOCP 1.3.3 --#

def invert_i(array):
    """
    Invert a permutation in place using Algorithm I.

    array -- the permutation in one-line notation: the integers 1..n, where array[i]
        is the image of i+1. It is overwritten with the inverse permutation, so callers
        that need the original must copy it first. Lists and one-dimensional numpy
        arrays of a signed integer type both work.
        The array is not checked to actually be a permutation; if it is not, the
        result is meaningless.

    Each cycle is reversed as it is followed. Entries that have been dealt with are
    marked by making them negative, so no separate record of visited entries is needed.

    Return  array, holding its inverse, or None if array is None or empty.
    """
    if array is None or len(array) == 0:
        return None

    # The algorithm works on 1-based indices
    X = [0] + list(array)
    n = len(array)

    j = -1
    for m in range(n, 0, -1):
        i = X[m]
        if i > 0:
            # Follow the cycle, ending up at m again once X[m] is found negative
            while True:
                X[m] = j
                j = -m
                m = i
                i = X[m]
                if i <= 0:
                    i = j
                    break
        X[m] = -i

    array[:] = X[1:]
    return array


def invert_j(array):
    """
    Invert a permutation in place using Algorithm J.

    All entries are first negated. Then, for each m from n down, the cycle is followed
    from m to its one entry that is still negative, and the inverse value for m is
    stored there.

    array -- as for invert_i(), and likewise overwritten; both give the same result.

    Return  array, holding its inverse, or None if array is None or empty.
    """
    if array is None or len(array) == 0:
        return None

    X = [0] + [-x for x in array]
    n = len(array)

    for m in range(n, 0, -1):
        j = m
        i = X[j]
        while i > 0:
            j = i
            i = X[j]

        X[j] = X[-i]
        X[-i] = m

    array[:] = X[1:]
    return array


INVERTERS = {
    'I': invert_i,
    'J': invert_j,
}

def invert(array, method = 'I'):
    """
    Invert a permutation in place.

    method -- 'I' or 'J', selecting invert_i() or invert_j(). Both give the same result.
    """
    try:
        inverter = INVERTERS[method]
    except KeyError:
        raise ValueError(f"Unknown inversion method {method!r}, expected one of {', '.join(INVERTERS)}") from None

    return inverter(array)
