from functools import reduce

import numpy as np
from bidict import bidict

from .canonical import canonicalize
from .errors import CycleSyntaxError
from .inverse import invert
from .multiply import multiply_text
from .notation import OPEN, CLOSE, validate, split_cycles, format_cycles

class Permutation:
    """
    Class for representing permutations of symbols in cycle form.

    A Permutation object is created from text such as "(abc)(de)", where each
    parenthesised cycle maps every symbol to the one following it, and the last
    symbol back to the first. Symbols are single characters; the set of symbols
    permuted is whatever characters appear in the cycle form, so fixed points
    must be written as singleton cycles, e.g. "(abc)(d)".

    Permutations are immutable. Besides the cycle form as given, each permutation
    carries its canonical form, which is the same for all ways of writing it and is
    used for comparing permutations.
    """

#-- Magic methods --#

    def __init__(self, cycle_form):
        """
        Create a permutation from its cycle form.

        cycle_form -- the permutation as a sequence of cycles, e.g. "(abc)(de)(fg)".
            Surrounding whitespace is ignored.

        Raises EmptyInputError if cycle_form is empty, and CycleSyntaxError if it does
        not begin with '(' and end with ')'.
        """
        self._cycle_form = validate(cycle_form)
        self._canonical_form = canonicalize(self._cycle_form)

        if self._canonical_form is not None:
            self._canonical_form_no_paren = self._canonical_form.replace(OPEN, '').replace(CLOSE, '')
        else:
            self._canonical_form_no_paren = None

    def __str__(self):
        return self._cycle_form
    def __repr__(self):
        return f"Permutation({self._cycle_form!r})"

    def _key(self):
        # Canonical form of the disjoint product, so that equal mappings compare equal
        try:
            key = canonicalize(multiply_text(self._cycle_form))
        except CycleSyntaxError:
            key = None

        if key is None:
            return self._cycle_form
        return key

    def __hash__(self):
        return hash(self._key())

    def __eq__(self, other):
        """
        Compare two permutations by the canonical forms of their disjoint products.

        Thus Permutation("(ab)(ab)") == Permutation("(a)(b)"), even though their
        canonical_form attributes differ.
        """
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._key() == other._key()

    def __mul__(self, other):
        """
        Multiply permutations.

        In p*q, p is applied first and q second; see multiply().
        """
        if other is not None and not isinstance(other, Permutation):
            return NotImplemented
        return multiply(self, other)

#-- Attributes --#

    @property
    def cycle_form(self):
        """ The cycle form the permutation was created from, stripped of surrounding whitespace. """
        return self._cycle_form

    @property
    def canonical_form(self):
        """ The unique cycle form of the permutation, or None if it could not be determined. """
        return self._canonical_form

    @property
    def canonical_form_no_paren(self):
        """ The canonical form with all parentheses removed, or None along with canonical_form. """
        return self._canonical_form_no_paren

#-- Generator methods --#

    @staticmethod
    def compose(*perms):
        """
        Multiply a list of permutations, as if by repeated application of *.

        Note that composition acts left-to-right, the first permutation being applied first.
        """
        if not perms:
            raise ValueError("Cannot compose an empty list of permutations")

        return reduce(multiply, perms)

    @staticmethod
    def is_permutation(array):
        """ Check if an array of indices represents a permutation of 1..len(array). """
        return sorted(array) == list(range(1, len(array) + 1))

    @staticmethod
    def from_array(array, symbols):
        """
        Read a permutation given in one-line notation.

        array -- the 1-based index of the image of each symbol, as returned by to_array().
        symbols -- the symbols permuted, in the order array refers to them.

        Thus Permutation.from_array(p.to_array(), p.symbols()) == p.
        """
        if len(array) != len(symbols):
            raise ValueError(f"Permutation array size ({len(array)}) does not match the number of symbols ({len(symbols)})")
        if not Permutation.is_permutation(array):
            raise ValueError(f"Permutation array {list(array)} is not a permutation")

        cycles = []
        visited = [False] * len(array)

        for i in range(len(array)):
            if visited[i]:
                continue

            cycle = []
            j = i
            while not visited[j]:
                visited[j] = True
                cycle.append(symbols[j])
                j = array[j] - 1

            cycles.append(cycle)

        return Permutation(format_cycles(cycles))

    def inverse(self, method = 'I'):
        """
        Obtain the inverse of a permutation, such that self * self.inverse() is the identity.

        method -- the inversion algorithm applied to the one-line notation, 'I' or 'J'.
        """
        symbols = self.symbols()
        return Permutation.from_array(invert(self.to_array(symbols), method), symbols)

#-- Properties of permutations --#

    def mapping(self):
        """
        Obtain the permutation as the bidirectional mapping {symbol : image}.

        The mapping is that of the product of the cycles, so it is well-defined even if
        the cycle form repeats symbols across cycles. mapping().inverse gives the
        inverse permutation.
        """
        result = bidict()
        for cycle in split_cycles(multiply_text(self._cycle_form)):
            for pos, symbol in enumerate(cycle):
                result[symbol] = cycle[(pos+1) % len(cycle)]

        return result

    def symbols(self):
        """ Obtain the sorted tuple of symbols that the permutation acts on. """
        return tuple(sorted(self.mapping()))

    def to_array(self, symbols = None):
        """
        Write the permutation in one-line notation.

        symbols -- the order in which to list the symbols (default: self.symbols()).

        Entry i of the returned list is the 1-based position in symbols of the image
        of symbols[i]. This is the form taken by invert_i() and invert_j().
        """
        mapping = self.mapping()
        if symbols is None:
            symbols = self.symbols()
        elif len(symbols) != len(mapping) or set(symbols) != set(mapping):
            raise ValueError(f"Symbols {''.join(symbols)!r} do not match those of {self}")

        index = {symbol : i for i, symbol in enumerate(symbols, 1)}
        return [index[mapping[symbol]] for symbol in symbols]

    def cycles(self, canonical = True):
        """
        Obtain the list of disjoint cycles of a permutation, as strings.

        Cycles of length 1 are included.

        canonical -- if True, the cycles are in canonical order, see canonicalize().
            Otherwise they are in the order multiply_text() finds them.
        """
        product = multiply_text(self._cycle_form)
        if canonical:
            product = canonicalize(product)

        return split_cycles(product)

    def cycle_type(self):
        """
        Obtain the cycle type of a permutation.

        The cycle type is the sorted list of lengths of cycles of a permutation,
        including length-1 cycles.
        """
        return sorted(len(cycle) for cycle in self.cycles(canonical = False))

    def fixed_points(self):
        """ Obtain the sorted list of symbols that the permutation maps to themselves. """
        return sorted(symbol for symbol, image in self.mapping().items() if symbol == image)

    def is_identity(self):
        """ Check if a permutation is the identity permutation. """
        return all(symbol == image for symbol, image in self.mapping().items())

    def order(self):
        """ Obtain the smallest power to which self must be raised in order to return the identity. """
        return int(np.lcm.reduce(self.cycle_type()))


def multiply(left, right):
    """
    Multiply two permutations.

    The product applies left first and right second; it is computed by multiplying the
    concatenated cycle forms with multiply_text().

    Return  the product, or None if either permutation is missing or has an empty cycle form.
    """
    if left is None or not left.cycle_form or right is None or not right.cycle_form:
        return None

    return Permutation(multiply_text(left.cycle_form + right.cycle_form))
