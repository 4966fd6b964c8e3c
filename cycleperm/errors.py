class PermutationError(ValueError):
    """ Base class for errors raised while reading or combining permutations. """


class EmptyInputError(PermutationError):
    """ Raised when the cycle form is missing or consists only of whitespace. """


class CycleSyntaxError(PermutationError):
    """
    Raised when the cycle form is not properly bracketed.

    This covers a cycle form that does not begin with '(' and end with ')', as well as
    malformations found while multiplying, such as a ')' with no open '('.
    """
