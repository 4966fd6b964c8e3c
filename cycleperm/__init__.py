import logging

from .errors import PermutationError, EmptyInputError, CycleSyntaxError
from .notation import validate
from .canonical import canonicalize
from .multiply import multiply_text
from .inverse import invert_i, invert_j, invert
from .permutation import Permutation, multiply

logging.getLogger(__name__).addHandler(logging.NullHandler())
