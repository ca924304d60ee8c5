from enum import Enum
from typing import Callable, Dict, Tuple


"""The three fixed hash functions of the toy Bloom filter.

    Each function maps a single byte (0..255) and the bit array size M
    to an index in [0, M):

        H1(x) = x mod M
        H2(x) = (2x + 3) mod M
        H3(x) = 8x mod M

    They are deliberately simple linear maps, not cryptographic hashes.
    Python ints do not overflow, so 8 * 255 is reduced only at the end.
"""

ELEMENT_MIN = 0
ELEMENT_MAX = 255


# ---------------------- Validation ----------------------
def validate_element(element: int) -> int:
    """Check that element is a single unsigned byte."""
    if isinstance(element, bool) or not isinstance(element, int):
        raise TypeError(f"element must be an int, got {type(element).__name__}")
    if not ELEMENT_MIN <= element <= ELEMENT_MAX:
        raise ValueError(
            f"element must be in [{ELEMENT_MIN}, {ELEMENT_MAX}], got {element}"
        )
    return element


def validate_modulus(modulus: int) -> int:
    """Check that modulus (the bit array size) is a positive int."""
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        raise TypeError(f"modulus must be an int, got {type(modulus).__name__}")
    if modulus < 1:
        raise ValueError(f"modulus must be >= 1, got {modulus}")
    return modulus


# ---------------------- Hash Family ----------------------
class Hash(Enum):
    """
    The hash variants. The member value is the formula shown by str():

        >>> str(Hash.H2)
        'H2(2x + 3 mod M)'
        >>> Hash.hash(Hash.H2, 2, 256)
        7
    """

    H1 = "H1(x mod M)"
    H2 = "H2(2x + 3 mod M)"
    H3 = "H3(8x mod M)"

    def __str__(self) -> str:
        return self.value

    @property
    def formula(self) -> str:
        return self.value

    def index(self, element: int, modulus: int) -> int:
        """Compute this variant's bit index for element in an array of size modulus."""
        validate_element(element)
        validate_modulus(modulus)
        return _HASH_FUNCTIONS[self](element, modulus)

    @staticmethod
    def hash(variant: "Hash", element: int, modulus: int) -> int:
        """Same as variant.index(element, modulus)."""
        return Hash(variant).index(element, modulus)


_HASH_FUNCTIONS: Dict[Hash, Callable[[int, int], int]] = {
    Hash.H1: lambda x, m: x % m,
    Hash.H2: lambda x, m: (2 * x + 3) % m,
    Hash.H3: lambda x, m: (8 * x) % m,
}


def hash_indices(element: int, modulus: int) -> Tuple[int, int, int]:
    """Return the (H1, H2, H3) indices for element, in that order."""
    validate_element(element)
    validate_modulus(modulus)
    return tuple(_HASH_FUNCTIONS[h](element, modulus) for h in Hash)
