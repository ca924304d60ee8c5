import math
import logging
from typing import Tuple

import bitarray

from toybloom.hashes import hash_indices, validate_element, validate_modulus


"""A toy Bloom filter over single-byte elements.

    A Bloom filter is a space-efficient probabilistic data structure
    used to test whether an element is a member of a set.
    It returns either "possibly in set" or "definitely not in set".

    Elements can be added but never removed, so a bit that was set stays set.
    The more elements are added, the higher the chance of a false positive.

    This one is fixed to 3 hash functions (see toybloom.hashes) and
    a bit array of M bits, 256 by default.
"""

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 256
HASH_COUNT = 3


class BloomFilter:
    def __init__(self, size: int = DEFAULT_SIZE):
        """
        Initialize the bit array with every flag cleared.
        size: number of bits M, must be >= 1
        """
        self._size = validate_modulus(size)
        self.bit_array = bitarray.bitarray(self._size)
        self.bit_array.setall(0)
        self.item_count = 0
        logger.debug(
            "[BloomFilter] Initialized with %d bits and %d hash functions",
            self._size, HASH_COUNT,
        )

    @classmethod
    def new(cls) -> "BloomFilter":
        return cls(DEFAULT_SIZE)

    @classmethod
    def with_size(cls, size: int) -> "BloomFilter":
        return cls(size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def bits(self) -> Tuple[int, ...]:
        """The flags as 0/1 ints, in index order."""
        return tuple(int(b) for b in self.bit_array)

    def indices(self, element: int) -> Tuple[int, int, int]:
        """The (H1, H2, H3) bit positions for element."""
        return hash_indices(element, self._size)

    def add(self, element: int) -> None:
        """Insert an element into the filter"""
        for h in self.indices(element):
            self.bit_array[h] = 1
        self.item_count += 1

    def query(self, element: int) -> bool:
        """Check if element is possibly in set"""
        return all(self.bit_array[h] for h in self.indices(element))

    def __contains__(self, element: int) -> bool:
        return self.query(element)

    def __len__(self) -> int:
        return self._size

    # ---------------------- Statistics ----------------------
    def set_bit_count(self) -> int:
        return self.bit_array.count(1)

    def fill_ratio(self) -> float:
        return self.set_bit_count() / self._size

    def false_positive_probability(self) -> float:
        """
        Theoretical false positive rate after item_count insertions:
        p = (1 - e^(-k*n/m))^k
        """
        if self.item_count == 0:
            return 0.0
        return (1 - math.exp(-HASH_COUNT * self.item_count / self._size)) ** HASH_COUNT

    # ---------------------- Display ----------------------
    def __str__(self) -> str:
        return " ".join(self.bit_array.to01())

    def __repr__(self) -> str:
        return (
            f"BloomFilter(size={self._size}, set_bits={self.set_bit_count()}, "
            f"items={self.item_count})"
        )


if __name__ == "__main__":
    bf = BloomFilter.new()

    bf.add(1)
    bf.add(2)
    bf.add(3)

    print("1:", bf.query(1))    # True
    print("3:", bf.query(3))    # True
    print("4:", bf.query(4))    # False (definitely not)

    small = BloomFilter.with_size(5)
    small.add(9)
    small.add(11)
    print(f"{small!r} -> bits: {small}")
    print("16:", small.query(16), "(never added, false positive)")
