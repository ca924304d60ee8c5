from .bloomfilter import DEFAULT_SIZE, HASH_COUNT, BloomFilter
from .hashes import ELEMENT_MAX, ELEMENT_MIN, Hash, hash_indices


__all__ = [
    "BloomFilter",
    "Hash",
    "hash_indices",
    "DEFAULT_SIZE",
    "HASH_COUNT",
    "ELEMENT_MIN",
    "ELEMENT_MAX",
]

__version__ = "0.1.0"
