from .chain import Chain
from .long_array import LongArray
from .long_map import InvalidArgument, LongMap, long_hash
from .long_dict import LongDict

__all__ = [
    "Chain",
    "LongArray",
    "LongMap",
    "LongDict",
    "InvalidArgument",
    "long_hash",
]
