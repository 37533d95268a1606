"""
exhaustive: lazy, fair enumeration of combinatorial objects over possibly infinite sequences.

    from exhaustive import E, naturals
    naturals().comb.pairs().take(5).to.list()
    # [(0, 0), (0, 1), (1, 0), (1, 1), (0, 2)]
"""

# expose the main classes
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    naturals,
    repeat,
    empty,
    from_string,
    generate,
    controlled_lists_lex,
    exhaustive,
    E
)

# expose the engine primitives
from .demux import (
    bits,
    from_bits,
    demux,
    mux,
    demuxer,
    logarithmic_demux,
    logarithmic_mux,
    square_root_demux,
    square_root_mux,
    get_demultiplexer
)

# expose supporting data classes
from .types import (
    SequenceCache,
    PrefixPermutation,
    ABSENT
)

from .config import EnumerationConfig, ENUMERATION_CONFIG, configure
from .math_utils import factorial, permutation_count

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "naturals",
    "repeat",
    "empty",
    "from_string",
    "generate",
    "controlled_lists_lex",
    "exhaustive",
    "E",
    "bits",
    "from_bits",
    "demux",
    "mux",
    "demuxer",
    "logarithmic_demux",
    "logarithmic_mux",
    "square_root_demux",
    "square_root_mux",
    "get_demultiplexer",
    "SequenceCache",
    "PrefixPermutation",
    "ABSENT",
    "EnumerationConfig",
    "ENUMERATION_CONFIG",
    "configure",
    "factorial",
    "permutation_count"
]
