"""Sources of randomness for password generation.

Every random decision made by the generators goes through an object exposing `next_index` and `next_bool`, so tests can swap in a scripted source."""

import secrets
from typing import Callable, Protocol

from makepw.errors import EntropyUnavailable


class EntropySource(Protocol):
    def next_index(self, bound: int) -> int:
        """Returns an integer uniformly distributed in [0, bound)."""
        ...
    def next_bool(self, numerator: int, denominator: int) -> bool:
        """Returns True with probability numerator / denominator."""
        ...

class SystemEntropy:
    """Entropy source backed by the operating system's CSPRNG.
    Indices are sampled by rejection: draws that would land in the incomplete top range of the byte space are discarded rather than reduced modulo the bound."""
    def __init__(self, read_bytes: Callable[[int], bytes] = secrets.token_bytes):
        self.read_bytes = read_bytes
    def _read(self, nbytes: int) -> bytes:
        try:
            data = self.read_bytes(nbytes)
        except (OSError, NotImplementedError) as e:
            raise EntropyUnavailable(f'could not read from the system random source: {e}') from e
        if (len(data) != nbytes):
            raise EntropyUnavailable(f'short read from the system random source ({len(data)} of {nbytes} bytes)')
        return data
    def next_index(self, bound: int) -> int:
        if (bound < 1):
            raise ValueError(f'bound must be positive, got {bound}')
        if (bound == 1):
            return 0
        nbytes = ((bound - 1).bit_length() + 7) // 8
        space = 1 << (8 * nbytes)
        limit = space - (space % bound)  # largest multiple of bound that fits
        while True:
            value = int.from_bytes(self._read(nbytes), 'big')
            if (value < limit):
                return value % bound
    def next_bool(self, numerator: int, denominator: int) -> bool:
        if not (0 <= numerator <= denominator):
            raise ValueError(f'invalid probability {numerator}/{denominator}')
        return (self.next_index(denominator) < numerator)

def choose(entropy: EntropySource, seq):
    """Picks a uniformly random element of a non-empty sequence."""
    return seq[entropy.next_index(len(seq))]
