import random
from typing import Iterable

from makepw.charsets import CONSONANTS, VOWELS


class ScriptedEntropy:
    """Entropy source replaying a fixed sequence of index draws."""
    def __init__(self, indices: Iterable[int]):
        self.indices = list(indices)
        self.calls = []
    def next_index(self, bound):
        assert self.indices, f'script exhausted (bound {bound})'
        value = self.indices.pop(0)
        assert (0 <= value < bound), f'scripted value {value} outside [0, {bound})'
        self.calls.append(bound)
        return value
    def next_bool(self, numerator, denominator):
        return (self.next_index(denominator) < numerator)

class SeededEntropy:
    """Reproducible pseudo-random entropy source for property tests."""
    def __init__(self, seed = 0):
        self.rng = random.Random(seed)
    def next_index(self, bound):
        return self.rng.randrange(bound)
    def next_bool(self, numerator, denominator):
        return (self.rng.randrange(denominator) < numerator)

def is_vowel(c):
    return (c.lower() in VOWELS)

def is_consonant(c):
    return (c.lower() in CONSONANTS)
