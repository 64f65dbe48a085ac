"""Pronounceable password generation.

Letters alternate between consonants and vowels. At each position a digit or an uppercase letter may be substituted with low probability, when that class is enabled. An uppercase substitution keeps the phonetic class of the position, so the consonant/vowel alternation of the letters is unaffected."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from makepw.charsets import CharacterPool
from makepw.entropy import EntropySource, choose


DIGIT_ODDS = (1, 5)
UPPERCASE_ODDS = (1, 5)

class Phoneme(Enum):
    CONSONANT = 'consonant'
    VOWEL = 'vowel'
    def flip(self) -> 'Phoneme':
        return Phoneme.VOWEL if (self is Phoneme.CONSONANT) else Phoneme.CONSONANT

@dataclass
class CVState:
    """State of the consonant/vowel machine while one candidate is being built."""
    expect: Phoneme
    prev_vowel: Optional[bool] = None  # None until a letter has been emitted
    position: int = 0
    def advance(self, emitted: Optional[Phoneme]) -> None:
        """Moves to the next position. emitted is the phonetic class of the letter just placed, or None for a digit."""
        if (emitted is None):
            self.expect = self.expect.flip()
        else:
            self.prev_vowel = (emitted is Phoneme.VOWEL)
            self.expect = Phoneme.CONSONANT if self.prev_vowel else Phoneme.VOWEL
        self.position += 1

def _letters(pool: CharacterPool, phoneme: Phoneme, upper: bool) -> Tuple[str, Phoneme]:
    if (phoneme is Phoneme.VOWEL):
        vowels = pool.upper_vowels if upper else pool.vowels
        if vowels:
            return (vowels, Phoneme.VOWEL)
        # no vowels available (e.g. they were excluded): fall back to consonants
    return (pool.upper_consonants if upper else pool.consonants, Phoneme.CONSONANT)

def next_char(state: CVState, pool: CharacterPool, entropy: EntropySource) -> Tuple[str, Optional[Phoneme]]:
    """Draws the character for the current position, returning it along with its phonetic class (None for a digit)."""
    if pool.digits and entropy.next_bool(*DIGIT_ODDS):
        return (choose(entropy, pool.digits), None)
    (letters, phoneme) = _letters(pool, state.expect, upper = False)
    if pool.uppercase:
        (upper, upper_phoneme) = _letters(pool, state.expect, upper = True)
        if upper and (upper_phoneme is phoneme) and entropy.next_bool(*UPPERCASE_ODDS):
            return (choose(entropy, upper), phoneme)
    return (choose(entropy, letters), phoneme)

def make_pronounceable(length: int, pool: CharacterPool, entropy: EntropySource) -> List[str]:
    """Generates a raw pronounceable candidate of the given length, as a list of characters."""
    start = Phoneme.CONSONANT if entropy.next_bool(1, 2) else Phoneme.VOWEL
    state = CVState(expect = start)
    chars = []
    while (state.position < length):
        (c, phoneme) = next_char(state, pool, entropy)
        chars.append(c)
        state.advance(phoneme)
    return chars
