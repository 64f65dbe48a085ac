"""Builds the pools of allowed characters from the resolved options."""

from dataclasses import dataclass
import logging
from math import log2
import string

from makepw.errors import ConfigurationError
from makepw.options import GenerationMode, Options


LOGGER = logging.getLogger('makepw')

CONSONANTS = 'bcdfghjklmnpqrstvwxz'
VOWELS = 'aeiouy'
DIGITS = string.digits
SYMBOLS = string.punctuation
# characters easily confused with one another when read off a screen
AMBIGUOUS = 'B8G6I1l0OQDS5Z2' + '|`\''

def _filter(chars: str, excluded: str) -> str:
    """Removes excluded characters, keeping the original order."""
    return ''.join(c for c in chars if (c not in excluded))

@dataclass(frozen = True)
class CharacterPool:
    """Ordered, read-only pools of characters for each class. A disabled class has an empty pool."""
    consonants: str
    vowels: str
    upper_consonants: str
    upper_vowels: str
    digits: str
    symbols: str
    @property
    def lowercase(self) -> str:
        return ''.join(sorted(self.consonants + self.vowels))
    @property
    def uppercase(self) -> str:
        return ''.join(sorted(self.upper_consonants + self.upper_vowels))
    @property
    def combined(self) -> str:
        """Union of every enabled class, used by the random generator."""
        return self.lowercase + self.uppercase + self.digits + self.symbols
    @property
    def bits_per_char(self) -> float:
        return log2(len(self.combined))
    def class_pool(self, name: str) -> str:
        """Gets the pool for one of the guarantee classes: 'symbol', 'uppercase' or 'digit'."""
        pools = {'symbol' : self.symbols, 'uppercase' : self.uppercase, 'digit' : self.digits}
        try:
            return pools[name]
        except KeyError:
            raise ValueError(f'unknown character class {name!r}') from None

def build_pool(options: Options) -> CharacterPool:
    """Constructs the character pools for the given options, raising ConfigurationError if a required pool ends up empty."""
    excluded = options.remove_chars
    if options.avoid_ambiguous:
        excluded += AMBIGUOUS
    if options.avoid_vowels:
        excluded += VOWELS + VOWELS.upper()
    pool = CharacterPool(
        consonants = _filter(CONSONANTS, excluded),
        vowels = _filter(VOWELS, excluded),
        upper_consonants = _filter(CONSONANTS.upper(), excluded) if options.use_uppercase else '',
        upper_vowels = _filter(VOWELS.upper(), excluded) if options.use_uppercase else '',
        digits = _filter(DIGITS, excluded) if options.use_digits else '',
        symbols = _filter(SYMBOLS, excluded) if options.symbols_enabled else ''
    )
    required = [('lowercase', pool.lowercase)]
    if (options.mode == GenerationMode.PRONOUNCEABLE):
        required.append(('consonant', pool.consonants))
        if (not options.avoid_vowels):
            required.append(('vowel', pool.vowels))
    if options.use_uppercase:
        required.append(('uppercase', pool.uppercase))
    if options.use_digits:
        required.append(('digit', pool.digits))
    if options.symbols_enabled:
        required.append(('symbol', pool.symbols))
    for (name, chars) in required:
        if (not chars):
            raise ConfigurationError(f'no {name} characters remain after exclusions')
    LOGGER.debug(f'Character pool: {len(pool.lowercase)} lowercase, {len(pool.uppercase)} uppercase, {len(pool.digits)} digits, {len(pool.symbols)} symbols')
    return pool
