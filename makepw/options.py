"""Resolved configuration for one invocation of the password generator."""

from dataclasses import dataclass
from enum import Enum

from makepw.errors import ConfigurationError


DEFAULT_LENGTH = 8
DEFAULT_COUNT = 1
DEFAULT_ROWS = 20  # rows printed by default in column mode

class GenerationMode(Enum):
    RANDOM = 'random'
    PRONOUNCEABLE = 'pronounceable'

@dataclass(frozen = True)
class Options:
    length: int = DEFAULT_LENGTH
    count: int = DEFAULT_COUNT
    use_digits: bool = True
    use_uppercase: bool = True
    use_symbols: bool = False
    require_symbol: bool = False
    avoid_vowels: bool = False
    avoid_ambiguous: bool = False
    secure_mode: bool = False
    column_count: int = 1
    remove_chars: str = ''  # extra characters to strip from every pool
    def __post_init__(self):
        for name in ['length', 'count', 'column_count']:
            val = getattr(self, name)
            if (not isinstance(val, int)) or (val < 1):
                raise ConfigurationError(f'{name} must be a positive integer, got {val!r}')
    @property
    def mode(self) -> GenerationMode:
        return GenerationMode.RANDOM if self.secure_mode else GenerationMode.PRONOUNCEABLE
    @property
    def symbols_enabled(self) -> bool:
        """Whether the symbol pool is built at all."""
        return (self.use_symbols or self.require_symbol)
