"""Top-level password generation loop."""

import logging
from typing import List, Optional

from makepw.charsets import CharacterPool, build_pool
from makepw.constraints import GUARANTEE_ORDER, enforce
from makepw.entropy import EntropySource, SystemEntropy
from makepw.options import GenerationMode, Options
from makepw.pronounceable import make_pronounceable
from makepw.secure import make_random


LOGGER = logging.getLogger('makepw')

def make_password(options: Options, pool: CharacterPool, entropy: EntropySource, order = GUARANTEE_ORDER) -> str:
    """Produces one password: a raw candidate from the generator for the options' mode, patched by the constraint enforcer."""
    if (options.mode == GenerationMode.RANDOM):
        chars = make_random(options.length, pool, entropy)
    else:
        chars = make_pronounceable(options.length, pool, entropy)
    return enforce(chars, options, pool, entropy, order = order)

def generate_passwords(options: Options, entropy: Optional[EntropySource] = None, order = GUARANTEE_ORDER) -> List[str]:
    """Generates options.count independent passwords.
    Raises ConfigurationError if the options leave a required pool empty, and EntropyUnavailable if the random source fails."""
    entropy = SystemEntropy() if (entropy is None) else entropy
    pool = build_pool(options)
    LOGGER.debug(f'Generating {options.count} {options.mode.value} password(s) of length {options.length} ({pool.bits_per_char:.3f} bits per character)')
    return [make_password(options, pool, entropy, order = order) for _ in range(options.count)]
