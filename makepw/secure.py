"""Fully random ("secure") password generation."""

from typing import List

from makepw.charsets import CharacterPool
from makepw.entropy import EntropySource, choose


def make_random(length: int, pool: CharacterPool, entropy: EntropySource) -> List[str]:
    """Draws each character uniformly from the union of all enabled pools.
    Every character is equally likely, so larger classes carry proportionally more weight."""
    chars = pool.combined
    return [choose(entropy, chars) for _ in range(length)]
