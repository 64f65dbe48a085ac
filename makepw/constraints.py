"""Post-processing that guarantees mandated character classes appear in a candidate."""

from collections import Counter
from typing import List, Optional, Sequence, Set

from makepw.charsets import CharacterPool
from makepw.entropy import EntropySource, choose
from makepw.options import Options


# highest priority first: on short passwords, later guarantees are dropped once positions run out
GUARANTEE_ORDER = ('symbol', 'uppercase', 'digit')

def required_classes(options: Options) -> Set[str]:
    """Character classes that every password must contain."""
    required = set()
    if options.require_symbol:
        required.add('symbol')
    if options.use_uppercase:
        required.add('uppercase')
    if options.use_digits:
        required.add('digit')
    return required

def _overwrite_positions(chars: List[str], free: List[int], others: List[str]) -> List[int]:
    """Chooses which free positions may be overwritten: preferably ones holding no other required class, then ones whose class has a second holder elsewhere."""
    def holder_of(i: int) -> Optional[str]:
        return next((pool for pool in others if (chars[i] in pool)), None)
    plain = [i for i in free if (holder_of(i) is None)]
    if plain:
        return plain
    counts = Counter(holder_of(i) for i in range(len(chars)))
    spare = [i for i in free if (counts[holder_of(i)] > 1)]
    return spare or free

def enforce(chars: List[str], options: Options, pool: CharacterPool, entropy: EntropySource, order: Sequence[str] = GUARANTEE_ORDER) -> str:
    """Patches a candidate in place so that it contains each required class, then returns it as a string.
    Classes are handled in the given priority order. A class already present reserves one position holding it; a missing class overwrites a random unreserved position with a random member of its pool (an uppercase requirement capitalizes an existing letter when it can). Reserved positions are never overwritten, so an earlier guarantee cannot be undone by a later one."""
    unknown = [name for name in order if (name not in GUARANTEE_ORDER)]
    if unknown:
        raise ValueError(f'unknown character class(es) in guarantee order: {unknown}')
    required = required_classes(options)
    names = [name for name in order if (name in required)]
    reserved: Set[int] = set()
    for name in names:
        class_chars = pool.class_pool(name)
        holders = [i for (i, c) in enumerate(chars) if (c in class_chars)]
        if holders:
            unreserved = [i for i in holders if (i not in reserved)]
            if unreserved:
                reserved.add(unreserved[0])
            continue
        free = [i for i in range(len(chars)) if (i not in reserved)]
        if (not free):
            break
        if (name == 'uppercase'):
            # capitalizing an existing letter keeps the consonant/vowel pattern intact
            capitalizable = [i for i in free if (chars[i].upper() != chars[i]) and (chars[i].upper() in class_chars)]
            if capitalizable:
                pos = choose(entropy, capitalizable)
                chars[pos] = chars[pos].upper()
                reserved.add(pos)
                continue
        others = [pool.class_pool(other) for other in names if (other != name)]
        pos = choose(entropy, _overwrite_positions(chars, free, others))
        chars[pos] = choose(entropy, class_chars)
        reserved.add(pos)
    return ''.join(chars)
