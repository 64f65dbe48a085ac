import dataclasses
import logging
import string

import pytest

from makepw.charsets import AMBIGUOUS, DIGITS, SYMBOLS, VOWELS, build_pool
from makepw.entropy import SystemEntropy
from makepw.errors import ConfigurationError, EntropyUnavailable
from makepw.generate import generate_passwords, make_password
from makepw.options import Options

from conftest import ScriptedEntropy, SeededEntropy, is_consonant, is_vowel


OPTION_GRID = [
    Options(),
    Options(secure_mode = True),
    Options(use_symbols = True),
    Options(use_symbols = True, secure_mode = True),
    Options(require_symbol = True),
    Options(require_symbol = True, secure_mode = True, avoid_ambiguous = True),
    Options(use_digits = False, use_uppercase = False),
    Options(avoid_vowels = True),
    Options(avoid_vowels = True, secure_mode = True, use_symbols = True),
    Options(avoid_ambiguous = True),
    Options(remove_chars = 'aeb'),
]

@pytest.mark.parametrize('options', OPTION_GRID)
@pytest.mark.parametrize('length', [1, 2, 3, 8, 20])
def test_properties(options, length):
    options = dataclasses.replace(options, length = length, count = 50)
    allowed = set(build_pool(options).combined)
    pws = generate_passwords(options)
    assert (len(pws) == 50)
    for pw in pws:
        assert (len(pw) == length)
        assert set(pw) <= allowed
        if (not options.symbols_enabled):
            assert not any((c in SYMBOLS) for c in pw)
        if options.avoid_ambiguous:
            assert not any((c in AMBIGUOUS) for c in pw)
        if options.avoid_vowels:
            assert not any((c.lower() in VOWELS) for c in pw)
        for c in options.remove_chars:
            assert (c not in pw)
        if options.require_symbol:
            assert any((c in SYMBOLS) for c in pw)

@pytest.mark.parametrize('secure_mode', [False, True])
@pytest.mark.parametrize('length', [3, 4, 10])
def test_all_guarantees(secure_mode, length):
    options = Options(length = length, count = 200, require_symbol = True, use_symbols = True, secure_mode = secure_mode)
    for pw in generate_passwords(options):
        assert any((c in DIGITS) for c in pw), pw
        assert any(c.isupper() for c in pw), pw
        assert any((c in SYMBOLS) for c in pw), pw

def test_secure_example():
    options = Options(length = 8, count = 3, secure_mode = True, use_digits = True, use_uppercase = True)
    pws = generate_passwords(options)
    assert (len(pws) == 3)
    for pw in pws:
        assert (len(pw) == 8)
        assert set(pw) <= set(string.ascii_letters + string.digits)

def test_single_symbol_example():
    options = Options(length = 1, count = 100, require_symbol = True, use_symbols = True)
    for pw in generate_passwords(options):
        assert (len(pw) == 1)
        assert (pw in SYMBOLS)

def test_pronounceable_example():
    options = Options(length = 6, count = 200, use_digits = False, avoid_ambiguous = False)
    for pw in generate_passwords(options):
        assert (len(pw) == 6)
        assert not any((c in DIGITS) for c in pw)
        for (a, b) in zip(pw, pw[1:]):
            assert (is_consonant(a) and is_vowel(b)) or (is_vowel(a) and is_consonant(b)), pw

def test_passwords_are_distinct():
    options = Options(length = 8, count = 100, secure_mode = True, use_digits = False, use_uppercase = False)
    assert (len(set(generate_passwords(options))) == 100)

def test_scripted_password():
    options = Options(length = 3, secure_mode = True, use_digits = False, use_uppercase = False)
    pool = build_pool(options)
    assert (make_password(options, pool, ScriptedEntropy([2, 0, 1])) == 'cab')

def test_count_with_fake_entropy():
    options = Options(length = 5, count = 7)
    assert (len(generate_passwords(options, SeededEntropy(9))) == 7)

def test_custom_guarantee_order():
    # with two positions, the first two classes in the order win
    options = Options(length = 2, count = 50, require_symbol = True)
    for pw in generate_passwords(options, SeededEntropy(10), order = ('digit', 'symbol', 'uppercase')):
        assert any((c in DIGITS) for c in pw)
        assert any((c in SYMBOLS) for c in pw)

def test_configuration_error():
    with pytest.raises(ConfigurationError):
        generate_passwords(Options(remove_chars = DIGITS))

def test_entropy_failure_propagates():
    def broken(nbytes):
        raise OSError('random device missing')
    with pytest.raises(EntropyUnavailable):
        generate_passwords(Options(), SystemEntropy(read_bytes = broken))

def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger = 'makepw'):
        generate_passwords(Options(count = 2, secure_mode = True))
    assert ('Generating 2 random password(s) of length 8' in caplog.text)
    assert ('bits per character' in caplog.text)
