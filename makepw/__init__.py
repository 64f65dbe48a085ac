"""Pronounceable and secure password generation."""

from makepw.charsets import CharacterPool, build_pool
from makepw.entropy import EntropySource, SystemEntropy
from makepw.errors import ConfigurationError, EntropyUnavailable, PasswordGenerationError
from makepw.generate import generate_passwords, make_password
from makepw.options import GenerationMode, Options


__version__ = '0.1.0'
