"""Temporary password generation for roster-added members."""

import random
import secrets
from typing import Annotated

from fastapi import Depends

from workboard.core.constants import (
    TEMPORARY_PASSWORD_ALPHABET,
    TEMPORARY_PASSWORD_LENGTH,
)


class TemporaryPasswordGenerator:
    """Draws temporary passwords uniformly from a fixed alphabet.

    The random source is injectable so tests can seed it; production
    uses the operating system's CSPRNG.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        alphabet: str = TEMPORARY_PASSWORD_ALPHABET,
        length: int = TEMPORARY_PASSWORD_LENGTH,
    ) -> None:
        self.rng = rng or secrets.SystemRandom()
        self.alphabet = alphabet
        self.length = length

    def generate(self) -> str:
        return "".join(self.rng.choice(self.alphabet) for _ in range(self.length))


def get_password_generator() -> TemporaryPasswordGenerator:
    """Dependency that provides the temporary password generator."""
    return TemporaryPasswordGenerator()


PasswordGenerator = Annotated[
    TemporaryPasswordGenerator, Depends(get_password_generator)
]
