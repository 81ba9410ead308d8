"""Random names, suffixes and default credentials."""

import random
import secrets
import string
from collections.abc import Sequence
from typing import Optional

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits

PASSWORD_CLASS_SIZE = 5


class RandomGenerator:
    """
    Generate random strings under character-class constraints.

    The random source is injectable. It defaults to ``secrets.SystemRandom``
    because generated passwords end up as database and WinRM administrator
    credentials; tests pass a seeded ``random.Random``.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or secrets.SystemRandom()

    def random_password(self, special_chars: Sequence[str]) -> str:
        """
        Return 20 shuffled characters: 5 of each of special, lower, upper and digit.

        :param special_chars: Allowed special characters.
        :return: The generated password.
        """
        chars = (
            self._sample(special_chars, PASSWORD_CLASS_SIZE)
            + self._sample(LOWERCASE, PASSWORD_CLASS_SIZE)
            + self._sample(UPPERCASE, PASSWORD_CLASS_SIZE)
            + self._sample(DIGITS, PASSWORD_CLASS_SIZE)
        )
        self._rng.shuffle(chars)
        return "".join(chars)

    def random_string(self, length: int) -> str:
        """Return ``length`` lowercase letters."""
        return "".join(self._sample(LOWERCASE, length))

    def random_number(self, length: int) -> str:
        """Return ``length`` decimal digits."""
        return "".join(self._sample(DIGITS, length))

    def _sample(self, alphabet: Sequence[str], length: int) -> list[str]:
        if not alphabet or length <= 0:
            return []
        return [self._rng.choice(alphabet) for _ in range(length)]
