"""Short code generation utilities."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate short codes for URLs."""

    # Base62 characters (digits, upper, lower)
    BASE62_CHARS = string.digits + string.ascii_uppercase + string.ascii_lowercase

    DEFAULT_LENGTH = 5

    def __init__(self, default_length: int = DEFAULT_LENGTH, rng: Optional[random.Random] = None):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            rng: Optional random source (module-level ``random`` if not given)
        """
        if default_length < 1:
            raise ValueError("default_length must be at least 1")
        self.default_length = default_length
        self._rng = rng or random

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Each character is drawn uniformly from the 62-symbol alphabet.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(self._rng.choices(self.BASE62_CHARS, k=length))

    def is_valid_format(self, code: str, length: Optional[int] = None) -> bool:
        """Check that a code could have been produced by this generator."""
        length = length or self.default_length
        if not isinstance(code, str) or len(code) != length:
            return False
        return all(c in self.BASE62_CHARS for c in code)
