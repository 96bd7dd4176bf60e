"""
Application Exceptions

Author: Your Name
Version: 1.0.0
"""

from typing import Iterable


class InvalidConfigurationError(ValueError):
    """
    Raised when a configuration key names no known variant.

    Attributes:
        category: What was being configured ("database", "notification", ...)
        kind: The unrecognized key as given
        valid: The keys that would have been accepted
    """

    def __init__(self, category: str, kind: object, valid: Iterable[str] = ()):
        self.category = category
        self.kind = kind
        self.valid = list(valid)
        super().__init__(f"Unknown {category} type: {kind}")
