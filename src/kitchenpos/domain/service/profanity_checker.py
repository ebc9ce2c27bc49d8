"""Port for the profanity check applied to product and menu names.

The check lives behind this interface so handlers receive it as an
injected collaborator; the HTTP implementation is in infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProfanityChecker(ABC):

    @abstractmethod
    def contains_profanity(self, text: str) -> bool:
        """Return True if *text* contains banned words."""
