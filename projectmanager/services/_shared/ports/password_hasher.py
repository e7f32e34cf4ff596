from __future__ import annotations

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Port for one-way, salted password hashing."""

    def hash(self, plaintext: str) -> str:
        """Return a hash of ``plaintext`` using a freshly generated salt.

        The salt and cost parameters must be embedded in the returned string
        so :meth:`verify` needs nothing else.
        """
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Recompute with the salt embedded in ``hashed`` and compare."""
        ...
