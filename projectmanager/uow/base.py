"""
Abstract Unit of Work contracts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from projectmanager.services._shared.ports import UserRepositoryPort


class UnitOfWork(ABC):
    """
    Coordinates a transactional boundary for one request.

    Responsibilities:
    - Provide repositories bound to the same session/transaction.
    - Commit on success, rollback on error.
    """

    users: UserRepositoryPort

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...
    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...
    @abstractmethod
    def commit(self) -> None: ...
    @abstractmethod
    def rollback(self) -> None: ...
