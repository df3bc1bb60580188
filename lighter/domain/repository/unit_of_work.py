"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Groups writes to several repositories so they succeed or fail together.

    Writes made inside ``atomic()`` are discarded when the block raises; the
    exception still propagates to the caller.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Usage:
            async with unit_of_work.atomic():
                await vote_repository.save(vote)
                await question_repository.apply_vote(...)
        """
        pass
