"""
Borrow tracking for a map.

Read iterators hold a shared borrow, mutable iterators an exclusive one. Any
number of shared borrows may be live together; an exclusive borrow excludes
every other borrow.
"""

from __future__ import annotations
import logging

from .errors import IterationConflictError

logger = logging.getLogger(__name__)


class Borrow:
    """One outstanding borrow. ``release`` is idempotent."""

    __slots__ = ("_guard", "exclusive", "_released")

    def __init__(self, guard: "BorrowGuard", exclusive: bool):
        self._guard = guard
        self.exclusive = exclusive
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._guard._release(self)

    def __repr__(self) -> str:
        kind = "exclusive" if self.exclusive else "shared"
        state = "released" if self._released else "live"
        return f"Borrow({kind}, {state})"


class BorrowGuard:
    def __init__(self):
        self._shared = 0
        self._exclusive = False

    @property
    def shared_count(self) -> int:
        return self._shared

    @property
    def exclusive(self) -> bool:
        return self._exclusive

    def shared_borrow(self) -> Borrow:
        if self._exclusive:
            logger.debug("shared borrow refused: mutable iterator outstanding")
            raise IterationConflictError(
                "Cannot read the map while a mutable iterator over it is outstanding"
            )
        self._shared += 1
        return Borrow(self, exclusive=False)

    def exclusive_borrow(self) -> Borrow:
        if self._exclusive or self._shared:
            logger.debug(
                "exclusive borrow refused: exclusive=%s shared=%d", self._exclusive, self._shared
            )
            raise IterationConflictError(
                "Cannot mutably iterate the map while another iterator over it is outstanding"
            )
        self._exclusive = True
        return Borrow(self, exclusive=True)

    def check_readable(self) -> None:
        if self._exclusive:
            raise IterationConflictError(
                "Cannot access the map while a mutable iterator over it is outstanding"
            )

    def _release(self, borrow: Borrow) -> None:
        if borrow.exclusive:
            self._exclusive = False
        else:
            self._shared -= 1
