"""
errors/group.py - Group independent errors

The first error is the one that occurred during the main operation; the
others occurred while handling it (cleanup, rollback, ...).
"""

from __future__ import annotations
from typing import List, Optional, Tuple, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from burrito.bootstrap.config import BurritoConfig

logger = logging.getLogger("burrito.errors")


class ErrorGroup(Exception):
    """Two or more errors reported together."""

    def __init__(self, errors: List[BaseException]) -> None:
        errors = tuple(errors)
        if len(errors) < 2:
            raise ValueError(
                f"ErrorGroup needs at least 2 errors, got {len(errors)}; use group()"
            )
        for err in errors:
            if not isinstance(err, BaseException):
                raise TypeError(
                    f"ErrorGroup entries must be exceptions, got {type(err).__name__}"
                )
        super().__init__(errors)
        self._errors: Tuple[BaseException, ...] = errors

    @property
    def errors(self) -> Tuple[BaseException, ...]:
        return self._errors

    @property
    def primary(self) -> BaseException:
        return self._errors[0]

    @property
    def additional(self) -> Tuple[BaseException, ...]:
        return self._errors[1:]

    def __len__(self) -> int:
        return len(self._errors)

    def render(self, config: Optional["BurritoConfig"] = None) -> str:
        from burrito.rendering.renderer import render_group
        return render_group(self, config)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ErrorGroup({list(self._errors)!r})"


def group(*errors: Optional[BaseException]) -> Optional[BaseException]:
    """
    Combine errors into one.

    None entries are ignored. With no errors left the result is None, a
    single error is returned unchanged, and two or more become an ErrorGroup.
    """
    present = [e for e in errors if e is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    logger.debug(f"Grouping {len(present)} errors")
    return ErrorGroup(present)
