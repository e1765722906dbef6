"""Tagged lookup outcomes returned instead of raising."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Found:
    """Successful lookup carrying the resolved value."""

    value: Any

    @property
    def found(self) -> bool:
        return True

    def unwrap_or(self, default: Any) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class NotFound:
    """Completed lookup that determined the key is absent."""

    reason: str

    @property
    def found(self) -> bool:
        return False

    def unwrap_or(self, default: Any) -> Any:
        return default


Outcome = Union[Found, NotFound]
