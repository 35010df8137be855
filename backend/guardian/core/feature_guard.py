"""
Feature guard - isolated failure handling for optional sub-analyses

Each optional signal (holder concentration, contract verification, transfer
graph, jeeter report, metadata enrichment) runs through the guard. A failure
is logged under the feature name and replaced by a default value, so the
request still succeeds.
"""
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar, Union
import logging


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful guarded operation"""
    value: T


@dataclass(frozen=True)
class Failed:
    """Failed guarded operation"""
    feature: str
    reason: str


GuardResult = Union[Ok[T], Failed]


class FeatureGuard:
    """Run-or-default combinator for optional operations"""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger

    async def attempt(self, name: str, operation: Callable[[], Awaitable[T]]) -> GuardResult:
        """Run operation, capturing any exception as Failed"""
        try:
            return Ok(await operation())
        except Exception as e:
            reason = str(e) or e.__class__.__name__
            self.logger.error(
                f"{name} failed: {reason}",
                extra={"feature": name}
            )
            return Failed(feature=name, reason=reason)

    async def run(self, name: str, operation: Callable[[], Awaitable[T]], default: T) -> T:
        """Run operation, returning default on failure"""
        result = await self.attempt(name, operation)
        if isinstance(result, Ok):
            return result.value
        return default
