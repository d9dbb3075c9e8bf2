"""Failure types reported by the player lookup pipeline."""

from typing import Optional

from ..api.config import RATE_LIMITED_MESSAGE


class LookupFailure(Exception):
    """Base class for lookup failures.

    Attributes:
        kind (str): Stable name of the failure kind
        status_code (Optional[int]): Upstream HTTP status, if any
    """

    kind = "UnknownFailure"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class InvalidIdentifier(LookupFailure):
    kind = "InvalidIdentifier"

    def __init__(self, identifier: Optional[str] = None) -> None:
        self.identifier = identifier
        super().__init__("Please use format: GameName#TagLine (e.g., Faker#KR1)")


class NotFound(LookupFailure):
    kind = "NotFound"


class RateLimited(LookupFailure):
    """Upstream throttling. The message is fixed regardless of upstream wording."""

    kind = "RateLimited"

    def __init__(self, status_code: Optional[int] = 429) -> None:
        super().__init__(RATE_LIMITED_MESSAGE, status_code)


class UpstreamUnavailable(LookupFailure):
    kind = "UpstreamUnavailable"


class UnknownFailure(LookupFailure):
    kind = "UnknownFailure"
