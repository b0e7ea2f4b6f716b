"""Errors raised by the guild poller pipeline.

Every failure that aborts a run is a ``PollerError``. ``str(error)`` is
the description reported to the trigger as ``"Failure: <description>"``.
"""

from typing import Optional

from infrastructure.operations import OperationResult


class PollerError(Exception):
    """Base exception for all pipeline failures.

    Attributes:
        error_code: machine-readable failure code
        result: the OperationResult that caused the failure, when there is one
    """

    default_code = "POLLER_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        result: Optional[OperationResult] = None,
    ):
        super().__init__(message)
        self.error_code = error_code or self.default_code
        self.result = result


class ProviderError(PollerError):
    """The match provider call failed or returned no usable guild data."""

    default_code = "PROVIDER_REQUEST_FAILED"


class NormalizationError(PollerError):
    """A raw match could not be turned into a notification.

    Attributes:
        match_id: id of the offending match, when it is known
        field: name of the missing provider field
    """

    default_code = "NORMALIZATION_FAILED"

    def __init__(
        self,
        message: str,
        match_id: Optional[int] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.match_id = match_id
        self.field = field


class MissingMatchFieldError(NormalizationError):
    default_code = "MATCH_FIELD_MISSING"

    def __init__(self, field: str, match_id: Optional[int] = None):
        super().__init__(
            f"Match {match_id if match_id is not None else '<unknown>'} "
            f"is missing required field '{field}'",
            match_id=match_id,
            field=field,
        )


class MissingPlayerFieldError(NormalizationError):
    default_code = "PLAYER_FIELD_MISSING"

    def __init__(self, field: str, match_id: Optional[int] = None, index: int = 0):
        super().__init__(
            f"Player {index} of match {match_id} is missing required field '{field}'",
            match_id=match_id,
            field=field,
        )
        self.index = index


class EmptyParticipantsError(NormalizationError):
    default_code = "MATCH_WITHOUT_PLAYERS"

    def __init__(self, match_id: Optional[int] = None):
        super().__init__(
            f"Match {match_id} has no players", match_id=match_id, field="players"
        )


class PublishError(PollerError):
    """A destination channel failed to accept a notification.

    Attributes:
        channel: name of the failing channel
        match_id: match whose notification failed
    """

    default_code = "PUBLISH_FAILED"

    def __init__(
        self,
        message: str,
        channel: str,
        match_id: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message, error_code=error_code)
        self.channel = channel
        self.match_id = match_id


class StoreError(PollerError):
    """The watermark store could not be read or written."""

    default_code = "WATERMARK_READ_FAILED"
