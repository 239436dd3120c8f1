"""Exceptions raised while handling tip requests."""


class TipError(Exception):
    """Base class for tip request failures.

    ``status_code`` is the HTTP status the server answers with.
    """

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidAmount(TipError):
    """Amount missing, non-numeric, negative or too large for a u256."""

    status_code = 400


class UpstreamEncodingFailure(TipError):
    """The contract-call encoder rejected the call arguments."""

    status_code = 502


class EncodingTimeout(UpstreamEncodingFailure):
    """Building the transfer call did not finish in time."""

    status_code = 504
