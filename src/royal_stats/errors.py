"""Errors raised while fetching, parsing and aggregating monarchs."""


class RoyalStatsError(Exception):
    """Base class for all errors raised by this package."""


class NetworkError(RoyalStatsError):
    """The kings feed could not be downloaded.

    Raised on connection failures, non-2xx responses and timeouts.
    """


class FormatError(RoyalStatsError, ValueError):
    """The kings feed contained data we could not parse."""


class EmptyInputError(RoyalStatsError, ValueError):
    """Statistics were requested over an empty list of monarchs."""
