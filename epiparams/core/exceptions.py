"""
Errors and Warnings
===================
Failure taxonomy for reference lookups and parameter reconciliation
"""


class EpiParamsError(Exception):
    """Base class for all package errors"""


class InvalidArgumentError(EpiParamsError, TypeError):
    """Argument has the wrong type or shape, or is out of range"""


class NotFoundError(EpiParamsError, LookupError):
    """Country or ISO3 code is not in the reference data"""


class DataUnavailableError(EpiParamsError):
    """Country is known but the requested data cannot be resolved"""


class Notice(UserWarning):
    """Non-fatal notice, e.g. both country and iso3c supplied"""
