"""
Error types raised by SACPROC operations.

Every error derives from ``SacProcError`` and from the closest builtin
exception, so callers may catch either the package-specific class or a
generic ``ValueError`` / ``ZeroDivisionError``.
"""


class SacProcError(Exception):
    """Base class for all SACPROC errors."""


class InvalidArgument(SacProcError, ValueError):
    """Out-of-range or nonsensical parameter (stencil size, taper form...)."""


class MissingArgument(SacProcError, TypeError):
    """A required keyword (e.g. the resampling target) was not supplied."""


class RangeError(SacProcError, ValueError):
    """Cut window lies outside the trace or is inverted."""


class LengthMismatch(SacProcError, ValueError):
    """Paired inputs have different lengths or sample counts."""


class SamplingMismatch(SacProcError, ValueError):
    """Paired traces have different sampling intervals."""


class NotOrthogonal(SacProcError, ValueError):
    """Component azimuths are not 90 degrees apart."""


class DivideByZero(SacProcError, ZeroDivisionError):
    """Division of trace samples by zero."""


class InvalidState(SacProcError, RuntimeError):
    """Trace is in a state where derived headers cannot be computed."""
