"""
Trace data model for SACPROC.

A ``Trace`` holds one evenly-sampled time series together with the SAC
header values the processing operations need:
- Sampling interval and time bounds (``delta``, ``b``, ``e``)
- Derived amplitude statistics (``depmax``, ``depmin``, ``depmen``)
- Sensor orientation (``cmpaz``, ``cmpinc``, ``kcmpnm``)
- Pass-through station/event metadata

Derived headers are refreshed explicitly by ``update_headers`` at the end
of every operation that changes the samples; they are never recomputed on
read.
"""

import copy
import numpy as np

from .errors import InvalidArgument, InvalidState

# Width of SAC character header fields such as KCMPNM
SAC_STRING_LENGTH = 8


class Trace:
    """
    One continuous, evenly-sampled seismic record.

    Parameters
    ----------
    samples : array-like
        Sample values; stored as a 1-D float64 array
    delta : float
        Sampling interval in seconds (must be positive)
    b : float
        Time of the first sample relative to the record's time origin
    cmpaz : float
        Component azimuth in degrees clockwise from North
    cmpinc : float
        Component inclination in degrees from vertical
    kcmpnm : str, optional
        Component name. Defaults to a name derived from ``cmpaz``.
    kstnm, knetwk : str, optional
        Station and network codes
    stla, stlo, evla, evlo, baz : float, optional
        Station/event coordinates and back-azimuth, carried unchanged
    """

    def __init__(self, samples, delta, b=0.0, cmpaz=0.0, cmpinc=90.0,
                 kcmpnm=None, kstnm=None, knetwk=None,
                 stla=None, stlo=None, evla=None, evlo=None, baz=None):
        if not delta > 0:
            raise InvalidArgument(f"delta must be positive (got {delta})")

        self.samples = np.array(samples, dtype=np.float64).ravel()
        self.delta = float(delta)
        self.b = float(b)
        self.e = self.b
        self.depmax = self.depmin = self.depmen = None

        self.cmpaz = normalize_azimuth(cmpaz)
        self.cmpinc = float(cmpinc)
        self.kcmpnm = kcmpnm if kcmpnm is not None else component_name(self.cmpaz)
        self.kstnm = kstnm
        self.knetwk = knetwk

        self.stla = stla
        self.stlo = stlo
        self.evla = evla
        self.evlo = evlo
        self.baz = baz

        update_headers(self)

    @property
    def npts(self):
        """Number of samples; always ``len(samples)``."""
        return len(self.samples)

    def time(self):
        """Return the time of each sample relative to the time origin."""
        return self.b + np.arange(self.npts) * self.delta

    def copy(self):
        """Return a deep copy of the trace."""
        return copy.deepcopy(self)

    def __repr__(self):
        sta = self.kstnm or '?'
        return (f"Trace({sta}.{self.kcmpnm}, npts={self.npts}, "
                f"delta={self.delta:g}, b={self.b:g}, e={self.e:g})")


def normalize_azimuth(azimuth):
    """
    Wrap an azimuth in degrees into [0, 360).

    ``x % 360`` can round to exactly 360 for tiny negative ``x``; that case
    is returned as 0.
    """
    az = float(azimuth) % 360.0
    return 0.0 if az >= 360.0 else az


def component_name(azimuth):
    """
    Build a component name from an azimuth.

    The azimuth is written in its plain decimal form and truncated to the
    width of a SAC character header, e.g. ``90.0`` -> ``'90.0'``.
    """
    return str(float(azimuth))[:SAC_STRING_LENGTH]


def as_trace_list(traces):
    """
    Return ``traces`` as a list, wrapping a single ``Trace``.

    Parameters
    ----------
    traces : Trace or sequence of Trace

    Returns
    -------
    traces : list of Trace
    """
    if isinstance(traces, Trace):
        return [traces]
    return list(traces)


def update_headers(traces):
    """
    Make header values that depend on the samples consistent again.

    Recomputes ``depmax``, ``depmin`` and ``depmen`` from the samples and
    ``e`` from ``b``, ``delta`` and ``npts``. Must be called after any
    change to ``samples``.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to update in place

    Returns
    -------
    traces : Trace or list of Trace
        The input, for chaining
    """
    for tr in as_trace_list(traces):
        if tr.npts == 0:
            raise InvalidState("cannot derive headers for a trace with no samples")
        tr.depmax = float(np.max(tr.samples))
        tr.depmin = float(np.min(tr.samples))
        tr.depmen = float(np.mean(tr.samples))
        tr.e = tr.b + tr.delta * (tr.npts - 1)
    return traces
