"""
Rotation of pairs of orthogonal horizontal components.
"""

import math
import numpy as np

from .errors import LengthMismatch, MissingArgument, NotOrthogonal, SamplingMismatch
from .trace import Trace, component_name, normalize_azimuth, update_headers

# Relative tolerance on the 90 degree azimuth difference
ORTHOGONALITY_RTOL = math.sqrt(np.finfo(np.float64).eps)


def rotate_through(traces, s2_or_phi, phi=None):
    """
    Rotate pairs of horizontal, orthogonal traces clockwise by ``phi`` degrees.

    Call as ``rotate_through(trace1, trace2, phi)`` for one pair, or
    ``rotate_through(traces, phi)`` for a list of even length, whose
    consecutive traces (0 and 1, 2 and 3, ...) form the pairs.

    This is a reference frame transformation (passive rotation), so
    particle motion appears to rotate anticlockwise. Each trace's ``cmpaz``
    increases by ``phi`` (modulo 360) and ``kcmpnm`` is rebuilt from the
    new azimuth.

    Every pair is checked before any trace is modified:

    - azimuths differ by 90 degrees modulo 180, else ``NotOrthogonal``
    - equal ``npts``, else ``LengthMismatch``
    - equal ``delta``, else ``SamplingMismatch``

    Parameters
    ----------
    traces : Trace or list of Trace
        First trace of a pair, or a list of pairs
    s2_or_phi : Trace or float
        Second trace of the pair, or the angle when ``traces`` is a list
    phi : float, optional
        Rotation angle in degrees; required for a single pair

    Returns
    -------
    (trace1, trace2) or list of Trace
        The rotated input traces
    """
    pairs, angle = _pairs_and_angle(traces, s2_or_phi, phi)
    for s1, s2 in pairs:
        _check_pair(s1, s2)
    for s1, s2 in pairs:
        _rotate_pair(s1, s2, angle)
    if isinstance(traces, Trace):
        return pairs[0]
    return traces


def rotate_through_copy(traces, s2_or_phi, phi=None):
    """
    Copying version of ``rotate_through``.

    Takes the same arguments and returns rotated copies of the traces,
    leaving the originals unaltered.
    """
    if isinstance(traces, Trace):
        return rotate_through(traces.copy(), s2_or_phi.copy(), phi)
    return rotate_through([tr.copy() for tr in traces], s2_or_phi, phi)


def _pairs_and_angle(traces, s2_or_phi, phi):
    if isinstance(traces, Trace):
        if not isinstance(s2_or_phi, Trace):
            raise TypeError(
                f"second argument must be a Trace when rotating a pair (got {type(s2_or_phi).__name__})")
        if phi is None:
            raise MissingArgument("rotate_through(trace1, trace2, phi) needs an angle")
        return [(traces, s2_or_phi)], phi

    if phi is not None:
        raise TypeError("rotate_through(traces, phi) takes a list of traces and one angle")
    traces = list(traces)
    if len(traces) % 2 != 0:
        raise LengthMismatch(
            f"list of traces must be a multiple of two long (got {len(traces)})")
    return list(zip(traces[0::2], traces[1::2])), s2_or_phi


def _check_pair(s1, s2):
    separation = math.fmod(abs(s2.cmpaz - s1.cmpaz), 180.0)
    if not math.isclose(separation, 90.0, rel_tol=ORTHOGONALITY_RTOL):
        raise NotOrthogonal(
            f"traces must be orthogonal (azimuths {s1.cmpaz} and {s2.cmpaz})")
    if s1.npts != s2.npts:
        raise LengthMismatch(f"traces must be same length ({s1.npts} != {s2.npts})")
    if s1.delta != s2.delta:
        raise SamplingMismatch(f"traces must have same delta ({s1.delta} != {s2.delta})")


def _rotate_pair(s1, s2, phi):
    phir = np.radians(phi)
    c, s = np.cos(phir), np.sin(phir)
    x1, x2 = s1.samples, s2.samples
    s1.samples, s2.samples = c * x1 + s * x2, -s * x1 + c * x2
    for tr in (s1, s2):
        tr.cmpaz = normalize_azimuth(tr.cmpaz + phi)
        tr.kcmpnm = component_name(tr.cmpaz)
        update_headers(tr)
