"""
Resampling of traces with quadratic splines.
"""

import numpy as np
from scipy.interpolate import UnivariateSpline

from .errors import InvalidArgument, MissingArgument
from .trace import as_trace_list, update_headers

SPLINE_DEGREE = 2


def interpolate(traces, npts=None, delta=None, n=None):
    """
    Resample trace(s) onto a new, regular time grid.

    Exactly one of the keyword arguments must be given:

    - ``npts``: new number of samples between ``b`` and ``e``
    - ``delta``: new sampling interval in seconds
    - ``n``: integer factor by which to increase the sampling

    The samples are fitted with an interpolating quadratic spline
    (FITPACK, via ``scipy.interpolate.UnivariateSpline``) which is then
    evaluated at the new sample times. ``b`` is kept; ``e`` follows from
    the new grid.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to resample in place
    npts : int, optional
    delta : float, optional
    n : int, optional

    Returns
    -------
    traces : Trace or list of Trace
    """
    given = [k for k, v in (('npts', npts), ('delta', delta), ('n', n)) if v is not None]
    if not given:
        raise MissingArgument("must supply one keyword argument of `npts`, `n` or `delta`")
    if len(given) > 1:
        raise InvalidArgument(f"supply only one of `npts`, `n` or `delta` (got {', '.join(given)})")

    traces_list = as_trace_list(traces)
    grids = [_target_grid(tr, npts, delta, n) for tr in traces_list]

    for tr, (times, new_delta) in zip(traces_list, grids):
        spline = UnivariateSpline(tr.time(), tr.samples, k=SPLINE_DEGREE, s=0)
        tr.samples = spline(times)
        tr.delta = new_delta
        update_headers(tr)
    return traces


def _target_grid(tr, npts, delta, n):
    """Return the new sample times and interval for one trace."""
    if tr.npts <= SPLINE_DEGREE:
        raise InvalidArgument(
            f"resampling needs at least {SPLINE_DEGREE + 1} samples (trace has {tr.npts})")

    duration = tr.e - tr.b
    if npts is not None:
        if npts < 0:
            raise InvalidArgument("`npts` cannot be negative")
        if npts < 2:
            raise InvalidArgument(f"`npts` must be at least 2 (got {npts})")
        new_delta = duration / (npts - 1)
    elif delta is not None:
        if delta <= 0:
            raise InvalidArgument(f"`delta` must be positive (got {delta})")
        if delta >= duration:
            raise InvalidArgument(
                f"`delta` ({delta}) must be less than the trace length ({duration})")
        new_delta = float(delta)
        # grid b, b+delta, ... up to and including e, allowing for rounding
        npts = int(np.floor(duration / new_delta + 1e-9)) + 1
    else:
        if n <= 0:
            raise InvalidArgument(f"`n` must be positive (got {n})")
        if n != int(n):
            raise InvalidArgument(f"`n` must be a whole number (got {n})")
        npts = (tr.npts - 1) * int(n) + 1
        new_delta = duration / (npts - 1)

    return tr.b + np.arange(npts) * new_delta, new_delta
