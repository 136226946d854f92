"""
Numerical differentiation and integration of traces.

Differentiation uses finite-difference stencils of 2, 3 or 5 points;
integration uses the trapezium or rectangle rule. Both replace the trace
samples in place and shift ``b`` to the times the new estimates refer to.
"""

import numpy as np

from .errors import InvalidArgument
from .trace import as_trace_list, update_headers

DIFF_NPOINTS = (2, 3, 5)
INTEGRATION_METHODS = ('trapezium', 'rectangle')


def differentiate(traces, npoints=2):
    """
    Replace trace(s) with their time derivative.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to differentiate in place
    npoints : int
        Stencil size:

        - 2: ``(x[i+1] - x[i]) / delta``. Non-central, so ``b`` increases
          by ``delta/2`` and ``npts`` drops by 1.
        - 3: ``(x[i+1] - x[i-1]) / (2 delta)``. Central; ``b`` increases by
          ``delta`` and ``npts`` drops by 2.
        - 5: ``(2/3)(x[i+1] - x[i-1])/delta - (1/12)(x[i+2] - x[i-2])/delta``.
          Central. The first and last output points have only one
          neighbour on the outer side and use the 3-point estimate, so as
          with ``npoints=3`` one sample is lost at each end, ``b``
          increases by ``delta`` and ``npts`` drops by 2.

    Returns
    -------
    traces : Trace or list of Trace
    """
    if npoints not in DIFF_NPOINTS:
        raise InvalidArgument(f"npoints cannot be {npoints}; must be one of {DIFF_NPOINTS}")

    traces_list = as_trace_list(traces)
    min_npts = 2 if npoints == 2 else 3
    for tr in traces_list:
        if tr.npts < min_npts:
            raise InvalidArgument(
                f"{npoints}-point differentiation needs at least {min_npts} samples "
                f"(trace has {tr.npts})")

    for tr in traces_list:
        x = tr.samples
        dt = tr.delta
        if npoints == 2:
            tr.samples = (x[1:] - x[:-1]) / dt
            tr.b += dt / 2
        elif npoints == 3:
            tr.samples = (x[2:] - x[:-2]) / (2 * dt)
            tr.b += dt
        else:
            d = np.empty(tr.npts - 2)
            d[0] = (x[2] - x[0]) / (2 * dt)
            d[-1] = (x[-1] - x[-3]) / (2 * dt)
            if len(d) > 2:
                d[1:-1] = ((2.0 / 3.0) * (x[3:-1] - x[1:-3]) / dt
                           - (1.0 / 12.0) * (x[4:] - x[:-4]) / dt)
            tr.samples = d
            tr.b += dt
        update_headers(tr)
    return traces


def integrate(traces, method='trapezium'):
    """
    Replace trace(s) with their time integral.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to integrate in place
    method : str
        ``'trapezium'`` (default) or ``'rectangle'``. The trapezium rule
        places each running sum between two input samples, so ``npts``
        drops by 1 and ``b`` increases by ``delta/2``. The rectangle rule
        keeps the first sample and the sample count.

    Returns
    -------
    traces : Trace or list of Trace
    """
    if method not in INTEGRATION_METHODS:
        raise InvalidArgument(
            f"method must be one of {INTEGRATION_METHODS} (got '{method}')")

    traces_list = as_trace_list(traces)
    if method == 'trapezium':
        for tr in traces_list:
            if tr.npts < 2:
                raise InvalidArgument(
                    f"trapezium integration needs at least 2 samples (trace has {tr.npts})")

    for tr in traces_list:
        x = tr.samples
        if method == 'trapezium':
            h = tr.delta / 2
            tr.samples = np.cumsum(h * (x[:-1] + x[1:]))
            tr.b += tr.delta / 2
        else:
            out = np.empty_like(x)
            out[0] = x[0]
            out[1:] = x[0] + np.cumsum(tr.delta * x[1:])
            tr.samples = out
        update_headers(tr)
    return traces


diff = differentiate
integ = integrate
