"""
Windowing of traces in time.
"""

import logging
import numpy as np

from .errors import LengthMismatch, RangeError
from .trace import Trace, update_headers

logger = logging.getLogger(__name__)


def cut(traces, b, e, logger=logger):
    """
    Cut trace(s) in memory between times ``b`` and ``e``.

    Times are relative to each trace's own time origin, like its ``b`` and
    ``e`` headers. A window starting before the trace or ending after it is
    clamped to the trace bounds with a warning; a window lying wholly
    outside the trace, or an inverted window, raises ``RangeError``.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to cut in place
    b : float or array-like
        Window start time. With a list of traces this may be an array with
        one start time per trace.
    e : float or array-like
        Window end time, scalar or one per trace like ``b``
    logger : logging.Logger
        Receives the clamping warnings

    Returns
    -------
    traces : Trace or list of Trace
    """
    if isinstance(traces, Trace):
        return _cut_trace(traces, b, e, logger)

    traces_list = list(traces)
    if np.isscalar(b) and np.isscalar(e):
        for tr in traces_list:
            _cut_trace(tr, b, e, logger)
        return traces

    n = len(traces_list)
    b = np.broadcast_to(b, n) if np.isscalar(b) else np.asarray(b)
    e = np.broadcast_to(e, n) if np.isscalar(e) else np.asarray(e)
    if not n == len(b) == len(e):
        raise LengthMismatch(
            f"traces ({n}), begin times ({len(b)}) and end times "
            f"({len(e)}) must be the same length")
    for tr, beg, end in zip(traces_list, b, e):
        _cut_trace(tr, float(beg), float(end), logger)
    return traces


def _cut_trace(tr, b, e, logger):
    if b < tr.b:
        logger.warning(f"Beginning cut is before start of trace. Setting to {tr.b}")
        b = tr.b
    if b > tr.e:
        raise RangeError(f"beginning cut ({b}) is later than end of trace ({tr.e})")
    if e > tr.e:
        logger.warning(f"End cut is after end of trace. Setting to {tr.e}")
        e = tr.e
    if e < tr.b:
        raise RangeError(f"end cut ({e}) is earlier than start of trace ({tr.b})")
    if b > e:
        raise RangeError(f"beginning cut ({b}) is later than end cut ({e})")

    # 1-based inclusive sample indices of the window
    ib = int(round((b - tr.b) / tr.delta)) + 1
    ie = tr.npts - int(round((tr.e - e) / tr.delta))
    if ie < ib:
        raise RangeError(f"cut window {b}-{e} contains no samples")

    tr.samples = tr.samples[ib - 1:ie].copy()
    tr.b = tr.b + (ib - 1) * tr.delta
    update_headers(tr)
    return tr
