"""
Signal preprocessing module for SACPROC.

Provides the conventional trace preparation steps, including:
- Mean removal
- Linear trend removal
- End tapering (Hanning, Hamming, cosine)
- Time shifting
- A demean/detrend/taper chain driven by configuration
"""

import logging
import numpy as np
from scipy.stats import linregress

from ..config import DEFAULTS
from .errors import InvalidArgument
from .trace import as_trace_list, update_headers

logger = logging.getLogger(__name__)

TAPER_FORMS = ('hanning', 'hamming', 'cosine')

# (f0, f1) in amp(i) = f0 - f1*cos(pi*i/n)
_COSINE_BELL_WEIGHTS = {
    'hanning': (0.50, 0.50),
    'hamming': (0.54, 0.46),
}


def rmean(traces):
    """
    Remove the mean from trace(s) in place.

    Parameters
    ----------
    traces : Trace or list of Trace

    Returns
    -------
    traces : Trace or list of Trace
    """
    for tr in as_trace_list(traces):
        tr.samples = tr.samples - np.mean(tr.samples)
        update_headers(tr)
    return traces


def rtrend(traces):
    """
    Remove the linear trend from trace(s) in place.

    The trend is the least-squares line ``x0 + x1*t`` through the samples
    against the trace's own time vector.

    Parameters
    ----------
    traces : Trace or list of Trace

    Returns
    -------
    traces : Trace or list of Trace
    """
    for tr in as_trace_list(traces):
        t = tr.time()
        if tr.npts < 2:
            # a single point is its own trend
            tr.samples = np.zeros_like(tr.samples)
        else:
            fit = linregress(t, tr.samples)
            tr.samples = tr.samples - (fit.intercept + fit.slope * t)
        update_headers(tr)
    return traces


def taper_length(npts, width):
    """
    Number of samples tapered at each end of a trace.

    Parameters
    ----------
    npts : int
        Number of samples in the trace
    width : float
        Fraction of the trace tapered at each end

    Returns
    -------
    n : int
        ``max(2, floor((npts + 1) * width))``
    """
    return max(2, int(np.floor((npts + 1) * width)))


def taper(traces, width=0.05, form='hanning'):
    """
    Apply a symmetric taper to each end of trace(s).

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to taper in place
    width : float
        Fraction of the trace tapered at each end, in (0, 0.5]
    form : str
        ``'hanning'``, ``'hamming'`` or ``'cosine'``

    Returns
    -------
    traces : Trace or list of Trace
    """
    traces_list = as_trace_list(traces)
    _check_taper(traces_list, width, form)

    for tr in traces_list:
        n = taper_length(tr.npts, width)
        i = np.arange(n)
        if form == 'cosine':
            amp = np.sin(np.pi * i / (2 * n))
        else:
            f0, f1 = _COSINE_BELL_WEIGHTS[form]
            amp = f0 - f1 * np.cos(np.pi * i / n)

        # applied to the start, then the mirrored end; a shared middle
        # sample is weighted twice
        tr.samples[:n] *= amp
        tr.samples[::-1][:n] *= amp
        update_headers(tr)
    return traces


def _check_taper(traces_list, width, form):
    if form not in TAPER_FORMS:
        raise InvalidArgument(f"form must be one of {TAPER_FORMS} (got '{form}')")
    if not 0 < width <= 0.5:
        raise InvalidArgument(f"width must be between 0 and 0.5 (got {width})")
    for tr in traces_list:
        n = taper_length(tr.npts, width)
        if n > tr.npts:
            raise InvalidArgument(
                f"trace has {tr.npts} samples; a taper of {n} samples needs more")


def tshift(traces, tshift, wrap=True, logger=logger):
    """
    Shift trace samples in time by ``tshift`` seconds.

    The samples are moved by ``round(tshift / delta)`` positions, later in
    the array for positive ``tshift``.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to shift in place
    tshift : float
        Shift in seconds
    wrap : bool
        If True (default), samples moved out of one end of the trace come
        back in at the other. If False, the exposed samples are set to zero.
    logger : logging.Logger
        Receives a message when the shift is smaller than half a sample

    Returns
    -------
    traces : Trace or list of Trace
    """
    for tr in as_trace_list(traces):
        n = int(round(tshift / tr.delta))
        if n == 0:
            logger.info(f"Shift ({tshift}) is less than delta ({tr.delta}); no shift applied")
            continue
        shifted = np.roll(tr.samples, n)
        if not wrap:
            if n > 0:
                shifted[:n] = 0.0
            else:
                shifted[n:] = 0.0
        tr.samples = shifted
        update_headers(tr)
    return traces


def preprocess_traces(traces, config=None, logger=logger):
    """
    Apply the standard demean / detrend / taper chain to trace(s).

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to process in place
    config : dict, optional
        Processing options; missing keys fall back to
        ``sacproc.config.DEFAULTS``:

        - 'rmean' : bool, remove the mean
        - 'rtrend' : bool, remove the linear trend
        - 'taper' : bool, taper both ends
        - 'taper_width' : float, taper fraction
        - 'taper_form' : str, taper window
    logger : logging.Logger

    Returns
    -------
    traces : Trace or list of Trace
    """
    cfg = dict(DEFAULTS)
    if config:
        cfg.update(config)

    traces_list = as_trace_list(traces)
    n = len(traces_list)
    # taper options are checked before the samples are touched
    if cfg['taper']:
        _check_taper(traces_list, cfg['taper_width'], cfg['taper_form'])

    if cfg['rmean']:
        logger.debug(f"Removing mean from {n} trace(s)")
        rmean(traces)
    if cfg['rtrend']:
        logger.debug(f"Removing trend from {n} trace(s)")
        rtrend(traces)
    if cfg['taper']:
        logger.debug(f"Tapering {n} trace(s): {cfg['taper_form']}, width {cfg['taper_width']}")
        taper(traces, width=cfg['taper_width'], form=cfg['taper_form'])
    return traces
