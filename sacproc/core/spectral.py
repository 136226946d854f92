"""
Spectral transform and envelope of traces.
"""

import numpy as np
from scipy.signal import hilbert

from .trace import Trace, as_trace_list, update_headers


def fft(traces):
    """
    Return the one-sided Fourier transform of trace(s).

    The trace is not modified.

    Parameters
    ----------
    traces : Trace or list of Trace

    Returns
    -------
    f : ndarray or list of ndarray
        Frequency for each spectral point, ``k / (npts * delta)`` for
        ``k = 1 .. N``
    S : ndarray or list of ndarray
        First ``N = floor(npts/2) + 1`` complex coefficients of the
        discrete Fourier transform of the samples
    """
    if not isinstance(traces, Trace):
        spectra = [fft(tr) for tr in traces]
        return [f for f, _ in spectra], [S for _, S in spectra]

    tr = traces
    N = tr.npts // 2 + 1
    fmax = 1.0 / (tr.npts * tr.delta)
    f = np.arange(1, N + 1) * fmax
    S = np.fft.fft(tr.samples)[:N]
    return f, S


def envelope(traces):
    """
    Replace trace(s) with their envelope.

    The envelope is the magnitude of the analytic signal obtained with
    ``scipy.signal.hilbert``.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to modify in place

    Returns
    -------
    traces : Trace or list of Trace
    """
    for tr in as_trace_list(traces):
        tr.samples = np.abs(hilbert(tr.samples))
        update_headers(tr)
    return traces
