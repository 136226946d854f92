"""
Elementary arithmetic on trace samples.

Each function accepts a single ``Trace`` or a list of traces, changes the
samples in place and returns its input.
"""

from .errors import DivideByZero
from .trace import as_trace_list, update_headers


def add(traces, value):
    """
    Add a constant to every sample.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to modify in place
    value : float
        Constant to add

    Returns
    -------
    traces : Trace or list of Trace
    """
    for tr in as_trace_list(traces):
        tr.samples += value
        update_headers(tr)
    return traces


def multiply(traces, value):
    """
    Multiply every sample by a constant.

    Parameters
    ----------
    traces : Trace or list of Trace
        Trace(s) to modify in place
    value : float
        Scale factor

    Returns
    -------
    traces : Trace or list of Trace
    """
    for tr in as_trace_list(traces):
        tr.samples *= value
        update_headers(tr)
    return traces


def divide(traces, value):
    """
    Divide every sample by a constant.

    Raises ``DivideByZero`` before touching any trace if ``value`` is zero.
    """
    if value == 0:
        raise DivideByZero("cannot divide trace samples by 0")
    return multiply(traces, 1.0 / value)


mul = multiply
div = divide
