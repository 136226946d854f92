"""
Tabular listing of trace headers.
"""

import pandas as pd

from ..core.trace import as_trace_list

LIST_HEADERS = ('kstnm', 'knetwk', 'kcmpnm', 'npts', 'delta', 'b', 'e',
                'depmin', 'depmax', 'depmen', 'cmpaz', 'cmpinc')


def header_table(traces):
    """
    List the main header values of trace(s).

    Parameters
    ----------
    traces : Trace or list of Trace

    Returns
    -------
    df : pandas.DataFrame
        One row per trace with columns: kstnm, knetwk, kcmpnm, npts, delta,
        b, e, depmin, depmax, depmen, cmpaz, cmpinc
    """
    rows = []

    for tr in as_trace_list(traces):
        rows.append({key: getattr(tr, key) for key in LIST_HEADERS})

    df = pd.DataFrame(rows, columns=list(LIST_HEADERS))
    return df
