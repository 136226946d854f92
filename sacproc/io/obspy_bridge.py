"""
Conversion between SACPROC traces and ObsPy traces.

Reading and writing waveform files is left to ObsPy; these helpers move
the samples and SAC header values across, e.g.::

    from obspy import read
    traces = from_stream(read('event.*.SAC'))
"""

import logging
import numpy as np

from obspy import Stream
from obspy import Trace as ObspyTrace
from obspy.core.util import AttribDict

from ..core.trace import Trace

logger = logging.getLogger(__name__)

# SAC header values carried in ObsPy's ``stats.sac``
SAC_HEADERS = ('delta', 'b', 'e', 'npts', 'depmin', 'depmax', 'depmen',
               'cmpaz', 'cmpinc', 'kcmpnm', 'kstnm', 'knetwk',
               'stla', 'stlo', 'evla', 'evlo', 'baz')

_PASSTHROUGH = ('stla', 'stlo', 'evla', 'evlo', 'baz')


def from_obspy(tr):
    """
    Build a ``Trace`` from an ``obspy.Trace``.

    SAC header values are taken from ``tr.stats.sac`` when the trace was
    read from a SAC file. Otherwise ``b`` is 0 and names come from the
    station, network and channel codes.

    Parameters
    ----------
    tr : obspy.Trace

    Returns
    -------
    trace : Trace
    """
    sac = tr.stats.get('sac') or {}
    stats = tr.stats

    data = tr.data
    if np.ma.isMaskedArray(data):
        logger.warning(f"{stats.station}: masked samples filled with 0")
        data = data.filled(0.0)

    kwargs = {k: sac[k] for k in _PASSTHROUGH if k in sac}
    return Trace(
        data,
        stats.delta,
        b=sac.get('b', 0.0),
        cmpaz=sac.get('cmpaz', 0.0),
        cmpinc=sac.get('cmpinc', 90.0),
        kcmpnm=sac.get('kcmpnm') or stats.channel or None,
        kstnm=sac.get('kstnm') or stats.station or None,
        knetwk=sac.get('knetwk') or stats.network or None,
        **kwargs
    )


def to_obspy(trace):
    """
    Build an ``obspy.Trace`` from a ``Trace``.

    The samples are copied; SAC header values are stored in
    ``stats.sac`` so that ObsPy can write the trace back as SAC.

    Parameters
    ----------
    trace : Trace

    Returns
    -------
    tr : obspy.Trace
    """
    header = {
        'delta': trace.delta,
        'station': trace.kstnm or '',
        'network': trace.knetwk or '',
        'channel': trace.kcmpnm or '',
    }
    tr = ObspyTrace(data=trace.samples.copy(), header=header)

    sac = AttribDict()
    for key in SAC_HEADERS:
        value = getattr(trace, key)
        if value is not None:
            sac[key] = value
    tr.stats.sac = sac
    return tr


def from_stream(stream):
    """Convert every trace of an ``obspy.Stream`` to a ``Trace``."""
    return [from_obspy(tr) for tr in stream]


def to_stream(traces):
    """Convert a list of ``Trace`` objects to an ``obspy.Stream``."""
    return Stream(traces=[to_obspy(tr) for tr in traces])
