"""
I/O helpers for SACPROC traces.

Provides:
- Conversion to and from ObsPy traces and streams
- Tabular header listings
"""

from .obspy_bridge import from_obspy, to_obspy, from_stream, to_stream
from .headers import header_table

__all__ = [
    'from_obspy',
    'to_obspy',
    'from_stream',
    'to_stream',
    'header_table',
]
