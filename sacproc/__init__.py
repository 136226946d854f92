"""
SACPROC - In-memory processing of SAC seismic traces

Signal-processing operations on evenly-sampled seismic records that keep
SAC-style header values consistent with the samples.

This package provides:
- A ``Trace`` model carrying samples and SAC headers
- Arithmetic, cutting, differentiation and integration
- Quadratic-spline resampling, Fourier transform and envelope
- Mean/trend removal, tapering and time shifting
- Rotation of pairs of orthogonal horizontal components
- Conversion to and from ObsPy traces

Loading and saving waveform files is left to ObsPy.
"""

__version__ = "0.1.0"
__author__ = "SACPROC Development Team"

from . import core
from . import io
from .config import load_config

__all__ = ['core', 'io', 'load_config']
