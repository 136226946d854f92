"""
Core trace model and processing operations.

This module provides:
- The ``Trace`` data model and header consistency
- Arithmetic, windowing, differentiation and integration
- Spline resampling, Fourier transform and envelope
- Detrending, tapering and time shifting
- Rotation of orthogonal horizontal components
"""

from .errors import (
    SacProcError,
    InvalidArgument,
    MissingArgument,
    RangeError,
    LengthMismatch,
    SamplingMismatch,
    NotOrthogonal,
    DivideByZero,
    InvalidState,
)
from .trace import Trace, update_headers
from .arithmetic import add, multiply, divide, mul, div
from .window import cut
from .calculus import differentiate, integrate, diff, integ
from .resample import interpolate
from .spectral import fft, envelope
from .preprocessing import rmean, rtrend, taper, tshift, preprocess_traces
from .rotation import rotate_through, rotate_through_copy

__all__ = [
    'SacProcError',
    'InvalidArgument',
    'MissingArgument',
    'RangeError',
    'LengthMismatch',
    'SamplingMismatch',
    'NotOrthogonal',
    'DivideByZero',
    'InvalidState',
    'Trace',
    'update_headers',
    'add',
    'multiply',
    'divide',
    'mul',
    'div',
    'cut',
    'differentiate',
    'integrate',
    'diff',
    'integ',
    'interpolate',
    'fft',
    'envelope',
    'rmean',
    'rtrend',
    'taper',
    'tshift',
    'preprocess_traces',
    'rotate_through',
    'rotate_through_copy',
]
