import numpy as np
import pytest

from sacproc.core.trace import Trace
from sacproc.core.arithmetic import add, multiply, divide, mul, div
from sacproc.core.errors import DivideByZero


def _make_trace(seed=0, npts=50):
    rng = np.random.default_rng(seed)
    return Trace(rng.standard_normal(npts), 0.01, b=1.0)


def test_add_and_subtract_restores():
    tr = _make_trace()
    orig = tr.samples.copy()
    add(tr, 3.5)
    np.testing.assert_allclose(tr.samples, orig + 3.5)
    assert tr.depmax == pytest.approx(orig.max() + 3.5)
    assert tr.depmen == pytest.approx(orig.mean() + 3.5)
    add(tr, -3.5)
    np.testing.assert_allclose(tr.samples, orig)


def test_multiply_then_divide_restores():
    tr = _make_trace()
    orig = tr.samples.copy()
    multiply(tr, -4.0)
    # sign flip swaps the extremes
    assert tr.depmax == pytest.approx(-4.0 * orig.min())
    divide(tr, -4.0)
    np.testing.assert_allclose(tr.samples, orig)


def test_list_forms():
    traces = [_make_trace(1), _make_trace(2)]
    origs = [tr.samples.copy() for tr in traces]
    assert add(traces, 1.0) is traces
    mul(traces, 2.0)
    div(traces, 4.0)
    for tr, orig in zip(traces, origs):
        np.testing.assert_allclose(tr.samples, (orig + 1.0) / 2.0)
        assert tr.depmin == pytest.approx(tr.samples.min())


def test_divide_by_zero():
    traces = [_make_trace(1), _make_trace(2)]
    origs = [tr.samples.copy() for tr in traces]
    with pytest.raises(DivideByZero):
        divide(traces, 0)
    with pytest.raises(ZeroDivisionError):
        divide(traces[0], 0.0)
    for tr, orig in zip(traces, origs):
        np.testing.assert_array_equal(tr.samples, orig)
