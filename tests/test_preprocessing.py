import logging

import numpy as np
import pytest

from sacproc.core.trace import Trace
from sacproc.core.preprocessing import (
    rmean,
    rtrend,
    taper,
    taper_length,
    tshift,
    preprocess_traces,
)
from sacproc.core.errors import InvalidArgument


def _trend_trace(npts=200, delta=0.05, b=3.0):
    t = b + np.arange(npts) * delta
    return Trace(4.0 - 1.5 * t + 0.2 * np.sin(2 * np.pi * t), delta, b=b)


def test_rmean():
    tr = Trace([1.0, 2.0, 3.0, 6.0], 1.0)
    rmean(tr)
    np.testing.assert_allclose(tr.samples, [-2.0, -1.0, 0.0, 3.0])
    assert tr.depmen == pytest.approx(0.0)
    assert tr.depmax == 3.0


def test_rtrend_removes_line():
    t = 5.0 + np.arange(50) * 0.2
    tr = Trace(3 * t + 7, 0.2, b=5.0)
    rtrend(tr)
    np.testing.assert_allclose(tr.samples, 0.0, atol=1e-10)


def test_rtrend_list_leaves_no_slope():
    traces = [_trend_trace(), _trend_trace(b=-10.0)]
    rtrend(traces)
    for tr in traces:
        slope = np.polyfit(tr.time(), tr.samples, 1)[0]
        assert abs(slope) < 1e-10
        assert tr.depmen == pytest.approx(0.0, abs=1e-10)


def test_taper_length():
    assert taper_length(101, 0.1) == 10
    assert taper_length(10, 0.05) == 2


@pytest.mark.parametrize('form, first', [('hanning', 0.0), ('hamming', 0.08), ('cosine', 0.0)])
def test_taper_forms(form, first):
    tr = Trace(np.ones(101), 0.01)
    taper(tr, width=0.1, form=form)
    n = 10
    assert tr.samples[0] == pytest.approx(first)
    assert tr.samples[-1] == pytest.approx(first)
    np.testing.assert_array_equal(tr.samples[n:-n], 1.0)
    np.testing.assert_allclose(tr.samples[:n], tr.samples[::-1][:n])
    assert tr.depmin == pytest.approx(first)


def test_taper_hanning_weights():
    tr = Trace(np.ones(101), 0.01)
    taper(tr, width=0.1)
    i = np.arange(10)
    np.testing.assert_allclose(tr.samples[:10], 0.5 - 0.5 * np.cos(np.pi * i / 10))


@pytest.mark.parametrize('width', [0.5, 1e-6, 0.25])
def test_taper_valid_widths(width):
    taper(Trace(np.ones(20), 1.0), width=width)


@pytest.mark.parametrize('width', [0.0, -0.1, 0.51, 1.0])
def test_taper_invalid_widths(width):
    tr = Trace(np.ones(20), 1.0)
    with pytest.raises(InvalidArgument):
        taper(tr, width=width)
    np.testing.assert_array_equal(tr.samples, 1.0)


def test_taper_invalid_form():
    with pytest.raises(InvalidArgument):
        taper(Trace(np.ones(20), 1.0), form='blackman')


def test_taper_list():
    traces = [Trace(np.ones(20), 1.0), Trace(np.ones(40), 1.0)]
    assert taper(traces, 0.2, 'cosine') is traces
    assert all(tr.samples[0] == 0.0 for tr in traces)


def test_tshift_wrap():
    tr = Trace([1.0, 2.0, 3.0, 4.0, 5.0], 1.0)
    tshift(tr, 2.0)
    np.testing.assert_array_equal(tr.samples, [4.0, 5.0, 1.0, 2.0, 3.0])


def test_tshift_no_wrap_forward():
    tr = Trace([1.0, 2.0, 3.0, 4.0, 5.0], 0.5)
    tshift(tr, 1.0, wrap=False)
    np.testing.assert_array_equal(tr.samples, [0.0, 0.0, 1.0, 2.0, 3.0])
    assert tr.depmen == pytest.approx(1.2)


def test_tshift_no_wrap_backward():
    tr = Trace([1.0, 2.0, 3.0, 4.0, 5.0], 1.0)
    tshift(tr, -1.0, wrap=False)
    np.testing.assert_array_equal(tr.samples, [2.0, 3.0, 4.0, 5.0, 0.0])
    assert tr.depmin == 0.0


def test_tshift_less_than_half_sample(caplog):
    tr = Trace([1.0, 2.0, 3.0], 1.0)
    with caplog.at_level(logging.INFO, logger='sacproc.core.preprocessing'):
        tshift(tr, 0.4)
    np.testing.assert_array_equal(tr.samples, [1.0, 2.0, 3.0])
    assert 'no shift applied' in caplog.text


def test_preprocess_defaults():
    tr = _trend_trace()
    preprocess_traces(tr)
    assert tr.samples[0] == 0.0
    assert tr.samples[-1] == 0.0
    assert abs(tr.depmen) < 0.05


def test_preprocess_config_switches():
    tr = _trend_trace()
    ref = rtrend(rmean(tr.copy()))
    preprocess_traces([tr], config={'taper': False})
    np.testing.assert_allclose(tr.samples, ref.samples)
    assert tr.depmen == pytest.approx(0.0, abs=1e-10)

    tr = _trend_trace()
    orig = tr.samples.copy()
    preprocess_traces(tr, config={'rmean': False, 'rtrend': False, 'taper_width': 0.5,
                                  'taper_form': 'cosine'})
    assert tr.samples[0] == 0.0
    assert tr.samples[100] == pytest.approx(orig[100] * np.sin(np.pi * 99 / 200))


@pytest.mark.parametrize('config', [
    {'taper_width': 0.7},
    {'taper_form': 'triangle'},
])
def test_preprocess_bad_taper_leaves_trace(config):
    tr = _trend_trace()
    orig = tr.samples.copy()
    with pytest.raises(InvalidArgument):
        preprocess_traces(tr, config=config)
    np.testing.assert_array_equal(tr.samples, orig)
