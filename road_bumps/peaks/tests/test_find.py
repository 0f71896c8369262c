import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal
from scipy import signal

from road_bumps.peaks import (
    Diagnostic,
    Interval,
    PerSample,
    PropertyTable,
    Scalar,
    find_peaks,
    peak_prominences,
)


@pytest.fixture(params=[0, 1, 2])
def noise(request) -> np.ndarray:
    """Random signal with many local maxima."""
    rng = np.random.default_rng(request.param)
    return rng.standard_normal(300)


def test_find_peaks_no_conditions():
    """Test that all local maxima are returned without conditions."""
    peaks, properties = find_peaks([0, 1, 0, 2, 0, 3, 0])
    assert_array_equal(peaks, [1, 3, 5])
    assert peaks.dtype == np.intp
    assert isinstance(properties, PropertyTable)
    assert len(properties) == 0


def test_find_peaks_plateau():
    """Test that a plateau is reported once at its midpoint."""
    peaks, _ = find_peaks([0, 1, 1, 1, 0])
    assert_array_equal(peaks, [2])


@pytest.mark.parametrize("x", [[], [1.0], [1.0, 2.0], np.zeros(10), np.arange(10)])
def test_find_peaks_without_maxima(x):
    """Test signals without any local maxima."""
    peaks, properties = find_peaks(
        x, height=0, distance=2, prominence=0, width=0, plateau_size=1
    )
    assert peaks.size == 0
    for _, array in properties.items():
        assert array.size == 0


def test_find_peaks_height():
    """Test the height condition."""
    x = np.array([0, 1, 0, 2, 0, 3, 0], dtype=np.float64)
    peaks, properties = find_peaks(x, height=2)
    assert_array_equal(peaks, [3, 5])
    assert properties.keys() == ["peak_heights"]
    assert_allclose(properties["peak_heights"], [2, 3])
    peaks, properties = find_peaks(x, height=(1.5, 2.5))
    assert_array_equal(peaks, [3])
    assert_allclose(properties["peak_heights"], [2])
    peaks, properties = find_peaks(x, height=(None, None))
    assert_array_equal(peaks, [1, 3, 5])
    assert_allclose(properties["peak_heights"], [1, 2, 3])
    # per-sample bounds are projected on the peaks
    lower = np.array([0, 0.5, 0, 2.5, 0, 2.5, 0])
    peaks, _ = find_peaks(x, height=lower)
    assert_array_equal(peaks, [1, 5])
    peaks, _ = find_peaks(x, height=(None, lower))
    assert_array_equal(peaks, [3])
    peaks, _ = find_peaks(x, height=Interval(Scalar(1.0), PerSample(np.full(7, 2.0))))
    assert_array_equal(peaks, [1, 3])


def test_find_peaks_distance():
    """Test the distance condition."""
    x = np.array([0, 1, 0, 3, 0, 2, 0], dtype=np.float64)
    peaks, properties = find_peaks(x, distance=3)
    assert_array_equal(peaks, [3])
    assert len(properties) == 0
    peaks, _ = find_peaks(x, distance=1)
    assert_array_equal(peaks, [1, 3, 5])
    peaks, _ = find_peaks(x, distance=2)
    assert_array_equal(peaks, [1, 3, 5])
    peaks, _ = find_peaks(x, distance=2.1)
    assert_array_equal(peaks, [3])


def test_find_peaks_distance_alignment():
    """Test that the distance condition filters the heights computed before."""
    x = np.array([0, 1, 0, 3, 0, 2, 0, 0, 0, 5, 0], dtype=np.float64)
    peaks, properties = find_peaks(x, height=0.5, distance=3)
    assert_array_equal(peaks, [3, 9])
    assert_allclose(properties["peak_heights"], [3, 5])


def test_find_peaks_prominence():
    """Test the prominence condition."""
    x = np.array([0, 4, 3, 5, 0, 2, 1, 1.5, 0], dtype=np.float64)
    peaks, properties = find_peaks(x, prominence=1.5)
    assert_array_equal(peaks, [3, 5])
    assert properties.keys() == ["prominences", "left_bases", "right_bases"]
    assert_allclose(properties["prominences"], [5, 2])
    assert_array_equal(properties["left_bases"], [0, 4])
    assert_array_equal(properties["right_bases"], [4, 8])
    # the first peak is bounded by the higher peak on its right
    peaks, properties = find_peaks(x, prominence=(None, 2))
    assert_array_equal(peaks, [1, 5, 7])
    assert_allclose(properties["prominences"], [1, 2, 0.5])


def test_find_peaks_width():
    """Test the width condition and the associated properties."""
    x = np.array([0, 1, 3, 1, 0, 0, 2, 2, 2, 0], dtype=np.float64)
    peaks, properties = find_peaks(x, width=2, rel_height=0.5)
    assert_array_equal(peaks, [7])
    assert properties.keys() == [
        "prominences",
        "left_bases",
        "right_bases",
        "widths",
        "width_heights",
        "left_ips",
        "right_ips",
    ]
    assert_allclose(properties["widths"], [3])
    assert_allclose(properties["left_ips"], [5.5])
    assert_allclose(properties["right_ips"], [8.5])
    peaks, properties = find_peaks(x, width=(None, None), rel_height=1.0)
    assert_array_equal(peaks, [2, 7])
    assert_allclose(properties["left_ips"], properties["left_bases"])
    assert_allclose(properties["right_ips"], properties["right_bases"])


def test_find_peaks_width_at_peak_height():
    """Test that widths are measured at the peak height by default."""
    x = np.array([0, 1, 3, 1, 0], dtype=np.float64)
    collected = list()
    peaks, properties = find_peaks(x, width=(None, None), diagnostics=collected.append)
    assert_array_equal(peaks, [2])
    assert_allclose(properties["widths"], [0])
    assert_allclose(properties["width_heights"], [3])
    assert len(collected) == 1
    assert isinstance(collected[0], Diagnostic)
    assert collected[0].kind == "width"
    # with a minimum width, the peak is removed but the call completes
    collected.clear()
    peaks, properties = find_peaks(x, width=1, diagnostics=collected.append)
    assert peaks.size == 0
    assert properties["widths"].size == 0
    assert len(collected) == 1


def test_find_peaks_plateau_size():
    """Test the plateau size condition."""
    x = np.array([0, 1, 0, 2, 2, 0, 3, 3, 3, 0], dtype=np.float64)
    peaks, properties = find_peaks(x, plateau_size=2)
    assert_array_equal(peaks, [3, 7])
    assert properties.keys() == ["plateau_sizes", "left_edges", "right_edges"]
    assert_array_equal(properties["plateau_sizes"], [2, 3])
    assert_array_equal(properties["left_edges"], [3, 6])
    assert_array_equal(properties["right_edges"], [4, 8])
    peaks, _ = find_peaks(x, plateau_size=(None, 1))
    assert_array_equal(peaks, [1])


def test_find_peaks_invalid():
    """Test invalid arguments."""
    x = np.array([0, 1, 0, 2, 0, 3, 0], dtype=np.float64)
    with pytest.raises(ValueError, match="'distance' must be greater or equal to 1"):
        find_peaks(x, distance=0.5)
    with pytest.raises(TypeError, match="'distance' must be an instance"):
        find_peaks(x, distance="3")
    with pytest.raises(ValueError, match="interval border must match"):
        find_peaks(x, height=np.ones(6))
    with pytest.raises(ValueError, match="interval border must match"):
        find_peaks(x, prominence=(None, np.ones(8)))
    with pytest.raises(ValueError, match="'rel_height' must be greater or equal"):
        find_peaks(x, width=1, rel_height=-1)
    with pytest.raises(ValueError, match="1D iterable"):
        find_peaks(np.zeros((3, 3)))
    with pytest.raises(TypeError, match="numeric values"):
        find_peaks(np.array(["a", "b", "c"]))


def test_find_peaks_does_not_modify_input():
    """Test that the signal is left untouched."""
    x = np.array([0, 1, 0, 2, 0, 3, 0], dtype=np.float64)
    x_orig = x.copy()
    find_peaks(x, height=1, distance=2, prominence=1, width=(None, None), rel_height=1)
    assert_array_equal(x, x_orig)


def test_find_peaks_deterministic(noise):
    """Test that identical inputs yield identical outputs."""
    kwargs = dict(height=0, distance=4, prominence=0.5, width=1, rel_height=0.5)
    peaks1, properties1 = find_peaks(noise, **kwargs)
    peaks2, properties2 = find_peaks(noise, **kwargs)
    assert_array_equal(peaks1, peaks2)
    assert properties1.keys() == properties2.keys()
    for key in properties1:
        assert_array_equal(properties1[key], properties2[key])


def test_find_peaks_invariants(noise):
    """Test the invariants on the returned peaks and properties."""
    peaks, properties = find_peaks(
        noise,
        height=(-0.5, 1.5),
        distance=3.5,
        prominence=0.2,
        width=(None, None),
        rel_height=0.5,
    )
    assert 0 < peaks.size
    assert np.all(0 < peaks)
    assert np.all(peaks < noise.size - 1)
    assert np.all(np.diff(peaks) >= 4)
    assert np.all((-0.5 <= noise[peaks]) & (noise[peaks] <= 1.5))
    for _, array in properties.items():
        assert array.size == peaks.size
    assert_allclose(properties["peak_heights"], noise[peaks])
    prominences, left_bases, right_bases = peak_prominences(noise, peaks)
    assert_allclose(properties["prominences"], prominences)
    assert_array_equal(properties["left_bases"], left_bases)
    assert_array_equal(properties["right_bases"], right_bases)
    assert np.all(0.2 <= properties["prominences"])


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(),
        dict(height=0.5),
        dict(height=(-1, 1)),
        dict(distance=5),
        dict(prominence=1),
        dict(prominence=(0.5, 2), wlen=10),
        dict(width=(1, 3), rel_height=0.5),
        dict(width=2, rel_height=1),
        dict(plateau_size=1),
        dict(height=0, distance=3, prominence=0.5, width=1, rel_height=0.75),
    ],
)
def test_find_peaks_scipy(noise, kwargs):
    """Compare the peaks and properties with scipy on random signals."""
    scipy_kwargs = dict(kwargs)
    if "wlen" in kwargs:
        # scipy uses the full window length instead of the half-window
        scipy_kwargs["wlen"] = 2 * kwargs["wlen"] + 1
    peaks, properties = find_peaks(noise, **kwargs)
    peaks_scipy, properties_scipy = signal.find_peaks(noise, **scipy_kwargs)
    assert_array_equal(peaks, peaks_scipy)
    assert set(properties.keys()) == set(properties_scipy)
    for key, array in properties.items():
        assert_allclose(array, properties_scipy[key], err_msg=key)
