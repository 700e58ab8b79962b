import numpy as np
import pytest

from chromaspace.conversions import adapt_xyz, adaptation_matrix, reference_white
from chromaspace.conversions.cie_data import CIEParams, DEFAULT_CIE
from chromaspace.types import AdaptationMethod, CIEIlluminant, CIEObserver


def test_reference_white_table():
    assert reference_white(CIEIlluminant.D65, CIEObserver.TWO_DEGREE) == (95.047, 100.0, 108.883)
    assert reference_white(CIEIlluminant.D50, CIEObserver.TWO_DEGREE) == (96.422, 100.0, 82.521)
    assert reference_white(CIEIlluminant.D65, CIEObserver.TEN_DEGREE) == (94.811, 100.0, 107.304)
    assert reference_white(CIEIlluminant.E) == (100.0, 100.0, 100.0)


def test_reference_white_accepts_plain_values():
    assert reference_white("A", "10°") == (111.144, 100.0, 35.200)
    assert reference_white("A", "2") == (109.850, 100.0, 35.585)


def test_every_illuminant_has_both_observers():
    for illuminant in CIEIlluminant:
        for observer in CIEObserver:
            x, y, z = reference_white(illuminant, observer)
            assert y == 100.0
            assert x > 0 and z > 0


def test_cie_params_defaults():
    assert DEFAULT_CIE.illuminant is CIEIlluminant.D65
    assert DEFAULT_CIE.observer is CIEObserver.TWO_DEGREE
    assert DEFAULT_CIE.is_default
    assert not CIEParams(CIEIlluminant.D50).is_default


@pytest.mark.parametrize("method", list(AdaptationMethod))
def test_adaptation_maps_source_white_to_destination_white(method):
    src = reference_white(CIEIlluminant.D65)
    dst = reference_white(CIEIlluminant.D50)
    out = adapt_xyz(src, src, dst, method)
    assert out == pytest.approx(dst, abs=1e-9)


@pytest.mark.parametrize("method", list(AdaptationMethod))
def test_adaptation_is_invertible(method):
    src = reference_white(CIEIlluminant.D65)
    dst = reference_white(CIEIlluminant.A)
    forward = adaptation_matrix(src, dst, method)
    backward = adaptation_matrix(dst, src, method)
    assert np.allclose(forward @ backward, np.eye(3))


def test_identical_whites_are_a_no_op():
    white = reference_white(CIEIlluminant.D65)
    assert adapt_xyz((10.0, 20.0, 30.0), white, white) == (10.0, 20.0, 30.0)


def test_bradford_d65_to_d50_known_matrix():
    m = adaptation_matrix(reference_white(CIEIlluminant.D65), reference_white(CIEIlluminant.D50))
    expected = np.array([
        [1.0478112, 0.0228866, -0.0501270],
        [0.0295424, 0.9904844, -0.0170491],
        [-0.0092345, 0.0150436, 0.7521316],
    ])
    assert np.allclose(m, expected, atol=1e-3)
