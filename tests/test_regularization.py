import pytest

from mlprims.regularization import apply_l2_regularization


WEIGHTS = [0.5, 0.2, -0.3, 0.1, -0.1]


def test_zero_strength_is_identity():
    assert apply_l2_regularization(WEIGHTS, 0.0, 0.01) == WEIGHTS


def test_full_step_clears_weights():
    assert apply_l2_regularization(WEIGHTS, 1.0, 1.0) == [0.0] * 5


def test_shrinks_every_weight_by_same_ratio():
    shrunk = apply_l2_regularization(WEIGHTS, 0.01, 0.5)
    ratios = [s / w for s, w in zip(shrunk, WEIGHTS)]
    assert all(r == pytest.approx(ratios[0]) for r in ratios)
    assert 0.0 < ratios[0] < 1.0


def test_preserves_sign_and_reduces_magnitude():
    shrunk = apply_l2_regularization(WEIGHTS, 0.1, 0.1)
    for s, w in zip(shrunk, WEIGHTS):
        assert s * w > 0
        assert abs(s) < abs(w)


def test_empty_weights():
    assert apply_l2_regularization([], 0.1, 0.1) == []