import numpy as np
import pytest

from easyfit import (
    Cubic,
    Linear,
    ModelFamily,
    Options,
    Spline,
    UnboundableParameterError,
    VarType,
    fit_cubic,
    fit_linear,
    fit_model,
    fit_spline,
    lower,
    upper,
)
from easyfit.schema import NOTHING, VECTOR


def test_linear_fit_recovers_exact_line() -> None:
    x = np.linspace(0.0, 5.0, 12)
    fit = fit_linear(x, 2.0 * x - 1.0, options=Options(seed=0))

    assert isinstance(fit, Linear)
    assert fit.a == pytest.approx(2.0, abs=1e-8)
    assert fit.b == pytest.approx(-1.0, abs=1e-8)
    assert fit.R == pytest.approx(1.0)
    np.testing.assert_allclose(fit.residues, 0.0, atol=1e-8)


def test_linear_fixed_intercept_and_bounded_slope() -> None:
    x = np.linspace(0.0, 1.0, 10)
    fit = fit_linear(x, 2.0 * x + 1.0, u=upper(a=1.5), b=1.0, options=Options(seed=0))

    assert fit.coefficients[1] == 1.0
    assert fit.a == pytest.approx(1.5, abs=1e-6)


def test_linear_intercept_cannot_be_bounded() -> None:
    with pytest.raises(UnboundableParameterError):
        fit_linear([0.0, 1.0, 2.0], [1.0, 2.0, 3.0], lower(b=0.0))


def test_cubic_fit_with_and_without_fixed_intercept() -> None:
    rng = np.random.default_rng(4)
    x = np.linspace(-2.0, 2.0, 40)
    y = 0.5 * x**3 - x**2 + 0.2 * x + 1.0 + rng.normal(0.0, 0.01, size=x.size)

    fit = fit_cubic(x, y, options=Options(seed=0))
    assert isinstance(fit, Cubic)
    np.testing.assert_allclose(fit.coefficients, [0.5, -1.0, 0.2, 1.0], atol=0.05)

    fixed = fit_cubic(x, y, d=2.0, options=Options(seed=0))
    assert fixed.d == 2.0
    assert fixed.coefficients[:3] != fit.coefficients[:3]
    np.testing.assert_allclose(fixed(x) - y, fixed.residues, atol=1e-10)


def test_spline_passes_through_end_points() -> None:
    x = np.array([0.0, 1.0, 2.5, 4.0, 5.0])
    y = np.array([1.0, 3.0, 2.0, 0.5, 1.5])
    spl = fit_spline(x, y, Options(fine=50))

    assert isinstance(spl, Spline)
    assert spl.x.shape == spl.y.shape == (50,)
    assert spl.x[0] == pytest.approx(x[0])
    assert spl.y[0] == pytest.approx(y[0])
    assert spl.x[-1] == pytest.approx(x[-1])
    assert spl.y[-1] == pytest.approx(y[-1])
    assert "Spline fit" in spl.summary()


def test_spline_is_not_a_point_predictor() -> None:
    spl = fit_spline([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
    with pytest.raises(NotImplementedError):
        spl(0.5)


def test_spline_needs_two_points() -> None:
    with pytest.raises(ValueError, match="at least 2"):
        fit_spline([1.0], [2.0])


def _offset_family():
    # p is a 2-vector (slope, curvature); c is the fixable offset.
    def func(x, p1, p2, c):
        return p1 * x + p2 * x**2 + c

    return ModelFamily(
        name="vector-model",
        func=func,
        schema=(VarType("p", VECTOR, 2), VarType("c", NOTHING, 1)),
        fixable="c",
        record=lambda *args: args,
    )


def test_fit_model_with_vector_parameter_and_fixed_offset() -> None:
    x = np.linspace(-1.0, 1.0, 15)
    y = 0.7 * x + 1.3 * x**2 + 2.0
    out = fit_model(
        x,
        y,
        _offset_family(),
        lower(p=[-5.0, -5.0]),
        upper(p=[5.0, 5.0]),
        fixed=2.0,
        options=Options(seed=0, fine=5),
    )

    p1, p2, c, R, xfine, yfine, ypred, resid = out
    assert p1 == pytest.approx(0.7, abs=1e-6)
    assert p2 == pytest.approx(1.3, abs=1e-6)
    assert c == 2.0
    assert R == pytest.approx(1.0)
    assert xfine.shape == yfine.shape == (5,)
    assert ypred.shape == resid.shape == x.shape


def test_fit_model_without_fixable_parameter() -> None:
    family = ModelFamily(
        name="slope",
        func=lambda x, a: a * x,
        schema=(VarType("a"),),
        fixable=None,
        record=lambda *args: args,
    )
    with pytest.raises(ValueError, match="no parameter that can be fixed"):
        fit_model([0.0, 1.0], [0.0, 1.0], family, fixed=1.0)


def test_model_family_validates_fixable() -> None:
    with pytest.raises(ValueError, match="not in the schema"):
        ModelFamily("m", lambda x, a: a, (VarType("a"),), "b", tuple)
    with pytest.raises(ValueError, match="scalar"):
        ModelFamily("m", lambda x, a, b: a, (VarType("a", VECTOR, 2),), "a", tuple)
