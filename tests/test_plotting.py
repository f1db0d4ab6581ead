import numpy as np
import pytest

from easyfit import Options, fit_quadratic, fit_spline


matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")


def test_plot_fit_draws_data_and_curve() -> None:
    from easyfit.plotting import plot_fit

    x = np.linspace(0.0, 1.0, 10)
    y = x**2
    fit = fit_quadratic(x, y, options=Options(seed=0, fine=25))

    fig, ax = plot_fit(fit, x=x, y=y)
    lines = ax.get_lines()
    assert len(lines) == 2
    assert lines[1].get_xdata().shape == (25,)
    assert lines[1].get_label() == "quadratic"


def test_plot_fit_reuses_axes_and_requires_both_coordinates() -> None:
    import matplotlib.pyplot as plt
    from easyfit.plotting import plot_fit

    spl = fit_spline([0.0, 1.0, 2.0], [0.0, 1.0, 0.0], Options(fine=11))
    fig, ax = plt.subplots()
    fig2, ax2 = plot_fit(spl, ax=ax)
    assert ax2 is ax and fig2 is fig

    with pytest.raises(ValueError, match="both x and y"):
        plot_fit(spl, x=[0.0, 1.0])
