import numpy as np
import matplotlib.pyplot as plt
from easyfit import fit_quadratic, lower, upper
from easyfit.plotting import plot_fit

rng = np.random.default_rng(0)
x = np.sort(rng.uniform(0.0, 1.0, 30))
y = 2.0 * x**2 - 1.2 * x + 0.9 + rng.normal(0.0, 0.05, size=x.size)

fit = fit_quadratic(x, y)
print(fit.summary())

# Bounds on the curvature and slope; the intercept stays free.
bounded = fit_quadratic(x, y, lower(b=0.0), upper(a=5.0, b=7.0))
print(bounded.coefficients)

fig, ax = plot_fit(fit, x=x, y=y)
plot_fit(bounded, ax=ax, line_kwargs={"linestyle": "--", "label": "b >= 0"})
plt.show()
