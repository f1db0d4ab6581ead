import numpy as np
from easyfit import Options, fit_cubic, lower, upper

rng = np.random.default_rng(3)
x = np.linspace(-2.0, 2.0, 40)
y = 0.5 * x**3 - x**2 + 0.2 * x + 1.0 + rng.normal(0.0, 0.1, size=x.size)

# Differential evolution is a global optimiser and needs finite bounds
# on every free parameter, so the intercept is fixed here.
opts = Options(
    seed=0,
    backend="scipy.differential_evolution",
    backend_options={"seed": 0, "maxiter": 300},
)
l = lower(a=-5.0, b=-5.0, c=-5.0)
u = upper(a=5.0, b=5.0, c=5.0)
de = fit_cubic(x, y, l, u, d=1.0, options=opts)
cf = fit_cubic(x, y, l, u, d=1.0, options=Options(seed=0))

print("differential_evolution:", de.coefficients)
print("curve_fit:             ", cf.coefficients)
