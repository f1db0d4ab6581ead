import numpy as np
from easyfit import Options, fit_linear, fit_quadratic, upper

rng = np.random.default_rng(1)
x = np.linspace(-1.0, 1.0, 25)
y = 1.5 * x**2 + 0.3 * x + 3.0 + rng.normal(0.0, 0.1, size=x.size)

# c is removed from the optimisation and kept exactly at 3.0
fit = fit_quadratic(x, y, c=3.0, options=Options(seed=0))
print(fit.summary(digits=4))
assert fit.c == 3.0

# Bounds on the remaining parameters still apply.
line = fit_linear(x, 2.0 * x + 1.0, u=upper(a=1.5), b=1.0, options=Options(seed=0))
print(line.coefficients)

print("predictions:", fit(np.array([0.0, 0.5, 1.0])))
