import numpy as np
import matplotlib.pyplot as plt
from easyfit import Options, fit_spline
from easyfit.plotting import plot_fit

rng = np.random.default_rng(2)
x = np.sort(rng.uniform(0.0, 10.0, 12))
y = np.sin(x) + rng.normal(0.0, 0.1, size=x.size)

spl = fit_spline(x, y, Options(fine=200))
print(spl.summary())

fig, ax = plot_fit(spl, x=x, y=y)
plt.show()
