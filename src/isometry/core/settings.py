"""Numeric settings shared by every value type in the library.

All storage is double precision. Tolerances are absolute.
"""

import numpy as np

DTYPE = np.float64

# Machine epsilon of DTYPE, used by the == operators.
EQUALITY_EPSILON = float(np.finfo(DTYPE).eps)

# Matrices with abs(det) below this are treated as singular.
INVERTIBILITY_THRESHOLD = 1e-6

# Default absolute tolerance for isclose().
DEFAULT_TOLERANCE = 1e-6

# Significant digits used when rendering values as text.
DEFAULT_PRECISION = 6
ISOMETRY_PRECISION = 9
