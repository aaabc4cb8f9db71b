import os
import sys

import matplotlib

# Ensure repository root is on sys.path so 'lookup_tables' imports work when running tests
_HERE = os.path.dirname(__file__)
_ROOT = os.path.abspath(os.path.join(_HERE, '..'))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

# Plots are rendered off-screen
matplotlib.use('Agg')
