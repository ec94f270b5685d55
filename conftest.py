"""Root conftest so tests import oepcalc from the working tree."""
