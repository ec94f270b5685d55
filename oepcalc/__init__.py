"""OEP Calc - Earnings projections for open enrollment agents."""

__version__ = "0.1.0"
