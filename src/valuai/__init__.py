"""Multi-method valuation engine for early-stage companies."""

__version__ = "0.1.0"
