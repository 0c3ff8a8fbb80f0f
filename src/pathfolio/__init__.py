"""Pathfolio - Monte Carlo price paths and holding valuation."""

__version__ = "0.1.0"
