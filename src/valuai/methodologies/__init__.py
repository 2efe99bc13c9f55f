"""Valuation methodology implementations."""
