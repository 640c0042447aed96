"""Simulated cocktail machine: dispensers, scale, recipe book and preparation."""

__version__ = "1.0.0"