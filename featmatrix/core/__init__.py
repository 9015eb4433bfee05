"""
Core infrastructure for featmatrix: models, interfaces, settings,
exceptions and service wiring.
"""
