"""Adapters – infrastructure implementations of application ports."""
