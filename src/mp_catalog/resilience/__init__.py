"""Resilience – cooperative cancellation."""
