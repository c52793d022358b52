"""Kernel – errors, value types, specifications, security and time primitives."""
