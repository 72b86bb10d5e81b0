"""
Core domain models, checked integer math, and invariants.

This module contains the value types and their arithmetic discipline,
independent of the host execution environment.
"""
