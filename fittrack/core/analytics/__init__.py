"""Derived metrics and engagement calculations.

Every function here is pure: inputs are plain values, dataclasses or rows
already loaded by the caller, and results are dataclasses or plain dicts
matching the response models in the entity schemas.
"""
