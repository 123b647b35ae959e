"""Repositories — storage-backed implementations of core/repository_protocols.py.

Invariants:
    - Every public operation raises only core/errors.py taxonomy errors
    - No raw SQLAlchemy or driver exception crosses this boundary
"""
