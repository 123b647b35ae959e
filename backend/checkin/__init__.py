"""Check-in Manager Package — Facility data-access layer and its HTTP surface.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
