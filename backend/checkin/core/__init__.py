"""Core Layer — error taxonomy, domain types and boundary protocols.

Invariants:
    - No module in core/ imports from repositories/, api/, infrastructure/, or db/
    - Nothing here performs IO
"""
