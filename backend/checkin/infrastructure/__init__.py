"""Infrastructure Layer — storage client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports repositories or routes
"""
