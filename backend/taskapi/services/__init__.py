"""Service Layer — async orchestration of persistence, security and the weather call-out.

Invariants:
    - Services receive their collaborators (db session, settings, weather lookup)
      explicitly; no ambient globals
    - Services raise TaskApiError subclasses; routes never translate errors
"""
