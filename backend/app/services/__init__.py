"""Services Layer — request handlers for each admin resource.

Invariants:
    - Handlers follow parse -> look up -> mutate once -> commit -> re-fetch
    - Handlers raise CoachHubError subclasses; they never build HTTP responses

Design Decisions:
    - One handler class per resource for locality (ADR: ExMA no god objects)
"""
