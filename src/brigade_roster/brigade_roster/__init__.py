"""Brigade Roster package.

Organized by feature modules (personnel, citations, stats, auth). Each feature
has an in-memory store, an async repository that emits ``Resource`` states,
per-screen state holders, and a thin Flask controller layer.
"""
