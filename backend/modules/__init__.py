"""
Feature modules for the Promptly backend.

- auth: token validation and identity metadata
- quota: per-plan gate in front of every generation
- generation: the /api/ai pipeline
- creations: stored results, feeds and likes
- community: explicitly shared images

Modules depend on each other's interfaces.py protocols; concrete services
are wired together in api/dependencies.py.
"""
