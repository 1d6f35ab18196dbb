"""Infrastructure layer — input providers.

This layer depends on stdlib and click only.
It must never import from domain, services, commands, or output.
"""
