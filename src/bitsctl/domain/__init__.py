"""Domain layer — packet model, bit decoding, and evaluation.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
