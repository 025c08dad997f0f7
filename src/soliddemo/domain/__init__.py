"""Domain layer — the five SOLID demonstrations.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
