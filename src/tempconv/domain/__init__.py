"""Domain layer: scales, thresholds, and conversion rules.

This layer depends only on the stdlib.
It must never import from services, commands, config, or output.
"""
