"""Service layer — identifier resolution.

Services may import from domain, config and infrastructure layers.
"""
