"""Domain layer — identifier grammars, the Zettel handle, metadata rules.

This layer depends only on stdlib and ruamel.yaml.
It must never import from services, infrastructure, or config.
"""
