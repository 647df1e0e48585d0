"""Infrastructure layer — archive registry and filesystem access.

This layer may import from domain and config. It must never import
from services. The service layer bridges between the grammars in the
domain layer and the archive layout owned here.
"""
