"""
socialhub.api

FastAPI app factory, dependency wiring and routers.

The API layer stays thin: request validation, session lookup, then
delegation to the concept modules.
"""


# --- Module Notes -----------------------------------------------------------
# Routers depend on concepts; concepts never import from socialhub.api.
