"""
socialhub.observability

Logging setup and per-request log context.
"""


# --- Module Notes -----------------------------------------------------------
# Logger names are module paths (get_logger(__name__)).
