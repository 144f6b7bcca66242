"""
socialhub.api.routers

One router per concept surface; mounted by `socialhub.api.app.create_app`.
"""


# --- Module Notes -----------------------------------------------------------
# Routers carry their own prefixes; app.py mounts them without one.
