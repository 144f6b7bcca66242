"""
socialhub

Top-level package for the SocialHub backend (accounts, friends, posts,
comments and events over HTTP).

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep __version__ in step with the version in pyproject.toml.
