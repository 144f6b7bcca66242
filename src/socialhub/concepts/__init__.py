"""
socialhub.concepts

Independent domain units called by the route layer.

Each concept wraps one request-scoped `AsyncSession`; it flushes its writes
but never commits. Routes commit after all concept calls for a request
succeed, so a failure halfway through a route leaves nothing behind.
"""


# --- Module Notes -----------------------------------------------------------
# Concepts raise ConceptError subclasses; they never build HTTP responses.
