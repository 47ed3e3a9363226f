"""
Pydantic schema definitions for API payloads.

Each resource (workshops, participants) defines its own model, used
both as the stored record and as the response body.  ``common`` holds
the ``{"message": ...}`` shape shared by the welcome route and all
error responses.
"""
