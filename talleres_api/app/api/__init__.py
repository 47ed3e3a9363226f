"""
API package containing the HTTP routes.

``router`` aggregates the per-resource routers from ``endpoints`` and
is mounted by the application under ``/api``.
"""
