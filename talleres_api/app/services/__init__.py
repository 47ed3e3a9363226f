"""
Service layer.

``validation`` holds the rule checks for candidate records; each
resource service wraps them with the merge-then-validate write path
over the in-memory ``Store`` handed to it by the API layer.
"""
