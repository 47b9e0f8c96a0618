"""
Pydantic schema definitions for the persisted document and API bodies.

Inbound payloads are not parsed into these models: they stay plain
mappings so that a field sent as ``null`` can be told apart from a
field that was not sent at all.  See ``services.validation``.
"""
