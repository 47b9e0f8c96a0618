"""
Core infrastructure: configuration, logging, errors, locking and the
JSON document store.
"""
