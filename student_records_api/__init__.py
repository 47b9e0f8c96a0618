"""
Top‑level package for the Student Records API.

The HTTP application lives in ``student_records_api.app`` and a small
``requests`` based client for talking to a running instance lives in
``student_records_api.client``.
"""

__all__ = []
