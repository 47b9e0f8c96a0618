"""
HTTP layer.

``router.py`` aggregates the routers defined in ``endpoints`` and is
included by ``main.create_app``.  Routes are mounted without a version
prefix because clients rely on the bare ``/students`` paths.
"""
