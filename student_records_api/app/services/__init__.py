"""
Service layer.

``validation`` holds the pure field rules and ``student_service``
combines them with the JSON store to implement the record operations.
API handlers only ever talk to ``StudentService``.
"""
