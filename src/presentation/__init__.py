"""Presentation layer - HTTP routers, middleware and error bodies.

Structure:
- routers/system.py: root and health (unversioned)
- routers/api/middleware/: bearer authentication and trace ids
- routers/api/v1/: versioned resources and the error response builder

Routers only translate between HTTP and the application layer; results
come back as ``Success``/``Failure`` and failures become error bodies.
"""
