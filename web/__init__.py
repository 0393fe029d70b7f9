"""
Todo API Web Server - HTTP JSON interface over the task store

Provides:
- CRUD endpoints for tasks under /api/todos
- Status filtering on /api/todos and /api/todos/filter
- Swagger UI at /api-docs
"""

__version__ = "1.0.0"
