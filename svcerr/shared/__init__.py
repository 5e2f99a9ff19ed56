"""
Shared module package.

Contains cross-cutting concerns:
- Error handler registration
- Logging configuration
"""
