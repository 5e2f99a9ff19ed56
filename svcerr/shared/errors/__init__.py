"""
Shared error handling package.

Registers the HTTP translator on a FastAPI application so that every
error leaving a route is answered the same way.
"""
