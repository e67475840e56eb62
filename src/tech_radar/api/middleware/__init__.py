"""ASGI middleware and exception handlers for the tech-radar API."""
