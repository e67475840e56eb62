"""
tech-radar REST API.

Usage::

    uvicorn tech_radar.api.app:create_app --factory
"""

from tech_radar.api.app import create_app

__all__ = ["create_app"]
