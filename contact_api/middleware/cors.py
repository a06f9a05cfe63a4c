# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
CORS (Cross-Origin Resource Sharing) middleware for the contact form frontend.
"""

from flask import Flask, request, make_response
from typing import List, Optional
import logging

from ..config import Settings

logger = logging.getLogger(__name__)

DEVELOPMENT_ORIGINS = [
    'http://localhost:3000',
    'http://localhost:5173',  # Vite default
    'http://127.0.0.1:3000',
    'http://127.0.0.1:5173'
]


class CORSMiddleware:
    """CORS handling for the public contact endpoints."""

    def __init__(
        self,
        app: Flask,
        allowed_origins: List[str],
        allowed_methods: Optional[List[str]] = None,
        allowed_headers: Optional[List[str]] = None,
        max_age: int = 86400  # 24 hours
    ):
        """
        Initialize CORS middleware.

        Args:
            app: Flask application
            allowed_origins: Exact origins, '*' or prefix patterns ending in '*'
            allowed_methods: Allowed HTTP methods
            allowed_headers: Allowed request headers
            max_age: Preflight cache duration in seconds
        """
        self.app = app
        self.allowed_origins = allowed_origins
        self.allowed_methods = allowed_methods or ['GET', 'POST', 'OPTIONS']
        self.allowed_headers = allowed_headers or [
            'Accept',
            'Accept-Language',
            'Content-Type',
            'X-Requested-With',
            'X-Request-ID'
        ]
        self.max_age = max_age

        self.register_cors_handlers()

    def is_origin_allowed(self, origin: Optional[str]) -> bool:
        """
        Check if origin is allowed.

        Args:
            origin: Request origin

        Returns:
            True if origin is allowed
        """
        if not origin:
            return False

        for allowed_origin in self.allowed_origins:
            if allowed_origin == '*' or allowed_origin == origin:
                return True
            if allowed_origin.endswith('*') and origin.startswith(allowed_origin[:-1]):
                return True

        return False

    def add_cors_headers(self, response, origin: str):
        """Add CORS headers for an allowed origin."""
        response.headers['Access-Control-Allow-Origin'] = origin
        response.headers['Access-Control-Allow-Methods'] = ', '.join(self.allowed_methods)
        response.headers['Access-Control-Allow-Headers'] = ', '.join(self.allowed_headers)
        response.headers['Access-Control-Expose-Headers'] = 'X-Trace-Id'
        response.headers['Access-Control-Max-Age'] = str(self.max_age)
        response.headers['Vary'] = 'Origin'
        return response

    def register_cors_handlers(self):
        """Register CORS handlers with the Flask application."""

        @self.app.before_request
        def handle_preflight():
            """Answer CORS preflight requests."""
            if request.method != 'OPTIONS':
                return None

            origin = request.headers.get('Origin')
            if not self.is_origin_allowed(origin):
                logger.warning(f"CORS preflight rejected for origin: {origin}")
                return make_response('', 403)

            return self.add_cors_headers(make_response('', 204), origin)

        @self.app.after_request
        def add_cors_headers_to_response(response):
            origin = request.headers.get('Origin')
            if request.method != 'OPTIONS' and self.is_origin_allowed(origin):
                self.add_cors_headers(response, origin)
            return response


def default_origins(settings: Settings) -> List[str]:
    """Allowed origins derived from settings."""
    origins = list(settings.cors_allowed_origins)
    if settings.environment == 'development':
        origins.extend(DEVELOPMENT_ORIGINS)
    if settings.frontend_url:
        origins.append(settings.frontend_url)
    return origins


def configure_cors(app: Flask, settings: Settings) -> CORSMiddleware:
    """
    Configure CORS for the Flask application.

    Args:
        app: Flask application
        settings: Runtime settings

    Returns:
        Configured CORSMiddleware instance
    """
    return CORSMiddleware(app, allowed_origins=default_origins(settings))
