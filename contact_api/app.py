"""
Contact API - Flask Application Entry Point

This module builds the Flask application with OpenAPI 3.0 support, wires the
contact form service to its store and collaborators, and registers the
middleware and routes.
"""

from datetime import datetime, timezone
from typing import Optional

from flask import jsonify
from flask_openapi3 import OpenAPI, Info, Tag

from .config import Settings
from .middleware.cors import configure_cors
from .middleware.error_handler import register_error_handlers
from .observability.config import setup_observability
from .observability.middleware import add_observability_middleware
from .routes.contact import contact_bp
from .services.contact_form import ContactFormService
from .services.notifications import EmailService
from .services.store import ContactFormStore

info = Info(
    title="Contact API",
    version="1.0.0",
    description="Lead capture API for the law office landing page"
)

tags = [
    Tag(name="Contact", description="Public lead capture"),
    Tag(name="Health", description="System health and status")
]


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ContactFormStore] = None,
    contact_form_service: Optional[ContactFormService] = None,
) -> OpenAPI:
    """
    Application factory.

    Args:
        settings: Runtime settings (environment when omitted)
        store: Submission store (fresh in-memory store when omitted)
        contact_form_service: Pre-wired service, mainly for tests

    Returns:
        Configured Flask application
    """
    settings = settings or Settings.from_env()

    # Initialize observability first
    setup_observability(settings)

    app = OpenAPI(__name__, info=info)

    app.config['ENVIRONMENT'] = settings.environment
    app.config['DEBUG'] = settings.debug
    app.config['TESTING'] = settings.environment == 'test'
    app.config['TRUST_PROXY'] = settings.trust_proxy
    app.config['SERVICE_VERSION'] = settings.service_version

    add_observability_middleware(app, instrument=settings.otel_enabled)
    configure_cors(app, settings)
    register_error_handlers(app)

    # Make services available to routes
    if contact_form_service is None:
        contact_form_service = ContactFormService(
            store=store if store is not None else ContactFormStore(),
            email_service=EmailService(settings.team_notification_emails)
        )
    app.contact_form_service = contact_form_service
    app.contact_store = contact_form_service.store

    app.register_api(contact_bp)

    @app.get('/api/healthz', tags=[tags[1]])
    def health_check():
        """Liveness check with the number of stored submissions."""
        return jsonify({
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "submissions": app.contact_store.count()
        })

    return app


if __name__ == '__main__':
    # Development server
    _settings = Settings.from_env()
    create_app(_settings).run(
        host='0.0.0.0',
        port=_settings.port,
        debug=_settings.debug
    )
