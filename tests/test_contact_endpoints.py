# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the contact form HTTP endpoints.
"""

import re
from unittest.mock import MagicMock

from contact_api.app import create_app
from contact_api.config import Settings
from conftest import FRONTEND_ORIGIN

CONTACT_URL = "/api/external/contact"


class TestSubmitContactForm:
    """Test POST /api/external/contact."""

    def test_created(self, client, store, fisica_payload):
        response = client.post(CONTACT_URL, json=fisica_payload)

        assert response.status_code == 201
        body = response.get_json()
        assert body["success"] is True
        assert body["data"]["message"] == "Formulário enviado com sucesso"
        assert re.match(r"^PAN-\d+-\d{4}$", body["data"]["protocol"])
        assert body["data"]["redirectUrl"] == (
            f"/obrigado?p={body['data']['protocol']}&n=Maria&u=Alta"
        )
        assert store.count() == 1

    def test_remote_address_recorded(self, client, store, fisica_payload):
        client.post(CONTACT_URL, json=fisica_payload, environ_base={"REMOTE_ADDR": "198.51.100.7"})
        assert store.get_by_id(1).ip_usuario == "198.51.100.7"

    def test_forwarded_for_ignored_without_trust_proxy(self, client, store, fisica_payload):
        client.post(
            CONTACT_URL,
            json=fisica_payload,
            headers={"X-Forwarded-For": "203.0.113.1"},
            environ_base={"REMOTE_ADDR": "10.0.0.2"}
        )
        assert store.get_by_id(1).ip_usuario == "10.0.0.2"

    def test_forwarded_for_with_trust_proxy(self, test_settings, service, store, fisica_payload):
        test_settings.trust_proxy = True
        app = create_app(test_settings, contact_form_service=service)

        with app.test_client() as client:
            client.post(
                CONTACT_URL,
                json=fisica_payload,
                headers={"X-Forwarded-For": "203.0.113.1, 10.0.0.1"},
                environ_base={"REMOTE_ADDR": "10.0.0.2"}
            )

        assert store.get_by_id(1).ip_usuario == "203.0.113.1"

    def test_validation_error(self, client, store, fisica_payload):
        fisica_payload["aceite_termos"] = False
        fisica_payload["telefone"] = "11987654321"

        response = client.post(CONTACT_URL, json=fisica_payload)

        assert response.status_code == 400
        error = response.get_json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Validation failed"
        fields = {d["field"] for d in error["details"]}
        assert fields == {"telefone", "aceite_termos"}
        assert all(set(d) == {"field", "message", "type"} for d in error["details"])
        assert store.count() == 0

    def test_captcha_error(self, client, store, fisica_payload):
        fisica_payload["captcha"] = ""

        response = client.post(CONTACT_URL, json=fisica_payload)

        assert response.status_code == 400
        assert response.get_json() == {
            "success": False,
            "error": {
                "code": "CAPTCHA_ERROR",
                "message": "Por favor, complete a verificação de segurança"
            }
        }
        assert store.count() == 0

    def test_invalid_json(self, client):
        response = client.post(CONTACT_URL, data="{not json", content_type="application/json")

        assert response.status_code == 400
        error = response.get_json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Invalid JSON in request body"

    def test_wrong_content_type(self, client):
        response = client.post(CONTACT_URL, data="nome=Maria", content_type="application/x-www-form-urlencoded")

        assert response.status_code == 400
        error = response.get_json()["error"]
        assert error["message"] == "Request must have Content-Type: application/json"
        assert error["details"][0]["field"] == "content-type"

    def test_json_array_body(self, client):
        response = client.post(CONTACT_URL, json=[1, 2])

        assert response.status_code == 400
        assert response.get_json()["error"]["details"][0]["field"] == "body"

    def test_storage_failure(self, test_settings, fisica_payload):
        service = MagicMock()
        service.submit.side_effect = RuntimeError("boom")
        app = create_app(test_settings, contact_form_service=service)

        response = app.test_client().post(CONTACT_URL, json=fisica_payload)

        assert response.status_code == 500
        error = response.get_json()["error"]
        assert error["code"] == "INTERNAL_ERROR"
        assert error["message"] == "RuntimeError: boom"

    def test_internal_details_hidden_in_production(self, fisica_payload):
        settings = Settings(environment='production', otel_enabled=False)
        service = MagicMock()
        service.submit.side_effect = RuntimeError("boom")
        app = create_app(settings, contact_form_service=service)

        response = app.test_client().post(CONTACT_URL, json=fisica_payload)

        assert response.status_code == 500
        assert response.get_json()["error"]["message"] == "An unexpected error occurred"

    def test_trailing_newline_phone_rejected(self, client, store, fisica_payload):
        fisica_payload["telefone"] = "(11) 98765-4321\n"

        response = client.post(CONTACT_URL, json=fisica_payload)

        assert response.status_code == 400
        assert response.get_json()["error"]["details"][0]["field"] == "telefone"
        assert store.count() == 0

    def test_method_not_allowed(self, client):
        response = client.get(CONTACT_URL)

        assert response.status_code == 405
        assert response.get_json()["error"]["code"] == "METHOD_NOT_ALLOWED"


class TestAppRoutes:
    """Test routes outside the contact blueprint."""

    def test_not_found(self, client):
        response = client.get("/api/external/unknown")

        assert response.status_code == 404
        body = response.get_json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"

    def test_health(self, client, fisica_payload):
        client.post(CONTACT_URL, json=fisica_payload)

        response = client.get("/api/healthz")

        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "healthy"
        assert data["service"] == "contact-api"
        assert data["environment"] == "test"
        assert data["submissions"] == 1

    def test_openapi_document_lists_contact_route(self, client):
        response = client.get("/openapi/openapi.json")

        assert response.status_code == 200
        assert CONTACT_URL in response.get_json()["paths"]

    def test_app_builds_from_environment(self):
        app = create_app()

        assert app.config["ENVIRONMENT"] == "test"
        assert "contact" in app.blueprints
        assert app.test_client().get("/api/healthz").status_code == 200

    def test_wsgi_entry_point(self):
        from contact_api.wsgi import app

        assert app.contact_store.count() == 0

    def test_default_service_wiring(self, test_settings):
        app = create_app(test_settings)

        assert app.contact_store is app.contact_form_service.store
        assert app.contact_form_service.email_service.team_recipients == [
            "equipe@example-advocacia.com.br"
        ]


class TestCORS:
    """Test CORS handling for the frontend origin."""

    def test_preflight_allowed(self, client):
        response = client.options(
            CONTACT_URL,
            headers={"Origin": FRONTEND_ORIGIN, "Access-Control-Request-Method": "POST"}
        )

        assert response.status_code == 204
        assert response.headers["Access-Control-Allow-Origin"] == FRONTEND_ORIGIN
        assert "POST" in response.headers["Access-Control-Allow-Methods"]
        assert "Content-Type" in response.headers["Access-Control-Allow-Headers"]

    def test_preflight_rejected(self, client):
        response = client.options(CONTACT_URL, headers={"Origin": "https://evil.example"})

        assert response.status_code == 403
        assert "Access-Control-Allow-Origin" not in response.headers

    def test_simple_request_headers(self, client, fisica_payload):
        response = client.post(CONTACT_URL, json=fisica_payload, headers={"Origin": FRONTEND_ORIGIN})

        assert response.status_code == 201
        assert response.headers["Access-Control-Allow-Origin"] == FRONTEND_ORIGIN
        assert response.headers["Access-Control-Expose-Headers"] == "X-Trace-Id"
        assert response.headers["Vary"] == "Origin"

    def test_error_responses_carry_cors_headers(self, client):
        response = client.post(CONTACT_URL, json={}, headers={"Origin": FRONTEND_ORIGIN})

        assert response.status_code == 400
        assert response.headers["Access-Control-Allow-Origin"] == FRONTEND_ORIGIN
