"""Token login route and dependency wiring tests."""

from __future__ import annotations

import os
import unittest
from typing import Any

from fastapi.testclient import TestClient

from linkedin_token.adapters.oauth2 import HttpxOAuth2Client, MockOAuth2Client, OAuth2TransportError
from linkedin_token.core.config import Settings, get_settings
from linkedin_token.main import create_app
from linkedin_token.routes.dependencies import get_oauth2_client
from linkedin_documents import EMAIL_URL, mock_client


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "LINKEDIN_TOKEN_OAUTH2_CLIENT",
        "LINKEDIN_TOKEN_SKIP_USER_PROFILE",
        "LINKEDIN_TOKEN_PROFILE_URL",
    )

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        os.environ["LINKEDIN_TOKEN_OAUTH2_CLIENT"] = "mock"
        os.environ.pop("LINKEDIN_TOKEN_SKIP_USER_PROFILE", None)
        os.environ.pop("LINKEDIN_TOKEN_PROFILE_URL", None)
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


class TokenLoginApiTests(_SettingsEnvCase):
    def _client(self, oauth2_client: MockOAuth2Client, **kwargs: Any) -> TestClient:
        return TestClient(create_app(client=oauth2_client, **kwargs))

    def test_query_token_returns_principal(self) -> None:
        upstream = mock_client()
        client = self._client(upstream)

        response = client.get("/auth/linkedin/token", params={"access_token": "tok123"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "user_id": "42",
                "display_name": "Tina Belcher",
                "email": "tina@example.com",
                "provider": "linkedin",
            },
        )
        self.assertEqual({call.token for call in upstream.calls}, {"tok123"})

    def test_json_body_token_takes_precedence_over_query(self) -> None:
        upstream = mock_client()
        client = self._client(upstream)

        response = client.post(
            "/auth/linkedin/token",
            params={"access_token": "query-token"},
            json={"access_token": "body-token"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual({call.token for call in upstream.calls}, {"body-token"})

    def test_form_body_token_is_accepted(self) -> None:
        upstream = mock_client()
        client = self._client(upstream)

        response = client.post("/auth/linkedin/token", data={"access_token": "form-token"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual({call.token for call in upstream.calls}, {"form-token"})

    def test_header_token_is_accepted(self) -> None:
        upstream = mock_client()
        client = self._client(upstream)

        response = client.get("/auth/linkedin/token", headers={"access_token": "header-token"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual({call.token for call in upstream.calls}, {"header-token"})

    def test_missing_token_returns_401_and_no_upstream_side_effect(self) -> None:
        upstream = mock_client()
        client = self._client(upstream)

        response = client.post("/auth/linkedin/token", json={})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["code"], "UNAUTHORIZED")
        self.assertEqual(upstream.call_count, 0)

    def test_provider_denial_returns_401(self) -> None:
        upstream = mock_client()
        client = self._client(upstream)

        response = client.get(
            "/auth/linkedin/token",
            params={"error": "user_cancelled_login", "access_token": "tok123"},
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(upstream.call_count, 0)

    def test_upstream_failure_returns_502(self) -> None:
        upstream = mock_client(email=OAuth2TransportError("provider responded with status 500", status_code=500))
        client = self._client(upstream)

        response = client.get("/auth/linkedin/token", params={"access_token": "tok123"})

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["code"], "UPSTREAM_AUTH_ERROR")
        self.assertEqual(len(upstream.calls_to(EMAIL_URL)), 1)

    def test_verify_rejection_message_is_returned(self) -> None:
        def reject(access_token: str, refresh_token: str | None, profile: Any) -> tuple[None, str]:
            return None, "Member is not registered"

        client = self._client(mock_client(), verify=reject)

        response = client.get("/auth/linkedin/token", params={"access_token": "tok123"})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Member is not registered")

    def test_default_verify_rejects_when_profile_loading_skipped(self) -> None:
        upstream = mock_client()
        settings = Settings(oauth2_client="mock", skip_user_profile=True)
        client = self._client(upstream, settings=settings)

        response = client.get("/auth/linkedin/token", params={"access_token": "tok123"})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(upstream.call_count, 0)

    def test_pass_req_to_callback_receives_host_request(self) -> None:
        observed: dict[str, Any] = {}

        def verify(request: Any, access_token: str, refresh_token: str | None, profile: Any) -> dict[str, str]:
            observed["path"] = request.url.path
            return {"user_id": profile.id, "display_name": profile.display_name}

        settings = Settings(oauth2_client="mock", pass_req_to_callback=True)
        client = self._client(mock_client(), settings=settings, verify=verify)

        response = client.get("/auth/linkedin/token", params={"access_token": "tok123"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(observed["path"], "/auth/linkedin/token")
        self.assertEqual(response.json()["user_id"], "42")


class DependencyWiringTests(_SettingsEnvCase):
    def test_settings_load_from_environment(self) -> None:
        os.environ["LINKEDIN_TOKEN_SKIP_USER_PROFILE"] = "true"
        os.environ["LINKEDIN_TOKEN_PROFILE_URL"] = "https://api.example.com/me"
        get_settings.cache_clear()

        settings = get_settings()
        options = settings.to_strategy_options()

        self.assertEqual(settings.oauth2_client, "mock")
        self.assertTrue(options.skip_user_profile)
        self.assertEqual(options.profile_url, "https://api.example.com/me")
        self.assertEqual(options.access_token_name, "oauth2_access_token")

    def test_dependency_selects_httpx_client(self) -> None:
        client = get_oauth2_client(Settings(oauth2_client="httpx", http_timeout_seconds=3.0))

        self.assertIsInstance(client, HttpxOAuth2Client)

    def test_dependency_selects_mock_client(self) -> None:
        client = get_oauth2_client(Settings(oauth2_client="mock"))

        self.assertIsInstance(client, MockOAuth2Client)

    def test_mock_configured_app_accepts_test_tokens(self) -> None:
        client = TestClient(create_app())

        response = client.get("/auth/linkedin/token", params={"access_token": "test:member-7"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "user_id": "member-7",
                "display_name": "Test member-7",
                "email": "member-7@example.test",
                "provider": "linkedin",
            },
        )

    def test_mock_configured_app_rejects_non_test_tokens_upstream(self) -> None:
        client = TestClient(create_app())

        response = client.get("/auth/linkedin/token", params={"access_token": "tok123"})

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["code"], "UPSTREAM_AUTH_ERROR")


if __name__ == "__main__":
    unittest.main()
