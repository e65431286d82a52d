import time
import unittest
import uuid
from unittest.mock import MagicMock, patch

import jwt
from starlette.datastructures import Headers

from devconnector.authentication.authentication_service import AuthenticationService
from devconnector.common.environment_constants import JWT_SECRET

SECRET = "unit-test-secret-with-at-least-32-bytes"


class TestAuthenticationService(unittest.TestCase):
    def setUp(self):
        self.mock_logger = MagicMock()
        self.service = AuthenticationService(logger=self.mock_logger, jwt_secret=SECRET)
        self.user_id = uuid.uuid4()

    def _token(self, payload=None, secret=SECRET) -> str:
        if payload is None:
            payload = {"user": {"id": str(self.user_id)}}
        return jwt.encode(payload, secret, algorithm="HS256")

    def test_x_auth_token_header(self):
        headers = Headers({"x-auth-token": self._token()})

        context = self.service.authenticate_request(headers)

        self.assertEqual(context.user_id, self.user_id)

    def test_bearer_token(self):
        headers = Headers({"Authorization": f"Bearer {self._token()}"})

        context = self.service.authenticate_request(headers)

        self.assertEqual(context.user_id, self.user_id)

    def test_x_auth_token_takes_precedence(self):
        other_id = uuid.uuid4()
        headers = Headers(
            {
                "x-auth-token": self._token(),
                "Authorization": "Bearer "
                + self._token({"user": {"id": str(other_id)}}),
            }
        )

        context = self.service.authenticate_request(headers)

        self.assertEqual(context.user_id, self.user_id)

    def test_no_token_is_anonymous(self):
        self.assertIsNone(self.service.authenticate_request(Headers({})))

    def test_non_bearer_authorization_is_anonymous(self):
        headers = Headers({"Authorization": "Basic dXNlcjpwYXNz"})

        self.assertIsNone(self.service.authenticate_request(headers))

    def test_wrong_signature(self):
        forged = self._token(secret="another-secret-with-at-least-32-bytes")
        headers = Headers({"x-auth-token": forged})

        with self.assertRaises(ValueError):
            self.service.authenticate_request(headers)

        self.mock_logger.warning.assert_called_once()

    def test_malformed_token(self):
        with self.assertRaises(ValueError):
            self.service.authenticate_request(Headers({"x-auth-token": "not.a.jwt"}))

    def test_expired_token(self):
        token = self._token(
            {"user": {"id": str(self.user_id)}, "exp": int(time.time()) - 60}
        )

        with self.assertRaises(ValueError):
            self.service.authenticate_request(Headers({"x-auth-token": token}))

    def test_payload_without_user_id(self):
        token = self._token({"user": {}})

        with self.assertRaises(ValueError):
            self.service.authenticate_request(Headers({"x-auth-token": token}))

    def test_payload_with_non_uuid_user_id(self):
        token = self._token({"user": {"id": "5d7a514b5d2c12c7449be042"}})

        with self.assertRaises(ValueError):
            self.service.authenticate_request(Headers({"x-auth-token": token}))

    def test_missing_secret_is_a_server_error(self):
        with patch.dict("os.environ", {}, clear=True):
            service = AuthenticationService(logger=self.mock_logger)

        with self.assertRaises(RuntimeError):
            service.authenticate_request(Headers({"x-auth-token": self._token()}))

    def test_secret_from_environment(self):
        with patch.dict("os.environ", {JWT_SECRET: SECRET}):
            service = AuthenticationService(logger=self.mock_logger)

        context = service.authenticate_request(Headers({"x-auth-token": self._token()}))

        self.assertEqual(context.user_id, self.user_id)


if __name__ == "__main__":
    unittest.main()
