import inspect
import unittest
import uuid
from unittest.mock import MagicMock
from http import HTTPStatus
from starlette.requests import Request
from fastapi import FastAPI, APIRouter, Body
from fastapi.testclient import TestClient

from devconnector.utils.permission_decorators import authenticate
from devconnector.dto.user_context_dto import UserContextDto


class TestAuthenticateDecorator(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.mock_request = MagicMock(spec=Request)
        self.mock_request.state = MagicMock()
        self.mock_request.state.auth_error = None
        self.user = UserContextDto(user_id=uuid.uuid4())

    async def test_no_user_in_state_returns_401(self):
        """Anonymous callers are rejected before the endpoint runs."""
        self.mock_request.state.user = None
        called = MagicMock()

        @authenticate()
        async def dummy_func():
            called()
            return "success"

        response = await dummy_func(request=self.mock_request)

        self.assertEqual(response.status_code, HTTPStatus.UNAUTHORIZED)
        self.assertIn(b"Unauthorized: User context missing", response.body)
        called.assert_not_called()

    async def test_logged_in_user_calls_func(self):
        self.mock_request.state.user = self.user

        @authenticate()
        async def dummy_func():
            return "called"

        self.assertEqual(await dummy_func(request=self.mock_request), "called")

    async def test_inject_current_user(self):
        self.mock_request.state.user = self.user

        @authenticate()
        async def dummy_func(current_user):
            return current_user

        self.assertIs(await dummy_func(request=self.mock_request), self.user)

    async def test_invalid_token_returns_401(self):
        """A token that failed verification is reported on protected endpoints."""
        self.mock_request.state.user = None
        self.mock_request.state.auth_error = "Token is not valid"
        called = MagicMock()

        @authenticate()
        async def dummy_func():
            called()

        response = await dummy_func(request=self.mock_request)

        self.assertEqual(response.status_code, HTTPStatus.UNAUTHORIZED)
        self.assertIn(b"Token is not valid", response.body)
        called.assert_not_called()

    async def test_business_params_are_forwarded(self):
        self.mock_request.state.user = self.user

        @authenticate()
        async def dummy_func(exp_id: str, current_user):
            return exp_id, current_user

        exp_id, user = await dummy_func(request=self.mock_request, exp_id="e1")

        self.assertEqual(exp_id, "e1")
        self.assertIs(user, self.user)

    def test_signature_hides_injected_params(self):
        @authenticate()
        async def dummy_func(exp_id: str, current_user):
            return exp_id

        params = list(inspect.signature(dummy_func).parameters)

        self.assertEqual(params, ["request", "exp_id"])


class TestAuthenticateDecoratorWithFastAPI(unittest.TestCase):
    """The rewritten signature must still be understood by FastAPI."""

    def setUp(self):
        self.user = UserContextDto(user_id=uuid.uuid4())
        router = APIRouter()

        class ItemController:
            async def update(self, item_id: str, current_user, body: dict = Body()):
                return {
                    "item_id": item_id,
                    "owner": str(current_user.user_id),
                    "name": body["name"],
                }

        router.add_api_route(
            "/items/{item_id}",
            endpoint=authenticate()(ItemController().update),
            methods=["PUT"],
        )

        self.app = FastAPI()
        self.app.include_router(router)

    def _client(self, user):
        @self.app.middleware("http")
        async def inject_user(request, call_next):
            request.state.user = user
            return await call_next(request)

        return TestClient(self.app)

    def test_authenticated_request(self):
        response = self._client(self.user).put("/items/42", json={"name": "desk"})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(
            response.json(),
            {"item_id": "42", "owner": str(self.user.user_id), "name": "desk"},
        )

    def test_anonymous_request(self):
        response = self._client(None).put("/items/42", json={"name": "desk"})

        self.assertEqual(response.status_code, HTTPStatus.UNAUTHORIZED)


if __name__ == "__main__":
    unittest.main()
