"""HTTP client for the chat server: login, registration and friend list."""

from __future__ import annotations

import json
from typing import Any

import requests

from chatlink.models import FriendInfo

DEFAULT_BASE_URL = "http://30.30.30.85:8888"

LOGIN_PATH = "/api/auth/login"
REGISTER_PATH = "/api/auth/register"
FRIEND_LIST_PATH = "/api/message/list-friend"

_JSON_ERROR = "Lỗi phân tích JSON: "
_CONNECTION_ERROR = "Lỗi kết nối: "
_MESSAGE_KEY = '"message":"'


class ChatApiError(Exception):
    """Raised when a request fails or the server reports an error."""


def _is_success(status: Any) -> bool:
    return not isinstance(status, bool) and isinstance(status, (int, float)) and status == 1


def _decode(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ChatApiError(_JSON_ERROR + str(exc)) from exc


def _message(response: Any, default: str) -> str:
    if not isinstance(response, dict):
        raise ChatApiError(_JSON_ERROR + "response is not an object")
    message = response.get("message", default)
    if not isinstance(message, str):
        raise ChatApiError(_JSON_ERROR + "message is not a string")
    return message


def parse_login_response(body: str) -> str:
    """Return the access token from a login reply, or raise ChatApiError."""
    response = _decode(body)
    if isinstance(response, dict) and _is_success(response.get("status")):
        data = response.get("data")
        if isinstance(data, dict) and "token" in data:
            token = data["token"]
            if not isinstance(token, str):
                raise ChatApiError(_JSON_ERROR + "token is not a string")
            return token
    raise ChatApiError(_message(response, "Đăng nhập thất bại"))


def parse_register_response(body: str) -> None:
    """Check a registration reply; raise ChatApiError unless it reports success."""
    if '"status":1' in body and '"message":"success register"' in body:
        return
    start = body.find(_MESSAGE_KEY)
    if start == -1:
        raise ChatApiError("Đăng ký thất bại: " + body)
    start += len(_MESSAGE_KEY)
    end = body.find('"', start)
    message = body[start:] if end == -1 else body[start:end]
    if message:
        raise ChatApiError(message)


def parse_friend_list_response(body: str) -> list[FriendInfo]:
    """Return the friends listed in a friend-list reply, or raise ChatApiError."""
    response = _decode(body)
    if isinstance(response, dict) and _is_success(response.get("status")):
        data = response.get("data")
        if data is None:
            entries: list[Any] = []
        elif isinstance(data, dict):
            entries = list(data.values())
        elif isinstance(data, list):
            entries = data
        else:
            entries = [data]
        try:
            return [FriendInfo.from_json(item) for item in entries]
        except TypeError as exc:
            raise ChatApiError(_JSON_ERROR + str(exc)) from exc
    raise ChatApiError(_message(response, "Lỗi không xác định"))


class ChatClient:
    """Talks to the chat server and remembers the access token after login."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.token = ""

    def _request(self, method: str, path: str, **kwargs: Any) -> str:
        try:
            response = self.session.request(
                method, self.base_url + path, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as exc:
            raise ChatApiError(_CONNECTION_ERROR + str(exc)) from exc
        return response.content.decode("utf-8", errors="replace")

    def login(self, username: str, password: str) -> str:
        """Log in, store the access token and return it."""
        body = self._request(
            "POST", LOGIN_PATH, json={"Username": username, "Password": password}
        )
        self.token = parse_login_response(body)
        return self.token

    def register(self, full_name: str, username: str, password: str) -> None:
        """Create a new account; raise ChatApiError on failure."""
        body = self._request(
            "POST",
            REGISTER_PATH,
            json={"FullName": full_name, "Username": username, "Password": password},
        )
        parse_register_response(body)

    def list_friends(self) -> list[FriendInfo]:
        """Fetch the friends of the logged-in user."""
        body = self._request(
            "GET",
            FRIEND_LIST_PATH,
            headers={"Authorization": "Bearer " + self.token},
        )
        return parse_friend_list_response(body)