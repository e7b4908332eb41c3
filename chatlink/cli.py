"""Command-line front end: log in and show friends, or register an account."""

from __future__ import annotations

import argparse
import getpass
import sys

from chatlink.api import DEFAULT_BASE_URL, ChatApiError, ChatClient
from chatlink.forms import ValidationError, validate_login, validate_registration

LOGIN_SUCCESS = "Đăng nhập thành công"
REGISTER_SUCCESS = "Đăng ký thành công"
ERROR_PREFIX = "Lỗi: "


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chatlink", description="Chat client: log in to see friends, or register."
    )
    parser.add_argument("--server", default=DEFAULT_BASE_URL, help="server base URL")
    parser.add_argument(
        "--timeout", type=float, default=10.0, help="request timeout in seconds"
    )
    parser.set_defaults(command="login", username=None, password=None)
    commands = parser.add_subparsers(dest="command")

    login = commands.add_parser("login", help="log in and list friends (default)")
    login.add_argument("--username")
    login.add_argument("--password")

    register = commands.add_parser("register", help="create a new account")
    register.add_argument("--name")
    register.add_argument("--username")
    register.add_argument("--password")
    register.add_argument("--confirm-password", dest="confirm_password")
    return parser


def _ask(value: str | None, label: str, hidden: bool = False) -> str:
    if value is not None:
        return value
    return getpass.getpass(label) if hidden else input(label)


def _login(client: ChatClient, args: argparse.Namespace) -> int:
    username = _ask(args.username, "Tên đăng nhập: ")
    hidden_entry = _ask(args.password, "Mật khẩu: ", hidden=True)
    try:
        validate_login(username, hidden_entry)
        client.login(username, hidden_entry)
    except (ValidationError, ChatApiError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(LOGIN_SUCCESS)

    try:
        friends = client.list_friends()
    except ChatApiError as exc:
        print(ERROR_PREFIX + str(exc), file=sys.stderr)
        return 1
    for friend in friends:
        print(friend.full_name)
    return 0


def _register(client: ChatClient, args: argparse.Namespace) -> int:
    full_name = _ask(args.name, "Họ tên: ")
    username = _ask(args.username, "Tên đăng nhập: ")
    hidden_entry = _ask(args.password, "Mật khẩu: ", hidden=True)
    confirm = _ask(args.confirm_password, "Nhập lại mật khẩu: ", hidden=True)
    try:
        full_name, username = validate_registration(
            full_name, username, hidden_entry, confirm
        )
        client.register(full_name, username, hidden_entry)
    except (ValidationError, ChatApiError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(REGISTER_SUCCESS)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the client; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    client = ChatClient(base_url=args.server, timeout=args.timeout)
    if args.command == "register":
        return _register(client, args)
    return _login(client, args)


if __name__ == "__main__":
    sys.exit(main())