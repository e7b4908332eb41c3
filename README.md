# chatlink

A small client for a chat service. It lets you create an account, log in,
and fetch the list of your friends with their online status and the last
message exchanged.

## Installing

```
pip install chatlink
```

For running the tests:

```
pip install "chatlink[test]"
pytest
```

## From the command line

The package installs one command, `chatlink`. With no subcommand it logs
in and prints the full name of each friend, one per line:

```
chatlink
chatlink login --username alice
```

To create an account:

```
chatlink register --name "Alice Example" --username alice
```

Options:

- `--server URL` – base address of the chat server (a built-in default is
  used otherwise).
- `--timeout SECONDS` – request timeout, 10 seconds by default.
- `login`: `--username`, `--password`.
- `register`: `--name`, `--username`, `--password`, `--confirm-password`.

Any value not given as an option is asked for at the prompt; passwords are
read without echo. On success the command prints a confirmation and exits
with status 0. Validation errors and errors reported by the server are
printed to standard error and the exit status is 1.

## From Python

```python
from chatlink.api import ChatClient, ChatApiError

client = ChatClient("http://chat.example.com:8888")

password = "password"
try:
    client.login("alice", password)
    for friend in client.list_friends():
        status = "online" if friend.is_online else "offline"
        print(f"{friend.full_name} ({friend.username}) - {status}")
except ChatApiError as exc:
    print(f"Request failed: {exc}")
```

`ChatClient(base_url, timeout, session)` takes an optional
`requests.Session`. `login` returns the access token and keeps it in
`client.token`; `list_friends` sends it as a bearer token.

Registering a new account works the same way:

```python
client.register("Alice Example", "alice", password)
```

Every failure, whether the server could not be reached, sent back something
that is not JSON, or refused the request, is raised as `ChatApiError` with
the server's message when it gave one.

The reply parsers are available on their own as
`parse_login_response(body)`, `parse_register_response(body)` and
`parse_friend_list_response(body)`; each takes the response text.

### Checking input before sending it

`chatlink.forms` holds the checks made before contacting the server:

```python
from chatlink.forms import ValidationError, validate_login, validate_registration

try:
    full_name, username = validate_registration("Alice Example", "alice", password, password)
except ValidationError as exc:
    print(exc)
```

`validate_login` rejects an empty user name or password, checking the user
name first. `validate_registration` rejects a name or user name that is
blank after trimming, a missing password or confirmation, and a
confirmation that does not match; it returns the trimmed name and user name.

### Friends

Each friend is a `chatlink.models.FriendInfo` with `friend_id`,
`full_name`, `username`, `avatar`, `is_online`, `content` and `is_send`.
Build one from a decoded server record with `FriendInfo.from_json(item)`;
missing fields take their defaults and fields of the wrong type raise
`TypeError`. A `FriendRoster` keeps friends in the order they were added:
`add(friend)` appends one, `clear()` empties it, and `names()` gives their
full names. It can be iterated and has a length.

## What it does not do

chatlink does not send or receive chat messages, download or show avatar
images, search the friend list, or remember a login between runs. It has
no graphical interface; the command line above is its only front end.