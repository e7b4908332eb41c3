"""Friend records and the roster that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping


def _text(item: Mapping[str, Any], key: str) -> str:
    value = item.get(key, "")
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _flag(item: Mapping[str, Any], key: str) -> bool:
    value = item.get(key, False)
    if not isinstance(value, bool):
        raise TypeError(f"field {key!r} must be a boolean, got {type(value).__name__}")
    return value


def _number_flag(item: Mapping[str, Any], key: str) -> bool:
    value = item.get(key, 0)
    if not isinstance(value, (bool, int, float)):
        raise TypeError(f"field {key!r} must be a number, got {type(value).__name__}")
    return bool(value)


@dataclass
class FriendInfo:
    """One entry of a user's friend list."""

    friend_id: str = ""
    full_name: str = ""
    username: str = ""
    avatar: str = ""
    is_online: bool = False
    content: str = ""
    is_send: bool = False

    @classmethod
    def from_json(cls, item: Any) -> "FriendInfo":
        """Build a friend from one decoded JSON object of the friend-list reply.

        Missing fields take their defaults; fields of the wrong type raise TypeError.
        """
        if not isinstance(item, Mapping):
            raise TypeError(f"friend entry must be an object, got {type(item).__name__}")
        return cls(
            friend_id=_text(item, "FriendID"),
            full_name=_text(item, "FullName"),
            username=_text(item, "Username"),
            avatar=_text(item, "Avatar"),
            is_online=_flag(item, "isOnline"),
            content=_text(item, "Content"),
            is_send=_number_flag(item, "isSend"),
        )


@dataclass
class FriendRoster:
    """Ordered collection of friends as shown in the friend list."""

    friends: list[FriendInfo] = field(default_factory=list)

    def add(self, friend: FriendInfo) -> None:
        """Append a friend at the end of the list."""
        self.friends.append(friend)

    def clear(self) -> None:
        """Remove every friend."""
        self.friends.clear()

    def names(self) -> list[str]:
        """Full names in display order."""
        return [friend.full_name for friend in self.friends]

    def __iter__(self) -> Iterator[FriendInfo]:
        return iter(self.friends)

    def __len__(self) -> int:
        return len(self.friends)