"""Lookups of user and group accounts."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Optional

try:
    import grp
    import pwd
except ImportError:  # systems without Unix account databases
    grp = None
    pwd = None


@dataclass(frozen=True)
class User:
    """A user account."""

    uid: int
    name: str
    primary_group: int


@dataclass(frozen=True)
class Group:
    """A group account and the names of its members."""

    gid: int
    name: str
    members: tuple[str, ...] = ()

    def add_member(self, name: str) -> Group:
        """A copy of this group with one more member."""
        return replace(self, members=(*self.members, name))


@dataclass
class MockUsers:
    """An in-memory account database, for use where the real one should not be consulted."""

    current_uid: int
    users: dict[int, User] = field(default_factory=dict)
    groups: dict[int, Group] = field(default_factory=dict)

    def add_user(self, user: User) -> None:
        self.users[user.uid] = user

    def add_group(self, group: Group) -> None:
        self.groups[group.gid] = group

    def get_user_by_uid(self, uid: int) -> Optional[User]:
        return self.users.get(uid)

    def get_group_by_gid(self, gid: int) -> Optional[Group]:
        return self.groups.get(gid)

    def get_current_uid(self) -> int:
        return self.current_uid


class SystemUsers:
    """The operating system's account database, with lookups cached."""

    def __init__(self) -> None:
        self._users: dict[int, Optional[User]] = {}
        self._groups: dict[int, Optional[Group]] = {}
        self._current_uid: Optional[int] = None

    def get_user_by_uid(self, uid: int) -> Optional[User]:
        if uid not in self._users:
            self._users[uid] = _lookup_user(uid)
        return self._users[uid]

    def get_group_by_gid(self, gid: int) -> Optional[Group]:
        if gid not in self._groups:
            self._groups[gid] = _lookup_group(gid)
        return self._groups[gid]

    def get_current_uid(self) -> int:
        if self._current_uid is None:
            self._current_uid = os.getuid() if hasattr(os, "getuid") else 0
        return self._current_uid


def _lookup_user(uid: int) -> Optional[User]:
    if pwd is None:
        return None
    try:
        entry = pwd.getpwuid(uid)
    except (KeyError, OverflowError):
        return None
    return User(entry.pw_uid, entry.pw_name, entry.pw_gid)


def _lookup_group(gid: int) -> Optional[Group]:
    if grp is None:
        return None
    try:
        entry = grp.getgrgid(gid)
    except (KeyError, OverflowError):
        return None
    return Group(entry.gr_gid, entry.gr_name, tuple(entry.gr_mem))