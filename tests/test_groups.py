from lsview.cell import TextCell
from lsview.render.groups import render_group
from lsview.style import fixed
from lsview.table import UserFormat
from lsview.userdb import Group, MockUsers, User


class _TestColours:
    def yours(self):
        return fixed(80).normal()

    def not_yours(self):
        return fixed(81).normal()


COLOURS = _TestColours()


def test_named():
    users = MockUsers(1000)
    users.add_group(Group(100, "folk"))

    expected = TextCell.paint(fixed(81).normal(), "folk")
    assert render_group(100, COLOURS, users, UserFormat.NAME) == expected

    expected = TextCell.paint(fixed(81).normal(), "100")
    assert render_group(100, COLOURS, users, UserFormat.NUMERIC) == expected


def test_unnamed():
    users = MockUsers(1000)
    expected = TextCell.paint(fixed(81).normal(), "100")
    assert render_group(100, COLOURS, users, UserFormat.NAME) == expected
    assert render_group(100, COLOURS, users, UserFormat.NUMERIC) == expected


def test_primary():
    users = MockUsers(2)
    users.add_user(User(2, "eve", 100))
    users.add_group(Group(100, "folk"))

    expected = TextCell.paint(fixed(80).normal(), "folk")
    assert render_group(100, COLOURS, users, UserFormat.NAME) == expected


def test_secondary():
    users = MockUsers(2)
    users.add_user(User(2, "eve", 666))
    users.add_group(Group(100, "folk").add_member("eve"))

    expected = TextCell.paint(fixed(80).normal(), "folk")
    assert render_group(100, COLOURS, users, UserFormat.NAME) == expected


def test_overflow():
    expected = TextCell.paint(fixed(81).normal(), "2147483648")
    result = render_group(2_147_483_648, COLOURS, MockUsers(0), UserFormat.NUMERIC)
    assert result == expected