import pytest

from lsview.render.filetype import FileType
from lsview.style import fixed


class FakeColours:
    def normal(self):
        return fixed(1).normal()

    def directory(self):
        return fixed(2).normal()

    def pipe(self):
        return fixed(3).normal()

    def symlink(self):
        return fixed(4).normal()

    def block_device(self):
        return fixed(5).normal()

    def char_device(self):
        return fixed(6).normal()

    def socket(self):
        return fixed(7).normal()

    def special(self):
        return fixed(8).normal()


@pytest.mark.parametrize(
    "file_type, char, number",
    [
        (FileType.FILE, ".", 1),
        (FileType.DIRECTORY, "d", 2),
        (FileType.PIPE, "|", 3),
        (FileType.LINK, "l", 4),
        (FileType.BLOCK_DEVICE, "b", 5),
        (FileType.CHAR_DEVICE, "c", 6),
        (FileType.SOCKET, "s", 7),
        (FileType.SPECIAL, "?", 8),
    ],
)
def test_render_uses_matching_style(file_type, char, number):
    assert file_type.render(FakeColours()) == fixed(number).paint(char)


@pytest.mark.parametrize(
    "file_type, regular",
    [
        (FileType.FILE, True),
        (FileType.DIRECTORY, False),
        (FileType.PIPE, False),
        (FileType.LINK, False),
        (FileType.BLOCK_DEVICE, False),
        (FileType.CHAR_DEVICE, False),
        (FileType.SOCKET, False),
        (FileType.SPECIAL, False),
    ],
)
def test_only_file_is_regular(file_type, regular):
    assert file_type.is_regular_file() is regular


def test_every_type_renders_one_distinct_character():
    colours = FakeColours()
    texts = [FileType.render(file_type, colours).text for file_type in FileType]
    assert all(len(text) == 1 for text in texts)
    assert sorted(texts) == sorted(".d|lbcs?")