from lsview.cell import TextCell
from lsview.render.blocks import render_blocks
from lsview.style import GREEN, RED


class _TestColours:
    def block_count(self):
        return RED.blink()

    def no_blocks(self):
        return GREEN.italic()


def test_blocklessness():
    expected = TextCell.blank(GREEN.italic())
    assert render_blocks(None, _TestColours()) == expected


def test_blockfulity():
    expected = TextCell.paint(RED.blink(), "3005")
    assert render_blocks(3005, _TestColours()) == expected


def test_zero_blocks_is_a_number():
    assert render_blocks(0, _TestColours()) == TextCell.paint(RED.blink(), "0")