from lsview.tree import TreeDepth, TreeParams, TreePart, TreeTrunk


def params(depth, last):
    return TreeParams(TreeDepth(depth), last)


def test_empty_at_first():
    tt = TreeTrunk()
    assert tt.new_row(params(0, True)) == []


def test_one_child():
    tt = TreeTrunk()
    assert tt.new_row(params(0, True)) == []
    assert tt.new_row(params(1, True)) == [TreePart.CORNER]


def test_two_children():
    tt = TreeTrunk()
    assert tt.new_row(params(0, True)) == []
    assert tt.new_row(params(1, False)) == [TreePart.EDGE]
    assert tt.new_row(params(1, True)) == [TreePart.CORNER]


def test_two_times_two_children():
    tt = TreeTrunk()
    assert tt.new_row(params(0, False)) == []
    assert tt.new_row(params(1, False)) == [TreePart.EDGE]
    assert tt.new_row(params(1, True)) == [TreePart.CORNER]

    assert tt.new_row(params(0, True)) == []
    assert tt.new_row(params(1, False)) == [TreePart.EDGE]
    assert tt.new_row(params(1, True)) == [TreePart.CORNER]


def test_two_times_two_nested_children():
    tt = TreeTrunk()
    assert tt.new_row(params(0, True)) == []

    assert tt.new_row(params(1, False)) == [TreePart.EDGE]
    assert tt.new_row(params(2, False)) == [TreePart.LINE, TreePart.EDGE]
    assert tt.new_row(params(2, True)) == [TreePart.LINE, TreePart.CORNER]

    assert tt.new_row(params(1, True)) == [TreePart.CORNER]
    assert tt.new_row(params(2, False)) == [TreePart.BLANK, TreePart.EDGE]
    assert tt.new_row(params(2, True)) == [TreePart.BLANK, TreePart.CORNER]


def test_iteration():
    foos = ["first", "middle", "last"]
    result = list(TreeDepth.root().iterate_over(foos))
    assert [item for _, item in result] == foos
    assert [p.last for p, _ in result] == [False, False, True]
    assert all(p.depth == TreeDepth.root() for p, _ in result)


def test_empty():
    assert list(TreeDepth.root().iterate_over([])) == []


def test_iteration_over_generator():
    result = list(TreeDepth(2).iterate_over(n for n in range(2)))
    assert result == [(params(2, False), 0), (params(2, True), 1)]


def test_ascii_art():
    assert TreePart.EDGE.ascii_art() == "├──"
    assert TreePart.LINE.ascii_art() == "│  "
    assert TreePart.CORNER.ascii_art() == "└──"
    assert TreePart.BLANK.ascii_art() == "   "


def test_depth():
    root = TreeDepth.root()
    assert root.level == 0
    assert root.deeper().deeper() == TreeDepth(2)


def test_is_at_root():
    assert params(0, False).is_at_root()
    assert not params(1, True).is_at_root()