import pytest

from leetkit.binary_tree import build_binary_tree
from leetkit.cli import DEMOS, main
from leetkit.codec import parse_int_list, serialize_nested
from leetkit.traversals import level_order


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_default_runs_smallest_string(capsys):
    assert main([]) == 0
    assert _lines(capsys) == ["43520", "001"]


def test_named_smallest_string_matches_default(capsys):
    main([])
    default = _lines(capsys)
    assert main(["smallest-string"]) == 0
    assert _lines(capsys) == default


def test_construct_pre_in_output(capsys):
    assert main(["construct-pre-in"]) == 0
    assert _lines(capsys) == ["[3,9,20,null,null,15,7]", "[-1]"]


def test_construct_in_post_output(capsys):
    assert main(["construct-in-post"]) == 0
    assert _lines(capsys) == ["[3,9,20,null,null,15,7]", "[-1]"]


def test_zigzag_echoes_trees(capsys):
    assert main(["zigzag"]) == 0
    lines = _lines(capsys)
    assert lines[0::2] == ["[3,9,20,null,null,15,7]", "[1]", "[]"]


def test_level_order_output(capsys):
    assert main(["level-order"]) == 0
    expected = [
        serialize_nested(level_order(build_binary_tree(parse_int_list(text))))
        for text in ("[3,9,20,null,null,15,7]", "[1]", "[]")
    ]
    assert _lines(capsys) == expected


def test_list_names_every_demo(capsys):
    assert main(["--list"]) == 0
    lines = _lines(capsys)
    assert lines == sorted(DEMOS)
    assert "smallest-string" in lines


@pytest.mark.parametrize("name", sorted(DEMOS))
def test_every_demo_prints(name, capsys):
    assert main([name]) == 0
    assert len(_lines(capsys)) >= 1


def test_unknown_problem_rejected():
    with pytest.raises(SystemExit) as info:
        main(["no-such-problem"])
    assert info.value.code == 2