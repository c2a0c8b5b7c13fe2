import pytest

from searchtrees.demo import equal_paths_demo, main, tree_demo

TREE_OUTPUT = (
    "Binary Search Tree contents:\n"
    "a 1\n"
    "b 2\n"
    "Found b\n"
    "Erasing b\n"
    "\n"
    "AVLTree contents:\n"
    "a 1\n"
    "b 2\n"
    "Found b\n"
    "Erasing b\n"
)

PATHS_OUTPUT = "Test1: 1\nTest2: 1\nTest3: 1\nTest4: 1\nTest5: 0\n"


def test_tree_demo_output():
    assert tree_demo() == TREE_OUTPUT


def test_equal_paths_demo_output():
    assert equal_paths_demo() == PATHS_OUTPUT


def test_main_runs_both_by_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == TREE_OUTPUT + PATHS_OUTPUT


def test_main_trees_only(capsys):
    assert main(["trees"]) == 0
    assert capsys.readouterr().out == TREE_OUTPUT


def test_main_paths_only(capsys):
    assert main(["paths"]) == 0
    assert capsys.readouterr().out == PATHS_OUTPUT


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2