from yamdoc.cst.node import NodeKind
from yamdoc.parsing.comments import CommentCollector, clean_comment, collect_comments

from cst_builders import branch, comment, document, integer, pair, stream, string


def test_clean_comment():
    assert clean_comment("# comment") == "comment"
    assert clean_comment("#comment   ") == "comment"
    assert clean_comment("## heading") == "heading"
    assert clean_comment("#") == ""


def test_no_comments_gives_empty_index():
    root = stream(document(integer("42")))
    assert collect_comments(root) == {}


def test_consecutive_comments_merge_under_last_line():
    """
    MERGE: a run of comment siblings becomes one entry keyed by its last line.
    """
    root = stream(
        comment("# line one", 0),
        comment("# line two", 1),
        document(integer("7", line=2)),
    )
    assert collect_comments(root) == {1: "line one line two"}


def test_runs_split_by_a_node_stay_separate():
    root = stream(
        comment("# preceding comment", 1),
        document(integer("38", line=2)),
        comment("# inline comment", 2, 3),
    )
    assert collect_comments(root) == {
        1: "preceding comment",
        2: "inline comment",
    }


def test_nested_comments_are_indexed():
    inner = branch(
        NodeKind.BLOCK_MAPPING,
        comment("# this is a multiline comment", 1, 2),
        comment("# for a key within a map", 2, 2),
        pair(string("registry", 3, 2), string("docker.io", 3, 12)),
    )
    outer = branch(NodeKind.BLOCK_MAPPING, pair(string("image", 0), branch(NodeKind.BLOCK_NODE, inner)))
    root = stream(document(branch(NodeKind.BLOCK_NODE, outer)))

    assert CommentCollector().collect(root) == {
        2: "this is a multiline comment for a key within a map",
    }


def test_empty_comment_lines_are_dropped_from_the_merge():
    root = stream(
        comment("# first", 0),
        comment("#", 1),
        comment("# second", 2),
        document(integer("1", line=3)),
    )
    assert collect_comments(root) == {2: "first second"}


def test_comment_only_run_of_blank_markers_is_not_indexed():
    root = stream(comment("#", 0))
    assert collect_comments(root) == {}
