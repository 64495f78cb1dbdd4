import pytest

from core.targets import ChapterTarget, ProjectTarget, target_from_columns
from crud.chapter_crud import order_problems
from models.comment import Comment
from models.like import Like


def test_target_from_columns() -> None:
    assert target_from_columns("p1", None) == ProjectTarget("p1")
    assert target_from_columns(None, "c1") == ChapterTarget("c1")


@pytest.mark.parametrize("project_id, chapter_id", [(None, None), ("p1", "c1")])
def test_target_requires_exactly_one_reference(project_id, chapter_id) -> None:
    with pytest.raises(ValueError):
        target_from_columns(project_id, chapter_id)


def test_like_and_comment_expose_target() -> None:
    assert Like(user_id="u", chapter_id="c1").target == ChapterTarget("c1")
    assert Like(user_id="u", project_id="p1").target == ProjectTarget("p1")
    assert Comment(user_id="u", project_id="p1", chapter_id="c1", content="x").target == ChapterTarget("c1")
    assert Comment(user_id="u", project_id="p1", content="x").target == ProjectTarget("p1")


def test_order_problems() -> None:
    assert order_problems({"a", "b"}, ["b", "a"]) is None
    assert order_problems({"a", "b", "c"}, ["a", "x", "x"]) == {
        "missing": ["b", "c"],
        "unknown": ["x"],
        "duplicates": ["x"],
    }
