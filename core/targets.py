from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ProjectTarget:
    project_id: str


@dataclass(frozen=True)
class ChapterTarget:
    chapter_id: str


# What a like or a comment points at; exactly one kind per row
Target = Union[ProjectTarget, ChapterTarget]


def target_from_columns(project_id: str | None, chapter_id: str | None) -> Target:
    """Build a like target from the two nullable storage columns.

    A like stores exactly one of the two references; a row with both or
    neither set is corrupt.
    """
    if (project_id is None) == (chapter_id is None):
        raise ValueError("exactly one of project_id and chapter_id must be set")
    if chapter_id is not None:
        return ChapterTarget(chapter_id)
    return ProjectTarget(project_id)
