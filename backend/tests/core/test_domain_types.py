"""Domain Types — identity wrappers and the three summary buckets."""

from planner.core.domain_types import NoteId, TaskBucket, TaskId, UserId


def test_identity_types_wrap_int():
    assert UserId(3) == 3
    assert NoteId(4) == 4
    assert TaskId(5) == 5


def test_task_bucket_has_exactly_three_members():
    assert [b.value for b in TaskBucket] == ["completed", "pending", "overdue"]
