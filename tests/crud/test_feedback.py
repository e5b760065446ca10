from sqlmodel import Session

from artha.feedback import (
    ANONYMOUS_NAME,
    FeedbackCategory,
    FeedbackCreate,
    FeedbackStatus,
    add_feedback_reply,
    feedback_stats,
    list_feedback,
    submit_feedback,
    update_feedback_status,
)


def test_submit_applies_defaults(db: Session) -> None:
    feedback = submit_feedback(
        session=db, feedback_in=FeedbackCreate(message="Love it")
    )

    assert feedback.name == ANONYMOUS_NAME
    assert feedback.email == ""
    assert feedback.category == FeedbackCategory.GENERAL
    assert feedback.status == FeedbackStatus.NEW
    assert feedback.replies == []


def test_submit_keeps_given_fields(db: Session) -> None:
    feedback = submit_feedback(
        session=db,
        feedback_in=FeedbackCreate.model_validate(
            {
                "name": "Sam",
                "email": "sam@example.com",
                "type": "bug",
                "message": "Broken",
            }
        ),
    )

    assert feedback.name == "Sam"
    assert feedback.email == "sam@example.com"
    assert feedback.category == FeedbackCategory.BUG


def test_list_is_newest_first(db: Session) -> None:
    for text in ["first", "second", "third"]:
        submit_feedback(session=db, feedback_in=FeedbackCreate(message=text))

    messages = [f.message for f in list_feedback(session=db)]
    assert messages == ["third", "second", "first"]


def test_stats_group_by_type_and_status(db: Session) -> None:
    for category in ["bug", "bug", "feature", None]:
        payload = {"message": "m"}
        if category:
            payload["type"] = category
        submit_feedback(session=db, feedback_in=FeedbackCreate.model_validate(payload))
    resolved = list_feedback(session=db)[0]
    update_feedback_status(
        session=db, db_feedback=resolved, status=FeedbackStatus.RESOLVED
    )

    stats = feedback_stats(session=db)

    assert stats.total == 4
    assert stats.by_type == {"suggestion": 0, "bug": 2, "feature": 1, "general": 1}
    assert stats.by_status == {
        "new": 3,
        "reviewed": 0,
        "in-progress": 0,
        "resolved": 1,
    }


def test_stats_on_empty_store(db: Session) -> None:
    stats = feedback_stats(session=db)
    assert stats.total == 0
    assert set(stats.by_type.values()) == {0}


def test_replies_are_appended_in_order(db: Session) -> None:
    feedback = submit_feedback(session=db, feedback_in=FeedbackCreate(message="Hi"))

    add_feedback_reply(
        session=db,
        db_feedback=feedback,
        admin_name="Admin",
        admin_email="admin@example.com",
        message="Thanks",
    )
    feedback = add_feedback_reply(
        session=db,
        db_feedback=feedback,
        admin_name="Admin",
        admin_email="admin@example.com",
        message="Fixed now",
    )

    assert [r["message"] for r in feedback.replies] == ["Thanks", "Fixed now"]
    assert feedback.replies[0]["admin_email"] == "admin@example.com"
