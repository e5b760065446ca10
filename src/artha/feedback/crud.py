import uuid

from sqlmodel import Session, col, func, select

from artha.core.exceptions import ResourceNotFoundError, ValidationError
from artha.feedback.models import (
    ANONYMOUS_NAME,
    Feedback,
    FeedbackCategory,
    FeedbackCreate,
    FeedbackReply,
    FeedbackStats,
    FeedbackStatus,
)


def submit_feedback(*, session: Session, feedback_in: FeedbackCreate) -> Feedback:
    """Store a feedback entry. No identity is required.

    Raises:
        ValidationError: If the message is blank
    """
    if not feedback_in.message:
        raise ValidationError("Feedback message is required", field="message")

    db_obj = Feedback(
        name=feedback_in.name or ANONYMOUS_NAME,
        email=feedback_in.email or "",
        category=feedback_in.category or FeedbackCategory.GENERAL,
        message=feedback_in.message,
    )
    session.add(db_obj)
    session.commit()
    session.refresh(db_obj)
    return db_obj


def get_feedback(*, session: Session, feedback_id: uuid.UUID) -> Feedback:
    """Get a feedback entry by ID.

    Raises:
        ResourceNotFoundError: If no such entry exists
    """
    feedback = session.get(Feedback, feedback_id)
    if not feedback:
        raise ResourceNotFoundError("Feedback", str(feedback_id))
    return feedback


def list_feedback(*, session: Session) -> list[Feedback]:
    """All feedback entries, newest first."""
    statement = select(Feedback).order_by(col(Feedback.created_at).desc())
    return list(session.exec(statement).all())


def feedback_stats(*, session: Session) -> FeedbackStats:
    """Count entries overall, per category and per status.

    Every category and status is present in the result, with zero when no
    entry has it.
    """
    total = session.exec(select(func.count()).select_from(Feedback)).one()

    by_type = {category.value: 0 for category in FeedbackCategory}
    type_rows = session.exec(
        select(Feedback.category, func.count()).group_by(Feedback.category)
    ).all()
    for category, count in type_rows:
        by_type[FeedbackCategory(category).value] = count

    by_status = {status.value: 0 for status in FeedbackStatus}
    status_rows = session.exec(
        select(Feedback.status, func.count()).group_by(Feedback.status)
    ).all()
    for status, count in status_rows:
        by_status[FeedbackStatus(status).value] = count

    return FeedbackStats(total=total, by_type=by_type, by_status=by_status)


def update_feedback_status(
    *, session: Session, db_feedback: Feedback, status: FeedbackStatus
) -> Feedback:
    db_feedback.status = status
    session.add(db_feedback)
    session.commit()
    session.refresh(db_feedback)
    return db_feedback


def add_feedback_reply(
    *,
    session: Session,
    db_feedback: Feedback,
    admin_name: str,
    admin_email: str,
    message: str,
) -> Feedback:
    """Append an admin reply to a feedback entry."""
    reply = FeedbackReply(
        admin_name=admin_name, admin_email=admin_email, message=message
    )
    # Reassign so the JSON column is flagged dirty
    db_feedback.replies = [*db_feedback.replies, reply.model_dump(mode="json")]
    session.add(db_feedback)
    session.commit()
    session.refresh(db_feedback)
    return db_feedback
