from typing import Annotated, Any
import uuid

from fastapi import APIRouter, Depends, Path, status

from artha.auth import AdminIdentity, SessionDep, find_user_by_id
from artha.core.logging import get_logger
from artha.feedback import (
    Feedback,
    FeedbackCreate,
    FeedbackList,
    FeedbackPublic,
    FeedbackReplyCreate,
    FeedbackStats,
    FeedbackStatusUpdate,
    FeedbackSubmitted,
    add_feedback_reply,
    feedback_stats,
    get_feedback,
    list_feedback,
    submit_feedback,
    update_feedback_status,
)

router = APIRouter(prefix="/feedback", tags=["feedback"])
logger = get_logger(__name__)


def get_feedback_by_path(
    session: SessionDep,
    _admin: AdminIdentity,
    feedback_id: Annotated[uuid.UUID, Path(description="Feedback UUID")],
) -> Feedback:
    """Load a feedback entry for an admin-only route.

    Raises:
        ResourceNotFoundError: 404 if the entry does not exist
    """
    return get_feedback(session=session, feedback_id=feedback_id)


AdminFeedback = Annotated[Feedback, Depends(get_feedback_by_path)]


@router.post(
    "", response_model=FeedbackSubmitted, status_code=status.HTTP_201_CREATED
)
def create_feedback(session: SessionDep, feedback_in: FeedbackCreate) -> Any:
    """Submit feedback. Anyone may submit; name and type are optional."""
    feedback = submit_feedback(session=session, feedback_in=feedback_in)
    logger.info(
        "feedback_submitted",
        feedback_id=str(feedback.id),
        category=feedback.category.value,
    )
    return FeedbackSubmitted(
        message="Thank you for your feedback!", feedback_id=feedback.id
    )


@router.get("", response_model=FeedbackList)
def read_feedback(session: SessionDep, _admin: AdminIdentity) -> Any:
    """List all feedback, newest first. Admin only."""
    entries = list_feedback(session=session)
    return FeedbackList(
        feedback=[FeedbackPublic.model_validate(entry) for entry in entries]
    )


@router.get("/stats", response_model=FeedbackStats)
def read_feedback_stats(session: SessionDep, _admin: AdminIdentity) -> Any:
    """Totals per category and per status. Admin only."""
    return feedback_stats(session=session)


@router.patch("/{feedback_id}/status", response_model=FeedbackPublic)
def change_feedback_status(
    session: SessionDep,
    admin: AdminIdentity,
    feedback: AdminFeedback,
    status_in: FeedbackStatusUpdate,
) -> Any:
    """Move a feedback entry through its review workflow. Admin only."""
    previous = feedback.status
    feedback = update_feedback_status(
        session=session, db_feedback=feedback, status=status_in.status
    )
    logger.info(
        "feedback_status_changed",
        feedback_id=str(feedback.id),
        previous_status=previous.value,
        status=feedback.status.value,
        admin_id=str(admin.user_id),
    )
    return FeedbackPublic.model_validate(feedback)


@router.post(
    "/{feedback_id}/replies",
    response_model=FeedbackPublic,
    status_code=status.HTTP_201_CREATED,
)
def reply_to_feedback(
    session: SessionDep,
    admin: AdminIdentity,
    feedback: AdminFeedback,
    reply_in: FeedbackReplyCreate,
) -> Any:
    """Attach an admin reply to a feedback entry. Admin only."""
    responder = find_user_by_id(session=session, user_id=admin.user_id)
    feedback = add_feedback_reply(
        session=session,
        db_feedback=feedback,
        admin_name=responder.name,
        admin_email=responder.email,
        message=reply_in.message,
    )
    logger.info(
        "feedback_reply_added",
        feedback_id=str(feedback.id),
        admin_id=str(admin.user_id),
    )
    return FeedbackPublic.model_validate(feedback)
