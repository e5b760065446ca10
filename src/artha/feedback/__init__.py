from artha.feedback.crud import (
    add_feedback_reply,
    feedback_stats,
    get_feedback,
    list_feedback,
    submit_feedback,
    update_feedback_status,
)
from artha.feedback.models import (
    ANONYMOUS_NAME,
    Feedback,
    FeedbackCategory,
    FeedbackCreate,
    FeedbackList,
    FeedbackPublic,
    FeedbackReply,
    FeedbackReplyCreate,
    FeedbackStats,
    FeedbackStatus,
    FeedbackStatusUpdate,
    FeedbackSubmitted,
)

__all__ = [
    "ANONYMOUS_NAME",
    "Feedback",
    "FeedbackCategory",
    "FeedbackCreate",
    "FeedbackList",
    "FeedbackPublic",
    "FeedbackReply",
    "FeedbackReplyCreate",
    "FeedbackStats",
    "FeedbackStatus",
    "FeedbackStatusUpdate",
    "FeedbackSubmitted",
    "add_feedback_reply",
    "feedback_stats",
    "get_feedback",
    "list_feedback",
    "submit_feedback",
    "update_feedback_status",
]
