"""Feedback and ticket tools."""

from .base import endpoint, integer, param_names, post, string

_FEEDBACK_FIELDS = (
    integer("product", "Product ID", required=True),
    string("title", "Feedback title", required=True),
    integer("module", "Module ID"),
    string("type", "Type (story|task|bug|todo|advice|issue|risk|opportunity)"),
    string("desc", "Description"),
    integer("public", "Public (0|1)"),
    integer("notify", "Notify (0|1)"),
    string("notifyEmail", "Notify email"),
    string("feedbackBy", "Feedback by user account"),
)

_ASSIGN_FIELDS = (
    string("assignedTo", "Assign to user account"),
    string("comment", "Comment"),
    string("mailto", "CC to user accounts (comma-separated)"),
)

_CLOSE_FIELDS = (
    string("closedReason", "Close reason", enum=("commented", "repeat", "refuse")),
    string("comment", "Comment"),
)

_TICKET_FIELDS = (
    integer("product", "Product ID", required=True),
    integer("module", "Module ID", required=True),
    string("title", "Ticket name", required=True),
    string("type", "Ticket type", enum=("code", "data", "stuck", "security", "affair")),
    string("desc", "Ticket description"),
)

_FEEDBACK_ID = integer("id", "Feedback ID", required=True)

TOOLS = [
    post(
        "create_feedback",
        "Create a new feedback in ZenTao",
        endpoint("feedback", "create"),
        _FEEDBACK_FIELDS,
        body=param_names(_FEEDBACK_FIELDS),
        action="create feedback",
        category="feedback",
    ),
    post(
        "assign_feedback",
        "Assign a feedback to a user in ZenTao",
        endpoint("feedback", "assign"),
        (_FEEDBACK_ID, *_ASSIGN_FIELDS),
        body=param_names(_ASSIGN_FIELDS),
        action="assign feedback",
        category="feedback",
    ),
    post(
        "close_feedback",
        "Close a feedback in ZenTao",
        endpoint("feedback", "close"),
        (_FEEDBACK_ID, *_CLOSE_FIELDS),
        body=param_names(_CLOSE_FIELDS),
        action="close feedback",
        category="feedback",
    ),
    post(
        "create_ticket",
        "Create a new ticket in ZenTao",
        endpoint("ticket", "create"),
        _TICKET_FIELDS,
        body=param_names(_TICKET_FIELDS),
        action="create ticket",
        category="tickets",
    ),
]
