"""Program tools."""

from .base import endpoint, integer, number, paging, param_names, post, string, tool

CATEGORY = "programs"

_PROGRAM_ID = integer("programID", "Program ID", required=True)
_COMMENT = string("comment", "Comment")

_PROGRAM_FIELDS = (
    string("begin", "Planned start date (YYYY-MM-DD)"),
    string("end", "Planned end date (YYYY-MM-DD)"),
    string("desc", "Program description"),
    number("budget", "Program budget"),
)


def _status_change(name: str, description: str, function: str, action: str):
    return post(
        name,
        description,
        endpoint("program", function),
        (_PROGRAM_ID, _COMMENT),
        body=["comment"],
        action=action,
        category=CATEGORY,
    )


TOOLS = [
    tool(
        "browse_programs",
        "Browse programs in ZenTao",
        endpoint("program", "browse"),
        (
            string("status", "Program status filter"),
            *paging(),
            integer("param", "Additional filter parameter"),
        ),
        action="browse programs",
        category=CATEGORY,
    ),
    tool(
        "get_program_kanban",
        "Get program kanban view",
        endpoint("program", "kanban"),
        (string("browseType", "Browse type"),),
        action="get program kanban",
        category=CATEGORY,
    ),
    tool(
        "get_program_products",
        "Get products for a program",
        endpoint("program", "product"),
        (_PROGRAM_ID, string("browseType", "Browse type"), *paging()),
        action="get program products",
        category=CATEGORY,
    ),
    post(
        "create_program",
        "Create a new program",
        endpoint("program", "create"),
        (
            integer("parentProgramID", "Parent program ID"),
            integer("charterID", "Charter ID"),
            string("extra", "Extra parameters"),
            string("name", "Program name", required=True),
            string("code", "Program code", required=True),
            *_PROGRAM_FIELDS,
        ),
        body=["name", "code", *param_names(_PROGRAM_FIELDS)],
        action="create program",
        category=CATEGORY,
    ),
    post(
        "edit_program",
        "Edit an existing program",
        endpoint("program", "edit"),
        (
            _PROGRAM_ID,
            string("name", "Program name"),
            string("code", "Program code"),
            integer("parentProgramID", "Parent program ID"),
            *_PROGRAM_FIELDS,
        ),
        body=["name", "code", *param_names(_PROGRAM_FIELDS)],
        action="edit program",
        category=CATEGORY,
    ),
    _status_change("close_program", "Close a program", "close", "close program"),
    _status_change("start_program", "Start a program", "start", "start program"),
    _status_change("activate_program", "Activate a program", "activate", "activate program"),
    _status_change("suspend_program", "Suspend a program", "suspend", "suspend program"),
    tool(
        "delete_program",
        "Delete a program",
        endpoint("program", "delete"),
        (_PROGRAM_ID, string("confirm", "Confirm deletion", enum=("yes", "no"))),
        action="delete program",
        category=CATEGORY,
    ),
    tool(
        "get_program_projects",
        "Get projects for a program",
        endpoint("program", "project"),
        (_PROGRAM_ID, string("browseType", "Browse type"), *paging()),
        action="get program projects",
        category=CATEGORY,
    ),
    tool(
        "get_program_stakeholders",
        "Get stakeholders for a program",
        endpoint("program", "stakeholder"),
        (_PROGRAM_ID, *paging()),
        action="get program stakeholders",
        category=CATEGORY,
    ),
    tool(
        "view_program",
        "View program details",
        endpoint("program", "view"),
        (_PROGRAM_ID,),
        action="view program",
        category=CATEGORY,
    ),
    post(
        "export_programs",
        "Export programs to file",
        endpoint("program", "export"),
        (string("status", "Program status filter"), string("orderBy", "Order by field")),
        action="export programs",
        category=CATEGORY,
    ),
    tool(
        "refresh_program_stats",
        "Refresh program statistics",
        endpoint("program", "refreshStats"),
        action="refresh program stats",
        category=CATEGORY,
    ),
]
