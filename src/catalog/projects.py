"""Project and execution (sprint/iteration) tools."""

from .base import endpoint, integer, paging, param_names, post, string, string_array, tool

CATEGORY = "executions"

_EXECUTION_ID = integer("executionID", "Execution ID", required=True)

_EXECUTION_FIELDS = (
    string("name", "Execution name", required=True),
    string("code", "Execution code", required=True),
    string("begin", "Planned start date (YYYY-MM-DD)", required=True),
    string("end", "Planned end date (YYYY-MM-DD)", required=True),
    integer("days", "Available workdays"),
    string("lifetime", "Type (short|long|ops)", enum=("short", "long", "ops")),
    string("PO", "Product Owner"),
    string("PM", "Iteration Manager"),
    string("QD", "Quality Director"),
    string("RD", "Release Director"),
    string_array("teamMembers", "Team members"),
    string("desc", "Iteration description"),
)


def _execution_view(name: str, description: str, function: str, action: str, *params):
    return tool(
        name,
        description,
        endpoint("execution", function),
        (_EXECUTION_ID, *params),
        action=action,
        category=CATEGORY,
    )


TOOLS = [
    post(
        "create_execution",
        "Create a new execution (sprint/iteration) in ZenTao",
        endpoint("execution", "create"),
        (integer("project", "Parent project ID", required=True), *_EXECUTION_FIELDS),
        body=param_names(_EXECUTION_FIELDS),
        action="create execution",
        category=CATEGORY,
    ),
    _execution_view(
        "browse_execution", "Browse execution details", "browse", "browse execution"
    ),
    _execution_view(
        "get_execution_tasks",
        "Get tasks for an execution",
        "task",
        "get execution tasks",
        string("status", "Task status"),
        string("param", "Parameter"),
        *paging(),
        string("from", "Source"),
        string("blockID", "Block ID"),
    ),
    _execution_view(
        "get_execution_stories",
        "Get stories for an execution",
        "story",
        "get execution stories",
        string("storyType", "Story type", enum=("story", "requirement")),
        string("type", "View type", enum=("all", "byModule", "byProduct", "byBranch", "bySearch")),
        integer("param", "Parameter value"),
        *paging(),
    ),
    _execution_view(
        "get_execution_bugs",
        "Get bugs for an execution",
        "bug",
        "get execution bugs",
        integer("productID", "Product ID", required=True),
        string("branch", "Branch"),
        string("build", "Build"),
        string("type", "Bug type"),
        integer("param", "Parameter value"),
        *paging(),
    ),
    _execution_view(
        "get_execution_burn_chart",
        "Get burn-down chart for an execution",
        "burn",
        "get execution burn chart",
        string("type", "Chart type", enum=("noweekend", "withweekend")),
        string("interval", "Interval"),
        string("burnBy", "Burn by", enum=("left", "estimate", "storyPoint")),
    ),
    _execution_view(
        "get_execution_kanban",
        "Get kanban view for an execution",
        "kanban",
        "get execution kanban",
        string("browseType", "Browse type", enum=("all", "story", "bug", "task")),
        string("orderBy", "Order by field"),
        string(
            "groupBy",
            "Group by field",
            enum=(
                "default",
                "pri",
                "category",
                "module",
                "source",
                "assignedTo",
                "type",
                "story",
                "severity",
            ),
        ),
    ),
    _execution_view(
        "get_execution_team", "Get execution team members", "team", "get execution team"
    ),
    post(
        "manage_execution_members",
        "Manage execution team members",
        endpoint("execution", "manageMembers"),
        (
            _EXECUTION_ID,
            integer("team2Import", "Team to import"),
            string("dept", "Department"),
            string_array("members", "Members to add"),
        ),
        body=["members"],
        action="manage execution members",
        category=CATEGORY,
    ),
    _execution_view(
        "unlink_execution_member",
        "Remove a member from execution",
        "unlinkMember",
        "unlink execution member",
        integer("userID", "User ID to remove", required=True),
    ),
    _execution_view(
        "get_execution_dynamic",
        "Get execution dynamic/activity log",
        "dynamic",
        "get execution dynamic",
        string("type", "Activity type"),
        string("param", "Parameter"),
        integer("recTotal", "Total records"),
        string("date", "Date"),
        string("direction", "Direction", enum=("next", "pre")),
    ),
    tool(
        "browse_all_executions",
        "Browse all executions",
        endpoint("execution", "all"),
        (
            string("status", "Execution status"),
            integer("productID", "Product ID"),
            string("param", "Parameter"),
            *paging(),
        ),
        action="browse all executions",
        category=CATEGORY,
    ),
    post(
        "get_execution_cfd",
        "Get Cumulative Flow Diagram for an execution",
        endpoint("execution", "cfd"),
        (
            _EXECUTION_ID,
            string("type", "CFD type", enum=("story", "bug", "task")),
            string("withWeekend", "Include weekends"),
            string("begin", "Begin date"),
            string("end", "End date"),
        ),
        action="get execution CFD",
        category=CATEGORY,
    ),
    post(
        "link_story_to_execution",
        "Link a story to an execution",
        endpoint("execution", "linkStory"),
        (
            integer("objectID", "Execution ID", required=True),
            string("browseType", "Browse type"),
            integer("param", "Parameter value"),
            string("orderBy", "Order by field"),
            integer("recPerPage", "Records per page"),
            integer("pageID", "Page ID"),
            string("extra", "Extra parameters"),
            string("storyType", "Story type", enum=("story", "requirement")),
        ),
        action="link story to execution",
        category=CATEGORY,
    ),
    _execution_view(
        "unlink_story_from_execution",
        "Unlink a story from an execution",
        "unlinkStory",
        "unlink story from execution",
        integer("storyID", "Story ID", required=True),
        string("confirm", "Confirmation", enum=("yes", "no")),
        string("from", "Source"),
        integer("laneID", "Lane ID"),
        integer("columnID", "Column ID"),
    ),
    post(
        "batch_unlink_stories_from_execution",
        "Batch unlink stories from an execution",
        endpoint("execution", "batchUnlinkStory"),
        (_EXECUTION_ID,),
        action="batch unlink stories from execution",
        category=CATEGORY,
    ),
]
