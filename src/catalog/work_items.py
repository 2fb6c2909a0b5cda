"""Story, task and bug tools."""

from .base import endpoint, integer, limit_offset, number, param_names, post, string, string_array, tool

_TASK_TYPES = ("design", "devel", "request", "test", "study", "discuss", "ui", "affair", "misc")
_BUG_TYPES = (
    "codeerror",
    "config",
    "install",
    "security",
    "performance",
    "standard",
    "automation",
    "designdefect",
    "others",
)

_STORY_FIELDS = (
    string("title", "Story title", required=True),
    integer("product", "Product ID", required=True),
    integer("pri", "Priority (1-9)", required=True),
    string("category", "Story category", required=True),
    string("spec", "Story description"),
    string("verify", "Acceptance criteria"),
    string("source", "Source"),
    string("sourceNote", "Source note"),
    number("estimate", "Estimated hours"),
    string("keywords", "Keywords"),
)

_STORY_CHANGE_FIELDS = (
    string("title", "Story title"),
    string("spec", "Story description"),
    string("verify", "Acceptance criteria"),
)

_TASK_FIELDS = (
    string("name", "Task name", required=True),
    string("type", "Task type", required=True, enum=_TASK_TYPES),
    string_array("assignedTo", "Assigned to user accounts", required=True),
    string("estStarted", "Estimated start date (YYYY-MM-DD)", required=True),
    string("deadline", "Estimated end date (YYYY-MM-DD)", required=True),
    integer("module", "Module ID"),
    integer("story", "Associated story ID"),
    integer("fromBug", "From bug ID"),
    integer("pri", "Priority (1-9)"),
    number("estimate", "Estimated hours"),
)

_BUG_FIELDS = (
    string("title", "Bug title", required=True),
    integer("severity", "Severity (1-4)", required=True),
    integer("pri", "Priority (1-9)", required=True),
    string("type", "Bug type", required=True, enum=_BUG_TYPES),
    integer("branch", "Branch ID"),
    integer("module", "Module ID"),
    integer("execution", "Execution ID"),
    string("keywords", "Keywords"),
    string("os", "Operating system"),
    string("browser", "Browser"),
    string("steps", "Reproduction steps"),
    integer("task", "Related task ID"),
    integer("story", "Related story ID"),
    string("deadline", "Deadline (YYYY-MM-DD)"),
    string_array("openedBuild", "Affected builds"),
)

TOOLS = [
    post(
        "create_story",
        "Create a new user story in ZenTao",
        endpoint("story", "create"),
        _STORY_FIELDS,
        body=param_names(_STORY_FIELDS),
        action="create story",
        category="stories",
    ),
    post(
        "change_story",
        "Change story content",
        endpoint("story", "change"),
        (integer("id", "Story ID", required=True), *_STORY_CHANGE_FIELDS),
        body=param_names(_STORY_CHANGE_FIELDS),
        action="change story",
        category="stories",
    ),
    tool(
        "get_stories",
        "Get list of user stories in ZenTao",
        endpoint("story", "browse"),
        (
            integer("product", "Filter by product ID"),
            integer("project", "Filter by project ID"),
            integer("execution", "Filter by execution ID"),
            string(
                "status", "Filter by story status", enum=("draft", "active", "changed", "closed")
            ),
            string(
                "stage",
                "Filter by story stage",
                enum=(
                    "wait",
                    "planned",
                    "projected",
                    "developing",
                    "developed",
                    "testing",
                    "tested",
                    "verified",
                    "released",
                    "closed",
                ),
            ),
            integer("pri", "Filter by priority (1-9)"),
            *limit_offset("stories"),
        ),
        action="get stories",
        category="stories",
    ),
    tool(
        "get_story",
        "Get details of a specific story by ID",
        endpoint("story", "view"),
        (integer("id", "Story ID", required=True),),
        action="get story",
        category="stories",
    ),
    post(
        "create_task",
        "Create a new task in ZenTao",
        endpoint("task", "create"),
        (integer("execution", "Execution ID", required=True), *_TASK_FIELDS),
        body=param_names(_TASK_FIELDS),
        action="create task",
        category="tasks",
    ),
    tool(
        "get_tasks",
        "Get list of tasks in ZenTao",
        endpoint("task", "browse"),
        (
            integer("execution", "Filter by execution ID"),
            integer("story", "Filter by story ID"),
            string(
                "status",
                "Filter by task status",
                enum=("wait", "doing", "done", "pause", "cancel", "closed"),
            ),
            string("type", "Filter by task type", enum=_TASK_TYPES),
            integer("assignedTo", "Filter by assigned user ID"),
            integer("openedBy", "Filter by opened by user ID"),
            integer("pri", "Filter by priority (1-9)"),
            *limit_offset("tasks"),
        ),
        action="get tasks",
        category="tasks",
    ),
    tool(
        "get_task",
        "Get details of a specific task by ID",
        endpoint("task", "view"),
        (integer("id", "Task ID", required=True),),
        action="get task",
        category="tasks",
    ),
    post(
        "create_bug",
        "Create a new bug in ZenTao",
        endpoint("bug", "create"),
        (integer("product", "Product ID", required=True), *_BUG_FIELDS),
        body=param_names(_BUG_FIELDS),
        action="create bug",
        category="bugs",
    ),
    tool(
        "get_bugs",
        "Get list of bugs in ZenTao",
        endpoint("bug", "browse"),
        (
            integer("product", "Filter by product ID"),
            integer("project", "Filter by project ID"),
            integer("execution", "Filter by execution ID"),
            string("status", "Filter by bug status", enum=("active", "resolved", "closed")),
            integer("assignedTo", "Filter by assigned user ID"),
            integer("openedBy", "Filter by opened by user ID"),
            *limit_offset("bugs"),
        ),
        action="get bugs",
        category="bugs",
    ),
    tool(
        "get_bug",
        "Get details of a specific bug by ID",
        endpoint("bug", "view"),
        (integer("id", "Bug ID", required=True),),
        action="get bug",
        category="bugs",
    ),
]
