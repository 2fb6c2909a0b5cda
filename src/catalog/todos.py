"""Todo tools."""

from .base import endpoint, integer, param_names, post, string, string_array, tool

CATEGORY = "todos"

_TODO_ID = integer("todoID", "Todo ID", required=True)

_TODO_FIELDS = (
    string("name", "Todo name"),
    string("desc", "Todo description"),
    string("status", "Todo status", enum=("wait", "doing", "done")),
    integer("pri", "Priority (1-9)"),
    string("begin", "Begin time (HH:mm)"),
    string("end", "End time (HH:mm)"),
    integer("assignedTo", "Assigned to user ID"),
)


def _by_id(name: str, description: str, function: str, action: str):
    return tool(
        name, description, endpoint("todo", function), (_TODO_ID,), action=action, category=CATEGORY
    )


TOOLS = [
    post(
        "create_todo",
        "Create a new todo item",
        endpoint("todo", "create"),
        (
            string("date", "Todo date (YYYY-MM-DD)"),
            string("from", "Source of todo", enum=("todo", "feedback", "block")),
            *_TODO_FIELDS,
        ),
        body=param_names(_TODO_FIELDS),
        action="create todo",
        category=CATEGORY,
    ),
    post(
        "batch_create_todos",
        "Create multiple todo items at once",
        endpoint("todo", "batchCreate"),
        (
            string("date", "Todo date (YYYY-MM-DD)", required=True),
            string_array("names", "Array of todo names", required=True),
            string_array("descs", "Array of todo descriptions"),
        ),
        body=["names", "descs"],
        action="batch create todos",
        category=CATEGORY,
    ),
    post(
        "edit_todo",
        "Edit an existing todo item",
        endpoint("todo", "edit"),
        (_TODO_ID, *_TODO_FIELDS),
        body=param_names(_TODO_FIELDS),
        action="edit todo",
        category=CATEGORY,
    ),
    post(
        "batch_edit_todos",
        "Edit multiple todo items at once",
        endpoint("todo", "batchEdit"),
        (
            string("from", "Source filter"),
            string("type", "Type filter"),
            integer("userID", "User ID filter"),
            string("status", "Status filter"),
            string("newStatus", "New status to set"),
            integer("pri", "New priority"),
            integer("assignedTo", "New assigned user"),
        ),
        body=["newStatus", "pri", "assignedTo"],
        wire_names={"newStatus": "status"},
        action="batch edit todos",
        category=CATEGORY,
    ),
    _by_id("start_todo", "Start a todo item", "start", "start todo"),
    _by_id("activate_todo", "Activate a todo item", "activate", "activate todo"),
    _by_id("close_todo", "Close a todo item", "close", "close todo"),
    _by_id("finish_todo", "Mark a todo as finished", "finish", "finish todo"),
    _by_id(
        "get_todo_detail",
        "Get detailed information about a todo",
        "ajaxGetDetail",
        "get todo detail",
    ),
    post(
        "assign_todo",
        "Assign a todo item to a user",
        endpoint("todo", "assignTo"),
        (
            _TODO_ID,
            integer("assignedTo", "User ID to assign to", required=True),
            string("comment", "Comment"),
        ),
        body=["assignedTo", "comment"],
        action="assign todo",
        category=CATEGORY,
    ),
    tool(
        "view_todo",
        "View todo details",
        endpoint("todo", "view"),
        (_TODO_ID, string("from", "View context", enum=("my", "company"))),
        action="view todo",
        category=CATEGORY,
    ),
    tool(
        "delete_todo",
        "Delete a todo item",
        endpoint("todo", "delete"),
        (_TODO_ID, string("confirm", "Confirm deletion", enum=("yes", "no"))),
        action="delete todo",
        category=CATEGORY,
    ),
    tool(
        "batch_finish_todos",
        "Mark multiple todos as finished",
        endpoint("todo", "batchFinish"),
        action="batch finish todos",
        category=CATEGORY,
    ),
    tool(
        "batch_close_todos",
        "Close multiple todos",
        endpoint("todo", "batchClose"),
        action="batch close todos",
        category=CATEGORY,
    ),
    post(
        "import_todo_to_today",
        "Import a todo to today's list",
        endpoint("todo", "import2Today"),
        (string("todoID", "Todo ID", required=True),),
        action="import todo to today",
        category=CATEGORY,
    ),
    post(
        "export_todos",
        "Export todos to file",
        endpoint("todo", "export"),
        (integer("userID", "User ID to export todos for"), string("orderBy", "Order by field")),
        action="export todos",
        category=CATEGORY,
    ),
    tool(
        "get_program_id",
        "Get program ID for a todo object",
        endpoint("todo", "ajaxGetProgramID"),
        (
            integer("objectID", "Object ID", required=True),
            string("objectType", "Object type", required=True),
        ),
        action="get program ID",
        category=CATEGORY,
    ),
    tool(
        "get_execution_pairs",
        "Get execution pairs for a project",
        endpoint("todo", "ajaxGetExecutionPairs"),
        (integer("projectID", "Project ID", required=True),),
        action="get execution pairs",
        category=CATEGORY,
    ),
    tool(
        "get_product_pairs",
        "Get product pairs for a project",
        endpoint("todo", "ajaxGetProductPairs"),
        (integer("projectID", "Project ID", required=True),),
        action="get product pairs",
        category=CATEGORY,
    ),
    tool(
        "create_cycle_todo",
        "Create a recurring/cycle todo",
        endpoint("todo", "createCycle"),
        action="create cycle todo",
        category=CATEGORY,
    ),
]
