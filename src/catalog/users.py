"""User, department and company tools."""

from .base import (
    endpoint,
    integer,
    limit_offset,
    paging,
    param_names,
    post,
    string,
    string_array,
    tool,
)

CATEGORY = "users"

_USER_FILTERS = (
    string("account", "Filter by account name"),
    string("realname", "Filter by real name"),
    string("email", "Filter by email"),
    string("status", "Filter by user status", enum=("active", "forbidden")),
    integer("dept", "Filter by department ID"),
    string("role", "Filter by role"),
    *limit_offset("users"),
)

_CREATE_USER = (
    string("account", "User account name", required=True),
    string("password", "User password", required=True),
    string("realname", "Real name"),
    string_array("visions", "Interface types (rnd|lite)"),
)

TOOLS = [
    tool(
        "get_users",
        "Get list of users in ZenTao",
        endpoint("user", "browse"),
        _USER_FILTERS,
        action="get users",
        category=CATEGORY,
    ),
    tool(
        "get_my_profile",
        "Get current user's profile information",
        endpoint("my", "profile"),
        action="get user profile",
        category=CATEGORY,
    ),
    tool(
        "get_user",
        "Get details of a specific user by ID",
        endpoint("user", "view"),
        (integer("id", "User ID", required=True),),
        action="get user",
        category=CATEGORY,
    ),
    post(
        "create_user",
        "Create a new user in ZenTao",
        endpoint("user", "create"),
        _CREATE_USER,
        body=param_names(_CREATE_USER),
        action="create user",
        category=CATEGORY,
    ),
    tool(
        "delete_user",
        "Delete a user from ZenTao",
        endpoint("user", "delete"),
        (integer("userID", "User ID to delete", required=True),),
        action="delete user",
        category=CATEGORY,
    ),
    tool(
        "admin_user_view",
        "View user details",
        endpoint("user", "view"),
        (integer("userID", "User ID", required=True),),
        action="view user",
        category=CATEGORY,
    ),
    tool(
        "admin_user_unlock",
        "Unlock a locked user account",
        endpoint("user", "unlock"),
        (integer("userID", "User ID", required=True),),
        action="unlock user",
        category=CATEGORY,
    ),
    tool(
        "admin_user_unbind",
        "Unbind a user from its external account",
        endpoint("user", "unbind"),
        (integer("userID", "User ID", required=True),),
        action="unbind user",
        category=CATEGORY,
    ),
    tool(
        "admin_user_todo",
        "Get todos of a user",
        endpoint("user", "todo"),
        (
            integer("userID", "User ID"),
            string(
                "type",
                "Todo type",
                enum=(
                    "all",
                    "before",
                    "future",
                    "thisWeek",
                    "thisMonth",
                    "thisYear",
                    "assignedToOther",
                    "cycle",
                ),
            ),
            string("status", "Todo status"),
            *paging(),
        ),
        action="get user todos",
        category=CATEGORY,
    ),
    tool(
        "admin_user_story",
        "Get stories of a user",
        endpoint("user", "story"),
        (
            integer("userID", "User ID"),
            string("storyType", "Story type"),
            string("type", "Type"),
            *paging(),
        ),
        action="get user stories",
        category=CATEGORY,
    ),
    tool(
        "admin_user_task",
        "Get tasks of a user",
        endpoint("user", "task"),
        (integer("userID", "User ID"), string("type", "Task type"), *paging()),
        action="get user tasks",
        category=CATEGORY,
    ),
    tool(
        "admin_user_bug",
        "Get bugs of a user",
        endpoint("user", "bug"),
        (integer("userID", "User ID"), string("type", "Bug type"), *paging()),
        action="get user bugs",
        category=CATEGORY,
    ),
    tool(
        "admin_user_dynamic",
        "Get activity log of a user",
        endpoint("user", "dynamic"),
        (
            integer("userID", "User ID"),
            string("period", "Time period"),
            integer("recTotal", "Total records"),
            integer("date", "Date"),
            string("direction", "Direction", enum=("next", "pre")),
        ),
        action="get user dynamic",
        category=CATEGORY,
    ),
    post(
        "admin_user_create",
        "Create a new user",
        endpoint("user", "create"),
        (integer("deptID", "Department ID"), string("type", "User type")),
        body=["deptID", "type"],
        action="create user",
        category=CATEGORY,
    ),
    tool(
        "admin_user_ajax_get_groups",
        "Get user groups for the given interface types",
        endpoint("user", "ajaxGetGroups"),
        (string("visions", "Interface types", enum=("rnd", "lite", "rnd,lite")),),
        action="get user groups",
        category=CATEGORY,
    ),
    tool(
        "dept_browse",
        "Browse departments",
        endpoint("dept", "browse"),
        (integer("deptID", "Department ID"),),
        action="browse departments",
        category=CATEGORY,
    ),
    tool(
        "dept_delete",
        "Delete a department",
        endpoint("dept", "delete"),
        (integer("deptID", "Department ID", required=True),),
        action="delete department",
        category=CATEGORY,
    ),
    tool(
        "dept_ajax_get_users",
        "Get users of a department",
        endpoint("dept", "ajaxGetUsers"),
        (
            integer("dept", "Department"),
            string("user", "User account"),
            string("key", "Key field", enum=("id", "account")),
        ),
        action="get department users",
        category=CATEGORY,
    ),
    tool(
        "company_browse",
        "Browse company users",
        endpoint("company", "browse"),
        (
            string("browseType", "Browse type"),
            string("param", "Parameter value"),
            string("type", "Company type"),
            *paging(),
        ),
        action="browse companies",
        category=CATEGORY,
    ),
    tool(
        "company_dynamic",
        "Get company activity log",
        endpoint("company", "dynamic"),
        (
            string("browseType", "Browse type"),
            string("param", "Parameter value"),
            integer("recTotal", "Total records"),
            string("date", "Date filter"),
            string("direction", "Direction", enum=("next", "pre")),
            integer("userID", "User ID"),
            string("productID", "Product ID"),
            string("projectID", "Project ID"),
            string("executionID", "Execution ID"),
        ),
        action="get company dynamic",
        category=CATEGORY,
    ),
]
