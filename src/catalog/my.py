"""Personal workspace tools for the signed-in user."""

from .base import endpoint, integer, paging, param_names, post, string, tool

CATEGORY = "my"

_PROFILE_FIELDS = (
    string("realname", "Real name"),
    string("email", "Email address"),
    string("mobile", "Mobile phone"),
    string("phone", "Phone number"),
    string("address", "Address"),
    string("zipcode", "Zip code"),
    string("skype", "Skype ID"),
    string("qq", "QQ number"),
    string("dingding", "DingTalk ID"),
    string("weixin", "WeChat ID"),
)


def _my(name: str, description: str, function: str, action: str, params=()):
    return tool(name, description, endpoint("my", function), params, action=action, category=CATEGORY)


def _work_list(name: str, noun: str, function: str, type_label: str, param_kind=integer):
    """Personal list of one object type: type, param and paging."""
    return _my(
        name,
        f"Get user's personal {noun}",
        function,
        f"get my {noun}",
        (
            string("type", f"{type_label} type"),
            param_kind("param", "Parameter value"),
            *paging(),
        ),
    )


def _contribution(name: str, description: str, function: str, action: str, noun: str):
    return _my(
        name,
        description,
        function,
        action,
        (
            string("mode", f"{noun} mode"),
            string("type", f"{noun} type"),
            integer("param", "Parameter value"),
            *paging(),
        ),
    )


TOOLS = [
    _my("get_my_dashboard", "Get user's personal dashboard in ZenTao", "index", "get my dashboard"),
    _my("get_my_score", "Get user's score/ranking information", "score", "get my score", paging()[1:]),
    _my("get_my_calendar", "Get user's calendar view", "calendar", "get my calendar"),
    _contribution("get_my_work", "Get user's work tracking information", "work", "get my work", "Work"),
    _contribution(
        "get_my_contribute",
        "Get user's contribution statistics",
        "contribute",
        "get my contributions",
        "Contribution",
    ),
    _my(
        "get_my_todos",
        "Get user's personal todos",
        "todo",
        "get my todos",
        (
            string("type", "Todo type"),
            integer("userID", "User ID"),
            string("status", "Todo status"),
            *paging(),
        ),
    ),
    _work_list("get_my_stories", "stories", "story", "Story"),
    _work_list("get_my_tasks", "tasks", "task", "Task"),
    _work_list("get_my_bugs", "bugs", "bug", "Bug", param_kind=string),
    _my(
        "get_my_projects",
        "Get user's personal projects",
        "project",
        "get my projects",
        (
            string(
                "status",
                "Project status",
                enum=("doing", "wait", "suspended", "closed", "openedbyme"),
            ),
            *paging(),
        ),
    ),
    _my(
        "get_my_executions",
        "Get user's personal executions",
        "execution",
        "get my executions",
        (string("type", "Execution type", enum=("undone", "done")), *paging()),
    ),
    post(
        "edit_my_profile",
        "Edit user's profile information",
        endpoint("my", "editProfile"),
        _PROFILE_FIELDS,
        body=param_names(_PROFILE_FIELDS),
        action="edit my profile",
        category=CATEGORY,
    ),
    post(
        "change_my_password",
        "Change user's password",
        endpoint("my", "changePassword"),
        (
            string("password", "New password", required=True),
            string("passwordConfirmation", "Password confirmation", required=True),
        ),
        body=["password", "passwordConfirmation"],
        action="change my password",
        category=CATEGORY,
    ),
    _my(
        "get_my_dynamic",
        "Get user's activity feed/dynamic",
        "dynamic",
        "get my dynamic",
        (
            string("type", "Dynamic type"),
            integer("recTotal", "Total records"),
            string("date", "Date filter"),
            string("direction", "Direction (next/prev)"),
        ),
    ),
    _my("get_my_team", "Get user's team information", "team", "get my team", paging()),
]
