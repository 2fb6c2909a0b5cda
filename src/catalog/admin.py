"""Company, department, group and user administration tools."""

from .base import endpoint, integer, paging, param_names, post, string, tool

CATEGORY = "admin"

_USER_ID = integer("userID", "User ID")
_GROUP_ID = integer("groupID", "Group ID")
_DEPT_ID = integer("deptID", "Department ID")
_REFERER = string("referer", "Referer URL")

_PRIV_FIELDS = (
    string("type", "Type: byPackage|byGroup|byModule", enum=("byPackage", "byGroup", "byModule")),
    integer("param", "Parameter"),
    string("nav", "Navigation"),
    string("version", "Version"),
)
_USER_BATCH_FIELDS = (_DEPT_ID, string("type", "User type"))
_TEMPLATE_FIELDS = (string("editor", "Editor type"), string("type", "Template type"))


def _get(name: str, description: str, module: str, function: str, action: str, params=()):
    return tool(name, description, endpoint(module, function), params, action=action, category=CATEGORY)


def _post(name: str, description: str, module: str, function: str, action: str, params=(), body=()):
    return post(
        name,
        description,
        endpoint(module, function),
        params,
        body=body,
        action=action,
        category=CATEGORY,
    )


def _user_list(name: str, description: str, function: str, action: str, type_label: str = ""):
    """Per-user object list: userID, an optional type filter and paging."""
    params = [_USER_ID]
    if type_label:
        params.append(string("type", type_label))
    params.extend(paging())
    return _get(name, description, "user", function, action, params)


COMPANY_TOOLS = [
    _get("company_index", "Get company index", "company", "index", "get company index"),
    _post("company_edit", "Edit company", "company", "edit", "edit company"),
    _get("company_view", "View company", "company", "view", "view company"),
    _get(
        "company_ajax_get_outside",
        "Get outside companies",
        "company",
        "ajaxGetOutsideCompany",
        "get outside companies",
    ),
]

DEPT_TOOLS = [
    _post("dept_update_order", "Update department order", "dept", "updateOrder", "update department order"),
    _post("dept_manage_child", "Manage child departments", "dept", "manageChild", "manage child departments"),
    _post("dept_edit", "Edit department", "dept", "edit", "edit department", (_DEPT_ID,)),
]

GROUP_TOOLS = [
    _get("group_browse", "Browse groups", "group", "browse", "browse groups"),
    _post("group_create", "Create a new group", "group", "create", "create group"),
    _post("group_edit", "Edit a group", "group", "edit", "edit group", (_GROUP_ID,)),
    _post("group_copy", "Copy a group", "group", "copy", "copy group", (_GROUP_ID,)),
    _get("group_manage_view", "Manage group view", "group", "manageView", "manage group view", (_GROUP_ID,)),
    _post(
        "group_manage_priv",
        "Manage group privileges",
        "group",
        "managePriv",
        "manage group privileges",
        _PRIV_FIELDS,
        body=param_names(_PRIV_FIELDS),
    ),
    _post(
        "group_manage_member",
        "Manage group members",
        "group",
        "manageMember",
        "manage group members",
        (_GROUP_ID, _DEPT_ID),
    ),
    _post(
        "group_manage_project_admin",
        "Manage group project admins",
        "group",
        "manageProjectAdmin",
        "manage group project admins",
        (_GROUP_ID, _DEPT_ID),
    ),
    _get(
        "group_delete",
        "Delete a group",
        "group",
        "delete",
        "delete group",
        (integer("groupID", "Group ID", required=True),),
    ),
    _get(
        "group_ajax_get_priv_by_parents",
        "Get group privileges by parent",
        "group",
        "ajaxGetPrivByParents",
        "get privileges by parents",
        (
            string("selectedSubset", "Selected subset"),
            string("selectedPackages", "Selected packages"),
        ),
    ),
    _post(
        "group_ajax_get_related_privs",
        "Get related group privileges",
        "group",
        "ajaxGetRelatedPrivs",
        "get related privileges",
    ),
]

USER_TOOLS = [
    _user_list("admin_user_testtask", "Get user test tasks", "testtask", "get user test tasks"),
    _user_list(
        "admin_user_testcase", "Get user test cases", "testcase", "get user test cases", "Test case type"
    ),
    _user_list("admin_user_execution", "Get user executions", "execution", "get user executions"),
    _user_list("admin_user_issue", "Get user issues", "issue", "get user issues", "Issue type"),
    _user_list("admin_user_risk", "Get user risks", "risk", "get user risks", "Risk type"),
    _get("admin_user_profile", "Get user profile", "user", "profile", "get user profile", (_USER_ID,)),
    _post(
        "admin_user_batch_create",
        "Batch create users",
        "user",
        "batchCreate",
        "batch create users",
        _USER_BATCH_FIELDS,
        body=param_names(_USER_BATCH_FIELDS),
    ),
    _post("admin_user_edit", "Edit user", "user", "edit", "edit user", (_USER_ID,)),
    _post(
        "admin_user_batch_edit",
        "Batch edit users",
        "user",
        "batchEdit",
        "batch edit users",
        _USER_BATCH_FIELDS,
        body=param_names(_USER_BATCH_FIELDS),
    ),
    _get(
        "admin_user_delete",
        "Delete user",
        "user",
        "delete",
        "delete user",
        (integer("userID", "User ID", required=True),),
    ),
    _get("admin_user_login", "User login", "user", "login", "log in user", (_REFERER,)),
    _get(
        "admin_user_deny",
        "Deny user access",
        "user",
        "deny",
        "deny user access",
        (string("module", "Module name"), string("method", "Method name"), _REFERER),
    ),
    _get("admin_user_logout", "User logout", "user", "logout", "log out user", (_REFERER,)),
    _post("admin_user_reset", "Reset user", "user", "reset", "reset user"),
    _post(
        "admin_user_forget_password",
        "Forget user password",
        "user",
        "forgetPassword",
        "start password recovery",
    ),
    _post(
        "admin_user_reset_password",
        "Reset user password",
        "user",
        "resetPassword",
        "reset user password",
        (string("code", "Reset code"),),
        body=["code"],
    ),
    _post(
        "admin_user_crop_avatar",
        "Crop user avatar",
        "user",
        "cropAvatar",
        "crop user avatar",
        (integer("imageID", "Image ID", required=True),),
    ),
    _get(
        "admin_user_ajax_get_old_contact_users",
        "Get old contact users",
        "user",
        "ajaxGetOldContactUsers",
        "get old contact users",
        (
            integer("contactListID", "Contact list ID"),
            string("dropdownName", "Dropdown name: mailto|whitelist", enum=("mailto", "whitelist")),
        ),
    ),
    _get(
        "admin_user_ajax_get_contact_users",
        "Get contact users",
        "user",
        "ajaxGetContactUsers",
        "get contact users",
        (integer("contactListID", "Contact list ID"),),
    ),
    _get(
        "admin_user_ajax_get_contact_list",
        "Get contact list",
        "user",
        "ajaxGetContactList",
        "get contact list",
    ),
    _get(
        "admin_user_ajax_get_old_contact_list",
        "Get old contact list",
        "user",
        "ajaxGetOldContactList",
        "get old contact list",
        (string("dropdownName", "Dropdown name"),),
    ),
    _get(
        "admin_user_ajax_get_items",
        "Get user items",
        "user",
        "ajaxGetItems",
        "get user items",
        (string("params", "Parameters"),),
    ),
    _get(
        "admin_user_ajax_get_templates",
        "Get user templates",
        "user",
        "ajaxGetTemplates",
        "get user templates",
        _TEMPLATE_FIELDS,
    ),
    _post(
        "admin_user_ajax_save_template",
        "Save user template",
        "user",
        "ajaxSaveTemplate",
        "save user template",
        _TEMPLATE_FIELDS,
        body=param_names(_TEMPLATE_FIELDS),
    ),
    _get(
        "admin_user_ajax_delete_template",
        "Delete user template",
        "user",
        "ajaxDeleteTemplate",
        "delete user template",
        (integer("templateID", "Template ID", required=True),),
    ),
    _get("admin_user_ajax_get_more", "Get more user data", "user", "ajaxGetMore", "get more user data"),
    _get(
        "admin_user_refresh_random",
        "Refresh random user data",
        "user",
        "refreshRandom",
        "refresh random user data",
    ),
    _get(
        "admin_user_ajax_print_templates",
        "Get print templates",
        "user",
        "ajaxPrintTemplates",
        "get print templates",
        (string("type", "Template type"), string("link", "Link")),
    ),
    _post(
        "admin_user_ajax_save_old_template",
        "Save old template",
        "user",
        "ajaxSaveOldTemplate",
        "save old template",
        (string("type", "Template type"),),
        body=["type"],
    ),
]

TOOLS = [*COMPANY_TOOLS, *DEPT_TOOLS, *GROUP_TOOLS, *USER_TOOLS]
