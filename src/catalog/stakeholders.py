"""Stakeholder and personnel tools."""

from .base import endpoint, integer, paging, param_names, post, string, string_array, tool

CATEGORY = "stakeholders"

STAKEHOLDER_TYPES = ("inside", "outside")
WHITELIST_OBJECT_TYPES = ("program", "project", "product", "sprint")
WHITELIST_SOURCES = ("project", "program", "programproject")

_STAKEHOLDER_ID = integer("stakeholderID", "Stakeholder ID", required=True)

_CONTACT_FIELDS = (
    string("name", "Stakeholder name"),
    string("company", "Company"),
    string("phone", "Phone"),
    string("email", "Email"),
    string("qq", "QQ"),
    string("weixin", "WeChat"),
)

_MEMBER_SCOPE = (
    integer("programID", "Program ID"),
    integer("projectID", "Project ID"),
)

_CREATE_FIELDS = (
    string("role", "Stakeholder role"),
    string("type", "Stakeholder type", enum=STAKEHOLDER_TYPES),
    string("from", "Source"),
    *_CONTACT_FIELDS,
)

_EDIT_FIELDS = (
    string("role", "Stakeholder role"),
    string("type", "Stakeholder type", enum=STAKEHOLDER_TYPES),
    *_CONTACT_FIELDS,
    string("key", "Key stakeholder flag"),
)

_COMMUNICATION_FIELDS = (
    string("mode", "Communication mode"),
    string("content", "Communication content"),
    string("date", "Communication date"),
    string("contactedBy", "Contacted by"),
    string("feedback", "Stakeholder feedback"),
)

STAKEHOLDER_TOOLS = [
    tool(
        "browse_stakeholders",
        "Browse stakeholders for a project",
        endpoint("stakeholder", "browse"),
        (
            integer("projectID", "Project ID"),
            string("browseType", "Browse type", enum=("all", "inside", "outside", "key")),
            *paging(),
        ),
        action="browse stakeholders",
        category=CATEGORY,
    ),
    post(
        "create_stakeholder",
        "Create a new stakeholder",
        endpoint("stakeholder", "create"),
        (
            integer("objectID", "Object ID (program/project)", required=True),
            integer("user", "User ID", required=True),
            *_CREATE_FIELDS,
        ),
        body=param_names(_CREATE_FIELDS),
        action="create stakeholder",
        category=CATEGORY,
    ),
    post(
        "batch_create_stakeholders",
        "Create multiple stakeholders at once",
        endpoint("stakeholder", "batchCreate"),
        (
            integer("projectID", "Project ID", required=True),
            string("dept", "Department"),
            integer("parentID", "Parent stakeholder ID"),
            string_array("users", "User IDs to add as stakeholders", required=True),
        ),
        body=["users"],
        action="batch create stakeholders",
        category=CATEGORY,
    ),
    post(
        "edit_stakeholder",
        "Edit an existing stakeholder",
        endpoint("stakeholder", "edit"),
        (_STAKEHOLDER_ID, *_EDIT_FIELDS),
        body=param_names(_EDIT_FIELDS),
        action="edit stakeholder",
        category=CATEGORY,
    ),
    tool(
        "get_stakeholder_members",
        "Get stakeholder members for program/project",
        endpoint("stakeholder", "ajaxGetMembers"),
        _MEMBER_SCOPE,
        action="get stakeholder members",
        category=CATEGORY,
    ),
    tool(
        "get_company_users",
        "Get company users for stakeholder management",
        endpoint("stakeholder", "ajaxGetCompanyUser"),
        _MEMBER_SCOPE,
        action="get company users",
        category=CATEGORY,
    ),
    tool(
        "get_outside_users",
        "Get outside users for stakeholder management",
        endpoint("stakeholder", "ajaxGetOutsideUser"),
        (integer("objectID", "Object ID", required=True),),
        action="get outside users",
        category=CATEGORY,
    ),
    tool(
        "delete_stakeholder",
        "Delete a stakeholder",
        endpoint("stakeholder", "delete"),
        (integer("userID", "User ID to remove as stakeholder", required=True),),
        action="delete stakeholder",
        category=CATEGORY,
    ),
    tool(
        "view_stakeholder",
        "View stakeholder details",
        endpoint("stakeholder", "view"),
        (_STAKEHOLDER_ID,),
        action="view stakeholder",
        category=CATEGORY,
    ),
    post(
        "communicate_stakeholder",
        "Record communication with stakeholder",
        endpoint("stakeholder", "communicate"),
        (_STAKEHOLDER_ID, *_COMMUNICATION_FIELDS),
        body=param_names(_COMMUNICATION_FIELDS),
        action="record stakeholder communication",
        category=CATEGORY,
    ),
    post(
        "stakeholder_expect",
        "Record stakeholder expectations",
        endpoint("stakeholder", "expect"),
        (
            _STAKEHOLDER_ID,
            string("expect", "Stakeholder expectations"),
            string("keyNote", "Key notes"),
        ),
        body=["expect", "keyNote"],
        action="record stakeholder expectations",
        category=CATEGORY,
    ),
    tool(
        "get_stakeholder_issues",
        "Get issues related to stakeholder",
        endpoint("stakeholder", "userIssue"),
        (_STAKEHOLDER_ID,),
        action="get stakeholder issues",
        category=CATEGORY,
    ),
]

PERSONNEL_TOOLS = [
    tool(
        "get_accessible_personnel",
        "Get accessible personnel list",
        endpoint("personnel", "accessible"),
        (
            integer("programID", "Program ID"),
            integer("deptID", "Department ID"),
            string("browseType", "Browse type"),
            integer("param", "Parameter value"),
            *paging()[1:],
        ),
        action="get accessible personnel",
        category=CATEGORY,
    ),
    tool(
        "get_personnel_invest",
        "Get personnel investment information",
        endpoint("personnel", "invest"),
        (integer("programID", "Program ID"),),
        action="get personnel investment",
        category=CATEGORY,
    ),
    tool(
        "get_personnel_whitelist",
        "Get personnel whitelist",
        endpoint("personnel", "whitelist"),
        (
            integer("objectID", "Object ID", required=True),
            string("module", "Module type", enum=("personnel", "program", "project", "product")),
            string("objectType", "Object type", enum=WHITELIST_OBJECT_TYPES),
            *paging(),
            integer("programID", "Program ID"),
            string("from", "Source", enum=WHITELIST_SOURCES),
        ),
        action="get personnel whitelist",
        category=CATEGORY,
    ),
    post(
        "add_personnel_whitelist",
        "Add personnel to whitelist",
        endpoint("personnel", "addWhitelist"),
        (
            integer("objectID", "Object ID", required=True),
            integer("deptID", "Department ID"),
            integer("copyID", "Copy from ID"),
            string("objectType", "Object type", enum=WHITELIST_OBJECT_TYPES),
            string("module", "Module"),
            integer("programID", "Program ID"),
            string("from", "Source", enum=WHITELIST_SOURCES),
            string_array("users", "User IDs to add"),
        ),
        body=["users"],
        action="add personnel to whitelist",
        category=CATEGORY,
    ),
    tool(
        "unbind_personnel_whitelist",
        "Remove personnel from whitelist",
        endpoint("personnel", "unbindWhitelist"),
        (integer("id", "Whitelist entry ID", required=True),),
        action="remove personnel from whitelist",
        category=CATEGORY,
    ),
]

TOOLS = [*STAKEHOLDER_TOOLS, *PERSONNEL_TOOLS]
