"""Platform tools: API entries, DevOps spaces and data import/export."""

from .base import endpoint, integer, paging, param_names, post, string, tool

CATEGORY = "platform"

_ENTRY_ID = integer("id", "Entry ID", required=True)

_ENTRY_FIELDS = (
    string("key", "Entry key"),
    string("ip", "IP address"),
    string("desc", "Entry description"),
    string("version", "Version"),
)

_TRANSFER_MODULE_HINT = "(e.g., story, task, bug, product, project)"

ENTRY_TOOLS = [
    post(
        "create_entry",
        "Create a new entry in ZenTao",
        endpoint("entry", "create"),
        (
            string("name", "Entry name", required=True),
            string("code", "Entry code", required=True),
            *_ENTRY_FIELDS,
        ),
        body=["name", "code", *param_names(_ENTRY_FIELDS)],
        action="create entry",
        category=CATEGORY,
    ),
    post(
        "edit_entry",
        "Edit an existing entry in ZenTao",
        endpoint("entry", "edit"),
        (_ENTRY_ID, string("name", "Entry name"), string("code", "Entry code"), *_ENTRY_FIELDS),
        body=["name", "code", *param_names(_ENTRY_FIELDS)],
        action="edit entry",
        category=CATEGORY,
    ),
    tool(
        "delete_entry",
        "Delete an entry from ZenTao",
        endpoint("entry", "delete"),
        (integer("id", "Entry ID to delete", required=True),),
        action="delete entry",
        category=CATEGORY,
    ),
    tool(
        "browse_entries",
        "Browse entries in ZenTao",
        endpoint("entry", "browse"),
        paging(),
        action="browse entries",
        category=CATEGORY,
    ),
    tool(
        "get_entry_log",
        "Get log for an entry in ZenTao",
        endpoint("entry", "log"),
        (_ENTRY_ID, *paging()),
        action="get entry log",
        category=CATEGORY,
    ),
]

SPACE_TOOLS = [
    tool(
        "browse_spaces",
        "Browse spaces with filtering and pagination",
        endpoint("space", "browse"),
        (
            integer("spaceID", "Space ID"),
            string("browseType", "Browse type"),
            *paging(),
        ),
        action="browse spaces",
        category=CATEGORY,
    ),
    post(
        "create_application",
        "Create an application within a space",
        endpoint("space", "createApplication"),
        (
            integer("appID", "Application ID", required=True),
            integer("spaceID", "Space ID"),
            string("name", "Application name"),
            string("code", "Application code"),
        ),
        body=["name", "code"],
        action="create application",
        category=CATEGORY,
    ),
    tool(
        "get_store_app_info",
        "Get application store information",
        endpoint("space", "getStoreAppInfo"),
        (integer("appID", "Application ID", required=True),),
        action="get store app info",
        category=CATEGORY,
    ),
]

TRANSFER_TOOLS = [
    post(
        "export_data",
        "Export data from a ZenTao module",
        endpoint("transfer", "export"),
        (
            string("module", f"Module to export from {_TRANSFER_MODULE_HINT}", required=True),
            string("filters", "Export filters as JSON string"),
            string("fields", "Fields to export (comma-separated)"),
        ),
        action="export data",
        category=CATEGORY,
    ),
    post(
        "export_template",
        "Export template for data import",
        endpoint("transfer", "exportTemplate"),
        (
            string("module", f"Module to export template for {_TRANSFER_MODULE_HINT}", required=True),
            string("params", "Template parameters as JSON string"),
            string("format", "Export format (csv, xlsx)", enum=("csv", "xlsx")),
        ),
        action="export template",
        category=CATEGORY,
    ),
    post(
        "import_data",
        "Import data to a ZenTao module",
        endpoint("transfer", "import"),
        (
            string("module", f"Module to import to {_TRANSFER_MODULE_HINT}", required=True),
            string("locate", "Import location/target"),
            string("data", "Import data as JSON string", required=True),
            string("encoding", "Data encoding", enum=("utf-8", "gbk", "big5")),
        ),
        body=["data"],
        action="import data",
        category=CATEGORY,
    ),
    tool(
        "get_import_table_body",
        "Get table body data for import preview",
        endpoint("transfer", "ajaxGetTbody"),
        (
            string("module", "Module for import", required=True),
            integer("lastID", "Last processed ID"),
            integer("pagerID", "Pager ID for pagination"),
            integer("limit", "Number of records to fetch"),
        ),
        action="get import table body",
        category=CATEGORY,
    ),
    tool(
        "get_import_options",
        "Get options for import fields",
        endpoint("transfer", "ajaxGetOptions"),
        (
            string("module", "Module for import", required=True),
            string("field", "Field name", required=True),
            string("value", "Current field value"),
            string("index", "Field index"),
            string("search", "Search term for filtering options"),
        ),
        action="get import options",
        category=CATEGORY,
    ),
    post(
        "validate_import_data",
        "Validate import data before actual import",
        endpoint("transfer", "validate"),
        (
            string("module", "Module to validate for", required=True),
            string("data", "Data to validate as JSON string", required=True),
            string("rules", "Validation rules as JSON string"),
        ),
        body=["module", "data", "rules"],
        action="validate import data",
        category=CATEGORY,
    ),
]

TOOLS = [*ENTRY_TOOLS, *SPACE_TOOLS, *TRANSFER_TOOLS]
