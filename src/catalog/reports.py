"""Datatable, report and BI tools."""

from .base import endpoint, integer, param_names, post, string, tool

CATEGORY = "reports"

_VIEW = (
    string("module", "Module name"),
    string("method", "Method name"),
)
_EXTRA = string("extra", "Extra parameters")
_CONFIRM = string("confirm", "Confirmation string")
_SYSTEM = integer("system", "System flag")

_SAVE_FIELDS = (*_VIEW, _EXTRA)
_SAVE_GLOBAL = (*_VIEW, _EXTRA, _CONFIRM)

DATATABLE_TOOLS = [
    tool(
        "datatable_ajax_display",
        "Display datatable with specified configuration",
        endpoint("datatable", "ajaxDisplay"),
        (
            string("datatableID", "Datatable ID", required=True),
            string("moduleName", "Module name"),
            string("methodName", "Method name"),
            string("currentModule", "Current module"),
            string("currentMethod", "Current method"),
        ),
        action="display datatable",
        category=CATEGORY,
    ),
    post(
        "datatable_ajax_save",
        "Save datatable configuration",
        endpoint("datatable", "ajaxSave"),
        action="save datatable",
        category=CATEGORY,
    ),
    post(
        "datatable_ajax_save_fields",
        "Save datatable field configuration",
        endpoint("datatable", "ajaxSaveFields"),
        _SAVE_FIELDS,
        body=param_names(_SAVE_FIELDS),
        action="save datatable fields",
        category=CATEGORY,
    ),
    post(
        "datatable_ajax_old_save",
        "Save datatable using old format",
        endpoint("datatable", "ajaxOldSave"),
        action="save datatable (old)",
        category=CATEGORY,
    ),
    tool(
        "datatable_ajax_custom",
        "Perform custom datatable operation",
        endpoint("datatable", "ajaxCustom"),
        (*_VIEW, _EXTRA),
        action="perform custom datatable operation",
        category=CATEGORY,
    ),
    tool(
        "datatable_ajax_old_custom",
        "Perform old custom datatable operation",
        endpoint("datatable", "ajaxOldCustom"),
        (*_VIEW, _EXTRA),
        action="perform old custom datatable operation",
        category=CATEGORY,
    ),
    tool(
        "datatable_ajax_reset",
        "Reset datatable configuration",
        endpoint("datatable", "ajaxReset"),
        (*_VIEW, _SYSTEM, _CONFIRM, _EXTRA),
        action="reset datatable",
        category=CATEGORY,
    ),
    tool(
        "datatable_ajax_old_reset",
        "Reset datatable using old format",
        endpoint("datatable", "ajaxOldReset"),
        (*_VIEW, _SYSTEM, _CONFIRM),
        action="reset datatable (old)",
        category=CATEGORY,
    ),
    post(
        "datatable_ajax_save_global",
        "Save global datatable settings",
        endpoint("datatable", "ajaxSaveGlobal"),
        _SAVE_GLOBAL,
        body=param_names(_SAVE_GLOBAL),
        action="save global datatable settings",
        category=CATEGORY,
    ),
]

REPORT_TOOLS = [
    tool(
        "report_index",
        "Get report index",
        endpoint("report", "index"),
        action="get report index",
        category=CATEGORY,
    ),
    tool(
        "report_remind",
        "Get report reminders",
        endpoint("report", "remind"),
        action="get report reminders",
        category=CATEGORY,
    ),
    tool(
        "report_annual_data",
        "Get annual report data",
        endpoint("report", "annualData"),
        (
            string("year", "Year (e.g., 2026)"),
            string("dept", "Department"),
            string("account", "Account name"),
        ),
        action="get annual report data",
        category=CATEGORY,
    ),
]


def _bi(name: str, description: str, function: str, action: str, params=()):
    return tool(name, description, endpoint("bi", function), params, action=action, category=CATEGORY)


BI_TOOLS = [
    _bi("bi_sync_parquet_file", "Sync Parquet file", "syncParquetFile", "sync Parquet file"),
    _bi("bi_init_parquet", "Initialize Parquet", "initParquet", "initialize Parquet"),
    _bi("bi_install_duckdb", "Install DuckDB", "ajaxInstallDuckdb", "install DuckDB"),
    _bi("bi_check_duckdb", "Check DuckDB", "ajaxCheckDuckdb", "check DuckDB"),
    _bi(
        "bi_get_scope_options",
        "Get BI scope options",
        "ajaxGetScopeOptions",
        "get scope options",
        (string("type", "Type filter"),),
    ),
    _bi(
        "bi_get_table_fields_menu",
        "Get BI table fields menu",
        "ajaxGetTableFieldsMenu",
        "get table fields menu",
    ),
]

TOOLS = [*DATATABLE_TOOLS, *REPORT_TOOLS, *BI_TOOLS]
