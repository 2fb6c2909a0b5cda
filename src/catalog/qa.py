"""QA tools: case libraries, test suites, test reports and test tasks."""

from .base import endpoint, integer, paging, post, string, tool

CATEGORY = "qa"

REPORT_OBJECT_TYPES = ("project", "execution", "product")

_LIB_ID = integer("libID", "Case library ID", required=True)
_CASE_ID = integer("caseID", "Test case ID", required=True)
_SUITE_ID = integer("suiteID", "Test suite ID", required=True)
_REPORT_ID = integer("reportID", "Test report ID", required=True)
_CASES_DATA = string("cases_data", "Test cases data as JSON array", required=True)


def _json_field(name: str, description: str):
    return string(name, description, required=True)


CASELIB_TOOLS = [
    tool(
        "get_caselib_index",
        "Get case library index",
        endpoint("caselib", "index"),
        action="get case library index",
        category=CATEGORY,
    ),
    post(
        "create_caselib",
        "Create a new case library",
        endpoint("caselib", "create"),
        (_json_field("lib_data", "Case library data as JSON string"),),
        body=["lib_data"],
        action="create case library",
        category=CATEGORY,
    ),
    post(
        "edit_caselib",
        "Edit an existing case library",
        endpoint("caselib", "edit"),
        (_LIB_ID, _json_field("lib_data", "Updated case library data as JSON string")),
        body=["lib_data"],
        action="edit case library",
        category=CATEGORY,
    ),
    tool(
        "delete_caselib",
        "Delete a case library",
        endpoint("caselib", "delete"),
        (_LIB_ID,),
        action="delete case library",
        category=CATEGORY,
    ),
    tool(
        "browse_caselib",
        "Browse case library with filtering and pagination",
        endpoint("caselib", "browse"),
        (
            _LIB_ID,
            string("browseType", "Browse type filter"),
            integer("param", "Additional filter parameter"),
            *paging(),
            string("from", "Source context"),
            integer("blockID", "Block ID"),
        ),
        action="browse case library",
        category=CATEGORY,
    ),
    tool(
        "view_caselib",
        "View case library details",
        endpoint("caselib", "view"),
        (_LIB_ID,),
        action="view case library",
        category=CATEGORY,
    ),
    post(
        "create_caselib_case",
        "Create a new test case in case library",
        endpoint("caselib", "createCase"),
        (
            _LIB_ID,
            integer("moduleID", "Module ID"),
            integer("param", "Additional parameter"),
            _json_field("case_data", "Test case data as JSON string"),
        ),
        body=["case_data"],
        action="create case library case",
        category=CATEGORY,
    ),
    post(
        "batch_create_caselib_cases",
        "Create multiple test cases in case library",
        endpoint("caselib", "batchCreateCase"),
        (_LIB_ID, integer("moduleID", "Module ID"), _CASES_DATA),
        body=["cases_data"],
        action="batch create case library cases",
        category=CATEGORY,
    ),
    post(
        "edit_caselib_case",
        "Edit a test case in case library",
        endpoint("caselib", "editCase"),
        (_CASE_ID, _json_field("case_data", "Updated test case data as JSON string")),
        body=["case_data"],
        action="edit case library case",
        category=CATEGORY,
    ),
    post(
        "batch_edit_caselib_cases",
        "Edit multiple test cases in case library",
        endpoint("caselib", "batchEditCase"),
        (
            _LIB_ID,
            string("branch", "Branch"),
            string("type", "Case type filter"),
            _json_field("cases_data", "Updated test cases data as JSON array"),
        ),
        body=["cases_data"],
        action="batch edit case library cases",
        category=CATEGORY,
    ),
    tool(
        "view_caselib_case",
        "View test case details in case library",
        endpoint("caselib", "viewCase"),
        (
            _CASE_ID,
            integer("version", "Case version"),
            string("from", "Source context"),
            integer("taskID", "Task ID"),
            string("stepsType", "Steps type"),
        ),
        action="view case library case",
        category=CATEGORY,
    ),
    post(
        "export_caselib_template",
        "Export import template for case library",
        endpoint("caselib", "exportTemplate"),
        (_LIB_ID,),
        action="export case library template",
        category=CATEGORY,
    ),
    post(
        "import_caselib_cases",
        "Import test cases to case library",
        endpoint("caselib", "import"),
        (_LIB_ID, _json_field("import_data", "Import data as JSON string")),
        body=["import_data"],
        action="import case library cases",
        category=CATEGORY,
    ),
    post(
        "show_caselib_import",
        "Show import preview for case library",
        endpoint("caselib", "showImport"),
        (
            _LIB_ID,
            integer("pageID", "Page ID"),
            integer("maxImport", "Maximum import count"),
            string("insert", "Insert mode (0=cover, 1=insert)"),
        ),
        action="show case library import",
        category=CATEGORY,
    ),
    post(
        "export_caselib_cases",
        "Export test cases from case library",
        endpoint("caselib", "exportCase"),
        (
            _LIB_ID,
            string("orderBy", "Sort order"),
            string("browseType", "Browse type filter"),
        ),
        action="export case library cases",
        category=CATEGORY,
    ),
]

TESTSUITE_TOOLS = [
    tool(
        "get_testsuite_index",
        "Get test suite index",
        endpoint("testsuite", "index"),
        action="get test suite index",
        category=CATEGORY,
    ),
    tool(
        "browse_testsuites",
        "Browse test suites with filtering and pagination",
        endpoint("testsuite", "browse"),
        (
            integer("productID", "Product ID", required=True),
            string("type", "Suite type filter"),
            *paging(),
        ),
        action="browse test suites",
        category=CATEGORY,
    ),
    post(
        "create_testsuite",
        "Create a new test suite",
        endpoint("testsuite", "create"),
        (
            integer("productID", "Product ID", required=True),
            _json_field("suite_data", "Test suite data as JSON string"),
        ),
        body=["suite_data"],
        action="create test suite",
        category=CATEGORY,
    ),
    tool(
        "view_testsuite",
        "View test suite details",
        endpoint("testsuite", "view"),
        (_SUITE_ID, *paging()),
        action="view test suite",
        category=CATEGORY,
    ),
    post(
        "edit_testsuite",
        "Edit an existing test suite",
        endpoint("testsuite", "edit"),
        (_SUITE_ID, _json_field("suite_data", "Updated test suite data as JSON string")),
        body=["suite_data"],
        action="edit test suite",
        category=CATEGORY,
    ),
    tool(
        "delete_testsuite",
        "Delete a test suite",
        endpoint("testsuite", "delete"),
        (_SUITE_ID,),
        action="delete test suite",
        category=CATEGORY,
    ),
    post(
        "link_case_to_testsuite",
        "Link test case to test suite",
        endpoint("testsuite", "linkCase"),
        (
            _SUITE_ID,
            string("browseType", "Browse type filter"),
            integer("param", "Additional filter parameter"),
            *paging()[1:],
            _CASES_DATA,
        ),
        body=["cases_data"],
        action="link case to test suite",
        category=CATEGORY,
    ),
    tool(
        "unlink_case_from_testsuite",
        "Unlink test case from test suite",
        endpoint("testsuite", "unlinkCase"),
        (_SUITE_ID, _CASE_ID),
        action="unlink case from test suite",
        category=CATEGORY,
    ),
    post(
        "batch_unlink_cases_from_testsuite",
        "Unlink multiple test cases from test suite",
        endpoint("testsuite", "batchUnlinkCases"),
        (_SUITE_ID, _CASES_DATA),
        body=["cases_data"],
        action="batch unlink cases from test suite",
        category=CATEGORY,
    ),
]

TESTREPORT_TOOLS = [
    tool(
        "browse_testreports",
        "Browse test reports with filtering and pagination",
        endpoint("testreport", "browse"),
        (
            integer("objectID", "Object ID (project, execution, or product)", required=True),
            string("objectType", "Object type", required=True, enum=REPORT_OBJECT_TYPES),
            integer("extra", "Extra filter parameter"),
            *paging(),
        ),
        action="browse test reports",
        category=CATEGORY,
    ),
    post(
        "create_testreport",
        "Create a new test report",
        endpoint("testreport", "create"),
        (
            integer("objectID", "Object ID", required=True),
            string("objectType", "Object type", required=True, enum=REPORT_OBJECT_TYPES),
            string("extra", "Extra parameters"),
            string("begin", "Begin date (YYYY-MM-DD)"),
            string("end", "End date (YYYY-MM-DD)"),
            _json_field("report_data", "Test report data as JSON string"),
        ),
        body=["report_data"],
        action="create test report",
        category=CATEGORY,
    ),
    post(
        "edit_testreport",
        "Edit an existing test report",
        endpoint("testreport", "edit"),
        (
            _REPORT_ID,
            string("begin", "Begin date (YYYY-MM-DD)"),
            string("end", "End date (YYYY-MM-DD)"),
            _json_field("report_data", "Updated test report data as JSON string"),
        ),
        body=["report_data"],
        action="edit test report",
        category=CATEGORY,
    ),
    tool(
        "view_testreport",
        "View test report details",
        endpoint("testreport", "view"),
        (_REPORT_ID, string("tab", "Tab to display"), *paging()[1:]),
        action="view test report",
        category=CATEGORY,
    ),
    tool(
        "delete_testreport",
        "Delete a test report",
        endpoint("testreport", "delete"),
        (_REPORT_ID,),
        action="delete test report",
        category=CATEGORY,
    ),
]

TOOLS = [
    tool(
        "get_qa_index",
        "Get QA module index",
        endpoint("qa", "index"),
        (
            string("locate", "Location context"),
            integer("productID", "Product ID"),
            integer("projectID", "Project ID"),
        ),
        action="get QA index",
        category=CATEGORY,
    ),
    post(
        "create_testtask",
        "Create a new test task in ZenTao",
        endpoint("testtask", "create"),
        (
            integer("project", "Project ID", required=True),
            string("name", "Test task name", required=True),
            string("begin", "Start date (YYYY-MM-DD)", required=True),
            string("end", "End date (YYYY-MM-DD)", required=True),
            string("owner", "Owner user account"),
            string("desc", "Test task description"),
        ),
        body=["name", "begin", "end", "owner", "desc"],
        action="create test task",
        category=CATEGORY,
    ),
    *CASELIB_TOOLS,
    *TESTSUITE_TOOLS,
    *TESTREPORT_TOOLS,
]
