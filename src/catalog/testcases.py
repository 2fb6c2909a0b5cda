"""Test case tools."""

from .base import endpoint, integer, paging, param_names, post, string, string_array, tool

CATEGORY = "testcases"

CASE_TYPES = ("feature", "performance", "config", "install", "security", "interface", "unit", "other")

_CASE_ID = integer("caseID", "Test case ID", required=True)
_PRODUCT_ID = integer("productID", "Product ID", required=True)
_SCENE_ID = integer("sceneID", "Scene ID", required=True)
_CASES_DATA = string("cases_data", "Test cases data as JSON array", required=True)

_CASE_FIELDS = (
    integer("branch", "Branch ID"),
    integer("module", "Module ID"),
    integer("story", "Story ID"),
    string(
        "stage",
        "Stage",
        enum=("unittest", "feature", "intergrate", "system", "smoke", "bvt"),
    ),
    string("precondition", "Precondition"),
    integer("pri", "Priority (1-9)"),
    string("keywords", "Keywords"),
)

_LINK_FILTERS = (
    string("browseType", "Browse type filter"),
    integer("param", "Additional filter parameter"),
)

TOOLS = [
    tool(
        "browse_testcases",
        "Browse test cases with filtering and pagination",
        endpoint("testcase", "browse"),
        (
            integer("productID", "Product ID", required=True),
            string("branch", "Branch"),
            string("browseType", "Browse type filter"),
            integer("param", "Additional filter parameter"),
            string("caseType", "Case type filter"),
            *paging(),
            integer("projectID", "Project ID"),
            string("from", "Source context"),
            integer("blockID", "Block ID"),
        ),
        action="browse test cases",
        category=CATEGORY,
    ),
    tool(
        "view_testcase",
        "View test case details",
        endpoint("testcase", "view"),
        (
            _CASE_ID,
            integer("version", "Case version"),
            string("from", "Source context"),
            integer("taskID", "Task ID"),
            string("stepsType", "Steps type"),
        ),
        action="view test case",
        category=CATEGORY,
    ),
    tool(
        "delete_testcase",
        "Delete a test case from ZenTao",
        endpoint("testcase", "delete"),
        (integer("id", "Test case ID to delete", required=True),),
        wire_names={"id": "caseID"},
        action="delete test case",
        category=CATEGORY,
    ),
    post(
        "review_testcase",
        "Review a test case",
        endpoint("testcase", "review"),
        (_CASE_ID, string("review_data", "Review data as JSON string")),
        body=["review_data"],
        action="review test case",
        category=CATEGORY,
    ),
    post(
        "batch_delete_testcases",
        "Delete multiple test cases at once",
        endpoint("testcase", "batchDelete"),
        (_CASES_DATA,),
        body=["cases_data"],
        action="batch delete test cases",
        category=CATEGORY,
    ),
    post(
        "batch_change_testcase_type",
        "Change type for multiple test cases",
        endpoint("testcase", "batchChangeType"),
        (string("type", "New case type", required=True), _CASES_DATA),
        body=["cases_data"],
        action="batch change test case type",
        category=CATEGORY,
    ),
    post(
        "export_testcase_template",
        "Export import template for test cases",
        endpoint("testcase", "exportTemplate"),
        (integer("productID", "Product ID", required=True),),
        action="export test case template",
        category=CATEGORY,
    ),
    post(
        "import_testcase_to_lib",
        "Import test case to case library",
        endpoint("testcase", "importToLib"),
        (_CASE_ID,),
        action="import test case to library",
        category=CATEGORY,
    ),
    tool(
        "get_zero_testcases",
        "Get test cases with zero execution",
        endpoint("testcase", "zeroCase"),
        (
            integer("productID", "Product ID", required=True),
            integer("branchID", "Branch ID"),
            string("orderBy", "Sort order"),
            integer("objectID", "Object ID"),
            integer("recTotal", "Total records"),
            integer("recPerPage", "Records per page"),
            integer("pageID", "Page ID for pagination"),
        ),
        action="get zero-run test cases",
        category=CATEGORY,
    ),
    post(
        "create_testcase",
        "Create a new test case in ZenTao",
        endpoint("testcase", "create"),
        (
            integer("product", "Product ID", required=True),
            string("title", "Test case title", required=True),
            string("type", "Test case type", required=True, enum=CASE_TYPES),
            string_array("steps", "Test case steps", required=True),
            *_CASE_FIELDS,
        ),
        body=["title", "type", "steps", *param_names(_CASE_FIELDS)],
        action="create test case",
        category=CATEGORY,
    ),
    post(
        "batch_create_testcases",
        "Create multiple test cases at once",
        endpoint("testcase", "batchCreate"),
        (
            _PRODUCT_ID,
            string("branch", "Branch"),
            integer("moduleID", "Module ID"),
            integer("storyID", "Story ID"),
            _CASES_DATA,
        ),
        body=["cases_data"],
        action="batch create test cases",
        category=CATEGORY,
    ),
    post(
        "batch_edit_testcases",
        "Edit multiple test cases at once",
        endpoint("testcase", "batchEdit"),
        (
            _PRODUCT_ID,
            string("branch", "Branch"),
            string("type", "Case type filter"),
            string("from", "Source context"),
            string("cases_data", "Updated test cases data as JSON array", required=True),
        ),
        body=["cases_data"],
        action="batch edit test cases",
        category=CATEGORY,
    ),
    post(
        "batch_review_testcases",
        "Review multiple test cases at once",
        endpoint("testcase", "batchReview"),
        (string("result", "Review result", required=True), _CASES_DATA),
        body=["result", "cases_data"],
        action="batch review test cases",
        category=CATEGORY,
    ),
    post(
        "batch_change_testcase_branch",
        "Change branch for multiple test cases",
        endpoint("testcase", "batchChangeBranch"),
        (integer("branchID", "New branch ID", required=True), _CASES_DATA),
        body=["cases_data"],
        action="batch change test case branch",
        category=CATEGORY,
    ),
    post(
        "batch_change_testcase_module",
        "Change module for multiple test cases",
        endpoint("testcase", "batchChangeModule"),
        (integer("moduleID", "New module ID", required=True), _CASES_DATA),
        body=["cases_data"],
        action="batch change test case module",
        category=CATEGORY,
    ),
    tool(
        "link_testcases",
        "Link related test cases",
        endpoint("testcase", "linkCases"),
        (_CASE_ID, *_LINK_FILTERS, *paging()[1:]),
        action="link test cases",
        category=CATEGORY,
    ),
    tool(
        "link_bugs_to_testcase",
        "Link bugs to a test case",
        endpoint("testcase", "linkBugs"),
        (_CASE_ID, *_LINK_FILTERS, *paging()),
        action="link bugs to test case",
        category=CATEGORY,
    ),
    tool(
        "create_bug_from_testcase",
        "Create a bug from a test case",
        endpoint("testcase", "createBug"),
        (
            _PRODUCT_ID,
            _CASE_ID,
            integer("version", "Case version"),
            integer("runID", "Test run ID"),
        ),
        action="create bug from test case",
        category=CATEGORY,
    ),
    post(
        "export_testcases",
        "Export test cases to file",
        endpoint("testcase", "export"),
        (
            _PRODUCT_ID,
            string("orderBy", "Sort order"),
            integer("taskID", "Task ID"),
            string("browseType", "Browse type filter"),
        ),
        action="export test cases",
        category=CATEGORY,
    ),
    post(
        "import_testcases",
        "Import test cases from file",
        endpoint("testcase", "import"),
        (
            _PRODUCT_ID,
            string("branch", "Branch"),
            string("import_data", "Import data as JSON string", required=True),
        ),
        body=["import_data"],
        action="import test cases",
        category=CATEGORY,
    ),
    post(
        "import_testcases_from_lib",
        "Import test cases from case library",
        endpoint("testcase", "importFromLib"),
        (
            _PRODUCT_ID,
            string("branch", "Branch"),
            integer("libID", "Case library ID", required=True),
            string("orderBy", "Sort order"),
            string("browseType", "Browse type filter"),
            integer("queryID", "Query ID"),
            *paging()[1:],
            integer("projectID", "Project ID"),
            _CASES_DATA,
        ),
        body=["cases_data"],
        action="import test cases from library",
        category=CATEGORY,
    ),
    tool(
        "browse_testcase_scenes",
        "Browse test case scenes",
        endpoint("testcase", "browseScene"),
        (
            _PRODUCT_ID,
            string("branch", "Branch"),
            integer("moduleID", "Module ID"),
            *paging(),
        ),
        action="browse test case scenes",
        category=CATEGORY,
    ),
    post(
        "create_testcase_scene",
        "Create a new test case scene",
        endpoint("testcase", "createScene"),
        (
            _PRODUCT_ID,
            integer("branch", "Branch ID", required=True),
            integer("moduleID", "Module ID"),
            string("scene_data", "Scene data as JSON string", required=True),
        ),
        body=["scene_data"],
        action="create test case scene",
        category=CATEGORY,
    ),
    post(
        "edit_testcase_scene",
        "Edit a test case scene",
        endpoint("testcase", "editScene"),
        (_SCENE_ID, string("scene_data", "Updated scene data as JSON string", required=True)),
        body=["scene_data"],
        action="edit test case scene",
        category=CATEGORY,
    ),
    tool(
        "delete_testcase_scene",
        "Delete a test case scene",
        endpoint("testcase", "deleteScene"),
        (_SCENE_ID, string("confirm", "Confirmation")),
        action="delete test case scene",
        category=CATEGORY,
    ),
    tool(
        "group_testcases",
        "Group test cases by criteria",
        endpoint("testcase", "groupCase"),
        (
            _PRODUCT_ID,
            string("branch", "Branch"),
            string("groupBy", "Group by field", required=True),
            integer("objectID", "Object ID"),
            string("caseType", "Case type filter"),
            string("browseType", "Browse type filter"),
        ),
        action="group test cases",
        category=CATEGORY,
    ),
]
