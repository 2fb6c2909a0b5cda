"""Product, product plan, release and branch tools."""

from .base import endpoint, integer, limit_offset, paging, param_names, post, string, string_array, tool

CATEGORY = "products"

_PRODUCT_FIELDS = (
    string("name", "Product name", required=True),
    string("code", "Product code", required=True),
    integer("program", "Program ID"),
    integer("line", "Product line"),
    integer("PO", "Product Owner ID"),
    integer("QD", "Quality Director ID"),
    integer("RD", "Release Director ID"),
    string("type", "Product type (normal|branch)", enum=("normal", "branch")),
    string("desc", "Product description"),
    string("acl", "Access control (open|private)", enum=("open", "private")),
)

_PLAN_FIELDS = (
    string("title", "Plan name", required=True),
    integer("branch", "Branch ID"),
    string("begin", "Plan start date (YYYY-MM-DD)"),
    string("end", "Plan end date (YYYY-MM-DD)"),
    string("desc", "Plan description"),
    integer("parent", "Parent plan ID"),
)

PRODUCT_TOOLS = [
    post(
        "create_product",
        "Create a new product in ZenTao",
        endpoint("product", "create"),
        _PRODUCT_FIELDS,
        body=param_names(_PRODUCT_FIELDS),
        action="create product",
        category=CATEGORY,
    ),
    post(
        "create_plan",
        "Create a new product plan in ZenTao",
        endpoint("productplan", "create"),
        (integer("product", "Product ID", required=True), *_PLAN_FIELDS),
        body=param_names(_PLAN_FIELDS),
        action="create plan",
        category="plans",
    ),
    tool(
        "get_product_releases",
        "Get releases for a specific product",
        endpoint("release", "browse"),
        (integer("product_id", "Product ID", required=True), *limit_offset("releases")),
        wire_names={"product_id": "product"},
        action="get product releases",
        category="releases",
    ),
    tool(
        "get_project_releases",
        "Get releases for a specific project",
        endpoint("release", "browse"),
        (integer("project_id", "Project ID", required=True), *limit_offset("releases")),
        wire_names={"project_id": "project"},
        action="get project releases",
        category="releases",
    ),
]

_BRANCH_ID = integer("branchID", "Branch ID", required=True)
_PRODUCT_ID = integer("productID", "Product ID", required=True)

BRANCH_TOOLS = [
    tool(
        "manage_branches",
        "Manage branches for a product",
        endpoint("branch", "manage"),
        (_PRODUCT_ID, string("browseType", "Browse type"), *paging()),
        action="manage branches",
        category="branches",
    ),
    post(
        "create_branch",
        "Create a new branch for a product",
        endpoint("branch", "create"),
        (
            _PRODUCT_ID,
            string("name", "Branch name", required=True),
            string("desc", "Branch description"),
        ),
        body=["name", "desc"],
        action="create branch",
        category="branches",
    ),
    post(
        "edit_branch",
        "Edit an existing branch",
        endpoint("branch", "edit"),
        (
            _BRANCH_ID,
            _PRODUCT_ID,
            string("name", "Branch name"),
            string("desc", "Branch description"),
        ),
        body=["name", "desc"],
        action="edit branch",
        category="branches",
    ),
    post(
        "batch_edit_branches",
        "Batch edit branches for a product",
        endpoint("branch", "batchEdit"),
        (
            _PRODUCT_ID,
            string_array("branchIDs", "Branch IDs to edit", required=True),
            string_array("names", "New branch names"),
            string_array("descs", "New branch descriptions"),
        ),
        body=["branchIDs", "names", "descs"],
        action="batch edit branches",
        category="branches",
    ),
    tool(
        "close_branch",
        "Close a branch",
        endpoint("branch", "close"),
        (_BRANCH_ID,),
        action="close branch",
        category="branches",
    ),
    tool(
        "activate_branch",
        "Activate a branch",
        endpoint("branch", "activate"),
        (_BRANCH_ID,),
        action="activate branch",
        category="branches",
    ),
    post(
        "sort_branches",
        "Sort branches",
        endpoint("branch", "sort"),
        (string_array("branchOrders", "Branch order mapping", required=True),),
        body=["branchOrders"],
        wire_names={"branchOrders": "orders"},
        action="sort branches",
        category="branches",
    ),
    tool(
        "get_branches",
        "Get branches for a product",
        endpoint("branch", "ajaxGetBranches"),
        (
            _PRODUCT_ID,
            string("oldBranch", "Old branch"),
            string("browseType", "Browse type"),
            integer("projectID", "Project ID"),
            string("withMainBranch", "Include main branch"),
            string("isTwins", "Is twins"),
            string("fieldID", "Field ID"),
            string("multiple", "Multiple selection"),
            integer("charterID", "Charter ID"),
        ),
        action="get branches",
        category="branches",
    ),
    post(
        "merge_branch",
        "Merge branches for a product",
        endpoint("branch", "mergeBranch"),
        (
            _PRODUCT_ID,
            integer("sourceBranch", "Source branch ID", required=True),
            integer("targetBranch", "Target branch ID", required=True),
        ),
        body=["sourceBranch", "targetBranch"],
        action="merge branch",
        category="branches",
    ),
]

TOOLS = [*PRODUCT_TOOLS, *BRANCH_TOOLS]
