"""Design document tools."""

from .base import endpoint, integer, paging, param_names, post, string, string_array, tool

CATEGORY = "designs"

DESIGN_TYPES = ("all", "bySearch", "HLDS", "DDS", "DBDS", "ADS")

_DESIGN_ID = integer("designID", "Design ID", required=True)

_SCOPE = (
    integer("projectID", "Project ID", required=True),
    integer("productID", "Product ID", required=True),
)

_DESIGN_FIELDS = (
    string("desc", "Design description"),
    string("content", "Design content"),
    integer("assignedTo", "Assigned to user ID"),
)

TOOLS = [
    tool(
        "browse_designs",
        "Browse designs for a project/product",
        endpoint("design", "browse"),
        (
            integer("projectID", "Project ID"),
            integer("productID", "Product ID"),
            string("type", "Design type", enum=DESIGN_TYPES),
            integer("param", "Parameter value"),
            *paging(),
        ),
        action="browse designs",
        category=CATEGORY,
    ),
    post(
        "create_design",
        "Create a new design document",
        endpoint("design", "create"),
        (
            *_SCOPE,
            string("type", "Design type", required=True, enum=DESIGN_TYPES),
            string("name", "Design name", required=True),
            *_DESIGN_FIELDS,
        ),
        body=["name", *param_names(_DESIGN_FIELDS)],
        action="create design",
        category=CATEGORY,
    ),
    post(
        "batch_create_designs",
        "Create multiple design documents",
        endpoint("design", "batchCreate"),
        (
            *_SCOPE,
            string("type", "Design type", required=True, enum=DESIGN_TYPES),
            string_array("names", "Design names", required=True),
            string_array("descs", "Design descriptions"),
        ),
        body=["names", "descs"],
        action="batch create designs",
        category=CATEGORY,
    ),
    tool(
        "view_design",
        "View a design document",
        endpoint("design", "view"),
        (_DESIGN_ID,),
        action="view design",
        category=CATEGORY,
    ),
    post(
        "edit_design",
        "Edit a design document",
        endpoint("design", "edit"),
        (_DESIGN_ID, string("name", "Design name"), *_DESIGN_FIELDS),
        body=["name", *param_names(_DESIGN_FIELDS)],
        action="edit design",
        category=CATEGORY,
    ),
    tool(
        "delete_design",
        "Delete a design document",
        endpoint("design", "delete"),
        (_DESIGN_ID,),
        action="delete design",
        category=CATEGORY,
    ),
    post(
        "assign_design",
        "Assign a design to a user",
        endpoint("design", "assignTo"),
        (_DESIGN_ID, integer("assignedTo", "User ID to assign to", required=True)),
        body=["assignedTo"],
        action="assign design",
        category=CATEGORY,
    ),
    post(
        "link_commit_to_design",
        "Link a commit to a design document",
        endpoint("design", "linkCommit"),
        (
            _DESIGN_ID,
            integer("repoID", "Repository ID", required=True),
            string("begin", "Begin commit hash"),
            string("end", "End commit hash"),
            *paging()[1:],
        ),
        body=["begin", "end"],
        action="link commit to design",
        category=CATEGORY,
    ),
    tool(
        "unlink_commit_from_design",
        "Unlink a commit from a design document",
        endpoint("design", "unlinkCommit"),
        (_DESIGN_ID, integer("commitID", "Commit ID", required=True)),
        action="unlink commit from design",
        category=CATEGORY,
    ),
    tool(
        "view_design_commits",
        "View commits linked to a design",
        endpoint("design", "viewCommit"),
        (_DESIGN_ID, *paging()[1:]),
        action="view design commits",
        category=CATEGORY,
    ),
    tool(
        "get_design_switcher_menu",
        "Get design switcher menu",
        endpoint("design", "ajaxSwitcherMenu"),
        _SCOPE,
        action="get design switcher menu",
        category=CATEGORY,
    ),
    tool(
        "get_product_stories_for_design",
        "Get product stories for design purposes",
        endpoint("design", "ajaxGetProductStories"),
        (
            integer("productID", "Product ID", required=True),
            integer("projectID", "Project ID", required=True),
            string("status", "Story status"),
            string("hasParent", "Has parent story"),
        ),
        action="get product stories for design",
        category=CATEGORY,
    ),
    tool(
        "confirm_story_change_for_design",
        "Confirm story change for design",
        endpoint("design", "confirmStoryChange"),
        (_DESIGN_ID,),
        action="confirm story change for design",
        category=CATEGORY,
    ),
]
