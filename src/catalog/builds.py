"""Build and project build tools."""

from .base import endpoint, integer, paging, param_names, post, string, tool

CATEGORY = "builds"

_BUILD_ID = integer("buildID", "Build ID", required=True)

_BUILD_FIELDS = (
    string("builder", "Builder"),
    string("desc", "Description"),
    string("scmPath", "SCM path"),
    string("filePath", "File path"),
    string("date", "Build date"),
)

_BUILD_FILTERS = (
    string("varName", "Variable name"),
    string("build", "Build filter"),
    string("branch", "Branch"),
)

_LINK_PARAMS = (
    _BUILD_ID,
    string("browseType", "Browse type"),
    integer("param", "Parameter value"),
    *paging(),
)

BUILD_TOOLS = [
    post(
        "create_build",
        "Create a new build",
        endpoint("build", "create"),
        (
            integer("executionID", "Execution ID"),
            integer("productID", "Product ID", required=True),
            integer("projectID", "Project ID", required=True),
            string("name", "Build name", required=True),
            *_BUILD_FIELDS,
        ),
        body=["name", *param_names(_BUILD_FIELDS)],
        action="create build",
        category=CATEGORY,
    ),
    post(
        "edit_build",
        "Edit an existing build",
        endpoint("build", "edit"),
        (_BUILD_ID, string("name", "Build name"), *_BUILD_FIELDS),
        body=["name", *param_names(_BUILD_FIELDS)],
        action="edit build",
        category=CATEGORY,
    ),
    tool(
        "view_build",
        "View build details",
        endpoint("build", "view"),
        (
            _BUILD_ID,
            string("type", "View type"),
            string("link", "Link"),
            string("param", "Parameter"),
            *paging(),
        ),
        action="view build",
        category=CATEGORY,
    ),
    tool(
        "delete_build",
        "Delete a build",
        endpoint("build", "delete"),
        (_BUILD_ID, string("from", "Source", enum=("execution", "project"))),
        action="delete build",
        category=CATEGORY,
    ),
    tool(
        "get_product_builds",
        "Get product builds",
        endpoint("build", "ajaxGetProductBuilds"),
        (
            integer("productID", "Product ID", required=True),
            *_BUILD_FILTERS,
            string("type", "Build type"),
        ),
        action="get product builds",
        category=CATEGORY,
    ),
    tool(
        "get_project_builds",
        "Get project builds",
        endpoint("build", "ajaxGetProjectBuilds"),
        (
            integer("projectID", "Project ID", required=True),
            integer("productID", "Product ID"),
            *_BUILD_FILTERS,
            string("needCreate", "Need create option"),
            string("type", "Build type"),
            string("system", "System"),
        ),
        action="get project builds",
        category=CATEGORY,
    ),
    tool(
        "get_execution_builds",
        "Get execution builds",
        endpoint("build", "ajaxGetExecutionBuilds"),
        (
            integer("executionID", "Execution ID", required=True),
            integer("productID", "Product ID"),
            *_BUILD_FILTERS,
            string("needCreate", "Need create option"),
            string("type", "Build type"),
        ),
        action="get execution builds",
        category=CATEGORY,
    ),
    tool(
        "get_last_build",
        "Get last build for project/execution",
        endpoint("build", "ajaxGetLastBuild"),
        (integer("projectID", "Project ID"), integer("executionID", "Execution ID")),
        action="get last build",
        category=CATEGORY,
    ),
    post(
        "link_story_to_build",
        "Link a story to a build",
        endpoint("build", "linkStory"),
        _LINK_PARAMS,
        action="link story to build",
        category=CATEGORY,
    ),
    tool(
        "unlink_story_from_build",
        "Unlink a story from a build",
        endpoint("build", "unlinkStory"),
        (_BUILD_ID, integer("storyID", "Story ID", required=True)),
        action="unlink story from build",
        category=CATEGORY,
    ),
    post(
        "batch_unlink_stories_from_build",
        "Batch unlink stories from a build",
        endpoint("build", "batchUnlinkStory"),
        (_BUILD_ID,),
        action="batch unlink stories from build",
        category=CATEGORY,
    ),
    post(
        "link_bug_to_build",
        "Link a bug to a build",
        endpoint("build", "linkBug"),
        _LINK_PARAMS,
        action="link bug to build",
        category=CATEGORY,
    ),
    tool(
        "unlink_bug_from_build",
        "Unlink a bug from a build",
        endpoint("build", "unlinkBug"),
        (_BUILD_ID, integer("bugID", "Bug ID", required=True)),
        action="unlink bug from build",
        category=CATEGORY,
    ),
    post(
        "batch_unlink_bugs_from_build",
        "Batch unlink bugs from a build",
        endpoint("build", "batchUnlinkBug"),
        (_BUILD_ID,),
        action="batch unlink bugs from build",
        category=CATEGORY,
    ),
]

_PROJECT_BUILD_LINK_PARAMS = (
    _BUILD_ID,
    string("browseType", "Browse type"),
    integer("param", "Parameter value"),
    *paging(),
)

PROJECT_BUILD_TOOLS = [
    tool(
        "browse_project_builds",
        "Browse builds for a project",
        endpoint("projectbuild", "browse"),
        (
            integer("projectID", "Project ID", required=True),
            string("type", "Build type", enum=("all", "product", "bysearch")),
            integer("param", "Parameter value"),
            *paging(),
        ),
        action="browse project builds",
        category=CATEGORY,
    ),
    post(
        "create_project_build",
        "Create a new build for a project",
        endpoint("projectbuild", "create"),
        (
            integer("projectID", "Project ID", required=True),
            string("name", "Build name", required=True),
            *_BUILD_FIELDS,
        ),
        body=["name", *param_names(_BUILD_FIELDS)],
        action="create project build",
        category=CATEGORY,
    ),
    post(
        "edit_project_build",
        "Edit an existing project build",
        endpoint("projectbuild", "edit"),
        (_BUILD_ID, string("name", "Build name"), *_BUILD_FIELDS),
        body=["name", *param_names(_BUILD_FIELDS)],
        action="edit project build",
        category=CATEGORY,
    ),
    tool(
        "view_project_build",
        "View project build details",
        endpoint("projectbuild", "view"),
        (
            _BUILD_ID,
            string("type", "View type"),
            string("link", "Link"),
            string("param", "Parameter"),
            *paging(),
        ),
        action="view project build",
        category=CATEGORY,
    ),
    tool(
        "delete_project_build",
        "Delete a project build",
        endpoint("projectbuild", "delete"),
        (_BUILD_ID,),
        action="delete project build",
        category=CATEGORY,
    ),
    tool(
        "link_story_to_project_build",
        "Link a story to a project build",
        endpoint("projectbuild", "linkStory"),
        _PROJECT_BUILD_LINK_PARAMS,
        action="link story to project build",
        category=CATEGORY,
    ),
    tool(
        "unlink_story_from_project_build",
        "Unlink a story from a project build",
        endpoint("projectbuild", "unlinkStory"),
        (_BUILD_ID, integer("storyID", "Story ID", required=True)),
        action="unlink story from project build",
        category=CATEGORY,
    ),
    tool(
        "batch_unlink_stories_from_project_build",
        "Batch unlink stories from a project build",
        endpoint("projectbuild", "batchUnlinkStory"),
        (_BUILD_ID,),
        action="batch unlink stories from project build",
        category=CATEGORY,
    ),
    tool(
        "link_bug_to_project_build",
        "Link a bug to a project build",
        endpoint("projectbuild", "linkBug"),
        _PROJECT_BUILD_LINK_PARAMS,
        action="link bug to project build",
        category=CATEGORY,
    ),
    tool(
        "unlink_bug_from_project_build",
        "Unlink a bug from a project build",
        endpoint("projectbuild", "unlinkBug"),
        (_BUILD_ID, integer("bugID", "Bug ID", required=True)),
        action="unlink bug from project build",
        category=CATEGORY,
    ),
    tool(
        "batch_unlink_bugs_from_project_build",
        "Batch unlink bugs from a project build",
        endpoint("projectbuild", "batchUnlinkBug"),
        (_BUILD_ID,),
        action="batch unlink bugs from project build",
        category=CATEGORY,
    ),
]

TOOLS = [*BUILD_TOOLS, *PROJECT_BUILD_TOOLS]
