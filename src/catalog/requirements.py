"""
User requirement and epic tools.

Requirements and epics are story types with their own ZenTao modules; both
expose the same lifecycle, so the shared operations are generated per module.
"""

from .base import endpoint, integer, paging, post, string, string_array, tool

CATEGORY = "requirements"

_STORY_ID = integer("storyID", "Requirement ID", required=True)
_PRODUCT_ID = integer("productID", "Product ID", required=True)
_STORY_TYPE = string("storyType", "Story type")
_CONTENT_FIELDS = (
    string("spec", "Specification"),
    integer("pri", "Priority"),
    integer("estimate", "Estimate"),
)
_CONTENT_KEYS = ["title", "spec", "pri", "estimate"]
_LINK_PAGE = (
    string("browseType", "Browse type"),
    string("excludeStories", "Exclude stories"),
    integer("param", "Parameter value"),
    *paging()[1:],
)


def _lifecycle(module: str, noun: str, plural: str, article: str, ids_key: str, category: str):
    """Create, edit, review, assign, close and export operations of one story module."""
    title = noun.capitalize()
    story_id = integer("storyID", f"{title} ID", required=True)

    def get(name, description, function, action, params=()):
        return tool(name, description, endpoint(module, function), params, action=action, category=category)

    def send(name, description, function, action, params=(), body=()):
        return post(
            name,
            description,
            endpoint(module, function),
            params,
            body=body,
            action=action,
            category=category,
        )

    return [
        send(
            f"create_{noun}",
            f"Create a new {noun}",
            "create",
            f"create {noun}",
            (
                _PRODUCT_ID,
                integer("branch", "Branch ID"),
                integer("moduleID", "Module ID"),
                integer("storyID", "Story ID"),
                integer("objectID", "Object ID (projectID|executionID)"),
                integer("bugID", "Bug ID"),
                integer("planID", "Plan ID"),
                integer("todoID", "Todo ID"),
                string("extra", "Extra parameters"),
                string("title", f"{title} title", required=True),
                *_CONTENT_FIELDS,
            ),
            body=_CONTENT_KEYS,
        ),
        send(
            f"batch_create_{plural}",
            f"Create multiple {plural}",
            "batchCreate",
            f"batch create {plural}",
            (
                _PRODUCT_ID,
                string("branch", "Branch"),
                integer("moduleID", "Module ID"),
                integer("storyID", "Story ID"),
                integer("executionID", "Execution ID"),
                integer("plan", "Plan ID"),
                _STORY_TYPE,
                string("extra", "Extra parameters"),
                string_array("titles", f"{title} titles", required=True),
                string_array("specs", f"{title} specifications"),
            ),
            body=["titles", "specs"],
        ),
        get(
            f"view_{noun}",
            f"View {article} {noun}",
            "view",
            f"view {noun}",
            (
                story_id,
                integer("version", "Version"),
                integer("param", "Parameter (executionID|projectID)"),
            ),
        ),
        send(
            f"edit_{noun}",
            f"Edit {article} {noun}",
            "edit",
            f"edit {noun}",
            (
                story_id,
                string("kanbanGroup", "Kanban group"),
                string("title", f"{title} title"),
                *_CONTENT_FIELDS,
            ),
            body=_CONTENT_KEYS,
        ),
        send(
            f"batch_edit_{plural}",
            f"Batch edit {plural}",
            "batchEdit",
            f"batch edit {plural}",
            (
                _PRODUCT_ID,
                integer("executionID", "Execution ID"),
                string("branch", "Branch"),
                _STORY_TYPE,
                string("from", "Source"),
                string_array(ids_key, f"{title} IDs to edit", required=True),
                string_array("titles", "New titles"),
                string_array("specs", "New specifications"),
            ),
            body=[ids_key, "titles", "specs"],
        ),
        get(
            f"delete_{noun}",
            f"Delete {article} {noun}",
            "delete",
            f"delete {noun}",
            (story_id, string("confirm", "Confirmation", enum=("yes", "no")), string("from", "Source")),
        ),
        get(
            f"import_{plural}",
            f"Import {plural}",
            "import",
            f"import {plural}",
            (
                _PRODUCT_ID,
                integer("branch", "Branch"),
                _STORY_TYPE,
                integer("projectID", "Project ID"),
            ),
        ),
        get(
            f"export_{plural}",
            f"Export {plural}",
            "export",
            f"export {plural}",
            (
                _PRODUCT_ID,
                string("orderBy", "Order by field"),
                integer("executionID", "Execution ID"),
                string("browseType", "Browse type"),
            ),
        ),
        get(
            f"export_{noun}_template",
            f"Export {noun} template",
            "exportTemplate",
            f"export {noun} template",
            (_PRODUCT_ID, integer("branch", "Branch"), _STORY_TYPE),
        ),
        send(
            f"assign_{noun}",
            f"Assign {article} {noun} to a user",
            "assignTo",
            f"assign {noun}",
            (story_id, integer("assignedTo", "User ID to assign to", required=True)),
            body=["assignedTo"],
        ),
        send(
            f"batch_assign_{plural}",
            f"Batch assign {plural}",
            "batchAssignTo",
            f"batch assign {plural}",
            (
                string("storyType", "Story type", enum=("story", "requirement")),
                integer("assignedTo", "User ID to assign to", required=True),
                string_array(ids_key, f"{title} IDs to assign", required=True),
            ),
            body=["storyType", "assignedTo", ids_key],
        ),
        send(
            f"close_{noun}",
            f"Close {article} {noun}",
            "close",
            f"close {noun}",
            (story_id, string("from", "Source")),
        ),
        send(
            f"batch_close_{plural}",
            f"Batch close {plural}",
            "batchClose",
            f"batch close {plural}",
            (
                _PRODUCT_ID,
                integer("executionID", "Execution ID"),
                _STORY_TYPE,
                string("from", "Source", enum=("contribute", "work")),
            ),
        ),
        send(f"activate_{noun}", f"Activate {article} {noun}", "activate", f"activate {noun}", (story_id,)),
        send(
            f"review_{noun}",
            f"Review {article} {noun}",
            "review",
            f"review {noun}",
            (story_id, string("from", "Source", enum=("product", "project"))),
        ),
        send(
            f"batch_review_{plural}",
            f"Batch review {plural}",
            "batchReview",
            f"batch review {plural}",
            (string("result", "Review result", required=True), string("reason", "Review reason")),
            body=["result", "reason"],
        ),
        send(
            f"report_{plural}",
            f"Generate {noun} reports",
            "report",
            f"report {plural}",
            (
                _PRODUCT_ID,
                integer("branchID", "Branch ID"),
                _STORY_TYPE,
                string("browseType", "Browse type"),
                integer("moduleID", "Module ID"),
                string("chartType", "Chart type"),
                integer("projectID", "Project ID"),
            ),
        ),
    ]


def _requirement(name: str, description: str, function: str, action: str, params=()):
    return post(
        name,
        description,
        endpoint("requirement", function),
        params,
        action=action,
        category=CATEGORY,
    )


REQUIREMENT_TOOLS = [
    *_lifecycle("requirement", "requirement", "requirements", "a", "requirementIDs", CATEGORY),
    tool(
        "link_story_to_requirement",
        "Link a story to a requirement",
        endpoint("requirement", "linkStory"),
        (
            _STORY_ID,
            string("type", "Link type", enum=("linkStories", "linkRelateUR", "linkRelateSR")),
            integer("linkedStoryID", "Story ID to link"),
            string("browseType", "Browse type"),
            integer("queryID", "Query ID"),
        ),
        action="link story to requirement",
        category=CATEGORY,
    ),
    tool(
        "link_requirements",
        "Link requirements together",
        endpoint("requirement", "linkRequirements"),
        (_STORY_ID, *_LINK_PAGE),
        action="link requirements",
        category=CATEGORY,
    ),
    _requirement(
        "batch_change_requirement_branch",
        "Batch change requirement branch",
        "batchChangeBranch",
        "batch change requirement branch",
        (
            integer("branchID", "New branch ID", required=True),
            string("confirm", "Confirmation", enum=("yes", "no")),
            string("storyIdList", "Story ID list"),
        ),
    ),
    _requirement(
        "batch_change_requirement_module",
        "Batch change requirement module",
        "batchChangeModule",
        "batch change requirement module",
        (integer("moduleID", "New module ID", required=True),),
    ),
    _requirement(
        "batch_change_requirement_parent",
        "Batch change requirement parent",
        "batchChangeParent",
        "batch change requirement parent",
        (_PRODUCT_ID, _STORY_TYPE),
    ),
    _requirement(
        "batch_change_requirement_grade",
        "Batch change requirement grade",
        "batchChangeGrade",
        "batch change requirement grade",
        (integer("grade", "New grade", required=True), _STORY_TYPE),
    ),
    _requirement(
        "batch_change_requirement_plan",
        "Batch change requirement plan",
        "batchChangePlan",
        "batch change requirement plan",
        (integer("planID", "New plan ID", required=True), integer("oldPlanID", "Old plan ID")),
    ),
]

_EPIC_ID = integer("storyID", "Epic ID", required=True)

EPIC_TOOLS = [
    *_lifecycle("epic", "epic", "epics", "an", "epicIDs", "epics"),
    tool(
        "link_stories_to_epic",
        "Link stories to an epic",
        endpoint("epic", "linkStories"),
        (_EPIC_ID, *_LINK_PAGE),
        action="link stories to epic",
        category="epics",
    ),
    tool(
        "link_requirements_to_epic",
        "Link requirements to an epic",
        endpoint("epic", "linkRequirements"),
        (_EPIC_ID, *_LINK_PAGE),
        action="link requirements to epic",
        category="epics",
    ),
]

TOOLS = [*REQUIREMENT_TOOLS, *EPIC_TOOLS]
