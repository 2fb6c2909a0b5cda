"""Kanban space, board, region, lane, column and card tools."""

from .base import endpoint, integer, paging, param_names, post, string, tool

CATEGORY = "kanban"

_SPACE_ID = integer("spaceID", "Space ID", required=True)
_KANBAN_ID = integer("kanbanID", "Kanban ID", required=True)
_REGION_ID = integer("regionID", "Region ID", required=True)
_COLUMN_ID = integer("columnID", "Column ID", required=True)
_CARD_ID = integer("cardID", "Card ID", required=True)
_FROM = string("from", "Source", enum=("kanban", "execution"))

_CARD_FIELDS = (
    string("desc", "Card description"),
    integer("assignedTo", "Assigned to user ID"),
    integer("pri", "Priority"),
    string("color", "Card color"),
)
_CARD_SLOT = (
    _KANBAN_ID,
    _REGION_ID,
    integer("groupID", "Group ID", required=True),
    _COLUMN_ID,
)


def _get(name: str, description: str, function: str, action: str, params=()):
    return tool(name, description, endpoint("kanban", function), params, action=action, category=CATEGORY)


def _post(name: str, description: str, function: str, action: str, params=(), body=()):
    return post(
        name,
        description,
        endpoint("kanban", function),
        params,
        body=body,
        action=action,
        category=CATEGORY,
    )


def _rename(name: str, noun: str, function: str, key):
    """Edit the name and description of a space, board or region."""
    return _post(
        name,
        f"Edit a {noun}",
        function,
        f"edit {noun}",
        (key, string("name", f"{noun.split()[-1].capitalize()} name"), string("desc", "Description")),
        body=["name", "desc"],
    )


SPACE_TOOLS = [
    _get(
        "get_kanban_spaces",
        "Get kanban spaces",
        "space",
        "get kanban spaces",
        (
            string(
                "browseType",
                "Browse type",
                enum=("involved", "cooperation", "public", "private"),
            ),
            *paging()[1:],
        ),
    ),
    _post(
        "create_kanban_space",
        "Create a new kanban space",
        "createSpace",
        "create kanban space",
        (
            string("type", "Space type", required=True),
            string("name", "Space name", required=True),
            string("desc", "Space description"),
        ),
        body=["name", "desc"],
    ),
    _rename("edit_kanban_space", "kanban space", "editSpace", _SPACE_ID),
    _post("activate_kanban_space", "Activate a kanban space", "activateSpace", "activate kanban space", (_SPACE_ID,)),
    _post("close_kanban_space", "Close a kanban space", "closeSpace", "close kanban space", (_SPACE_ID,)),
    _get("delete_kanban_space", "Delete a kanban space", "deleteSpace", "delete kanban space", (_SPACE_ID,)),
]

BOARD_TOOLS = [
    _post(
        "create_kanban",
        "Create a new kanban board",
        "create",
        "create kanban",
        (
            _SPACE_ID,
            string("type", "Kanban type"),
            integer("copyKanbanID", "Copy from kanban ID"),
            string("extra", "Extra parameters"),
            string("name", "Kanban name", required=True),
            string("desc", "Kanban description"),
        ),
        body=["name", "desc"],
    ),
    _rename("edit_kanban", "kanban board", "edit", _KANBAN_ID),
    _get(
        "view_kanban",
        "View a kanban board",
        "view",
        "view kanban",
        (_KANBAN_ID, string("regionID", "Region ID")),
    ),
    _get("delete_kanban", "Delete a kanban board", "delete", "delete kanban", (_KANBAN_ID,)),
    _post(
        "create_kanban_region",
        "Create a kanban region",
        "createRegion",
        "create kanban region",
        (
            _KANBAN_ID,
            _FROM,
            string("name", "Region name", required=True),
            string("desc", "Region description"),
        ),
        body=["name", "desc"],
    ),
    _rename("edit_kanban_region", "kanban region", "editRegion", _REGION_ID),
    _get("delete_kanban_region", "Delete a kanban region", "deleteRegion", "delete kanban region", (_REGION_ID,)),
    _post(
        "create_kanban_lane",
        "Create a kanban lane",
        "createLane",
        "create kanban lane",
        (
            _KANBAN_ID,
            _REGION_ID,
            _FROM,
            string("name", "Lane name", required=True),
            string("color", "Lane color"),
        ),
        body=["name", "color"],
    ),
    _get(
        "delete_kanban_lane",
        "Delete a kanban lane",
        "deleteLane",
        "delete kanban lane",
        (_REGION_ID, integer("laneID", "Lane ID", required=True)),
    ),
    _get(
        "get_kanban_lanes",
        "Get kanban lanes",
        "ajaxGetLanes",
        "get kanban lanes",
        (
            _REGION_ID,
            string("type", "Type", enum=("all", "story", "task", "bug")),
            string("field", "Field"),
            string("pageType", "Page type"),
        ),
    ),
]

COLUMN_TOOLS = [
    # position selects the side of fromColumnID and travels on the query
    _post(
        "create_kanban_column",
        "Create a kanban column",
        "createColumn",
        "create kanban column",
        (
            integer("fromColumnID", "Source column ID", required=True),
            string("position", "Position", required=True, enum=("left", "right")),
            string("name", "Column name", required=True),
            integer("limit", "WIP limit"),
        ),
        body=["name", "limit"],
    ),
    _post(
        "split_kanban_column",
        "Split a kanban column",
        "splitColumn",
        "split kanban column",
        (_COLUMN_ID, string("name", "New column name", required=True)),
        body=["name"],
    ),
    _get("archive_kanban_column", "Archive a kanban column", "archiveColumn", "archive kanban column", (_COLUMN_ID,)),
    _get("delete_kanban_column", "Delete a kanban column", "deleteColumn", "delete kanban column", (_COLUMN_ID,)),
    _get(
        "get_kanban_columns",
        "Get kanban columns",
        "ajaxGetColumns",
        "get kanban columns",
        (integer("laneID", "Lane ID", required=True),),
    ),
]

CARD_TOOLS = [
    _post(
        "create_kanban_card",
        "Create a kanban card",
        "createCard",
        "create kanban card",
        (*_CARD_SLOT, string("name", "Card name", required=True), *_CARD_FIELDS),
        body=["name", *param_names(_CARD_FIELDS)],
    ),
    _post(
        "edit_kanban_card",
        "Edit a kanban card",
        "editCard",
        "edit kanban card",
        (_CARD_ID, string("name", "Card name"), *_CARD_FIELDS),
        body=["name", *param_names(_CARD_FIELDS)],
    ),
    _get("view_kanban_card", "View a kanban card", "viewCard", "view kanban card", (_CARD_ID,)),
    _post(
        "move_kanban_card",
        "Move a kanban card",
        "moveCard",
        "move kanban card",
        (
            _CARD_ID,
            integer("fromColID", "From column ID", required=True),
            integer("toColID", "To column ID", required=True),
            integer("fromLaneID", "From lane ID", required=True),
            integer("toLaneID", "To lane ID", required=True),
            _KANBAN_ID,
            string("showModal", "Show modal"),
        ),
    ),
    _get("finish_kanban_card", "Finish a kanban card", "finishCard", "finish kanban card", (_CARD_ID,)),
    _post("activate_kanban_card", "Activate a kanban card", "activateCard", "activate kanban card", (_CARD_ID,)),
    _get("archive_kanban_card", "Archive a kanban card", "archiveCard", "archive kanban card", (_CARD_ID,)),
    _get("delete_kanban_card", "Delete a kanban card", "deleteCard", "delete kanban card", (_CARD_ID,)),
    _post(
        "import_cards_from_plan",
        "Import cards from a plan",
        "importPlan",
        "import cards from plan",
        (
            *_CARD_SLOT,
            integer("selectedProductID", "Selected product ID", required=True),
            *paging()[1:],
        ),
    ),
    _get(
        "set_kanban_card_color",
        "Set kanban card color",
        "setCardColor",
        "set kanban card color",
        (_CARD_ID, string("color", "Color", required=True)),
    ),
]

TOOLS = [*SPACE_TOOLS, *BOARD_TOOLS, *COLUMN_TOOLS, *CARD_TOOLS]
