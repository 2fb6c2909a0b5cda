"""Module tree and search tools."""

from .base import endpoint, integer, post, string, tool

_VIEW_TYPES = ("story", "bug", "case", "doc")
_SEARCH_MODES = ("new20", "old20")

TOOLS = [
    tool(
        "tree_browse",
        "Browse tree structure",
        endpoint("tree", "browse"),
        (
            integer("rootID", "Root ID"),
            string("viewType", "View type", enum=_VIEW_TYPES),
            integer("currentModuleID", "Current module ID"),
            string("branch", "Branch"),
            string("from", "From filter"),
        ),
        action="browse tree",
        category="tree",
    ),
    tool(
        "tree_browse_task",
        "Browse tree tasks",
        endpoint("tree", "browseTask"),
        (
            integer("rootID", "Root ID"),
            integer("productID", "Product ID"),
            integer("currentModuleID", "Current module ID"),
        ),
        action="browse tree tasks",
        category="tree",
    ),
    post(
        "tree_edit",
        "Edit tree module",
        endpoint("tree", "edit"),
        (
            integer("moduleID", "Module ID", required=True),
            string("type", "Module type"),
            string("branch", "Branch"),
        ),
        body=["moduleID", "type", "branch"],
        action="edit tree module",
        category="tree",
    ),
    post(
        "tree_manage_child",
        "Manage tree child modules",
        endpoint("tree", "manageChild"),
        (
            integer("rootID", "Root ID", required=True),
            string("viewType", "View type", enum=_VIEW_TYPES),
            string("oldPage", "Use old page", enum=("yes", "no")),
        ),
        body=["rootID", "viewType", "oldPage"],
        action="manage child",
        category="tree",
    ),
    tool(
        "tree_view_history",
        "View tree history",
        endpoint("tree", "viewHistory"),
        (integer("productID", "Product ID", required=True),),
        action="view history",
        category="tree",
    ),
    tool(
        "tree_delete",
        "Delete tree module",
        endpoint("tree", "delete"),
        (
            integer("moduleID", "Module ID", required=True),
            string("confirm", "Confirm deletion", enum=("yes", "no")),
        ),
        action="delete tree module",
        category="tree",
    ),
    tool(
        "tree_ajax_get_modules",
        "Get tree modules",
        endpoint("tree", "ajaxGetModules"),
        (
            integer("productID", "Product ID"),
            string("viewType", "View type", enum=_VIEW_TYPES),
            string("branch", "Branch"),
            integer("number", "Number"),
            integer("currentModuleID", "Current module ID"),
        ),
        action="get modules",
        category="tree",
    ),
    tool(
        "search_build_form",
        "Build search form",
        endpoint("search", "buildForm"),
        (
            string("module", "Module name", required=True),
            string("mode", "Search mode", enum=_SEARCH_MODES),
        ),
        action="build form",
        category="search",
    ),
    post(
        "search_build_query",
        "Build search query",
        endpoint("search", "buildQuery"),
        (string("mode", "Search mode", enum=_SEARCH_MODES),),
        body=["mode"],
        action="build query",
        category="search",
    ),
    post(
        "search_save_query",
        "Save search query",
        endpoint("search", "saveQuery"),
        (
            string("module", "Module name", required=True),
            string("onMenuBar", "Show on menu bar"),
        ),
        body=["module", "onMenuBar"],
        action="save query",
        category="search",
    ),
    tool(
        "search_delete_query",
        "Delete search query",
        endpoint("search", "deleteQuery"),
        (integer("queryID", "Query ID", required=True),),
        action="delete query",
        category="search",
    ),
    tool(
        "search_ajax_get_query",
        "Get search query details",
        endpoint("search", "ajaxGetQuery"),
        (
            string("module", "Module name", required=True),
            integer("queryID", "Query ID", required=True),
        ),
        action="get query",
        category="search",
    ),
    post(
        "search_build_index",
        "Build search index",
        endpoint("search", "buildIndex"),
        (
            string("mode", "Index mode", enum=("show", "build")),
            string("type", "Type"),
            integer("lastID", "Last ID"),
        ),
        body=["mode", "type", "lastID"],
        action="build index",
        category="search",
    ),
    post(
        "search_index",
        "Search index",
        endpoint("search", "index"),
        (integer("recTotal", "Total records"), integer("pageID", "Page ID")),
        body=["recTotal", "pageID"],
        action="index search",
        category="search",
    ),
    post(
        "tree_fix",
        "Fix tree module",
        endpoint("tree", "fix"),
        (integer("rootID", "Root ID"), string("type", "Module type")),
        body=["rootID", "type"],
        action="fix tree",
        category="tree",
    ),
    post(
        "tree_update_order",
        "Update tree module order",
        endpoint("tree", "updateOrder"),
        (
            integer("rootID", "Root ID"),
            string("viewType", "View type: story|bug|case|doc", enum=_VIEW_TYPES),
            integer("moduleID", "Module ID"),
        ),
        body=["rootID", "viewType", "moduleID"],
        action="update tree order",
        category="tree",
    ),
    post(
        "tree_ajax_create_module",
        "Create tree module",
        endpoint("tree", "ajaxCreateModule"),
        action="create tree module",
        category="tree",
    ),
    tool(
        "tree_ajax_get_option_menu",
        "Get tree option menu",
        endpoint("tree", "ajaxGetOptionMenu"),
        (
            integer("rootID", "Root ID"),
            string("viewType", "View type: story|bug|case|doc", enum=_VIEW_TYPES),
            string("branch", "Branch"),
            integer("rootModuleID", "Root module ID"),
            string("returnType", "Return type"),
            string("fieldID", "Field ID"),
            string("extra", "Extra parameters"),
            integer("currentModuleID", "Current module ID"),
            string("grade", "Grade"),
        ),
        action="get tree option menu",
        category="tree",
    ),
    tool(
        "tree_ajax_get_drop_menu",
        "Get tree drop menu",
        endpoint("tree", "ajaxGetDropMenu"),
        (
            integer("rootID", "Root ID"),
            string("module", "Module"),
            string("method", "Method"),
            string("extra", "Extra parameters"),
        ),
        action="get tree drop menu",
        category="tree",
    ),
    tool(
        "tree_ajax_get_son_modules",
        "Get son modules",
        endpoint("tree", "ajaxGetSonModules"),
        (
            integer("moduleID", "Module ID"),
            integer("rootID", "Root ID"),
            string("type", "Module type"),
        ),
        action="get son modules",
        category="tree",
    ),
    tool(
        "search_build_old_form",
        "Build old search form",
        endpoint("search", "buildOldForm"),
        (string("module", "Module name", required=True),),
        action="build old form",
        category="search",
    ),
    post(
        "search_build_old_query",
        "Build old search query",
        endpoint("search", "buildOldQuery"),
        action="build old query",
        category="search",
    ),
    post(
        "search_save_old_query",
        "Save old search query",
        endpoint("search", "saveOldQuery"),
        (
            string("module", "Module name", required=True),
            string("onMenuBar", "On menu bar flag"),
        ),
        body=["module", "onMenuBar"],
        action="save old query",
        category="search",
    ),
    tool(
        "search_ajax_remove_menu",
        "Remove query from menu",
        endpoint("search", "ajaxRemoveMenu"),
        (integer("queryID", "Query ID", required=True),),
        action="remove query from menu",
        category="search",
    ),
]
