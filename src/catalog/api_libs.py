"""API library tools: libraries, releases, data structures and API entries."""

from .base import endpoint, integer, paging, param_names, post, string, tool

CATEGORY = "api_libs"

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")

_LIB_ID = integer("libID", "Library ID", required=True)
_STRUCT_ID = integer("structID", "Structure ID", required=True)
_API_ID = integer("apiID", "API ID", required=True)

_STRUCT_FIELDS = (
    string("name", "Structure name"),
    string("type", "Structure type"),
    string("desc", "Structure description"),
    string("content", "Structure content"),
)
_API_FIELDS = (
    string("title", "API title"),
    string("path", "API path"),
    string("method", "HTTP method", enum=HTTP_METHODS),
    string("requestType", "Request type"),
    string("desc", "API description"),
    string("params", "API parameters"),
    string("response", "API response"),
)
_LIB_FIELDS = (string("name", "Library name"), string("desc", "Library description"))


def _get(name: str, description: str, function: str, action: str, params=()):
    return tool(name, description, endpoint("api", function), params, action=action, category=CATEGORY)


def _post(name: str, description: str, function: str, action: str, keys, fields):
    return post(
        name,
        description,
        endpoint("api", function),
        (*keys, *fields),
        body=param_names(fields),
        action=action,
        category=CATEGORY,
    )


LIB_TOOLS = [
    _post(
        "create_api_lib",
        "Create a new API library in ZenTao",
        "createLib",
        "create API library",
        (
            string("type", "Library type", required=True, enum=("project", "product")),
            integer("objectID", "Object ID (project or product ID)", required=True),
        ),
        _LIB_FIELDS,
    ),
    _post(
        "edit_api_lib",
        "Edit an existing API library in ZenTao",
        "editLib",
        "edit API library",
        (integer("id", "Library ID", required=True),),
        _LIB_FIELDS,
    ),
    _get(
        "delete_api_lib",
        "Delete an API library from ZenTao",
        "deleteLib",
        "delete API library",
        (integer("libID", "Library ID to delete", required=True),),
    ),
]

RELEASE_TOOLS = [
    _get(
        "get_api_lib_releases",
        "Get releases for an API library",
        "releases",
        "get API library releases",
        (_LIB_ID, string("orderBy", "Order by field")),
    ),
    _post(
        "create_api_lib_release",
        "Create a new release for an API library",
        "createRelease",
        "create API library release",
        (_LIB_ID,),
        (
            string("name", "Release name"),
            string("desc", "Release description"),
            string("version", "Release version"),
        ),
    ),
    _get(
        "delete_api_lib_release",
        "Delete a release from an API library",
        "deleteRelease",
        "delete API library release",
        (_LIB_ID, integer("id", "Release ID to delete", required=True)),
    ),
]

STRUCT_TOOLS = [
    _get(
        "get_api_lib_structs",
        "Get structures for an API library",
        "struct",
        "get API library structures",
        (_LIB_ID, integer("releaseID", "Release ID"), *paging()),
    ),
    _post(
        "create_api_lib_struct",
        "Create a new structure for an API library",
        "createStruct",
        "create API library structure",
        (_LIB_ID,),
        _STRUCT_FIELDS,
    ),
    _post(
        "edit_api_lib_struct",
        "Edit an existing structure in an API library",
        "editStruct",
        "edit API library structure",
        (_LIB_ID, _STRUCT_ID),
        _STRUCT_FIELDS,
    ),
    _get(
        "delete_api_lib_struct",
        "Delete a structure from an API library",
        "deleteStruct",
        "delete API library structure",
        (_LIB_ID, integer("structID", "Structure ID to delete", required=True)),
    ),
]

API_TOOLS = [
    _post(
        "create_api",
        "Create a new API in ZenTao",
        "create",
        "create API",
        (
            _LIB_ID,
            integer("moduleID", "Module ID"),
            string("space", "Space type", enum=("api", "project", "product")),
        ),
        _API_FIELDS,
    ),
    _post("edit_api", "Edit an existing API in ZenTao", "edit", "edit API", (_API_ID,), _API_FIELDS),
    _get(
        "delete_api",
        "Delete an API from ZenTao",
        "delete",
        "delete API",
        (integer("apiID", "API ID to delete", required=True),),
    ),
    _get(
        "get_api",
        "Get API details from ZenTao",
        "view",
        "get API",
        (
            integer("libID", "Library ID"),
            integer("apiID", "API ID"),
            integer("moduleID", "Module ID"),
            integer("version", "Version"),
            integer("release", "Release"),
        ),
    ),
    _get(
        "get_apis",
        "Get list of APIs from ZenTao",
        "index",
        "get APIs",
        (
            integer("libID", "Library ID"),
            integer("moduleID", "Module ID"),
            integer("apiID", "API ID"),
            integer("version", "Version"),
            integer("release", "Release"),
            string("browseType", "Browse type"),
            string("params", "Parameters"),
            *paging(),
            string("mode", "Mode"),
            string("search", "Search term"),
        ),
    ),
]

TOOLS = [*LIB_TOOLS, *RELEASE_TOOLS, *STRUCT_TOOLS, *API_TOOLS]
