"""Documentation space, library, document, template and catalog tools."""

from .base import boolean, endpoint, integer, paging, param_names, post, string, tool

CATEGORY = "docs"

OBJECT_TYPES = ("product", "project", "execution", "custom")
_BROWSE_TYPE = string("browseType", "Browse type: all|draft|bysearch", enum=("all", "draft", "bysearch"))
_DOC_ID = integer("docID", "Document ID", required=True)
_LIB_ID = integer("libID", "Library ID", required=True)

_UPLOAD_FIELDS = (
    string("objectType", "Object type: product|project|execution|custom", required=True, enum=OBJECT_TYPES),
    integer("objectID", "Object ID", required=True),
)
_CREATE_FIELDS = (
    *_UPLOAD_FIELDS,
    string(
        "docType",
        "Document type: html|word|ppt|excel",
        required=True,
        enum=("html", "word", "ppt", "excel"),
    ),
    integer("libID", "Library ID"),
    integer("moduleID", "Module ID"),
    integer("appendLib", "Append library"),
)
_UPLOAD_DOC_FIELDS = (
    *_UPLOAD_FIELDS,
    string(
        "docType",
        "Document type: html|word|ppt|excel|attachment",
        required=True,
        enum=("html", "word", "ppt", "excel", "attachment"),
    ),
    integer("libID", "Library ID"),
    integer("moduleID", "Module ID"),
)
_LIB_FIELDS = (
    string(
        "type",
        "Library type: api|project|product|execution|custom|mine",
        required=True,
        enum=("api", "project", "product", "execution", "custom", "mine"),
    ),
    integer("objectID", "Object ID"),
    integer("libID", "Library ID"),
)
_EDIT_FIELDS = (boolean("comment", "Include comments"), integer("appendLib", "Append library"))
_TEMPLATE_FIELDS = (integer("moduleID", "Module ID", required=True),)


def _get(name: str, description: str, function: str, action: str, params=()):
    return tool(name, description, endpoint("doc", function), params, action=action, category=CATEGORY)


def _form(name: str, description: str, function: str, action: str, key=None, fields=()):
    """POST whose fields all travel in the body; key, when given, stays on the query."""
    return post(
        name,
        description,
        endpoint("doc", function),
        (key, *fields) if key is not None else fields,
        body=param_names(fields),
        action=action,
        category=CATEGORY,
    )


def _space(name: str, description: str, function: str, object_required: bool):
    return _get(
        name,
        description,
        function,
        description[0].lower() + description[1:],
        (
            integer("objectID", "Object ID", required=object_required),
            integer("libID", "Library ID"),
            integer("moduleID", "Module ID"),
            _BROWSE_TYPE,
            integer("param", "Parameter value"),
            *paging(),
            integer("docID", "Document ID"),
            string("search", "Search term"),
        ),
    )


SPACE_TOOLS = [
    _form(
        "doc_create_space",
        "Create a new documentation space",
        "createSpace",
        "create doc space",
        fields=(string("type", "Space type", required=True),),
    ),
    _get(
        "doc_edit_space",
        "Edit a documentation space",
        "editSpace",
        "edit doc space",
        (integer("spaceID", "Space ID", required=True),),
    ),
    _get("doc_delete_space", "Delete a documentation space", "deleteSpace", "delete doc space", (_LIB_ID,)),
    _space("doc_my_space", "Browse my documentation space", "mySpace", False),
    _space("doc_product_space", "Browse product documentation space", "productSpace", True),
    _space("doc_project_space", "Browse project documentation space", "projectSpace", True),
    _get(
        "doc_table_contents",
        "Get table of contents for documentation",
        "tableContents",
        "get doc table of contents",
        (
            string(
                "type",
                "Type: custom|product|project|execution|doctemplate",
                required=True,
                enum=("custom", "product", "project", "execution", "doctemplate"),
            ),
            integer("objectID", "Object ID"),
            integer("libID", "Library ID"),
            integer("moduleID", "Module ID"),
            _BROWSE_TYPE,
            integer("param", "Parameter value"),
            *paging(),
        ),
    ),
]

LIB_TOOLS = [
    _form("doc_create_lib", "Create a new documentation library", "createLib", "create doc library", fields=_LIB_FIELDS),
    _get("doc_edit_lib", "Edit a documentation library", "editLib", "edit doc library", (_LIB_ID,)),
    _get("doc_delete_lib", "Delete a documentation library", "deleteLib", "delete doc library", (_LIB_ID,)),
]

DOC_TOOLS = [
    _form("doc_create", "Create a new document", "create", "create doc", fields=_CREATE_FIELDS),
    _form("doc_edit", "Edit a document", "edit", "edit doc", _DOC_ID, _EDIT_FIELDS),
    _get("doc_delete", "Delete a document", "delete", "delete doc", (_DOC_ID,)),
    _get("doc_view", "View a document", "view", "view doc", (_DOC_ID, integer("version", "Document version"))),
    _form("doc_upload_docs", "Upload documents", "uploadDocs", "upload docs", fields=_UPLOAD_DOC_FIELDS),
    _get(
        "doc_show_files",
        "Show files in documentation",
        "showFiles",
        "show doc files",
        (
            string("type", "Type"),
            integer("objectID", "Object ID"),
            string("viewType", "View type"),
            string("browseType", "Browse type"),
            integer("param", "Parameter value"),
            *paging(),
            string("searchTitle", "Search title"),
        ),
    ),
    _get(
        "doc_delete_file",
        "Delete a file from document",
        "deleteFile",
        "delete doc file",
        (_DOC_ID, integer("fileID", "File ID", required=True), string("confirm", "Confirmation string")),
    ),
]

TEMPLATE_TOOLS = [
    _form(
        "doc_create_template",
        "Create a new document template",
        "createTemplate",
        "create doc template",
        fields=_TEMPLATE_FIELDS,
    ),
    _form(
        "doc_edit_template",
        "Edit a document template",
        "editTemplate",
        "edit doc template",
        integer("docID", "Template/Document ID", required=True),
    ),
    _get(
        "doc_delete_template",
        "Delete a document template",
        "deleteTemplate",
        "delete doc template",
        (integer("templateID", "Template ID", required=True),),
    ),
    _get(
        "doc_browse_template",
        "Browse document templates",
        "browseTemplate",
        "browse doc templates",
        (
            integer("libID", "Library ID"),
            string("type", "Template type"),
            integer("docID", "Document ID"),
            *paging(rec_total=False),
        ),
    ),
]

CATALOG_TOOLS = [
    _get(
        "doc_edit_catalog",
        "Edit a document catalog",
        "editCatalog",
        "edit doc catalog",
        (
            integer("moduleID", "Module ID", required=True),
            string("type", "Type: doc|api", required=True, enum=("doc", "api")),
        ),
    ),
    _get(
        "doc_delete_catalog",
        "Delete a document catalog",
        "deleteCatalog",
        "delete doc catalog",
        (integer("moduleID", "Module ID", required=True),),
    ),
]

TOOLS = [*SPACE_TOOLS, *LIB_TOOLS, *DOC_TOOLS, *TEMPLATE_TOOLS, *CATALOG_TOOLS]
