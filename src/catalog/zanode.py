"""ZenTao node (ZaNode) virtual machine tools: nodes, images, snapshots and ZTF scripts."""

from .base import endpoint, integer, paging, post, string, tool

CATEGORY = "zanode"

_NODE_ID = integer("nodeID", "Node ID", required=True)
_HOST_ID = integer("hostID", "Host ID", required=True)
_IMAGE_ID = integer("imageID", "Image ID", required=True)
_SNAPSHOT_ID = integer("snapshotID", "Snapshot ID", required=True)


def _get(name: str, description: str, function: str, action: str, params=()):
    return tool(name, description, endpoint("zanode", function), params, action=action, category=CATEGORY)


def _post_data(
    name: str,
    description: str,
    function: str,
    action: str,
    key,
    field: str,
    field_description: str,
    required: bool = True,
):
    """POST one JSON-encoded configuration string under its own body key."""
    return post(
        name,
        description,
        endpoint("zanode", function),
        (key, string(field, field_description, required=required)),
        body=[field],
        action=action,
        category=CATEGORY,
    )


def _node_action(verb: str, description: str):
    return _get(f"{verb}_zanode", description, verb, f"{verb} node", (_NODE_ID,))


NODE_TOOLS = [
    _get(
        "get_zanode_instructions",
        "Get instructions for ZenTao Node management",
        "instruction",
        "get node instructions",
    ),
    _get(
        "browse_zanodes",
        "Browse ZenTao nodes with filtering and pagination",
        "browse",
        "browse nodes",
        (string("browseType", "Browse type filter"), string("param", "Additional filter parameter"), *paging()),
    ),
    _get(
        "get_zanode_list",
        "Get list of nodes for a specific host",
        "nodeList",
        "get node list",
        (_HOST_ID, string("orderBy", "Sort order")),
    ),
    _get("get_zanodes", "Get all available nodes", "ajaxGetNodes", "get nodes"),
    _post_data(
        "create_zanode",
        "Create a new ZenTao node",
        "create",
        "create node",
        _HOST_ID,
        "node_data",
        "Node configuration data as JSON string",
    ),
    _post_data(
        "edit_zanode",
        "Edit an existing ZenTao node",
        "edit",
        "edit node",
        integer("id", "Node ID", required=True),
        "node_data",
        "Updated node configuration data as JSON string",
    ),
    _get(
        "view_zanode",
        "View details of a specific ZenTao node",
        "view",
        "view node",
        (integer("id", "Node ID", required=True),),
    ),
    _node_action("start", "Start a ZenTao node"),
    _node_action("close", "Close a ZenTao node"),
    _node_action("suspend", "Suspend a ZenTao node"),
    _node_action("reboot", "Reboot a ZenTao node"),
    _node_action("resume", "Resume a suspended ZenTao node"),
    _node_action("destroy", "Destroy a ZenTao node"),
    _get(
        "get_zanode_vnc",
        "Get VNC access information for a ZenTao node",
        "getVNC",
        "get node VNC",
        (_NODE_ID,),
    ),
    _get(
        "get_zanode_task_status",
        "Get task status for a node",
        "ajaxGetTaskStatus",
        "get node task status",
        (
            _NODE_ID,
            integer("taskID", "Task ID"),
            string("type", "Task type"),
            string("status", "Task status filter"),
        ),
    ),
    _get(
        "get_zanode_service_status",
        "Get service status for a host",
        "ajaxGetServiceStatus",
        "get node service status",
        (_HOST_ID,),
    ),
    _get(
        "install_zanode_service",
        "Install a service on a node",
        "ajaxInstallService",
        "install node service",
        (_NODE_ID, string("service", "Service name", required=True)),
    ),
]

IMAGE_TOOLS = [
    _post_data(
        "create_zanode_image",
        "Create an image from a ZenTao node",
        "createImage",
        "create node image",
        _NODE_ID,
        "image_data",
        "Image configuration data as JSON string",
        required=False,
    ),
    _get("get_zanode_images", "Get available images for a host", "ajaxGetImages", "get node images", (_HOST_ID,)),
    _get("get_zanode_image", "Get details of a specific image", "ajaxGetImage", "get node image", (_IMAGE_ID,)),
    _post_data(
        "update_zanode_image",
        "Update an image configuration",
        "ajaxUpdateImage",
        "update node image",
        _IMAGE_ID,
        "image_data",
        "Updated image configuration data as JSON string",
    ),
]

SNAPSHOT_TOOLS = [
    _post_data(
        "create_zanode_snapshot",
        "Create a snapshot of a ZenTao node",
        "createSnapshot",
        "create node snapshot",
        _NODE_ID,
        "snapshot_data",
        "Snapshot configuration data as JSON string",
        required=False,
    ),
    _post_data(
        "edit_zanode_snapshot",
        "Edit a snapshot configuration",
        "editSnapshot",
        "edit node snapshot",
        _SNAPSHOT_ID,
        "snapshot_data",
        "Updated snapshot configuration data as JSON string",
    ),
    _get(
        "delete_zanode_snapshot",
        "Delete a snapshot",
        "deleteSnapshot",
        "delete node snapshot",
        (_SNAPSHOT_ID,),
    ),
    _get(
        "browse_zanode_snapshots",
        "Browse snapshots for a node with pagination",
        "browseSnapshot",
        "browse node snapshots",
        (_NODE_ID, string("browseType", "Browse type filter"), *paging()),
    ),
    _get(
        "restore_zanode_snapshot",
        "Restore a node from a snapshot",
        "restoreSnapshot",
        "restore node snapshot",
        (_NODE_ID, _SNAPSHOT_ID),
    ),
]

SCRIPT_TOOLS = [
    _get(
        "get_zanode_ztf_script",
        "Get ZTF script for a node",
        "ajaxGetZTFScript",
        "get ZTF script",
        (string("type", "Script type", required=True), integer("objectID", "Object ID", required=True)),
    ),
    _post_data(
        "run_zanode_ztf_script",
        "Run a ZTF script",
        "ajaxRunZTFScript",
        "run ZTF script",
        integer("scriptID", "Script ID", required=True),
        "script_data",
        "Script execution data as JSON string",
        required=False,
    ),
]

TOOLS = [*NODE_TOOLS, *IMAGE_TOOLS, *SNAPSHOT_TOOLS, *SCRIPT_TOOLS]
