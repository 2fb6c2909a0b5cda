"""Read-only ZenTao resources and resource templates."""

from .base import endpoint, resource

_OBJECT_TYPES = ("projects", "executions", "products")

RESOURCES = [
    # Products and projects
    resource(
        "zentao://products",
        "ZenTao Product List",
        endpoint("product", "browse"),
        "List of all products in ZenTao",
    ),
    resource("zentao://product/{id}", "ZenTao Product Details", endpoint("product", "view")),
    resource(
        "zentao://projects",
        "ZenTao Project List",
        endpoint("project", "browse"),
        "List of all projects in ZenTao",
    ),
    resource("zentao://project/{id}", "ZenTao Project Details", endpoint("project", "view")),
    resource(
        "zentao://projects/{projectId}/executions",
        "ZenTao Project Executions",
        endpoint("execution", "browse"),
        keys={"projectId": "project"},
    ),
    resource(
        "zentao://projects/{projectId}/stories",
        "ZenTao Project Stories",
        endpoint("story", "browse"),
        keys={"projectId": "project"},
    ),
    resource("zentao://execution/{id}", "ZenTao Execution Details", endpoint("execution", "view")),
    # Stories, tasks, bugs and users
    resource(
        "zentao://products/{id}/stories",
        "ZenTao Product Stories",
        endpoint("story", "browse"),
        "Stories for a specific product (use ID in URI)",
        keys={"id": "product"},
    ),
    resource(
        "zentao://story/{id}",
        "ZenTao Story Details",
        endpoint("story", "view"),
        "Details of a specific story (use zentao://story/123)",
    ),
    resource(
        "zentao://executions/{id}/tasks",
        "ZenTao Execution Tasks",
        endpoint("task", "browse"),
        "Tasks for a specific execution (use ID in URI)",
        keys={"id": "execution"},
    ),
    resource(
        "zentao://task/{id}",
        "ZenTao Task Details",
        endpoint("task", "view"),
        "Details of a specific task (use zentao://task/123)",
    ),
    resource(
        "zentao://bugs", "ZenTao Bugs List", endpoint("bug", "browse"), "List of all bugs in ZenTao"
    ),
    resource(
        "zentao://products/{id}/bugs",
        "ZenTao Product Bugs",
        endpoint("bug", "browse"),
        "Bugs for a specific product (use ID in URI)",
        keys={"id": "product"},
    ),
    resource(
        "zentao://bug/{id}",
        "ZenTao Bug Details",
        endpoint("bug", "view"),
        "Details of a specific bug (use zentao://bug/123)",
    ),
    resource(
        "zentao://users",
        "ZenTao Users List",
        endpoint("user", "browse"),
        "List of all users in ZenTao",
    ),
    resource(
        "zentao://user/{id}",
        "ZenTao User Details",
        endpoint("user", "view"),
        "Details of a specific user (use zentao://user/123)",
    ),
    resource("zentao://user", "ZenTao My Profile", endpoint("my", "profile"), "Current user's profile"),
    # Plans, releases, builds
    resource(
        "zentao://plan/{id}",
        "ZenTao Product Plan Details",
        endpoint("productplan", "view"),
        "Details of a specific product plan (use zentao://plan/123)",
    ),
    resource(
        "zentao://projects/{projectId}/releases",
        "ZenTao Project Releases",
        endpoint("release", "browse"),
        keys={"projectId": "project"},
    ),
    resource(
        "zentao://products/{productId}/releases",
        "ZenTao Product Releases",
        endpoint("release", "browse"),
        keys={"productId": "product"},
    ),
    resource("zentao://builds/{buildID}", "ZenTao Build Details", endpoint("build", "view")),
    resource(
        "zentao://products/{productID}/builds",
        "ZenTao Product Builds",
        endpoint("build", "ajaxGetProductBuilds"),
    ),
    resource(
        "zentao://projects/{projectID}/builds",
        "ZenTao Project Builds",
        endpoint("build", "ajaxGetProjectBuilds"),
    ),
    resource(
        "zentao://executions/{executionID}/builds",
        "ZenTao Execution Builds",
        endpoint("build", "ajaxGetExecutionBuilds"),
    ),
    # Executions
    resource(
        "zentao://executions",
        "ZenTao All Executions",
        endpoint("execution", "all"),
        "List of all executions in ZenTao",
    ),
    resource(
        "zentao://executions/{executionID}", "ZenTao Execution Details", endpoint("execution", "view")
    ),
    resource(
        "zentao://executions/{executionID}/stories",
        "ZenTao Execution Stories",
        endpoint("execution", "story"),
    ),
    resource(
        "zentao://executions/{executionID}/bugs",
        "ZenTao Execution Bugs",
        endpoint("execution", "bug"),
    ),
    resource(
        "zentao://executions/{executionID}/team",
        "ZenTao Execution Team",
        endpoint("execution", "team"),
    ),
    resource(
        "zentao://executions/{executionID}/burn",
        "ZenTao Execution Burn Chart",
        endpoint("execution", "ajaxGetBurn"),
    ),
    resource(
        "zentao://executions/{executionID}/cfd",
        "ZenTao Execution CFD",
        endpoint("execution", "ajaxGetCFD"),
    ),
    resource(
        "zentao://executions/{executionID}/kanban",
        "ZenTao Execution Kanban",
        endpoint("execution", "ajaxGetExecutionKanban"),
    ),
    # Programs and stakeholders
    resource(
        "zentao://programs",
        "ZenTao Programs List",
        endpoint("program", "browse"),
        "List of all programs in ZenTao",
    ),
    resource(
        "zentao://programs/kanban",
        "ZenTao Programs Kanban",
        endpoint("program", "kanban"),
        "Programs kanban view",
    ),
    resource(
        "zentao://programs/{id}",
        "ZenTao Program Details",
        endpoint("program", "view"),
        keys={"id": "programID"},
    ),
    resource(
        "zentao://programs/{programId}/products",
        "ZenTao Program Products",
        endpoint("program", "product"),
        keys={"programId": "programID"},
    ),
    resource(
        "zentao://programs/{programId}/projects",
        "ZenTao Program Projects",
        endpoint("program", "project"),
        keys={"programId": "programID"},
    ),
    resource(
        "zentao://programs/{programId}/stakeholders",
        "ZenTao Program Stakeholders",
        endpoint("program", "stakeholder"),
        keys={"programId": "programID"},
    ),
    resource(
        "zentao://stakeholders",
        "ZenTao Stakeholders List",
        endpoint("stakeholder", "browse"),
        "List of all stakeholders in ZenTao",
    ),
    resource(
        "zentao://stakeholders/{id}",
        "ZenTao Stakeholder Details",
        endpoint("stakeholder", "view"),
        keys={"id": "stakeholderID"},
    ),
    resource(
        "zentao://projects/{projectId}/stakeholders",
        "ZenTao Project Stakeholders",
        endpoint("stakeholder", "browse"),
        keys={"projectId": "projectID"},
    ),
    resource(
        "zentao://stakeholders/{id}/issues",
        "ZenTao Stakeholder Issues",
        endpoint("stakeholder", "userIssue"),
        keys={"id": "stakeholderID"},
    ),
    # Personal views
    resource(
        "zentao://my/dashboard",
        "ZenTao My Dashboard",
        endpoint("my", "index"),
        "User's personal dashboard in ZenTao",
    ),
    resource(
        "zentao://my/profile",
        "ZenTao My Profile",
        endpoint("my", "profile"),
        "User's profile information",
    ),
    resource(
        "zentao://my/calendar",
        "ZenTao My Calendar",
        endpoint("my", "calendar"),
        "User's calendar view",
    ),
    resource("zentao://my/work/{mode}", "ZenTao My Work", endpoint("my", "work")),
    resource(
        "zentao://my/todos", "ZenTao My Todos", endpoint("my", "todo"), "User's personal todos"
    ),
    resource(
        "zentao://my/stories",
        "ZenTao My Stories",
        endpoint("my", "story"),
        "User's personal stories",
    ),
    resource(
        "zentao://my/tasks", "ZenTao My Tasks", endpoint("my", "task"), "User's personal tasks"
    ),
    resource("zentao://my/bugs", "ZenTao My Bugs", endpoint("my", "bug"), "User's personal bugs"),
    resource(
        "zentao://my/projects",
        "ZenTao My Projects",
        endpoint("my", "project"),
        "User's personal projects",
    ),
    resource(
        "zentao://my/executions",
        "ZenTao My Executions",
        endpoint("my", "execution"),
        "User's personal executions",
    ),
    resource("zentao://my/team", "ZenTao My Team", endpoint("my", "team"), "User's team information"),
    resource(
        "zentao://my/dynamic", "ZenTao My Dynamic", endpoint("my", "dynamic"), "User's activity feed"
    ),
    # Todos
    resource("zentao://todos", "ZenTao Todos List", endpoint("my", "todo"), "List of all todos"),
    resource(
        "zentao://todos/{id}", "ZenTao Todo Details", endpoint("todo", "view"), keys={"id": "todoID"}
    ),
    resource(
        "zentao://todos/{id}/detail",
        "ZenTao Todo AJAX Details",
        endpoint("todo", "ajaxGetDetail"),
        keys={"id": "todoID"},
    ),
    resource("zentao://todos/status/{status}", "ZenTao Todos by Status", endpoint("my", "todo")),
    resource("zentao://todos/type/{type}", "ZenTao Todos by Type", endpoint("my", "todo")),
    # Requirements and epics
    resource(
        "zentao://requirements/{requirementID}",
        "ZenTao Requirement Details",
        endpoint("requirement", "view"),
        keys={"requirementID": "storyID"},
    ),
    resource(
        "zentao://requirements/{requirementID}/stories",
        "ZenTao Requirement Stories",
        endpoint("requirement", "linkStory"),
        keys={"requirementID": "storyID"},
    ),
    resource(
        "zentao://requirements/{requirementID}/linked-requirements",
        "ZenTao Requirement Linked Requirements",
        endpoint("requirement", "linkRequirements"),
        keys={"requirementID": "storyID"},
    ),
    resource(
        "zentao://products/{productID}/requirements",
        "ZenTao Product Requirements",
        endpoint("requirement", "import"),
    ),
    resource(
        "zentao://projects/{projectID}/requirements",
        "ZenTao Project Requirements",
        endpoint("requirement", "import"),
    ),
    resource(
        "zentao://executions/{executionID}/requirements",
        "ZenTao Execution Requirements",
        endpoint("requirement", "import"),
    ),
    resource(
        "zentao://epics/{epicID}",
        "ZenTao Epic Details",
        endpoint("epic", "view"),
        keys={"epicID": "storyID"},
    ),
    resource(
        "zentao://epics/{epicID}/stories",
        "ZenTao Epic Stories",
        endpoint("epic", "linkStories"),
        keys={"epicID": "storyID"},
    ),
    resource(
        "zentao://epics/{epicID}/requirements",
        "ZenTao Epic Requirements",
        endpoint("epic", "linkRequirements"),
        keys={"epicID": "storyID"},
    ),
    resource(
        "zentao://products/{productID}/epics", "ZenTao Product Epics", endpoint("epic", "import")
    ),
    resource(
        "zentao://projects/{projectID}/epics", "ZenTao Project Epics", endpoint("epic", "import")
    ),
    resource(
        "zentao://executions/{executionID}/epics",
        "ZenTao Execution Epics",
        endpoint("epic", "import"),
    ),
    # Test management
    resource("zentao://qa", "ZenTao QA Index", endpoint("qa", "index"), "QA module index"),
    resource(
        "zentao://testtasks",
        "ZenTao Test Task List",
        endpoint("testtask", "browse"),
        "List of all test tasks in ZenTao",
    ),
    resource("zentao://testtask/{id}", "ZenTao Test Task Details", endpoint("testtask", "view")),
    resource(
        "zentao://projects/{projectId}/testtasks",
        "ZenTao Project Test Tasks",
        endpoint("testtask", "browse"),
        keys={"projectId": "project"},
    ),
    resource(
        "zentao://testsuites/{suiteID}", "ZenTao Test Suite", endpoint("testsuite", "view")
    ),
    resource(
        "zentao://products/{productID}/testsuites",
        "ZenTao Product Test Suites",
        endpoint("testsuite", "browse"),
    ),
    resource(
        "zentao://testreports/{reportID}", "ZenTao Test Report", endpoint("testreport", "view")
    ),
    resource(
        "zentao://{objectType}/{objectID}/testreports",
        "ZenTao Object Test Reports",
        endpoint("testreport", "browse"),
        enums={"objectType": _OBJECT_TYPES},
    ),
    resource(
        "zentao://caselibs",
        "ZenTao Case Library List",
        endpoint("caselib", "index"),
        "List of all case libraries in ZenTao",
    ),
    resource("zentao://caselibs/{libID}", "ZenTao Case Library", endpoint("caselib", "view")),
    resource(
        "zentao://caselibs/{libID}/cases",
        "ZenTao Case Library Cases",
        endpoint("caselib", "browse"),
    ),
    resource(
        "zentao://caselibs/{libID}/cases/{caseID}",
        "ZenTao Case Library Case",
        endpoint("caselib", "viewCase"),
    ),
    # Kanban
    resource(
        "zentao://kanban/spaces",
        "ZenTao Kanban Spaces",
        endpoint("kanban", "space"),
        "List of all kanban spaces",
    ),
    resource(
        "zentao://kanban/spaces/{spaceID}",
        "ZenTao Kanban Space Details",
        endpoint("kanban", "space"),
    ),
    resource(
        "zentao://kanban/cards/{cardID}", "ZenTao Kanban Card Details", endpoint("kanban", "viewCard")
    ),
    resource("zentao://kanban/{kanbanID}", "ZenTao Kanban Board Details", endpoint("kanban", "view")),
    resource(
        "zentao://kanban/{kanbanID}/regions/{regionID}",
        "ZenTao Kanban Region Details",
        endpoint("kanban", "view"),
    ),
    resource(
        "zentao://kanban/{kanbanID}/regions/{regionID}/lanes/{laneID}",
        "ZenTao Kanban Lane Details",
        endpoint("kanban", "ajaxGetLanes"),
    ),
    resource(
        "zentao://kanban/{kanbanID}/regions/{regionID}/lanes/{laneID}/columns/{columnID}",
        "ZenTao Kanban Column Details",
        endpoint("kanban", "ajaxGetColumns"),
    ),
    resource(
        "zentao://kanban/{kanbanID}/regions/{regionID}/archived-cards",
        "ZenTao Kanban Archived Cards",
        endpoint("kanban", "viewArchivedCard"),
    ),
    resource(
        "zentao://kanban/{kanbanID}/regions/{regionID}/archived-columns",
        "ZenTao Kanban Archived Columns",
        endpoint("kanban", "viewArchivedColumn"),
    ),
    # Documentation and API libraries
    resource("zentao://api-libs", "ZenTao API Libraries Index", endpoint("api", "index")),
    resource(
        "zentao://api-libs/{libId}/releases",
        "ZenTao API Library Releases",
        endpoint("api", "releases"),
        keys={"libId": "libID"},
    ),
    resource(
        "zentao://api-libs/{libId}/structs",
        "ZenTao API Library Structures",
        endpoint("api", "struct"),
        keys={"libId": "libID"},
    ),
    resource(
        "zentao://api-libs/{libId}/releases/{releaseId}/structs",
        "ZenTao API Library Structures by Release",
        endpoint("api", "struct"),
        keys={"libId": "libID", "releaseId": "releaseID"},
    ),
    resource(
        "zentao://api-libs/{libId}/apis/{apiId}",
        "ZenTao API Details",
        endpoint("api", "view"),
        keys={"libId": "libID", "apiId": "apiID"},
    ),
    resource(
        "zentao://api-libs/{libId}/apis",
        "ZenTao API Library APIs",
        endpoint("api", "index"),
        keys={"libId": "libID"},
    ),
    # Organisation
    resource(
        "zentao://entries",
        "ZenTao Entries List",
        endpoint("entry", "browse"),
        "List of all entries in ZenTao",
    ),
    resource("zentao://entries/{id}", "ZenTao Entry Details", endpoint("entry", "log")),
    resource("zentao://entries/{id}/log", "ZenTao Entry Log", endpoint("entry", "log")),
    resource(
        "zentao://spaces", "ZenTao Spaces", endpoint("space", "browse"), "List of all spaces in ZenTao"
    ),
    resource("zentao://spaces/{spaceID}", "ZenTao Space Details", endpoint("space", "browse")),
    resource(
        "zentao://spaces/{spaceID}/applications",
        "ZenTao Space Applications",
        endpoint("space", "browse"),
    ),
    resource(
        "zentao://personnel/accessible/{programID}",
        "ZenTao Personnel Accessible",
        endpoint("personnel", "accessible"),
    ),
    resource(
        "zentao://personnel/invest/{programID}",
        "ZenTao Personnel Invest",
        endpoint("personnel", "invest"),
    ),
    resource(
        "zentao://personnel/whitelist/{objectID}",
        "ZenTao Personnel Whitelist",
        endpoint("personnel", "whitelist"),
    ),
    # Data transfer
    resource(
        "zentao://transfer/{module}/export-template",
        "ZenTao Export Template",
        endpoint("transfer", "exportTemplate"),
    ),
    resource(
        "zentao://transfer/{module}/import-status",
        "ZenTao Import Status",
        endpoint("transfer", "import"),
    ),
    resource(
        "zentao://transfer/exports",
        "ZenTao Export History",
        endpoint("transfer", "history") + "&type=export",
        "History of data exports",
    ),
    resource(
        "zentao://transfer/imports",
        "ZenTao Import History",
        endpoint("transfer", "history") + "&type=import",
        "History of data imports",
    ),
    # AI
    resource(
        "zentao://ai/admin",
        "AI Module Admin Overview",
        endpoint("ai", "adminIndex"),
        "AI module administrative interface and overview",
    ),
    resource(
        "zentao://ai/mini-programs",
        "AI Mini Programs List",
        endpoint("ai", "miniPrograms"),
        "List of available AI mini programs",
    ),
    resource(
        "zentao://ai/mini-programs/published",
        "Published Mini Programs",
        endpoint("ai", "miniPrograms") + "&status=published",
        "List of published AI mini programs",
    ),
    resource(
        "zentao://ai/mini-programs/{appID}",
        "Mini Program Details",
        endpoint("ai", "miniProgramView"),
    ),
    resource(
        "zentao://ai/prompts",
        "AI Prompts List",
        endpoint("ai", "prompts"),
        "List of available AI prompts",
    ),
    resource(
        "zentao://ai/prompts/published",
        "Published AI Prompts",
        endpoint("ai", "prompts") + "&status=published",
        "List of published AI prompts",
    ),
    resource(
        "zentao://ai/prompts/testing",
        "Testing AI Prompts",
        endpoint("ai", "prompts") + "&status=testing",
        "List of prompts in testing phase",
    ),
    resource("zentao://ai/prompts/{id}", "AI Prompt Details", endpoint("ai", "promptView")),
    resource(
        "zentao://ai/role-templates",
        "AI Role Templates",
        endpoint("ai", "roleTemplates"),
        "Available AI role templates",
    ),
    resource(
        "zentao://ai/prompt-execution/status",
        "Prompt Execution Status",
        endpoint("ai", "promptExecutionStatus"),
        "Current status of prompt executions",
    ),
    resource(
        "zentao://ai/analytics",
        "AI Module Analytics",
        endpoint("ai", "analytics"),
        "Analytics and usage statistics for AI features",
    ),
    resource(
        "zentao://zai/settings",
        "ZenTao AI Settings",
        endpoint("zai", "setting"),
        "Current ZenTao AI module configuration and settings",
    ),
    resource(
        "zentao://zai/token",
        "ZenTao AI Authentication Token",
        endpoint("zai", "ajaxGetToken"),
        "Current authentication token for AI services",
    ),
    resource(
        "zentao://zai/vectorization/status",
        "Vectorization Status",
        endpoint("zai", "vectorized"),
        "Current vectorization status and progress",
    ),
    resource(
        "zentao://zai/vectorization/stats",
        "Vectorization Statistics",
        endpoint("zai", "vectorizationStats"),
        "Statistics and metrics for vectorization operations",
    ),
    resource(
        "zentao://zai/models",
        "Available AI Models",
        endpoint("zai", "models"),
        "List of available AI models and their capabilities",
    ),
    resource(
        "zentao://zai/health",
        "AI Service Health Status",
        endpoint("zai", "health"),
        "Health status and connectivity information for AI services",
    ),
    resource(
        "zentao://zai/usage",
        "AI Usage Metrics",
        endpoint("zai", "usage"),
        "Usage statistics and metrics for AI features",
    ),
    # ZenTao nodes
    resource(
        "zentao://zanode/instructions",
        "ZenTao Node Instructions",
        endpoint("zanode", "instruction"),
        "Instructions for ZenTao Node management",
    ),
    resource(
        "zentao://zanode/nodes",
        "ZenTao Nodes List",
        endpoint("zanode", "ajaxGetNodes"),
        "List of all available ZenTao nodes",
    ),
    resource("zentao://zanode/nodes/{id}", "ZenTao Node Details", endpoint("zanode", "view")),
    resource(
        "zentao://zanode/nodes/{id}/vnc",
        "ZenTao Node VNC Access",
        endpoint("zanode", "getVNC"),
        keys={"id": "nodeID"},
    ),
    resource(
        "zentao://zanode/nodes/{id}/snapshots",
        "ZenTao Node Snapshots",
        endpoint("zanode", "browseSnapshot"),
        keys={"id": "nodeID"},
    ),
    resource(
        "zentao://zanode/nodes/{id}/tasks",
        "ZenTao Node Tasks",
        endpoint("zanode", "ajaxGetTaskStatus"),
        keys={"id": "nodeID"},
    ),
    resource(
        "zentao://zanode/hosts/{hostID}/nodes", "Host Nodes List", endpoint("zanode", "nodeList")
    ),
    resource(
        "zentao://zanode/hosts/{hostID}/images",
        "Host Images List",
        endpoint("zanode", "ajaxGetImages"),
    ),
    resource(
        "zentao://zanode/hosts/{hostID}/services",
        "Host Service Status",
        endpoint("zanode", "ajaxGetServiceStatus"),
    ),
    resource(
        "zentao://zanode/images/{imageID}",
        "ZenTao Node Image Details",
        endpoint("zanode", "ajaxGetImage"),
    ),
]
