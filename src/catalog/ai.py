"""AI tools: prompts, mini programs, AI apps and ZenTao AI (ZAI) settings."""

from .base import boolean, endpoint, integer, paging, post, string, tool

CATEGORY = "ai"

_PROMPT_ID = integer("promptID", "Prompt ID", required=True)
_APP_ID = string("appID", "Mini program application ID", required=True)


def _prompt_step(name: str, description: str, function: str, field: str, field_description: str, action: str):
    """A POST that stores one JSON field on a prompt."""
    return post(
        name,
        description,
        endpoint("ai", function),
        (_PROMPT_ID, string(field, field_description, required=True)),
        body=[field],
        action=action,
        category=CATEGORY,
    )


MINI_PROGRAM_TOOLS = [
    tool(
        "get_ai_admin_index",
        "Get AI module admin interface overview",
        endpoint("ai", "adminIndex"),
        action="get AI admin index",
        category=CATEGORY,
    ),
    tool(
        "get_mini_programs",
        "Get list of AI mini programs with filtering",
        endpoint("ai", "miniPrograms"),
        (
            string("category", "Filter by category"),
            string("status", "Filter by status"),
            *paging(),
        ),
        action="get mini programs",
        category=CATEGORY,
    ),
    post(
        "edit_mini_program_category",
        "Edit mini program category",
        endpoint("ai", "editMiniProgramCategory"),
        (string("category_data", "Category data as JSON string", required=True),),
        body=["category_data"],
        action="edit mini program category",
        category=CATEGORY,
    ),
    tool(
        "publish_mini_program",
        "Publish an AI mini program",
        endpoint("ai", "publishMiniProgram"),
        (_APP_ID,),
        action="publish mini program",
        category=CATEGORY,
    ),
    tool(
        "unpublish_mini_program",
        "Unpublish an AI mini program",
        endpoint("ai", "unpublishMiniProgram"),
        (_APP_ID,),
        action="unpublish mini program",
        category=CATEGORY,
    ),
    post(
        "import_mini_program",
        "Import AI mini program",
        endpoint("ai", "importMiniProgram"),
        (string("import_data", "Import data as JSON string", required=True),),
        body=["import_data"],
        action="import mini program",
        category=CATEGORY,
    ),
]

PROMPT_TOOLS = [
    tool(
        "get_prompts",
        "Get list of AI prompts with filtering",
        endpoint("ai", "prompts"),
        (
            string("module", "Filter by module"),
            string("status", "Filter by status"),
            *paging(),
        ),
        action="get prompts",
        category=CATEGORY,
    ),
    tool(
        "get_prompt_view",
        "Get detailed view of a specific AI prompt",
        endpoint("ai", "promptView"),
        (integer("id", "Prompt ID", required=True),),
        action="get prompt view",
        category=CATEGORY,
    ),
    post(
        "create_prompt",
        "Create a new AI prompt",
        endpoint("ai", "createPrompt"),
        (string("prompt_data", "Prompt data as JSON string", required=True),),
        body=["prompt_data"],
        action="create prompt",
        category=CATEGORY,
    ),
    post(
        "edit_prompt",
        "Edit an existing AI prompt",
        endpoint("ai", "promptEdit"),
        (
            integer("id", "Prompt ID", required=True),
            string("prompt_data", "Updated prompt data as JSON string", required=True),
        ),
        body=["prompt_data"],
        action="edit prompt",
        category=CATEGORY,
    ),
    tool(
        "delete_prompt",
        "Delete an AI prompt",
        endpoint("ai", "promptDelete"),
        (integer("prompt", "Prompt ID to delete", required=True),),
        action="delete prompt",
        category=CATEGORY,
    ),
    _prompt_step(
        "assign_prompt_role",
        "Assign role to an AI prompt",
        "promptAssignRole",
        "role_data",
        "Role assignment data as JSON string",
        "assign prompt role",
    ),
    _prompt_step(
        "select_prompt_data_source",
        "Select data source for an AI prompt",
        "promptSelectDataSource",
        "data_source",
        "Data source configuration as JSON string",
        "select prompt data source",
    ),
    _prompt_step(
        "set_prompt_purpose",
        "Set purpose for an AI prompt",
        "promptSetPurpose",
        "purpose",
        "Prompt purpose description",
        "set prompt purpose",
    ),
    _prompt_step(
        "set_prompt_target_form",
        "Set target form for an AI prompt",
        "promptSetTargetForm",
        "target_form",
        "Target form configuration as JSON string",
        "set prompt target form",
    ),
    post(
        "finalize_prompt",
        "Finalize an AI prompt",
        endpoint("ai", "promptFinalize"),
        (_PROMPT_ID, string("final_config", "Final configuration as JSON string")),
        body=["final_config"],
        action="finalize prompt",
        category=CATEGORY,
    ),
    tool(
        "execute_prompt",
        "Execute an AI prompt",
        endpoint("ai", "promptExecute"),
        (
            integer("promptId", "Prompt ID", required=True),
            integer("objectId", "Object ID to execute prompt on", required=True),
            boolean("auto", "Auto open target form and apply changes"),
        ),
        action="execute prompt",
        category=CATEGORY,
    ),
    tool(
        "reset_prompt_execution",
        "Reset prompt execution state",
        endpoint("ai", "promptExecutionReset"),
        (boolean("failed", "Whether the execution failed"),),
        action="reset prompt execution",
        category=CATEGORY,
    ),
    post(
        "audit_prompt",
        "Audit an AI prompt execution",
        endpoint("ai", "promptAudit"),
        (
            integer("promptId", "Prompt ID", required=True),
            integer("objectId", "Object ID", required=True),
            boolean("exit", "Exit flag"),
            string("audit_data", "Audit data as JSON string"),
        ),
        body=["audit_data"],
        action="audit prompt",
        category=CATEGORY,
    ),
    tool(
        "publish_prompt",
        "Publish an AI prompt",
        endpoint("ai", "promptPublish"),
        (
            integer("id", "Prompt ID", required=True),
            boolean("backToTestingLocation", "Back to testing location flag"),
        ),
        action="publish prompt",
        category=CATEGORY,
    ),
    tool(
        "unpublish_prompt",
        "Unpublish an AI prompt",
        endpoint("ai", "promptUnpublish"),
        (integer("id", "Prompt ID", required=True),),
        action="unpublish prompt",
        category=CATEGORY,
    ),
    tool(
        "get_testing_location",
        "Get testing location for a prompt",
        endpoint("ai", "ajaxGetTestingLocation"),
        (
            _PROMPT_ID,
            string("module", "Module name"),
            string("targetForm", "Target form name"),
        ),
        action="get testing location",
        category=CATEGORY,
    ),
    post(
        "get_role_templates",
        "Get AI role templates",
        endpoint("ai", "roleTemplates"),
        (string("template_data", "Template filter data as JSON string"),),
        body=["template_data"],
        action="get role templates",
        category=CATEGORY,
    ),
]

AIAPP_TOOLS = [
    tool(
        "aiapp_view",
        "View AI app",
        endpoint("aiapp", "view"),
        (string("id", "App ID"),),
        action="view AI app",
        category=CATEGORY,
    ),
    tool(
        "aiapp_browse_mini_program",
        "Browse AI mini programs",
        endpoint("aiapp", "browseMiniProgram"),
        (string("id", "ID filter"),),
        action="browse mini programs",
        category=CATEGORY,
    ),
    tool(
        "aiapp_mini_program_chat",
        "Mini program chat",
        endpoint("aiapp", "miniProgramChat"),
        (string("id", "Chat ID"),),
        action="open mini program chat",
        category=CATEGORY,
    ),
    tool(
        "aiapp_collect_mini_program",
        "Collect mini program",
        endpoint("aiapp", "collectMiniProgram"),
        (string("appID", "App ID"), string("delete", "Delete flag")),
        action="collect mini program",
        category=CATEGORY,
    ),
    tool(
        "aiapp_square",
        "Browse AI app square",
        endpoint("aiapp", "square"),
        (string("category", "Category filter"), *paging()[1:]),
        action="browse AI app square",
        category=CATEGORY,
    ),
    tool(
        "aiapp_models",
        "Get AI models",
        endpoint("aiapp", "models"),
        action="get AI app models",
        category=CATEGORY,
    ),
    post(
        "aiapp_conversation",
        "AI app conversation",
        endpoint("aiapp", "conversation"),
        (
            string(
                "chat",
                "Chat ID - _ will be replaced with -, if set to NEW, open a new chat",
                required=True,
            ),
            string("params", "Parameters as JSON string, base64 encoded"),
        ),
        body=["chat", "params"],
        action="run AI app conversation",
        category=CATEGORY,
    ),
]

ZAI_TOOLS = [
    tool(
        "get_zai_settings",
        "Get ZenTao AI (ZAI) module settings",
        endpoint("zai", "setting"),
        (string("mode", "Settings mode (basic, advanced, etc.)"),),
        action="get ZAI settings",
        category=CATEGORY,
    ),
    post(
        "update_zai_settings",
        "Update ZenTao AI (ZAI) module settings",
        endpoint("zai", "setting"),
        (
            string("mode", "Settings mode", required=True),
            string("settings", "Settings configuration as JSON string", required=True),
        ),
        body=["mode", "settings"],
        action="update ZAI settings",
        category=CATEGORY,
    ),
    tool(
        "get_zai_token",
        "Get authentication token for ZenTao AI services",
        endpoint("zai", "ajaxGetToken"),
        action="get ZAI token",
        category=CATEGORY,
    ),
    tool(
        "get_vectorization_status",
        "Get current vectorization status in ZenTao AI",
        endpoint("zai", "vectorized"),
        action="get vectorization status",
        category=CATEGORY,
    ),
    post(
        "enable_vectorization",
        "Enable vectorization for ZenTao AI",
        endpoint("zai", "ajaxEnableVectorization"),
        (string("config", "Vectorization configuration as JSON string"),),
        body=["config"],
        action="enable vectorization",
        category=CATEGORY,
    ),
    post(
        "sync_vectorization",
        "Synchronize vectorization data in ZenTao AI",
        endpoint("zai", "ajaxSyncVectorization"),
        (string("sync_options", "Sync options as JSON string (full, incremental, specific_modules)"),),
        body=["sync_options"],
        action="sync vectorization",
        category=CATEGORY,
    ),
    tool(
        "get_ai_models",
        "Get available AI models in ZenTao AI",
        endpoint("zai", "models"),
        action="get AI models",
        category=CATEGORY,
    ),
    tool(
        "test_ai_connection",
        "Test connection to AI services",
        endpoint("zai", "testConnection"),
        (string("model", "Specific AI model to test"),),
        action="test AI connection",
        category=CATEGORY,
    ),
]

TOOLS = [*MINI_PROGRAM_TOOLS, *PROMPT_TOOLS, *AIAPP_TOOLS, *ZAI_TOOLS]
