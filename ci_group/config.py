GITHUB_ACTIONS_VAR = "GITHUB_ACTIONS"
AZURE_PIPELINES_VAR = "TF_BUILD"
DIALECT_OVERRIDE_VAR = "CI_GROUP_DIALECT"
PLAIN_HEADERS_VAR = "CI_GROUP_PLAIN_HEADERS"

NEWLINE_SUBSTITUTE = " "

TRUTHY_VALUES = ("1", "true", "yes", "on")

# Override values accepted in CI_GROUP_DIALECT.
DIALECT_ALIASES = {
    "github": "GITHUB_ACTIONS",
    "azure": "AZURE_PIPELINES",
    "none": "NONE",
}
