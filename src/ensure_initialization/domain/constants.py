"""Rule identities and default framework identities."""

# Registry keys are "<prefix><code>", e.g. "ensure-initialization.E9601".
RULE_PREFIX: str = "ensure-initialization."

INITIALIZATION_CODE: str = "E9601"
INITIALIZATION_SYMBOL: str = "ensure-initialization"

PLUGIN_MODULE: str = "ensure_initialization.infrastructure.checker"
CONFIG_SECTION: str = "ensure-initialization"

# Framework identities the rule matches against, by qualified name.
DEFAULT_FACTORY_OWNER: str = "UnityEngine.Object"
DEFAULT_FACTORY_NAME: str = "Instantiate"
DEFAULT_BASE_COMPONENT: str = "UnityEngine.MonoBehaviour"
DEFAULT_MARKER_NAME: str = "RequiresInitialization"
