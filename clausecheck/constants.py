"""Global constants for clausecheck.

Defaults shared by the runner, the configuration loader and the behave
environment.
"""

DEFAULT_CURRENT_TIME = "1970-01-01T00:00:00Z"
"""Logical "now" used to stamp requests that carry no timestamp."""

DEFAULT_STATE = {
    "$class": "org.accordproject.cicero.contract.AccordContractState",
    "stateId": "org.accordproject.cicero.contract.AccordContractState#1",
}
"""Contract state assumed until a scenario sets its own."""

INIT_REQUEST = {"$class": "org.accordproject.cicero.runtime.Request"}
"""Request sent to the engine when initializing a contract."""

TIMESTAMP_FIELD = "timestamp"

ANSWER_FIELDS = ("state", "response", "emit")
ERROR_FIELD = "error"

DEFAULT_CONFIG_FILE = "clausecheck.yaml"
CONFIG_ENV_VAR = "CLAUSECHECK_CONFIG"
DEBUG_ENV_VAR = "CLAUSECHECK_DEBUG"

USERDATA_KEYS = ("root_dir", "current_time", "engine", "loader", "log_level")
"""Settings forwarded to behave as ``-D key=value`` userdata."""
