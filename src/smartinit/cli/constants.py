# src/smartinit/cli/constants.py
from enum import Enum

# Exit codes (stable for scripting)
EXIT_SUCCESS = 0
EXIT_CONTRACT_VIOLATION = 1
EXIT_CONFIG_ERROR = 2
EXIT_RUNTIME_ERROR = 3


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"

    def __str__(self) -> str:
        return self.value
