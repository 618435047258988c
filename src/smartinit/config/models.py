# src/smartinit/config/models.py
from pydantic import BaseModel, ConfigDict, Field


class SmartInitConfig(BaseModel):
    """
    Effective CLI configuration.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: str = Field("WARNING", description="Level for the smartinit logger.")
    verbose: bool = Field(False, description="Force DEBUG logging with tracebacks.")
