"""Server configuration model

All configuration is immutable and validated.
"""

from typing import Final, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PORT: Final[int] = 8080
DEFAULT_MAX_DIMENSION: Final[int] = 4096

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ServerConfig(BaseModel):
    """
    Configuration of the barcode server.

    Attributes:
        host: Interface to bind
        port: TCP port to listen on
        log_level: Logging level for the application and uvicorn
        log_json: Emit one JSON object per log line instead of console text
        log_file: Optional path that additionally receives JSON log lines
        max_dimension: Largest accepted width or height of a generated image
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field("0.0.0.0", description="Interface to bind")
    port: int = Field(DEFAULT_PORT, ge=1, le=65535, description="TCP port")
    log_level: LogLevel = Field("INFO", description="Log level")
    log_json: bool = Field(False, description="JSON log lines")
    log_file: Optional[str] = Field(None, description="JSON log file path")
    max_dimension: int = Field(DEFAULT_MAX_DIMENSION, ge=1, description="Maximum image width/height")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate host is not blank"""
        if not v or not v.strip():
            raise ValueError("host cannot be blank")
        return v.strip()
