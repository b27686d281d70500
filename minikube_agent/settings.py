from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class MinikubeSettings(BaseSettings):
    """
    Centralized configuration for the minikube agent.
    Reads from environment variables, .env file, and defaults.
    """
    # Cluster tool
    BINARY: str = "minikube"
    PROFILE: Optional[str] = None  # Passed as `-p <profile>` when set

    # Server identity
    SERVER_NAME: str = "minikube-mcp"
    SERVER_VERSION: str = "0.1.0"

    # Transport: stdio | http (sse is accepted as an alias for http)
    TRANSPORT: str = "stdio"
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # readwrite exposes start/stop/status, readonly exposes status only
    ACCESS_LEVEL: str = "readwrite"

    # Load from .env file if present
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MINIKUBE_MCP_",  # e.g. MINIKUBE_MCP_PORT=9000
        extra='ignore'
    )

    def normalized_transport(self) -> str:
        transport = self.TRANSPORT.strip().lower()
        return "http" if transport == "sse" else transport

    def server_url(self) -> str:
        return f"http://{self.HOST}:{self.PORT}"


# Instantiate global settings object
settings = MinikubeSettings()
