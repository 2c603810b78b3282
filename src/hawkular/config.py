"""Configuration and environment handling for the Hawkular client."""

import os

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_PATH",
    "Parameters",
]

DEFAULT_PATH = "hawkular/metrics"


class Parameters(BaseModel):
    """Connection parameters bound to a Client at construction.

    Either ``url`` (scheme, host and port, e.g. ``https://metrics:8443``) or
    ``host``/``port`` locate the server. ``path`` is appended to it to form the
    base URL that every resource URL starts from.

    All parameters can be loaded from environment variables via ``from_env``.
    """

    model_config = ConfigDict(frozen=True)

    tenant: str = Field(..., min_length=1, description="Default tenant for every request")
    host: str = Field(default="localhost", description="Server host, used when url is not set")
    port: int = Field(default=8080, description="Server port, used when url is not set")
    path: str = Field(default=DEFAULT_PATH, description="Path of the metrics REST API on the server")
    url: str | None = Field(default=None, description="Explicit server URL, overrides host and port")
    token: str | None = Field(default=None, description="Bearer token sent in the Authorization header")
    verify_tls: bool | str = Field(
        default=True,
        description="TLS verification: True, False (skip verify) or a CA bundle path",
    )
    timeout: float | None = Field(default=None, description="Request timeout in seconds, None leaves it to the transport")

    @property
    def base_url(self) -> str:
        """Base URL of the metrics API, without tenant."""
        root = self.url.rstrip("/") if self.url else f"http://{self.host}:{self.port}"
        path = self.path.strip("/")
        return f"{root}/{path}" if path else root

    @classmethod
    def from_env(cls, **overrides: object) -> "Parameters":
        """Create Parameters from environment variables.

        Environment variables:
        - HAWKULAR_TENANT: Default tenant (required unless passed as override)
        - HAWKULAR_URL: Explicit server URL
        - HAWKULAR_HOST: Server host (default: localhost)
        - HAWKULAR_PORT: Server port (default: 8080)
        - HAWKULAR_PATH: REST API path (default: hawkular/metrics)
        - HAWKULAR_TOKEN: Bearer token
        - HAWKULAR_VERIFY_TLS: "0" disables verification, any other value that is
          not "1" is treated as a CA bundle path
        - HAWKULAR_TIMEOUT: Request timeout in seconds

        Args:
            **overrides: Values taking precedence over the environment

        Raises:
            ValueError: If no tenant is configured
        """
        values: dict[str, object] = {}

        tenant = os.environ.get("HAWKULAR_TENANT")
        if tenant:
            values["tenant"] = tenant
        for key in ("url", "host", "path", "token"):
            env_value = os.environ.get(f"HAWKULAR_{key.upper()}")
            if env_value:
                values[key] = env_value

        port = os.environ.get("HAWKULAR_PORT")
        if port:
            values["port"] = int(port)

        verify = os.environ.get("HAWKULAR_VERIFY_TLS")
        if verify:
            values["verify_tls"] = {"0": False, "1": True}.get(verify, verify)

        timeout = os.environ.get("HAWKULAR_TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)

        values.update(overrides)
        if not values.get("tenant"):
            raise ValueError("HAWKULAR_TENANT must be set to create Parameters from the environment")
        return cls(**values)
