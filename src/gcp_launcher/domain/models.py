"""
Core Domain Models

Descriptive records for cloud provider plugins and the connection
parameters handed to them.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ConfigurationProperty:
    """Describes one configuration key a provider understands."""
    config_key: str
    name: str
    label: str
    description: str = ""
    required: bool = False
    default_value: Optional[str] = None
    sensitive: bool = False


@dataclass(frozen=True)
class CredentialsProviderMetadata:
    """Properties needed to authenticate against a provider's identity service."""
    credentials_configuration_properties: Tuple[ConfigurationProperty, ...] = ()

    def get_credentials_configuration_properties(self) -> Tuple[ConfigurationProperty, ...]:
        return self.credentials_configuration_properties


@dataclass(frozen=True)
class CloudProviderMetadata:
    """Static description of a registered cloud provider."""
    id: str
    name: str
    description: str
    credentials_provider_metadata: CredentialsProviderMetadata = field(default_factory=CredentialsProviderMetadata)
    provider_configuration_properties: Tuple[ConfigurationProperty, ...] = ()

    def get_provider_configuration_properties(self) -> Tuple[ConfigurationProperty, ...]:
        return self.provider_configuration_properties

    def get_credentials_provider_metadata(self) -> CredentialsProviderMetadata:
        return self.credentials_provider_metadata


@dataclass(frozen=True)
class HttpProxyParameters:
    """HTTP proxy used to reach the cloud API, supplied by the host at initialization."""
    host: str
    port: int
    username: Optional[str] = None
    password: Optional[str] = None

    def __post_init__(self):
        if not self.host:
            raise ValueError("Proxy host must not be empty")
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid proxy port: {self.port}")

    def to_url(self) -> str:
        """Render as a proxy URL understood by HTTP clients."""
        auth = ""
        if self.username:
            auth = self.username
            if self.password:
                auth += f":{self.password}"
            auth += "@"
        return f"http://{auth}{self.host}:{self.port}"

    def __repr__(self) -> str:
        return f"HttpProxyParameters(host={self.host!r}, port={self.port}, username={self.username!r})"
