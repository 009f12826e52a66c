"""Cheshire Cat API Python client."""

from .client import CCatClient, ccat_client
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    DEFAULT_USER_ID,
    ClientConfig,
    Option,
    build_config,
    with_auth_key,
    with_base_url,
    with_config,
    with_http_client,
    with_marshal_func,
    with_unmarshal_func,
    with_user_agent,
    with_user_id,
)
from .exceptions import (
    APIError,
    APIFieldErrors,
    APIMessageError,
    AuthenticationError,
    CCatError,
    InvalidURLError,
    UnknownAPIError,
    UploadMissingFileError,
)
from .models import (
    APIFieldError,
    ConversationMessage,
    EmbedderSetting,
    InstalledPlugin,
    LLMSetting,
    Memory,
    MemoryCollection,
    PluginSetting,
    RegistryPlugin,
    Setting,
)
from .types import CollectionName

__version__ = "0.1.0"

__all__ = [
    # Main client
    "CCatClient",
    "ccat_client",
    # Configuration
    "ClientConfig",
    "Option",
    "build_config",
    "with_config",
    "with_http_client",
    "with_base_url",
    "with_user_agent",
    "with_user_id",
    "with_auth_key",
    "with_marshal_func",
    "with_unmarshal_func",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "DEFAULT_USER_ID",
    # Models
    "Setting",
    "LLMSetting",
    "EmbedderSetting",
    "PluginSetting",
    "InstalledPlugin",
    "RegistryPlugin",
    "Memory",
    "MemoryCollection",
    "ConversationMessage",
    "APIFieldError",
    # Types
    "CollectionName",
    # Exceptions
    "CCatError",
    "APIError",
    "APIFieldErrors",
    "APIMessageError",
    "UnknownAPIError",
    "AuthenticationError",
    "InvalidURLError",
    "UploadMissingFileError",
]
