"""Pydantic models for the Cheshire Cat API client."""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================
# Error envelopes
# ============================================
class APIFieldError(BaseModel):
    """A single structured field error reported by the server."""

    type: str
    loc: list[Union[str, int]]
    msg: str
    input: Any = None
    url: Optional[str] = None

    def __str__(self) -> str:
        parts = [
            f"type: {self.type}",
            f"location: {' '.join(str(loc) for loc in self.loc)}",
            f"message: {self.msg}",
        ]
        if isinstance(self.input, dict):
            parts.extend(f"{name}: {value}" for name, value in self.input.items())
        elif self.input is not None:
            parts.append(f"input: {self.input}")
        parts.append(f"url: {self.url or ''}")
        return "\n".join(parts)


class APIFieldErrorsEnvelope(BaseModel):
    """``{"error": [{...}, ...]}``"""

    error: list[APIFieldError] = Field(min_length=1)


class APIMessageEnvelope(BaseModel):
    """``{"error": "text"}``"""

    error: str


# ============================================
# Status
# ============================================
class StatusResponse(BaseModel):
    """Server status returned by the API root."""

    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None
    version: Optional[str] = None


# ============================================
# Settings
# ============================================
class Setting(BaseModel):
    """A setting stored in the Cheshire Cat database."""

    name: str
    value: Any = None
    category: Optional[str] = None
    setting_id: str = ""
    updated_at: Optional[datetime] = None


class SettingsResponse(BaseModel):
    """List of settings, optionally filtered by search."""

    settings: list[Setting] = Field(default_factory=list)


class CreateSettingPayload(BaseModel):
    name: str
    value: Any = None
    category: Optional[str] = None


class UpdateSettingPayload(BaseModel):
    name: Optional[str] = None
    value: Any = None
    category: Optional[str] = None


# ============================================
# Factory settings (LLM, embedder, plugin)
# ============================================
class SchemaProperty(BaseModel):
    """A single property of a setting JSON schema."""

    model_config = ConfigDict(extra="allow")

    title: str = ""
    type: str = ""
    default: Any = None


class SettingSchema(BaseModel):
    """JSON schema describing the value of a configurable setting."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    description: Optional[str] = None
    human_readable_name: str = Field(default="", alias="humanReadableName")
    link: Optional[str] = None
    properties: dict[str, SchemaProperty] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    title: str = ""
    type: str = ""


class LLMSettingSchema(SettingSchema):
    language_model_name: str = Field(default="", alias="languageModelName")


class EmbedderSettingSchema(SettingSchema):
    language_embedder_name: str = Field(default="", alias="languageEmbedderName")


class PluginSettingSchema(SettingSchema):
    pass


class LLMSetting(BaseModel):
    """Configuration of a single language model."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    value: dict[str, Any] = Field(default_factory=dict)
    setting_schema: LLMSettingSchema = Field(default_factory=LLMSettingSchema, alias="schema")


class LLMSettingsResponse(BaseModel):
    settings: list[LLMSetting] = Field(default_factory=list)
    selected_configuration: Optional[str] = None


class EmbedderSetting(BaseModel):
    """Configuration of a single embedder."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    value: dict[str, Any] = Field(default_factory=dict)
    setting_schema: EmbedderSettingSchema = Field(default_factory=EmbedderSettingSchema, alias="schema")


class EmbedderSettingsResponse(BaseModel):
    settings: list[EmbedderSetting] = Field(default_factory=list)
    selected_configuration: Optional[str] = None


class PluginSetting(BaseModel):
    """Settings of a single plugin."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    value: dict[str, Any] = Field(default_factory=dict)
    setting_schema: PluginSettingSchema = Field(default_factory=PluginSettingSchema, alias="schema")


class PluginSettingsResponse(BaseModel):
    settings: list[PluginSetting] = Field(default_factory=list)


# ============================================
# Plugins
# ============================================
class PluginInfo(BaseModel):
    """Fields shared by installed and registry plugins."""

    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    author_name: Optional[str] = None
    author_url: Optional[str] = None
    plugin_url: Optional[str] = None
    tags: Optional[str] = None
    thumb: Optional[str] = None


class PluginHook(BaseModel):
    name: str
    priority: int = 0


class PluginTool(BaseModel):
    name: str


class InstalledPlugin(PluginInfo):
    """A plugin installed on the server."""

    id: str
    active: bool = False
    upgrade: Optional[str] = None
    hooks: list[PluginHook] = Field(default_factory=list)
    tools: list[PluginTool] = Field(default_factory=list)


class RegistryPlugin(PluginInfo):
    """A plugin available in the public registry."""

    url: Optional[str] = None


class PluginFilters(BaseModel):
    query: Optional[str] = None


class PluginsResponse(BaseModel):
    filters: PluginFilters = Field(default_factory=PluginFilters)
    installed: list[InstalledPlugin] = Field(default_factory=list)
    registry: list[RegistryPlugin] = Field(default_factory=list)


class UploadPluginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filename: str = Field(default="", alias="file_name")
    content_type: str = ""
    info: str = ""


class TogglePluginResponse(BaseModel):
    info: str = ""


class DeletePluginResponse(BaseModel):
    deleted: str  # Name of the deleted plugin


# ============================================
# Memory
# ============================================
class MemoryMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    source: Optional[str] = None
    when: Optional[float] = None


class Memory(BaseModel):
    """A point recalled from a vector memory collection."""

    page_content: str = ""
    metadata: MemoryMetadata = Field(default_factory=MemoryMetadata)
    type: str = ""
    id: str = ""
    score: Optional[float] = None
    vector: list[float] = Field(default_factory=list)


class RecallQuery(BaseModel):
    text: str
    vector: list[float] = Field(default_factory=list)


class RecalledCollections(BaseModel):
    episodic: list[Memory] = Field(default_factory=list)
    declarative: list[Memory] = Field(default_factory=list)
    procedural: list[Memory] = Field(default_factory=list)


class RecalledVectors(BaseModel):
    embedder: str = ""
    collections: RecalledCollections = Field(default_factory=RecalledCollections)


class RecallMemoriesResponse(BaseModel):
    """Memories similar to a text query, grouped by collection."""

    query: RecallQuery
    vectors: RecalledVectors = Field(default_factory=RecalledVectors)


class MemoryCollection(BaseModel):
    name: str
    vectors_count: int = 0


class MemoryCollectionsResponse(BaseModel):
    collections: list[MemoryCollection] = Field(default_factory=list)


class WipeCollectionsResponse(BaseModel):
    """Per-collection flags telling which collections were wiped."""

    episodic: bool = False
    declarative: bool = False
    procedural: bool = False


class WipePointResponse(BaseModel):
    deleted: str  # ID of the deleted point


class WipePointsByMetadataResponse(BaseModel):
    deleted: dict[str, Any] = Field(default_factory=dict)  # Metadata filter that was applied


class RecallData(BaseModel):
    episodic: list[Any] = Field(default_factory=list)
    declarative: list[Any] = Field(default_factory=list)
    procedural: list[Any] = Field(default_factory=list)


class MessageWhy(BaseModel):
    """Explanation attached to an AI message."""

    input: str = ""
    intermediate_steps: list[Any] = Field(default_factory=list)
    memory: Union[RecallData, list[RecallData], None] = None


class ConversationMessage(BaseModel):
    who: str
    message: str
    why: Optional[MessageWhy] = None


class ConversationHistoryResponse(BaseModel):
    history: list[ConversationMessage] = Field(default_factory=list)


class WipeConversationHistoryResponse(BaseModel):
    deleted: bool


# ============================================
# Rabbit hole
# ============================================
class UploadFromURLPayload(BaseModel):
    url: str
    chunk_size: Optional[int] = None
    chunk_overlap: Optional[int] = None


class UploadResponse(BaseModel):
    """Acknowledgement of a document ingestion request."""

    filename: Optional[str] = None
    content_type: Optional[str] = None
    url: Optional[str] = None
    info: str = ""


class UploadMemoryResponse(BaseModel):
    file: str = ""


class AllowedMimeTypesResponse(BaseModel):
    allowed: list[str] = Field(default_factory=list)
