"""Memory and conversation history sub-client."""

from typing import Any, Optional, Union

from .dispatch import ResourceClient
from .models import (
    ConversationHistoryResponse,
    MemoryCollectionsResponse,
    RecallMemoriesResponse,
    WipeCollectionsResponse,
    WipeConversationHistoryResponse,
    WipePointResponse,
    WipePointsByMetadataResponse,
)
from .types import CollectionName, HTTPMethod


def _to_value(v: Any) -> Any:
    """Extract string value from an enum member, or return string as-is."""
    return v.value if hasattr(v, "value") else v


class MemoryClient(ResourceClient):
    """
    Sub-client for the ``/memory`` endpoints.

    Example:
        with CCatClient() as client:
            recalled = client.memory.recall_memories("cats", k=5)
            for memory in recalled.vectors.collections.declarative:
                print(memory.score, memory.page_content)
    """

    resource = "memory"

    def recall_memories(self, text: str, k: Optional[int] = None) -> RecallMemoriesResponse:
        """
        Search memories similar to a text.

        Args:
            text: Query text
            k: Number of memories to recall per collection (None = server default)

        Returns:
            The embedded query and the recalled memories per collection
        """
        return self._request(
            HTTPMethod.GET,
            "recall",
            params={"text": text, "k": k},
            response_type=RecallMemoriesResponse,
        )

    def get_memory_collections(self) -> MemoryCollectionsResponse:
        """List the memory collections and their sizes."""
        return self._request(HTTPMethod.GET, "collections", response_type=MemoryCollectionsResponse)

    def wipe_memory_collections(self) -> WipeCollectionsResponse:
        """Delete every point of every collection."""
        return self._request(HTTPMethod.DELETE, "collections", response_type=WipeCollectionsResponse)

    def wipe_memory_collection(self, collection_id: Union[str, CollectionName]) -> WipeCollectionsResponse:
        """Delete every point of one collection."""
        return self._request(
            HTTPMethod.DELETE,
            f"collections/{_to_value(collection_id)}",
            response_type=WipeCollectionsResponse,
        )

    def wipe_memory_collection_point(
        self,
        collection_id: Union[str, CollectionName],
        memory_id: str,
    ) -> WipePointResponse:
        """Delete a single point from a collection."""
        return self._request(
            HTTPMethod.DELETE,
            f"collections/{_to_value(collection_id)}/points/{memory_id}",
            response_type=WipePointResponse,
        )

    def wipe_memory_points_by_metadata(
        self,
        collection_id: Union[str, CollectionName],
        metadata: dict[str, Any],
    ) -> WipePointsByMetadataResponse:
        """
        Delete the points of a collection whose metadata match the given values.

        Example:
            client.memory.wipe_memory_points_by_metadata(
                CollectionName.DECLARATIVE,
                {"source": "manual.pdf"},
            )
        """
        return self._request(
            HTTPMethod.DELETE,
            f"collections/{_to_value(collection_id)}/points",
            payload=metadata,
            response_type=WipePointsByMetadataResponse,
        )

    def get_conversation_history(self) -> ConversationHistoryResponse:
        """Get the chat history of the current user."""
        return self._request(
            HTTPMethod.GET,
            "conversation_history",
            response_type=ConversationHistoryResponse,
        )

    def wipe_conversation_history(self) -> WipeConversationHistoryResponse:
        """Delete the chat history of the current user."""
        return self._request(
            HTTPMethod.DELETE,
            "conversation_history",
            response_type=WipeConversationHistoryResponse,
        )
