"""Unit tests for the memory sub-client."""

import json

import respx
from httpx import Response

from ccat_api import CCatClient, CollectionName
from ccat_api.models import WipePointsByMetadataResponse

MEMORY = {
    "page_content": "The cat sat on the mat",
    "metadata": {"source": "manual.pdf", "when": 1706263200.0, "page": 3},
    "type": "Document",
    "id": "point-1",
    "score": 0.87,
    "vector": [0.1, 0.2],
}


@respx.mock
def test_recall_memories(client: CCatClient, base_url: str) -> None:
    """Test recalling memories sends text and k as query."""
    route = respx.get(url__startswith=f"{base_url}/memory/recall").mock(
        return_value=Response(
            200,
            json={
                "query": {"text": "cat", "vector": [0.1, 0.2]},
                "vectors": {
                    "embedder": "EmbedderFakeConfig",
                    "collections": {"episodic": [], "declarative": [MEMORY], "procedural": []},
                },
            },
        )
    )

    response = client.memory.recall_memories("cat", k=5)

    params = route.calls.last.request.url.params
    assert params["text"] == "cat"
    assert params["k"] == "5"
    memory = response.vectors.collections.declarative[0]
    assert memory.metadata.source == "manual.pdf"
    assert memory.metadata.page == 3
    assert memory.score == 0.87


@respx.mock
def test_recall_memories_without_k(client: CCatClient, base_url: str) -> None:
    route = respx.get(url__startswith=f"{base_url}/memory/recall").mock(
        return_value=Response(200, json={"query": {"text": "cat"}})
    )

    client.memory.recall_memories("cat")

    assert dict(route.calls.last.request.url.params) == {"text": "cat"}


@respx.mock
def test_collections(client: CCatClient, base_url: str) -> None:
    """Test listing and wiping collections."""
    respx.get(f"{base_url}/memory/collections").mock(
        return_value=Response(200, json={"collections": [{"name": "declarative", "vectors_count": 12}]})
    )
    respx.delete(f"{base_url}/memory/collections").mock(
        return_value=Response(200, json={"episodic": True, "declarative": True, "procedural": True})
    )
    respx.delete(f"{base_url}/memory/collections/episodic").mock(return_value=Response(200, json={"episodic": True}))

    collections = client.memory.get_memory_collections()
    wiped_all = client.memory.wipe_memory_collections()
    wiped_one = client.memory.wipe_memory_collection(CollectionName.EPISODIC)

    assert collections.collections[0].vectors_count == 12
    assert wiped_all.episodic and wiped_all.declarative and wiped_all.procedural
    assert wiped_one.episodic is True
    assert wiped_one.declarative is False


@respx.mock
def test_wipe_memory_collection_point(client: CCatClient, base_url: str) -> None:
    respx.delete(f"{base_url}/memory/collections/declarative/points/point-1").mock(
        return_value=Response(200, json={"deleted": "point-1"})
    )

    assert client.memory.wipe_memory_collection_point("declarative", "point-1").deleted == "point-1"


@respx.mock
def test_wipe_memory_points_by_metadata(client: CCatClient, base_url: str) -> None:
    """Test the metadata filter travels as a JSON body on DELETE."""
    route = respx.delete(f"{base_url}/memory/collections/declarative/points").mock(
        return_value=Response(200, json={"deleted": {"source": "manual.pdf"}})
    )

    result = client.memory.wipe_memory_points_by_metadata(CollectionName.DECLARATIVE, {"source": "manual.pdf"})

    assert json.loads(route.calls.last.request.content) == {"source": "manual.pdf"}
    assert isinstance(result, WipePointsByMetadataResponse)
    assert result.deleted == {"source": "manual.pdf"}


@respx.mock
def test_conversation_history(client: CCatClient, base_url: str) -> None:
    """Test reading and wiping the conversation history."""
    respx.get(f"{base_url}/memory/conversation_history").mock(
        return_value=Response(
            200,
            json={
                "history": [
                    {"who": "Human", "message": "Hi"},
                    {
                        "who": "AI",
                        "message": "Meow",
                        "why": {
                            "input": "Hi",
                            "intermediate_steps": [],
                            "memory": {"episodic": [], "declarative": [], "procedural": []},
                        },
                    },
                ]
            },
        )
    )
    respx.delete(f"{base_url}/memory/conversation_history").mock(return_value=Response(200, json={"deleted": True}))

    history = client.memory.get_conversation_history()
    wiped = client.memory.wipe_conversation_history()

    assert [m.who for m in history.history] == ["Human", "AI"]
    assert history.history[0].why is None
    assert history.history[1].why.input == "Hi"
    assert wiped.deleted is True


@respx.mock
def test_recall_memory_with_null_source(client: CCatClient, base_url: str) -> None:
    respx.get(url__startswith=f"{base_url}/memory/recall").mock(
        return_value=Response(
            200,
            json={
                "query": {"text": "cat"},
                "vectors": {"collections": {"episodic": [dict(MEMORY, metadata={"source": None, "when": 1.0})]}},
            },
        )
    )

    memory = client.memory.recall_memories("cat").vectors.collections.episodic[0]

    assert memory.metadata.source is None
    assert memory.metadata.when == 1.0
