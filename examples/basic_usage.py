"""Basic usage example for the Cheshire Cat API client."""

from ccat_api import APIError, CCatClient, CollectionName, with_base_url


def main():
    with CCatClient(with_base_url("http://localhost:1865")) as client:
        # Check the cat is awake
        print(f"Status: {client.status().status}")

        # Settings
        setting = client.settings.create_setting("example", {"enabled": True}, category="demo")
        print(f"Created setting: {setting.setting_id}")

        found = client.settings.get_settings(search="example")
        print(f"Found {len(found.settings)} settings")

        client.settings.delete_setting(setting.setting_id)

        # LLM and embedder configuration
        llms = client.llms.get_all_llms_settings()
        print(f"Selected LLM: {llms.selected_configuration}")
        for llm in llms.settings:
            print(f"  {llm.name}: {llm.setting_schema.human_readable_name}")

        embedders = client.embedders.get_all_embedders_settings()
        print(f"Available embedders: {[e.name for e in embedders.settings]}")

        # Plugins
        plugins = client.plugins.get_plugins()
        for plugin in plugins.installed:
            print(f"Plugin {plugin.id} active={plugin.active}")

        # Documents and memory
        client.rabbit_hole.upload_from_url("https://cheshirecat.ai", chunk_size=512, chunk_overlap=64)

        recalled = client.memory.recall_memories("What is the Cheshire Cat?", k=3)
        for memory in recalled.vectors.collections.declarative:
            print(f"  [{memory.score:.2f}] {memory.page_content[:60]}")

        try:
            client.memory.wipe_memory_collection(CollectionName.EPISODIC)
        except APIError as e:
            print(f"Wipe failed ({e.status_code}): {e.message}")


if __name__ == "__main__":
    main()
