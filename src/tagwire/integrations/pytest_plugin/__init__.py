from tagwire.integrations.pytest_plugin.plugin import tagwire_container

__all__ = ["tagwire_container"]
