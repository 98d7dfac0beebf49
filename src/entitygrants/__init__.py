"""Entity permission grants - authoring service and resolver."""

__version__ = "0.1.0"
