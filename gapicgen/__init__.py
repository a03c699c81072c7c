"""Building blocks for generating API client libraries and snippets from protobuf descriptors."""

__version__ = "0.1.0"

__all__ = [
    "goldendiff",
    "license",
    "pbinfo",
    "printer",
    "service_config",
    "snippets",
    "wellknown",
]