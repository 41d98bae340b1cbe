"""
databridge — stream schema descriptors for publish/subscribe event processing.

Subpackages:
- databridge.core — StreamDefinition, attributes, ids, JSON converter (zero-IO).
- databridge.io — settings, definition files, polars frame validation.
- databridge.cli — command-line inspection of definition files.
"""

__version__ = "0.1.0"
