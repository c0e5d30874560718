"""
Exporter Module

Renders built payload nodes as the JSON body of a v3 mail send request.
"""

from .json_exporter import JsonExporter, SerializationError

__all__ = [
    "JsonExporter",
    "SerializationError",
]
