"""Protobuf well-known types and the files that declare them."""

from google.protobuf import (
    any_pb2,
    descriptor_pb2,
    duration_pb2,
    empty_pb2,
    field_mask_pb2,
    struct_pb2,
    timestamp_pb2,
    type_pb2,
    wrappers_pb2,
)

_PREFIX = ".google.protobuf."

# Types represented as a string in JSON.
_STRING_SHORT_NAMES = ("FieldMask", "Timestamp", "Duration", "StringValue", "BytesValue")

_SHORT_NAMES = (
    "FieldMask",
    "Timestamp",
    "Duration",
    *(f"{kind}Value" for kind in ("Double", "Float", "Int64", "UInt64", "Int32", "UInt32", "Bool", "String", "Bytes")),
    "Value",
    "ListValue",
)

WELL_KNOWN_TYPE_NAMES = tuple(_PREFIX + name for name in _SHORT_NAMES)
WELL_KNOWN_STRING_TYPES = tuple(_PREFIX + name for name in _STRING_SHORT_NAMES)

_WELL_KNOWN_MODULES = (
    empty_pb2,
    any_pb2,
    struct_pb2,
    duration_pb2,
    timestamp_pb2,
    field_mask_pb2,
    wrappers_pb2,
    type_pb2,
)


def well_known_type_files():
    """Return fresh descriptors of the files declaring the well-known types."""
    files = []
    for module in _WELL_KNOWN_MODULES:
        proto = descriptor_pb2.FileDescriptorProto()
        module.DESCRIPTOR.CopyToProto(proto)
        files.append(proto)
    return files


def is_well_known_type(name):
    """Tell whether a fully qualified type name is a well-known type."""
    return name in WELL_KNOWN_TYPE_NAMES


def is_well_known_string_type(name):
    """Tell whether a well-known type is represented as a string in JSON."""
    return name in WELL_KNOWN_STRING_TYPES