"""Lookup tables over protobuf file descriptors."""

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field

from google.protobuf import descriptor_pb2

_FieldType = descriptor_pb2.FieldDescriptorProto

GO_TYPE_FOR_PRIM = {
    _FieldType.TYPE_DOUBLE: "float64",
    _FieldType.TYPE_FLOAT: "float32",
    _FieldType.TYPE_INT64: "int64",
    _FieldType.TYPE_UINT64: "uint64",
    _FieldType.TYPE_INT32: "int32",
    _FieldType.TYPE_FIXED64: "uint64",
    _FieldType.TYPE_FIXED32: "uint32",
    _FieldType.TYPE_BOOL: "bool",
    _FieldType.TYPE_STRING: "string",
    _FieldType.TYPE_BYTES: "[]byte",
    _FieldType.TYPE_UINT32: "uint32",
    _FieldType.TYPE_SFIXED32: "int32",
    _FieldType.TYPE_SFIXED64: "int64",
    _FieldType.TYPE_SINT32: "int32",
    _FieldType.TYPE_SINT64: "int64",
}


def go_type_for_prim(field_type):
    """Return the Go type for a primitive protobuf field type.

    Raises KeyError for message, enum and group types.
    """
    try:
        return GO_TYPE_FOR_PRIM[field_type]
    except KeyError:
        raise KeyError(f"no Go primitive for field type {field_type}") from None


class _IdentityMap(MutableMapping):
    """Mapping keyed on object identity, for unhashable protobuf messages."""

    def __init__(self, items=()):
        self._entries = {}
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self[key] = value

    def __getitem__(self, key):
        try:
            return self._entries[id(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key, value):
        self._entries[id(key)] = (key, value)

    def __delitem__(self, key):
        try:
            del self._entries[id(key)]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator:
        return (key for key, _ in self._entries.values())

    def __len__(self):
        return len(self._entries)


@dataclass(frozen=True)
class ImportSpec:
    """A Go import path with an optional alias."""

    name: str = ""
    path: str = ""


def _with_pb(name):
    return name if name.endswith("pb") else name + "pb"


@dataclass
class Info:
    """Lookup tables for protobuf elements.

    ``parent_file`` maps top-level messages, enums, services and methods to
    their file. ``parent_element`` maps nested elements to their enclosing
    message or service. ``types`` and ``services`` are keyed by fully
    qualified names with a leading dot. ``pkg_overrides`` maps file names to
    import paths that replace their ``go_package`` option.
    """

    parent_file: MutableMapping = field(default_factory=_IdentityMap)
    parent_element: MutableMapping = field(default_factory=_IdentityMap)
    types: dict = field(default_factory=dict)
    services: dict = field(default_factory=dict)
    pkg_overrides: dict = field(default_factory=dict)

    @classmethod
    def of(cls, files):
        """Build lookup tables from file descriptors."""
        info = cls()
        for f in files:
            for msg in f.message_type:
                info.parent_file[msg] = f
            for enum in f.enum_type:
                info.parent_file[enum] = f
            for serv in f.service:
                info.parent_file[serv] = f
                for method in serv.method:
                    info.parent_file[method] = f
                    info.parent_element[method] = serv

            prefix = "." + f.package
            for msg in f.message_type:
                info._add_message(prefix, msg, None)
            for enum in f.enum_type:
                info.types[f"{prefix}.{enum.name}"] = enum
            for serv in f.service:
                info.services[f"{prefix}.{serv.name}"] = serv
        return info

    def _add_message(self, prefix, msg, parent):
        full_name = f"{prefix}.{msg.name}"
        self.types[full_name] = msg
        if parent is not None:
            self.parent_element[msg] = parent
        for sub in msg.nested_type:
            self._add_message(full_name, sub, msg)
        for enum in msg.enum_type:
            self.types[f"{full_name}.{enum.name}"] = enum
            self.parent_element[enum] = msg
        for fld in msg.field:
            self.parent_element[fld] = msg

    def name_spec(self, e):
        """Return the Go name of ``e`` and the import of its package.

        Nested names are joined with underscores, so B nested in A is "A_B".
        Raises ValueError when the import path cannot be determined.
        """
        parts = []
        top = e
        current = e
        while current is not None:
            top = current
            parts.append(current.name)
            current = self.parent_element.get(current)
        name = "_".join(reversed(parts))

        fdesc = self.parent_file.get(top)
        if fdesc is None:
            raise ValueError(
                f'can\'t determine import path for "{e.name}"; can\'t find parent file'
            )

        pkg = self.pkg_overrides.get(fdesc.name, fdesc.options.go_package)
        if not pkg:
            raise ValueError(
                f'can\'t determine import path for "{e.name}", '
                f'file "{fdesc.name}" missing `option go_package`'
            )

        path, sep, alias = pkg.partition(";")
        if sep:
            return name, ImportSpec(name=_with_pb(alias), path=path)

        while True:
            slash = pkg.rfind("/")
            if slash < 0:
                return name, ImportSpec(name=_with_pb(pkg), path=pkg)
            elem = pkg[slash + 1:]
            if len(elem) >= 2 and elem[0] == "v" and elem[1] in "0123456789":
                # A version element; the parent gives a more meaningful name.
                pkg = pkg[:slash]
                continue
            return name, ImportSpec(name=_with_pb(elem), path=pkg)

    def import_spec(self, e):
        """Return the import of the package holding ``e``.

        Deprecated: use name_spec instead.
        """
        return self.name_spec(e)[1]


def reduce_serv_name(svc, pkg):
    """Strip redundant parts from a service name: FooServiceV2 becomes Foo.

    Returns an empty string when the result equals the package name, ignoring
    case, so the client is named pkg.Client rather than pkg.PkgClient.
    """
    v = svc.rfind("V")
    if v >= 0 and all(ch.isdecimal() for ch in svc[v + 1:]):
        svc = svc[:v]

    svc = svc.removesuffix("Service")
    if svc.casefold() == pkg.casefold():
        svc = ""

    # Kept for identifier stability of existing IAM clients only.
    return svc.replace("IAM", "Iam")