"""Metadata describing the per-method snippet files of a generated client."""

import json
from dataclasses import dataclass, field

from .license import apache_header
from .pbinfo import reduce_serv_name

# Replaced with the real module version by a post-processing step.
VERSION_PLACEHOLDER = "$VERSION"

# Number of lines of the licence header, counting its trailing newlines.
# The year does not affect the line count.
HEADER_LEN = len(apache_header(2023).split("\n"))

LANGUAGE = "GO"
ORIGIN = "API_DEFINITION"
SEGMENT_FULL = "FULL"


@dataclass(frozen=True)
class _Param:
    name: str
    type: str


_CTX_PARAM = _Param("ctx", "context.Context")
_OPTS_PARAM = _Param("opts", "...gax.CallOption")


@dataclass
class _Method:
    region_tag: str
    region_tag_start: int
    region_tag_end: int
    parent_proto_pkg: str
    parent_name: str
    doc: str = ""
    params: tuple = ()
    result: str = ""


@dataclass
class _Service:
    proto_name: str
    short_name: str
    methods: dict = field(default_factory=dict)


def _is_default(value):
    if value is None or value == "" or value == []:
        return True
    return isinstance(value, (int, float)) and value == 0


def _prune(value):
    """Drop fields holding default values, as JSON encoders of protobuf do."""
    if isinstance(value, dict):
        return {k: _prune(v) for k, v in value.items() if not _is_default(v)}
    if isinstance(value, list):
        return [_prune(v) for v in value]
    return value


class SnippetMetadata:
    """Collects snippet details and renders the snippet index.

    ``proto_pkg`` is the dotted proto package, ``lib_pkg`` the Go import path
    of the client and ``pkg_name`` its short package name.
    """

    def __init__(self, proto_pkg, lib_pkg, pkg_name):
        self.proto_pkg = proto_pkg
        self.lib_pkg = lib_pkg
        self.pkg_name = pkg_name
        self.api_version = proto_pkg.rpartition(".")[2]
        self.services = {}

    def _service(self, serv_name):
        try:
            return self.services[serv_name]
        except KeyError:
            raise KeyError(f"no service {serv_name!r} in snippet metadata") from None

    def _method(self, serv_name, method_name):
        try:
            return self._service(serv_name).methods[method_name]
        except KeyError:
            raise KeyError(
                f"no method {serv_name}.{method_name} in snippet metadata"
            ) from None

    def add_service(self, serv_name, default_host):
        """Add a service; its short name is the first label of ``default_host``."""
        self.services[serv_name] = _Service(
            proto_name=serv_name, short_name=default_host.split(".")[0]
        )

    def add_method(self, serv_name, method_name, parent_proto_pkg, parent_name, region_tag_end):
        """Add a method to a service, to be completed by the update calls.

        ``parent_proto_pkg`` and ``parent_name`` name the proto package and
        service that declare the method; they differ for mixins.
        """
        method = _Method(
            region_tag=self.region_tag(serv_name, method_name),
            region_tag_start=HEADER_LEN,
            region_tag_end=region_tag_end,
            parent_proto_pkg=parent_proto_pkg,
            parent_name=parent_name,
        )
        self._service(serv_name).methods[method_name] = method

    def update_method_doc(self, serv_name, method_name, doc):
        """Set a method's documentation, trimming every line."""
        self._method(serv_name, method_name).doc = "".join(
            line.strip() + "\n" for line in doc.split("\n")
        )

    def update_method_result(self, serv_name, method_name, result):
        """Set a method's result type."""
        self._method(serv_name, method_name).result = result

    def add_params(self, serv_name, method_name, request_type):
        """Set a method's parameters: ctx, req (unless ``request_type`` is empty), opts."""
        params = [_CTX_PARAM]
        if request_type:
            params.append(_Param("req", request_type))
        params.append(_OPTS_PARAM)
        self._method(serv_name, method_name).params = tuple(params)

    def region_tag(self, serv_name, method_name):
        """Return the snippet region tag of a method."""
        service = self._service(serv_name)
        return (
            f"{service.short_name}_{self.api_version}_generated_"
            f"{serv_name}_{method_name}_sync"
        )

    def _proto_version(self):
        return self.proto_pkg.split(".")[-1]

    def to_metadata_index(self):
        """Return the snippet index as a JSON-ready dict, in sorted order."""
        snippets = []
        for serv_name in sorted(self.services):
            service = self.services[serv_name]
            client = reduce_serv_name(serv_name, self.pkg_name) + "Client"
            for method_name in sorted(service.methods):
                method = service.methods[method_name]
                parent_service = f"{method.parent_proto_pkg}.{method.parent_name}"
                snippets.append(
                    {
                        "regionTag": method.region_tag,
                        "title": f"{service.short_name} {method_name} Sample",
                        "description": method.doc.strip(),
                        "file": f"{client}/{method_name}/main.go",
                        "language": LANGUAGE,
                        "clientMethod": {
                            "shortName": method_name,
                            "fullName": f"{self.proto_pkg}.{client}.{method_name}",
                            "parameters": [
                                {"type": p.type, "name": p.name} for p in method.params
                            ],
                            "resultType": method.result,
                            "client": {
                                "shortName": client,
                                "fullName": f"{self.proto_pkg}.{client}",
                            },
                            "method": {
                                "shortName": method_name,
                                "fullName": f"{parent_service}.{method_name}",
                                "service": {
                                    "shortName": method.parent_name,
                                    "fullName": parent_service,
                                },
                            },
                        },
                        "origin": ORIGIN,
                        "segments": [
                            {
                                # Lines just inside the START and END region tags.
                                "start": method.region_tag_start + 1,
                                "end": method.region_tag_end - 1,
                                "type": SEGMENT_FULL,
                            }
                        ],
                    }
                )
        index = {
            "clientLibrary": {
                "name": self.lib_pkg,
                "version": VERSION_PLACEHOLDER,
                "language": LANGUAGE,
                "apis": [{"id": self.proto_pkg, "version": self._proto_version()}],
            },
            "snippets": snippets,
        }
        return _prune(index)

    def to_metadata_json(self):
        """Return the snippet index as indented JSON text."""
        return json.dumps(self.to_metadata_index(), indent=2, ensure_ascii=False) + "\n"