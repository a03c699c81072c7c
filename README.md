# gapicgen

Building blocks for a generator that turns protobuf descriptors into API
client libraries and runnable code snippets: an auto-indenting code printer,
descriptor lookup tables, gRPC service config parsing, snippet metadata and
golden-file comparison.

## Installation

```
pip install gapicgen
```

To run the tests:

```
pip install "gapicgen[test]"
pytest
```

## Modules

- `gapicgen.license` – `apache_header(year)` returns the notice that heads
  every generated Go file, stamped with the given year and ending with a
  blank line so code can follow it directly.
- `gapicgen.printer` – `Printer`, a line-oriented writer for brace-delimited
  code. `printf(s, *args)` strips `s`, formats it printf-style and writes it as
  one line; each leading `}` dedents that line and each trailing `{` indents
  the lines that follow (braces coming from `args` do not count). An empty
  line is written as a bare newline. `write(text)` appends text verbatim,
  `getvalue()` (and `str()`) returns the output, `len()` its length, and
  `reset()` clears it.
- `gapicgen.pbinfo` – `Info.of(files)` builds lookup tables over a list of
  `FileDescriptorProto` messages: `parent_file`, `parent_element`, `types`
  and `services` (the last two keyed by fully qualified names with a leading
  dot), plus `pkg_overrides` for replacing a file's `go_package`.
  `Info.name_spec(e)` returns the Go name of a message or enum (nested names
  joined with `_`, e.g. `Message_SubMessage`) together with the `ImportSpec`
  of its package; it raises `ValueError` when the parent file or
  `go_package` option is missing. `Info.import_spec(e)` returns only the
  `ImportSpec`. `reduce_serv_name(svc, pkg)` shortens a service name for
  client naming, and `go_type_for_prim(field_type)` maps a scalar field type
  to its Go type (raising `KeyError` for message, enum and group types).
- `gapicgen.wellknown` – the `google.protobuf` well-known types:
  `well_known_type_files()` returns fresh descriptors of the files declaring
  them, `is_well_known_type(name)` and `is_well_known_string_type(name)`
  test fully qualified names such as `.google.protobuf.Timestamp`.
- `gapicgen.service_config` – `ServiceConfig.load(stream)` (text or binary
  stream) and `ServiceConfig.from_json(text)` read a gRPC service config in
  JSON form, raising `ValueError` if it is malformed. Look up values with
  `retry_policy`, `timeout` (milliseconds), `request_limit` and
  `response_limit`, each taking a fully qualified service name and a method
  name. A setting for the method wins over one for its service; `None` is
  returned when neither exists. Retry settings come back as `RetryPolicy`
  objects. `parse_duration(text)` turns a JSON duration such as `"1.5s"` into
  a `Duration` message and `to_millis(duration)` converts one to whole
  milliseconds.
- `gapicgen.snippets` – `SnippetMetadata(proto_pkg, lib_pkg, pkg_name)`
  collects per-method snippet details (`add_service`, `add_method`,
  `update_method_doc`, `update_method_result`, `add_params`), gives region
  tags with `region_tag`, and renders the index with `to_metadata_index()`
  (a JSON-ready dict, sorted by service and method) or `to_metadata_json()`
  (indented JSON text).
- `gapicgen.goldendiff` – `diff(got, golden_file, update=False)` compares
  generated text with a golden file. It raises `GoldenMismatch` (an
  `AssertionError` carrying a unified diff) when they differ, and rewrites
  the file instead when `update` is true.

## Example

```python
from gapicgen.printer import Printer
from gapicgen.pbinfo import reduce_serv_name

p = Printer()
p.printf("func %s() {", "main")
p.printf('fmt.Println("hi")')
p.printf("}")
print(p.getvalue())
# func main() {
# 	fmt.Println("hi")
# }

print(reduce_serv_name("LoggingServiceV2", "logging"))  # ""
print(reduce_serv_name("FooServiceV2", "bar"))          # "Foo"
```

```python
from gapicgen.snippets import SnippetMetadata

sm = SnippetMetadata("google.cloud.secretmanager.v1",
                     "cloud.google.com/go/secretmanager/apiv1",
                     "secretmanager")
sm.add_service("SecretManagerService", "secretmanager.googleapis.com")
print(sm.region_tag("SecretManagerService", "GetSecret"))
# secretmanager_v1_generated_SecretManagerService_GetSecret_sync
```

```python
import io
from gapicgen.service_config import ServiceConfig

config = ServiceConfig.load(io.StringIO(
    '{"methodConfig": [{"name": [{"service": "bar.FooService"}], "timeout": "60s"}]}'
))
print(config.timeout("bar.FooService", "Zip"))  # 60000
```

## What it does not do

This package provides the pieces listed above and nothing more. It is not a
protoc plugin and has no command-line program; it does not generate client
libraries, transport code or snippet source files by itself. A generator
built on it has to read the code generator request, walk the descriptors and
drive `Printer` and `SnippetMetadata` on its own.