import pytest
from google.protobuf import descriptor_pb2

from gapicgen.pbinfo import (
    ImportSpec,
    Info,
    go_type_for_prim,
    reduce_serv_name,
)

FieldType = descriptor_pb2.FieldDescriptorProto


@pytest.fixture
def name_spec_setup():
    file = descriptor_pb2.FileDescriptorProto(
        options=descriptor_pb2.FileOptions(go_package="path.to/pb/foo;foo")
    )
    msg = file.message_type.add(name="Message")
    sub_msg = msg.nested_type.add(name="SubMessage")
    another_file = descriptor_pb2.FileDescriptorProto(
        name="bar.proto",
        options=descriptor_pb2.FileOptions(go_package="path.to/pb/bar;bar"),
    )
    another_msg = another_file.message_type.add(name="AnotherMessage")

    info = Info.of([file, another_file])
    info.pkg_overrides = {another_file.name: "path.to/pb/foo;foo"}
    elements = {"msg": msg, "sub": sub_msg, "another": another_msg}
    return info, elements


@pytest.mark.parametrize(
    "key, want_name",
    [
        ("msg", "Message"),
        ("sub", "Message_SubMessage"),
        ("another", "AnotherMessage"),
    ],
)
def test_name_spec(name_spec_setup, key, want_name):
    info, elements = name_spec_setup
    name, imp = info.name_spec(elements[key])
    assert name == want_name
    assert imp == ImportSpec(path="path.to/pb/foo", name="foopb")


def test_import_spec_matches_name_spec(name_spec_setup):
    info, elements = name_spec_setup
    assert info.import_spec(elements["sub"]) == info.name_spec(elements["sub"])[1]


@pytest.fixture
def rich_file():
    file = descriptor_pb2.FileDescriptorProto(
        name="my/pkg/thing.proto",
        package="my.pkg",
        options=descriptor_pb2.FileOptions(go_package="example.com/my/pkg/v2"),
    )
    outer = file.message_type.add(name="Outer")
    inner = outer.nested_type.add(name="Inner")
    kind = outer.enum_type.add(name="Kind")
    fld = outer.field.add(name="count", number=1, type=FieldType.TYPE_INT32)
    color = file.enum_type.add(name="Color")
    serv = file.service.add(name="ThingService")
    method = serv.method.add(name="GetThing")
    return file, outer, inner, kind, fld, color, serv, method


def test_of_builds_type_and_service_tables(rich_file):
    file, outer, inner, kind, fld, color, serv, method = rich_file
    info = Info.of([file])
    assert info.types[".my.pkg.Outer"] is outer
    assert info.types[".my.pkg.Outer.Inner"] is inner
    assert info.types[".my.pkg.Outer.Kind"] is kind
    assert info.types[".my.pkg.Color"] is color
    assert info.services[".my.pkg.ThingService"] is serv
    assert len(info.types) == 4


def test_of_builds_parent_tables(rich_file):
    file, outer, inner, kind, fld, color, serv, method = rich_file
    info = Info.of([file])
    assert info.parent_element[inner] is outer
    assert info.parent_element[kind] is outer
    assert info.parent_element[fld] is outer
    assert info.parent_element[method] is serv
    assert info.parent_file[method] is file
    assert info.parent_file[outer] is file
    assert info.parent_file[color] is file
    assert outer not in info.parent_element
    assert inner not in info.parent_file


def test_version_elements_are_skipped(rich_file):
    file, outer, inner, *_ = rich_file
    info = Info.of([file])
    name, imp = info.name_spec(inner)
    assert name == "Outer_Inner"
    assert imp == ImportSpec(name="pkgpb", path="example.com/my/pkg")


def test_method_name_includes_service(rich_file):
    file, *_, method = rich_file
    info = Info.of([file])
    name, _ = info.name_spec(method)
    assert name == "ThingService_GetThing"


def test_package_without_slash():
    file = descriptor_pb2.FileDescriptorProto(
        options=descriptor_pb2.FileOptions(go_package="mypackage")
    )
    msg = file.message_type.add(name="M")
    info = Info.of([file])
    assert info.import_spec(msg) == ImportSpec(name="mypackagepb", path="mypackage")


def test_alias_already_ending_in_pb_is_kept():
    file = descriptor_pb2.FileDescriptorProto(
        options=descriptor_pb2.FileOptions(go_package="path/to/foopb;foopb")
    )
    msg = file.message_type.add(name="M")
    info = Info.of([file])
    assert info.import_spec(msg) == ImportSpec(name="foopb", path="path/to/foopb")


def test_missing_parent_file_raises():
    info = Info()
    orphan = descriptor_pb2.DescriptorProto(name="Orphan")
    with pytest.raises(ValueError, match="can't find parent file"):
        info.name_spec(orphan)


def test_missing_go_package_raises():
    file = descriptor_pb2.FileDescriptorProto(name="nopkg.proto")
    msg = file.message_type.add(name="M")
    info = Info.of([file])
    with pytest.raises(ValueError, match="missing `option go_package`"):
        info.name_spec(msg)


@pytest.mark.parametrize(
    "svc, pkg, want",
    [
        ("FooServiceV2", "bar", "Foo"),
        ("FooService", "foo", ""),
        ("LoggingServiceV2", "logging", ""),
        ("SecretManagerService", "secretmanager", ""),
        ("AutoscalingPolicyService", "dataproc", "AutoscalingPolicy"),
        ("IAMPolicy", "iam", "IamPolicy"),
        ("Version", "x", "Version"),
        ("FooV", "x", "Foo"),
    ],
)
def test_reduce_serv_name(svc, pkg, want):
    assert reduce_serv_name(svc, pkg) == want


def test_go_type_for_prim():
    assert go_type_for_prim(FieldType.TYPE_STRING) == "string"
    assert go_type_for_prim(FieldType.TYPE_BYTES) == "[]byte"
    assert go_type_for_prim(FieldType.TYPE_DOUBLE) == "float64"
    assert go_type_for_prim(FieldType.TYPE_SINT64) == "int64"


def test_go_type_for_non_primitive_raises():
    with pytest.raises(KeyError):
        go_type_for_prim(FieldType.TYPE_MESSAGE)