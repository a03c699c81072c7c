import pytest

from gapicgen.goldendiff import GoldenMismatch, diff


def test_update_writes_golden_file(tmp_path):
    golden = tmp_path / "out.want"
    diff("first line\n", golden, update=True)
    assert golden.read_text() == "first line\n"


def test_matching_text_passes(tmp_path):
    golden = tmp_path / "out.want"
    golden.write_text("same\n")
    assert diff("same\n", golden) is None
    assert golden.read_text() == "same\n"


def test_mismatch_raises_with_diff(tmp_path):
    golden = tmp_path / "out.want"
    golden.write_text("keep\nold line\n")
    with pytest.raises(GoldenMismatch) as exc:
        diff("keep\nnew line\n", golden)
    assert exc.value.want == "keep\nold line\n"
    assert exc.value.got == "keep\nnew line\n"
    assert "-old line" in exc.value.diff
    assert "+new line" in exc.value.diff


def test_mismatch_is_assertion_error(tmp_path):
    golden = tmp_path / "out.want"
    golden.write_text("a\n")
    with pytest.raises(GoldenMismatch) as exc:
        diff("b\n", golden)
    assert isinstance(exc.value, AssertionError)
    assert exc.value.want == "a\n"
    assert exc.value.got == "b\n"
    assert "-a" in exc.value.diff
    assert "+b" in exc.value.diff


def test_missing_golden_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        diff("anything", tmp_path / "absent.want")


def test_update_replaces_mismatch(tmp_path):
    golden = tmp_path / "out.want"
    golden.write_text("stale\n")
    diff("fresh\n", golden, update=True)
    assert golden.read_text() == "fresh\n"
    assert diff("fresh\n", golden) is None


def test_line_endings_preserved(tmp_path):
    golden = tmp_path / "out.want"
    diff("x\r\n", golden, update=True)
    assert golden.read_bytes() == b"x\r\n"
    with pytest.raises(GoldenMismatch):
        diff("x\n", golden)