"""Comparison of generated text against golden files."""

import difflib
from pathlib import Path


class GoldenMismatch(AssertionError):
    """Raised when generated text differs from its golden file."""

    def __init__(self, golden_file, want, got):
        self.golden_file = str(golden_file)
        self.want = want
        self.got = got
        self.diff = "".join(
            difflib.unified_diff(
                want.splitlines(keepends=True),
                got.splitlines(keepends=True),
                fromfile=f"{self.golden_file} (want)",
                tofile="got",
            )
        )
        super().__init__(f"mismatch(-want, +got):\n{self.diff}")


def diff(got, golden_file, update=False):
    """Check ``got`` against the contents of ``golden_file``.

    With ``update`` the golden file is overwritten with ``got`` instead.
    Raises GoldenMismatch when the texts differ.
    """
    path = Path(golden_file)
    if update:
        path.write_bytes(got.encode("utf-8"))
        return
    want = path.read_bytes().decode("utf-8")
    if want != got:
        raise GoldenMismatch(path, want, got)