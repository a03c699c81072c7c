"""Line-oriented printer that indents code by tracking curly braces."""

import io


class Printer:
    """Accumulates lines of brace-delimited code with automatic indentation."""

    def __init__(self):
        self._buf = io.StringIO()
        self._indent = 0

    def reset(self):
        """Discard everything written so far and reset the indentation."""
        self._buf = io.StringIO()
        self._indent = 0

    def printf(self, s, *args):
        """Write one line formatted printf-style with ``args``.

        Leading and trailing whitespace of ``s`` is ignored. Each leading
        ``}`` dedents the line and each trailing ``{`` indents the lines that
        follow; braces coming from ``args`` do not count.
        """
        s = s.strip()
        if not s:
            self._buf.write("\n")
            return

        self._indent -= len(s) - len(s.lstrip("}"))
        self._buf.write("\t" * self._indent)
        self._buf.write(s % args)
        self._buf.write("\n")
        self._indent += len(s) - len(s.rstrip("{"))

    def write(self, text):
        """Write ``text`` verbatim, without indentation; return its length."""
        return self._buf.write(text)

    def getvalue(self):
        """Return everything written so far."""
        return self._buf.getvalue()

    def __str__(self):
        return self.getvalue()

    def __len__(self):
        return len(self._buf.getvalue())