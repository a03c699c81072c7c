"""Notice placed at the top of every generated Go file."""

GENERATOR_NAME = "gapicgen"
HOLDER = "Google LLC"
TERMS = "Apache-2.0"

_NOTICE_LINES = (
    "// (c) {year:d} {holder}",
    "//",
    "// This file is made available under the {terms} terms;",
    "// it may be used only in accordance with those terms.",
    "// The full text of the terms accompanies this distribution.",
    "//",
    "// The file is provided as is, with no guarantee of any kind,",
    "// express or implied. Refer to the terms for the rights and",
    "// limitations that apply to its use.",
    "//",
    "// Generated sources are rewritten on every run; edit the",
    "// protocol definitions rather than this file.",
    "//",
)

_TRAILER_LINES = (
    "",
    "// Code generated by {generator}. DO NOT EDIT.",
    "",
    "",
)

HEADER_TEMPLATE = "\n".join(_NOTICE_LINES + _TRAILER_LINES)


def apache_header(year):
    """Return the header for generated code, stamped with ``year``.

    The text ends with a blank line so that code can follow it directly.
    """
    return HEADER_TEMPLATE.format(
        year=year, holder=HOLDER, terms=TERMS, generator=GENERATOR_NAME
    )