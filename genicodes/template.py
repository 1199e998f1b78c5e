# SPDX-License-Identifier: GPL-3.0-or-later
"""Render a Document into (unformatted) Go source."""

from .parser import Document

HEADER = """\
//
// This file was generated from the original 'codepoints' file
// from the material design icon fonts:
// https://github.com/google/material-design-icons
//
"""

# The blank line after the header keeps gofmt from treating it as a package
# doc comment and rewriting it.
TEMPLATE = """\
{header}
package {package}

const (
{consts}
)

"""

CONST_LINE = "\t{name} = {value}"


def render(doc: Document) -> str:
    """
    Fill the template with one constant per entry, in document order.

    The output is not formatted; pass it through format_source().
    """
    consts = "\n".join(CONST_LINE.format(name=e.name, value=e.value) for e in doc)
    return TEMPLATE.format(header=HEADER, package=doc.package, consts=consts)
