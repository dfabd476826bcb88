"""Shared pytest fixtures for ATHN tests."""

import pytest

from athn.core import ir

FULL_DOCUMENT = """
+++ Meta
TI Test
ST Subtitle test
AU Author 1
AU Author 2
LI CC0-1.0
LA en
CH 0
+++ Header
=> /index.athn Homepage
=> /about.athn About
+++

()
Little text line
=> https://example.com/ Link line with label, the next one will be without
=> https://localhost/
```Preformatted line
'''Textual preformatted line
---
1* Unordered list
2* Subitem
6* Subsubsubsubsubitem
1- 1. Ordered list
1- 2. With multiple lines
2- a) And subitems
\\/ Dropdown | This is a dropdown line
_! Note admonition
*! Warning admonition
!! Danger admonition
1# Heading 1
2# Heading 2
4# Heading 4
>> I never said that  - Albert Einstein
+++ Footer
This is just a boring old footer
=> /privacy.athn Privacy policy"""

FORM_DOCUMENT = """+++ Meta
TI Form test
+++
The next line is where the first form starts
+++ Form
1# Contact
[] name:string \\l Your name \\max 120
[] age:int \\? \\min 0
[] Send:submit \\dest /one
+++
Then the second form
+++ Form
[] Send:submit \\dest /two \\redirect
"""


@pytest.fixture
def full_document() -> str:
    """A document using every body construct plus meta, header and footer."""
    return FULL_DOCUMENT


@pytest.fixture
def form_document() -> str:
    """A document with two independent forms."""
    return FORM_DOCUMENT


@pytest.fixture
def other_id() -> ir.ID:
    return ir.ID.new("other_id")
