"""Root test configuration: shared entry fixtures"""

import pytest


SAMPLE_ENTRY = """\
---
id: first-post
title: "A, B: Test"
section: writing
year: 2021
tags:
  - alpha
  - beta
featured: true
---
Body text here.
"""


@pytest.fixture(name="entries_dir")
def entries_dir_fixture(tmp_path):
    """An empty content/entries directory under tmp_path."""
    d = tmp_path / "content" / "entries"
    d.mkdir(parents=True)
    return d


@pytest.fixture(name="sample_entry")
def sample_entry_fixture(entries_dir):
    p = entries_dir / "first-post.md"
    p.write_text(SAMPLE_ENTRY, encoding="utf-8")
    return p
