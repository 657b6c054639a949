"""Test setup for slidepress."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SAMPLE_DECK = """\
# Introduction

Welcome to *slidepress*.
It renders _decks_.

- first point
- second point
  - nested point

.image images/diagram.png 300 _
.caption The _overall_ architecture

## Details

```go -edit
package main

func main() {}
```

.link https://example.com Example *site*
.html <div class="raw">raw & unescaped</div>

# Wrap up

    preformatted  text
    keeps   spacing

.video media/demo.mp4 video/mp4 240 320
"""


@pytest.fixture
def sample_deck() -> str:
    """A deck that exercises every element kind except background and iframe."""
    return SAMPLE_DECK


@pytest.fixture
def recording_rules() -> tuple[dict, list[tuple[str, dict]]]:
    """Rules for every kind that record each call and echo a marker."""
    from slidepress.schemas import RULE_KINDS

    calls: list[tuple[str, dict]] = []

    def make(kind: str):
        def rule(context: dict) -> str:
            calls.append((kind, context))
            if kind == "section":
                return f"[{context['formatted_number']}]{context['body']}[/{context['formatted_number']}]"
            return f"<{kind}>"

        return rule

    return {kind: make(kind) for kind in RULE_KINDS}, calls
