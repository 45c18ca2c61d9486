#!/usr/bin/env python3
"""Run the detail-card pipeline on a saved HTML file.

Accepts both full event pages (``#event_details .card-block``) and bare
``.card-block`` snippets. Writes ``<file>-extraction-output.md`` next to the
input with the description and a JSON-escaped copy that shows whitespace.

Usage: python scripts/extraction_report.py path/to/event.html
"""

from __future__ import annotations

import argparse
import json
import pathlib
import sys

from eventscan.observability.logger import configure_logging
from eventscan.services.event_scanner import SNIPPET_CARD_SELECTORS, EventDetailsScanner


def render_markdown(source: pathlib.Path, description: str, matches: tuple[str, ...]) -> str:
    return f"""# Extraction Test: `{source}`

## Result

```
{description}
```

## Raw (JSON-escaped to show whitespace characters)

```json
{json.dumps(description, ensure_ascii=False)}
```

## Free-food keyword matches

{", ".join(matches) if matches else "(none)"}
"""


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("html_file", type=pathlib.Path)
    args = parser.parse_args()

    source: pathlib.Path = args.html_file
    if not source.exists():
        print(f"ERROR: missing file: {source}", file=sys.stderr)
        return 1

    configure_logging(log_format="console", log_level="DEBUG")
    scanner = EventDetailsScanner(card_selectors=SNIPPET_CARD_SELECTORS, log_keyword_matches=True)
    details = scanner.scan_html(source.read_text(encoding="utf-8"))
    matches = scanner.classifier.matched_keywords(details.description)

    out_path = source.with_name(f"{source.stem}-extraction-output.md")
    out_path.write_text(render_markdown(source, details.description, matches), encoding="utf-8")

    print(f"Output written to: {out_path}")
    print("\n--- RESULT ---\n" + details.description)
    print(f"\nhasFreeFood={details.has_free_food} isHousingOnly={details.is_housing_only}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
