"""Re-render the whole buffer on every edit, like an input box preview.

Type lines on stdin; after each one the full document is rendered again.
"""

import sys

from linemark import Markdown

md = Markdown(bold=True)
buffer: list[str] = []

for line in sys.stdin:
    buffer.append(line.rstrip("\n"))
    print(md("\n".join(buffer)), flush=True)
