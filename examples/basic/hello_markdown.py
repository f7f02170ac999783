"""Render line-oriented Markdown in 3 lines, zero config, zero deps."""

from linemark import to_html

html = to_html("# Hello\n\nWorld\n---")
print(html)
