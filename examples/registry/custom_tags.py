"""Swap tag names with your own registry."""

from linemark import Markdown, Marker, TagRegistryBuilder

registry = (
    TagRegistryBuilder()
    .register(Marker.HEADER1, "h2", prefix="# ", token="#")
    .register(Marker.HEADER2, "h3", prefix="## ", token="##")
    .register(Marker.BOLD, "strong", prefix="** ", token="**")
    .register(Marker.PARAGRAPH, "div")
    .build()
)

md = Markdown(bold=True, registry=registry)

source = """# Page title
## Section
** Important
Body text"""

print(md(source))
