"""Preview and export the same draft: HTML for the screen, metrics for the page."""

from mdexport import render, render_html

draft = "# Hello **World**\n\n- one\n- two"

print(render_html(draft))

page = render(draft)
for block in page.children:
    print(block.kind, block.metrics.font_size)
