"""HTML builders for booking page fixtures."""

from __future__ import annotations


def booking_block(label: str | None, href: str | None, annotation: str | None) -> str:
    """Render one booking row; ``None`` leaves the corresponding element out."""

    parts = ['<div class="block__row media">']
    if label is not None:
        parts.append(f"<h3>{label}</h3>")
    if href is not None:
        parts.append(f'<a href="{href}">Boka tid</a>')
    if annotation is not None:
        parts.append(f"<p><span>{annotation}</span></p>")
    parts.append("</div>")
    return "".join(parts)


def booking_page(*blocks: str) -> str:
    return (
        "<html><body>"
        '<div class="mottagningbookabletimeslistblock">'
        + "".join(blocks)
        + "</div></body></html>"
    )
