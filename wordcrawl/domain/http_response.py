from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    status_code: int
    text: str
    content_type: Optional[str] = None
    """Raw Content-Type header, None when the server sent none."""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def is_html(self) -> bool:
        # Servers that omit Content-Type are assumed to serve HTML.
        if not self.content_type:
            return True
        mime = self.content_type.split(";", 1)[0].strip().lower()
        return mime in ("text/html", "application/xhtml+xml")
