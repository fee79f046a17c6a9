import html
from html.parser import HTMLParser

from werkzeug.test import TestResponse

EMAIL_ERROR = "the email you input is invalid"
PASSWORD_ERROR = "the email you entered should contain 5 or more characters"
MISMATCH_ERROR = "the passwords don't match. try again"


def page_text(response: TestResponse) -> str:
    """Response body with HTML entities decoded and lower-cased, for matching visible messages."""
    return html.unescape(response.get_data(as_text=True)).lower()


class FormParser(HTMLParser):
    """Collects the inputs (by id) and the label text (by the id it points at) on a page."""

    def __init__(self) -> None:
        super().__init__()
        self.inputs: dict[str, dict[str, str]] = {}
        self.labels: dict[str, str] = {}
        self._label_for: str | None = None
        self._label_text: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        attr_map = {name: value or "" for name, value in attrs}
        if tag == "input":
            self.inputs[attr_map.get("id") or attr_map.get("name", "")] = attr_map
        elif tag == "label":
            self._label_for = attr_map.get("for", "")
            self._label_text = []

    def handle_data(self, data: str) -> None:
        if self._label_for is not None:
            self._label_text.append(data)

    def handle_endtag(self, tag: str) -> None:
        if tag == "label" and self._label_for is not None:
            self.labels[self._label_for] = "".join(self._label_text).strip()
            self._label_for = None


def parse_form(response: TestResponse) -> FormParser:
    parser = FormParser()
    parser.feed(response.get_data(as_text=True))
    return parser
