from html.parser import HTMLParser
from typing import Callable, Dict, Iterator, List, Optional
from urllib.parse import quote

import httpx
import structlog

from ..config import settings
from ..schemas.analysis import ProductRecord


logger = structlog.get_logger("stylefit")

FETCH_ERROR = "Unable to fetch product details from URL"
TITLE_LIMIT = 100
DESCRIPTION_LIMIT = 300

_VOID_TAGS = {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}

# Opening one of these closes an open <p>
_CLOSES_P = {
    "address", "article", "aside", "blockquote", "details", "div", "dl", "fieldset", "figcaption",
    "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "li", "main",
    "nav", "ol", "p", "pre", "section", "table", "ul",
}
_P_SCOPE = {"applet", "button", "caption", "html", "marquee", "object", "table", "td", "template", "th"}

# tag -> steps of (open tag to close, containers that stop the search)
_IMPLIED_END: Dict[str, List[tuple[set, set]]] = {
    "li": [({"li"}, {"ul", "ol", "menu"})],
    "dt": [({"dt", "dd"}, {"dl"})],
    "dd": [({"dt", "dd"}, {"dl"})],
    "tr": [({"tr"}, {"table", "thead", "tbody", "tfoot"})],
    "td": [({"td", "th"}, {"tr", "table"})],
    "th": [({"td", "th"}, {"tr", "table"})],
    "thead": [({"thead", "tbody", "tfoot"}, {"table"})],
    "tbody": [({"thead", "tbody", "tfoot"}, {"table"})],
    "tfoot": [({"thead", "tbody", "tfoot"}, {"table"})],
    "option": [({"option"}, {"select", "datalist", "optgroup"})],
    "optgroup": [({"option"}, {"select", "datalist", "optgroup"}), ({"optgroup"}, {"select"})],
}


class _Node:
    def __init__(self, tag: str, attrs: Dict[str, str]) -> None:
        self.tag = tag
        self.attrs = attrs
        self.children: List["_Node | str"] = []

    def text(self) -> str:
        parts: List[str] = []
        pending: List["_Node | str"] = list(reversed(self.children))
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            else:
                pending.extend(reversed(item.children))
        return "".join(parts)

    def walk(self) -> Iterator["_Node"]:
        """Descendant elements in document order."""
        pending = [c for c in reversed(self.children) if isinstance(c, _Node)]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(c for c in reversed(node.children) if isinstance(c, _Node))


class _TreeBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = _Node("#document", {})
        self._stack: List[_Node] = [self.root]

    def _close_from(self, tags: set, boundary: set) -> None:
        for i in range(len(self._stack) - 1, 0, -1):
            tag = self._stack[i].tag
            if tag in tags:
                del self._stack[i:]
                return
            if tag in boundary:
                return

    def handle_starttag(self, tag, attrs):
        if tag in _CLOSES_P:
            self._close_from({"p"}, _P_SCOPE)
        for tags, boundary in _IMPLIED_END.get(tag, ()):
            self._close_from(tags, boundary)

        node = _Node(tag, {k: v or "" for k, v in attrs})
        self._stack[-1].children.append(node)
        if tag not in _VOID_TAGS:
            self._stack.append(node)

    def handle_startendtag(self, tag, attrs):
        self._stack[-1].children.append(_Node(tag, {k: v or "" for k, v in attrs}))

    def handle_endtag(self, tag):
        # Close up to the nearest matching open tag; stray end tags are ignored
        for i in range(len(self._stack) - 1, 0, -1):
            if self._stack[i].tag == tag:
                del self._stack[i:]
                return

    def handle_data(self, data):
        self._stack[-1].children.append(data)


class ProductPage:
    """Just enough of a parsed product page to pull the fields we display."""

    def __init__(self, html: str) -> None:
        builder = _TreeBuilder()
        builder.feed(html)
        builder.close()
        self.root = builder.root

    def find_all(self, match: Callable[[_Node], bool]) -> List[_Node]:
        return [n for n in self.root.walk() if match(n)]

    def first_text(self, match: Callable[[_Node], bool]) -> Optional[str]:
        for node in self.root.walk():
            if match(node):
                text = node.text()
                return text if text else None
        return None

    def title(self) -> str:
        return (
            self.first_text(lambda n: n.tag == "title")
            or self.first_text(lambda n: n.tag == "h1")
            or self.first_text(lambda n: n.attrs.get("data-testid") == "product-title")
            or "Product"
        )

    def price(self) -> str:
        price = (
            self.first_text(lambda n: "price" in n.attrs.get("class", ""))
            or self.first_text(lambda n: n.attrs.get("data-testid") == "price")
            or "Price not found"
        )
        return price.strip()

    def description(self) -> str:
        text = self.first_text(lambda n: "description" in n.attrs.get("class", ""))
        if text:
            return text
        for node in self.find_all(lambda n: n.tag == "meta" and n.attrs.get("name") == "description"):
            if node.attrs.get("content"):
                return node.attrs["content"]
        return "Description not available"

    def reviews(self, limit: int) -> List[str]:
        nodes = self.find_all(
            lambda n: "review" in n.attrs.get("class", "") or "review" in n.attrs.get("data-testid", "")
        )
        return [n.text().strip() for n in nodes[:limit]]


def parse_product_page(html: str, review_limit: int = 5) -> ProductRecord:
    page = ProductPage(html)
    return ProductRecord(
        title=page.title()[:TITLE_LIMIT],
        price=page.price(),
        description=page.description()[:DESCRIPTION_LIMIT],
        review_texts=page.reviews(review_limit),
        provenance="web",
    )


def _unavailable() -> ProductRecord:
    return ProductRecord(title="Product Analysis", provenance="simulated", error=FETCH_ERROR)


class ProductApiClient:
    def __init__(self) -> None:
        self.proxy = settings.product_fetch_proxy
        self.timeout = settings.product_fetch_timeout
        self.review_limit = settings.product_review_limit

    def _target(self, url: str) -> str:
        if self.proxy:
            return f"{self.proxy}{quote(url, safe='')}"
        return url

    async def fetch(self, url: str) -> ProductRecord:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                resp = await client.get(self._target(url))
                resp.raise_for_status()
                html = resp.text
        except httpx.HTTPError as e:
            logger.warning("product_fetch_failed", url=url, error=str(e), error_type=type(e).__name__)
            return _unavailable()

        try:
            return parse_product_page(html, self.review_limit)
        except Exception as e:
            logger.warning("product_parse_failed", url=url, error=str(e), error_type=type(e).__name__, exc_info=True)
            return _unavailable()

    def from_image(self, filename: str | None = None) -> ProductRecord:
        # Uploads are only tagged; the image itself is never inspected
        logger.info("product_image_received", filename=filename)
        return ProductRecord(title="Image Analysis", provenance="image")
