import httpx
import pytest
import respx
from structlog.testing import capture_logs

from stylefit.config import settings
from stylefit.services.product_api import FETCH_ERROR, ProductApiClient, parse_product_page


PRODUCT_URL = "https://shop.example.com/products/linen-shirt"

PAGE = """
<html>
  <head>
    <title>Linen Shirt | Shop</title>
    <meta name="description" content="Breathable linen for warm days.">
  </head>
  <body>
    <h1>Linen Shirt</h1>
    <span class="product-price">$49.99</span>
    <div class="review">Great fit, love it</div>
    <div class="review">Runs small in the shoulders</div>
    <img src="shirt.jpg">
  </body>
</html>
"""


def test_parse_product_page():
    record = parse_product_page(PAGE)
    assert record.title == "Linen Shirt | Shop"
    assert record.price == "$49.99"
    assert record.description == "Breathable linen for warm days."
    assert record.review_texts == ["Great fit, love it", "Runs small in the shoulders"]
    assert record.provenance == "web"
    assert record.error is None


def test_parse_fallbacks():
    record = parse_product_page("<html><body><h1>Wool Coat</h1><div class='item-description'>Warm.</div></body></html>")
    assert record.title == "Wool Coat"
    assert record.price == "Price not found"
    assert record.description == "Warm."
    assert record.review_texts == []


def test_parse_defaults_and_limits():
    reviews = "".join(f'<p data-testid="review-{i}">Review {i}</p>' for i in range(8))
    record = parse_product_page(f"<div>{reviews}</div>", review_limit=5)
    assert record.title == "Product"
    assert record.description == "Description not available"
    assert record.review_texts == [f"Review {i}" for i in range(5)]

    long_title = "T" * 150
    assert len(parse_product_page(f"<title>{long_title}</title>").title) == 100


@pytest.mark.asyncio
@respx.mock
async def test_fetch_ok():
    route = respx.get(PRODUCT_URL).mock(return_value=httpx.Response(200, text=PAGE))
    record = await ProductApiClient().fetch(PRODUCT_URL)
    assert route.called
    assert record.provenance == "web"
    assert record.title == "Linen Shirt | Shop"


@pytest.mark.asyncio
@respx.mock
async def test_fetch_http_error_degrades_to_simulated():
    respx.get(PRODUCT_URL).mock(return_value=httpx.Response(503))
    record = await ProductApiClient().fetch(PRODUCT_URL)
    assert record.provenance == "simulated"
    assert record.title == "Product Analysis"
    assert record.error == FETCH_ERROR
    assert record.review_texts == []


@pytest.mark.asyncio
@respx.mock
async def test_fetch_connection_error_is_not_retried():
    route = respx.get(PRODUCT_URL).mock(side_effect=httpx.ConnectError("refused"))
    record = await ProductApiClient().fetch(PRODUCT_URL)
    assert record.error == FETCH_ERROR
    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_fetch_through_proxy(monkeypatch):
    monkeypatch.setattr(settings, "product_fetch_proxy", "https://proxy.example.com/raw?url=")
    route = respx.get(host="proxy.example.com", path="/raw").mock(return_value=httpx.Response(200, text=PAGE))
    record = await ProductApiClient().fetch(PRODUCT_URL)
    assert route.called
    assert route.calls.last.request.url.params["url"] == PRODUCT_URL
    assert record.price == "$49.99"


def test_image_record_has_no_extracted_fields():
    with capture_logs() as logs:
        record = ProductApiClient().from_image("shirt.png")
    assert logs[0]["event"] == "product_image_received"
    assert logs[0]["filename"] == "shirt.png"
    assert record.provenance == "image"
    assert record.title == "Image Analysis"
    assert record.price is None
    assert record.review_texts == []


def test_implied_end_tags_split_siblings():
    record = parse_product_page("<ul><li class='review'>Great fit<li class='review'>Runs small</ul>")
    assert record.review_texts == ["Great fit", "Runs small"]

    record = parse_product_page("<p class='review'>Love it<p class='review'>Poor stitching<div>footer</div>")
    assert record.review_texts == ["Love it", "Poor stitching"]


def test_table_and_definition_lists_close_implicitly():
    page = "<table><tr><td class='price'>$20<td>in stock<tr><td>x</table><dl><dt>a<dd class='review'>ok<dt>b</dl>"
    record = parse_product_page(page)
    assert record.price == "$20"
    assert record.review_texts == ["ok"]


def test_thousands_of_unclosed_paragraphs_parse():
    record = parse_product_page("<title>T</title>" + "<p>para" * 3000)
    assert record.title == "T"


def test_deeply_nested_markup_does_not_recurse():
    html = "<div>" * 2000 + "<span class='review'>deep</span>" + "</div>" * 2000
    record = parse_product_page(html)
    assert record.review_texts == ["deep"]


@pytest.mark.asyncio
@respx.mock
async def test_many_unclosed_reviews_are_fetched():
    respx.get(PRODUCT_URL).mock(return_value=httpx.Response(200, text="<li class='review'>nice" * 3000))
    record = await ProductApiClient().fetch(PRODUCT_URL)
    assert record.provenance == "web"
    assert record.review_texts == ["nice"] * 5


@pytest.mark.asyncio
@respx.mock
async def test_parse_failure_degrades_to_simulated(monkeypatch):
    def broken(html, review_limit=5):
        raise ValueError("unreadable page")

    monkeypatch.setattr("stylefit.services.product_api.parse_product_page", broken)
    respx.get(PRODUCT_URL).mock(return_value=httpx.Response(200, text=PAGE))
    record = await ProductApiClient().fetch(PRODUCT_URL)
    assert record.provenance == "simulated"
    assert record.error == FETCH_ERROR
