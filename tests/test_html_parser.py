import pytest
from bs4 import BeautifulSoup

from opengraph.core.models import OpenGraph
from opengraph.services.exceptions import ParseError
from opengraph.services.html_parser import HTMLParser, walk, parse


class TestWalk:
    """Unit tests for the document walk"""

    def test_single_og_title(self):
        """Test a single og:title sets the title."""
        html = '<html><head><meta property="og:title" content="X"></head></html>'

        og = parse(html)

        assert og.title == "X"

    def test_first_og_title_wins(self):
        """Test that the first og:title is kept when duplicated."""
        html = """
        <html>
        <head>
            <meta property="og:title" content="First">
            <meta property="og:title" content="Second">
        </head>
        </html>
        """

        og = parse(html)

        assert og.title == "First"

    def test_image_with_width(self):
        """Test og:image followed by og:image:width builds one entry."""
        html = """
        <html>
        <head>
            <meta property="og:image" content="a.png">
            <meta property="og:image:width" content="100">
        </head>
        </html>
        """

        og = parse(html)

        assert len(og.image) == 1
        assert og.image[0].url == "a.png"
        assert og.image[0].width == 100

    def test_orphan_image_width_is_dropped(self):
        """Test og:image:width with no preceding og:image leaves images empty."""
        html = '<html><head><meta property="og:image:width" content="100"></head></html>'

        og = parse(html)

        assert og.image == []

    def test_qualifiers_attach_to_most_recent_image(self):
        """Test that qualifying properties follow the latest og:image."""
        html = """
        <html>
        <head>
            <meta property="og:image" content="a.png">
            <meta property="og:image:width" content="100">
            <meta property="og:image" content="b.png">
            <meta property="og:image:height" content="50">
            <meta property="og:image:alt" content="A bee">
        </head>
        </html>
        """

        og = parse(html)

        assert [image.url for image in og.image] == ["a.png", "b.png"]
        assert og.image[0].width == 100
        assert og.image[0].height is None
        assert og.image[1].height == 50
        assert og.image[1].alt == "A bee"

    def test_canonical_last_wins(self):
        """Test that the last canonical link overwrites earlier ones."""
        html = """
        <html>
        <head>
            <link rel="canonical" href="https://a">
            <link rel="canonical" href="https://b">
        </head>
        </html>
        """

        og = parse(html)

        assert og.canonical_url == "https://b"

    def test_icon_link_sets_favicon(self):
        """Test extracting favicon from link rel=icon."""
        og = parse('<html><head><link rel="icon" href="/f.ico"></head></html>')

        assert og.favicon == "/f.ico"

    def test_stylesheet_link_changes_nothing(self):
        """Test that unrelated links contribute nothing."""
        og = parse('<html><head><link rel="stylesheet" href="/s.css"></head></html>')

        assert og == OpenGraph()

    @pytest.mark.parametrize("strict,expected", [
        (True, ""),
        (False, "Page"),
    ])
    def test_title_tag_depends_on_strict(self, strict, expected):
        """Test that <title> is only read in lenient mode."""
        html = "<html><head><title>Page</title></head><body></body></html>"

        og = parse(html, strict=strict)

        assert og.title == expected

    @pytest.mark.parametrize("strict,expected", [
        (False, "Page"),
        (True, "X"),
    ])
    def test_title_tag_before_og_title(self, strict, expected):
        """Test that an earlier <title> is kept over og:title unless strict."""
        html = '<html><head><title>Page</title><meta property="og:title" content="X"></head></html>'

        og = parse(html, strict=strict)

        assert og.title == expected

    def test_name_description_before_og_description(self):
        """Test that the first description tag wins whatever its naming attribute."""
        html = """
        <html>
        <head>
            <meta name="description" content="D1">
            <meta property="og:description" content="D2">
        </head>
        </html>
        """

        assert parse(html).description == "D1"
        assert parse(html, strict=True).description == "D2"

    def test_image_url_without_image(self):
        """Test that og:image:url alone yields one image."""
        html = """
        <html>
        <head>
            <meta property="og:image:url" content="a.png">
            <meta property="og:image:width" content="100">
        </head>
        </html>
        """

        og = parse(html)

        assert len(og.image) == 1
        assert og.image[0].url == "a.png"
        assert og.image[0].width == 100

    def test_strict_ignores_links(self):
        """Test that strict mode skips favicon and canonical links."""
        html = """
        <html>
        <head>
            <link rel="icon" href="/f.ico">
            <link rel="canonical" href="https://a">
        </head>
        </html>
        """

        og = parse(html, strict=True)

        assert og.favicon == ""
        assert og.canonical_url == ""

    @pytest.mark.parametrize("strict,expected", [
        (False, 6),
        (True, 3),
    ])
    def test_dispatch_count_matches_recognised_elements(self, strict, expected):
        """Test every meta/title/link element is dispatched exactly once."""
        html = """
        <html>
        <head>
            <title>Page</title>
            <meta charset="utf-8">
            <meta property="og:title" content="X">
            <link rel="icon" href="/f.ico">
            <link rel="stylesheet" href="/s.css">
        </head>
        <body>
            <div><p>text <!-- comment --></p><section><meta property="og:type" content="article"></section></div>
        </body>
        </html>
        """
        soup = BeautifulSoup(html, "lxml")
        og = OpenGraph.new("https://example.com", strict=strict)

        count = walk(soup, og)

        assert count == expected
        assert og.type == "article"

    def test_document_order_across_nesting(self):
        """Test that nested elements are visited pre-order, left to right."""
        html = """
        <html>
        <head><meta property="og:image" content="head.png"></head>
        <body>
            <div>
                <div><meta property="og:image" content="nested.png"></div>
                <meta property="og:image:width" content="10">
            </div>
            <meta property="og:image" content="last.png">
        </body>
        </html>
        """

        og = parse(html)

        assert [image.url for image in og.image] == ["head.png", "nested.png", "last.png"]
        assert og.image[1].width == 10

    def test_walk_is_deterministic(self):
        """Test walking the same tree into fresh records gives equal results."""
        html = """
        <html>
        <head>
            <title>Page</title>
            <meta property="og:image" content="a.png">
            <meta property="og:image:width" content="100">
            <meta property="og:locale:alternate" content="fr_FR">
            <link rel="icon" href="/f.ico">
        </head>
        </html>
        """
        soup = BeautifulSoup(html, "lxml")

        first = OpenGraph.new("https://example.com")
        second = OpenGraph.new("https://example.com")
        walk(soup, first)
        walk(soup, second)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_deeply_nested_document(self):
        """Test that degenerate nesting does not hit the recursion limit."""
        depth = 2000
        html = "<div>" * depth + '<meta property="og:title" content="Deep">' + "</div>" * depth

        og = HTMLParser(html, features="html.parser").parse()

        assert og.title == "Deep"

    def test_foreign_node_aborts_walk(self):
        """Test that a corrupted tree raises ParseError."""
        soup = BeautifulSoup('<html><head><meta property="og:title" content="X"></head></html>', "lxml")
        soup.head.contents.append(object())
        og = OpenGraph()

        with pytest.raises(ParseError):
            walk(soup, og)


class TestHTMLParser:
    """Unit tests for HTMLParser"""

    def test_full_document(self):
        """Test extracting a complete record from a realistic page."""
        html = """
        <html>
        <head>
            <title>Regular Title</title>
            <link rel="shortcut icon" href="/favicon.ico">
            <link rel="canonical" href="https://example.com/page">
            <meta property="og:title" content="Open Graph Title">
            <meta property="og:type" content="video.movie">
            <meta property="og:url" content="https://example.com/page">
            <meta property="og:description" content="A movie page">
            <meta property="og:determiner" content="the">
            <meta property="og:locale" content="en_GB">
            <meta property="og:locale:alternate" content="fr_FR">
            <meta property="og:locale:alternate" content="es_ES">
            <meta property="og:site_name" content="Example">
            <meta property="og:video" content="https://example.com/movie.mp4">
            <meta property="og:video:type" content="video/mp4">
            <meta property="og:video:width" content="400">
            <meta property="og:audio" content="https://example.com/sound.mp3">
            <meta property="og:audio:secure_url" content="https://secure.example.com/sound.mp3">
            <meta property="og:audio:type" content="audio/mpeg">
        </head>
        <body></body>
        </html>
        """
        parser = HTMLParser(html, "https://example.com/page")

        og = parser.parse()

        assert og.title == "Regular Title"
        assert og.type == "video.movie"
        assert og.url == "https://example.com/page"
        assert og.description == "A movie page"
        assert og.determiner == "the"
        assert og.locale == "en_GB"
        assert og.locale_alternate == ["fr_FR", "es_ES"]
        assert og.site_name == "Example"
        assert og.favicon == "/favicon.ico"
        assert og.canonical_url == "https://example.com/page"
        assert og.video[0].type == "video/mp4"
        assert og.video[0].width == 400
        assert og.audio[0].secure_url == "https://secure.example.com/sound.mp3"
        assert og.audio[0].type == "audio/mpeg"
        assert og.intent.url == "https://example.com/page"

    def test_strict_flag_is_carried_on_intent(self):
        """Test the record remembers how it was parsed."""
        og = HTMLParser("<html></html>", "https://example.com", strict=True).parse()

        assert og.intent.strict is True

    def test_page_without_metadata(self):
        """Test that a page with no recognised tags yields an empty record."""
        og = parse("<html><body><p>Hello</p></body></html>")

        assert og == OpenGraph()
