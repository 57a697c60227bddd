import pytest

from marco.escape import html_escape
from marco.youtube import (
    build_youtube_iframe,
    extract_alt_from_shorthand,
    render_youtube_thumbnail_link,
    youtube_id_from_url,
    youtube_thumbnail_url_for_id,
    youtube_watch_url_for_id,
)


@pytest.mark.parametrize(
    "url",
    [
        "https://youtu.be/H8c1ObYSlQI?si=SC_SV3bB7fT1gvN7",
        "http://youtu.be/H8c1ObYSlQI",
        "https://youtu.be/H8c1ObYSlQI&x=1",
        "https://www.youtube.com/watch?v=H8c1ObYSlQI",
        "https://www.youtube.com/watch?feature=share&v=H8c1ObYSlQI",
        "https://www.youtube.com/embed/H8c1ObYSlQI?controls=1&rel=0",
        "https://img.youtube.com/vi/H8c1ObYSlQI/0.jpg",
    ],
)
def test_id_from_known_url_forms(url):
    assert youtube_id_from_url(url) == "H8c1ObYSlQI"


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/video.mp4",
        "https://www.youtube.com/watch?list=abc",
        "https://www.youtube.com/channel/abc",
        "",
    ],
)
def test_id_from_unrecognised_url_is_none(url):
    assert youtube_id_from_url(url) is None


def test_watch_url_matches_source_form():
    assert youtube_watch_url_for_id("YOUTUBE-ID") == "https://www.youtube.com/watch?v=YOUTUBE-ID"


def test_thumbnail_url_matches_source_form():
    assert youtube_thumbnail_url_for_id("YOUTUBE-ID") == "https://img.youtube.com/vi/YOUTUBE-ID/0.jpg"


@pytest.mark.parametrize("video_id", ["YOUTUBE-ID", "H8c1ObYSlQI", "abc_123"])
def test_watch_and_thumbnail_urls_round_trip(video_id):
    assert youtube_id_from_url(youtube_watch_url_for_id(video_id)) == video_id
    assert youtube_id_from_url(youtube_thumbnail_url_for_id(video_id)) == video_id


def test_iframe_contains_embed_url_and_iframe():
    out = build_youtube_iframe("H8c1ObYSlQI", "Test")
    assert "https://www.youtube.com/embed/H8c1ObYSlQI" in out
    assert "<iframe" in out
    assert 'title="Test"' in out
    assert "%ID%" not in out and "%VID%" not in out
    assert out.endswith("</script>")


def test_iframe_sanitizes_container_id():
    out = build_youtube_iframe("a-b", "Video")
    assert 'id="yt-player-a_b"' in out
    assert "getElementById('yt-player-a_b')" in out
    assert "videoId: 'a-b'" in out


def test_iframe_escapes_title():
    title = 'Tom & "Jerry" <live>'
    out = build_youtube_iframe("H8c1ObYSlQI", title)
    assert title not in out
    assert f'title="{html_escape(title)}"' in out


def test_iframe_has_no_autoplay_param():
    out = build_youtube_iframe("H8c1ObYSlQI", "Test")
    assert "autoplay=1" not in out
    assert "?controls=1&rel=0" in out


def test_thumbnail_link_defaults_to_watch_page():
    out = render_youtube_thumbnail_link("YOUTUBE-ID", "Image alt text")
    assert 'href="https://www.youtube.com/watch?v=YOUTUBE-ID"' in out
    assert 'src="https://img.youtube.com/vi/YOUTUBE-ID/0.jpg"' in out
    assert 'alt="Image alt text"' in out
    assert out.startswith('<div class="yt-embed"')
    assert out.endswith("</div>")


def test_thumbnail_link_uses_and_escapes_href_override():
    href = "https://example.com/watch?a=1&b=2"
    out = render_youtube_thumbnail_link("YOUTUBE-ID", "<alt>", href)
    assert f'href="{html_escape(href)}"' in out
    assert "watch?v=YOUTUBE-ID" not in out
    assert f'alt="{html_escape("<alt>")}"' in out


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("![Test](https://youtu.be/H8c1ObYSlQI?si=SC_SV3bB7fT1gvN7)", "Test"),
        ("   ![Image alt text]", "Image alt text"),
        ("![partial(https://youtu.be/x)", "partial"),
        ("![dangling", "dangling"),
        ("no image here", "YouTube video"),
    ],
)
def test_extract_alt_from_shorthand(text, expected):
    assert extract_alt_from_shorthand(text) == expected