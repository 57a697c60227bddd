"""Recognition of YouTube URLs and the HTML used to embed or link their videos."""

from __future__ import annotations

import re

from marco.escape import html_escape

__all__ = [
    "youtube_id_from_url",
    "youtube_watch_url_for_id",
    "youtube_thumbnail_url_for_id",
    "build_youtube_iframe",
    "render_youtube_thumbnail_link",
    "extract_alt_from_shorthand",
]

_SHORT_PREFIXES = ("https://youtu.be/", "http://youtu.be/")
_EMBED_MARK = "/embed/"
_THUMBNAIL_MARK = "img.youtube.com/vi/"
_DEFAULT_TITLE = "YouTube video"

_QUERY_SEPARATORS = re.compile(r"[?&]")
_PATH_OR_QUERY_SEPARATORS = re.compile(r"[/?&]")

_PLAYER_SCRIPT = (
    "<script>(function(){\n"
    "  try {\n"
    "    // If an iframe exists, append an origin query param so YouTube can identify the embedder\n"
    "    var playerContainer = document.getElementById('%ID%');\n"
    "    if (playerContainer) {\n"
    "      var ifr = playerContainer.querySelector('iframe');\n"
    "      if (ifr && ifr.src) {\n"
    "        try {\n"
    "          var sep = ifr.src.indexOf('?') !== -1 ? '&' : '?';\n"
    "          var origin = (typeof location !== 'undefined' && location.origin) ? location.origin : '';\n"
    "          if (origin) { ifr.src = ifr.src + sep + 'origin=' + encodeURIComponent(origin); }\n"
    "        } catch (e) { /* swallow */ }\n"
    "      }\n"
    "    }\n"
    "  } catch (e) { /* ignore */ }\n"
    "  if (!window.YT) {\n"
    "    var tag = document.createElement('script');\n"
    "    tag.src = 'https://www.youtube.com/iframe_api';\n"
    "    var firstScript = document.getElementsByTagName('script')[0];\n"
    "    firstScript.parentNode.insertBefore(tag, firstScript);\n"
    "  }\n"
    "  function createPlayer() { try { if (typeof YT === 'object' && YT && YT.Player) "
    "{ new YT.Player('%ID%', { videoId: '%VID%', playerVars: { controls: 1, rel: 0 } }); } } "
    "catch (e) { console && console.error && console.error(e); } }\n"
    "  if (window.YT && YT.Player) { createPlayer(); } else { var prev = window.onYouTubeIframeAPIReady; "
    "window.onYouTubeIframeAPIReady = function() { if (prev) try { prev(); } catch(e){} createPlayer(); }; }\n"
    "})();</script>"
)


def youtube_id_from_url(url: str) -> str | None:
    """Return the video id in a YouTube URL, or ``None`` if none is recognised.

    Understands ``youtu.be/ID``, ``youtube.com/...?v=ID``, ``/embed/ID`` and
    thumbnail URLs of the form ``img.youtube.com/vi/ID/...``.
    """
    for prefix in _SHORT_PREFIXES:
        if url.startswith(prefix):
            return _QUERY_SEPARATORS.split(url[len(prefix):], maxsplit=1)[0]

    if "youtube.com/watch" in url or "youtube.com/" in url:
        _, question, query = url.partition("?")
        if question:
            for pair in query.split("&"):
                key, equals, value = pair.partition("=")
                if equals and key == "v":
                    return value

    embed_pos = url.find(_EMBED_MARK)
    if embed_pos >= 0:
        tail = url[embed_pos + len(_EMBED_MARK):]
        return _QUERY_SEPARATORS.split(tail, maxsplit=1)[0]

    thumb_pos = url.find(_THUMBNAIL_MARK)
    if thumb_pos >= 0:
        tail = url[thumb_pos + len(_THUMBNAIL_MARK):]
        return _PATH_OR_QUERY_SEPARATORS.split(tail, maxsplit=1)[0]

    return None


def youtube_watch_url_for_id(video_id: str) -> str:
    """Return the watch-page URL for ``video_id``."""
    return f"https://www.youtube.com/watch?v={video_id}"


def youtube_thumbnail_url_for_id(video_id: str) -> str:
    """Return the default thumbnail image URL for ``video_id``."""
    return f"https://img.youtube.com/vi/{video_id}/0.jpg"


def _sanitize_for_id(text: str) -> str:
    return "".join(c if c.isascii() and c.isalnum() else "_" for c in text)


def build_youtube_iframe(video_id: str, title: str) -> str:
    """Return a responsive embed for ``video_id``: an iframe plus a player script.

    The iframe serves clients without scripting; the script upgrades it to an
    IFrame API player. Autoplay is not requested.
    """
    safe = _sanitize_for_id(video_id)
    escaped_id = html_escape(video_id)
    escaped_title = html_escape(title)
    embed_src = f"https://www.youtube.com/embed/{escaped_id}?controls=1&rel=0"

    container_start = (
        '<div class="yt-embed" style="position:relative;padding-bottom:56.25%;height:0;'
        'overflow:hidden;max-width:100%;">\n'
        f'  <div id="yt-player-{safe}" class="yt-player" data-ytid="{escaped_id}" '
        f'title="{escaped_title}" style="position:absolute;top:0;left:0;width:100%;height:100%;">\n'
    )
    iframe_html = (
        f'  <iframe src="{embed_src}" title="{escaped_title}" frameborder="0" '
        'allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; '
        'picture-in-picture" allowfullscreen style="width:100%;height:100%;border:0;"></iframe>\n'
    )
    script = _PLAYER_SCRIPT.replace("%ID%", f"yt-player-{safe}").replace("%VID%", video_id)
    return f"{container_start}{iframe_html}  </div>\n</div>\n{script}"


def render_youtube_thumbnail_link(video_id: str, alt: str, href: str | None = None) -> str:
    """Return a clickable thumbnail for ``video_id``.

    The link goes to ``href`` when given, otherwise to the video's watch page.
    """
    target = youtube_watch_url_for_id(video_id) if href is None else href
    thumb = youtube_thumbnail_url_for_id(video_id)
    return (
        '<div class="yt-embed" style="position:relative;padding-bottom:56.25%;height:0;'
        'overflow:hidden;max-width:100%;">\n'
        f'  <a href="{html_escape(target)}" style="position:absolute;top:0;left:0;width:100%;'
        'height:100%;display:block;">\n'
        f'    <img src="{html_escape(thumb)}" alt="{html_escape(alt)}" '
        'style="width:100%;height:100%;object-fit:cover;border:0;">\n'
        "  </a>\n"
        "</div>"
    )


def extract_alt_from_shorthand(text: str) -> str:
    """Return the alt text of an image shorthand such as ``![alt](url)`` in ``text``.

    The alt ends at ``]``, or at ``(`` when there is no ``]``, or at the end of
    the text. Without ``![`` the default title ``YouTube video`` is returned.
    """
    trimmed = text.lstrip()
    start = trimmed.find("![")
    if start < 0:
        return _DEFAULT_TITLE
    rest = trimmed[start + 2:]
    end = rest.find("]")
    if end >= 0:
        return rest[:end]
    paren = rest.find("(")
    if paren >= 0:
        return rest[:paren]
    return rest