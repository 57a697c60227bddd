"""HTML escaping and expansion of ``:shortcode:`` emoji in rendered text."""

from __future__ import annotations

import re
from types import MappingProxyType

__all__ = [
    "html_escape",
    "emoji_for_shortcode",
    "replace_shortcodes_with_emoji",
    "html_escape_with_emoji",
]

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
)

_SHORTCODE_RE = re.compile(r":([a-z0-9_+-]+):")

_VS16 = "\ufe0f"

_EMOJI = MappingProxyType(
    {
        "smile": "\U0001F604",
        "smiley": "\U0001F603",
        "grinning": "\U0001F600",
        "laughing": "\U0001F606",
        "satisfied": "\U0001F606",
        "joy": "\U0001F602",
        "rofl": "\U0001F923",
        "sweat_smile": "\U0001F605",
        "wink": "\U0001F609",
        "blush": "\U0001F60A",
        "innocent": "\U0001F607",
        "slightly_smiling_face": "\U0001F642",
        "upside_down_face": "\U0001F643",
        "relaxed": "\u263A" + _VS16,
        "heart_eyes": "\U0001F60D",
        "kissing_heart": "\U0001F618",
        "yum": "\U0001F60B",
        "stuck_out_tongue": "\U0001F61B",
        "sunglasses": "\U0001F60E",
        "thinking": "\U0001F914",
        "hugs": "\U0001F917",
        "neutral_face": "\U0001F610",
        "expressionless": "\U0001F611",
        "unamused": "\U0001F612",
        "confused": "\U0001F615",
        "cry": "\U0001F622",
        "sob": "\U0001F62D",
        "angry": "\U0001F620",
        "rage": "\U0001F621",
        "scream": "\U0001F631",
        "sleeping": "\U0001F634",
        "mask": "\U0001F637",
        "see_no_evil": "\U0001F648",
        "eyes": "\U0001F440",
        "poop": "\U0001F4A9",
        "hankey": "\U0001F4A9",
        "ghost": "\U0001F47B",
        "skull": "\U0001F480",
        "robot": "\U0001F916",
        "heart": "\u2764" + _VS16,
        "broken_heart": "\U0001F494",
        "sparkling_heart": "\U0001F496",
        "blue_heart": "\U0001F499",
        "green_heart": "\U0001F49A",
        "yellow_heart": "\U0001F49B",
        "purple_heart": "\U0001F49C",
        "+1": "\U0001F44D",
        "thumbsup": "\U0001F44D",
        "-1": "\U0001F44E",
        "thumbsdown": "\U0001F44E",
        "ok_hand": "\U0001F44C",
        "clap": "\U0001F44F",
        "wave": "\U0001F44B",
        "raised_hands": "\U0001F64C",
        "pray": "\U0001F64F",
        "muscle": "\U0001F4AA",
        "point_up": "\u261D" + _VS16,
        "point_right": "\U0001F449",
        "point_left": "\U0001F448",
        "v": "\u270C" + _VS16,
        "fire": "\U0001F525",
        "star": "\u2B50",
        "star2": "\U0001F31F",
        "sparkles": "\u2728",
        "zap": "\u26A1",
        "boom": "\U0001F4A5",
        "collision": "\U0001F4A5",
        "tada": "\U0001F389",
        "rocket": "\U0001F680",
        "100": "\U0001F4AF",
        "warning": "\u26A0" + _VS16,
        "x": "\u274C",
        "white_check_mark": "\u2705",
        "heavy_check_mark": "\u2714" + _VS16,
        "question": "\u2753",
        "exclamation": "\u2757",
        "bulb": "\U0001F4A1",
        "memo": "\U0001F4DD",
        "pencil": "\U0001F4DD",
        "pencil2": "\u270F" + _VS16,
        "book": "\U0001F4D6",
        "books": "\U0001F4DA",
        "bug": "\U0001F41B",
        "lock": "\U0001F512",
        "key": "\U0001F511",
        "bell": "\U0001F514",
        "link": "\U0001F517",
        "hammer": "\U0001F528",
        "wrench": "\U0001F527",
        "gear": "\u2699" + _VS16,
        "computer": "\U0001F4BB",
        "coffee": "\u2615",
        "beer": "\U0001F37A",
        "pizza": "\U0001F355",
        "apple": "\U0001F34E",
        "cake": "\U0001F370",
        "sunny": "\u2600" + _VS16,
        "cloud": "\u2601" + _VS16,
        "umbrella": "\u2614",
        "snowflake": "\u2744" + _VS16,
        "rainbow": "\U0001F308",
        "earth_americas": "\U0001F30E",
        "moon": "\U0001F314",
        "dog": "\U0001F436",
        "cat": "\U0001F431",
        "panda_face": "\U0001F43C",
        "trophy": "\U0001F3C6",
        "checkered_flag": "\U0001F3C1",
        "hourglass": "\u231B",
        "calendar": "\U0001F4C6",
        "email": "\U0001F4E7",
        "phone": "\u260E" + _VS16,
        "telephone": "\u260E" + _VS16,
        "house": "\U0001F3E0",
        "car": "\U0001F697",
        "airplane": "\u2708" + _VS16,
        "musical_note": "\U0001F3B5",
        "camera": "\U0001F4F7",
        "gift": "\U0001F381",
        "balloon": "\U0001F388",
        "moneybag": "\U0001F4B0",
        "chart_with_upwards_trend": "\U0001F4C8",
        "construction": "\U0001F6A7",
        "recycle": "\u267B" + _VS16,
        "arrow_right": "\u27A1" + _VS16,
        "arrow_left": "\u2B05" + _VS16,
        "arrow_up": "\u2B06" + _VS16,
        "arrow_down": "\u2B07" + _VS16,
    }
)


def html_escape(text: str) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` for use in HTML text and attributes."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def emoji_for_shortcode(shortcode: str) -> str | None:
    """Return the emoji for a shortcode given without colons, or ``None`` if unknown."""
    return _EMOJI.get(shortcode)


def replace_shortcodes_with_emoji(text: str) -> str:
    """Replace each known ``:shortcode:`` in ``text``; unknown ones are left as written."""

    def _substitute(match: re.Match[str]) -> str:
        emoji = emoji_for_shortcode(match.group(1))
        return match.group(0) if emoji is None else emoji

    return _SHORTCODE_RE.sub(_substitute, text)


def html_escape_with_emoji(text: str) -> str:
    """Escape ``text`` for HTML, then expand emoji shortcodes in the result."""
    return replace_shortcodes_with_emoji(html_escape(text))