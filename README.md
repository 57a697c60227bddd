# marco

Building blocks for a Markdown-to-HTML pipeline: a syntax tree node type,
builders that turn matched Markdown fragments into nodes, HTML escaping with
emoji shortcode expansion, YouTube embed helpers, a simple HTML
pretty-printer and a reader for colours in editor style-scheme files.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Syntax tree

`marco.ast.Node` is a dataclass with a `node_type` string, an `attributes`
dictionary of strings and a list of `children`. `add_child(child)` appends a
child and `add_attribute(key, value)` sets an attribute, replacing any
earlier value. `text_node(text)` returns a `text` node whose `value`
attribute is `text`.

```python
from marco.ast import Node, text_node
from marco.node_builders import build_atx_heading, build_strong, find_first

root = Node("root")
root.add_child(build_atx_heading("# Hello World"))

paragraph = Node("paragraph")
paragraph.add_child(text_node("This is "))
paragraph.add_child(build_strong("**bold**"))
root.add_child(paragraph)

heading = find_first(root, "heading")
assert heading.attributes["depth"] == "1"
```

## Node builders

`marco.node_builders` turns the raw text of one Markdown element into a node:

- `build_atx_heading`, `build_fenced_code_block(language, code)`,
  `build_indented_code_block`, `build_blockquote`, `build_task_list_item`,
  `build_frontmatter`, `build_math_block`, `build_inline_math`
- `build_link_definition`, `build_footnote_definition`
- `build_strong`, `build_emphasis`, `build_strikethrough`, `build_inline_code`
- `build_link`, `build_image` and `build_video_embed` (for
  `[![alt](poster)](url)`), which return `None` when the text does not have
  the expected shape
- `build_autolink`, `build_emoji`, `build_mention`, `build_html_block`,
  `build_html_inline`

`find_first(node, node_type)` returns the first node of a type in a
depth-first, pre-order walk, or `None`.

## HTML helpers

- `marco.escape.html_escape(text)` escapes `&`, `<`, `>`, `"` and `'`.
  `emoji_for_shortcode(name)` looks up an emoji by shortcode (without
  colons) in a built-in table; `replace_shortcodes_with_emoji(text)` expands
  known `:shortcode:` patterns and leaves unknown ones as written;
  `html_escape_with_emoji(text)` does both, escaping first.
- `marco.youtube.youtube_id_from_url(url)` finds the video id in
  `youtu.be/ID`, `youtube.com/...?v=ID`, `/embed/ID` and
  `img.youtube.com/vi/ID/...` URLs. `build_youtube_iframe(video_id, title)`
  returns a responsive iframe embed with a player script;
  `render_youtube_thumbnail_link(video_id, alt, href=None)` returns a
  clickable thumbnail; `youtube_watch_url_for_id`,
  `youtube_thumbnail_url_for_id` and `extract_alt_from_shorthand` are the
  smaller pieces.
- `marco.html_format.pretty_print_html(html)` puts adjacent tags on their own
  lines and indents them by nesting depth.
- `marco.theme_colors.extract_xml_color_value(contents, key)` returns the
  `value` of `<color name="key" value="..."/>` in style-scheme XML text, or
  `None`.

## What the package does not do

It does not parse a whole Markdown document into a tree: the builders take
text already matched as one element. It does not render a tree to HTML, wrap
HTML into a preview page, or provide preview scripts or scrollbar styles, and
it has no command-line program or user interface.