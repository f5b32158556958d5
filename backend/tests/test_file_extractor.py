from models.files import ResolutionSource
from services.file_extractor import (
    extract_code_segments,
    extract_files_from_response,
    fallback_filename,
    find_file_hint,
    resolve_files,
)

WEBSITE_RESPONSE = """Here is your site.

```html
<!-- index.html -->
<!DOCTYPE html>
<html><head><link rel="stylesheet" href="style.css"></head>
<body><h1>Hi</h1><script src="script.js"></script></body></html>
```

```css
/* style.css */
body { margin: 0; }
```

```javascript
// script.js
document.querySelector('h1').textContent = 'Hello';
```
"""


def test_no_fenced_segments_gives_empty_mapping():
    assert extract_files_from_response("Just some prose, no code at all.") == {}
    assert extract_files_from_response("") == {}


def test_website_response_splits_into_three_files():
    files = extract_files_from_response(WEBSITE_RESPONSE)

    assert list(files) == ["index.html", "style.css", "script.js"]
    assert files["style.css"] == "/* style.css */\nbody { margin: 0; }"
    assert files["index.html"].startswith("<!-- index.html -->")


def test_body_is_stripped_and_tag_lowercased():
    segments = extract_code_segments("```HTML\n\n  <p>x</p>  \n\n```")

    assert len(segments) == 1
    assert segments[0].language == "html"
    assert segments[0].code == "<p>x</p>"


def test_double_slash_hint_wins_over_tag_and_content():
    text = "```html\n// app.js\n<!DOCTYPE html><html></html>\n```"

    resolved = resolve_files(text)

    assert resolved[0].filename == "app.js"
    assert resolved[0].source == ResolutionSource.HINT


def test_hint_only_read_from_first_three_lines():
    text = "```\nline one\nline two\nline three\n// late.js\n```"

    assert extract_files_from_response(text) == {"file1.txt": "line one\nline two\nline three\n// late.js"}


def test_hint_comment_styles():
    assert find_file_hint("<!-- about.html -->\n<p></p>") == "about.html"
    assert find_file_hint("/* theme.css */\n.a {}") == "theme.css"
    assert find_file_hint("# config.yaml\nkey: value") == "config.yaml"
    assert find_file_hint("// my-app_v2.min.js") == "my-app_v2.min.js"
    assert find_file_hint("no hints here\nnone") is None


def test_html_comment_style_takes_priority_over_double_slash():
    code = "// second.js\n<!-- first.html -->"

    assert find_file_hint(code) == "first.html"


def test_html_tag_alone_resolves_to_index_html():
    resolved = resolve_files("```html\n<div>fragment</div>\n```")

    assert resolved[0].filename == "index.html"
    assert resolved[0].source == ResolutionSource.TAG


def test_doctype_content_resolves_to_index_html():
    resolved = resolve_files("```\n<!doctype html>\n<title>x</title>\n```")

    assert resolved[0].filename == "index.html"
    assert resolved[0].source == ResolutionSource.CONTENT


def test_css_inferred_from_class_selector():
    assert extract_files_from_response("```\n.card {\n  padding: 1rem;\n}\n```") == {
        "style.css": ".card {\n  padding: 1rem;\n}"
    }


def test_html_content_beats_css_tag():
    resolved = resolve_files("```css\n<html><style>body { }</style></html>\n```")

    assert resolved[0].filename == "index.html"


def test_javascript_inferred_from_dom_usage():
    files = extract_files_from_response("```\nwindow.onload = init;\n```")

    assert list(files) == ["script.js"]


def test_js_tag_resolves_to_script_js():
    resolved = resolve_files("```js\nconst x = 1;\n```")

    assert resolved[0].filename == "script.js"
    assert resolved[0].source == ResolutionSource.TAG


def test_untagged_unrecognised_segments_get_numbered_names():
    text = "```\nplain one\n```\nand\n```\nplain two\n```"

    assert extract_files_from_response(text) == {"file1.txt": "plain one", "file2.txt": "plain two"}


def test_fallback_extension_follows_tag():
    text = "```python\nprint(1)\n```\n```jsx\nconst A = () => null;\n```\n```json\n{\"a\": 1}\n```"

    assert list(extract_files_from_response(text)) == ["file1.txt", "file1.js", "file2.js"]


def test_fallback_skips_names_taken_by_hints():
    text = "```\n// file1.txt\nhinted\n```\n```\nunhinted\n```"

    assert extract_files_from_response(text) == {"file1.txt": "// file1.txt\nhinted", "file2.txt": "unhinted"}


def test_fallback_filename_uses_key_presence():
    assert fallback_filename("", {"file1.txt": ""}) == "file2.txt"
    assert fallback_filename("css", {}) == "file1.css"


def test_repeated_filename_keeps_first_position_and_last_content():
    text = "```css\na {}\n```\n```\nplain\n```\n```css\nb {}\n```"

    files = extract_files_from_response(text)

    assert list(files) == ["style.css", "file1.txt"]
    assert files["style.css"] == "b {}"


def test_extraction_is_deterministic():
    assert extract_files_from_response(WEBSITE_RESPONSE) == extract_files_from_response(WEBSITE_RESPONSE)
    assert list(extract_files_from_response(WEBSITE_RESPONSE).items()) == list(
        extract_files_from_response(WEBSITE_RESPONSE).items()
    )


def test_unclosed_fence_is_ignored():
    assert extract_files_from_response("```html\n<p>never closed</p>") == {}


def test_unicode_whitespace_after_tag_and_in_hints():
    assert extract_files_from_response("```html\u00a0\n<p>x</p>\n```") == {"index.html": "<p>x</p>"}
    assert find_file_hint("<!--\u00a0about.html\u00a0-->") == "about.html"
    assert find_file_hint("//\u2003app.js") == "app.js"


def test_non_ascii_word_characters_are_not_part_of_names():
    assert find_file_hint("// caf\u00e9.js") is None


def test_byte_order_mark_trimmed_from_body():
    segments = extract_code_segments("```\n\ufeff  plain text \ufeff\n```")

    assert segments[0].code == "plain text"


def test_hint_window_splits_on_crlf():
    assert find_file_hint("line one\r\nline two\r\n/* late.css */") == "late.css"
    assert find_file_hint("line one\r\nline two\r\nline three\r\n/* late.css */") is None
