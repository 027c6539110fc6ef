import pytest

from midnotes.domtree import Element, Text, parse_html
from midnotes.html_markdown import html_to_markdown, node_to_markdown


def test_text_node_is_returned_verbatim():
    assert node_to_markdown(Text("plain words")) == "plain words"


def test_line_break_becomes_newline():
    assert node_to_markdown(Element("br")) == "\n"


def test_paragraph_is_trimmed():
    assert html_to_markdown("<p>  hello  </p>") == "hello"


@pytest.mark.parametrize("tag,mark", [("h1", "#"), ("h2", "##"), ("h3", "###")])
def test_headings(tag, mark):
    title = "Title"
    assert html_to_markdown(f"<{tag}>{title}</{tag}>") == f"{mark} {title}"


def test_bold_and_strong_agree():
    word = "bold"
    assert html_to_markdown(f"<b>{word}</b>") == f"**{word}**"
    assert html_to_markdown(f"<strong>{word}</strong>") == html_to_markdown(f"<b>{word}</b>")


def test_italic_and_em_agree():
    word = "slanted"
    assert html_to_markdown(f"<em>{word}</em>") == f"*{word}*"
    assert html_to_markdown(f"<i>{word}</i>") == html_to_markdown(f"<em>{word}</em>")


def test_underline():
    word = "under"
    assert html_to_markdown(f"<u>{word}</u>") == f"<u>{word}</u>"


def test_blank_emphasis_is_dropped():
    assert html_to_markdown("<p><strong> </strong></p>") == ""
    assert html_to_markdown("<p><em></em></p>") == ""


def test_styled_spans_match_tags():
    assert html_to_markdown('<span style="font-weight: 700">x</span>') == html_to_markdown("<b>x</b>")
    assert html_to_markdown('<span style="font-style: italic">x</span>') == html_to_markdown("<i>x</i>")
    assert html_to_markdown(
        '<span style="text-decoration: underline">x</span>'
    ) == html_to_markdown("<u>x</u>")


def test_plain_span_keeps_children():
    assert html_to_markdown("<p><span>abc</span></p>") == "abc"


def test_inline_code_gets_backticks():
    code = "let x"
    assert html_to_markdown(f"<p>run <code>{code}</code></p>") == f"run `{code}`"


def test_code_without_parent_is_bare():
    element = Element("code")
    element.children.append(Text("raw"))
    assert node_to_markdown(element) == "raw"


def test_pre_skips_copy_button():
    code = "let x = 1;"
    html = f'<pre><button class="code-copy-btn">Copy</button>{code}\n</pre>'
    result = html_to_markdown(html)
    assert result == f"```\n{code}\n```"
    assert "Copy" not in result


def test_checklist_items():
    html = (
        '<ul><li><input type="checkbox" checked>done</li>'
        '<li><input type="checkbox">todo</li></ul>'
    )
    assert html_to_markdown(html) == "- [x] done\n- [ ] todo"


def test_ordered_list_numbers_items():
    assert html_to_markdown("<ol><li>a</li><li>b</li></ol>") == "1. a\n2. b"


def test_unordered_list_items_use_dashes():
    lines = html_to_markdown("<ul><li>one</li><li>two</li></ul>").split("\n")
    assert lines == [f"- {word}" for word in ("one", "two")]


def test_blockquote_and_rule():
    quoted = html_to_markdown("<blockquote>wise words</blockquote>")
    assert quoted == "> wise words"
    assert "---" in html_to_markdown("<p>a</p><hr><p>b</p>")


def test_no_runs_of_three_newlines():
    result = html_to_markdown("<p>a</p><p></p><h1>b</h1><ul><li>c</li></ul><p>d</p>")
    assert "\n\n\n" not in result
    assert result == result.strip()


def test_node_to_markdown_on_parsed_tree_matches_before_cleanup():
    tree = parse_html("<p>x</p>")
    assert node_to_markdown(tree).strip() == html_to_markdown("<p>x</p>")