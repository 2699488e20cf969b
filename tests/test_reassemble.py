from docreflow.config import FormatOptions
from docreflow.convert.reassemble import max_content_width, reflow, splice_code
from docreflow.convert.signatures import Boundary
from docreflow.convert.tokenizer import encode


def _reflow(text, tag="description", label="", column=0, **opts):
    return reflow(encode(text), tag, label, column, FormatOptions(**opts))


def test_numbered_items_stay_on_their_own_lines():
    assert _reflow("1. a\n\n2. b") == "1. a\n2. b"


def test_dash_items_keep_their_boundaries():
    assert _reflow("text\n- first\n- second") == "Text\n- First\n- Second"
    assert _reflow("intro\n\n- one\n- two") == "Intro\n\n- One\n- Two"


def test_paragraphs_and_continuations():
    assert _reflow("first\n\n    second") == "First\n\n    Second"
    assert _reflow("first\n    continued") == "First\n    continued"
    assert _reflow("one   two\nthree\n\nfour") == "One two three\n\nFour"


def test_code_is_spliced_back_verbatim():
    code = "```js\nconst  a = 1;\n    return  a;\n```"
    out = _reflow("example:\n" + code)
    assert out.startswith("Example:\n\n")
    assert code in out


def test_dot_insertion():
    assert _reflow("a trailing word", description_with_dot=True) == "A trailing word."
    assert _reflow("a trailing word") == "A trailing word"
    assert _reflow("done!", description_with_dot=True) == "Done!"


def test_label_width_narrows_first_line():
    label = "@param {string} name "
    out = _reflow("word " * 40, tag="param", label=label)
    lines = out.splitlines()
    assert not out.startswith("_")
    assert len(lines[0]) <= 77 - len(label)
    assert all(line.startswith("    ") for line in lines[1:])
    assert all(len(line) <= 77 for line in lines[:-1])


def test_max_content_width():
    options = FormatOptions(print_width=80)
    assert max_content_width("", 4, options) == 73
    assert max_content_width("x" * 50, 40, options) == 50


def test_splice_code_in_capture_order():
    text = "a" + Boundary.CODE + "b" + Boundary.CODE + "c"
    assert splice_code(text, ["<1>", "<2>"]) == "a<1>b<2>c"
    assert splice_code("plain", []) == "plain"


def test_dot_is_not_added_to_label_guard():
    out = _reflow("```js\nfoo()\n```\nsome text", tag="param", label="@param {string} name ", description_with_dot=True)
    assert out == "\n\n```js\nfoo()\n```\n\nSome text."

    out = _reflow("\n\n    indented body", tag="returns", label="@returns ", description_with_dot=True)
    assert out == "\n\n    Indented body."
