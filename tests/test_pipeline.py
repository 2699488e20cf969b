from docreflow.comment import Comment, Tag
from docreflow.pipeline import RunConfig, format_comment, run


def test_format_comment_merges_and_formats_each_tag():
    comment = Comment(
        description=" with more detail.",
        tags=[
            Tag(tag="description", description="the summary"),
            Tag(tag="param", description="the user id", name="id", type="string"),
            Tag(tag="example", description="  raw   example"),
        ],
    )
    bodies = format_comment(comment)
    assert bodies == ["The summary with more detail.\n", "The user id", "  raw   example"]
    assert comment.tags[0].description == "The summary with more detail."


def test_run_writes_output_file(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("the quick fox.\n\n- jumps\n- runs", encoding="utf-8")
    out = tmp_path / "out" / "result.md"
    result = run(RunConfig(input=src, output=out))
    assert out.read_text(encoding="utf-8") == result
    assert result.startswith("The quick fox.\n\n- Jumps\n- Runs")
