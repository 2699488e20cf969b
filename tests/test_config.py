import mdformat
import pytest

from docreflow.config import FormatOptions
from docreflow.convert.markdown import FormatError, pretty_print, printer_options


def test_defaults():
    options = FormatOptions()
    assert options.print_width == 80
    assert options.description_with_dot is False
    assert "param" in options.tags_to_format
    assert "example" not in options.tags_to_format


def test_from_mapping_accepts_camel_case_and_forwards_the_rest():
    options = FormatOptions.from_mapping({"printWidth": 100, "jsdocDescriptionWithDot": True, "end_of_line": "lf"})
    assert options.print_width == 100
    assert options.description_with_dot is True
    assert options.markdown == {"number": True, "end_of_line": "lf"}


def test_invalid_prose_wrap():
    with pytest.raises(ValueError):
        FormatOptions(prose_wrap="sometimes")


def test_printer_options():
    assert printer_options(FormatOptions(), 60)["wrap"] == "keep"
    assert printer_options(FormatOptions(prose_wrap="always"), 60)["wrap"] == 60


def test_printer_errors_become_format_error(monkeypatch):
    def boom(text, options=None, **kwargs):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr(mdformat, "text", boom)
    with pytest.raises(FormatError) as excinfo:
        pretty_print("text", FormatOptions(), 80)
    assert isinstance(excinfo.value.__cause__, RuntimeError)
