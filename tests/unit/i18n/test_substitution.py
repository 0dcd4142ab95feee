import pytest

from simple_loc.exceptions import EntryFormatError
from simple_loc.i18n.substitution import substitute


class Unprintable:
    def __str__(self):
        raise ValueError("no text form")


@pytest.mark.unit
class TestSubstitute:
    def test_named_placeholders(self):
        text = "Welcome :name, you have :number new messages."
        assert substitute(text, {"name": "Mr. X", "number": 5}) == "Welcome Mr. X, you have 5 new messages."

    def test_missing_values_leave_placeholder(self):
        assert substitute("Hello :name", {"other": 1}) == "Hello :name"

    def test_escaped_colon(self):
        assert substitute(r"Ratio \:name is :name", {"name": "x"}) == "Ratio :name is x"

    def test_escaped_percent(self):
        assert substitute(r"100\% of :count", {"count": 3}) == "100% of 3"

    def test_times_are_not_placeholders(self):
        assert substitute("Opens at 10:30", {"30": "x"}) == "Opens at 10:30"

    def test_no_values(self):
        assert substitute("plain") == "plain"

    def test_non_string_entry_without_values(self):
        assert substitute(["a", "b"]) == ["a", "b"]

    def test_non_string_entry_with_values(self):
        with pytest.raises(EntryFormatError) as exc_info:
            substitute({"title": "x"}, {"name": "y"}, keys=("app", "index"))
        assert isinstance(exc_info.value.original_exception, TypeError)
        assert exc_info.value.keys == ("app", "index")

    def test_value_rendering_failure_keeps_original_exception(self):
        with pytest.raises(EntryFormatError) as exc_info:
            substitute("Hi :name", {"name": Unprintable()})
        error = exc_info.value
        assert isinstance(error.original_exception, ValueError)
        assert error.code == "ENTRY_FORMAT_ERROR"
        assert error.entry == "Hi :name"
