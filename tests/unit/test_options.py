"""Unit tests for MicrodataOptions."""

import pytest

from htmlmicrodata.exceptions import ValidationError
from htmlmicrodata.markup import element
from htmlmicrodata.naming import lower_camel_case, snake_case
from htmlmicrodata.options import MicrodataOptions


@pytest.mark.unit
class TestMicrodataOptions:
    def test_defaults(self):
        options = MicrodataOptions()
        assert options.resolved_property_name_policy is lower_camel_case
        assert options.isolate_faults is True
        assert options.charset == "utf-8"
        assert options.head_content == ()

    def test_frozen(self):
        options = MicrodataOptions()
        with pytest.raises(AttributeError):
            options.title = "changed"

    def test_create_updated_returns_copy(self):
        options = MicrodataOptions(title="Tasks")
        updated = options.create_updated(property_name_policy="snake")
        assert updated.title == "Tasks"
        assert updated.resolved_property_name_policy is snake_case
        assert options.resolved_property_name_policy is lower_camel_case

    def test_head_content_list_becomes_tuple(self):
        options = MicrodataOptions(head_content=[element("link", rel="stylesheet", href="/site.css")])
        assert isinstance(options.head_content, tuple)

    def test_head_content_must_be_nodes(self):
        with pytest.raises(ValueError):
            MicrodataOptions(head_content=("<script></script>",))

    def test_unknown_charset(self):
        with pytest.raises(ValueError):
            MicrodataOptions(charset="not-a-charset")

    def test_unknown_policy(self):
        with pytest.raises(ValidationError):
            MicrodataOptions(property_name_policy="pascal")
