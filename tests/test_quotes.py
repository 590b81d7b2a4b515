import pytest

from mermaid_flow.flowchart import normalize_quotes


def test_strips_inner_quotes_and_wraps():
    result = normalize_quotes('He said "hi"')

    assert result.replacement_count == 2
    assert result.converted_description == '"He said hi"'


def test_second_pass_is_stable():
    first = normalize_quotes('He said "hi"')
    second = normalize_quotes(first.converted_description)

    assert second.replacement_count == 0
    assert second.converted_description == first.converted_description


def test_single_quotes_are_counted():
    result = normalize_quotes("it's Bob's")

    assert result.converted_description == '"its Bobs"'
    assert result.replacement_count == 2


def test_text_without_quotes():
    result = normalize_quotes("plain text")

    assert result.as_dict() == {"convertedDescription": '"plain text"', "replacementCount": 0}


def test_empty_text():
    assert normalize_quotes("").converted_description == '""'


def test_lone_double_quote_is_content_not_wrapper():
    result = normalize_quotes('"')

    assert result.converted_description == '""'
    assert result.replacement_count == 1


def test_non_string_input_is_rejected():
    with pytest.raises(TypeError):
        normalize_quotes(3)
