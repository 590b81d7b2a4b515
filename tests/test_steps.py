import pytest

from mermaid_flow.flowchart import extract_steps, strip_quotes


def test_splits_on_periods_commas_and_newlines():
    text = "Start here. Then this, then that\nFinally stop"
    assert extract_steps(text) == ["Start here", "Then this", "then that", "Finally stop"]


def test_discards_blank_fragments():
    assert extract_steps("..., \n\n .  First step.,.") == ["First step"]


def test_empty_description_has_no_steps():
    assert extract_steps("") == []


def test_delimiters_inside_quotes_still_split():
    assert extract_steps('Say "hello, world"') == ['Say "hello', 'world"']


def test_other_punctuation_does_not_split():
    assert extract_steps("Is it ready? Yes; ship it!") == ["Is it ready? Yes; ship it!"]


@pytest.mark.parametrize("value", [None, 42, ["Start"], b"Start."])
def test_non_string_input_is_rejected(value):
    with pytest.raises(TypeError):
        extract_steps(value)


def test_strip_quotes_removes_single_and_double_quotes():
    assert strip_quotes("""It's "done" """) == "Its done "


def test_byte_order_mark_only_fragment_is_dropped():
    assert extract_steps("Start.\ufeff.Stop") == ["Start", "Stop"]


def test_unicode_spaces_are_trimmed():
    assert extract_steps("\u00a0\u3000Start\u2003, Stop\ufeff") == ["Start", "Stop"]


def test_information_separators_are_kept():
    assert extract_steps("Start.\x1c.Stop") == ["Start", "\x1c", "Stop"]
    assert extract_steps("\x1fStart") == ["\x1fStart"]
