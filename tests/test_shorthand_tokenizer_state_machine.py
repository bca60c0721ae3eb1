import pytest

from kumitate.state_machine import ShorthandTokenizerStateMachine, ShorthandTokenizerState


@pytest.mark.ci
def test_plain_segment_is_buffered():
    state_machine = ShorthandTokenizerStateMachine()
    result = state_machine.process_string("div.a#main")
    assert result is None
    assert state_machine.state == ShorthandTokenizerState.SEGMENT
    assert state_machine.flush_buffer() == "div.a#main"
    assert state_machine.buffer == []


@pytest.mark.ci
def test_child_operator_emits_segment():
    state_machine = ShorthandTokenizerStateMachine()
    result = state_machine.process_string("div.a>")
    assert result == ("child", "div.a")
    assert state_machine.buffer == []


@pytest.mark.ci
def test_sibling_operator_emits_segment():
    state_machine = ShorthandTokenizerStateMachine()
    result = state_machine.process_string("span+")
    assert result == ("sibling", "span")


@pytest.mark.ci
def test_operators_inside_braces_are_text():
    state_machine = ShorthandTokenizerStateMachine()
    result = state_machine.process_string("p{a>b+c")
    assert result is None
    assert state_machine.state == ShorthandTokenizerState.TEXT
    state_machine.process_string("}")
    assert state_machine.state == ShorthandTokenizerState.SEGMENT
    assert state_machine.flush_buffer() == "p{a>b+c}"


@pytest.mark.ci
def test_operator_after_closed_brace():
    state_machine = ShorthandTokenizerStateMachine()
    result = state_machine.process_string("p{1<2}+")
    assert result == ("sibling", "p{1<2}")


@pytest.mark.ci
def test_consecutive_operators_emit_empty_segments():
    state_machine = ShorthandTokenizerStateMachine()
    tokens = [state_machine.feed(c) for c in ">>"]
    assert tokens == [("child", ""), ("child", "")]
