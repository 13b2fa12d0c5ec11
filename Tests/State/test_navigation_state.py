"""Tests for NavigationState bookkeeping."""

from shared_pages.state.navigation_state import NavigationState


def test_empty_state():
    state = NavigationState()
    assert state.current_screen is None
    assert state.previous_screen is None
    assert state.depth == 0
    assert not state.can_go_back()


def test_push_tracks_stack_and_history():
    state = NavigationState()
    state.push("page_one")
    state.push("page_two")

    assert state.current_screen == "page_two"
    assert state.previous_screen == "page_one"
    assert state.depth == 2
    assert state.history == ["page_one", "page_two"]


def test_pop_returns_new_top():
    state = NavigationState()
    state.push("page_one")
    state.push("page_two")

    assert state.pop() == "page_one"
    assert state.current_screen == "page_one"
    assert state.history == ["page_one", "page_two", "page_one"]


def test_pop_never_removes_root():
    state = NavigationState()
    state.push("page_one")

    assert state.pop() is None
    assert state.current_screen == "page_one"


def test_history_is_bounded():
    state = NavigationState(max_history=3)
    for _ in range(5):
        state.push("page_two")

    assert len(state.history) == 3


def test_clear_history_keeps_stack():
    state = NavigationState()
    state.push("page_one")
    state.clear_history()

    assert state.history == []
    assert state.current_screen == "page_one"
