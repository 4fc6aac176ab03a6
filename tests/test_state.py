import copy

import pytest

from marisakit.history import UINT32_MAX, History
from marisakit.state import State, StatusCode


def test_state_new():
    state = State()
    assert state.node_id == 0
    assert state.query_pos == 0
    assert state.history_pos == 0
    assert state.status_code is StatusCode.READY_TO_ALL
    assert len(state.key_buf) == 0
    assert len(state.history) == 0


def test_states_do_not_share_buffers():
    a = State()
    b = State()
    a.key_buf.append(ord("x"))
    a.history.append(History())
    assert len(b.key_buf) == 0
    assert len(b.history) == 0


def test_state_set_node_id():
    state = State()
    state.node_id = 100
    assert state.node_id == 100


def test_state_set_query_pos():
    state = State()
    state.query_pos = 50
    assert state.query_pos == 50


def test_state_set_history_pos():
    state = State()
    state.history_pos = 10
    assert state.history_pos == 10


def test_state_set_status_code():
    state = State()
    state.status_code = StatusCode.READY_TO_COMMON_PREFIX_SEARCH
    assert state.status_code is StatusCode.READY_TO_COMMON_PREFIX_SEARCH


def test_state_rejects_non_status_code():
    state = State()
    with pytest.raises(TypeError):
        state.status_code = 3
    assert state.status_code is StatusCode.READY_TO_ALL


def test_state_key_buf():
    state = State()
    state.key_buf.append(ord("h"))
    state.key_buf.append(ord("i"))
    assert bytes(state.key_buf) == b"hi"


def test_state_history():
    state = State()
    hist = History()
    hist.node_id = 10
    state.history.append(hist)
    assert len(state.history) == 1
    assert state.history[0].node_id == 10


def test_state_reset():
    state = State()
    state.status_code = StatusCode.END_OF_COMMON_PREFIX_SEARCH
    state.reset()
    assert state.status_code is StatusCode.READY_TO_ALL


def test_state_lookup_init():
    state = State()
    state.node_id = 100
    state.query_pos = 50
    state.status_code = StatusCode.END_OF_COMMON_PREFIX_SEARCH
    state.lookup_init()
    assert state.node_id == 0
    assert state.query_pos == 0
    assert state.status_code is StatusCode.READY_TO_ALL


def test_state_reverse_lookup_init():
    state = State()
    state.key_buf.extend(b"xy")
    state.reverse_lookup_init()
    assert len(state.key_buf) == 0
    assert state.status_code is StatusCode.READY_TO_ALL


def test_state_common_prefix_search_init():
    state = State()
    state.node_id = 100
    state.query_pos = 50
    state.common_prefix_search_init()
    assert state.node_id == 0
    assert state.query_pos == 0
    assert state.status_code is StatusCode.READY_TO_COMMON_PREFIX_SEARCH


def test_state_predictive_search_init():
    state = State()
    state.key_buf.append(ord("a"))
    state.history.append(History())
    state.node_id = 100
    state.query_pos = 50
    state.history_pos = 10
    state.predictive_search_init()
    assert len(state.key_buf) == 0
    assert len(state.history) == 0
    assert state.node_id == 0
    assert state.query_pos == 0
    assert state.history_pos == 0
    assert state.status_code is StatusCode.READY_TO_PREDICTIVE_SEARCH


def test_state_clone():
    state1 = State()
    state1.node_id = 42
    state1.key_buf.append(ord("t"))
    state2 = copy.deepcopy(state1)
    assert state2.node_id == 42
    assert bytes(state2.key_buf) == b"t"
    state1.key_buf.append(ord("u"))
    assert bytes(state2.key_buf) == b"t"


def test_status_code_equality():
    state = State()
    assert state.status_code == StatusCode.READY_TO_ALL
    assert state.status_code != StatusCode.READY_TO_COMMON_PREFIX_SEARCH
    state.common_prefix_search_init()
    assert state.status_code == StatusCode.READY_TO_COMMON_PREFIX_SEARCH
    assert state.status_code != StatusCode.READY_TO_ALL


def test_state_max_values():
    state = State()
    state.node_id = UINT32_MAX
    state.query_pos = UINT32_MAX
    state.history_pos = UINT32_MAX
    assert state.node_id == UINT32_MAX
    assert state.query_pos == UINT32_MAX
    assert state.history_pos == UINT32_MAX


@pytest.mark.parametrize("name", ["node_id", "query_pos", "history_pos"])
@pytest.mark.parametrize("value", [UINT32_MAX + 1, -1])
def test_state_out_of_range(name, value):
    state = State()
    with pytest.raises(ValueError):
        setattr(state, name, value)
    assert getattr(state, name) == 0