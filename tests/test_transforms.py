"""Regression tests for the raw MT19937 primitives."""

from mtpeek.transforms import N, WORD_MASK, init_state, temper, twist, twisted


def test_init_state_recurrence():
    state = init_state(5489)

    assert len(state) == N
    assert state[0] == 5489
    assert state[1] == 1301868182
    assert init_state(4537)[1] == 2442264318
    assert all(0 <= word <= WORD_MASK for word in state)


def test_init_state_wraps_seed_to_32_bits():
    assert init_state(5489 + (1 << 32)) == init_state(5489)
    assert init_state(-1)[0] == WORD_MASK


def test_zero_seed_is_valid():
    state = init_state(0)

    assert state[0] == 0
    assert state[1] == 1
    assert any(state)


def test_temper_known_words():
    assert temper(0) == 0
    assert temper(1) == 4194449
    assert temper(WORD_MASK) == 1876958200


def test_first_output_is_tempered_first_twisted_word():
    state = init_state(5489)
    twist(state)

    assert temper(state[0]) == 3499211612


def test_twisted_leaves_input_untouched():
    state = init_state(4537)
    before = list(state)
    nxt = twisted(state)

    assert state == before
    assert nxt != before
    twist(state)
    assert state == nxt


def test_twist_of_zero_state_is_fixed_point():
    state = [0] * N
    twist(state)

    assert state == [0] * N
