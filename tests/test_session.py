"""
Testing the game session: building a guess pin by pin, committing it,
and how the game ends.
"""

from logik.session import GameSession
from logik.types import COLOR_COUNT, MAX_GUESSES, PIN_COUNT

from conftest import enter, near_miss

def test_fixed_seed_gives_same_secret():
    first = GameSession(99)
    second = GameSession(99)

    assert first.secret == second.secret
    assert len(first.secret) == PIN_COUNT
    assert all(0 <= c < COLOR_COUNT for c in first.secret)

def test_new_session_starts_empty(make_session):
    session = make_session()
    snap = session.snapshot()

    assert snap.history == ()
    assert snap.in_progress == (None,) * PIN_COUNT
    assert snap.state == "in_progress"

def test_select_color_fills_left_to_right(make_session):
    session = make_session(secret=(0, 1, 2, 3, 4))
    session.select_color(6)
    session.select_color(3)

    assert session.snapshot().in_progress == (6, 3, None, None, None)
    assert session.snapshot().filled == (6, 3)

def test_select_color_on_full_buffer_is_ignored(make_session):
    session = make_session(secret=(0, 1, 2, 3, 4))
    enter(session, [1, 1, 1, 1, 1])
    session.select_color(7)

    assert session.snapshot().in_progress == (1, 1, 1, 1, 1)

def test_select_color_out_of_palette_is_ignored(make_session):
    session = make_session()
    session.select_color(8)
    session.select_color(-1)

    assert session.snapshot().filled == ()

def test_revert_last_clears_rightmost_pin(make_session):
    session = make_session()
    enter(session, [2, 4, 6])
    session.revert_last()

    assert session.snapshot().in_progress == (2, 4, None, None, None)

    enter(session, [5, 5, 5])
    session.revert_last()
    assert session.snapshot().in_progress == (2, 4, 5, 5, None)

def test_revert_last_on_empty_buffer_is_idempotent(make_session):
    session = make_session(secret=(0, 1, 2, 3, 4))
    enter(session, [7, 7, 7, 7, 7])
    session.commit_guess()
    before = session.snapshot()

    for _ in range(4):
        session.revert_last()

    # nothing reverts across guess boundaries
    assert session.snapshot() == before

def test_commit_partial_guess_is_ignored(make_session):
    session = make_session()
    enter(session, [1, 2, 3, 4])
    session.commit_guess()

    snap = session.snapshot()
    assert snap.history == ()
    assert snap.filled == (1, 2, 3, 4)

def test_commit_full_guess_scores_and_resets(make_session):
    session = make_session(secret=(0, 1, 2, 3, 4))
    enter(session, [0, 2, 1, 7, 7])
    session.commit_guess()

    snap = session.snapshot()
    assert len(snap.history) == 1
    guess = snap.history[0]
    assert guess.pins == (0, 2, 1, 7, 7)
    assert (guess.result.exact, guess.result.color_only) == (1, 2)
    assert guess.revealed is False
    assert snap.in_progress == (None,) * PIN_COUNT
    assert snap.state == "in_progress"
    assert session.guesses_used == 1

def test_perfect_guess_ends_game_at_any_turn(make_session):
    for misses in range(MAX_GUESSES):
        session = make_session()
        secret = session.secret
        for _ in range(misses):
            enter(session, near_miss(secret))
            session.commit_guess()

        enter(session, secret)
        session.commit_guess()

        snap = session.snapshot()
        assert snap.state == "over"
        assert len(snap.history) == misses + 1
        assert snap.history[-1].result == (5, 0)
        assert not snap.history[-1].revealed
        assert session.won is True

def test_ten_misses_reveal_the_secret(make_session):
    session = make_session()
    secret = session.secret
    for _ in range(MAX_GUESSES):
        enter(session, near_miss(secret))
        session.commit_guess()

    snap = session.snapshot()
    assert snap.state == "over"
    assert len(snap.history) == MAX_GUESSES + 1
    reveal = snap.history[-1]
    assert reveal.pins == secret
    assert reveal.result == (5, 0)
    assert reveal.revealed is True
    assert session.won is False
    assert session.guesses_used == MAX_GUESSES

def test_perfect_tenth_guess_is_not_followed_by_reveal(make_session):
    session = make_session()
    secret = session.secret
    for _ in range(MAX_GUESSES - 1):
        enter(session, near_miss(secret))
        session.commit_guess()
    enter(session, secret)
    session.commit_guess()

    snap = session.snapshot()
    assert snap.state == "over"
    assert len(snap.history) == MAX_GUESSES
    assert not any(g.revealed for g in snap.history)
    assert session.won is True

def test_operations_after_game_over_change_nothing(make_session):
    session = make_session()
    enter(session, session.secret)
    session.commit_guess()
    before = session.snapshot()

    session.select_color(3)
    session.revert_last()
    session.commit_guess()
    enter(session, session.secret)
    session.commit_guess()

    assert session.snapshot() == before

def test_snapshot_has_no_side_effects(make_session):
    session = make_session()
    enter(session, [1, 2])
    assert session.snapshot() == session.snapshot()
    assert session.snapshot().filled == (1, 2)

def test_operations_after_loss_change_nothing(make_session):
    session = make_session()
    for _ in range(MAX_GUESSES):
        enter(session, near_miss(session.secret))
        session.commit_guess()
    before = session.snapshot()
    assert len(before.history) == MAX_GUESSES + 1

    session.select_color(3)
    session.revert_last()
    session.commit_guess()
    enter(session, session.secret)
    session.commit_guess()

    assert session.snapshot() == before

def test_select_color_ignores_non_int_values(make_session):
    session = make_session()
    session.select_color(1.0)
    session.select_color(True)
    session.select_color("2")

    assert session.snapshot().filled == ()

def test_snapshot_carries_outcome(make_session):
    session = make_session()
    enter(session, near_miss(session.secret))
    session.commit_guess()

    snap = session.snapshot()
    assert snap.won is False
    assert snap.guesses_used == 1

    enter(session, session.secret)
    session.commit_guess()

    snap = session.snapshot()
    assert snap.won is True
    assert snap.guesses_used == 2
