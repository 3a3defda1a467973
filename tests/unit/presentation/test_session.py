"""Tests for the pure session transitions."""

import pytest

from framedeck.core.presentation import session as transitions
from framedeck.core.presentation.models import (
    FrameRef,
    NavigationOptions,
    Session,
    sequence_ids,
)


def _active(sequence, index: int = 0) -> Session:
    return Session(active=True, sequence=tuple(sequence), active_index=index)


class TestSessionModel:
    """Tests for Session invariants."""

    def test_idle_defaults(self):
        idle = Session.idle()

        assert idle.active is False
        assert idle.sequence == ()
        assert idle.active_index == 0
        assert idle.current_frame is None

    def test_active_requires_frames(self):
        with pytest.raises(ValueError, match="at least one frame"):
            Session(active=True)

    def test_active_index_must_be_in_range(self, f1):
        with pytest.raises(ValueError, match="out of range"):
            Session(active=True, sequence=(f1,), active_index=1)

    def test_rejects_duplicate_ids(self, f1):
        with pytest.raises(ValueError, match="Duplicate"):
            Session(sequence=(f1, f1))


class TestStart:
    """Tests for Idle -> Active."""

    def test_starts_on_first_slide_in_default_order(self, frames):
        transition = transitions.start(Session.idle(), frames)

        assert transition.session.active is True
        assert transition.session.active_index == 0
        assert sequence_ids(transition.session.sequence) == ("F1", "F2", "F3")
        assert transition.effect is not None
        assert transition.effect.frame.id == "F1"
        assert transition.highlight.id == "F1"
        assert transition.persist_order is None

    def test_uses_persisted_custom_order(self, frames, f1, f2, f3):
        transition = transitions.start(Session.idle(), frames, persisted=(f3, f2, f1))

        assert sequence_ids(transition.session.sequence) == ("F3", "F2", "F1")
        assert transition.effect.frame.id == "F3"

    def test_empty_scene_stays_idle(self):
        transition = transitions.start(Session.idle(), [])

        assert transition.session == Session.idle()
        assert transition.effect is None

    def test_already_active_is_no_op(self, frames, f1, f2):
        current = _active((f2, f1), 1)
        transition = transitions.start(current, frames)

        assert transition.session is current
        assert transition.effect is None

    def test_passes_navigation_options(self, frames):
        options = NavigationOptions(zoom_factor=0.75, animate=False)
        transition = transitions.start(Session.idle(), frames, options=options)

        assert transition.effect.options == options


class TestStop:
    """Tests for any -> Idle."""

    def test_resets_everything(self, f1, f2):
        transition = transitions.stop(_active((f1, f2), 1))

        assert transition.session == Session(active=False, active_index=0, sequence=())
        assert transition.effect is None
        assert transition.highlight is None

    def test_stop_while_idle_stays_idle(self):
        assert transitions.stop(Session.idle()).session == Session.idle()


class TestNextPrevious:
    """Tests for cyclic navigation transitions."""

    def test_next_cycles_through_slides(self, f1, f2, f3):
        session = _active((f1, f2, f3))
        visited = []
        for _ in range(3):
            transition = transitions.next_slide(session)
            session = transition.session
            visited.append(transition.effect.frame.id)

        assert visited == ["F2", "F3", "F1"]
        assert session.active_index == 0

    def test_previous_wraps_to_last(self, f1, f2, f3):
        transition = transitions.previous_slide(_active((f1, f2, f3)))

        assert transition.session.active_index == 2
        assert transition.effect.frame.id == "F3"

    def test_single_slide_renavigates_to_itself(self, f1):
        transition = transitions.next_slide(_active((f1,)))

        assert transition.session.active_index == 0
        assert transition.effect.frame == f1

    @pytest.mark.parametrize("step", [transitions.next_slide, transitions.previous_slide])
    def test_idle_is_no_op(self, step):
        transition = step(Session.idle())

        assert transition.session == Session.idle()
        assert transition.effect is None


class TestApplyReorder:
    """Tests for reorder in both states."""

    def test_active_reorder_keeps_highlight_on_same_frame(self, f1, f2, f3):
        session = _active((f1, f2, f3), 1)
        transition = transitions.apply_reorder(session, (), 1, 2)

        assert sequence_ids(transition.session.sequence) == ("F1", "F3", "F2")
        assert transition.session.active_index == 2
        assert transition.highlight == f2
        assert transition.effect is None
        assert transition.persist_order == transition.session.sequence

    def test_idle_reorder_persists_base_sequence(self, f1, f2, f3):
        transition = transitions.apply_reorder(Session.idle(), (f1, f2, f3), 0, 2)

        assert transition.session == Session.idle()
        assert sequence_ids(transition.persist_order) == ("F2", "F3", "F1")

    @pytest.mark.parametrize(("from_index", "to_index"), [(0, 0), (0, 5), (-1, 1)])
    def test_invalid_indices_change_nothing(self, f1, f2, from_index, to_index):
        session = _active((f1, f2))
        transition = transitions.apply_reorder(session, (), from_index, to_index)

        assert transition.session == session
        assert transition.persist_order is None

    def test_idle_invalid_indices_change_nothing(self, f1, f2):
        transition = transitions.apply_reorder(Session.idle(), (f1, f2), 3, 0)
        assert transition.persist_order is None


class TestClearOrder:
    def test_idle_persists_empty_order(self):
        transition = transitions.clear_order(Session.idle())

        assert transition.session == Session.idle()
        assert transition.persist_order == ()
        assert transition.effect is None

    def test_active_session_is_untouched(self, f1, f2):
        session = _active((f2, f1), 1)

        transition = transitions.clear_order(session)

        assert transition.session == session
        assert transition.persist_order == ()
        assert transition.effect is None


class TestFramesChanged:
    """Tests for reacting to scene mutations."""

    def test_active_frame_survives_and_index_follows_it(self, f1, f2, f3):
        session = _active((f1, f2, f3), 2)
        transition = transitions.frames_changed(session, (f2, f3))

        assert sequence_ids(transition.session.sequence) == ("F2", "F3")
        assert transition.session.active_index == 1
        assert transition.effect is None

    def test_active_frame_removed_clamps_and_navigates(self, f1, f2, f3):
        session = _active((f1, f2, f3), 2)
        transition = transitions.frames_changed(session, (f1, f2))

        assert transition.session.active_index == 1
        assert transition.effect.frame.id == "F2"

    def test_active_frame_removed_mid_sequence_shows_successor(self, f1, f2, f3):
        session = _active((f1, f2, f3), 1)
        transition = transitions.frames_changed(session, (f1, f3))

        assert transition.session.active_index == 1
        assert transition.effect.frame.id == "F3"

    def test_all_frames_removed_stops(self, f1, f2):
        transition = transitions.frames_changed(_active((f1, f2), 1), ())

        assert transition.session == Session.idle()
        assert transition.effect is None

    def test_new_frames_are_appended_while_active(self, f1, f2, f3):
        session = _active((f2, f1), 0)
        transition = transitions.frames_changed(session, (f1, f2, f3))

        assert sequence_ids(transition.session.sequence) == ("F2", "F1", "F3")
        assert transition.session.active_index == 0

    def test_active_persists_when_custom_order_exists(self, f1, f2, f3):
        session = _active((f3, f1, f2), 0)
        transition = transitions.frames_changed(session, (f1, f3), persisted=(f3, f1, f2))

        assert sequence_ids(transition.persist_order) == ("F3", "F1")

    def test_active_without_custom_order_does_not_persist(self, f1, f2, f3):
        transition = transitions.frames_changed(_active((f1, f2, f3)), (f1, f3))
        assert transition.persist_order is None

    def test_idle_reconciles_persisted_order(self, f1, f2, f3):
        transition = transitions.frames_changed(Session.idle(), (f1, f3), persisted=(f3, f1, f2))

        assert transition.session == Session.idle()
        assert sequence_ids(transition.persist_order) == ("F3", "F1")

    def test_idle_unchanged_order_is_not_persisted(self, frames, f1, f2, f3):
        transition = transitions.frames_changed(Session.idle(), frames, persisted=(f3, f1, f2))
        assert transition.persist_order is None

    def test_idle_without_custom_order_is_no_op(self, frames):
        transition = transitions.frames_changed(Session.idle(), frames)
        assert transition.persist_order is None

    def test_moved_frame_geometry_is_picked_up(self, f1, f2):
        moved = FrameRef(id="F2", x=5, y=5, width=1, height=1)
        transition = transitions.frames_changed(_active((f1, f2), 1), (f1, moved))

        assert transition.session.current_frame == moved
