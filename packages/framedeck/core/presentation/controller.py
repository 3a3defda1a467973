"""Presentation controller - host-side owner of the current session.

The controller holds the only mutable reference to the session and runs
every transition in a fixed order:

1. dispatch the viewport effect (fire-and-forget)
2. commit the new session
3. push the highlight
4. persist the custom order, if it changed
5. notify listeners

Collaborator failures (viewport, highlight sink, order store) are logged and
skipped; the logical session state always advances.
"""

from __future__ import annotations

from collections.abc import Callable

from framedeck.core.config.models import PresentationConfig
from framedeck.core.presentation import session as transitions
from framedeck.core.presentation.keymap import KeyEvent, PresentationCommand, resolve_command
from framedeck.core.presentation.models import (
    FrameRef,
    FrameSequence,
    NavigationOptions,
    NavigationRequest,
    Session,
    Transition,
)
from framedeck.core.presentation.ordering import reconcile
from framedeck.core.presentation.protocols import FrameSource, HighlightSink, Viewport
from framedeck.core.presentation.view import PanelView, build_panel_view
from framedeck.core.storage.errors import OrderStoreError
from framedeck.core.storage.protocols import OrderStore
from framedeck.core.utils.logging import get_logger


SessionListener = Callable[[Session], None]


class PresentationController:
    """Runs presentation sessions for one document.

    Example:
        controller = PresentationController(
            "doc-1",
            frame_source=scene,
            order_store=FSOrderStore("data/orders"),
            viewport=canvas,
            highlight=canvas,
        )
        controller.start()
        controller.next()
        controller.handle_key(KeyEvent(key="Escape"))
    """

    def __init__(
        self,
        document_id: str,
        frame_source: FrameSource,
        order_store: OrderStore,
        *,
        viewport: Viewport | None = None,
        highlight: HighlightSink | None = None,
        config: PresentationConfig | None = None,
    ) -> None:
        """Initialize controller and read the saved custom order once.

        Args:
            document_id: Document whose frames are presented
            frame_source: Provides the current frames
            order_store: Durable custom order storage
            viewport: Canvas view to move between frames (optional)
            highlight: Receives the active frame (optional)
            config: Presentation settings (defaults if None)
        """
        self.document_id = document_id
        self.frame_source = frame_source
        self.order_store = order_store
        self.viewport = viewport
        self.highlight_sink = highlight
        self.config = config or PresentationConfig()
        self.logger = get_logger(__name__, document_id=document_id)

        self._session = Session.idle()
        self._listeners: list[SessionListener] = []
        self._custom_order: FrameSequence = self._load_custom_order()

    # === Read accessors ===

    @property
    def session(self) -> Session:
        return self._session

    @property
    def active(self) -> bool:
        return self._session.active

    @property
    def sequence(self) -> FrameSequence:
        return self._session.sequence

    @property
    def active_index(self) -> int:
        return self._session.active_index

    @property
    def current_frame(self) -> FrameRef | None:
        return self._session.current_frame

    @property
    def highlight(self) -> FrameRef | None:
        """Frame currently emphasized by the renderer."""
        return self._session.current_frame

    @property
    def custom_order(self) -> FrameSequence:
        """Last known persisted order (empty when none was saved)."""
        return self._custom_order

    @property
    def navigation_options(self) -> NavigationOptions:
        return self.config.navigation_options()

    def slides(self) -> FrameSequence:
        """Slide order as the UI should list it.

        While presenting this is the session sequence; otherwise the saved
        custom order reconciled against the current frames.
        """
        if self._session.active:
            return self._session.sequence
        return reconcile(self._custom_order, self._frames())

    def panel_view(self) -> PanelView:
        """View model for the slide panel and overlay."""
        slides = () if self._session.active else self.slides()
        return build_panel_view(self._session, slides)

    # === Listeners ===

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a callback run after every session change.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # === Operations ===

    def start(self) -> Session:
        """Start presenting from the first slide (no-op without frames)."""
        transition = transitions.start(
            self._session, self._frames(), self._custom_order, self.navigation_options
        )
        if not transition.session.active:
            self.logger.info(f"Presentation not started for {self.document_id!r}: no frames")
        return self.apply(transition)

    def stop(self) -> Session:
        """End the presentation and clear the highlight."""
        return self.apply(transitions.stop(self._session))

    def next(self) -> Session:
        """Move to the next slide, wrapping to the first."""
        return self.apply(transitions.next_slide(self._session, self.navigation_options))

    def previous(self) -> Session:
        """Move to the previous slide, wrapping to the last."""
        return self.apply(transitions.previous_slide(self._session, self.navigation_options))

    def reorder(self, from_index: int, to_index: int) -> Session:
        """Move a slide and save the result as the custom order.

        Works both while presenting and while idle; invalid indices are
        ignored.
        """
        base = () if self._session.active else self.slides()
        transition = transitions.apply_reorder(self._session, base, from_index, to_index)
        if transition.persist_order is None:
            self.logger.debug(
                f"Ignored reorder {from_index} -> {to_index} for {self.document_id!r}"
            )
        return self.apply(transition)

    def reset_order(self) -> bool:
        """Forget the saved custom order; slides fall back to position order.

        Returns:
            True if the order store accepted the change
        """
        transition = transitions.clear_order(self._session)
        return self._save_custom_order(transition.persist_order)

    def refresh(self) -> Session:
        """Reconcile with the frame source after frames were added or removed."""
        frames = self._frames()
        surviving = {f.id for f in self._custom_order} & {f.id for f in frames}
        if self._custom_order and frames and not surviving:
            self.logger.info(
                f"Custom order for {self.document_id!r} has no surviving frames; "
                "falling back to position order"
            )
        transition = transitions.frames_changed(
            self._session, frames, self._custom_order, self.navigation_options
        )
        return self.apply(transition)

    def autostart(
        self,
        max_attempts: int | None = None,
        between_attempts: Callable[[int], None] | None = None,
    ) -> bool:
        """Start as soon as the frame source has frames.

        Args:
            max_attempts: Polls before giving up (config default if None)
            between_attempts: Called with the attempt number after each
                unsuccessful poll, e.g. to wait or pump host events

        Returns:
            True if a presentation is running afterwards
        """
        attempts = max_attempts or self.config.autostart_attempts
        for attempt in range(1, attempts + 1):
            self.start()
            if self._session.active:
                return True
            if between_attempts is not None and attempt < attempts:
                between_attempts(attempt)
        self.logger.info(f"Autostart gave up after {attempts} attempts for {self.document_id!r}")
        return False

    def run(self, command: PresentationCommand) -> Session:
        """Run a command by name."""
        if command is PresentationCommand.START:
            return self.start()
        if command is PresentationCommand.STOP:
            return self.stop()
        if command is PresentationCommand.NEXT:
            return self.next()
        return self.previous()

    def handle_key(self, event: KeyEvent) -> bool:
        """Run the command bound to a key press.

        Returns:
            True if the key was consumed
        """
        command = resolve_command(event, self._session.active)
        if command is None:
            return False
        self.run(command)
        return True

    # === Transition execution ===

    def apply(self, transition: Transition) -> Session:
        """Execute a transition: navigate, commit, highlight, persist, notify.

        The viewport request is issued before the new session is committed
        and is never awaited.

        Returns:
            The committed session
        """
        if transition.effect is not None:
            self._navigate(transition.effect)

        previous = self._session
        self._session = transition.session
        changed = transition.session != previous

        if changed:
            self.logger.debug(
                f"Session {self.document_id!r}: active={self._session.active} "
                f"index={self._session.active_index} frames={len(self._session.sequence)}"
            )
            self._push_highlight(self._session.current_frame)

        if transition.persist_order is not None:
            self._save_custom_order(transition.persist_order)

        if changed:
            self._notify()

        return self._session

    # === Internal ===

    def _frames(self) -> tuple[FrameRef, ...]:
        return tuple(self.frame_source.get_frames())

    def _load_custom_order(self) -> FrameSequence:
        try:
            order = self.order_store.load(self.document_id)
        except OrderStoreError as e:
            self.logger.warning(f"Order store unavailable, using position order: {e}")
            return ()
        self.logger.debug(f"Loaded custom order for {self.document_id!r}: {len(order)} frames")
        return tuple(order)

    def _save_custom_order(self, order: FrameSequence) -> bool:
        self._custom_order = tuple(order)
        try:
            self.order_store.save(self.document_id, self._custom_order)
        except OrderStoreError as e:
            self.logger.warning(f"Failed to save custom order: {e}")
            return False
        self.logger.info(f"Saved custom order for {self.document_id!r} ({len(order)} frames)")
        return True

    def _navigate(self, request: NavigationRequest) -> None:
        if self.viewport is None:
            self.logger.warning(
                f"No viewport attached; skipping navigation to {request.frame.id!r}"
            )
            return
        try:
            self.viewport.navigate_to(request.frame, request.options)
        except Exception:
            self.logger.warning(
                f"Viewport navigation to {request.frame.id!r} failed", exc_info=True
            )

    def _push_highlight(self, frame: FrameRef | None) -> None:
        if self.highlight_sink is None:
            return
        try:
            self.highlight_sink.set_highlight(frame)
        except Exception:
            self.logger.warning("Highlight sink failed", exc_info=True)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._session)
            except Exception:
                self.logger.exception(f"Session listener {listener!r} failed")
