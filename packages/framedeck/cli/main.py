"""Command-line interface for framedeck.

Drives the presentation engine against scene files on disk.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from framedeck.core.config.loader import configure_logging, load_app_config
from framedeck.core.config.models import AppConfig
from framedeck.core.presentation import (
    FrameRef,
    KeyEvent,
    NavigationOptions,
    PresentationController,
    frame_title,
)
from framedeck.core.scene import SceneDocument, StaticFrameSource, load_scene
from framedeck.core.storage import create_order_store

console = Console()


class ConsoleViewport:
    """Viewport that prints navigation requests."""

    def __init__(self, out: Console) -> None:
        self.out = out
        self.requests: list[FrameRef] = []

    def navigate_to(self, frame: FrameRef, options: NavigationOptions) -> None:
        self.requests.append(frame)
        mode = "animated" if options.animate else "instant"
        self.out.print(
            f"[cyan]→ {frame_title(frame)}[/cyan] [dim]({frame.id}, "
            f"zoom {options.zoom_factor:g}, {mode})[/dim]"
        )


class ConsoleHighlight:
    """Highlight sink that prints highlight changes."""

    def __init__(self, out: Console) -> None:
        self.out = out
        self.current: FrameRef | None = None

    def set_highlight(self, frame: FrameRef | None) -> None:
        self.current = frame
        if frame is None:
            self.out.print("[dim]highlight cleared[/dim]")


def _load(args: argparse.Namespace) -> tuple[AppConfig, SceneDocument] | None:
    try:
        config = load_app_config(Path(args.config))
    except (ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return None

    configure_logging(config)

    scene_path = Path(args.scene)
    if not scene_path.exists():
        console.print(f"[red]ERROR: Scene file not found: {scene_path}[/red]")
        return None
    try:
        scene = load_scene(scene_path)
    except (ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load scene: {e}[/red]")
        return None

    return config, scene


def _build_controller(
    config: AppConfig,
    scene: SceneDocument,
    viewport: ConsoleViewport | None = None,
    highlight: ConsoleHighlight | None = None,
) -> PresentationController:
    return PresentationController(
        scene.document_id,
        frame_source=StaticFrameSource(scene.frames),
        order_store=create_order_store(config.storage),
        viewport=viewport,
        highlight=highlight,
        config=config.presentation,
    )


def _print_order(controller: PresentationController) -> None:
    view = controller.panel_view()
    table = Table(title=f"Slides: {controller.document_id}")
    table.add_column("#", justify="right")
    table.add_column("Frame")
    table.add_column("Title")
    for item in view.slides:
        table.add_row(str(item.index + 1), item.frame_id, item.title)
    console.print(table)
    if view.info:
        console.print(view.info)
    if controller.custom_order:
        console.print("[dim]Custom order[/dim]")
    else:
        console.print("[dim]Position order[/dim]")


def cmd_order(args: argparse.Namespace) -> int:
    """Print the slide order."""
    loaded = _load(args)
    if loaded is None:
        return 1
    config, scene = loaded
    _print_order(_build_controller(config, scene))
    return 0


def cmd_reorder(args: argparse.Namespace) -> int:
    """Move one slide and save the custom order."""
    loaded = _load(args)
    if loaded is None:
        return 1
    config, scene = loaded
    controller = _build_controller(config, scene)

    size = len(controller.slides())
    # CLI positions are 1-based
    from_index, to_index = args.from_pos - 1, args.to_pos - 1
    if not (0 <= from_index < size and 0 <= to_index < size):
        console.print(f"[red]ERROR: Positions must be between 1 and {size}[/red]")
        return 1

    controller.reorder(from_index, to_index)
    _print_order(controller)
    return 0


def cmd_present(args: argparse.Namespace) -> int:
    """Run a presentation driven by a key script."""
    loaded = _load(args)
    if loaded is None:
        return 1
    config, scene = loaded
    viewport = ConsoleViewport(console)
    controller = _build_controller(config, scene, viewport, ConsoleHighlight(console))

    started = controller.autostart() if config.presentation.autostart else controller.start().active
    if not started:
        console.print(f"[yellow]{controller.panel_view().info}[/yellow]")
        return 1

    console.print(f"[bold]{controller.panel_view().counter}[/bold]")
    tokens = [t for t in (args.keys or "").split(",") if t.strip()]
    for token in tokens:
        event = KeyEvent.parse(token)
        if not controller.handle_key(event):
            console.print(f"[dim]ignored key {token.strip()!r}[/dim]")
            continue
        view = controller.panel_view()
        if view.active:
            console.print(f"[bold]{view.counter}[/bold]")
        else:
            console.print("[bold]Presentation ended[/bold]")
            break

    if controller.active:
        controller.stop()
        console.print("[bold]Presentation ended[/bold]")

    console.print(f"[green]Visited {len(viewport.requests)} slide(s)[/green]")
    return 0


def cmd_reset(args: argparse.Namespace) -> int:
    """Forget the custom order."""
    loaded = _load(args)
    if loaded is None:
        return 1
    config, scene = loaded
    if not _build_controller(config, scene).reset_order():
        console.print(f"[red]ERROR: Could not clear custom order for {scene.document_id}[/red]")
        return 1
    console.print(f"[green]Custom order cleared for {scene.document_id}[/green]")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="framedeck",
        description="framedeck - present canvas frames as slides",
    )
    p.add_argument(
        "--config",
        default="framedeck.json",
        help="Path to app config JSON/YAML (default: framedeck.json)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    order = sub.add_parser("order", help="Show the slide order")
    order.add_argument("scene", help="Path to scene file (JSON/YAML)")
    order.set_defaults(func=cmd_order)

    reorder = sub.add_parser("reorder", help="Move a slide and save the order")
    reorder.add_argument("scene", help="Path to scene file (JSON/YAML)")
    reorder.add_argument("from_pos", type=int, help="Current slide position (1-based)")
    reorder.add_argument("to_pos", type=int, help="New slide position (1-based)")
    reorder.set_defaults(func=cmd_reorder)

    present = sub.add_parser("present", help="Run a presentation")
    present.add_argument("scene", help="Path to scene file (JSON/YAML)")
    present.add_argument(
        "--keys",
        default="",
        help="Comma-separated key presses, e.g. ArrowRight,Space,Shift+Space,Escape",
    )
    present.set_defaults(func=cmd_present)

    reset = sub.add_parser("reset", help="Clear the saved custom order")
    reset.add_argument("scene", help="Path to scene file (JSON/YAML)")
    reset.set_defaults(func=cmd_reset)

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
