import argparse
import sys
from typing import Callable, Optional

from ztui.__version__ import __version__
from ztui.app.context import AppContext
from ztui.config.settings import get_bool, get_setting
from ztui.exceptions import InitializationError, MenuConfigError
from ztui.logging import LoggerFactory, setup_logging
from ztui.menu import MenuBar, build_menu
from ztui.ui import popup, renderer
from ztui.ui.constants import glyphs_for
from ztui.ui.display import ScreenSurface

log = LoggerFactory.for_system()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ztui",
        description="Bordered full-screen terminal UI with an inline menu bar",
    )
    parser.add_argument(
        "-l",
        "--logfile",
        metavar="FILE_PATH",
        help="Path to the log file. Logging is disabled if not provided. "
        "Bare file names are placed in the default log directory.",
    )
    parser.add_argument(
        "-L",
        "--loglevel",
        metavar="LEVEL",
        default="INFO",
        help="Set log level (DEBUG, INFO, WARN, ERROR, FATAL). Default: INFO.",
    )
    parser.add_argument("-t", "--title", help="Title shown in the top border")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_context(title: Optional[str] = None) -> AppContext:
    model = build_menu(get_setting("menu"))
    menubar = MenuBar(
        model,
        quit_key=get_setting("quit_key"),
        quit_label=get_setting("quit_label"),
    )
    return AppContext(
        menubar=menubar,
        title=(get_setting("title") or "") if title is None else title,
        glyphs=glyphs_for(get_bool("ascii_borders")),
        attr_normal=get_setting("attr_normal"),
        attr_active=get_setting("attr_active"),
    )


def render_frame(surface, context: AppContext) -> None:
    menubar = context.menubar
    if menubar.consume_clear_request():
        surface.clear(redraw=True)
    surface.draw_frame()
    # The top border must be drawn first: it reports the anchor column the
    # popup is aligned to.
    layout = renderer.draw_top_border(
        surface,
        context.title,
        menubar.model.labels,
        menubar.active_index,
        menubar.submenu.is_open,
        glyphs=context.glyphs,
        attr_normal=context.attr_normal,
        attr_active=context.attr_active,
    )
    context.update_anchor(layout.anchor_column)
    if menubar.submenu.is_open:
        popup.draw_submenu(
            surface,
            menubar,
            context.anchor_column,
            attr_normal=context.attr_normal,
            attr_active=context.attr_active,
        )
        if not menubar.submenu.is_open:
            # The popup could not be placed and closed itself; repaint without it.
            render_frame(surface, context)
            return
    surface.refresh()


def run_loop(surface, context: AppContext, read_key: Callable[[], str]) -> None:
    log.info("Main loop started.")
    while context.running:
        render_frame(surface, context)
        key = read_key()
        context.running = context.menubar.handle_key(key)
    log.info("Main loop finished.")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.logfile, level=args.loglevel)
    log.info(f"Application starting (ztui {__version__}, Python {sys.version.split()[0]})")

    try:
        context = build_context(args.title)
    except MenuConfigError as error:
        log.critical(f"Invalid menu configuration: {error}")
        print(f"Error: invalid menu configuration: {error}", file=sys.stderr)
        return 1

    surface = ScreenSurface(context.glyphs)
    try:
        surface.init()
    except InitializationError as error:
        log.critical(f"Screen initialization failed: {error}. Exiting.")
        print(f"Error: {error}", file=sys.stderr)
        return 1

    try:
        run_loop(surface, context, surface.read_key)
    except KeyboardInterrupt:
        log.info("Interrupted by user.")
    finally:
        surface.end()
        log.info("Application finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
