"""
Command line interface.

Renders a slider from a JSON slider file, or checks for plugin updates.
"""

import argparse
import json
import sys
from pathlib import Path

from aide_frame.config import load_config
from aide_frame.log import logger, set_level

from .app_config import DEFAULT_CONFIG
from .context import RequestContext
from .plugin import F9slider
from .store import SliderLookupError, SliderStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="f9slider",
        description="Render image slider markup.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s render --data sliders.json --slider home-slider
  %(prog)s render --data sliders.json --theme-location header --container nav
  %(prog)s check-update --config f9slider.json
""",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="JSON configuration file merged over the defaults",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")

    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="Print the markup of a slider")
    render.add_argument("-d", "--data", type=Path, required=True, help="JSON file with sliders and items")
    render.add_argument("-s", "--slider", default="", help="Slider id, slug or name")
    render.add_argument("-l", "--theme-location", default="", help="Theme location to render")
    render.add_argument("--container", default="div", help="Container tag, '' for none (default: div)")
    render.add_argument("--container-class", default="", help="Container class")
    render.add_argument("--container-id", default="", help="Container id")
    render.add_argument("--menu-class", default="menu", help="List class (default: menu)")
    render.add_argument("--menu-id", default="", help="List id (default: menu-<slug>)")
    render.add_argument("--depth", type=int, default=0, help="Levels to render, 0 for all (default: 0)")
    render.add_argument(
        "--item-spacing",
        choices=["preserve", "discard"],
        default="preserve",
        help="Keep or drop whitespace between items (default: preserve)",
    )
    render.add_argument("--current-url", default="", help="URL of the page being viewed")

    commands.add_parser("check-update", help="Compare the installed version with the published one")

    return parser


def _render(plugin, args) -> int:
    html = plugin.f9_image_slider(
        menu=args.slider,
        theme_location=args.theme_location,
        container=args.container,
        container_class=args.container_class,
        container_id=args.container_id,
        menu_class=args.menu_class,
        menu_id=args.menu_id,
        depth=args.depth,
        item_spacing=args.item_spacing,
        echo=False,
    )
    if not html:
        print("Error: No slider to render", file=sys.stderr)
        return 1
    print(html)
    return 0


def _check_update(plugin) -> int:
    result = plugin.admin.check_for_updates()
    if not result["success"]:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(result["message"])
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(str(args.config) if args.config else None, defaults=DEFAULT_CONFIG)
    if args.verbose:
        config["log_level"] = "DEBUG"
    elif args.quiet:
        config["log_level"] = "WARNING"
    set_level(config.get("log_level", "INFO"))

    if args.command == "render":
        if not args.data.is_file():
            print(f"Error: Slider file does not exist: {args.data}", file=sys.stderr)
            return 1
        try:
            store = SliderStore.from_file(args.data)
        except (json.JSONDecodeError, KeyError, SliderLookupError) as e:
            print(f"Error: Cannot load {args.data}: {e}", file=sys.stderr)
            return 1
        context = RequestContext(current_url=args.current_url)
    else:
        store = SliderStore()
        context = RequestContext(is_admin=True)

    plugin = F9slider(context=context, config=config, store=store)
    plugin.hooks.do_action('init')
    logger.debug(f"Running {args.command}")

    if args.command == "render":
        return _render(plugin, args)
    return _check_update(plugin)


if __name__ == "__main__":
    sys.exit(main())
