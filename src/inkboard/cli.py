"""
Command-line interface for inkboard.

Runs shape recognition and the stroke eraser on JSON files, renders boards
to SVG and writes a default configuration.
"""

import argparse
import json
import sys

from inkboard.config import load_config, save_default_config
from inkboard.tracer import configure_tracer, get_tracer


def _add_common_arguments(parser):
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    parser.add_argument(
        "--trace-level",
        default="INFO",
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )
    parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )
    parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="inkboard",
        description="inkboard: freehand stroke geometry for whiteboards",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    recognize_parser = subparsers.add_parser("recognize", help="Recognize the shape of a point sequence")
    recognize_parser.add_argument(
        "--input", "-i",
        required=True,
        help="JSON file with a list of points",
    )
    _add_common_arguments(recognize_parser)

    erase_parser = subparsers.add_parser("erase", help="Erase strokes touching a point")
    erase_parser.add_argument("--board", "-b", required=True, help="Board JSON file")
    erase_parser.add_argument("--x", type=float, required=True, help="Eraser x in world units")
    erase_parser.add_argument("--y", type=float, required=True, help="Eraser y in world units")
    erase_parser.add_argument(
        "--threshold", "-t",
        type=float,
        default=None,
        help="Hit tolerance in world units (config default when omitted)",
    )
    erase_parser.add_argument("--out", "-o", required=True, help="Output board JSON file")
    _add_common_arguments(erase_parser)

    render_parser = subparsers.add_parser("render", help="Render a board to SVG")
    render_parser.add_argument("--board", "-b", required=True, help="Board JSON file")
    render_parser.add_argument("--out", "-o", required=True, help="Output SVG file")
    render_parser.add_argument("--width", type=float, default=None, help="Canvas width")
    render_parser.add_argument("--height", type=float, default=None, help="Canvas height")
    _add_common_arguments(render_parser)

    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="inkboard_config.yaml",
        help="Output path for config file",
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "init-config":
        return handle_init_config(args)

    handlers = {
        "recognize": handle_recognize,
        "erase": handle_erase,
        "render": handle_render,
    }

    config = load_config(args.config)
    configure_tracer(
        enabled=args.trace or config.tracing.enabled,
        level=args.trace_level if args.trace else config.tracing.level,
        file_path=args.trace_file or config.tracing.file_path,
        json_output=args.trace_json or config.tracing.json_output,
    )

    tracer = get_tracer()

    try:
        with tracer.span(f"cli_{args.command}", module="cli"):
            return handlers[args.command](args, config)
    except Exception as e:
        tracer.event(f"Command failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1
    finally:
        tracer.config.close()


def handle_recognize(args, config):
    """Handle the recognize command."""
    from inkboard.geometry.recognize import correct_points
    from inkboard.io.files import load_points

    points = load_points(args.input)
    corrected, is_shape = correct_points(points, config.recognition)

    result = {
        "recognized": is_shape,
        "points": [p.model_dump() for p in corrected],
    }
    print(json.dumps(result, indent=2))
    return 0


def handle_erase(args, config):
    """Handle the erase command."""
    from inkboard.io.files import load_board, save_board
    from inkboard.models import Point

    board = load_board(args.board, config=config)
    removed = board.erase_at(Point(x=args.x, y=args.y), args.threshold)
    save_board(board, args.out)

    print(f"Erased {len(removed)} stroke(s), {len(board)} remaining.")
    print(f"Board saved to: {args.out}")
    return 0


def handle_render(args, config):
    """Handle the render command."""
    from inkboard.export.svg_emit import emit_strokes_svg
    from inkboard.io.files import load_board, save_svg

    board = load_board(args.board, config=config)
    dwg = emit_strokes_svg(board.strokes, width=args.width, height=args.height)
    save_svg(dwg, args.out)

    print(f"Rendered {len(board)} stroke(s) to: {args.out}")
    return 0


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
