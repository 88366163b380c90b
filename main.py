#!/usr/bin/env python3
"""
Lumenray - gradient test image

Main entry point. Writes the image as PPM to stdout by default:

    python main.py > image.ppm
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from lumenray.gradient import GradientRenderer, GradientSettings
from lumenray.image import save_image, write_ppm

logger = logging.getLogger("lumenray")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Lumenray - render a gradient test image',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py > image.ppm
  python main.py --width 400 --height 200 --output gradient.png
        '''
    )

    parser.add_argument('--width', type=int, default=256, help='Image width (default: 256)')
    parser.add_argument('--height', type=int, default=256, help='Image height (default: 256)')
    parser.add_argument('--blue', type=float, default=0.25, help='Constant blue channel (default: 0.25)')
    parser.add_argument('--output', type=str, default=None,
                        help='Output filename; extension picks the format (default: PPM on stdout)')
    parser.add_argument('--quiet', action='store_true', help='Do not show scanline progress')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    try:
        settings = GradientSettings(width=args.width, height=args.height, blue=args.blue)
    except ValueError as e:
        parser.error(str(e))

    renderer = GradientRenderer(settings)

    if not args.quiet:
        def progress_callback(remaining: int):
            print(f'\rScanlines remaining: {remaining} ', end='', file=sys.stderr, flush=True)

        renderer.set_progress_callback(progress_callback)

    start_time = time.time()
    image = renderer.render()
    if not args.quiet:
        print('\r', end='', file=sys.stderr, flush=True)
    logger.info("Rendered %dx%d in %.2f seconds", settings.width, settings.height,
                time.time() - start_time)

    if args.output is None:
        write_ppm(image, sys.stdout)
        sys.stdout.flush()
    else:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        save_image(image, output_path)
        logger.info("Saved to %s", output_path)

    return 0


if __name__ == '__main__':
    sys.exit(main())
