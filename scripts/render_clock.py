#!/usr/bin/env python3
"""
Clock Face Rendering

This script places the hour marks of a clock face by rotating a single
point about the y axis and writes the result to a PPM image. It exercises
the transform builders, matrix-tuple products and the canvas end to end.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

import yaml
from tqdm import tqdm

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from raytracer.canvas import Canvas
from raytracer.color import Color
from raytracer.errors import RaytracerError
from raytracer.matrix import Matrix
from raytracer.transformations import rotation_y
from raytracer.tuples import point


# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    handlers=[
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger("clock")


def load_config(config_path: Optional[str] = None) -> Dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    # Default config path
    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"

    # Load configuration from file
    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    return config


def apply_config(config: Dict) -> None:
    """Apply process-wide settings from the configuration.

    Sets the default ``Matrix.max_determinant_size`` and the root logger
    level for the whole process. Only ``main`` calls this; library callers
    keep their own settings.

    Args:
        config: Configuration dictionary
    """
    Matrix.max_determinant_size = config["matrix"]["max_determinant_size"]
    logging.getLogger().setLevel(config["logging"]["level"])


def render_clock(
    width: int,
    height: int,
    hours: int = 12,
    radius_fraction: float = 0.375,
    color: Sequence[float] = (1.0, 1.0, 1.0),
) -> Canvas:
    """Draw one pixel per hour mark on a fresh canvas.

    The twelve o'clock mark sits on the +z axis; every other mark is the
    same point rotated about y. The xz plane is then mapped onto the pixel
    grid with the clock centred, so a radius fraction of 0.5 reaches the
    outermost pixels.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        hours: Number of marks around the face
        radius_fraction: Radius as a fraction of the smaller canvas
            dimension, in ``(0, 0.5]``
        color: RGB color of the marks

    Returns:
        Canvas with the marks drawn

    Raises:
        ValueError: If ``hours`` or ``radius_fraction`` is out of range
    """
    if hours < 1:
        raise ValueError(f"hours must be positive, got {hours}")
    if not 0.0 < radius_fraction <= 0.5:
        raise ValueError(f"radius_fraction must be in (0, 0.5], got {radius_fraction}")

    canvas = Canvas(width, height)
    mark_color = Color(*color)
    centre_x = (width - 1) / 2
    centre_y = (height - 1) / 2
    radius = radius_fraction * (min(width, height) - 1)
    twelve = point(0, 0, 1)

    for hour in tqdm(range(hours), desc="Placing hour marks"):
        mark = rotation_y(hour * 2 * math.pi / hours) * twelve
        x = int(round(centre_x + mark.x * radius))
        y = int(round(centre_y - mark.z * radius))
        canvas.write_pixel(x, y, mark_color)
        logger.debug(f"Hour {hour}: pixel ({x}, {y})")

    return canvas


def main(argv: Optional[Sequence[str]] = None) -> Path:
    """Main function to parse arguments and render the clock."""
    parser = argparse.ArgumentParser(description="Render a clock face to a PPM image")
    parser.add_argument(
        "--output", "-o", dest="output_path", default=None,
        help="Path to output PPM file"
    )
    parser.add_argument(
        "--size", "-s", dest="size", type=int, default=None,
        help="Square canvas size in pixels (overrides config)"
    )
    parser.add_argument(
        "--config", "-c", dest="config_path", default=None,
        help="Path to configuration file"
    )

    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config_path)
    apply_config(config)

    # Update configuration with command-line arguments
    if args.size is not None:
        config["canvas"]["width"] = args.size
        config["canvas"]["height"] = args.size
    if args.output_path is not None:
        config["io"]["output_path"] = args.output_path

    try:
        canvas = render_clock(
            config["canvas"]["width"],
            config["canvas"]["height"],
            hours=config["clock"]["hours"],
            radius_fraction=config["clock"]["radius_fraction"],
            color=config["clock"]["color"],
        )
    except (RaytracerError, ValueError) as e:
        logger.exception(f"Error rendering clock: {e}")
        sys.exit(1)

    return canvas.write_ppm(config["io"]["output_path"])


if __name__ == "__main__":
    main()
