# File: run_mountain_preview.py
from __future__ import annotations
import argparse
import logging
import pathlib
import sys

from mountain_engine.core.export import write_layer_preview, write_mountain_preview
from mountain_engine.core.preset import PresetError, load_preset
from mountain_engine.setup_logging import setup_logging
from mountain_engine.world.mountain import MountainModel

ROOT = pathlib.Path(__file__).resolve().parent
ARTIFACTS_ROOT = ROOT / "artifacts"

logger = logging.getLogger("run_mountain_preview")


def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Generate a mountain and export PNG previews.")
    p.add_argument("--seed", default="test", help="seed string of the run")
    p.add_argument("--preset", default=None, help="path to a JSON preset (defaults built in)")
    p.add_argument("--out", default=str(ARTIFACTS_ROOT / "mountain"), help="output directory")
    p.add_argument("--scale", type=int, default=4, help="pixels per tile in the PNGs")
    p.add_argument("--layers", action="store_true", help="also write one PNG per layer")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    setup_logging(args.verbose)

    try:
        preset = load_preset(args.preset)
    except PresetError as e:
        logger.error("Cannot load preset: %s", e)
        return 2

    model = MountainModel(args.seed, preset)

    for row in model.stats():
        logger.info(
            "layer %2d | snow %5.1f%% | hazards %5.1f%% | ice %3d rock %3d ramp %3d tree %3d obstacle %3d",
            row["index"], row["snow_pct"] * 100, row["hazard_pct"] * 100,
            row["ice"], row["rock"], row["ramp"], row["tree"], row["obstacle"],
        )

    safe_seed = "".join(c if c.isalnum() or c in "-_" else "_" for c in args.seed) or "_"
    out_dir = pathlib.Path(args.out) / safe_seed
    write_mountain_preview(out_dir / "mountain.png", model, scale=args.scale)
    if args.layers:
        buckets = int(preset.classifier["color_buckets"])
        for layer in model.get_layers():
            write_layer_preview(
                out_dir / f"layer_{layer.index:02d}.png",
                layer,
                preset.palette,
                scale=args.scale,
                color_buckets=buckets,
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
