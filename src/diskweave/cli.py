# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys, pathlib

import yaml
from pydantic import ValidationError

from .api import sample_from_config
from .config import load_config
from .geometry import BoundingBox, points_to_array
from .logging import init_logging_from_cfg
from .sampling.uniform import random_point_array_in


def _dump_json(p: str, obj):
    pathlib.Path(p).parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)


def _sampling_overrides(args) -> dict:
    sampling: dict = {}
    if args.box is not None:
        sampling["region"] = {"box": list(args.box)}
    elif args.width is not None:
        sampling["region"] = {"width": args.width, "height": args.height}
    if args.min_distance is not None:
        sampling["min_distance"] = args.min_distance
    if args.attempts is not None:
        sampling["attempts"] = args.attempts
    if args.seed is not None:
        sampling["seed"] = args.seed
    out: dict = {"sampling": sampling} if sampling else {}
    if args.out is not None:
        out.setdefault("output", {})["points_path"] = args.out
    if args.plot is not None:
        out.setdefault("output", {})["plot_path"] = args.plot
    return out


def cmd_sample(args):
    try:
        profile = load_config(args.config, overrides=_sampling_overrides(args))
    except (ValidationError, yaml.YAMLError, FileNotFoundError, TypeError) as e:
        raise SystemExit(f"invalid configuration: {e}")
    init_logging_from_cfg(profile.logging)

    sc = profile.sampling
    pts = sample_from_config(profile)
    payload = {
        "count": len(pts),
        "min_distance": sc.min_distance,
        "points": points_to_array(pts).tolist(),
    }
    _dump_json(profile.output.points_path, payload)

    if profile.output.plot_path:
        from .viz import plot_points

        if sc.region.is_box:
            bb = sc.region.bounding_box()
            region = BoundingBox.from_size(bb.width, bb.height)
        else:
            region = BoundingBox.from_corners(0.0, 0.0, sc.region.width, sc.region.height)
        plot_points(
            pts,
            region=region,
            min_distance=sc.min_distance,
            show_disks=profile.output.show_disks,
            path=profile.output.plot_path,
        )
    if args.print:
        print(json.dumps(payload, ensure_ascii=False))
    return 0


def cmd_uniform(args):
    if args.n < 0:
        raise SystemExit("--n must be >= 0")
    pts = random_point_array_in(args.box, args.n, rng=args.seed)
    payload = {"count": len(pts), "points": points_to_array(pts).tolist()}
    _dump_json(args.out, payload)
    if args.print:
        print(json.dumps(payload, ensure_ascii=False))
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="diskweave")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("sample", help="Poisson-disc sample a rectangle")
    ps.add_argument("--config", default=None, help="YAML config (default configs/sampling.yaml)")
    ps.add_argument("--width", type=float, default=None)
    ps.add_argument("--height", type=float, default=None)
    ps.add_argument("--box", type=float, nargs=4, default=None, metavar=("X0", "Y0", "X1", "Y1"),
                    help="sample over a bounding box, result centred on the origin")
    ps.add_argument("--min-distance", dest="min_distance", type=float, default=None)
    ps.add_argument("--attempts", type=int, default=None, help="candidates per active point")
    ps.add_argument("--seed", type=int, default=None)
    ps.add_argument("--out", default=None, help="points JSON path")
    ps.add_argument("--plot", default=None, help="optional PNG path")
    ps.add_argument("--print", action="store_true", help="print JSON result to stdout")
    ps.set_defaults(func=cmd_sample)

    pu = sub.add_parser("uniform", help="Uniform random points in a box")
    pu.add_argument("--box", type=float, nargs=4, required=True, metavar=("X0", "Y0", "X1", "Y1"))
    pu.add_argument("--n", type=int, required=True)
    pu.add_argument("--seed", type=int, default=None)
    pu.add_argument("--out", default="out/uniform.json")
    pu.add_argument("--print", action="store_true", help="print JSON result to stdout")
    pu.set_defaults(func=cmd_uniform)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    if ns.cmd == "sample":
        if (ns.width is None) != (ns.height is None):
            parser.error("--width and --height go together")
        if ns.box is not None and ns.width is not None:
            parser.error("use either --box or --width/--height")
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
