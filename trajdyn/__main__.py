"""
trajdyn — one command, three modes.

    trajdyn compute tracks.csv                          Enrich → tracks_dynamics.parquet
    trajdyn compute tracks.csv -o out.csv --scheme stencil
    trajdyn summary tracks.csv                          Print whole-trajectory summary
    trajdyn generate circle --output circle.csv         Write a synthetic trajectory
"""

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

from trajdyn.config import ACCELERATION_SCHEMES, OUTPUT_FORMATS, get_setting, load_config
from trajdyn.errors import TrajectoryError
from trajdyn.types import MissingColumnError


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    if argv and argv[0] == 'compute':
        return _compute_main(argv[1:])
    if argv and argv[0] == 'summary':
        return _summary_main(argv[1:])
    if argv and argv[0] == 'generate':
        return _generate_main(argv[1:])

    print(__doc__.strip())
    return 2


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('path', help='Raw trajectory table (.csv, .tsv, .parquet)')
    parser.add_argument('--config', default=None, help='YAML file overriding default settings')
    parser.add_argument('--time-col', default=None, help='Time column (default: config columns.time)')
    parser.add_argument('--x-col', default=None, help='x column (default: config columns.x)')
    parser.add_argument('--y-col', default=None, help='y column (default: config columns.y)')
    parser.add_argument('--scheme', choices=ACCELERATION_SCHEMES, default=None,
                        help='Acceleration estimator (default: config derivatives.acceleration_scheme)')
    parser.add_argument('--verbose', action='store_true', help='Log engine details')


def _load_enriched(args):
    from trajdyn.engine import compute
    from trajdyn.io import read_trajectory

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    config = load_config(args.config)
    source = Path(args.path).expanduser().resolve()
    if not source.exists():
        raise FileNotFoundError(f"{source} does not exist")

    trajectory = read_trajectory(
        source,
        time_col=args.time_col or get_setting('columns.time', config=config),
        x_col=args.x_col or get_setting('columns.x', config=config),
        y_col=args.y_col or get_setting('columns.y', config=config),
    )
    return source, config, compute(trajectory, acceleration_scheme=args.scheme, config=config)


def _compute_main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(
        prog='trajdyn compute',
        description='Compute velocity, acceleration, curvature and displacement per sample.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  trajdyn compute tracks.csv
  trajdyn compute tracks.csv -o enriched.csv
  trajdyn compute tracks.parquet --time-col time --x-col px --y-col py
""",
    )
    _add_input_args(parser)
    parser.add_argument('--output', '-o', default=None,
                        help='Output file (default: <input>_dynamics.<io.default_format>)')
    args = parser.parse_args(argv)

    from trajdyn.io import FORMAT_SUFFIXES, write_table

    try:
        source, config, enriched = _load_enriched(args)
    except (TrajectoryError, MissingColumnError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if args.output:
        output = Path(args.output).expanduser()
    else:
        fmt = get_setting('io.default_format', 'parquet', config=config)
        output = source.with_name(f"{source.stem}_dynamics{FORMAT_SUFFIXES[fmt]}")

    try:
        write_table(enriched.to_frame(), output)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    print(f"  {len(enriched)} samples → {output}")
    return 0


def _summary_main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(
        prog='trajdyn summary',
        description='Print whole-trajectory summary statistics.',
    )
    _add_input_args(parser)
    parser.add_argument('--json', action='store_true', help='Print JSON instead of a table')
    args = parser.parse_args(argv)

    from trajdyn.summary import summarize

    try:
        _, _, enriched = _load_enriched(args)
    except (TrajectoryError, MissingColumnError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    summary = summarize(enriched).to_dict()
    if args.json:
        # NaN is not valid JSON
        payload = {
            k: None if isinstance(v, float) and math.isnan(v) else v
            for k, v in summary.items()
        }
        print(json.dumps(payload, indent=2))
    else:
        width = max(len(k) for k in summary)
        for key, value in summary.items():
            print(f"  {key:<{width}}  {value}")
    return 0


def _generate_main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(
        prog='trajdyn generate',
        description='Generate synthetic trajectories.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  trajdyn generate circle --output circle.csv
  trajdyn generate spiral --output spiral.parquet --n_samples 1000
  trajdyn generate linear --output line.csv --jitter 0.3 --seed 7
""",
    )
    parser.add_argument('shape', choices=['linear', 'circle', 'lissajous', 'spiral'])
    parser.add_argument('--output', type=str, required=True,
                        help=f"Output file ({', '.join(OUTPUT_FORMATS)})")
    parser.add_argument('--n_samples', type=int, default=200, help='Number of samples (default: 200)')
    parser.add_argument('--duration', type=float, default=None,
                        help='Time span (default: 2*pi)')
    parser.add_argument('--jitter', type=float, default=0.0,
                        help='Timestamp jitter as a fraction of the step, in [0, 1) (default: 0)')
    parser.add_argument('--seed', type=int, default=None, help='Jitter random seed')
    args = parser.parse_args(argv)

    from trajdyn.generators import GENERATORS, write_trajectory

    kwargs = {'n_samples': args.n_samples, 'jitter': args.jitter, 'seed': args.seed}
    if args.duration is not None:
        kwargs['duration'] = args.duration

    print(f"{args.shape}: n={args.n_samples}, jitter={args.jitter}")
    try:
        trajectory = GENERATORS[args.shape](**kwargs)
        write_trajectory(trajectory, args.output)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
