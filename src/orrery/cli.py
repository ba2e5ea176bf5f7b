# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for star system generation.

Usage:
    # Roll a whole system (host radius and body count) from a seed
    orrery -o system.json --seed 42

    # Fixed host and body count
    orrery -o system.json --seed 7 --count 3 --host-radius 200 \
        --min-radius 100 --max-radius 500

    # Load a saved system and sample trajectories to CSV
    orrery -i system.json -o copy.json --export-csv traj.csv \
        --duration 100 --step 0.5 --concurrent
"""
import argparse
import logging
import sys

import numpy as np

from orrery.domain.bodies import HostBody, StarSystem
from orrery.domain.clock import sample_times
from orrery.domain.generator import (
    DEFAULT_BAND_GROWTH_FACTOR,
    DEFAULT_MAX_RADIUS,
    DEFAULT_MIN_RADIUS,
    MAX_HOST_RADIUS,
    MIN_HOST_RADIUS,
    GenerationConfig,
    generate_star_system,
    random_generation_config,
)
from orrery.adapters.json_io import JsonStarSystemReader, JsonStarSystemWriter
from orrery.adapters.csv_exporter import CsvTrajectoryExporter
from orrery.adapters.concurrent_positions import ConcurrentPositionMapper

logger = logging.getLogger(__name__)


def run(
    output_path: str | None,
    seed: int | None = None,
    count: int | None = None,
    host_radius: float | None = None,
    host_density: float = 1.0,
    min_radius: float = DEFAULT_MIN_RADIUS,
    max_radius: float = DEFAULT_MAX_RADIUS,
    band_growth_factor: float = DEFAULT_BAND_GROWTH_FACTOR,
    max_inclination_deg: float | None = None,
) -> StarSystem:
    """
    Generate a star system and optionally write its description as JSON.

    Host radius and body count that are not given are drawn from the
    same seeded generator that places the orbits.

    Returns:
        The generated StarSystem.
    """
    rng = np.random.default_rng(seed)

    if host_radius is None:
        host_radius = float(rng.integers(MIN_HOST_RADIUS, MAX_HOST_RADIUS, endpoint=True))
    host = HostBody(radius=host_radius, density=host_density)

    options = dict(
        min_radius=min_radius,
        max_radius=max_radius,
        band_growth_factor=band_growth_factor,
        seed=seed,
        planar=max_inclination_deg is None,
        max_inclination_deg=max_inclination_deg or 0.0,
    )
    if count is None:
        config = random_generation_config(rng, **options)
    else:
        config = GenerationConfig(count=count, **options)

    system = generate_star_system(host, config, rng=rng)
    logger.info("Generated %d bodies (seed=%s)", len(system), seed)

    if output_path:
        JsonStarSystemWriter().write_system(system, output_path)
    return system


def load(input_path: str, output_path: str | None = None) -> StarSystem:
    """Read a star system description, optionally writing it back out."""
    system = JsonStarSystemReader().read_system(input_path)
    if output_path:
        JsonStarSystemWriter().write_system(system, output_path)
    return system


def main():
    parser = argparse.ArgumentParser(
        description="Generate Keplerian star systems and sample body trajectories"
    )
    parser.add_argument(
        '--input', '-i',
        help="Load a star system description JSON instead of generating one"
    )
    parser.add_argument(
        '--output', '-o',
        help="Path to write the star system description JSON"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log progress messages"
    )

    gen_group = parser.add_argument_group('generation')
    gen_group.add_argument(
        '--seed', type=int, default=None,
        help="Random seed (default: fresh entropy, not reproducible)"
    )
    gen_group.add_argument(
        '--count', type=int, default=None,
        help="Number of orbiting bodies (default: drawn from 1-10)"
    )
    gen_group.add_argument(
        '--host-radius', type=float, default=None,
        help="Host radius (default: drawn from 40-100)"
    )
    gen_group.add_argument(
        '--host-density', type=float, default=1.0,
        help="Host density (default: 1)"
    )
    gen_group.add_argument(
        '--min-radius', type=float, default=DEFAULT_MIN_RADIUS,
        help=f"Inner edge of the first band (default: {DEFAULT_MIN_RADIUS:g})"
    )
    gen_group.add_argument(
        '--max-radius', type=float, default=DEFAULT_MAX_RADIUS,
        help=f"Outer edge of the first band (default: {DEFAULT_MAX_RADIUS:g})"
    )
    gen_group.add_argument(
        '--growth', type=float, default=DEFAULT_BAND_GROWTH_FACTOR,
        help=f"Band growth factor (default: {DEFAULT_BAND_GROWTH_FACTOR:g})"
    )
    gen_group.add_argument(
        '--max-inclination', type=float, default=None,
        help="Draw inclined orbits up to this many degrees (default: planar)"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-csv',
        help="Export sampled body positions to CSV"
    )
    export_group.add_argument(
        '--duration', type=float, default=100.0,
        help="Simulated time span to sample (default: 100)"
    )
    export_group.add_argument(
        '--step', type=float, default=1.0,
        help="Simulated time between samples (default: 1)"
    )
    export_group.add_argument(
        '--concurrent', action='store_true', default=False,
        help="Evaluate body positions on a thread pool"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.output and not args.export_csv:
        parser.error("at least one of --output/-o or --export-csv is required")

    try:
        if args.input:
            system = load(args.input, args.output)
            print(f"Loaded {args.input} with {len(system)} bodies.")
        else:
            system = run(
                output_path=args.output,
                seed=args.seed,
                count=args.count,
                host_radius=args.host_radius,
                host_density=args.host_density,
                min_radius=args.min_radius,
                max_radius=args.max_radius,
                band_growth_factor=args.growth,
                max_inclination_deg=args.max_inclination,
            )
            print(f"Generated star system with {len(system)} bodies.")
        if args.output:
            print(f"Wrote {args.output}")

        if args.export_csv:
            times = sample_times(args.duration, args.step)
            mapper = ConcurrentPositionMapper() if args.concurrent else None
            n = CsvTrajectoryExporter(mapper=mapper).export(system, args.export_csv, times)
            print(f"Exported {n} positions to {args.export_csv}")

    except FileNotFoundError as e:
        if args.input and e.filename == args.input:
            print(
                f"Error: Input file not found: {args.input}\n"
                f"Expected a star system description JSON with 'host' and 'bodies'.",
                file=sys.stderr,
            )
        else:
            print(f"Error: Cannot write {e.filename}: directory not found", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
