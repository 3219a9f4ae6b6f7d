"""Command-line interface for evonet."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random

from .config import load_evolution_config
from .network import Network, parameter_count


def _cmd_propagate(args: argparse.Namespace) -> int:
    try:
        network = Network.random(Random(args.seed), args.topology)
    except (TypeError, ValueError) as error:
        print(f"[propagate] invalid topology: {error}", file=sys.stderr)
        return 1

    inputs = list(args.inputs) if args.inputs else [0.0] * args.topology[0]
    try:
        outputs = network.propagate(inputs)
    except ValueError as error:
        print(f"[propagate] {error}", file=sys.stderr)
        return 1

    print(f"[propagate] topology={args.topology} seed={args.seed}")
    if args.show_weights:
        weights = " ".join(f"{value:.6f}" for value in network.weights())
        print(f"  weights ({parameter_count(args.topology)}): {weights}")
    print(f"  inputs: {' '.join(f'{value:.6f}' for value in inputs)}")
    print(f"  outputs: {' '.join(f'{value:.6f}' for value in outputs)}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    config_path = Path(args.config)
    try:
        config = load_evolution_config(config_path)
    except (OSError, TypeError, ValueError) as error:
        print(f"[validate] {config_path}: {error}", file=sys.stderr)
        return 1

    print("[validate] configuration validated")
    print(f"  population_size: {config.population_size}")
    print(f"  generations: {config.generations}")
    print(f"  topology: {list(config.topology)}")
    print(f"  chromosome_length: {parameter_count(config.topology)}")
    print(f"  selection: {config.selection}")
    print(f"  crossover: {config.crossover}")
    print(
        f"  mutation: chance={config.mutation_chance} coeff={config.mutation_coeff}"
    )
    print(f"  seed: {config.seed}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evonet",
        description="Neuroevolution toolkit command-line interface",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    propagate = subparsers.add_parser(
        "propagate",
        help="Build a random network and run one forward pass",
    )
    propagate.add_argument(
        "--topology",
        type=int,
        nargs="+",
        required=True,
        help="Layer sizes, input first and output last (space-separated).",
    )
    propagate.add_argument(
        "--inputs",
        type=float,
        nargs="+",
        default=None,
        help="Input vector; defaults to zeros.",
    )
    propagate.add_argument("--seed", type=int, default=None, help="RNG seed")
    propagate.add_argument(
        "--show-weights",
        action="store_true",
        help="Print the flattened biases and weights.",
    )
    propagate.set_defaults(func=_cmd_propagate)

    validate = subparsers.add_parser(
        "validate",
        help="Validate an evolution configuration YAML",
    )
    validate.add_argument(
        "--config",
        required=True,
        help="Path to evolution configuration YAML",
    )
    validate.set_defaults(func=_cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    result = args.func(args)
    return int(result)


if __name__ == "__main__":  # pragma: no cover - entry point
    raise SystemExit(main())
