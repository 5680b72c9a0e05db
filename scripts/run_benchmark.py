#!/usr/bin/env python3
"""
Transform Timing Benchmark

Measures the time of one apply call for each configured transform and size:
  1. Mean / std time per call (ms)
  2. Throughput (samples per second)

Usage:
    python scripts/run_benchmark.py [--config CONFIG_PATH] [--output OUTPUT_DIR]
"""

import sys
import json
import argparse
from pathlib import Path
from datetime import datetime
from typing import List

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

# Rich imports
from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.panel import Panel
from rich import box

# Project imports
from fft_core.benchmark import TimingResult, iter_cases, load_config, run_benchmark, DEFAULT_CONFIG
from fft_core.utils.logging import setup_logging, log_results

console = Console()


def display_results_table(results: List[TimingResult]):
    """Display timing results."""
    table = Table(title="Transform Timing Results", box=box.ROUNDED)
    table.add_column("Transform", style="bold")
    table.add_column("Dim", justify="right")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Throughput (Msamples/s)", justify="right")

    for r in results:
        table.add_row(
            r.transform,
            str(r.dim),
            f"{r.mean_ms:.4f}±{r.std_ms:.4f}",
            f"{r.throughput / 1e6:.2f}",
        )

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Transform Timing Benchmark")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'scripts' / 'configs' / 'benchmark.yaml'),
        help='Path to configuration file'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=str(PROJECT_ROOT / 'results' / 'benchmark'),
        help='Output directory for timing.json and benchmark.log'
    )
    parser.add_argument('--iterations', type=int, default=None, help='Override iterations per case')
    parser.add_argument('--inverse', action='store_true', help='Time the inverse transforms')
    args = parser.parse_args()

    config = dict(DEFAULT_CONFIG)
    config.update(load_config(args.config))
    if args.iterations is not None:
        config['iterations'] = args.iterations
    if args.inverse:
        config['inverse'] = True

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    logger = setup_logging(log_file=str(output_dir / 'benchmark.log'))

    console.print(Panel.fit(
        "[bold blue]Transform Timing Benchmark[/bold blue]\n"
        f"Iterations: {config['iterations']}  Inverse: {config['inverse']}",
        border_style="blue"
    ))

    logger.info("=" * 60)
    logger.info("BENCHMARK STARTED")
    logger.info("=" * 60)

    cases = iter_cases(config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=30),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Timing transforms", total=len(cases))

        def advance(result: TimingResult):
            progress.update(task, advance=1, description=f"[cyan]{result.transform} dim={result.dim}")

        results = run_benchmark(config, on_result=advance)

    console.print("\n")
    display_results_table(results)

    results_dict = {
        'timestamp': datetime.now().isoformat(),
        'iterations': config['iterations'],
        'inverse': config['inverse'],
        'results': [r.to_dict() for r in results],
    }
    log_results(logger, {f"{r.transform}[{r.dim}]": r.mean_ms for r in results}, title="MEAN TIME (ms)")

    with open(output_dir / 'timing.json', 'w') as f:
        json.dump(results_dict, f, indent=2)

    console.print(f"\n[green]✓[/green] Results saved to {output_dir}")


if __name__ == '__main__':
    main()
