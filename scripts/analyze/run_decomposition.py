#!/usr/bin/env python3
"""Decompose a signal into frequency components and write tables and figures."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from matplotlib import pyplot as plt

from fft_explorer.analysis.components import (
    DEFAULT_MAX_COMPONENTS,
    DEFAULT_MIN_AMPLITUDE,
    components_table,
    select_significant_components,
)
from fft_explorer.pipeline import (
    AnalysisSession,
    read_samples_csv,
    write_dataframe_csv,
    write_figure,
)
from fft_explorer.plotting.figure_builders import DualDomainFigureBuilder, SpectrumOverviewFigureBuilder
from fft_explorer.plotting.style import explorer_style_context
from fft_explorer.sim.signals import (
    DEFAULT_EQUATION,
    DEFAULT_RESOLUTION,
    RESOLUTION_OPTIONS,
    evaluate_equation,
    parse_number_list,
    stretch_numbers,
)

DEFAULT_COMPONENTS_PATH = Path("data/processed/components.csv")
DEFAULT_DUAL_DOMAIN_FIGURE_PATH = Path("report/figures/dual_domain.png")
DEFAULT_OVERVIEW_FIGURE_PATH = Path("report/figures/spectrum_overview.png")


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("Resolution must be a positive integer.")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--equation",
        default=None,
        help=f"Expression in x over [0, 1) (default: {DEFAULT_EQUATION!r}).",
    )
    source.add_argument(
        "--numbers",
        default=None,
        help="Comma or whitespace separated sample values, stretched to the resolution.",
    )
    source.add_argument(
        "--input-csv",
        type=Path,
        default=None,
        help="CSV file holding samples; resampled to the resolution.",
    )
    parser.add_argument(
        "--csv-column",
        default=None,
        help="Column of --input-csv to read (default: first column).",
    )
    parser.add_argument(
        "--resolution",
        type=_positive_int,
        default=DEFAULT_RESOLUTION,
        help=f"Number of samples to analyze (viewer presets: {', '.join(map(str, RESOLUTION_OPTIONS))}).",
    )
    parser.add_argument(
        "--min-amplitude",
        type=float,
        default=DEFAULT_MIN_AMPLITUDE,
        help="Amplitude a component must exceed to be drawn.",
    )
    parser.add_argument(
        "--max-components",
        type=int,
        default=DEFAULT_MAX_COMPONENTS,
        help="Maximum number of components to draw.",
    )
    parser.add_argument(
        "--components-out",
        type=Path,
        default=DEFAULT_COMPONENTS_PATH,
        help="Output CSV for the full component table.",
    )
    parser.add_argument(
        "--figure-out",
        type=Path,
        default=DEFAULT_DUAL_DOMAIN_FIGURE_PATH,
        help="Output path for the 3D dual-domain figure.",
    )
    parser.add_argument(
        "--overview-out",
        type=Path,
        default=DEFAULT_OVERVIEW_FIGURE_PATH,
        help="Output path for the signal/spectrum overview figure.",
    )
    parser.add_argument(
        "--dark",
        action="store_true",
        help="Render figures with the dark viewer theme.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    plt.switch_backend("Agg")

    if args.numbers is not None:
        values = parse_number_list(args.numbers)
        if values.size == 0:
            parser.error("--numbers did not contain any numeric values.")
        samples = stretch_numbers(values, args.resolution)
    elif args.input_csv is not None:
        samples = read_samples_csv(args.input_csv, column=args.csv_column).to_numpy(dtype=float)
    else:
        samples = evaluate_equation(args.equation or DEFAULT_EQUATION, args.resolution)

    with AnalysisSession(samples, resolution=args.resolution) as session:
        analysis = session.update()

    table = components_table(analysis.components)
    components_path = write_dataframe_csv(table, args.components_out)

    significant = select_significant_components(
        analysis.components,
        min_amplitude=args.min_amplitude,
        max_count=args.max_components,
    )
    theme = "dark" if args.dark else "light"
    with explorer_style_context(theme=theme):
        figure, _ = DualDomainFigureBuilder(
            min_amplitude=args.min_amplitude,
            max_components=args.max_components,
        ).build(analysis.samples, analysis.components)
        figure_path = write_figure(figure, args.figure_out)

        overview, _ = SpectrumOverviewFigureBuilder(
            min_amplitude=args.min_amplitude,
            max_components=args.max_components,
        ).build(analysis.samples, analysis.components)
        overview_path = write_figure(overview, args.overview_out)

    print(f"Samples analyzed: {analysis.sample_count}")
    print(f"Components extracted: {len(analysis.components)}")
    print(f"Significant components: {len(significant)}")
    for component in significant:
        print(
            f"  {component.frequency:>4d} Hz  amplitude={component.amplitude:.4f}  "
            f"phase={component.phase:+.4f} rad"
        )
    print(f"Component table CSV: {components_path}")
    print(f"Dual-domain figure: {figure_path}")
    print(f"Overview figure: {overview_path}")


if __name__ == "__main__":
    main()
