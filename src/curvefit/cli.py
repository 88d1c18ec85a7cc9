"""curvefit command line interface."""

import argparse
import logging
import sys
from typing import List, Optional

from curvefit.config.loader import configure_from_cli
from curvefit.config.settings import set_settings, get_settings, has_settings
from curvefit.config.resolvers import default_log_dir
from curvefit.data.xyfile import append_xy_file, load_xy_file
from curvefit.domain.exceptions import ConfigurationError, CurveFitError
from curvefit.models.shapes import available_shapes
from curvefit.results.assemblers import result_rows, write_result_json
from curvefit.runners.pipeline import fit
from curvefit.solver import FitykSolver
from curvefit.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the curvefit CLI."""
    parser = argparse.ArgumentParser(
        prog="curvefit",
        description=(
            "Fit linear and quadratic curves to XY data with fityk, keep the "
            "best fit and project it up to a ceiling."
        ),
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    fit_p = sub.add_parser("fit", help="Fit an XY data file")
    fit_p.add_argument("datafile", help="Two-column '<X> <Y>' data file")
    fit_p.add_argument(
        "-c",
        "--ceiling",
        type=float,
        help="Y value to project the trend up to.",
    )
    fit_p.add_argument(
        "-s",
        "--shape",
        action="append",
        choices=available_shapes(),
        help="Shape to try; repeat for several (default: all, in order).",
    )
    fit_p.add_argument(
        "-o",
        "--output",
        help="Write the JSON result to this file instead of stdout.",
    )
    fit_p.add_argument(
        "--format",
        choices=("json", "table"),
        default="json",
        help="Output format for stdout (default: json).",
    )

    solver_group = fit_p.add_argument_group("Solver Options")
    solver_group.add_argument(
        "--solver",
        metavar="PATH",
        help="cfityk executable (default: cfityk on PATH).",
    )
    solver_group.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Timeout for each solver run (default: 60).",
    )
    solver_group.add_argument(
        "--max-points",
        type=int,
        metavar="N",
        help="Give up projecting to the ceiling after N points (default: 100,000).",
    )

    debug_group = fit_p.add_argument_group("Debug Options")
    debug_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode, logging every solver output line.",
    )
    debug_group.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while fitting shapes.",
    )
    debug_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the configuration without running the solver.",
    )
    debug_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write the log file into the directory of PATH.",
    )

    append_p = sub.add_parser("append", help="Append one point to an XY data file")
    append_p.add_argument("datafile", help="Two-column '<X> <Y>' data file")
    append_p.add_argument("x", help="X value")
    append_p.add_argument("y", help="Y value")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the curvefit CLI."""
    args = build_parser().parse_args(argv)

    if args.cmd == "append":
        try:
            append_xy_file(args.datafile, args.x, args.y)
        except CurveFitError as e:
            logging.error("Append failed: %s", e)
            sys.exit(1)
        sys.exit(0)

    if args.cmd != "fit":
        logging.error("Unknown command: %s", args.cmd)
        sys.exit(2)

    try:
        settings = configure_from_cli(args)
        set_settings(settings)

        log_level = "DEBUG" if settings.debug_mode else "WARNING"
        logger, summary_logger = setup_logging(
            log_dir=str(settings.logging.file_path.parent)
            if settings.logging.file_path
            else str(default_log_dir()),
            console=settings.logging.console_output,
            level=log_level,
        )

        if settings.debug_mode:
            logger.debug("Configuration details:")
            for section, values in settings.to_dict().items():
                logger.debug("  %s: %s", section, values)

        if settings.dry_run:
            _print_dry_run_summary(settings)
            sys.exit(0)

        data = load_xy_file(settings.input_file)
        result = fit(data, ceiling=settings.ceiling, settings=settings)

        if settings.output_path:
            write_result_json(result, settings.output_path)
            summary_logger.info("Result written to %s", settings.output_path)
        elif args.format == "table":
            _print_table(result)
        else:
            print(write_result_json(result))

        sys.exit(0)

    except ConfigurationError as e:
        logging.error("Configuration error: %s", e.message)
        if getattr(e, "suggestions", None):
            logging.error("Suggestions:")
            for suggestion in e.suggestions:
                logging.error("  - %s", suggestion)
        sys.exit(1)

    except KeyboardInterrupt:
        logging.info("Fit interrupted by user")
        sys.exit(130)

    except CurveFitError as e:
        logging.error("Fit failed: %s", e)
        if has_settings() and get_settings().debug_mode:
            logging.exception("Full traceback:")
        sys.exit(1)


def _print_table(result) -> None:
    """Print the projected series as aligned columns."""
    print(f"# guess: {result.guess}  r_squared: {result.r_squared}")
    print(f"{'x':>10} {'trend':>14} {'top':>14} {'bottom':>14} {'ceiling':>14}")
    for label, y, top, bottom, ceiling in result_rows(result):
        ceiling_text = "" if ceiling is None else f"{ceiling:14.4f}"
        print(f"{str(label):>10} {y:14.4f} {top:14.4f} {bottom:14.4f} {ceiling_text:>14}")


def _print_dry_run_summary(settings) -> None:
    """Print a summary for dry run mode."""
    print("\n" + "=" * 60)
    print("DRY RUN SUMMARY")
    print("=" * 60)
    print(f"Data file:          {settings.input_file}")
    print(f"Shapes:             {', '.join(settings.fit.shapes)}")
    print(f"Ceiling:            {settings.ceiling if settings.ceiling is not None else 'None'}")
    print(f"Solver:             {settings.solver.executable}")
    print(f"Solver timeout:     {settings.solver.timeout_seconds}s")
    available = FitykSolver.from_settings(settings.solver).is_available()
    print(f"Solver available:   {'yes' if available else 'no'}")
    print(f"Max points:         {settings.projection.max_points:,}")
    print(f"Output:             {settings.output_path or 'stdout'}")
    print("=" * 60)
    print()


if __name__ == "__main__":
    main()
