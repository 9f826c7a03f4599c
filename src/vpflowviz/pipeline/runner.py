"""Batch pipeline runner.

Runs the vp stages in order, enforces the contract at each stage boundary,
and writes the flowviz CSV. Each stage returns a new DataFrame; nothing is
shared or mutated between stages and nothing but the output file (plus the
run log) outlives the run.
"""

import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

import pandas as pd

from vpflowviz.contracts import (
    assert_loaded,
    assert_binned,
    assert_aggregated,
    assert_no_empty_aggregates,
    assert_flowviz_output,
)
from vpflowviz.setup_directories import setup_output_directories, get_output_path
from vpflowviz.vp import (
    VpDataLoader,
    bin_measurements,
    filter_measurements,
    aggregate_measurements,
    drop_empty_aggregates,
    format_flowviz,
    write_flowviz,
)

__all__ = ['FlowvizPipeline', 'PipelineSummary']

logger = logging.getLogger(__name__)


@dataclass
class PipelineSummary:
    """Row counts and output location of one run."""
    project_name: str
    run_id: Optional[str]
    files_read: int
    measurements: int
    measurements_kept: int
    aggregates: int
    output_rows: int
    radars_in_output: list
    missing_radars: list
    unexpected_radars: list
    output_path: str

    def to_dict(self) -> dict:
        return asdict(self)


class FlowvizPipeline:
    """Runs the vp to flowviz transformation for one project.

    **Stages:**

    1. **Load**: read all vp files of the raw data directory
    2. **Bin**: hourly UTC time bins and altitude bands
    3. **Filter**: drop low-density and excluded measurements
    4. **Aggregate**: one row per radar, hour and band
    5. **Drop empty**: aggregates without any defined statistic
    6. **Export**: format and write ``<project>_flowviz.csv``

    **Logging:**

    Console and (if ``logging.log_to_file``) a log file at
    ``<processed_data_dir>/logs/flowviz_<project>.log``, at the level set by
    ``logging.level``.

    Example usage::

        from vpflowviz.schemas.initialization import init_runtime_config
        from vpflowviz.pipeline import FlowvizPipeline

        config = init_runtime_config("settings.json")
        summary = FlowvizPipeline(config).run()
        print(summary.output_path)
    """

    def __init__(self, config, configure_logging: bool = True):
        """Initialize the runner.

        Parameters
        ----------
        config : InternalConfig
            Fully validated runtime configuration.
        configure_logging : bool, optional
            Install console/file handlers on the root logger when the run
            starts (default True). Disable when embedding in an application
            that owns logging.
        """
        self.config = config
        self.configure_logging = configure_logging
        self.loader = VpDataLoader(config)
        self.output_dirs = None

    def _setup_logging(self):
        """Configure the root logger with console and file handlers."""
        log_level = getattr(logging, self.config.logging.level.upper(), logging.INFO)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root = logging.getLogger()
        root.setLevel(log_level)
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()

        ch = logging.StreamHandler()
        ch.setLevel(log_level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

        if self.config.logging.log_to_file:
            log_path = Path(self.output_dirs["logs"]) / f"flowviz_{self.config.project.name}.log"
            fh = logging.FileHandler(log_path)
            fh.setLevel(log_level)
            fh.setFormatter(formatter)
            root.addHandler(fh)
            logger.info("Logging: level=%s, file=%s", self.config.logging.level, log_path)

    def _report_radar_coverage(self, measurements: pd.DataFrame) -> tuple[list, list]:
        """Compare configured radars with the radars present in the data.

        Reporting only; the data is not changed.

        Returns
        -------
        tuple of list
            (configured radars without data, radars in the data that are
            not configured). Both empty when no radars are configured.
        """
        expected = list(self.config.project.radar_ids)
        found = sorted(measurements["radar_id"].dropna().astype(str).unique())

        if self.config.project.countries:
            logger.info("Countries: %s", ", ".join(self.config.project.countries))

        if not expected:
            logger.info("Radars in data: %d (no radar list configured)", len(found))
            return [], []

        missing = [r for r in expected if r not in found]
        unexpected = [r for r in found if r not in expected]

        logger.info("Radars in data: %d of %d configured", len(expected) - len(missing), len(expected))
        if missing:
            logger.warning("Configured radars without vp data: %s", ", ".join(missing))
        if unexpected:
            logger.warning("vp data for radars not in settings: %s", ", ".join(unexpected))
        return missing, unexpected

    def run(self) -> PipelineSummary:
        """Run all stages and write the output file.

        Returns
        -------
        PipelineSummary
            Row counts per stage and the output path.

        Raises
        ------
        InputParseError
            A vp file could not be parsed (nothing is written).
        OSError
            The output file could not be written.
        ContractViolation
            A stage broke its invariants (pipeline bug).
        """
        self.output_dirs = setup_output_directories(self.config.paths.processed_data_dir)
        if self.configure_logging:
            self._setup_logging()

        logger.info("=" * 60)
        logger.info("vp to flowviz: project %s", self.config.project.name)
        logger.info("=" * 60)

        files = self.loader.discover()
        measurements = self.loader.load_files(files)
        assert_loaded(measurements)
        missing, unexpected = self._report_radar_coverage(measurements)

        binned = bin_measurements(
            measurements,
            low_band_min=self.config.binning.low_band_min,
            high_band_min=self.config.binning.high_band_min,
        )
        assert_binned(binned)

        kept = filter_measurements(binned, min_density=self.config.filter.min_density)

        aggregates = aggregate_measurements(kept)
        assert_aggregated(aggregates)

        aggregates = drop_empty_aggregates(aggregates)
        assert_no_empty_aggregates(aggregates)

        output = format_flowviz(aggregates, utc_suffix=self.config.output.utc_suffix)
        assert_flowviz_output(output)

        output_path = get_output_path(self.output_dirs, self.config.output_filename)
        write_flowviz(output, output_path)

        summary = PipelineSummary(
            project_name=self.config.project.name,
            run_id=self.config.run_id,
            files_read=len(files),
            measurements=len(measurements),
            measurements_kept=len(kept),
            aggregates=len(aggregates),
            output_rows=len(output),
            radars_in_output=sorted(output["radar_id"].astype(str).unique()),
            missing_radars=missing,
            unexpected_radars=unexpected,
            output_path=str(output_path),
        )
        logger.info(
            "Run complete: %d files, %d measurements, %d kept, %d output rows",
            summary.files_read, summary.measurements, summary.measurements_kept, summary.output_rows,
        )
        return summary
