"""
Route Pipeline — end-to-end climate load analysis for one route.

    samples -> aggregate_by_day -> ClimateResolver.resolve -> derive_all

`reanalyze` re-derives results for new material properties from climate
records already resolved; it never contacts the provider.
"""

import logging

from climate_types import AnalysisResult, ClimateRecord
from data_fetch.climate_resolver import ClimateResolver
from data_fetch.route_ingest import IngestionError, load_route
from features.daily_aggregation import aggregate_by_day
from models.surface_stress_model import derive_all

logger = logging.getLogger(__name__)


def run(samples, properties, resolver: ClimateResolver | None = None) -> list[AnalysisResult]:
    """
    Args:
        samples: PositionSamples already validated by ingestion
        properties: SurfaceProperties
        resolver: ClimateResolver to use; a default one is built if omitted

    Raises:
        IngestionError if there are no samples.
    """
    samples = list(samples)
    if not samples:
        raise IngestionError("No valid GPS data found in the file.")

    daily_points = aggregate_by_day(samples)
    logger.info(f"Aggregated {len(samples)} samples into {len(daily_points)} daily points")

    owns_resolver = resolver is None
    if owns_resolver:
        resolver = ClimateResolver()
    try:
        records = resolver.resolve(daily_points)
    finally:
        if owns_resolver:
            resolver.close()

    return derive_all(records, properties)


def reanalyze(existing_records, new_properties) -> list[AnalysisResult]:
    """Re-derive results for new material properties from existing records."""
    return derive_all(existing_records, new_properties)


def climate_records_of(results) -> list[ClimateRecord]:
    return [r.raw_climate_data for r in results]


def analyze_route_file(path, config, resolver: ClimateResolver | None = None) -> list[AnalysisResult]:
    """Load a CSV/JSON route file and run it under `config.surface_properties`."""
    samples = load_route(path)
    return run(samples, config.surface_properties, resolver=resolver)


if __name__ == "__main__":
    import sys

    from analysis.route_summary import summarize_route
    from config.settings import AnalysisConfig

    logging.basicConfig(level=logging.INFO)
    if len(sys.argv) < 2:
        print("usage: python -m analysis.route_pipeline ROUTE.csv|ROUTE.json")
        sys.exit(1)

    cfg = AnalysisConfig()
    results = analyze_route_file(sys.argv[1], cfg)
    for k, v in summarize_route(results).items():
        print(f"  {k}: {v}")
