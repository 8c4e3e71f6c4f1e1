"""Visual test generation use-case service."""

from __future__ import annotations

import logging

from ui_test_gen.csv_ingestion import parse_csv_table
from ui_test_gen.environment_table import build_environments
from ui_test_gen.feature_detection import detect_features
from ui_test_gen.locator_mapping import build_locator_groups
from ui_test_gen.template_composition import compose, select_representative_rows

from .generation_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)


def execute_visual_test_generation(request: GenerationRequest) -> GenerationOutcome:
    """Run parse, detect, build and compose for one raw CSV input.

    Every entity is created here and discarded with the outcome; nothing is
    shared between calls.
    """
    settings = request.settings
    table = parse_csv_table(request.csv_data, split_mode=settings.csv.split_mode)
    flags = detect_features(table)
    environments = build_environments(table) if flags.has_test_env else ()
    locator_groups = build_locator_groups(table)
    representative_rows = select_representative_rows(
        table, settings.composition.representative_rows
    )
    composition = compose(
        table,
        flags,
        environments,
        locator_groups,
        representative_rows=representative_rows,
        settings=settings,
    )
    logger.info(
        "Generated visual test instructions for %d row(s) in %d file group(s).",
        len(table.rows),
        len(locator_groups),
    )
    return GenerationOutcome(
        text=composition.text,
        table=table,
        flags=flags,
        environments=environments,
        locator_groups=locator_groups,
        included_fragments=composition.included_fragments,
    )
