"""Dagster code location for royal-stats.

Binds the kings_api resource, which downloads the kings feed from the
published gist, to the assets found in the defs folder.
"""

from pathlib import Path

from dagster import Definitions, load_from_defs_folder

from royal_stats.defs.resources import KingsApi


def _load_definitions() -> Definitions:
    """Load the kings, monarchs and statistics assets and bind KingsApi to them."""
    loaded = load_from_defs_folder(path_within_project=Path(__file__).parent)

    return Definitions(
        assets=loaded.assets,
        asset_checks=loaded.asset_checks,
        schedules=loaded.schedules,
        sensors=loaded.sensors,
        jobs=loaded.jobs,
        resources={
            **(loaded.resources or {}),
            "kings_api": KingsApi(),
        },
    )


defs = _load_definitions()
