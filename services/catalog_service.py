"""
Catalog Service

Tabular views of the loaded catalog for the command line tools.
"""

import pandas as pd

from domain.models import MissionCatalog


def missions_frame(catalog: MissionCatalog) -> pd.DataFrame:
    """
    One row per mission in display order.

    Columns: id, mission, launch_date (ISO string or empty), crew_size,
    commander (first crew role's astronaut name, if resolvable).
    """
    rows = []
    for mission in catalog.missions:
        first = mission.crew[0] if mission.crew else None
        commander = catalog.astronauts.get(first.name) if first is not None else None
        rows.append({
            "id": mission.id,
            "mission": mission.display_name,
            "launch_date": mission.launch_date.isoformat() if mission.launch_date else "",
            "crew_size": len(mission.crew),
            "commander": commander.name if commander is not None else "",
        })
    return pd.DataFrame(rows, columns=["id", "mission", "launch_date", "crew_size", "commander"])


def astronaut_flights(catalog: MissionCatalog) -> pd.DataFrame:
    """
    Number of missions each astronaut is crewed on, most flights first.

    Astronauts with no mission in the catalog are listed with 0.
    """
    counts = {astronaut_id: 0 for astronaut_id in catalog.astronauts}
    for mission in catalog.missions:
        for member in mission.crew:
            if member.name in counts:
                counts[member.name] += 1
    df = pd.DataFrame({
        "id": list(counts.keys()),
        "name": [catalog.astronauts[a].name for a in counts],
        "missions": list(counts.values()),
    })
    return df.sort_values(["missions", "id"], ascending=[False, True]).reset_index(drop=True)
