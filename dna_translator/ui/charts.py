import altair as alt
import pandas as pd

from ..constants.constants import *
from ..models.bio_models import HydrophobicityPoint


def hydrophobicity_chart(points: list[HydrophobicityPoint]) -> alt.Chart:
    # y axis stays on the full Kyte-Doolittle range so plots are comparable
    hydro_df = pd.DataFrame(
        {
            "Amino Acid Position": [point.position for point in points],
            "Hydrophobicity": [point.hydrophobicity for point in points],
        }
    )
    return (
        alt.Chart(hydro_df)
        .mark_line(point=True)
        .encode(
            x=alt.X("Amino Acid Position:Q"),
            y=alt.Y(
                "Hydrophobicity:Q",
                scale=alt.Scale(domain=[HYDROPHOBICITY_AXIS_MIN, HYDROPHOBICITY_AXIS_MAX]),
            ),
            tooltip=["Amino Acid Position", "Hydrophobicity"],
        )
    )
