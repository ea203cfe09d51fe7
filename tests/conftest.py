from __future__ import annotations

import numpy as np
import pandas as pd
import pytest


def build_cricket_df(n_matches: int = 2) -> pd.DataFrame:
    """
    Small ball-by-over cricket table: one row per over, 20 overs per inning,
    2 innings per match, indexed by a declared ``data_index`` (1, 2, ...).
    """
    n = 40 * n_matches
    data_index = np.arange(1, n + 1)
    return pd.DataFrame(
        {
            "data_index": data_index,
            "match_id": (data_index - 1) // 40 + 1,
            "inning": (data_index - 1) // 20 % 2 + 1,
            "over": (data_index - 1) % 20 + 1,
            "batting_team": np.where((data_index - 1) // 20 % 2 == 0, "Mumbai Indians", "Chennai Super Kings"),
            "runs_per_over": (data_index * 7) % 13,
        }
    ).set_index("data_index")


@pytest.fixture
def cricket_df() -> pd.DataFrame:
    # Built fresh per test so no test can leak mutations into another.
    return build_cricket_df()
