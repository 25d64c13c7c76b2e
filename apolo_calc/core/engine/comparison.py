"""
Cross-check between the generic and the reference engines.

The generic engine run with official_options() is expected to track the
reference engine closely but not exactly. This report lines the two up at
every year end so the divergence can be inspected.
"""

from typing import Any, Dict, Optional, Union

import numpy as np
import pandas as pd

from apolo_calc.core.constants import MONTHS_PER_YEAR
from apolo_calc.core.engine.generic_engine import GenericProjectionEngine
from apolo_calc.core.engine.reference_engine import ReferenceProjectionEngine
from apolo_calc.core.models.inputs import ProjectionInput, official_options
from apolo_calc.utils.date_utils import DateInput
from apolo_calc.utils.error_utils import error_handler, logger

COMPARISON_COLUMNS = ["year", "month", "generic_balance", "reference_balance", "difference", "difference_pct"]


@error_handler
def compare_engines(
    data: Union[ProjectionInput, Dict[str, Any]],
    start_date: Optional[DateInput] = None,
) -> pd.DataFrame:
    """
    Year-end balances of both engines side by side.

    Args:
        data: Projection input shared by both runs
        start_date: Optional calendar month of month 0

    Returns:
        DataFrame with columns year, month, generic_balance (exhibited),
        reference_balance (real or nominal per the input), difference and
        difference_pct (0 where the reference balance is 0)
    """
    data = ProjectionInput.from_dict(data)

    generic_df = GenericProjectionEngine(data, official_options(data), start_date).to_dataframe()
    reference_df = ReferenceProjectionEngine(data, start_date).to_dataframe()

    wealth_column = "real_balance" if data.fix_inflation else "balance_gross_nominal"

    generic_df = generic_df.loc[
        (generic_df["month"] > 0) & (generic_df["month"] % MONTHS_PER_YEAR == 0),
        ["month", "balance_exhibited"],
    ].rename(columns={"balance_exhibited": "generic_balance"})
    reference_df = reference_df.loc[
        reference_df["month"] % MONTHS_PER_YEAR == 0, ["month", wealth_column]
    ].rename(columns={wealth_column: "reference_balance"})

    if generic_df.empty or reference_df.empty:
        return pd.DataFrame(columns=COMPARISON_COLUMNS)

    df = generic_df.merge(reference_df, on="month", how="inner")

    df["month"] = df["month"].astype(int)
    df["year"] = df["month"] // MONTHS_PER_YEAR
    df["generic_balance"] = df["generic_balance"].astype(float)
    df["reference_balance"] = df["reference_balance"].astype(float)
    df["difference"] = df["generic_balance"] - df["reference_balance"]

    reference = df["reference_balance"].to_numpy()
    df["difference_pct"] = np.divide(
        df["difference"].to_numpy() * 100,
        reference,
        out=np.zeros(len(df)),
        where=reference != 0,
    )

    logger.debug(f"Engine comparison: max divergence {df['difference_pct'].abs().max():.4f}%")
    return df[COMPARISON_COLUMNS].reset_index(drop=True)
