"""
Base class for the projection engines.

Each engine is a distinct strategy producing a stream of MonthlyRecord; the
generic and reference engines share this interface but not their formulas.
"""

from typing import List, Optional

import pandas as pd

from apolo_calc.core.models.records import MonthlyRecord, records_to_dataframe
from apolo_calc.utils.date_utils import DateInput
from apolo_calc.utils.error_utils import error_handler


class ProjectionEngine:
    """
    Base class for all projection engines.

    Attributes:
        name: Short engine identifier used in logs and reports
        start_date: Optional calendar month of month index 0
    """

    name = "base"

    def __init__(self, start_date: Optional[DateInput] = None):
        self.start_date = start_date

    @error_handler
    def get_projection(self) -> List[MonthlyRecord]:
        """
        Run the projection.

        Must be implemented by subclasses.

        Returns:
            List of MonthlyRecord, one per month, dense month indexes
        """
        raise NotImplementedError("Subclasses must implement get_projection()")

    @error_handler
    def to_dataframe(self) -> pd.DataFrame:
        """Projection as a DataFrame, one row per month."""
        return records_to_dataframe(self.get_projection())
