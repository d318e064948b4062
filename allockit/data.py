from dataclasses import dataclass
import pandas as pd
from typing import Optional, List, Union, TYPE_CHECKING

from .item import AllocatableItem

if TYPE_CHECKING:
    from .allocators import Allocator


@dataclass
class ItemData:
    """Tabular source of allocatable items.

    Supports a single DataFrame or a list of DataFrames (e.g. one per
    scenario). Item-building methods use the first DataFrame; use
    get_dataset() to reach the others.

    Values pass through the item setters, so invalid cells (NaN, negative
    capacity, ...) leave the item's field at its default of 0.

    Examples:
        # Single table
        data = ItemData(df, capacity_col='hours', payoff_col='revenue')
        items = data.to_items()

        # One table per scenario
        data = ItemData(df=[df_low, df_high], name_col='task')
        high = data.get_dataset(1).to_items()
    """
    df: Union[pd.DataFrame, List[pd.DataFrame]]
    capacity_col: str = 'capacity'
    payoff_col: str = 'payoff'
    capacity_risk_col: Optional[str] = None
    payoff_risk_col: Optional[str] = None
    name_col: Optional[str] = None
    id_col: Optional[str] = None

    def __post_init__(self) -> None:
        # Normalize to list internally
        if isinstance(self.df, pd.DataFrame):
            self._dfs = [self.df]
        else:
            self._dfs = list(self.df)

        if len(self._dfs) == 0:
            raise ValueError("Must provide at least one DataFrame")

        required = [self.capacity_col, self.payoff_col]
        optional = [
            self.capacity_risk_col, self.payoff_risk_col, self.name_col, self.id_col
        ]
        columns = required + [col for col in optional if col is not None]

        for i, df in enumerate(self._dfs):
            if not isinstance(df, pd.DataFrame):
                raise TypeError(f"df[{i}] must be a pandas DataFrame")

            if df.empty:
                raise ValueError(f"DataFrame {i} cannot be empty")

            missing = [col for col in columns if col not in df.columns]
            if missing:
                raise ValueError(f"Columns not found in DataFrame {i}: {missing}")

    @property
    def n_datasets(self) -> int:
        """Number of datasets."""
        return len(self._dfs)

    @property
    def n(self) -> int:
        """Number of rows in first dataset."""
        return len(self._dfs[0])

    def get_dataset(self, index: int = 0) -> 'ItemData':
        """Get a single-dataset ItemData for dataset at index."""
        return ItemData(
            df=self._dfs[index],
            capacity_col=self.capacity_col,
            payoff_col=self.payoff_col,
            capacity_risk_col=self.capacity_risk_col,
            payoff_risk_col=self.payoff_risk_col,
            name_col=self.name_col,
            id_col=self.id_col,
        )

    def to_items(self) -> List[AllocatableItem]:
        """Build one item per row of the first DataFrame, in row order."""
        items = []
        for row in self._dfs[0].to_dict('records'):
            item = AllocatableItem(
                capacity=row[self.capacity_col],
                payoff=row[self.payoff_col],
            )
            if self.capacity_risk_col is not None:
                item.capacity_risk = row[self.capacity_risk_col]
            if self.payoff_risk_col is not None:
                item.payoff_risk = row[self.payoff_risk_col]
            if self.name_col is not None:
                item.name = str(row[self.name_col])
            if self.id_col is not None:
                item.id = int(row[self.id_col])
            items.append(item)
        return items

    def populate(self, allocator: 'Allocator') -> List[AllocatableItem]:
        """Build items and add them to an allocator.

        Args:
            allocator: Allocator to receive the items

        Returns:
            The items added, in row order
        """
        items = self.to_items()
        for item in items:
            allocator.add_item(item)
        return items
