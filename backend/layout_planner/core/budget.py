"""
Budget Accountant

Running spend against a fixed budget for a single engine run.
"""


class BudgetAccountant:
    """
    Tracks the money committed to accepted placements.

    One instance per layout run; never shared between runs.
    """

    def __init__(self, budget: int):
        self.budget = budget
        self.spent = 0

    def can_afford(self, price: int) -> bool:
        """True if adding `price` keeps the spend within budget."""
        return self.spent + price <= self.budget

    def commit(self, price: int) -> None:
        """Record the price of an accepted placement."""
        self.spent += price

    @property
    def remaining(self) -> int:
        """Unspent budget, floored at zero."""
        return max(0, self.budget - self.spent)
