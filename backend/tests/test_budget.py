from layout_planner.core.budget import BudgetAccountant


def test_can_afford_up_to_budget():
    budget = BudgetAccountant(1000)
    budget.commit(700)

    assert budget.can_afford(300)
    assert not budget.can_afford(301)


def test_commit_accumulates_and_remaining_floors_at_zero():
    budget = BudgetAccountant(500)
    budget.commit(300)
    assert budget.spent == 300
    assert budget.remaining == 200

    budget.commit(400)
    assert budget.spent == 700
    assert budget.remaining == 0


def test_zero_budget_only_affords_free_items():
    budget = BudgetAccountant(0)
    assert budget.can_afford(0)
    assert not budget.can_afford(1)
