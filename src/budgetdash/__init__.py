"""Budget projections: debt payoff, savings rate and goal timelines."""

__version__ = "0.1.0"


# Import main lazily
def __getattr__(name):
    if name == "main":
        from budgetdash.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
