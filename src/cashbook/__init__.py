from cashbook.domain.reconcile import reconcile

__all__ = ["reconcile"]


# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from cashbook.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
