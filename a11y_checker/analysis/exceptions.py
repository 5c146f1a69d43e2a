class RuleEngineError(Exception):
    """Raised when the rule engine cannot be loaded or returns an unusable result."""
