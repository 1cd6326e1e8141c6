"""
Core components: models, rule parsing, the rule engine and validators.
"""
