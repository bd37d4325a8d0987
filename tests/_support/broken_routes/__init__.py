"""A route package where one module fails to evaluate."""
