# Core type aliases for Theta's data model.
# Syntax trees (theta.types.nodes), types (theta.types.type_assignment) and
# run-time values (theta.types.values) are all immutable Python objects.
# The same SymbolTable class is instantiated with Types while checking and
# with Values while evaluating.
#
# Naming guidance:
# - Name:        identifiers, record field labels and variant tags.
# - EvaluatorFn: the recursive evaluator handed to per-node evaluation forms.

from typing import Any, Callable

__version__ = "0.3.0"

# Identifiers, field labels and tags are plain strings
Name = str

# Evaluator function type: (node, table) -> Value, used inside evaluation forms
EvaluatorFn = Callable[..., Any]
