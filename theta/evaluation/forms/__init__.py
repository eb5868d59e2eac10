"""Registry of evaluation forms for the Theta evaluator.

Maps each syntax node class to the function that implements its evaluation
rule. The evaluator consults this table for every node it visits.
"""

from theta.types import nodes
from theta.evaluation.forms.literal_forms import literal_form, identifier_form
from theta.evaluation.forms.arithmetic_forms import arithmetic_form, is_zero_form
from theta.evaluation.forms.condition_form import condition_form
from theta.evaluation.forms.function_forms import abstraction_form, application_form, fixpoint_form
from theta.evaluation.forms.record_forms import record_form, projection_form
from theta.evaluation.forms.variant_forms import tagging_form, matching_form

NODE_FORMS = {
    nodes.Literal: literal_form,
    nodes.Identifier: identifier_form,
    nodes.Arithmetic: arithmetic_form,
    nodes.IsZero: is_zero_form,
    nodes.Condition: condition_form,
    nodes.Abstraction: abstraction_form,
    nodes.Application: application_form,
    nodes.Fixpoint: fixpoint_form,
    nodes.Record: record_form,
    nodes.Projection: projection_form,
    nodes.Tagging: tagging_form,
    nodes.Matching: matching_form,
}
