"""Registry of special forms for the Sprout grower.

Maps names to handlers that receive the raw, ungrown tail of a form together
with the grow function, and decide themselves what to grow. The grower
consults this table after the primitives and before the macro registry.
"""

from sprout.growth.special_forms.fn_form import fn_form
from sprout.growth.special_forms.defmacro_form import defmacro_form
from sprout.growth.special_forms.method_call_form import method_call_form
from sprout.growth.special_forms.quote_form import quote_form
from sprout.growth.special_forms.symbol_form import symbol_form

SPECIAL_FORMS = {
    "fn": fn_form,
    "defmacro": defmacro_form,
    ".": method_call_form,
    "quote": quote_form,
    "symbol": symbol_form,
}
