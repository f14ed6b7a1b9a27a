"""Customer title conditions: by gender category or by raw title id."""

from typing import TYPE_CHECKING, Any

from gender_condition.conditions.base import (
    ConditionLabels,
    TitleCondition,
    TitlePolicy,
)
from gender_condition.customer import TITLE_MR

if TYPE_CHECKING:
    from gender_condition.customer import Customer, CustomerFacade
    from gender_condition.i18n import Translator

GENDER_MAN = "man"
GENDER_WOMAN = "woman"
GENDERS = (GENDER_MAN, GENDER_WOMAN)

MATCH_FOR_GENDER_SERVICE_ID = "thelia.condition.match_for_gender"
MATCH_FOR_TITLE_SERVICE_ID = "thelia.condition.match_for_title"

GENDER_INPUT = "gender"
TITLE_INPUT = "title"


def title_to_gender(title_id: Any) -> str:
    """
    Map a title id to a gender category.

    1 (Mr) is a man. 2 (Mrs), 3 (Miss) and any unknown id count as a woman.
    """
    return GENDER_MAN if title_id == TITLE_MR else GENDER_WOMAN


def customer_gender(customer: "Customer") -> str:
    return title_to_gender(customer.get_title_id())


def customer_title_id(customer: "Customer") -> int | None:
    """Raw title id. A customer without a title gives None, which matches no id."""
    title_id = customer.get_title_id()
    return None if title_id is None else int(title_id)


def validate_gender(value: Any) -> str:
    """Accept exactly ``"man"`` or ``"woman"``."""
    if not isinstance(value, str) or value not in GENDERS:
        raise ValueError(f"Gender must be one of {GENDERS}, got {value!r}")
    return value


def validate_title_id(value: Any) -> int:
    """Accept a positive integer, or a string of ASCII digits holding one."""
    if isinstance(value, bool):
        raise ValueError("Title id cannot be a boolean")
    if isinstance(value, int):
        title_id = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdecimal()):
            raise ValueError(f"Title id must be a positive integer, got {value!r}")
        title_id = int(text)
    if title_id <= 0:
        raise ValueError(f"Title id must be positive, got {title_id}")
    return title_id


_GENDER_INPUTS_HTML = """
                <div id="condition-add-operators-values" class="form-group col-md-6">
                    <input type="hidden" id="{input}-operator" name="{input}[operator]" value="==" />
                    <div class="row radio">
                        <div class="input-group col-lg-10">
                            <label>
                                <input type="radio" name="{input}[value]" value="{woman}" {checked_woman}>
                                {label_woman}
                            </label>
                        </div>
                    </div>
                    <div class="row radio">
                        <div class="input-group col-lg-10">
                            <label>
                                <input type="radio" name="{input}[value]" value="{man}" {checked_man}>
                                {label_man}
                            </label>
                        </div>
                    </div>
                </div>
            """

_TITLE_INPUTS_HTML = """
                <div id="condition-add-operators-values" class="form-group col-md-6">
                    <input type="hidden" id="{input}-operator" name="{input}[operator]" value="==" />
                    <div class="row">
                        <div class="input-group col-lg-10">
                            <label for="{input}-value">{label}</label>
                            <input type="number" min="1" class="form-control" id="{input}-value" name="{input}[value]" value="{value}">
                        </div>
                    </div>
                </div>
            """


def draw_gender_inputs(condition: TitleCondition) -> str:
    """Two radio inputs, the one matching the stored gender checked."""
    checked_man = checked_woman = ""
    if condition.value == GENDER_WOMAN:
        checked_woman = "checked"
    elif condition.value == GENDER_MAN:
        checked_man = "checked"

    return _GENDER_INPUTS_HTML.format(
        input=condition.input_name,
        man=GENDER_MAN,
        woman=GENDER_WOMAN,
        checked_man=checked_man,
        checked_woman=checked_woman,
        label_man=condition.trans("Available only if a Customer is a man"),
        label_woman=condition.trans("Available only if a Customer is a woman"),
    )


def draw_title_inputs(condition: TitleCondition) -> str:
    value = "" if condition.value is None else condition.value
    return _TITLE_INPUTS_HTML.format(
        input=condition.input_name,
        label=condition.trans("Customer title id"),
        value=value,
    )


MATCH_FOR_GENDER = TitlePolicy(
    name="MatchForGender",
    service_id=MATCH_FOR_GENDER_SERVICE_ID,
    input_name=GENDER_INPUT,
    extract=customer_gender,
    validate_value=validate_gender,
    labels=ConditionLabels(
        name="By Customer gender",
        tool_tip="If customer is a man or a woman",
        summary="If customer <strong>is a %gender%</strong>",
        summary_placeholder="%gender%",
    ),
    draw=draw_gender_inputs,
)

MATCH_FOR_TITLE = TitlePolicy(
    name="MatchForTitle",
    service_id=MATCH_FOR_TITLE_SERVICE_ID,
    input_name=TITLE_INPUT,
    extract=customer_title_id,
    validate_value=validate_title_id,
    labels=ConditionLabels(
        name="By Customer title",
        tool_tip="If customer title matches a given title id",
        summary="If customer <strong>title id is %title%</strong>",
        summary_placeholder="%title%",
    ),
    draw=draw_title_inputs,
)


def match_for_gender(facade: "CustomerFacade", translator: "Translator") -> TitleCondition:
    """Condition matching customers of a gender (man or woman)."""
    return TitleCondition(MATCH_FOR_GENDER, facade, translator)


def match_for_title(facade: "CustomerFacade", translator: "Translator") -> TitleCondition:
    """Condition matching customers with a given title id."""
    return TitleCondition(MATCH_FOR_TITLE, facade, translator)
