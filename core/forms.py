import datetime

from pydantic import BaseModel, Field, ValidationError

from core.errors import FormError
from core.models import Condition, EquipmentType, PlanType


class CaptainForm(BaseModel):
    name: str
    specialization: str
    experience: str


class MemberForm(BaseModel):
    name: str
    email: str
    join_date: datetime.date
    captain_id: str


class EquipmentForm(BaseModel):
    name: str
    type: EquipmentType
    quantity: int = Field(ge=1)
    condition: Condition = Condition.good


class WorkoutForm(BaseModel):
    member_id: str
    equipment_id: str
    date: datetime.date
    sets: int = Field(ge=1)
    reps: int = Field(ge=1)
    weight: float = Field(ge=0)
    duration: int = Field(ge=1)


class PaymentForm(BaseModel):
    member_id: str
    plan_type: PlanType
    amount: float = Field(ge=0)
    start_date: datetime.date


def field_label(field):
    name = field[:-3] if field.endswith("_id") else field
    return name.replace("_", " ").capitalize()


def validate_form(form_cls, form):
    """Validate submitted form fields into ``form_cls`` or raise FormError.

    Blank inputs count as missing so they report "<Field> is required" the
    same way an absent input does. Only the first problem per field is kept.
    """
    data = {}
    for key, value in form.items():
        value = value.strip()
        if value:
            data[key] = value

    try:
        return form_cls(**data)
    except ValidationError as exc:
        errors = {}
        for err in exc.errors():
            field = str(err["loc"][0])
            if err["type"] == "missing":
                message = f"{field_label(field)} is required"
            else:
                message = err["msg"]
            errors.setdefault(field, message)
        raise FormError(errors) from exc
