from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from formkit.domain.fields import InputKind


class RangeRule(BaseModel):
    min: int
    max: int

    @model_validator(mode="after")
    def check_bounds(self) -> "RangeRule":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class TextFieldRules(BaseModel):
    kind: Literal["text"] = "text"
    label: str
    input_kind: InputKind = InputKind.STRING

class NameFieldRules(TextFieldRules):
    length: RangeRule = Field(default_factory=lambda: RangeRule(min=0, max=10))

class AgeFieldRules(TextFieldRules):
    input_kind: InputKind = InputKind.INTEGER
    range: RangeRule = Field(default_factory=lambda: RangeRule(min=0, max=99))
    range_message: str = "Age should be from {min} to {max}"

class SelectionFieldRules(BaseModel):
    kind: Literal["selection"] = "selection"
    label: str
    options: list[str]
    placeholder: str | None = None

class PersonFormRules(BaseModel):
    name: NameFieldRules = Field(default_factory=lambda: NameFieldRules(label="Name"))
    age: AgeFieldRules = Field(default_factory=lambda: AgeFieldRules(label="Age"))
    gender: SelectionFieldRules = Field(
        default_factory=lambda: SelectionFieldRules(
            label="Gender",
            options=["Male", "Female"],
            placeholder="Select Gender",
        )
    )

class ViewRules(BaseModel):
    needs_validation: bool = True

class ProjectRules(BaseModel):
    slug: str = "formkit"
    rules_version: str = "1"

class Rules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    person_form: PersonFormRules = Field(default_factory=PersonFormRules)
    view: ViewRules = Field(default_factory=ViewRules)

    model_config = ConfigDict(extra="forbid")
