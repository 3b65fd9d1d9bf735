from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    title: str

class CostModelRules(BaseModel):
    weeks_per_year: float = Field(default=52, gt=0)
    hours_per_week: float = Field(default=40, gt=0)
    minutes_per_hour: float = Field(default=60, gt=0)
    default_duration_minutes: float = 60

class ValidationMessages(BaseModel):
    name_required: str = "Name is required"
    salary_required: str = "Salary is required"
    salary_not_number: str = "Salary must be a number"
    salary_negative: str = "Salary must be a positive number"
    salary_too_small: str = "Salary must be > 0"

class ValidationRules(BaseModel):
    min_salary: float = 1
    messages: ValidationMessages = Field(default_factory=ValidationMessages)

class DisplayRules(BaseModel):
    currency_code: str = "USD"
    currency_symbol: str = "$"

class Rules(BaseModel):
    project: ProjectRules
    cost_model: CostModelRules = Field(default_factory=CostModelRules)
    validation: ValidationRules = Field(default_factory=ValidationRules)
    display: DisplayRules = Field(default_factory=DisplayRules)


def default_rules() -> Rules:
    """Rules with every section at its built-in default."""
    return Rules(project=ProjectRules(slug="meeting-cost-calculator", title="Meeting Cost Calculator"))
