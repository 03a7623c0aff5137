"""
Typed request and response shapes for the feedback tracker backend.

These models mirror the entities owned by the backend service. The client
never creates or mutates them locally; it only validates what the backend
returns and serializes what the UI sends.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


Role = Literal["manager", "employee"]
Sentiment = Literal["positive", "neutral", "negative"]


class User(BaseModel):
    """A backend user account. Managers are users whose role is 'manager'."""
    id: int
    username: str
    email: Optional[str] = None
    role: Role
    manager_id: Optional[int] = Field(
        default=None,
        description="Id of the managing user, for employees"
    )
    is_active: bool = True
    created_at: str = ""
    updated_at: str = ""

    @property
    def is_manager(self) -> bool:
        return self.role == "manager"


class Feedback(BaseModel):
    """A single feedback entry written by a manager for an employee."""
    id: int
    employee_id: int
    manager_id: int
    strengths: str
    areas_to_improve: str
    sentiment: Sentiment
    is_acknowledged: bool = False
    created_at: str = ""
    updated_at: str = ""


class FeedbackWithDetails(Feedback):
    """Feedback joined with the display names of both parties."""
    employee_name: str = ""
    manager_name: str = ""


class DashboardStats(BaseModel):
    """Aggregate counts computed by the backend for the requesting user's role."""
    total_feedback: int = 0
    positive_feedback: int = 0
    neutral_feedback: int = 0
    negative_feedback: int = 0
    acknowledged_feedback: int = 0
    team_size: Optional[int] = None
    active_team_size: Optional[int] = None

    @property
    def acknowledgment_rate(self) -> int:
        """Acknowledged share of all feedback as a whole percentage."""
        if self.total_feedback <= 0:
            return 0
        # Halves round up
        return int(self.acknowledged_feedback * 100 / self.total_feedback + 0.5)

    @property
    def inactive_team_size(self) -> int:
        return (self.team_size or 0) - (self.active_team_size or 0)


class LoginData(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class CreateUserData(BaseModel):
    username: str
    email: str
    password: str
    role: Literal["employee"] = "employee"


class UpdateUserData(BaseModel):
    """Partial user update; unset fields are left out of the request body."""
    username: Optional[str] = None
    email: Optional[str] = None
    manager_id: Optional[int] = None


class CreateFeedbackData(BaseModel):
    employee_id: int
    strengths: str
    areas_to_improve: str
    sentiment: Sentiment


class UpdateFeedbackData(BaseModel):
    """Partial feedback update; unset fields are left out of the request body."""
    strengths: Optional[str] = None
    areas_to_improve: Optional[str] = None
    sentiment: Optional[Sentiment] = None


def users_from_json(items: List[dict]) -> List[User]:
    return [User.model_validate(item) for item in items or []]


def feedback_from_json(items: List[dict]) -> List[FeedbackWithDetails]:
    return [FeedbackWithDetails.model_validate(item) for item in items or []]
