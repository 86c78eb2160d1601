from pydantic import BaseModel
from typing import Dict, List, Literal

Urgency = Literal["missed", "urgent", "upcoming", "future"]


class DeadlineItem(BaseModel):
    """A tracked scholarship deadline, as shown in the deadline tracker."""
    matchId: str
    scholarshipId: str
    title: str
    organization: str
    deadline: str
    daysLeft: int
    urgency: Urgency
    status: str


class DashboardResponse(BaseModel):
    profileId: str
    totalMatches: int
    averageScore: float
    statusCounts: Dict[str, int]
    totalPotentialAmount: int
    deadlinesThisMonth: int
    deadlines: List[DeadlineItem]
