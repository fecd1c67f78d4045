"""Insight data package: the structured business data sent for AI analysis.

Field classes:
- identity: person, project and company names (pseudonymized)
- opaque id: database ids (blanked)
- measurement: numbers and dates (passed through unchanged)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Company:
    id: str
    name: str
    currency: str = ""


@dataclass(frozen=True)
class TeamMember:
    id: str
    name: str
    weekly_target: float = 0.0
    vacation_days: float = 0.0
    avg_hours_last_4_weeks: float = 0.0
    utilization_percent: float = 0.0
    total_hours_last_30_days: float = 0.0


@dataclass(frozen=True)
class Team:
    members: list[TeamMember] = field(default_factory=list)
    total_capacity_hours_weekly: float = 0.0


@dataclass(frozen=True)
class WeeklyUserHours:
    user_id: str
    user_name: str
    week_start: str
    hours: float = 0.0
    weekly_target: float = 0.0


@dataclass(frozen=True)
class OverworkedUser:
    name: str
    avg_hours: float = 0.0
    weeks_over_40: int = 0


@dataclass(frozen=True)
class UnderutilizedUser:
    name: str
    avg_utilization: float = 0.0


@dataclass(frozen=True)
class WeekendWorker:
    name: str
    weekend_days: int = 0


@dataclass(frozen=True)
class WorkloadMetrics:
    weekly_hours_by_user: list[WeeklyUserHours] = field(default_factory=list)
    users_overworked: list[OverworkedUser] = field(default_factory=list)
    users_underutilized: list[UnderutilizedUser] = field(default_factory=list)
    weekend_workers: list[WeekendWorker] = field(default_factory=list)


@dataclass(frozen=True)
class UpcomingVacation:
    user_name: str
    start_date: str
    end_date: str
    type: str = "vacation"
    business_days: int = 0


@dataclass(frozen=True)
class CapacityReduction:
    date: str
    available_percent: float = 100.0


@dataclass(frozen=True)
class Vacations:
    upcoming: list[UpcomingVacation] = field(default_factory=list)
    capacity_reductions: list[CapacityReduction] = field(default_factory=list)


@dataclass(frozen=True)
class ProjectMember:
    name: str
    hours: float = 0.0
    percent: float = 0.0


@dataclass(frozen=True)
class ProjectHealth:
    id: str
    name: str
    budget_hours: float | None = None
    hours_used: float = 0.0
    percent_used: float | None = None
    weekly_burn_rate: float = 0.0
    team_members: list[ProjectMember] = field(default_factory=list)


@dataclass(frozen=True)
class SinglePersonRisk:
    project_name: str
    user_name: str
    percent_of_work: float = 0.0


@dataclass(frozen=True)
class Projects:
    active: list[ProjectHealth] = field(default_factory=list)
    single_person_risks: list[SinglePersonRisk] = field(default_factory=list)


@dataclass(frozen=True)
class WeeklyBillable:
    week_start: str
    billable_percent: float = 0.0


@dataclass(frozen=True)
class EntryGap:
    name: str
    missed_days: int = 0


@dataclass(frozen=True)
class Productivity:
    billable_percent_by_week: list[WeeklyBillable] = field(default_factory=list)
    pending_approvals: int = 0
    users_with_entry_gaps: list[EntryGap] = field(default_factory=list)


@dataclass(frozen=True)
class ContractSummary:
    project_name: str
    max_hours: float | None = None
    max_budget: float | None = None
    deadline: str | None = None
    scope: str | None = None
    hours_used: float = 0.0


@dataclass(frozen=True)
class ResourceAllocation:
    user_name: str
    project_name: str
    start_date: str
    end_date: str
    hours_per_day: float = 0.0
    status: str = ""


@dataclass(frozen=True)
class CapacityForecast:
    date: str
    total_allocated_hours: float = 0.0
    total_capacity_hours: float = 0.0
    utilization_percent: float = 0.0
    overbooked_users: list[str] = field(default_factory=list)
    underbooked_users: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UnassignedUser:
    name: str
    weekly_target: float = 0.0
    available_hours: float = 0.0


@dataclass(frozen=True)
class UnderstaffedProject:
    project_name: str
    allocated_hours: float = 0.0
    estimated_need: float = 0.0


@dataclass(frozen=True)
class ResourcePlanning:
    allocations: list[ResourceAllocation] = field(default_factory=list)
    capacity_forecast: list[CapacityForecast] = field(default_factory=list)
    unassigned_users: list[UnassignedUser] = field(default_factory=list)
    understaffed_projects: list[UnderstaffedProject] = field(default_factory=list)


@dataclass(frozen=True)
class InsightDataPackage:
    """Everything the insight generator is allowed to see about a company."""

    company: Company
    team: Team = field(default_factory=Team)
    workload_metrics: WorkloadMetrics = field(default_factory=WorkloadMetrics)
    vacations: Vacations = field(default_factory=Vacations)
    projects: Projects = field(default_factory=Projects)
    productivity: Productivity = field(default_factory=Productivity)
    contracts: list[ContractSummary] = field(default_factory=list)
    resource_planning: ResourcePlanning = field(default_factory=ResourcePlanning)


@dataclass(frozen=True)
class GeneratedInsight:
    """One insight returned by the AI service (text fields carry pseudonyms)."""

    category: str
    title: str
    description: str
    suggestion: str | None = None
    related_hours: float | None = None
    related_amount: float | None = None
