"""Builds an InsightDataPackage from the camelCase JSON of the data gatherer.

Identity fields must be strings; measurement fields are passed through as
given so numbers survive untouched. Missing sections default to empty.
"""

import re
from collections.abc import Callable
from dataclasses import asdict
from typing import Any, TypeVar

from privacy_relay.insights.exceptions import PackageValidationError
from privacy_relay.insights.models import (
    CapacityForecast,
    CapacityReduction,
    Company,
    ContractSummary,
    EntryGap,
    InsightDataPackage,
    OverworkedUser,
    Productivity,
    ProjectHealth,
    ProjectMember,
    Projects,
    ResourceAllocation,
    ResourcePlanning,
    SinglePersonRisk,
    Team,
    TeamMember,
    UnassignedUser,
    UnderstaffedProject,
    UnderutilizedUser,
    UpcomingVacation,
    Vacations,
    WeekendWorker,
    WeeklyBillable,
    WeeklyUserHours,
    WorkloadMetrics,
)

_CAMEL_BOUNDARY_RE = re.compile(r"_([a-z0-9])")

T = TypeVar("T")


def package_from_dict(data: dict[str, Any]) -> InsightDataPackage:
    """Validate a raw payload and build an InsightDataPackage.

    Raises:
        PackageValidationError: on any structural problem.
    """
    root = _object(data, "package")
    if "company" not in root:
        raise PackageValidationError("Missing required top-level field: company")

    team = _section(root, "team")
    workload = _section(root, "workloadMetrics")
    vacations = _section(root, "vacations")
    projects = _section(root, "projects")
    productivity = _section(root, "productivity")
    planning = _section(root, "resourcePlanning")

    return InsightDataPackage(
        company=_build_company(root["company"]),
        team=Team(
            members=_records(team, "members", "team", _build_team_member),
            total_capacity_hours_weekly=team.get("totalCapacityHoursWeekly", 0),
        ),
        workload_metrics=WorkloadMetrics(
            weekly_hours_by_user=_records(
                workload, "weeklyHoursByUser", "workloadMetrics", _build_weekly_hours
            ),
            users_overworked=_records(
                workload, "usersOverworked", "workloadMetrics", _build_overworked
            ),
            users_underutilized=_records(
                workload, "usersUnderutilized", "workloadMetrics", _build_underutilized
            ),
            weekend_workers=_records(
                workload, "weekendWorkers", "workloadMetrics", _build_weekend_worker
            ),
        ),
        vacations=Vacations(
            upcoming=_records(vacations, "upcoming", "vacations", _build_vacation),
            capacity_reductions=_records(
                vacations, "capacityReductions", "vacations", _build_capacity_reduction
            ),
        ),
        projects=Projects(
            active=_records(projects, "active", "projects", _build_project),
            single_person_risks=_records(
                projects, "singlePersonRisks", "projects", _build_single_person_risk
            ),
        ),
        productivity=Productivity(
            billable_percent_by_week=_records(
                productivity, "billablePercentByWeek", "productivity", _build_weekly_billable
            ),
            pending_approvals=productivity.get("pendingApprovals", 0),
            users_with_entry_gaps=_records(
                productivity, "usersWithEntryGaps", "productivity", _build_entry_gap
            ),
        ),
        contracts=_records(root, "contracts", "package", _build_contract),
        resource_planning=ResourcePlanning(
            allocations=_records(planning, "allocations", "resourcePlanning", _build_allocation),
            capacity_forecast=_records(
                planning, "capacityForecast", "resourcePlanning", _build_forecast
            ),
            unassigned_users=_records(
                planning, "unassignedUsers", "resourcePlanning", _build_unassigned_user
            ),
            understaffed_projects=_records(
                planning, "understaffedProjects", "resourcePlanning", _build_understaffed
            ),
        ),
    )


def package_to_dict(package: InsightDataPackage) -> dict[str, Any]:
    """Serialize a package back to the camelCase shape the AI prompt expects."""
    return _camelize(asdict(package))


# ------------------------------------------------------------------
# Structural helpers
# ------------------------------------------------------------------


def _object(raw: Any, path: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise PackageValidationError(f"'{path}' must be an object")
    return raw


def _section(root: dict[str, Any], key: str) -> dict[str, Any]:
    raw = root.get(key)
    if raw is None:
        return {}
    return _object(raw, key)


def _records(
    section: dict[str, Any],
    key: str,
    path: str,
    builder: Callable[[dict[str, Any], str], T],
) -> list[T]:
    raw = section.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise PackageValidationError(f"'{path}.{key}' must be a list")
    records: list[T] = []
    for i, item in enumerate(raw):
        item_path = f"{path}.{key}[{i}]"
        records.append(builder(_object(item, item_path), item_path))
    return records


def _str(raw: dict[str, Any], key: str, path: str) -> str:
    if key not in raw:
        raise PackageValidationError(f"Missing required field: {path}.{key}")
    value = raw[key]
    if not isinstance(value, str):
        raise PackageValidationError(f"'{path}.{key}' must be a string")
    return value


def _names(raw: dict[str, Any], key: str, path: str) -> list[str]:
    value = raw.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PackageValidationError(f"'{path}.{key}' must be a list of strings")
    return list(value)


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            _CAMEL_BOUNDARY_RE.sub(lambda m: m.group(1).upper(), k): _camelize(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_camelize(v) for v in value]
    return value


# ------------------------------------------------------------------
# Record builders
# ------------------------------------------------------------------


def _build_company(raw: Any) -> Company:
    d = _object(raw, "company")
    return Company(
        id=_str(d, "id", "company"),
        name=_str(d, "name", "company"),
        currency=d.get("currency", ""),
    )


def _build_team_member(d: dict[str, Any], path: str) -> TeamMember:
    return TeamMember(
        id=_str(d, "id", path),
        name=_str(d, "name", path),
        weekly_target=d.get("weeklyTarget", 0),
        vacation_days=d.get("vacationDays", 0),
        avg_hours_last_4_weeks=d.get("avgHoursLast4Weeks", 0),
        utilization_percent=d.get("utilizationPercent", 0),
        total_hours_last_30_days=d.get("totalHoursLast30Days", 0),
    )


def _build_weekly_hours(d: dict[str, Any], path: str) -> WeeklyUserHours:
    return WeeklyUserHours(
        user_id=_str(d, "userId", path),
        user_name=_str(d, "userName", path),
        week_start=_str(d, "weekStart", path),
        hours=d.get("hours", 0),
        weekly_target=d.get("weeklyTarget", 0),
    )


def _build_overworked(d: dict[str, Any], path: str) -> OverworkedUser:
    return OverworkedUser(
        name=_str(d, "name", path),
        avg_hours=d.get("avgHours", 0),
        weeks_over_40=d.get("weeksOver40", 0),
    )


def _build_underutilized(d: dict[str, Any], path: str) -> UnderutilizedUser:
    return UnderutilizedUser(name=_str(d, "name", path), avg_utilization=d.get("avgUtilization", 0))


def _build_weekend_worker(d: dict[str, Any], path: str) -> WeekendWorker:
    return WeekendWorker(name=_str(d, "name", path), weekend_days=d.get("weekendDays", 0))


def _build_vacation(d: dict[str, Any], path: str) -> UpcomingVacation:
    return UpcomingVacation(
        user_name=_str(d, "userName", path),
        start_date=_str(d, "startDate", path),
        end_date=_str(d, "endDate", path),
        type=d.get("type", "vacation"),
        business_days=d.get("businessDays", 0),
    )


def _build_capacity_reduction(d: dict[str, Any], path: str) -> CapacityReduction:
    return CapacityReduction(
        date=_str(d, "date", path), available_percent=d.get("availablePercent", 100)
    )


def _build_project(d: dict[str, Any], path: str) -> ProjectHealth:
    return ProjectHealth(
        id=_str(d, "id", path),
        name=_str(d, "name", path),
        budget_hours=d.get("budgetHours"),
        hours_used=d.get("hoursUsed", 0),
        percent_used=d.get("percentUsed"),
        weekly_burn_rate=d.get("weeklyBurnRate", 0),
        team_members=_records(d, "teamMembers", path, _build_project_member),
    )


def _build_project_member(d: dict[str, Any], path: str) -> ProjectMember:
    return ProjectMember(
        name=_str(d, "name", path), hours=d.get("hours", 0), percent=d.get("percent", 0)
    )


def _build_single_person_risk(d: dict[str, Any], path: str) -> SinglePersonRisk:
    return SinglePersonRisk(
        project_name=_str(d, "projectName", path),
        user_name=_str(d, "userName", path),
        percent_of_work=d.get("percentOfWork", 0),
    )


def _build_weekly_billable(d: dict[str, Any], path: str) -> WeeklyBillable:
    return WeeklyBillable(
        week_start=_str(d, "weekStart", path), billable_percent=d.get("billablePercent", 0)
    )


def _build_entry_gap(d: dict[str, Any], path: str) -> EntryGap:
    return EntryGap(name=_str(d, "name", path), missed_days=d.get("missedDays", 0))


def _build_contract(d: dict[str, Any], path: str) -> ContractSummary:
    scope = d.get("scope")
    if scope is not None and not isinstance(scope, str):
        raise PackageValidationError(f"'{path}.scope' must be a string or null")
    return ContractSummary(
        project_name=_str(d, "projectName", path),
        max_hours=d.get("maxHours"),
        max_budget=d.get("maxBudget"),
        deadline=d.get("deadline"),
        scope=scope,
        hours_used=d.get("hoursUsed", 0),
    )


def _build_allocation(d: dict[str, Any], path: str) -> ResourceAllocation:
    return ResourceAllocation(
        user_name=_str(d, "userName", path),
        project_name=_str(d, "projectName", path),
        start_date=_str(d, "startDate", path),
        end_date=_str(d, "endDate", path),
        hours_per_day=d.get("hoursPerDay", 0),
        status=d.get("status", ""),
    )


def _build_forecast(d: dict[str, Any], path: str) -> CapacityForecast:
    return CapacityForecast(
        date=_str(d, "date", path),
        total_allocated_hours=d.get("totalAllocatedHours", 0),
        total_capacity_hours=d.get("totalCapacityHours", 0),
        utilization_percent=d.get("utilizationPercent", 0),
        overbooked_users=_names(d, "overbookedUsers", path),
        underbooked_users=_names(d, "underbookedUsers", path),
    )


def _build_unassigned_user(d: dict[str, Any], path: str) -> UnassignedUser:
    return UnassignedUser(
        name=_str(d, "name", path),
        weekly_target=d.get("weeklyTarget", 0),
        available_hours=d.get("availableHours", 0),
    )


def _build_understaffed(d: dict[str, Any], path: str) -> UnderstaffedProject:
    return UnderstaffedProject(
        project_name=_str(d, "projectName", path),
        allocated_hours=d.get("allocatedHours", 0),
        estimated_need=d.get("estimatedNeed", 0),
    )
