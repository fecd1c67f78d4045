"""Pseudonymizes an insight data package before it leaves the system.

Processing flow:
1. Collect every distinct employee and project name from identity fields.
2. Allocate pseudonyms (sorted-name order, see pseudonyms.py).
3. Build a structural copy of the package field by field:
   a. identity fields -> pseudonyms
   b. opaque ids -> ""
   c. measurements -> unchanged
4. Substring-replace every known real identity in free text (contract
   scope), longest names first, in a single pass. "Novos" becomes
   "The Companys".
5. Return the copy together with the identity map needed to reverse it.
"""

from __future__ import annotations

from dataclasses import replace

from privacy_relay.anonymization.models import AnonymizationResult, IdentityMap
from privacy_relay.anonymization.pseudonyms import PseudonymAllocator
from privacy_relay.anonymization.replacer import PatternReplacer
from privacy_relay.insights.models import (
    CapacityForecast,
    Company,
    ContractSummary,
    InsightDataPackage,
    Productivity,
    ProjectHealth,
    Projects,
    ResourcePlanning,
    Team,
    Vacations,
    WorkloadMetrics,
)
from privacy_relay.logging.logger import Log

DEFAULT_COMPANY_PSEUDONYM = "The Company"


class _Substitution:
    """Name lookups for one anonymization call."""

    def __init__(self, identity_map: IdentityMap) -> None:
        self._employees = identity_map.employees
        self._projects = identity_map.projects
        self._text = PatternReplacer(identity_map.forward_table(), whole_words=False)

    def employee(self, name: str) -> str:
        return self._employees.get(name, name)

    def project(self, name: str) -> str:
        return self._projects.get(name, name)

    def free_text(self, text: str | None) -> str | None:
        if not text:
            return text
        return self._text.replace(text)


class DataAnonymizer:
    """Replaces real identities in an InsightDataPackage with pseudonyms.

    The input package is never modified; a full copy is returned.
    """

    def __init__(self, company_pseudonym: str = DEFAULT_COMPANY_PSEUDONYM) -> None:
        self._company_pseudonym = company_pseudonym
        self._employee_allocator = PseudonymAllocator.for_employees()
        self._project_allocator = PseudonymAllocator.for_projects()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize(self, package: InsightDataPackage) -> AnonymizationResult:
        """Return an anonymized copy of *package* and its identity map."""
        identity_map = self.build_identity_map(package)
        sub = _Substitution(identity_map)

        anonymized = InsightDataPackage(
            company=Company(id="", name=self._company_pseudonym, currency=package.company.currency),
            team=self._team(package.team, sub),
            workload_metrics=self._workload(package.workload_metrics, sub),
            vacations=self._vacations(package.vacations, sub),
            projects=self._projects(package.projects, sub),
            productivity=self._productivity(package.productivity, sub),
            contracts=[self._contract(c, sub) for c in package.contracts],
            resource_planning=self._resource_planning(package.resource_planning, sub),
        )

        Log.info(
            f"Anonymized insight data: {len(identity_map.employees)} employees, "
            f"{len(identity_map.projects)} projects"
        )
        return AnonymizationResult(anonymized_data=anonymized, identity_map=identity_map)

    def build_identity_map(self, package: InsightDataPackage) -> IdentityMap:
        return IdentityMap(
            employees=self._employee_allocator.allocate(collect_employee_names(package)),
            projects=self._project_allocator.allocate(collect_project_names(package)),
            company_name=package.company.name,
            company_pseudonym=self._company_pseudonym,
        )

    # ------------------------------------------------------------------
    # Section visitors
    # ------------------------------------------------------------------

    @staticmethod
    def _team(team: Team, sub: _Substitution) -> Team:
        return Team(
            members=[replace(m, id="", name=sub.employee(m.name)) for m in team.members],
            total_capacity_hours_weekly=team.total_capacity_hours_weekly,
        )

    @staticmethod
    def _workload(workload: WorkloadMetrics, sub: _Substitution) -> WorkloadMetrics:
        return WorkloadMetrics(
            weekly_hours_by_user=[
                replace(w, user_id="", user_name=sub.employee(w.user_name))
                for w in workload.weekly_hours_by_user
            ],
            users_overworked=[
                replace(o, name=sub.employee(o.name)) for o in workload.users_overworked
            ],
            users_underutilized=[
                replace(u, name=sub.employee(u.name)) for u in workload.users_underutilized
            ],
            weekend_workers=[
                replace(w, name=sub.employee(w.name)) for w in workload.weekend_workers
            ],
        )

    @staticmethod
    def _vacations(vacations: Vacations, sub: _Substitution) -> Vacations:
        return Vacations(
            upcoming=[replace(v, user_name=sub.employee(v.user_name)) for v in vacations.upcoming],
            capacity_reductions=[replace(r) for r in vacations.capacity_reductions],
        )

    @staticmethod
    def _projects(projects: Projects, sub: _Substitution) -> Projects:
        return Projects(
            active=[DataAnonymizer._project(p, sub) for p in projects.active],
            single_person_risks=[
                replace(
                    r,
                    project_name=sub.project(r.project_name),
                    user_name=sub.employee(r.user_name),
                )
                for r in projects.single_person_risks
            ],
        )

    @staticmethod
    def _project(project: ProjectHealth, sub: _Substitution) -> ProjectHealth:
        return replace(
            project,
            id="",
            name=sub.project(project.name),
            team_members=[replace(m, name=sub.employee(m.name)) for m in project.team_members],
        )

    @staticmethod
    def _productivity(productivity: Productivity, sub: _Substitution) -> Productivity:
        return Productivity(
            billable_percent_by_week=[replace(b) for b in productivity.billable_percent_by_week],
            pending_approvals=productivity.pending_approvals,
            users_with_entry_gaps=[
                replace(g, name=sub.employee(g.name)) for g in productivity.users_with_entry_gaps
            ],
        )

    @staticmethod
    def _contract(contract: ContractSummary, sub: _Substitution) -> ContractSummary:
        return replace(
            contract,
            project_name=sub.project(contract.project_name),
            scope=sub.free_text(contract.scope),
        )

    @staticmethod
    def _resource_planning(planning: ResourcePlanning, sub: _Substitution) -> ResourcePlanning:
        return ResourcePlanning(
            allocations=[
                replace(
                    a,
                    user_name=sub.employee(a.user_name),
                    project_name=sub.project(a.project_name),
                )
                for a in planning.allocations
            ],
            capacity_forecast=[DataAnonymizer._forecast(f, sub) for f in planning.capacity_forecast],
            unassigned_users=[
                replace(u, name=sub.employee(u.name)) for u in planning.unassigned_users
            ],
            understaffed_projects=[
                replace(p, project_name=sub.project(p.project_name))
                for p in planning.understaffed_projects
            ],
        )

    @staticmethod
    def _forecast(forecast: CapacityForecast, sub: _Substitution) -> CapacityForecast:
        return replace(
            forecast,
            overbooked_users=[sub.employee(n) for n in forecast.overbooked_users],
            underbooked_users=[sub.employee(n) for n in forecast.underbooked_users],
        )


# ------------------------------------------------------------------
# Name collection
# ------------------------------------------------------------------


def collect_employee_names(package: InsightDataPackage) -> set[str]:
    """Every distinct non-empty person name in an identity field."""
    workload = package.workload_metrics
    planning = package.resource_planning
    names: list[str] = []
    names.extend(m.name for m in package.team.members)
    names.extend(w.user_name for w in workload.weekly_hours_by_user)
    names.extend(o.name for o in workload.users_overworked)
    names.extend(u.name for u in workload.users_underutilized)
    names.extend(w.name for w in workload.weekend_workers)
    names.extend(v.user_name for v in package.vacations.upcoming)
    for project in package.projects.active:
        names.extend(m.name for m in project.team_members)
    names.extend(r.user_name for r in package.projects.single_person_risks)
    names.extend(g.name for g in package.productivity.users_with_entry_gaps)
    names.extend(a.user_name for a in planning.allocations)
    for forecast in planning.capacity_forecast:
        names.extend(forecast.overbooked_users)
        names.extend(forecast.underbooked_users)
    names.extend(u.name for u in planning.unassigned_users)
    return {n for n in names if n}


def collect_project_names(package: InsightDataPackage) -> set[str]:
    """Every distinct non-empty project name in an identity field."""
    planning = package.resource_planning
    names: list[str] = []
    names.extend(p.name for p in package.projects.active)
    names.extend(r.project_name for r in package.projects.single_person_risks)
    names.extend(c.project_name for c in package.contracts)
    names.extend(a.project_name for a in planning.allocations)
    names.extend(p.project_name for p in planning.understaffed_projects)
    return {n for n in names if n}
