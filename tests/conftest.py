import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from privacy_relay.insights.models import (
    Company,
    ContractSummary,
    EntryGap,
    InsightDataPackage,
    OverworkedUser,
    Productivity,
    ProjectHealth,
    ProjectMember,
    Projects,
    SinglePersonRisk,
    Team,
    TeamMember,
    UnderutilizedUser,
    UpcomingVacation,
    Vacations,
    WeeklyBillable,
    WeeklyUserHours,
    WorkloadMetrics,
)

CONTRACT_LINES = [
    "1. Acme Corp shall provide web development services to ClientX Website.",
    "2. The maximum budget is 50000 DKK and the fee cap is 900 DKK per hour.",
    "3. Invoices are paid to DK50 0040 0440 1162 43 within 30 days of delivery.",
    "4. Contact John Doe at john.doe@acme.example for questions about scope.",
    "5. The deadline for completion of all deliverables is 2026-06-30.",
]


def _pdf(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(40, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """A minimal single-page PDF with known text content."""
    return _pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """A two-page PDF with known text on each page."""
    return _pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A valid PDF with no text layer, like a scanned document."""
    return _pdf([[]])


@pytest.fixture()
def contract_pdf_bytes() -> bytes:
    """A one-page contract with names, PII and numbered clauses."""
    return _pdf([CONTRACT_LINES])


@pytest.fixture()
def insight_package() -> InsightDataPackage:
    """Two employees, two projects, one contract; mirrors the gatherer output."""
    return InsightDataPackage(
        company=Company(id="comp_123", name="Acme Corp", currency="USD"),
        team=Team(
            members=[
                TeamMember(
                    id="u1",
                    name="John Doe",
                    weekly_target=40,
                    vacation_days=25,
                    avg_hours_last_4_weeks=38,
                    utilization_percent=95,
                    total_hours_last_30_days=152,
                ),
                TeamMember(
                    id="u2",
                    name="Jane Smith",
                    weekly_target=37,
                    vacation_days=25,
                    avg_hours_last_4_weeks=30,
                    utilization_percent=81,
                    total_hours_last_30_days=120,
                ),
            ],
            total_capacity_hours_weekly=77,
        ),
        workload_metrics=WorkloadMetrics(
            weekly_hours_by_user=[
                WeeklyUserHours("u1", "John Doe", "2026-01-26", hours=42, weekly_target=40),
                WeeklyUserHours("u2", "Jane Smith", "2026-01-26", hours=30, weekly_target=37),
            ],
            users_overworked=[OverworkedUser("John Doe", avg_hours=42, weeks_over_40=3)],
            users_underutilized=[UnderutilizedUser("Jane Smith", avg_utilization=65)],
        ),
        vacations=Vacations(
            upcoming=[
                UpcomingVacation(
                    "Jane Smith", "2026-02-10", "2026-02-14", type="vacation", business_days=5
                )
            ],
        ),
        projects=Projects(
            active=[
                ProjectHealth(
                    id="p1",
                    name="ClientX Website",
                    budget_hours=500,
                    hours_used=425,
                    percent_used=85,
                    weekly_burn_rate=45,
                    team_members=[
                        ProjectMember("John Doe", hours=300, percent=71),
                        ProjectMember("Jane Smith", hours=125, percent=29),
                    ],
                ),
                ProjectHealth(
                    id="p2",
                    name="Internal Tool",
                    budget_hours=None,
                    hours_used=50,
                    percent_used=None,
                    weekly_burn_rate=12,
                    team_members=[ProjectMember("John Doe", hours=50, percent=100)],
                ),
            ],
            single_person_risks=[SinglePersonRisk("Internal Tool", "John Doe", percent_of_work=100)],
        ),
        productivity=Productivity(
            billable_percent_by_week=[WeeklyBillable("2026-01-26", billable_percent=78)],
            pending_approvals=3,
            users_with_entry_gaps=[EntryGap("Jane Smith", missed_days=3)],
        ),
        contracts=[
            ContractSummary(
                project_name="ClientX Website",
                max_hours=500,
                max_budget=50000,
                deadline="2026-06-30",
                scope="Build ClientX Website for Acme Corp with John Doe leading",
                hours_used=0,
            )
        ],
    )
