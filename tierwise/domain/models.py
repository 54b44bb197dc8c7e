from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Literal


DataClassification = Literal["public", "internal", "confidential", "restricted"]
AppCategory = Literal[
    "Productivity",
    "CRM",
    "Engineering",
    "Finance",
    "HR",
    "Security",
    "Design",
    "Communication",
    "Storage",
    "Analytics",
    "AI Tools",
    "Marketing",
    "Legal",
    "Healthcare",
    "DevOps",
    "Retail",
]
UserTier = Literal["employee", "contractor", "vendor", "temp"]
DeviceTrust = Literal["managed", "unmanaged", "byod"]
LocationRisk = Literal["office", "remote", "highRiskGeo"]
Industry = Literal["Healthcare", "Finance", "Government", "Technology", "Education", "Retail", "Other"]
ComplianceFramework = Literal["SOC2", "HIPAA", "PCI-DSS", "FedRAMP", "GDPR"]
AccessTier = Literal["native", "secure_browser", "full_daas"]
WorkModel = Literal["office", "hybrid", "remote"]

ACCESS_TIERS: tuple[AccessTier, ...] = ("native", "secure_browser", "full_daas")
DATA_CLASSIFICATIONS: tuple[DataClassification, ...] = ("public", "internal", "confidential", "restricted")
COMPLIANCE_FRAMEWORKS: tuple[ComplianceFramework, ...] = ("SOC2", "HIPAA", "PCI-DSS", "FedRAMP", "GDPR")


@dataclass(frozen=True)
class ExfiltrationVectors:
    # Seven independent capability flags describing how data can leave an app.
    clipboard_paste: bool = False
    file_download: bool = False
    file_upload: bool = False
    print_capable: bool = False
    screen_capturable: bool = False
    api_export: bool = False
    bulk_data_export: bool = False

    def flags(self) -> dict[str, bool]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True)
class SaaSApp:
    id: str
    name: str
    category: AppCategory
    exfiltration_vectors: ExfiltrationVectors
    data_classification: DataClassification
    requires_local_os: bool = False
    # Descriptive metadata only; never read by scoring or tier resolution.
    common_compliance: tuple[str, ...] = ()
    typical_users: tuple[str, ...] = ()
    browser_only: bool = False
    notes: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OrganizationProfile:
    name: str
    industry: Industry
    workforce_size: int
    employee_percent: float
    contractor_percent: float
    vendor_percent: float
    compliance_frameworks: tuple[ComplianceFramework, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AccessScenario:
    managed_percent: float
    unmanaged_percent: float
    byod_percent: float
    work_model: WorkModel
    high_security_roles: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DlpControls:
    clipboard_blocked: bool
    file_transfer_blocked: bool
    print_blocked: bool
    watermark_enabled: bool
    url_filtering_enabled: bool


@dataclass(frozen=True)
class PolicyDecision:
    # Atomic engine output for one (app, user tier, device trust, location) combination.
    app: SaaSApp
    user_tier: UserTier
    device_trust: DeviceTrust
    location_risk: LocationRisk
    risk_score: int
    recommendation: AccessTier
    reason: str
    dlp_controls: DlpControls
    monthly_cost_per_user: int
    alternative_cost: int
    annual_savings_per_user: int
    compliance_gaps_closed: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RiskSummary:
    native_count: int = 0
    secure_browser_count: int = 0
    full_daas_count: int = 0
    total_exfiltration_vectors: int = 0
    # Number of distinct gap identifiers closed across all decisions.
    compliance_gaps_closed: int = 0


@dataclass(frozen=True)
class AnalysisResult:
    organization: OrganizationProfile
    scenario: AccessScenario
    selected_apps: tuple[SaaSApp, ...]
    decisions: tuple[PolicyDecision, ...]
    total_annual_cost: int
    blanket_vdi_cost: int
    total_annual_savings: int
    risk_summary: RiskSummary = field(default_factory=RiskSummary)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
