from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tierwise.core.config import get_settings
from tierwise.core.errors import InvalidInputError
from tierwise.domain.models import (
    AccessScenario,
    AppCategory,
    ComplianceFramework,
    DataClassification,
    ExfiltrationVectors,
    Industry,
    OrganizationProfile,
    SaaSApp,
    WorkModel,
)
from tierwise.services.catalog import resolve_apps


class OrganizationInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    industry: Industry
    # A zero workforce would make effective-user ratios undefined, so it is rejected here.
    workforce_size: int = Field(ge=10, le=100000)
    employee_percent: float = Field(ge=0, le=100)
    contractor_percent: float = Field(ge=0, le=100)
    vendor_percent: float = Field(ge=0, le=100)
    compliance_frameworks: list[ComplianceFramework] = Field(default_factory=list)

    def to_domain(self) -> OrganizationProfile:
        return OrganizationProfile(
            name=self.name,
            industry=self.industry,
            workforce_size=self.workforce_size,
            employee_percent=self.employee_percent,
            contractor_percent=self.contractor_percent,
            vendor_percent=self.vendor_percent,
            compliance_frameworks=tuple(dict.fromkeys(self.compliance_frameworks)),
        )


class ScenarioInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    managed_percent: float = Field(ge=0, le=100)
    unmanaged_percent: float = Field(ge=0, le=100)
    byod_percent: float = Field(ge=0, le=100)
    work_model: WorkModel
    high_security_roles: list[str] = Field(default_factory=list)

    def to_domain(self) -> AccessScenario:
        return AccessScenario(
            managed_percent=self.managed_percent,
            unmanaged_percent=self.unmanaged_percent,
            byod_percent=self.byod_percent,
            work_model=self.work_model,
            high_security_roles=tuple(self.high_security_roles),
        )


class ExfiltrationVectorsInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    clipboard_paste: bool = False
    file_download: bool = False
    file_upload: bool = False
    print_capable: bool = False
    screen_capturable: bool = False
    api_export: bool = False
    bulk_data_export: bool = False

    def to_domain(self) -> ExfiltrationVectors:
        return ExfiltrationVectors(**self.model_dump())


class SaaSAppInput(BaseModel):
    # Inline application definitions for apps missing from the built-in catalog.
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1, max_length=128)
    name: str = Field(min_length=1, max_length=256)
    category: AppCategory
    exfiltration_vectors: ExfiltrationVectorsInput = Field(default_factory=ExfiltrationVectorsInput)
    data_classification: DataClassification
    requires_local_os: bool = False
    common_compliance: list[str] = Field(default_factory=list)
    typical_users: list[str] = Field(default_factory=list)
    browser_only: bool = False
    notes: str = ""

    def to_domain(self) -> SaaSApp:
        return SaaSApp(
            id=self.id,
            name=self.name,
            category=self.category,
            exfiltration_vectors=self.exfiltration_vectors.to_domain(),
            data_classification=self.data_classification,
            requires_local_os=self.requires_local_os,
            common_compliance=tuple(self.common_compliance),
            typical_users=tuple(self.typical_users),
            browser_only=self.browser_only,
            notes=self.notes,
        )


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    organization: OrganizationInput
    scenario: ScenarioInput
    # Catalog ids are evaluated first, then inline apps, each in the given order.
    app_ids: list[str] = Field(default_factory=list)
    apps: list[SaaSAppInput] = Field(default_factory=list)


@dataclass(frozen=True)
class AnalysisInputs:
    organization: OrganizationProfile
    scenario: AccessScenario
    selected_apps: tuple[SaaSApp, ...]


def parse_analysis_request(payload: dict[str, Any]) -> AnalysisRequest:
    # Validate raw JSON-like payloads from scripts and other non-HTTP callers.
    try:
        return AnalysisRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidInputError(
            "Invalid analysis request",
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc


def build_analysis_inputs(request: AnalysisRequest) -> AnalysisInputs:
    """Convert a validated request into immutable domain inputs.

    Unknown catalog ids raise ``UnknownApplicationError``; an inline app that
    reuses an id already selected is rejected so decisions stay unambiguous.
    """
    selected = resolve_apps(request.app_ids)
    seen = {app.id for app in selected}
    for item in request.apps:
        if item.id in seen:
            raise InvalidInputError(
                f"Duplicate application id: {item.id}",
                errors=[{"loc": ["apps", item.id], "msg": "duplicate application id"}],
            )
        seen.add(item.id)
        selected.append(item.to_domain())

    max_apps = get_settings().max_selected_apps
    if len(selected) > max_apps:
        raise InvalidInputError(
            f"At most {max_apps} applications may be analysed per request",
            errors=[{"loc": ["app_ids"], "msg": f"more than {max_apps} applications"}],
        )
    return AnalysisInputs(
        organization=request.organization.to_domain(),
        scenario=request.scenario.to_domain(),
        selected_apps=tuple(selected),
    )
