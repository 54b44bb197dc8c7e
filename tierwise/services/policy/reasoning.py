from __future__ import annotations

from tierwise.domain.models import AccessTier, DeviceTrust, SaaSApp, UserTier
from tierwise.services.policy.vectors import count_vectors


# Vector count at which an app is called out in secure-browser narratives.
_HIGH_VECTOR_COUNT = 4


def generate_reason(
    app: SaaSApp,
    tier: AccessTier,
    risk_score: int,
    user_tier: UserTier,
    device_trust: DeviceTrust,
) -> str:
    # Narrative for audit trails and reports; never fed back into decisions.
    vector_count = count_vectors(app.exfiltration_vectors)
    if tier == "native":
        return (
            f"Low risk profile (score: {risk_score}). {app.name} on managed device with minimal "
            "exfiltration vectors. Native access is appropriate."
        )
    if tier == "full_daas":
        if app.requires_local_os:
            return (
                f"{app.name} requires local OS integration. Full DaaS provides an isolated desktop "
                "environment with all necessary controls."
            )
        return (
            f"High risk (score: {risk_score}). {vector_count} active exfiltration vectors + "
            f"{app.data_classification} data classification + {device_trust} device. "
            "Full desktop isolation recommended."
        )

    clauses: list[str] = []
    if device_trust != "managed":
        clauses.append(f"{device_trust} device")
    if vector_count >= _HIGH_VECTOR_COUNT:
        clauses.append(f"{vector_count} exfiltration vectors")
    if app.data_classification in ("confidential", "restricted"):
        clauses.append(f"{app.data_classification} data")
    if user_tier != "employee":
        clauses.append(f"{user_tier} access")
    if not clauses:
        # Reached when a compliance regime alone lowered the intervention threshold.
        clauses.append("compliance obligations")
    return (
        f"Medium-high risk (score: {risk_score}). {', '.join(clauses)}. "
        "Secure Browser enforces clipboard/file/print DLP controls at $7/mo."
    )
