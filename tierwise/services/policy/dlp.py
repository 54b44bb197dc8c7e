from __future__ import annotations

from tierwise.domain.models import AccessTier, DlpControls, ExfiltrationVectors


NO_CONTROLS = DlpControls(
    clipboard_blocked=False,
    file_transfer_blocked=False,
    print_blocked=False,
    watermark_enabled=False,
    url_filtering_enabled=False,
)


def derive_dlp_controls(tier: AccessTier, vectors: ExfiltrationVectors) -> DlpControls:
    # Native access enforces nothing; isolated tiers block only the vectors the app exposes.
    if tier == "native":
        return NO_CONTROLS
    return DlpControls(
        clipboard_blocked=vectors.clipboard_paste,
        file_transfer_blocked=vectors.file_download or vectors.file_upload,
        print_blocked=vectors.print_capable,
        watermark_enabled=True,
        url_filtering_enabled=True,
    )
