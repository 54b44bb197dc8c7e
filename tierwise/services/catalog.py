from __future__ import annotations

from typing import Iterable

from tierwise.core.errors import UnknownApplicationError
from tierwise.domain.models import AppCategory, ExfiltrationVectors, SaaSApp


# Known SaaS applications and their exfiltration-capability profiles.
SAAS_APPS: tuple[SaaSApp, ...] = (
    SaaSApp(
        id="google-workspace",
        name="Google Workspace",
        category="Productivity",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("all",),
        browser_only=True,
        notes="Full suite with Drive, Docs, Sheets. All exfiltration vectors active.",
    ),
    SaaSApp(
        id="microsoft-365",
        name="Microsoft 365",
        category="Productivity",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="internal",
        requires_local_os=True,
        common_compliance=("SOC2", "HIPAA", "GDPR"),
        typical_users=("all",),
        browser_only=False,
        notes="Desktop apps require local OS integration. Web versions available.",
    ),
    SaaSApp(
        id="notion",
        name="Notion",
        category="Productivity",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering", "management"),
        browser_only=True,
        notes="Workspace export available. API access for integrations.",
    ),
    SaaSApp(
        id="slack",
        name="Slack",
        category="Communication",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("all",),
        browser_only=False,
        notes="File sharing and clipboard are primary exfiltration vectors.",
    ),
    SaaSApp(
        id="salesforce",
        name="Salesforce",
        category="CRM",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "PCI-DSS"),
        typical_users=("sales", "support", "management"),
        browser_only=True,
        notes="Major exfiltration target. Supports bulk record export, report downloads, and API extraction.",
    ),
    SaaSApp(
        id="hubspot",
        name="HubSpot",
        category="CRM",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("sales", "marketing"),
        browser_only=True,
        notes="Contact and deal data exportable. API access available.",
    ),
    SaaSApp(
        id="github",
        name="GitHub",
        category="Engineering",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering",),
        browser_only=False,
        notes="Source code is highest-value IP. Bulk clone and API extraction available.",
    ),
    SaaSApp(
        id="jira",
        name="Jira",
        category="Engineering",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering", "management"),
        browser_only=True,
        notes="Project data and issue tracking. CSV export available.",
    ),
    SaaSApp(
        id="confluence",
        name="Confluence",
        category="Engineering",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering", "management"),
        browser_only=True,
        notes="Wiki content with space export capability.",
    ),
    SaaSApp(
        id="aws-console",
        name="AWS Console",
        category="Engineering",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "PCI-DSS", "FedRAMP"),
        typical_users=("engineering", "devops"),
        browser_only=True,
        notes="Ultimate sensitive app. Full infrastructure access.",
    ),
    SaaSApp(
        id="quickbooks",
        name="QuickBooks",
        category="Finance",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "PCI-DSS"),
        typical_users=("finance",),
        browser_only=True,
        notes="Financial data with report export and print capabilities.",
    ),
    SaaSApp(
        id="netsuite",
        name="NetSuite",
        category="Finance",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "PCI-DSS"),
        typical_users=("finance", "management"),
        browser_only=True,
        notes="Enterprise ERP. All exfiltration vectors active. Critical financial data.",
    ),
    SaaSApp(
        id="expensify",
        name="Expensify",
        category="Finance",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=False,
            bulk_data_export=False,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("all",),
        browser_only=True,
        notes="Expense reports and receipt images. Download capability.",
    ),
    SaaSApp(
        id="workday",
        name="Workday",
        category="HR",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "GDPR"),
        typical_users=("hr", "management"),
        browser_only=True,
        notes="Contains PII, compensation, and benefits data. Report export available.",
    ),
    SaaSApp(
        id="bamboohr",
        name="BambooHR",
        category="HR",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("hr",),
        browser_only=True,
        notes="Employee PII and HR records. Report downloads available.",
    ),
    SaaSApp(
        id="adp",
        name="ADP",
        category="HR",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("hr", "finance"),
        browser_only=True,
        notes="Payroll and tax data. Highly sensitive.",
    ),
    SaaSApp(
        id="chatgpt",
        name="ChatGPT",
        category="AI Tools",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("all",),
        browser_only=True,
        notes="Unique risk: users paste company data INTO the AI. Data ingress is the primary concern.",
    ),
    SaaSApp(
        id="claude-ai",
        name="Claude",
        category="AI Tools",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("all",),
        browser_only=True,
        notes="Similar to ChatGPT. Data ingress risk via clipboard paste and file upload.",
    ),
    SaaSApp(
        id="github-copilot",
        name="GitHub Copilot",
        category="AI Tools",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=False,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=False,
            bulk_data_export=False,
        ),
        data_classification="restricted",
        requires_local_os=True,
        common_compliance=("SOC2",),
        typical_users=("engineering",),
        browser_only=False,
        notes="Proprietary code context sent to external service. Requires IDE integration.",
    ),
    SaaSApp(
        id="midjourney",
        name="Midjourney",
        category="AI Tools",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=False,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=False,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=(),
        typical_users=("design", "marketing"),
        browser_only=True,
        notes="Image generation. Lower risk for text data. Upload of company images possible.",
    ),
    SaaSApp(
        id="okta",
        name="Okta",
        category="Security",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "FedRAMP"),
        typical_users=("it", "security"),
        browser_only=True,
        notes="Identity provider. User directory and access logs are highly sensitive.",
    ),
    SaaSApp(
        id="crowdstrike",
        name="CrowdStrike",
        category="Security",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "FedRAMP"),
        typical_users=("security",),
        browser_only=False,
        notes="Endpoint security data. Threat intelligence and incident response.",
    ),
    SaaSApp(
        id="splunk",
        name="Splunk",
        category="Security",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "PCI-DSS"),
        typical_users=("security", "engineering"),
        browser_only=True,
        notes="SIEM platform. Contains security logs and incident data.",
    ),
    SaaSApp(
        id="figma",
        name="Figma",
        category="Design",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("design", "engineering"),
        browser_only=True,
        notes="Design files with export capability. Product IP in design files.",
    ),
    SaaSApp(
        id="canva",
        name="Canva",
        category="Design",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=False,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=(),
        typical_users=("marketing", "design"),
        browser_only=True,
        notes="Design tool with file download and sharing.",
    ),
    SaaSApp(
        id="adobe-cc",
        name="Adobe Creative Cloud",
        category="Design",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=False,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=True,
        common_compliance=("SOC2",),
        typical_users=("design",),
        browser_only=False,
        notes="Desktop applications require local OS. GPU acceleration beneficial.",
    ),
    SaaSApp(
        id="zoom",
        name="Zoom",
        category="Communication",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=False,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("all",),
        browser_only=False,
        notes="Video conferencing with recording and chat file sharing.",
    ),
    SaaSApp(
        id="teams",
        name="Microsoft Teams",
        category="Communication",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "GDPR"),
        typical_users=("all",),
        browser_only=False,
        notes="Integrated with M365. File sharing and chat export available.",
    ),
    SaaSApp(
        id="dropbox",
        name="Dropbox",
        category="Storage",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=False,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("all",),
        browser_only=False,
        notes="Cloud storage. Bulk download and sync are primary exfiltration vectors.",
    ),
    SaaSApp(
        id="box",
        name="Box",
        category="Storage",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=False,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "FedRAMP"),
        typical_users=("all",),
        browser_only=True,
        notes="Enterprise file storage with governance controls. Bulk download available.",
    ),
    SaaSApp(
        id="google-drive",
        name="Google Drive",
        category="Storage",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=False,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("all",),
        browser_only=True,
        notes="Cloud storage integrated with Google Workspace. Full download and sharing.",
    ),
    SaaSApp(
        id="tableau",
        name="Tableau",
        category="Analytics",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=True,
        common_compliance=("SOC2",),
        typical_users=("analytics", "management"),
        browser_only=False,
        notes="Data visualization. Desktop client needs local OS. Export to PDF/CSV.",
    ),
    SaaSApp(
        id="power-bi",
        name="Power BI",
        category="Analytics",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=True,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("analytics", "management"),
        browser_only=False,
        notes="Microsoft BI tool. Desktop version requires local OS. Data export available.",
    ),
    SaaSApp(
        id="looker",
        name="Looker",
        category="Analytics",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("analytics", "management"),
        browser_only=True,
        notes="Google Cloud BI. Dashboard export and scheduled reports.",
    ),
    SaaSApp(
        id="stripe",
        name="Stripe Dashboard",
        category="Finance",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "PCI-DSS"),
        typical_users=("finance", "engineering"),
        browser_only=True,
        notes="Payment data. PCI-DSS scope. API keys and transaction data.",
    ),
    SaaSApp(
        id="zendesk",
        name="Zendesk",
        category="CRM",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("support",),
        browser_only=True,
        notes="Customer support data. Ticket export and API access.",
    ),
    SaaSApp(
        id="intercom",
        name="Intercom",
        category="CRM",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("support", "sales"),
        browser_only=True,
        notes="Customer messaging platform. Conversation data export.",
    ),
    SaaSApp(
        id="datadog",
        name="Datadog",
        category="DevOps",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "PCI-DSS"),
        typical_users=("engineering", "devops"),
        browser_only=True,
        notes="Infrastructure monitoring. Contains system architecture details.",
    ),
    SaaSApp(
        id="pagerduty",
        name="PagerDuty",
        category="DevOps",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering", "devops"),
        browser_only=True,
        notes="Incident management. On-call schedules and incident data.",
    ),
    SaaSApp(
        id="terraform-cloud",
        name="Terraform Cloud",
        category="DevOps",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering", "devops"),
        browser_only=True,
        notes="Infrastructure-as-code. Contains cloud credentials and architecture.",
    ),
    SaaSApp(
        id="linear",
        name="Linear",
        category="Engineering",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering", "management"),
        browser_only=True,
        notes="Project management for engineering teams. Issue export available.",
    ),
    SaaSApp(
        id="gitlab",
        name="GitLab",
        category="Engineering",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering",),
        browser_only=False,
        notes="Source code and CI/CD pipelines. Full project export available.",
    ),
    SaaSApp(
        id="docusign",
        name="DocuSign",
        category="Legal",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=False,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("legal", "hr", "sales"),
        browser_only=True,
        notes="Contract and agreement documents. Download and bulk export.",
    ),
    SaaSApp(
        id="one-drive",
        name="OneDrive",
        category="Storage",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=False,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "GDPR"),
        typical_users=("all",),
        browser_only=False,
        notes="Microsoft cloud storage. Sync and bulk download available.",
    ),
    SaaSApp(
        id="asana",
        name="Asana",
        category="Productivity",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("management", "all"),
        browser_only=True,
        notes="Project management. Task and project export available.",
    ),
    SaaSApp(
        id="monday",
        name="Monday.com",
        category="Productivity",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("management", "all"),
        browser_only=True,
        notes="Work management platform. Board export and API access.",
    ),
    SaaSApp(
        id="snowflake",
        name="Snowflake",
        category="Analytics",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "PCI-DSS"),
        typical_users=("engineering", "analytics"),
        browser_only=True,
        notes="Data warehouse. Contains critical business data. Full SQL export.",
    ),
    SaaSApp(
        id="gusto",
        name="Gusto",
        category="HR",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("hr", "finance"),
        browser_only=True,
        notes="Payroll platform. SSN and compensation data.",
    ),
    SaaSApp(
        id="mailchimp",
        name="Mailchimp",
        category="Marketing",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("marketing",),
        browser_only=True,
        notes="Email marketing. Contact list export and campaign data.",
    ),
    SaaSApp(
        id="marketo",
        name="Marketo",
        category="Marketing",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("marketing",),
        browser_only=True,
        notes="Marketing automation. Lead database export available.",
    ),
    SaaSApp(
        id="twilio",
        name="Twilio Console",
        category="Engineering",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA"),
        typical_users=("engineering",),
        browser_only=True,
        notes="Communication APIs. Contains API keys and call/message logs.",
    ),
    SaaSApp(
        id="whatsapp-web",
        name="WhatsApp Web",
        category="Communication",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=False,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=(),
        typical_users=("all",),
        browser_only=True,
        notes="Messaging app. File sharing and clipboard copy. Shadow IT risk.",
    ),
    SaaSApp(
        id="trello",
        name="Trello",
        category="Productivity",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("management", "all"),
        browser_only=True,
        notes="Board-based project management. JSON export available.",
    ),
    SaaSApp(
        id="airtable",
        name="Airtable",
        category="Productivity",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("all",),
        browser_only=True,
        notes="Spreadsheet-database hybrid. CSV export and API access.",
    ),
    SaaSApp(
        id="1password",
        name="1Password",
        category="Security",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("all",),
        browser_only=False,
        notes="Password manager. Vault export is critical exfiltration risk.",
    ),
    SaaSApp(
        id="servicenow",
        name="ServiceNow",
        category="DevOps",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "HIPAA", "FedRAMP"),
        typical_users=("it", "support"),
        browser_only=True,
        notes="ITSM platform. Incident and CMDB data export.",
    ),
    SaaSApp(
        id="sap",
        name="SAP S/4HANA",
        category="Finance",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=True,
        common_compliance=("SOC2", "PCI-DSS", "GDPR"),
        typical_users=("finance", "management"),
        browser_only=False,
        notes="Enterprise ERP. All exfiltration vectors. Requires GUI client.",
    ),
    SaaSApp(
        id="freshdesk",
        name="Freshdesk",
        category="CRM",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("support",),
        browser_only=True,
        notes="Customer support. Ticket data and contact information.",
    ),
    SaaSApp(
        id="grammarly",
        name="Grammarly",
        category="AI Tools",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=False,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=False,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=(),
        typical_users=("all",),
        browser_only=True,
        notes="Writing assistant. Text content sent to external servers for analysis.",
    ),
    SaaSApp(
        id="epic-systems",
        name="Epic Systems",
        category="Healthcare",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=True,
        common_compliance=("HIPAA", "SOC2"),
        typical_users=("healthcare", "management"),
        browser_only=False,
        notes="Electronic Health Records. ePHI data. HIPAA-critical.",
    ),
    SaaSApp(
        id="cerner",
        name="Cerner (Oracle Health)",
        category="Healthcare",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="restricted",
        requires_local_os=True,
        common_compliance=("HIPAA", "SOC2"),
        typical_users=("healthcare",),
        browser_only=False,
        notes="Clinical EHR platform. Contains patient records and ePHI.",
    ),
    SaaSApp(
        id="vercel",
        name="Vercel",
        category="DevOps",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=False,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=False,
        ),
        data_classification="internal",
        requires_local_os=False,
        common_compliance=("SOC2",),
        typical_users=("engineering",),
        browser_only=True,
        notes="Deployment platform. Environment variables and deployment logs.",
    ),
    SaaSApp(
        id="shopify",
        name="Shopify Admin",
        category="Retail",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=True,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "PCI-DSS"),
        typical_users=("management", "marketing"),
        browser_only=True,
        notes="E-commerce admin. Customer data, orders, and payment info.",
    ),
    SaaSApp(
        id="amplitude",
        name="Amplitude",
        category="Analytics",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("analytics", "engineering"),
        browser_only=True,
        notes="Product analytics. User behavior data and cohort export.",
    ),
    SaaSApp(
        id="mixpanel",
        name="Mixpanel",
        category="Analytics",
        exfiltration_vectors=ExfiltrationVectors(
            clipboard_paste=True,
            file_download=True,
            file_upload=False,
            print_capable=True,
            screen_capturable=True,
            api_export=True,
            bulk_data_export=True,
        ),
        data_classification="confidential",
        requires_local_os=False,
        common_compliance=("SOC2", "GDPR"),
        typical_users=("analytics", "engineering"),
        browser_only=True,
        notes="Product analytics platform. Event data export via API.",
    ),
)

APP_CATEGORIES: tuple[AppCategory, ...] = (
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
)

_APPS_BY_ID: dict[str, SaaSApp] = {app.id: app for app in SAAS_APPS}


def list_apps() -> list[SaaSApp]:
    return list(SAAS_APPS)


def get_app(app_id: str) -> SaaSApp:
    app = _APPS_BY_ID.get(app_id)
    if app is None:
        raise UnknownApplicationError(app_id)
    return app


def get_apps_by_category(category: str) -> list[SaaSApp]:
    return [app for app in SAAS_APPS if app.category == category]


def resolve_apps(app_ids: Iterable[str]) -> list[SaaSApp]:
    # Preserve caller order and drop repeated ids so each app is evaluated once.
    return [get_app(app_id) for app_id in dict.fromkeys(app_ids)]
