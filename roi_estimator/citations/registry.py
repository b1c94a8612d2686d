"""Read-only citation table backing every component and assumption."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Citation:
    """Research source shown next to a component or assumption."""

    key: str
    title: str
    source: str
    text: str
    link: Optional[str] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "key": self.key,
            "title": self.title,
            "source": self.source,
            "text": self.text,
            "link": self.link,
        }


_CITATIONS: dict[str, Citation] = {
    c.key: c
    for c in (
        Citation(
            key="password_reset",
            title="Cost Per Password Reset",
            source="Forrester Total Economic Impact Study",
            text=(
                "Forrester estimates a single password reset costs an organization "
                "$70 on average, factoring in help desk time, lost employee "
                "productivity and infrastructure overhead."
            ),
            link="https://www.forrester.com/report/The-Total-Economic-Impact-Of-Passwordless-Authentication/RES176865",
        ),
        Citation(
            key="productivity",
            title="Employee Productivity Savings",
            source="Beyond Identity - Taulia Case Study",
            text=(
                "Taulia estimated that each employee saves about 10 minutes per day "
                "by eliminating password typing and password issues. That is 3 hours "
                "per month per employee."
            ),
            link="https://www.beyondidentity.com/customer-stories/taulia-case-study",
        ),
        Citation(
            key="breach_cost",
            title="Average Cost of Credential-Related Breach",
            source="IBM Cost of a Data Breach Report 2024",
            text=(
                "The average cost of a data breach that originates from stolen or "
                "compromised credentials is $4.81 million, including incident "
                "response, legal fees, regulatory fines, notification and business "
                "disruption."
            ),
            link="https://www.ibm.com/reports/data-breach",
        ),
        Citation(
            key="insurance",
            title="Cyber Insurance Premium Impact",
            source="Push Security (Sept 2025) & CyberMaxx (Oct 2024)",
            text=(
                "Roughly 20-25% of cyber insurance premiums are dictated by the "
                "security controls in place. Implementing phishing-resistant MFA can "
                "reduce premiums by up to 25%."
            ),
            link="https://www.cybermaxx.com/resources/cyber-insurance-challenges-why-premiums-are-rising-and-coverage-is-harder-to-obtain/",
        ),
        Citation(
            key="help_desk",
            title="HDI Support Center Report",
            source="HDI Research",
            text=(
                "Password-related tickets account for 30-50% of all IT help desk "
                "volume. Eliminating these tickets frees up significant IT resources."
            ),
            link="https://www.thinkhdi.com/",
        ),
        Citation(
            key="ai_phishing",
            title="AI-Powered Phishing Threat",
            source="Dashlane Phishing 2.0 Report (2025) & Zscaler ThreatLabz 2025",
            text=(
                "Phishing volume has surged by 4,151% since late 2022, and "
                "AI-generated phishing emails now have a 54% success rate. "
                "Credential phishing accounts for 70% of email-based cyberattacks."
            ),
            link="https://www.dashlane.com/blog/security-leaders-ai-phishing",
        ),
    )
}


def get_citation(key: str) -> Optional[Citation]:
    """Look up a citation by key."""
    return _CITATIONS.get(key)


def get_all_citations() -> dict[str, Citation]:
    """Return the full citation table (read-only copy)."""
    return dict(_CITATIONS)
