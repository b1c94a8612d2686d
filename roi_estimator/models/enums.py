from enum import Enum


class ComponentId(str, Enum):
    PRODUCTIVITY = "productivity"
    BREACH_RISK = "breach_risk"
    PASSWORD_RESET = "password_reset"
    INSURANCE = "insurance"
    HELP_DESK = "help_desk"


class ComponentCategory(str, Enum):
    COST_SAVINGS = "cost_savings"
    PRODUCTIVITY = "productivity"
    RISK_REDUCTION = "risk_reduction"


class PresetName(str, Enum):
    SMB = "smb"
    MID = "mid"
    ENTERPRISE = "enterprise"
