# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional


class Category(StrEnum):
    STATUS = "status"
    VERSION = "version"
    COMMENT = "comment"
    ATTACHMENT = "attachment"
    ACTION = "action"
    SYSTEM = "system"


class Severity(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class DeadlineStatus(StrEnum):
    FUTURE = "future"
    DUE_TODAY = "due_today"
    OVERDUE = "overdue"


ALL = "all"

# Human labels, also the collation key of the category sort
CATEGORY_LABELS: dict[Category, str] = {
    Category.STATUS: "Progress",
    Category.VERSION: "Document",
    Category.COMMENT: "Remark",
    Category.ATTACHMENT: "Attachment",
    Category.ACTION: "Completion",
    Category.SYSTEM: "Record",
}

SEVERITY_LABELS: dict[Severity, str] = {
    Severity.INFO: "Normal",
    Severity.SUCCESS: "Done",
    Severity.WARNING: "Attention",
    Severity.DANGER: "Urgent",
}

DEADLINE_STATUS_LABELS: dict[DeadlineStatus, str] = {
    DeadlineStatus.FUTURE: "FUTURE",
    DeadlineStatus.DUE_TODAY: "TODAY",
    DeadlineStatus.OVERDUE: "OVERDUE",
}

# Tokens emitted by the web front end and older backend payloads
CATEGORY_ALIASES: dict[str, Category] = {
    "versao": Category.VERSION,
    "comentario": Category.COMMENT,
    "arquivo": Category.ATTACHMENT,
    "acao": Category.ACTION,
    "sistema": Category.SYSTEM,
}

DEADLINE_STATUS_ALIASES: dict[str, DeadlineStatus] = {
    "futuro": DeadlineStatus.FUTURE,
    "hoje": DeadlineStatus.DUE_TODAY,
    "atrasado": DeadlineStatus.OVERDUE,
    "today": DeadlineStatus.DUE_TODAY,
}


def category_label(category: Category) -> str:
    return CATEGORY_LABELS[category]


def severity_rank(severity: Optional[Severity]) -> int:
    """DANGER(4) > WARNING(3) > INFO(2) > SUCCESS(1) > none(0)."""
    match severity:
        case Severity.DANGER:
            return 4
        case Severity.WARNING:
            return 3
        case Severity.INFO:
            return 2
        case Severity.SUCCESS:
            return 1
    return 0
