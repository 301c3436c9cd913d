"""
Reminder rendering for SplitEase
Turns settlement results into the text sent to members
"""

from typing import Iterable, List, Sequence, Tuple

from config import APP_NAME
from constants import (ADMIN_PAYMENT_MESSAGES, ADMIN_SELF_MESSAGE, CHANNEL_BOTH,
                       CHANNEL_EMAIL, CHANNEL_WHATSAPP, EMAIL_BODY, EMAIL_SUBJECT,
                       PAYMENT_MESSAGES, REMINDER_CHANNELS, WHATSAPP_MESSAGE)
from data_models import (AdminPaybackResult, Participant, Reminder,
                         SettlementResult, SettlementStatus)
from errors import InvalidInputError
from settlement_calculator import members_who_owe
from utils import format_amount


def _template_for(status, templates: dict) -> str:
    # The status set is closed; anything else is a bug in the caller
    if not isinstance(status, SettlementStatus):
        raise TypeError(f"Unrecognized settlement status: {status!r}")
    return templates[status.value]


def generate_payment_message(result: SettlementResult) -> str:
    template = _template_for(result.status, PAYMENT_MESSAGES)
    return template.format(member=result.participant.name, amount=format_amount(result.pending))


def generate_all_payment_reminders(results: Iterable[SettlementResult]) -> List[str]:
    return [generate_payment_message(r) for r in results]


def generate_admin_payment_message(result: AdminPaybackResult, admin: Participant) -> str:
    if result.is_admin or result.participant == admin:
        return ADMIN_SELF_MESSAGE.format(admin=admin.name)

    template = _template_for(result.status, ADMIN_PAYMENT_MESSAGES)
    return template.format(
        member=result.participant.name,
        amount=format_amount(result.owes_to_admin),
        admin=admin.name,
    )


def render_email(result: SettlementResult, expense_title: str, group_name: str) -> Tuple[str, str]:
    """Subject and plain text body for an email reminder"""
    subject = EMAIL_SUBJECT.format(expense=expense_title)
    body = EMAIL_BODY.format(
        member=result.participant.name,
        expense=expense_title,
        group=group_name,
        amount=format_amount(result.pending),
        message=generate_payment_message(result),
        app=APP_NAME,
    )
    return subject, body


def render_whatsapp(result: SettlementResult, expense_title: str, group_name: str) -> str:
    return WHATSAPP_MESSAGE.format(
        member=result.participant.name,
        amount=format_amount(result.pending),
        expense=expense_title,
        group=group_name,
    )


def build_reminders(results: Sequence[SettlementResult], channel: str = CHANNEL_EMAIL,
                    expense_title: str = "", group_name: str = "") -> Tuple[List[Reminder], List[Participant]]:
    """
    Render reminders for every member who still owes money.

    Members without the contact detail the channel needs are returned in
    the second list instead of a reminder.
    """
    if channel not in REMINDER_CHANNELS:
        raise InvalidInputError(f"Unknown reminder channel: {channel}")

    reminders = []
    skipped = []

    for result in members_who_owe(results):
        participant = result.participant
        sent_any = False

        if channel in (CHANNEL_EMAIL, CHANNEL_BOTH) and participant.email:
            subject, body = render_email(result, expense_title, group_name)
            reminders.append(Reminder(participant, CHANNEL_EMAIL, subject, body))
            sent_any = True

        if channel in (CHANNEL_WHATSAPP, CHANNEL_BOTH) and participant.phone:
            message = render_whatsapp(result, expense_title, group_name)
            reminders.append(Reminder(participant, CHANNEL_WHATSAPP, EMAIL_SUBJECT.format(expense=expense_title), message))
            sent_any = True

        if not sent_any:
            skipped.append(participant)

    return reminders, skipped
