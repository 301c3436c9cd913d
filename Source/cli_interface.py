"""
CLI Interface module for SplitEase
Command-line interface for payment tracking and reminders
"""

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional

from config import APP_NAME, CURRENCY_SYMBOL, EXPORT_DIR
from constants import CHANNEL_EMAIL, PAYMENT_METHODS
from data_models import Participant, Payment, SettlementStatus
from errors import SplitEaseError
from payment_ledger import aggregate_contributions, contributions_frame
from reminders import (build_reminders, generate_admin_payment_message,
                       generate_payment_message)
from settlement_calculator import (calculate_admin_payback, calculate_pending,
                                   summarize)
from utils import (ensure_directory_exists, quantize_amount, sanitize_filename,
                   try_parse_decimal, validate_menu_choice)

STATUS_ICONS = {
    SettlementStatus.OWES: '🔴',
    SettlementStatus.RECEIVES: '🟢',
    SettlementStatus.SETTLED: '✅',
}


class SplitEaseCLI:
    """Command-line interface for SplitEase"""

    def __init__(self, total, participants: List[Participant], payments: Optional[List[Payment]] = None,
                 admin: Optional[Participant] = None, expense_title: str = "Expense", group_name: str = "Group"):
        self.total = total
        self.participants = participants
        self.payments = list(payments or [])
        self.admin = admin
        self.expense_title = expense_title
        self.group_name = group_name

    @property
    def contributions(self) -> Dict[Participant, Decimal]:
        return aggregate_contributions(self.participants, self.payments)

    def display_banner(self):
        """Display application banner"""
        print("\n" + "="*60)
        print(f"💰  {APP_NAME.upper()} - Payment Tracker")
        print(f"{self.expense_title} ({self.group_name})")
        print("="*60)

    def display_summary(self):
        """Display total, paid and outstanding amounts"""
        summary = summarize(self.total, self.contributions)

        print("\n" + "-"*50)
        print("📊 SUMMARY")
        print("-"*50)
        print(f"Total Amount:     {CURRENCY_SYMBOL}{quantize_amount(summary.total)}")
        print(f"Total Paid:       {CURRENCY_SYMBOL}{quantize_amount(summary.total_paid)}")
        print(f"Remaining:        {CURRENCY_SYMBOL}{quantize_amount(summary.remaining)}")
        print(f"Per Person:       {CURRENCY_SYMBOL}{quantize_amount(summary.share)}")
        print(f"Participants:     {summary.participant_count}")

    def display_balances(self):
        """Display per-participant balances"""
        contributions = self.contributions

        print("\n" + "="*50)
        print("💸 BALANCES")
        print("="*50)

        if self.admin is not None:
            for result in calculate_admin_payback(self.total, self.admin, contributions):
                paid = quantize_amount(contributions[result.participant])
                print(f"{STATUS_ICONS[result.status]} {result.participant.name:15} paid {paid:>9} : "
                      f"{generate_admin_payment_message(result, self.admin)}")
            return

        for result in calculate_pending(self.total, contributions):
            paid = quantize_amount(contributions[result.participant])
            print(f"{STATUS_ICONS[result.status]} {result.participant.name:15} paid {paid:>9} : "
                  f"{generate_payment_message(result)}")

    def display_reminders(self, channel: str = CHANNEL_EMAIL):
        """Render reminders for members who still owe"""
        results = calculate_pending(self.total, self.contributions)
        reminders, skipped = build_reminders(results, channel, self.expense_title, self.group_name)

        print("\n" + "="*50)
        print("🔔 REMINDERS")
        print("="*50)

        if not reminders and not skipped:
            print("\n🎉 All members are settled up - no reminders needed!")
            return reminders

        for reminder in reminders:
            print(f"\n[{reminder.channel}] {reminder.participant.name}: {reminder.subject}")
            print(reminder.message)

        for participant in skipped:
            print(f"⚠ No {channel} contact for {participant.name}, reminder not prepared")

        print(f"\n✓ Prepared {len(reminders)} reminder(s)")
        return reminders

    def record_payment(self, participant_id: str, amount, method: str = "cash", notes: str = ""):
        """Add a payment after checking it against the tracked members"""
        payment = Payment(participant_id=participant_id, amount=amount, method=method, notes=notes)
        aggregate_contributions(self.participants, self.payments + [payment])
        self.payments.append(payment)
        return payment

    def export_results(self, directory: str = EXPORT_DIR) -> Path:
        """Export complete results to JSON with all settlement details"""
        contributions = self.contributions
        summary = summarize(self.total, contributions)
        results = calculate_pending(self.total, contributions)

        data = {
            'export_info': {
                'timestamp': datetime.now().isoformat(),
                'version': '1.0',
                'expense': self.expense_title,
                'group': self.group_name,
            },
            'summary': {
                'total_amount': str(quantize_amount(summary.total)),
                'total_paid': str(quantize_amount(summary.total_paid)),
                'remaining': str(quantize_amount(summary.remaining)),
                'equal_share_per_person': str(quantize_amount(summary.share)),
                'people_count': summary.participant_count,
            },
            'contributions': [
                {**row, 'paid': str(quantize_amount(row['paid']))}
                for row in contributions_frame(contributions).to_dict(orient='records')
            ],
            'payments': [
                {'participant_id': p.participant_id, 'amount': str(p.amount), 'method': p.method, 'notes': p.notes}
                for p in self.payments
            ],
            'settlement_analysis': [
                {
                    'participant_id': r.participant.id,
                    'name': r.participant.name,
                    'pending': str(quantize_amount(r.pending)),
                    'status': r.status.value,
                    'message': generate_payment_message(r),
                }
                for r in results
            ],
        }

        if self.admin is not None:
            data['admin_payback'] = {
                'admin': self.admin.id,
                'balances': [
                    {
                        'participant_id': r.participant.id,
                        'owes_to_admin': str(quantize_amount(r.owes_to_admin)),
                        'status': r.status.value,
                        'message': generate_admin_payment_message(r, self.admin),
                    }
                    for r in calculate_admin_payback(self.total, self.admin, contributions)
                ],
            }

        filename = sanitize_filename(
            f"splitease_{self.expense_title}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        )
        path = ensure_directory_exists(directory) / filename

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        print(f"\n✅ Settlement data exported to {path}")
        return path

    def add_payment_interactive(self):
        """Prompt for a payment"""
        for i, participant in enumerate(self.participants, 1):
            print(f"{i}. {participant.name}")

        choice = validate_menu_choice(input("Paid by (number): "),
                                      [str(i) for i in range(1, len(self.participants) + 1)])
        if choice is None:
            print("Invalid selection")
            return

        amount = try_parse_decimal(input("Amount: "))
        if amount is None or amount <= 0:
            print("Invalid amount")
            return

        method = input(f"Method ({'/'.join(PAYMENT_METHODS)}) [cash]: ").strip() or "cash"
        if method not in PAYMENT_METHODS:
            print(f"⚠ Unknown method {method}, using 'other'")
            method = "other"

        notes = input("Notes: ").strip()
        participant = self.participants[int(choice) - 1]
        self.record_payment(participant.id, amount, method, notes)
        print(f"✓ Recorded {CURRENCY_SYMBOL}{quantize_amount(amount)} from {participant.name}")

    def run(self):
        """Run the CLI application"""
        self.display_banner()

        while True:
            print("\n" + "="*50)
            print("MAIN MENU")
            print("="*50)
            print("1. Record payment")
            print("2. Show summary")
            print("3. Show balances")
            print("4. Prepare reminders")
            print("5. Export results")
            print("6. Exit")

            choice = validate_menu_choice(input("\nChoice: "), ['1', '2', '3', '4', '5', '6']) or ''

            try:
                if choice == '1':
                    self.add_payment_interactive()
                elif choice == '2':
                    self.display_summary()
                elif choice == '3':
                    self.display_balances()
                elif choice == '4':
                    self.display_reminders()
                elif choice == '5':
                    self.export_results()
                elif choice == '6':
                    print(f"\n👋 Thank you for using {APP_NAME}!")
                    break
            except SplitEaseError as e:
                print(f"⚠ {e}")
